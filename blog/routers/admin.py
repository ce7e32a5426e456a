import logging

from fastapi import APIRouter, Depends

from blog import dependencies as deps
from blog.services.content_reloader import request_reload
from blog.services.content_store import ContentStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")


@router.post("/reload", status_code=202)
def reload_content(store: ContentStore = Depends(deps.get_content_store)):
    """Schedule a background rebuild of the post cache."""
    request_reload()
    logger.info("Post cache reload requested via admin API")
    return {"status": "scheduled", "posts": len(store.read())}
