import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from blog import dependencies as deps
from blog.services.image_service import get_image_from_disk
from blog.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/images/{image_path:path}")
def get_image(
    image_path: str,
    current_settings: Settings = Depends(deps.get_app_settings),
):
    """
    Serve images from the content directory
    """
    image_data, content_type = get_image_from_disk(
        image_path, current_settings.images_path
    )

    if not image_data or not content_type:
        raise HTTPException(status_code=404, detail="Image not found")

    headers = {
        "Content-Length": str(len(image_data)),
        "Accept-Ranges": "bytes",
    }

    return Response(content=image_data, media_type=content_type, headers=headers)
