import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI

from blog import dependencies as deps
from blog.routers import admin, images, pages, posts
from blog.security import get_api_key
from blog.services.content_reloader import (
    install_sighup_handler,
    start_reloader,
    stop_reloader,
)
from blog.services.content_store import ContentStore
from blog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog API", description="Markdown blog content service")


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = deps.get_content_store()
    if not store.reload():
        logger.warning(f"Starting with an empty post cache ({settings.BLOG_CONTENT_PATH})")

    install_sighup_handler()
    reloader_thread = start_reloader(store, settings.BLOG_RELOAD_INTERVAL)
    logger.info("Content reloader started in background thread")

    try:
        yield
    finally:
        stop_reloader()
        reloader_thread.join(timeout=10)
        logger.info("Content reloader exited gracefully")


app.router.lifespan_context = lifespan

app.include_router(posts.router)
app.include_router(pages.router)
app.include_router(images.router)
app.include_router(admin.router, dependencies=[Depends(get_api_key)])


@app.get("/health")
def health(store: ContentStore = Depends(deps.get_content_store)):
    return {"status": "ok", "posts": len(store.read())}


def run():
    uvicorn.run(app, host=settings.BLOG_HOST, port=settings.BLOG_PORT)


if __name__ == "__main__":
    run()
