import logging

from fastapi import APIRouter, Depends, HTTPException

from blog import dependencies as deps
from blog.errors import InvalidPathError, NotFoundError
from blog.schemas.blog import PageDetail
from blog.services.content_loader import load_page
from blog.services.markdown_renderer import render_page_content
from blog.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/pages/{slug}", response_model=PageDetail)
def get_page(
    slug: str,
    current_settings: Settings = Depends(deps.get_app_settings),
):
    """Static pages are read from disk on every request; they are not cached."""
    try:
        page = load_page(slug, current_settings.BLOG_CONTENT_PATH)
    except InvalidPathError:
        raise HTTPException(status_code=400, detail="Invalid page slug")
    except NotFoundError as e:
        logger.warning(f"Page not found: {slug} - {e}")
        raise HTTPException(status_code=404, detail="Page not found")
    except Exception as e:
        logger.error(f"Failed to load page {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to load page")

    rendered = render_page_content(page)
    return PageDetail(
        slug=page.slug,
        title=page.title,
        template=page.template,
        content=rendered.html,
    )
