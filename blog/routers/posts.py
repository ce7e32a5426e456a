import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from blog import dependencies as deps
from blog.errors import InvalidPathError
from blog.schemas.blog import IndexResponse, PostDetail, PostList
from blog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=IndexResponse)
def index(service: PostsService = Depends(deps.get_posts_service)):
    """Recent posts with the newest one rendered as the featured post."""
    try:
        return service.get_index()
    except Exception as e:
        logger.error(f"Unexpected error rendering index: {e}")
        raise HTTPException(status_code=500, detail="Failed to render index")


@router.get("/posts", response_model=PostList)
def list_posts(
    page: int = Query(1, ge=1),
    author: Optional[str] = None,
    category: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
):
    """List post summaries, paginated and optionally filtered."""
    return _list_posts(service, page, author, category)


@router.get("/posts/page/{page}", response_model=PostList)
def list_posts_page(
    page: int,
    author: Optional[str] = None,
    category: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
):
    return _list_posts(service, page, author, category)


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single rendered post by slug."""
    try:
        post = service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except InvalidPathError:
        raise HTTPException(status_code=400, detail="Invalid post slug")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render post")


def _list_posts(service: PostsService, page, author, category) -> PostList:
    try:
        return service.list_posts(page=page, author=author, category=category)
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
