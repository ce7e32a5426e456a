from fastapi import Depends

from blog.services.content_store import ContentStore
from blog.services.posts_service import PostsService
from blog.settings import Settings, settings

_store = ContentStore(settings.BLOG_CONTENT_PATH, enable_drafts=settings.BLOG_ENABLE_DRAFTS)


def get_app_settings() -> Settings:
    return settings


def get_content_store() -> ContentStore:
    return _store


def get_posts_service(
    store: ContentStore = Depends(get_content_store),
    current_settings: Settings = Depends(get_app_settings),
):
    return PostsService(
        store=store,
        posts_per_page=current_settings.BLOG_POSTS_PER_PAGE,
        similar_limit=current_settings.BLOG_SIMILAR_POSTS_LIMIT,
    )
