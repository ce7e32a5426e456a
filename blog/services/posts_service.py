import datetime
import logging
import math
from typing import Optional

from blog.schemas.blog import (
    IndexResponse,
    PostDetail,
    PostList,
    PostSummary,
    RelatedPostSummary,
)
from blog.schemas.content import Post
from blog.services.content_loader import validate_slug
from blog.services.content_store import ContentStore
from blog.services.markdown_renderer import render_post_content
from blog.services.related import resolve_related, similar_by_tags, unresolved_related

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(
        self,
        store: ContentStore,
        posts_per_page: int = 10,
        similar_limit: int = 3,
        render=render_post_content,
    ):
        self.store = store
        self.posts_per_page = max(posts_per_page, 1)
        self.similar_limit = similar_limit
        self.render = render

    def list_posts(
        self,
        page: int = 1,
        author: Optional[str] = None,
        category: Optional[str] = None,
    ) -> PostList:
        snapshot = self.store.read()
        if author:
            snapshot = snapshot.by_author(author)
        if category:
            snapshot = snapshot.by_category(category)
        posts = list(snapshot)

        page = max(page, 1)
        total_pages = math.ceil(len(posts) / self.posts_per_page)
        start = (page - 1) * self.posts_per_page
        window = posts[start : start + self.posts_per_page]

        return PostList(
            posts=[to_summary(p) for p in window],
            page=page,
            totalPages=total_pages,
            hasNext=page < total_pages,
            hasPrev=page > 1,
            author=author,
            category=category,
        )

    def get_index(self) -> IndexResponse:
        posts = list(self.store.read())[: self.posts_per_page]
        if not posts:
            return IndexResponse()

        featured = posts[0]
        return IndexResponse(
            posts=[to_summary(p) for p in posts],
            featuredPost=to_summary(featured),
            featuredContent=self.render(featured).html,
        )

    def get_post(self, slug: str) -> Optional[PostDetail]:
        validate_slug(slug)

        # Hold one snapshot for the whole request so related lookups agree
        snapshot = self.store.read()
        post = snapshot.get(slug)
        if post is None:
            return None

        rendered = self.render(post)

        missing = unresolved_related(post, snapshot)
        if missing:
            logger.debug(f"Unresolved related posts for {slug}: {missing}")

        explicit = [
            RelatedPostSummary(post=to_summary(r.post), label=r.label)
            for r in resolve_related(post, snapshot)
        ]
        similar = [
            to_summary(p) for p in similar_by_tags(post, snapshot, self.similar_limit)
        ]

        return PostDetail(
            **to_summary(post).model_dump(),
            template=post.frontmatter.template,
            content=rendered.html,
            toc=rendered.toc,
            explicitRelated=explicit,
            similarByTags=similar,
        )


def to_summary(post: Post) -> PostSummary:
    meta = post.frontmatter
    return PostSummary(
        slug=meta.slug,
        title=meta.title,
        date=_convert_date(meta.date),
        updated=_convert_date(meta.updated),
        author=meta.author,
        description=meta.description,
        tags=list(meta.tags),
        category=meta.category,
        featuredImage=meta.featured_image,
        readingTime=post.reading_time,
        draft=meta.draft,
    )


def _convert_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value
