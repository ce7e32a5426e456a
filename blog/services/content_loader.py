import logging
from pathlib import Path
from typing import List, Tuple, Type, TypeVar

import frontmatter
import yaml
from pydantic import BaseModel, ValidationError

from blog.errors import (
    ContentIOError,
    FrontmatterParseError,
    InvalidPathError,
    MissingFieldError,
    PageNotFoundError,
    PostNotFoundError,
)
from blog.schemas.content import Frontmatter, Page, PageFrontmatter, Post

logger = logging.getLogger(__name__)

CONTENT_EXTENSION = ".md"
POSTS_DIR = "posts"
PAGES_DIR = "pages"

M = TypeVar("M", bound=BaseModel)


def load_post(path: Path) -> Post:
    """Parse a single post file into a Post."""
    path = Path(path)
    meta, body = _parse_document(path, Frontmatter)
    return Post(frontmatter=meta, raw_content=body, file_path=str(path))


def load_all_posts(content_dir: Path) -> List[Post]:
    """
    Load every post directly under `<content_dir>/posts`.

    Documents that fail to load are logged and left out, so one broken file
    never takes the whole listing down. A missing posts directory is an error.
    Posts come back newest first; equal dates are ordered by slug.
    """
    posts_dir = Path(content_dir) / POSTS_DIR
    try:
        entries = sorted(posts_dir.iterdir())
    except OSError as e:
        raise ContentIOError(posts_dir, e) from e

    posts = []
    for path in entries:
        if path.suffix != CONTENT_EXTENSION or not path.is_file():
            continue
        try:
            posts.append(load_post(path))
        except (ContentIOError, FrontmatterParseError, MissingFieldError) as e:
            logger.warning(f"Failed to parse post {path}: {e}")

    posts.sort(key=lambda p: p.slug)
    posts.sort(key=lambda p: p.date, reverse=True)
    logger.debug(f"Loaded {len(posts)} posts from {posts_dir}")
    return posts


def load_post_by_slug(slug: str, content_dir: Path) -> Post:
    validate_slug(slug)
    for post in load_all_posts(content_dir):
        if post.slug == slug:
            return post
    raise PostNotFoundError(slug)


def load_page(slug: str, content_dir: Path) -> Page:
    """Load `<content_dir>/pages/<slug>.md`, rejecting unsafe slugs up front."""
    validate_slug(slug)

    page_path = Path(content_dir) / PAGES_DIR / f"{slug}{CONTENT_EXTENSION}"
    if not page_path.is_file():
        raise PageNotFoundError(slug)

    meta, body = _parse_document(page_path, PageFrontmatter)
    return Page(
        title=meta.title,
        slug=meta.slug,
        template=meta.template,
        raw_content=body,
        file_path=str(page_path),
    )


def validate_slug(slug: str) -> str:
    """Reject slugs that could escape the content directory."""
    if not slug or ".." in slug or "/" in slug or "\\" in slug:
        raise InvalidPathError(slug)
    return slug


def _parse_document(path: Path, model: Type[M]) -> Tuple[M, str]:
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentIOError(path, e) from e

    if not frontmatter.checks(text):
        raise MissingFieldError(path, "frontmatter")

    try:
        parsed = frontmatter.loads(text)
    except (yaml.YAMLError, ValueError, TypeError) as e:
        raise FrontmatterParseError(path, e) from e

    try:
        meta = model.model_validate(parsed.metadata or {})
    except ValidationError as e:
        raise FrontmatterParseError(path, e) from e

    return meta, parsed.content
