import logging
import sys

from blog.errors import ContentError
from blog.services.content_loader import load_all_posts, load_post_by_slug
from blog.settings import Settings, settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def check_content(config: Settings, slug=None) -> int:
    """Load the corpus (or one post by slug) and report what parsed. Returns an exit code."""
    if slug is not None:
        try:
            post = load_post_by_slug(slug, config.BLOG_CONTENT_PATH)
        except ContentError as e:
            logger.error(f"Content check failed: {e}")
            return 1
        logger.info(f"{post.slug}: '{post.title}' ({post.reading_time} read)")
        return 0

    try:
        posts = load_all_posts(config.BLOG_CONTENT_PATH)
    except ContentError as e:
        logger.error(f"Content check failed: {e}")
        return 1

    source_files = list(config.posts_path.glob("*.md"))
    drafts = [p for p in posts if p.is_draft]
    failed = len(source_files) - len(posts)

    logger.info(
        f"{len(posts)} posts loaded ({len(drafts)} drafts), {failed} failed to parse"
    )
    return 0


if __name__ == "__main__":
    sys.exit(check_content(settings, sys.argv[1] if len(sys.argv) > 1 else None))
