import datetime
import logging
import threading
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from blog.errors import ContentError
from blog.schemas.content import Post
from blog.services.content_loader import load_all_posts

logger = logging.getLogger(__name__)


class Snapshot:
    """Immutable, point-in-time view of the post collection."""

    __slots__ = ("_posts", "_loaded_at")

    def __init__(self, posts: Iterable[Post] = (), loaded_at: Optional[datetime.datetime] = None):
        self._posts: Tuple[Post, ...] = tuple(posts)
        self._loaded_at = loaded_at or datetime.datetime.now(datetime.timezone.utc)

    @property
    def posts(self) -> Tuple[Post, ...]:
        return self._posts

    @property
    def loaded_at(self) -> datetime.datetime:
        return self._loaded_at

    def __iter__(self) -> Iterator[Post]:
        return iter(self._posts)

    def __len__(self) -> int:
        return len(self._posts)

    def __getitem__(self, index):
        return self._posts[index]

    def get(self, slug: str) -> Optional[Post]:
        return next((post for post in self._posts if post.slug == slug), None)

    def by_author(self, author: str) -> "Snapshot":
        return Snapshot((post for post in self._posts if post.author == author), self._loaded_at)

    def by_category(self, category: str) -> "Snapshot":
        return Snapshot(
            (post for post in self._posts if post.frontmatter.category == category),
            self._loaded_at,
        )


class ContentStore:
    """
    Owns the snapshot served to readers.

    Readers call read() and keep whatever snapshot they got for as long as they
    need it. reload() builds a complete new snapshot off to the side and
    publishes it with one reference swap; if loading fails the current
    snapshot keeps serving.
    """

    def __init__(
        self,
        content_path: Path,
        enable_drafts: bool = False,
        loader: Callable[[Path], List[Post]] = load_all_posts,
    ):
        self.content_path = Path(content_path)
        self.enable_drafts = enable_drafts
        self._loader = loader
        self._reload_lock = threading.Lock()
        self._snapshot = Snapshot()

    def read(self) -> Snapshot:
        return self._snapshot

    def reload(self) -> bool:
        with self._reload_lock:
            try:
                all_posts = self._loader(self.content_path)
            except (ContentError, OSError) as e:
                logger.error(f"Failed to reload post cache, keeping previous snapshot: {e}")
                return False

            posts = [p for p in all_posts if self.enable_drafts or not p.is_draft]
            self._snapshot = Snapshot(posts)
            logger.info(f"Loaded {len(posts)} posts into cache")
            return True
