import textwrap
from pathlib import Path

import pytest

from blog.schemas.content import Frontmatter, Post
from blog.services.content_store import Snapshot


def write_post(content_dir: Path, filename: str, content: str) -> Path:
    posts_dir = content_dir / "posts"
    posts_dir.mkdir(parents=True, exist_ok=True)
    path = posts_dir / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


def write_page(content_dir: Path, filename: str, content: str) -> Path:
    pages_dir = content_dir / "pages"
    pages_dir.mkdir(parents=True, exist_ok=True)
    path = pages_dir / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


def make_post(
    slug: str,
    *,
    date: str = "2024-01-01",
    tags=(),
    draft: bool = False,
    body: str = "Body text.",
    **meta,
) -> Post:
    frontmatter = Frontmatter(
        title=meta.pop("title", slug.replace("-", " ").title()),
        slug=slug,
        date=date,
        tags=tags,
        draft=draft,
        **meta,
    )
    return Post(frontmatter=frontmatter, raw_content=body, file_path=f"posts/{slug}.md")


class FakeStore:
    """
    Minimal content store stand-in holding a fixed snapshot.
    """

    def __init__(self, posts=(), reload_result: bool = True):
        self.snapshot = Snapshot(posts)
        self.reload_result = reload_result
        self.reload_calls = 0

    def read(self):
        return self.snapshot

    def reload(self):
        self.reload_calls += 1
        return self.reload_result


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None, get_post_error=None):
        self._list_posts_return = list_posts_return
        self._get_post_return = get_post_return
        self._get_post_error = get_post_error
        self.list_calls = []

    def list_posts(self, page=1, author=None, category=None):
        self.list_calls.append((page, author, category))
        return self._list_posts_return

    def get_index(self):
        return {"posts": []}

    def get_post(self, slug: str):
        if self._get_post_error is not None:
            raise self._get_post_error
        return self._get_post_return


@pytest.fixture
def content_dir(tmp_path) -> Path:
    root = tmp_path / "content"
    (root / "posts").mkdir(parents=True)
    (root / "pages").mkdir()
    return root

