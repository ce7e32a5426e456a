import logging
import shutil
import threading

from blog.errors import ContentIOError
from blog.services.content_store import ContentStore, Snapshot
from tests.conftest import make_post, write_post


def _write(content_dir, slug, date="2024-01-01", draft=False):
    write_post(
        content_dir,
        f"{slug}.md",
        f"""
        ---
        title: {slug}
        slug: {slug}
        date: {date}
        draft: {str(draft).lower()}
        ---
        Body of {slug}
        """,
    )


def test_store_starts_empty(content_dir):
    store = ContentStore(content_dir)

    assert len(store.read()) == 0


def test_reload_loads_posts_and_filters_drafts(content_dir):
    _write(content_dir, "published")
    _write(content_dir, "secret", draft=True)

    store = ContentStore(content_dir, enable_drafts=False)

    assert store.reload() is True
    assert [p.slug for p in store.read()] == ["published"]


def test_reload_keeps_drafts_when_enabled(content_dir):
    _write(content_dir, "published", date="2024-01-02")
    _write(content_dir, "secret", draft=True)

    store = ContentStore(content_dir, enable_drafts=True)
    store.reload()

    assert [p.slug for p in store.read()] == ["published", "secret"]


def test_readers_keep_their_snapshot_across_reload(content_dir):
    _write(content_dir, "first")
    store = ContentStore(content_dir)
    store.reload()

    held = store.read()
    _write(content_dir, "second", date="2024-02-01")
    store.reload()

    assert [p.slug for p in held] == ["first"]
    assert [p.slug for p in store.read()] == ["second", "first"]


def test_failed_reload_keeps_previous_snapshot(content_dir, caplog):
    _write(content_dir, "survivor")
    store = ContentStore(content_dir)
    store.reload()
    before = store.read()

    shutil.rmtree(content_dir)
    with caplog.at_level(logging.ERROR):
        assert store.reload() is False

    assert store.read() is before
    assert store.read().get("survivor") is not None
    assert "keeping previous snapshot" in caplog.text


def test_reload_with_injected_loader_error():
    def failing_loader(path):
        raise ContentIOError(path, "disk on fire")

    store = ContentStore("unused", loader=failing_loader)

    assert store.reload() is False
    assert len(store.read()) == 0


def test_concurrent_readers_see_whole_snapshots():
    generations = [
        [make_post(f"gen{g}-post{i}") for i in range(50)] for g in range(20)
    ]
    counter = iter(range(len(generations)))

    def loader(path):
        return generations[next(counter) % len(generations)]

    store = ContentStore("unused", loader=loader)
    store.reload()

    errors = []
    stop = threading.Event()

    def reader():
        while not stop.is_set():
            snapshot = store.read()
            prefixes = {p.slug.split("-")[0] for p in snapshot}
            if len(prefixes) != 1 or len(snapshot) != 50:
                errors.append(prefixes)

    readers = [threading.Thread(target=reader) for _ in range(4)]
    for t in readers:
        t.start()
    for _ in range(len(generations) - 1):
        store.reload()
    stop.set()
    for t in readers:
        t.join(timeout=5)

    assert errors == []
    assert store.read()[0].slug.startswith(f"gen{len(generations) - 1}-")


def test_snapshot_lookups():
    posts = [
        make_post("a", author="Ada", category="notes"),
        make_post("b", author="Bob", category="notes"),
        make_post("c", author="Ada"),
    ]
    snapshot = Snapshot(posts)

    assert snapshot.get("b").slug == "b"
    assert snapshot.get("missing") is None
    assert [p.slug for p in snapshot.by_author("Ada")] == ["a", "c"]
    assert [p.slug for p in snapshot.by_category("notes")] == ["a", "b"]
    assert [p.slug for p in snapshot.by_author("Ada").by_category("notes")] == ["a"]
    assert snapshot.by_author("Ada").loaded_at == snapshot.loaded_at
    assert isinstance(snapshot.by_category("notes"), Snapshot)
    assert snapshot.posts == tuple(posts)
    assert snapshot.loaded_at is not None
