from fastapi import FastAPI
from fastapi.testclient import TestClient

from blog import dependencies as deps
from blog.routers import pages
from blog.settings import Settings
from tests.conftest import write_page


def make_client(content_dir):
    app = FastAPI()
    app.dependency_overrides[deps.get_app_settings] = lambda: Settings(
        BLOG_CONTENT_PATH=content_dir
    )
    app.include_router(pages.router)
    return TestClient(app)


def test_get_page_renders_markdown(content_dir):
    write_page(
        content_dir,
        "about.md",
        """
        ---
        title: About
        slug: about
        ---
        ## Who am I

        Someone.
        """,
    )

    res = make_client(content_dir).get("/pages/about")

    assert res.status_code == 200
    body = res.json()
    assert body["title"] == "About"
    assert body["template"] == "page"
    assert '<a id="who-am-i"></a>' in body["content"]


def test_get_page_missing_returns_404(content_dir):
    assert make_client(content_dir).get("/pages/missing").status_code == 404


def test_get_page_rejects_traversal(content_dir):
    assert make_client(content_dir).get("/pages/..secret").status_code == 400
    assert make_client(content_dir).get("/pages/a%5Cb").status_code == 400


def test_get_page_with_broken_frontmatter_returns_500(content_dir):
    write_page(content_dir, "broken.md", "---\ntitle: [oops\n---\n")

    assert make_client(content_dir).get("/pages/broken").status_code == 500
