import re

from blog.schemas.content import Page
from blog.services.markdown_renderer import (
    render_markdown,
    render_page_content,
    render_post_content,
)
from blog.services.toc import extract_toc
from tests.conftest import make_post


def fake_highlighter(code, language):
    return f'<div data-lang="{language}">{code.upper()}</div>\n'


def test_heading_gets_anchor_before_closing_tag():
    html = render_markdown("## Hello World\n")

    assert html == '<h2>Hello World<a id="hello-world"></a></h2>\n'


def test_heading_tag_itself_carries_no_id():
    html = render_markdown("# Title\n\n### Sub `code` part\n")

    assert "<h1>" in html
    assert "<h3>" in html
    assert '<h1 id=' not in html
    assert '<a id="sub-code-part"></a></h3>' in html


def test_fenced_code_block_is_replaced_by_highlighter_output():
    markdown = "Intro\n\n```python\nprint('hi')\n```\n\nOutro\n"

    html = render_markdown(markdown, highlighter=fake_highlighter)

    assert "<div data-lang=\"python\">PRINT('HI')\n</div>" in html
    assert "<pre>" not in html
    assert "<p>Intro</p>" in html
    assert "<p>Outro</p>" in html


def test_indented_code_block_has_empty_language():
    calls = []

    def recording(code, language):
        calls.append((code, language))
        return "<pre>x</pre>\n"

    render_markdown("Para\n\n    indented code\n", highlighter=recording)

    assert calls == [("indented code\n", "")]


def test_fence_info_string_uses_first_word():
    calls = []

    def recording(code, language):
        calls.append(language)
        return ""

    render_markdown("```rust ignore\nfn main() {}\n```\n", highlighter=recording)

    assert calls == ["rust"]


def test_real_highlighter_escapes_code():
    html = render_markdown("```unknownlang\n<script>alert(1)</script>\n```\n")

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_other_markdown_passes_through():
    html = render_markdown(
        "Some *emphasis* and a [link](https://example.com).\n\n"
        "| a | b |\n|---|---|\n| 1 | 2 |\n\n~~gone~~\n"
    )

    assert "<em>emphasis</em>" in html
    assert '<a href="https://example.com">link</a>' in html
    assert "<table>" in html
    assert "<s>gone</s>" in html


def test_anchor_ids_match_toc_ids():
    markdown = (
        "# API v2.0\n\n"
        "## Getting *Started* with `pip`\n\n"
        "## Under_score -- and   spaces!\n\n"
        "### Ünïcödé heading\n"
    )

    anchors = re.findall(r'<a id="([^"]+)"></a>', render_markdown(markdown))
    toc_ids = [entry.id for entry in extract_toc(markdown)]

    assert anchors == toc_ids
    assert toc_ids[0] == "api-v2-0"


def test_render_post_content_without_toc():
    post = make_post("plain", body="## Section\n\nText\n")

    rendered = render_post_content(post)

    assert rendered.toc is None
    assert '<a id="section"></a>' in rendered.html


def test_render_post_content_with_toc():
    post = make_post("with-toc", toc=True, body="# Title\n\n## Intro\n\n### Detail\n")

    rendered = render_post_content(post)

    assert rendered.toc is not None
    assert 'href="#intro"' in rendered.toc
    assert 'href="#detail"' in rendered.toc
    assert 'href="#title"' not in rendered.toc


def test_render_post_content_toc_enabled_but_no_headings():
    post = make_post("no-headings", toc=True, body="Just text.\n")

    assert render_post_content(post).toc == ""


def test_render_page_content():
    page = Page(
        title="About",
        slug="about",
        template="page",
        raw_content="## Who\n\nMe.\n",
        file_path="pages/about.md",
    )

    rendered = render_page_content(page)

    assert '<a id="who"></a>' in rendered.html
    assert rendered.toc is None
