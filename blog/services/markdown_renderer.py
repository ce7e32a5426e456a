import html
from enum import Enum
from typing import Iterable, Iterator, List, Optional

from markdown_it.token import Token

from blog.schemas.content import Page, Post, RenderedContent
from blog.services.highlighter import highlight_code
from blog.services.markdown_parser import MD
from blog.services.toc import extract_toc, render_toc


class _State(Enum):
    NORMAL = "normal"
    IN_CODE_BLOCK = "in_code_block"


class HighlightingRewriter:
    """
    Single pass over the markdown-it token stream.

    Code blocks are swapped for highlighted HTML, and the id the parser put on
    each heading is moved off the heading tag into an <a id> anchor placed
    right before the closing tag.
    """

    def __init__(self, highlighter=highlight_code):
        self.highlighter = highlighter
        self.state = _State.NORMAL
        self.code_lang = ""
        self.code_buffer: List[str] = []
        self.heading_id: Optional[str] = None

    def rewrite(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.type in ("fence", "code_block"):
                # markdown-it hands over the whole block as one token
                self._start_code_block(token)
                self.code_buffer.append(token.content)
                yield self._end_code_block(token)
            elif token.type == "heading_open":
                self.heading_id = token.attrGet("id")
                attrs = {k: v for k, v in token.attrs.items() if k != "id"}
                yield token.copy(attrs=attrs)
            elif token.type == "heading_close":
                if self.heading_id:
                    anchor = f'<a id="{html.escape(str(self.heading_id), quote=True)}"></a>'
                    yield Token("html_block", "", 0, content=anchor, block=True)
                    self.heading_id = None
                yield token
            else:
                yield token

    def _start_code_block(self, token: Token) -> None:
        self.state = _State.IN_CODE_BLOCK
        info = token.info.strip() if token.type == "fence" else ""
        self.code_lang = info.split()[0] if info else ""
        self.code_buffer = []

    def _end_code_block(self, token: Token) -> Token:
        code = "".join(self.code_buffer)
        highlighted = self.highlighter(code, self.code_lang)
        self.state = _State.NORMAL
        self.code_lang = ""
        self.code_buffer = []
        return Token(
            "html_block", "", 0, content=highlighted, map=token.map, block=True
        )


def render_markdown(content: str, highlighter=highlight_code) -> str:
    """Render markdown to HTML with highlighted code and anchored headings."""
    env: dict = {}
    tokens = MD.parse(content, env)
    rewritten = list(HighlightingRewriter(highlighter).rewrite(tokens))
    return MD.renderer.render(rewritten, MD.options, env)


def render_post_content(post: Post) -> RenderedContent:
    content = post.raw_content

    toc = None
    if post.frontmatter.toc:
        toc = render_toc(extract_toc(content))

    return RenderedContent(html=render_markdown(content), toc=toc)


def render_page_content(page: Page) -> RenderedContent:
    return RenderedContent(html=render_markdown(page.raw_content))
