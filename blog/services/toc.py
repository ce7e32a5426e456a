import html
from typing import List, Optional, Sequence

from blog.schemas.content import TocEntry
from blog.services.markdown_parser import MD
from blog.utils import slugify

# Levels rendered in the navigation; h1 is the page title, h4+ is noise.
TOC_LEVELS = (2, 3)


def extract_toc(markdown: str) -> List[TocEntry]:
    """Collect every heading in document order as (level, text, id) entries."""
    entries = []
    current: Optional[List] = None

    for token in MD.parse(markdown):
        if token.type == "heading_open":
            current = [int(token.tag[1]), []]
        elif token.type == "inline" and current is not None:
            for child in token.children or []:
                if child.type in ("text", "code_inline"):
                    current[1].append(child.content)
        elif token.type == "heading_close" and current is not None:
            level, parts = current
            text = "".join(parts)
            entries.append(TocEntry(level=level, text=text, id=slugify(text)))
            current = None

    return entries


def render_toc(entries: Sequence[TocEntry]) -> str:
    # Headings with no slug have no anchor to link to
    items = [entry for entry in entries if entry.level in TOC_LEVELS and entry.id]
    if not items:
        return ""

    lines = [
        '<nav class="toc" aria-label="Table of contents">',
        '<h2 class="toc-title">Contents</h2>',
        '<ul class="toc-list">',
    ]
    for entry in items:
        indent = "  " if entry.level == 3 else ""
        lines.append(
            f'{indent}<li class="toc-item toc-level-{entry.level}">'
            f'<a href="#{html.escape(entry.id, quote=True)}">{html.escape(entry.text)}</a></li>'
        )
    lines.append("</ul>")
    lines.append("</nav>")
    return "\n".join(lines) + "\n"
