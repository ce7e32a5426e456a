import math
import re

from markdown_it.token import Token

_NON_ALNUM_RUN = re.compile(r"[\W_]+")


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"


def slugify(text: str) -> str:
    """
    Lowercase text and collapse every run of non-alphanumeric characters
    into a single hyphen. Used for heading anchors and TOC links alike.
    """
    return _NON_ALNUM_RUN.sub("-", text.lower()).strip("-")


def heading_text(inline: Token | None) -> str:
    """Literal text of a heading's inline token (plain text and inline code)."""
    if inline is None or not inline.children:
        return ""
    return "".join(
        child.content
        for child in inline.children
        if child.type in ("text", "code_inline")
    )
