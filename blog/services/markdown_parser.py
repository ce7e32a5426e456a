from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore

from blog.utils import heading_text, slugify


def assign_heading_ids(state: StateCore) -> None:
    """Core rule: give every heading_open token an id derived from its text."""
    tokens = state.tokens
    for idx, token in enumerate(tokens):
        if token.type != "heading_open":
            continue
        inline = tokens[idx + 1] if idx + 1 < len(tokens) else None
        anchor = slugify(heading_text(inline))
        if anchor:
            token.attrSet("id", anchor)


def create_parser() -> MarkdownIt:
    md = MarkdownIt("commonmark", {"html": True}).enable(["table", "strikethrough"])
    md.core.ruler.push("heading_ids", assign_heading_ids)
    return md


# Parsing keeps no state on the instance, so one parser serves every thread.
MD = create_parser()
