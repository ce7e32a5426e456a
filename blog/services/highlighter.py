import html
import logging
from typing import List

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import (
    TextLexer,
    get_all_lexers,
    get_lexer_by_name,
    get_lexer_for_filename,
)
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "monokai"


def highlight_code(code: str, language: str, style: str = DEFAULT_STYLE) -> str:
    """
    Highlight a code block and return HTML with inline styles.

    Unknown languages render as plain text. If Pygments itself fails the code
    is returned HTML-escaped inside a bare <pre><code> block; this never raises.
    """
    try:
        lexer = _resolve_lexer(language)
        formatter = HtmlFormatter(style=style, noclasses=True)
        return pygments_highlight(code, lexer, formatter)
    except Exception as e:
        logger.warning(f"Highlighting failed for language {language!r}: {e}")
        return f"<pre><code>{html.escape(code, quote=True)}</code></pre>"


def _resolve_lexer(language: str):
    token = language.split()[0] if language and language.strip() else ""
    if token:
        try:
            return get_lexer_by_name(token, stripnl=False)
        except ClassNotFound:
            pass
        try:
            return get_lexer_for_filename(f"snippet.{token}", stripnl=False)
        except ClassNotFound:
            pass
    return TextLexer(stripnl=False)


def supported_languages() -> List[str]:
    return sorted(name for name, *_ in get_all_lexers())
