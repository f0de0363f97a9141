# docrender/highlighting.py
"""
Syntax highlighting for code fences and inline code spans.

Highlighting is delegated to Pygments. A language tag that Pygments does not
know (or no tag at all) falls back to the plain-text grammar, so highlighting
never fails a render. Lexers and formatters are created per call and never
shared between renders.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

PLAINTEXT = "plaintext"
INLINE_LANGUAGE = "bash"


class HighlightResult(NamedTuple):
    html: str
    language: str


def _find_lexer(language: Optional[str]):
    if not language:
        return None
    try:
        return get_lexer_by_name(language.lower(), stripnl=False, ensurenl=False)
    except ClassNotFound:
        logger.debug("No lexer for language %r, falling back to %s", language, PLAINTEXT)
        return None


def is_supported_language(language: Optional[str]) -> bool:
    return _find_lexer(language) is not None


def highlight(source: str, language: Optional[str] = None) -> HighlightResult:
    """
    Highlight ``source`` with the grammar named by ``language``.

    Returns the token markup (no wrapping element) together with the name of
    the grammar actually used, which is ``"plaintext"`` on fallback.
    """
    lexer = _find_lexer(language)
    used = language.lower() if lexer is not None else PLAINTEXT
    if lexer is None:
        lexer = TextLexer(stripnl=False, ensurenl=False)

    formatter = HtmlFormatter(nowrap=True)
    html = pygments_highlight(source, lexer, formatter)
    return HighlightResult(html=html, language=used)


def highlight_inline(source: str, language: str = INLINE_LANGUAGE) -> str:
    """Highlight an inline code span; spans always use the shell grammar."""
    return highlight(source, language).html.rstrip("\n")


def highlight_stylesheet(style: str = "github-dark", selector: str = ".hljs") -> str:
    """CSS for the token classes emitted by :func:`highlight`."""
    try:
        formatter = HtmlFormatter(style=style)
    except ClassNotFound:
        logger.warning("Unknown Pygments style %r, using default", style)
        formatter = HtmlFormatter()
    return formatter.get_style_defs(selector)
