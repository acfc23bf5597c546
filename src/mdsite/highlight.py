"""Syntax highlighting for fenced code blocks."""

from __future__ import annotations

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

_FORMATTER = HtmlFormatter(nowrap=True)


def highlight_code(code: str, lang: str) -> str:
    """Return highlighted HTML spans for ``code``, or ``""`` if ``lang`` is unknown.

    The output has no ``<pre>`` wrapper; the caller keeps its own block.
    """
    if not lang:
        return ""
    try:
        lexer = get_lexer_by_name(lang, stripnl=False)
    except ClassNotFound:
        return ""
    return highlight(code, lexer, _FORMATTER)
