"""Convert Markdown source text into HTML page content."""

from __future__ import annotations

import re
from typing import Callable

import markdown

from mdsite.highlight import highlight_code

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML post-processing (pip install beautifulsoup4)."
    ) from exc


Highlighter = Callable[[str, str], str]

_LANGUAGE_PREFIX = "language-"
_HIGHLIGHT_CLASS = "highlight"
_CODE_BLOCK_RE = re.compile(
    r"<pre(?P<pre_attrs>[^>]*)><code(?P<code_attrs>[^>]*)>(?P<body>.*?)</code></pre>",
    re.DOTALL,
)
_CLASS_ATTR_RE = re.compile(r'class="([^"]*)"')

# Raw HTML passes through, single newlines become <br>, and quotes and
# dashes are typeset.
_EXTENSIONS = ["extra", "nl2br", "smarty", "sane_lists"]


class MarkdownRenderer:
    """Text renderer used for every page of a build.

    Args:
        highlight: Callback ``(code, lang) -> html`` applied to fenced code
            blocks that name a language. Returning ``""`` keeps the default
            escaped code. Pass None to skip highlighting entirely.
    """

    def __init__(self, highlight: Highlighter | None = highlight_code) -> None:
        self._highlight = highlight
        self._md = markdown.Markdown(extensions=_EXTENSIONS, output_format="html")

    def __call__(self, text: str) -> str:
        return self.render(text)

    def render(self, text: str) -> str:
        try:
            html = self._md.convert(text)
        finally:
            self._md.reset()
        if self._highlight is None:
            return html
        return apply_highlighting(html, self._highlight)


def apply_highlighting(html: str, highlight: Highlighter) -> str:
    """Replace the body of every ``<pre><code class="language-X">`` block.

    Only the matched blocks are rewritten; the HTML around them is returned
    byte for byte.
    """
    if _LANGUAGE_PREFIX not in html:
        return html

    def _replace(match: re.Match[str]) -> str:
        code = BeautifulSoup(
            f"<code{match['code_attrs']}>{match['body']}</code>", "html.parser"
        ).code
        lang = _code_language(code) if code is not None else ""
        if not lang:
            return match.group(0)
        highlighted = highlight(code.get_text(), lang)
        if not highlighted:
            return match.group(0)
        pre_attrs = _add_class(match["pre_attrs"], _HIGHLIGHT_CLASS)
        return f"<pre{pre_attrs}><code{match['code_attrs']}>{highlighted}</code></pre>"

    return _CODE_BLOCK_RE.sub(_replace, html)


def _code_language(code: Tag) -> str:
    for cls in code.get("class", []):
        if cls.startswith(_LANGUAGE_PREFIX):
            return cls[len(_LANGUAGE_PREFIX):]
    return ""


def _add_class(attrs: str, name: str) -> str:
    if _CLASS_ATTR_RE.search(attrs):
        return _CLASS_ATTR_RE.sub(lambda m: f'class="{m[1]} {name}"', attrs, count=1)
    return f'{attrs} class="{name}"'
