"""Tests for Markdown rendering and code highlighting."""

from __future__ import annotations

from mdsite.highlight import highlight_code
from mdsite.renderer import MarkdownRenderer, apply_highlighting

PYTHON_BLOCK = "```python\ndef greet():\n    return 1\n```\n"


class TestMarkdownRenderer:
    """Tests for MarkdownRenderer."""

    def test_renders_headings_and_paragraphs(self) -> None:
        """Basic Markdown becomes HTML."""
        html = MarkdownRenderer()("# Title\n\nSome *text*.")
        assert "<h1>Title</h1>" in html
        assert "<em>text</em>" in html

    def test_single_newlines_become_breaks(self) -> None:
        """Line breaks inside a paragraph are kept."""
        assert "<br" in MarkdownRenderer()("first\nsecond")

    def test_raw_html_passes_through(self) -> None:
        """Inline HTML blocks are emitted unchanged."""
        html = MarkdownRenderer()('<div class="note">Careful</div>\n')
        assert '<div class="note">Careful</div>' in html

    def test_typographic_quotes(self) -> None:
        """Straight quotes are typeset."""
        assert "&ldquo;" in MarkdownRenderer()('He said "hello".')

    def test_tables_are_supported(self) -> None:
        """Pipe tables render as HTML tables."""
        html = MarkdownRenderer()("| a | b |\n|---|---|\n| 1 | 2 |\n")
        assert "<table>" in html

    def test_highlights_known_language(self) -> None:
        """Fenced code with a known language is highlighted."""
        html = MarkdownRenderer()(PYTHON_BLOCK)
        assert '<span class="k">def</span>' in html
        assert 'class="highlight"' in html

    def test_unknown_language_keeps_escaped_code(self) -> None:
        """An unknown language leaves the escaped code block alone."""
        html = MarkdownRenderer()("```nosuchlang\n<tag>\n```\n")
        assert "language-nosuchlang" in html
        assert "&lt;tag&gt;" in html
        assert "<span" not in html

    def test_custom_highlighter(self) -> None:
        """The highlight callback receives the raw code and language."""
        calls: list[tuple[str, str]] = []

        def highlight(code: str, lang: str) -> str:
            calls.append((code, lang))
            return f"<mark>{lang}</mark>"

        html = MarkdownRenderer(highlight=highlight)("```js\nlet a = 1 < 2;\n```\n")
        assert calls == [("let a = 1 < 2;\n", "js")]
        assert "<mark>js</mark>" in html

    def test_highlighting_disabled(self) -> None:
        """Passing None skips highlighting."""
        html = MarkdownRenderer(highlight=None)(PYTHON_BLOCK)
        assert "language-python" in html
        assert "<span" not in html

    def test_renderer_is_reusable(self) -> None:
        """State is reset between documents."""
        renderer = MarkdownRenderer()
        text = "Note[^1].\n\n[^1]: Footnote.\n"
        assert renderer(text) == renderer(text)

    def test_raw_html_survives_highlighting(self) -> None:
        """Raw HTML next to a highlighted block is emitted unchanged."""
        raw = "<div><input disabled> &copy; <br /></div>"
        html = MarkdownRenderer()(raw + "\n\n" + PYTHON_BLOCK)
        assert raw in html
        assert "<span" in html


class TestApplyHighlighting:
    """Tests for apply_highlighting function."""

    def test_untouched_without_code_blocks(self) -> None:
        """HTML without language blocks is returned as-is."""
        html = "<p>plain &amp; simple</p>"
        assert apply_highlighting(html, lambda code, lang: "<b>x</b>") is html

    def test_empty_result_keeps_block(self) -> None:
        """An empty callback result keeps the default code."""
        html = '<pre><code class="language-x">a &lt; b</code></pre>'
        assert apply_highlighting(html, lambda code, lang: "") == html

    def test_surrounding_html_is_kept_verbatim(self) -> None:
        """Only the code block changes; markup around it is not re-serialized."""
        html = (
            "<p>a<br />b &amp; c <input disabled></p>\n"
            '<pre><code class="language-python">x = 1\n</code></pre>'
        )
        result = apply_highlighting(html, lambda code, lang: "<b>x</b>")
        assert result == (
            "<p>a<br />b &amp; c <input disabled></p>\n"
            '<pre class="highlight"><code class="language-python"><b>x</b></code></pre>'
        )

    def test_callback_gets_unescaped_code(self) -> None:
        """The callback receives the code text with entities decoded."""
        seen: list[tuple[str, str]] = []

        def _record(code: str, lang: str) -> str:
            seen.append((code, lang))
            return "ok"

        apply_highlighting('<pre><code class="language-c">a &lt; b</code></pre>', _record)
        assert seen == [("a < b", "c")]


class TestHighlightCode:
    """Tests for highlight_code function."""

    def test_empty_language(self) -> None:
        """No language means no highlighting."""
        assert highlight_code("x = 1\n", "") == ""

    def test_unknown_language(self) -> None:
        """Unknown lexers fall back to an empty result."""
        assert highlight_code("x = 1\n", "definitely-not-a-language") == ""

    def test_known_language(self) -> None:
        """Known languages yield token spans without a wrapper."""
        html = highlight_code("x = 1\n", "python")
        assert '<span class="n">x</span>' in html
        assert "<pre" not in html
