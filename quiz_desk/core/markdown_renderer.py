"""Markdown rendering of question text for Qt rich-text labels.

QLabel understands a subset of HTML, so question text is rendered with
markdown-it and handed over as a fragment. Raw HTML in the source is escaped,
which lets questions mention tags such as ``<h1>`` literally.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html}).enable("strikethrough")

    def render_fragment(self, markdown_text: str) -> str:
        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_question(self, number: int, markdown_text: str) -> str:
        """Render a question prefixed with its bold ``Qn.`` label."""
        return self.render_fragment(f"**Q{number}.** {markdown_text.strip()}")


renderer = MarkdownRenderer()
