from __future__ import annotations

from quiz_desk.core.markdown_renderer import MarkdownRenderer


def test_question_is_prefixed_with_bold_number():
    html = MarkdownRenderer().render_question(3, "What is *FIFO*?")
    assert "<strong>Q3.</strong>" in html
    assert "<em>FIFO</em>" in html


def test_raw_html_is_escaped():
    html = MarkdownRenderer().render_fragment("Which tag is <h1>?")
    assert "&lt;h1&gt;" in html


def test_empty_text_renders_placeholder():
    assert "No content provided" in MarkdownRenderer().render_fragment("   ")
