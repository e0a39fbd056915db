"""
Tests for the rich-text block renderer.
"""

from __future__ import annotations

from app.application.utils.rich_text import render_blocks, render_html, to_plain_text
from app.domain.entities.rich_text import (
    EmphasisNode,
    ParagraphBlock,
    ParagraphNode,
    StrongNode,
    TextNode,
    TextRun,
    UnknownBlock,
)


def test_bold_then_plain_run():
    """Test a paragraph with a bold run followed by a plain run."""
    nodes = render_blocks(
        [{"type": "paragraph", "children": [{"text": "Hi", "bold": True}, {"text": " there"}]}]
    )

    assert nodes == [ParagraphNode(children=(StrongNode(TextNode("Hi")), TextNode(" there")))]


def test_unknown_block_renders_nothing():
    """Test that unknown block types are dropped without error."""
    assert render_blocks([{"type": "unknown"}]) == []
    assert render_blocks([UnknownBlock(type="list")]) == []


def test_absent_or_invalid_input_renders_empty():
    """Test that None and non-sequence inputs give the empty result."""
    assert render_blocks(None) == []
    assert render_blocks("paragraph") == []
    assert render_blocks({"type": "paragraph"}) == []


def test_kept_blocks_preserve_relative_order():
    """Test that dropping unknown blocks keeps the order of paragraphs."""
    nodes = render_blocks(
        [
            {"type": "paragraph", "children": [{"text": "first"}]},
            {"type": "heading", "children": [{"text": "skip"}]},
            {"type": "paragraph", "children": [{"text": "second"}]},
        ]
    )

    assert to_plain_text(nodes) == "first\nsecond"


def test_bold_italic_nests_bold_outside():
    """Test that bold+italic runs render as strong(em(text))."""
    nodes = render_blocks([ParagraphBlock(children=(TextRun("x", bold=True, italic=True), TextRun("y", italic=True)))])

    assert nodes[0].children == (StrongNode(EmphasisNode(TextNode("x"))), EmphasisNode(TextNode("y")))


def test_empty_runs_are_kept():
    """Test that empty text runs keep their position."""
    nodes = render_blocks([{"type": "paragraph", "children": [{"text": ""}, {"text": "a"}, {}]}])

    assert nodes[0].children == (TextNode(""), TextNode("a"), TextNode(""))


def test_render_html_escapes_text():
    """Test HTML output for a display tree."""
    nodes = render_blocks(
        [{"type": "paragraph", "children": [{"text": "<b>", "bold": True}, {"text": " & ", "italic": True}, {"text": "ok"}]}]
    )

    assert render_html(nodes) == '<p class="mb-2"><strong>&lt;b&gt;</strong><em> &amp; </em><span>ok</span></p>'
