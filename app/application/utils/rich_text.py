from __future__ import annotations

from collections.abc import Sequence
from html import escape
from typing import Any

from app.application.utils.normalizer import decode_block
from app.domain.entities.rich_text import (
    EmphasisNode,
    InlineNode,
    ParagraphBlock,
    ParagraphNode,
    StrongNode,
    TextNode,
    TextRun,
)


def render_blocks(blocks: Sequence[Any] | None) -> list[ParagraphNode]:
    """Build the display tree for a rich-text field.

    Accepts decoded blocks or raw block mappings. Anything that is not a list
    or tuple renders as an empty tree; blocks other than paragraphs are dropped.
    """
    if not isinstance(blocks, (list, tuple)):
        return []
    paragraphs: list[ParagraphNode] = []
    for block in blocks:
        decoded = decode_block(block)
        if not isinstance(decoded, ParagraphBlock):
            continue
        paragraphs.append(ParagraphNode(children=tuple(render_run(run) for run in decoded.children)))
    return paragraphs


def render_run(run: TextRun) -> InlineNode:
    node: InlineNode = TextNode(run.text)
    if run.italic:
        node = EmphasisNode(node)
    if run.bold:
        node = StrongNode(node)
    return node


def render_html(nodes: Sequence[ParagraphNode]) -> str:
    return "".join(f'<p class="mb-2">{"".join(_inline_html(child) for child in node.children)}</p>' for node in nodes)


def _inline_html(node: InlineNode, wrapped: bool = False) -> str:
    if isinstance(node, StrongNode):
        return f"<strong>{_inline_html(node.child, True)}</strong>"
    if isinstance(node, EmphasisNode):
        return f"<em>{_inline_html(node.child, True)}</em>"
    if wrapped:
        return escape(node.text)
    return f"<span>{escape(node.text)}</span>"


def to_plain_text(nodes: Sequence[ParagraphNode]) -> str:
    return "\n".join("".join(_inline_text(child) for child in node.children) for node in nodes)


def _inline_text(node: InlineNode) -> str:
    while not isinstance(node, TextNode):
        node = node.child
    return node.text
