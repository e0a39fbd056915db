from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class TextRun:
    text: str = ""
    bold: bool = False
    italic: bool = False

    def to_record(self) -> dict[str, Any]:
        record: dict[str, Any] = {"type": "text", "text": self.text}
        if self.bold:
            record["bold"] = True
        if self.italic:
            record["italic"] = True
        return record


@dataclass(frozen=True)
class ParagraphBlock:
    children: tuple[TextRun, ...] = ()

    type = "paragraph"

    def to_record(self) -> dict[str, Any]:
        return {"type": self.type, "children": [run.to_record() for run in self.children]}


@dataclass(frozen=True)
class UnknownBlock:
    """Block with a tag we do not render (heading, list, image, ...)."""

    type: str = ""

    def to_record(self) -> dict[str, Any]:
        return {"type": self.type}


RichTextBlock = Union[ParagraphBlock, UnknownBlock]


# Display tree


@dataclass(frozen=True)
class TextNode:
    text: str


@dataclass(frozen=True)
class StrongNode:
    child: InlineNode


@dataclass(frozen=True)
class EmphasisNode:
    child: InlineNode


InlineNode = Union[TextNode, StrongNode, EmphasisNode]


@dataclass(frozen=True)
class ParagraphNode:
    children: tuple[InlineNode, ...] = ()
