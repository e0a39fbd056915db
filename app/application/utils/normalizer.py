"""
Content normalization.

Turns the loosely shaped records returned by the content API into `Service`
entities. Every read goes through a read-or-default accessor, so a missing or
malformed field resolves to its default and never raises.

Two record shapes are accepted, detected per record:

- flat: ``{"id": 1, "title": "...", "slug": "...", ...}``
- wrapped: ``{"id": 1, "attributes": {"title": "...", ...}}``
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from app.domain.entities.rich_text import ParagraphBlock, RichTextBlock, TextRun, UnknownBlock
from app.domain.entities.service import (
    IMAGE_VARIANTS,
    UNTITLED_PLACEHOLDER,
    ImageAsset,
    PriceListEntry,
    ProcedureDetails,
    Service,
)

logger = logging.getLogger(__name__)


def normalize(raw_payload: Iterable[Any] | None) -> list[Service]:
    """Normalize a batch of raw records. One Service per record, in order."""
    if raw_payload is None or isinstance(raw_payload, (str, bytes, Mapping)):
        return []
    try:
        records = list(raw_payload)
    except TypeError:
        return []
    return [normalize_record(record) for record in records]


def normalize_record(record: Any) -> Service:
    if not isinstance(record, Mapping):
        logger.warning("Skipping fields of non-mapping record", extra={"reason": type(record).__name__})
        record = {}

    service_id = _read_int(record.get("id"))
    fields = unwrap(record)

    title = _read_text(fields.get("title"))
    slug = _read_text(fields.get("slug"))

    return Service(
        id=service_id,
        document_id=_read_text(fields.get("documentId")) or _read_text(record.get("documentId")),
        title=title or UNTITLED_PLACEHOLDER,
        untitled=title is None,
        description=_read_text(fields.get("description")) or "",
        slug=slug or f"service-{service_id}",
        images=_read_images(fields.get("image")),
        price_list_entries=_read_price_list(fields.get("price_list")),
        procedure_details=_read_procedure_details(fields.get("procedure_details")),
        indications=read_blocks(fields.get("indications")),
        effect_description=read_blocks(fields.get("effect_description")),
        contraindications=read_blocks(fields.get("contraindications")),
        note=_read_text(fields.get("primechanie")),
    )


def read_blocks(value: Any) -> tuple[RichTextBlock, ...] | None:
    """Decode a rich-text field. Absent or non-list values decode to None."""
    if not isinstance(value, list):
        return None
    return tuple(decode_block(block) for block in value)


def decode_block(block: Any) -> RichTextBlock:
    if isinstance(block, (ParagraphBlock, UnknownBlock)):
        return block
    if not isinstance(block, Mapping):
        return UnknownBlock()
    block_type = block.get("type")
    if block_type != "paragraph":
        return UnknownBlock(type=block_type if isinstance(block_type, str) else "")
    children = block.get("children")
    if not isinstance(children, list):
        return ParagraphBlock()
    return ParagraphBlock(children=tuple(_read_run(child) for child in children))


def _read_run(child: Any) -> TextRun:
    if isinstance(child, TextRun):
        return child
    if not isinstance(child, Mapping):
        return TextRun()
    text = child.get("text")
    return TextRun(
        text=text if isinstance(text, str) else "",
        bold=child.get("bold") is True,
        italic=child.get("italic") is True,
    )


def unwrap(record: Mapping[str, Any]) -> Mapping[str, Any]:
    attributes = record.get("attributes")
    if isinstance(attributes, Mapping) and attributes:
        return attributes
    return record


def _read_text(value: Any) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value or None
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _read_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def _read_list(value: Any) -> list[Any]:
    # Strapi v4 media/relations arrive as {"data": [...]}
    if isinstance(value, Mapping) and "data" in value:
        value = value.get("data")
    if isinstance(value, list):
        return value
    return []


def _read_images(value: Any) -> tuple[ImageAsset, ...]:
    images: list[ImageAsset] = []
    for item in _read_list(value):
        if not isinstance(item, Mapping):
            continue
        item = unwrap(item)
        url = _read_text(item.get("url"))
        if not url:
            continue
        images.append(ImageAsset(url=url, formats=_read_formats(item.get("formats"))))
    return tuple(images)


def _read_formats(value: Any) -> tuple[tuple[str, str], ...]:
    if not isinstance(value, Mapping):
        return ()
    formats: list[tuple[str, str]] = []
    for variant in IMAGE_VARIANTS:
        entry = value.get(variant)
        url = _read_text(entry.get("url")) if isinstance(entry, Mapping) else None
        if url:
            formats.append((variant, url))
    return tuple(formats)


def _read_price_list(value: Any) -> tuple[PriceListEntry, ...]:
    entries: list[PriceListEntry] = []
    for item in _read_list(value):
        if not isinstance(item, Mapping):
            continue
        entries.append(
            PriceListEntry(
                id=_read_text(item.get("id")),
                name=_read_text(item.get("name")),
                description=_read_text(item.get("description")),
                unit=_read_text(item.get("unit")),
                duration=_read_text(item.get("duration")),
            )
        )
    return tuple(entries)


def _read_procedure_details(value: Any) -> ProcedureDetails | None:
    if not isinstance(value, Mapping):
        return None
    return ProcedureDetails(
        duration_summary=_read_text(value.get("duration_summary")),
        frequency=_read_text(value.get("frequency")),
        preparations_used=_read_text(value.get("preparations_used")),
        anesthesia_info=_read_text(value.get("anesthesia_info")),
        course_recommendation=_read_text(value.get("course_recommendation")),
        effect_summary=_read_text(value.get("effect_summary")),
    )
