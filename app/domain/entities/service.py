from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.domain.entities.rich_text import RichTextBlock

UNTITLED_PLACEHOLDER = "Без названия"
EMPTY_CELL = "-"
IMAGE_VARIANTS = ("thumbnail", "small", "medium", "large")
PRICE_FIELDS = ("name", "description", "unit", "duration")


@dataclass(frozen=True)
class ImageAsset:
    url: str
    # (variant, url) pairs in IMAGE_VARIANTS order
    formats: tuple[tuple[str, str], ...] = ()

    def url_for(self, variant: str | None = None) -> str:
        """Variant URL, falling back to the base URL when the variant is missing."""
        if variant:
            return dict(self.formats).get(variant) or self.url
        return self.url

    def to_record(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "formats": {name: {"url": url} for name, url in self.formats},
        }


@dataclass(frozen=True)
class PriceListEntry:
    id: str | None = None
    name: str | None = None
    description: str | None = None
    unit: str | None = None
    duration: str | None = None

    def cell(self, field_name: str) -> str:
        value = getattr(self, field_name, None) if field_name in PRICE_FIELDS else None
        return value or EMPTY_CELL

    def row(self) -> list[str]:
        return [self.cell(name) for name in PRICE_FIELDS]

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "unit": self.unit,
            "duration": self.duration,
        }


@dataclass(frozen=True)
class ProcedureDetails:
    duration_summary: str | None = None
    frequency: str | None = None
    preparations_used: str | None = None
    anesthesia_info: str | None = None
    course_recommendation: str | None = None
    effect_summary: str | None = None

    def to_record(self) -> dict[str, Any]:
        return {
            "duration_summary": self.duration_summary,
            "frequency": self.frequency,
            "preparations_used": self.preparations_used,
            "anesthesia_info": self.anesthesia_info,
            "course_recommendation": self.course_recommendation,
            "effect_summary": self.effect_summary,
        }


@dataclass(frozen=True)
class Service:
    id: int
    title: str = UNTITLED_PLACEHOLDER
    description: str = ""
    slug: str = ""
    document_id: str | None = None
    images: tuple[ImageAsset, ...] = ()
    price_list_entries: tuple[PriceListEntry, ...] = ()
    procedure_details: ProcedureDetails | None = None
    indications: tuple[RichTextBlock, ...] | None = None
    effect_description: tuple[RichTextBlock, ...] | None = None
    contraindications: tuple[RichTextBlock, ...] | None = None
    note: str | None = None
    # True when the source had no title and `title` holds the placeholder
    untitled: bool = False

    def to_record(self) -> dict[str, Any]:
        """Flat record in the content API's field naming."""
        return {
            "id": self.id,
            "documentId": self.document_id,
            "title": "" if self.untitled else self.title,
            "description": self.description,
            "slug": self.slug,
            "image": [image.to_record() for image in self.images],
            "price_list": [entry.to_record() for entry in self.price_list_entries],
            "procedure_details": self.procedure_details.to_record() if self.procedure_details else None,
            "indications": _blocks_to_record(self.indications),
            "effect_description": _blocks_to_record(self.effect_description),
            "contraindications": _blocks_to_record(self.contraindications),
            "primechanie": self.note,
        }


def _blocks_to_record(blocks: tuple[RichTextBlock, ...] | None) -> list[dict[str, Any]] | None:
    if blocks is None:
        return None
    return [block.to_record() for block in blocks]
