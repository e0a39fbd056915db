from __future__ import annotations

from pydantic import BaseModel, Field

from app.application.utils.presentation import (
    PRICE_TABLE_HEADERS,
    card_image_url,
    excerpt,
    price_rows,
    procedure_detail_items,
    show_price_table,
)
from app.application.utils.rich_text import render_blocks, render_html
from app.domain.entities.service import Service
from app.domain.entities.service_group import ServiceGroup
from app.domain.entities.theme import Theme


class ServiceCardSchema(BaseModel):
    id: int
    title: str
    description: str
    slug: str
    image_url: str | None = None

    @classmethod
    def from_entity(cls, service: Service, media_base: str, variant: str = "medium") -> ServiceCardSchema:
        return cls(
            id=service.id,
            title=service.title,
            description=service.description,
            slug=service.slug,
            image_url=card_image_url(service, variant, media_base),
        )


class CatalogItemSchema(BaseModel):
    id: int
    title: str
    excerpt: str
    slug: str
    thumbnail_url: str | None = None


class ServiceGroupSchema(BaseModel):
    letter: str
    services: list[CatalogItemSchema] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, group: ServiceGroup, media_base: str) -> ServiceGroupSchema:
        return cls(
            letter=group.letter_key,
            services=[
                CatalogItemSchema(
                    id=service.id,
                    title=service.title,
                    excerpt=excerpt(service.description),
                    slug=service.slug,
                    thumbnail_url=card_image_url(service, "thumbnail", media_base),
                )
                for service in group.members
            ],
        )


class ServiceListResponseSchema(BaseModel):
    services: list[ServiceCardSchema] = Field(default_factory=list)
    catalog: list[ServiceGroupSchema] = Field(default_factory=list)
    error: str | None = None


class ProcedureDetailItemSchema(BaseModel):
    label: str
    value: str


class PriceTableSchema(BaseModel):
    headers: list[str] = Field(default_factory=lambda: list(PRICE_TABLE_HEADERS))
    rows: list[list[str]] = Field(default_factory=list)


class ServiceDetailSchema(BaseModel):
    id: int
    document_id: str | None = None
    title: str
    description: str
    slug: str
    image_url: str | None = None
    procedure_details: list[ProcedureDetailItemSchema] | None = None
    indications_html: str | None = None
    effect_description_html: str | None = None
    contraindications_html: str | None = None
    price_table: PriceTableSchema | None = None
    note: str | None = None

    @classmethod
    def from_entity(cls, service: Service, media_base: str) -> ServiceDetailSchema:
        details = None
        if service.procedure_details is not None:
            details = [
                ProcedureDetailItemSchema(label=label, value=value)
                for label, value in procedure_detail_items(service.procedure_details)
            ]
        price_table = None
        if show_price_table(service):
            price_table = PriceTableSchema(rows=price_rows(service.price_list_entries))
        return cls(
            id=service.id,
            document_id=service.document_id,
            title=service.title,
            description=service.description,
            slug=service.slug,
            image_url=card_image_url(service, "large", media_base),
            procedure_details=details,
            indications_html=_rich_text_html(service.indications),
            effect_description_html=_rich_text_html(service.effect_description),
            contraindications_html=_rich_text_html(service.contraindications),
            price_table=price_table,
            note=service.note,
        )


class ThemeSchema(BaseModel):
    theme: Theme


def _rich_text_html(blocks) -> str | None:
    if blocks is None:
        return None
    return render_html(render_blocks(blocks))

