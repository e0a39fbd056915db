from __future__ import annotations

from app.domain.entities.service import EMPTY_CELL, PriceListEntry, ProcedureDetails, Service

PROCEDURE_DETAIL_LABELS = (
    ("duration_summary", "Длительность"),
    ("frequency", "Частота"),
    ("preparations_used", "Используемые препараты"),
    ("anesthesia_info", "Анестезия"),
    ("course_recommendation", "Рекомендации по курсу"),
    ("effect_summary", "Эффект"),
)

PRICE_TABLE_HEADERS = ("Название", "Описание", "Единица", "Длительность")


def media_url(path: str, base: str) -> str:
    """Absolute URL for a media path returned by the content API."""
    if path.startswith(("http://", "https://", "//")):
        return path
    if not base:
        return path
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def card_image_url(service: Service, variant: str | None, base: str) -> str | None:
    if not service.images:
        return None
    return media_url(service.images[0].url_for(variant), base)


def price_cell(value: str | None) -> str:
    return value or EMPTY_CELL


def price_rows(entries: tuple[PriceListEntry, ...]) -> list[list[str]]:
    return [entry.row() for entry in entries]


def show_price_table(service: Service) -> bool:
    return bool(service.price_list_entries) and bool(service.price_list_entries[0].name)


def procedure_detail_items(details: ProcedureDetails | None) -> list[tuple[str, str]]:
    """Label/value pairs for the filled-in procedure fields only."""
    if details is None:
        return []
    items: list[tuple[str, str]] = []
    for field_name, label in PROCEDURE_DETAIL_LABELS:
        value = getattr(details, field_name)
        if value:
            items.append((label, value))
    return items


def excerpt(text: str, length: int = 60) -> str:
    return f"{text[:length]}..."
