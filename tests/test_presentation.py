"""
Tests for display helpers used by page templates.
"""

from __future__ import annotations

from app.application.utils.presentation import (
    card_image_url,
    excerpt,
    media_url,
    price_cell,
    procedure_detail_items,
    show_price_table,
)
from app.domain.entities.service import ImageAsset, PriceListEntry, ProcedureDetails, Service


def test_missing_variant_falls_back_to_base_url():
    """Test that a missing medium variant resolves to the base URL."""
    image = ImageAsset(url="/uploads/a.jpg")

    assert image.url_for("medium") == "/uploads/a.jpg"
    assert image.url_for(None) == "/uploads/a.jpg"


def test_card_image_url_joins_media_base():
    service = Service(id=1, images=(ImageAsset(url="/uploads/a.jpg", formats=(("thumbnail", "/uploads/t_a.jpg"),)),))

    assert card_image_url(service, "thumbnail", "https://cms.example/") == "https://cms.example/uploads/t_a.jpg"
    assert card_image_url(service, "large", "https://cms.example") == "https://cms.example/uploads/a.jpg"
    assert card_image_url(Service(id=2), "medium", "https://cms.example") is None


def test_media_url_keeps_absolute_urls():
    assert media_url("https://cdn.example/a.jpg", "https://cms.example") == "https://cdn.example/a.jpg"
    assert media_url("/uploads/a.jpg", "") == "/uploads/a.jpg"


def test_empty_price_cells_render_as_dash():
    """Test that empty price list values render as the placeholder dash."""
    entry = PriceListEntry(id="1", name="Зона", unit="")

    assert entry.cell("unit") == "-"
    assert price_cell("") == "-"
    assert price_cell(None) == "-"
    assert entry.row() == ["Зона", "-", "-", "-"]


def test_price_table_shown_only_when_first_entry_named():
    assert show_price_table(Service(id=1, price_list_entries=(PriceListEntry(name="A"),))) is True
    assert show_price_table(Service(id=1, price_list_entries=(PriceListEntry(unit="шт"),))) is False
    assert show_price_table(Service(id=1)) is False


def test_procedure_detail_items_skip_empty_fields():
    """Test that each empty procedure field is omitted independently."""
    items = procedure_detail_items(ProcedureDetails(duration_summary="30 минут", effect_summary="Сияние"))

    assert items == [("Длительность", "30 минут"), ("Эффект", "Сияние")]
    assert procedure_detail_items(ProcedureDetails()) == []
    assert procedure_detail_items(None) == []


def test_excerpt():
    assert excerpt("a" * 80) == "a" * 60 + "..."
    assert excerpt("short") == "short..."
