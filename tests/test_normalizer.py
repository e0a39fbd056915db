"""
Tests for content normalization.
"""

from __future__ import annotations

import pytest

from app.application.utils.normalizer import normalize, normalize_record
from app.domain.entities.rich_text import ParagraphBlock, TextRun, UnknownBlock
from app.domain.entities.service import UNTITLED_PLACEHOLDER, ImageAsset, PriceListEntry, ProcedureDetails, Service
from app.infrastructure.content.sample_data import SAMPLE_SERVICES


def test_missing_fields_get_defaults():
    """Test that a bare record gets every documented default."""
    service = normalize_record({"id": 7})

    assert service.id == 7
    assert service.title == UNTITLED_PLACEHOLDER
    assert service.untitled is True
    assert service.description == ""
    assert service.slug == "service-7"
    assert service.images == ()
    assert service.price_list_entries == ()
    assert service.procedure_details is None
    assert service.indications is None
    assert service.effect_description is None
    assert service.contraindications is None
    assert service.note is None
    assert service.document_id is None


def test_empty_strings_treated_as_missing():
    """Test that empty title and slug fall back to defaults."""
    service = normalize_record({"id": 3, "title": "", "slug": "", "description": None})

    assert service.title == UNTITLED_PLACEHOLDER
    assert service.slug == "service-3"
    assert service.description == ""


def test_wrapped_and_flat_records_in_one_batch():
    """Test that record shape is detected per record, not per batch."""
    services = normalize(
        [
            {"id": 1, "attributes": {"title": "Пилинг", "slug": "piling"}},
            {"id": 2, "title": "Массаж", "slug": "massazh"},
            {"id": 3, "attributes": {}, "title": "Чистка", "slug": "chistka"},
        ]
    )

    assert [s.title for s in services] == ["Пилинг", "Массаж", "Чистка"]
    assert [s.slug for s in services] == ["piling", "massazh", "chistka"]
    assert [s.id for s in services] == [1, 2, 3]


def test_malformed_records_never_abort_batch():
    """Test that malformed records still produce a Service each."""
    services = normalize(
        [
            None,
            "not a record",
            {"id": "12", "title": 42, "image": "oops", "price_list": {"bad": True}},
            {"id": 5, "procedure_details": "text", "indications": {"type": "paragraph"}},
        ]
    )

    assert len(services) == 4
    assert services[0].slug == "service-0"
    assert services[1].title == UNTITLED_PLACEHOLDER
    assert services[2].id == 12
    assert services[2].title == "42"
    assert services[2].images == ()
    assert services[2].price_list_entries == ()
    assert services[3].procedure_details is None
    assert services[3].indications is None


def test_none_or_empty_payload_yields_empty_list():
    """Test that absent payloads normalize to an empty list."""
    assert normalize(None) == []
    assert normalize([]) == []
    assert normalize({"data": []}) == []


def test_unique_ids_give_unique_default_slugs():
    """Test that defaulted slugs are unique across a batch with unique ids."""
    services = normalize([{"id": i} for i in range(1, 6)])
    slugs = [s.slug for s in services]

    assert slugs == [f"service-{i}" for i in range(1, 6)]
    assert len(set(slugs)) == len(slugs)


def test_images_and_variants():
    """Test image decoding including Strapi v4 media wrappers."""
    service = normalize_record(
        {
            "id": 1,
            "image": {
                "data": [
                    {"id": 9, "attributes": {"url": "/uploads/a.jpg", "formats": {"medium": {"url": "/uploads/m_a.jpg"}}}},
                    {"id": 10, "attributes": {"formats": {"small": {"url": "/uploads/s_b.jpg"}}}},
                ]
            },
        }
    )

    assert service.images == (ImageAsset(url="/uploads/a.jpg", formats=(("medium", "/uploads/m_a.jpg"),)),)
    assert service.images[0].url_for("medium") == "/uploads/m_a.jpg"
    assert service.images[0].url_for("large") == "/uploads/a.jpg"


def test_price_list_and_procedure_details():
    """Test that nested price list and procedure details are decoded."""
    service = normalize_record(
        {
            "id": 1,
            "price_list": [{"id": 4, "name": "Зона", "unit": ""}],
            "procedure_details": {"frequency": "1 раз в месяц"},
        }
    )

    assert service.price_list_entries == (PriceListEntry(id="4", name="Зона"),)
    assert service.procedure_details == ProcedureDetails(frequency="1 раз в месяц")


def test_present_but_empty_procedure_details_is_not_absent():
    """Test that an empty procedure_details object stays present."""
    service = normalize_record({"id": 1, "procedure_details": {}})

    assert service.procedure_details == ProcedureDetails()


def test_rich_text_fields_are_decoded():
    """Test rich-text decoding, keeping unknown blocks as no-op blocks."""
    service = normalize_record(
        {
            "id": 1,
            "indications": [
                {"type": "paragraph", "children": [{"text": "A", "bold": True}, {"text": "B", "italic": "yes"}]},
                {"type": "heading", "level": 2, "children": []},
            ],
        }
    )

    assert service.indications == (
        ParagraphBlock(children=(TextRun(text="A", bold=True), TextRun(text="B"))),
        UnknownBlock(type="heading"),
    )


def test_normalizing_canonical_record_is_idempotent():
    """Test that normalize(service.to_record()) gives back an equal Service."""
    for service in normalize(SAMPLE_SERVICES) + [normalize_record({"id": 99})]:
        assert normalize([service.to_record()]) == [service]


def test_document_id_read_from_top_level_of_wrapped_record():
    """Test that documentId is found outside the attributes wrapper."""
    service = normalize_record({"id": 1, "documentId": "abc", "attributes": {"title": "X"}})

    assert service.document_id == "abc"
    assert isinstance(service, Service)


def test_normalized_services_are_immutable_and_hashable():
    """Test that built services, images included, cannot be changed and can be hashed."""
    services = normalize(SAMPLE_SERVICES)
    image = services[0].images[0]

    assert image.url_for("medium") == "/uploads/medium_biorevitalizaciya.jpg"
    assert isinstance(image.formats, tuple)
    with pytest.raises(TypeError):
        image.formats["medium"] = "/elsewhere.jpg"
    assert image.url_for("medium") == "/uploads/medium_biorevitalizaciya.jpg"
    assert len({hash(service) for service in services}) == len(services)
