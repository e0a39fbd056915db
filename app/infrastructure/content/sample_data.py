from __future__ import annotations

from typing import Any

SAMPLE_SERVICES: list[dict[str, Any]] = [
    {
        "id": 1,
        "documentId": "k2j4h5g6f7d8s9a0",
        "title": "Биоревитализация",
        "description": "Глубокое увлажнение кожи препаратами гиалуроновой кислоты.",
        "slug": "biorevitalizaciya",
        "image": [
            {
                "id": 11,
                "url": "/uploads/biorevitalizaciya.jpg",
                "formats": {
                    "thumbnail": {"url": "/uploads/thumbnail_biorevitalizaciya.jpg"},
                    "medium": {"url": "/uploads/medium_biorevitalizaciya.jpg"},
                },
            }
        ],
        "price_list": [
            {"id": 1, "name": "Одна зона", "description": "Лицо", "unit": "1 мл", "duration": "40 мин"},
            {"id": 2, "name": "Лицо и шея", "description": "", "unit": "2 мл", "duration": ""},
        ],
        "procedure_details": {
            "id": 1,
            "duration_summary": "40–60 минут",
            "frequency": "1 раз в 2 недели",
            "preparations_used": "Juvederm Hydrate, Profhilo",
            "anesthesia_info": "Аппликационная анестезия",
            "course_recommendation": "3–5 процедур",
            "effect_summary": "Увлажнённая и упругая кожа",
        },
        "indications": [
            {
                "type": "paragraph",
                "children": [
                    {"type": "text", "text": "Сухость", "bold": True},
                    {"type": "text", "text": " и тусклый цвет кожи."},
                ],
            }
        ],
        "effect_description": [
            {"type": "paragraph", "children": [{"type": "text", "text": "Кожа выглядит отдохнувшей.", "italic": True}]}
        ],
        "contraindications": [
            {"type": "paragraph", "children": [{"type": "text", "text": "Беременность, острые воспаления."}]}
        ],
        "primechanie": "Стоимость препарата включена в цену.",
    },
    {
        "id": 2,
        "attributes": {
            "title": "Пилинг",
            "description": "Химическое обновление кожи.",
            "slug": "piling",
            "image": [],
            "price_list": [{"id": 3, "name": "Срединный пилинг", "unit": "процедура"}],
        },
    },
    {
        "id": 3,
        "title": "Аппаратный массаж",
        "description": "Лифтинг и дренаж.",
        "slug": "apparatnyj-massazh",
    },
]
