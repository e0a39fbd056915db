from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from app.application.ports.content_source import ContentSourcePort
from app.application.utils.normalizer import unwrap
from app.infrastructure.content.sample_data import SAMPLE_SERVICES


class MockContentSource(ContentSourcePort):
    def __init__(self, records: list[Any] | None = None) -> None:
        self._records = copy.deepcopy(SAMPLE_SERVICES if records is None else records)
        self._logger = logging.getLogger(__name__)

    def fetch_services(self) -> list[Any]:
        self._logger.debug("Serving bundled sample services", extra={"count": len(self._records)})
        return copy.deepcopy(self._records)

    def fetch_service_by_slug(self, slug: str) -> list[Any]:
        return [copy.deepcopy(record) for record in self._records if _raw_slug(record) == slug]

    def fetch_slugs(self) -> list[Any]:
        return [{"id": record.get("id"), "slug": _raw_slug(record)} for record in self._records if isinstance(record, Mapping)]


def _raw_slug(record: Any) -> Any:
    if not isinstance(record, Mapping):
        return None
    return unwrap(record).get("slug")
