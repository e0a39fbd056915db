from __future__ import annotations

import logging

from app.application.exceptions import ContentUnavailableError
from app.application.ports.content_source import ContentSourcePort
from app.application.utils.normalizer import normalize
from app.application.utils.service_index import build_slug_index
from app.domain.entities.service import Service


class GetServiceUseCase:
    def __init__(self, source: ContentSourcePort) -> None:
        self._source = source
        self._logger = logging.getLogger(__name__)

    def execute(self, slug: str) -> Service | None:
        try:
            service = build_slug_index(normalize(self._source.fetch_service_by_slug(slug))).get(slug)
            if service is not None:
                return service
            # Slugs synthesized as "service-<id>" are not stored in the CMS, so the filter misses them
            return build_slug_index(normalize(self._source.fetch_services())).get(slug)
        except ContentUnavailableError as e:
            self._logger.warning("Service unavailable", extra={"slug": slug, "error": str(e)})
            return None


class ListServiceSlugsUseCase:
    def __init__(self, source: ContentSourcePort) -> None:
        self._source = source
        self._logger = logging.getLogger(__name__)

    def execute(self) -> list[str]:
        try:
            raw = self._source.fetch_slugs()
        except ContentUnavailableError as e:
            self._logger.warning("Service slugs unavailable", extra={"error": str(e)})
            return []

        return list(build_slug_index(normalize(raw)))
