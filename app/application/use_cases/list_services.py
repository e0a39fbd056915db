from __future__ import annotations

import logging
from dataclasses import dataclass, field

from app.application.exceptions import ContentStatusError, ContentUnavailableError
from app.application.ports.content_source import ContentSourcePort
from app.application.utils.normalizer import normalize
from app.application.utils.service_index import featured as first_services, group_by_first_letter
from app.domain.entities.service import Service
from app.domain.entities.service_group import ServiceGroup

LOAD_ERROR_MESSAGE = "Не удалось загрузить услуги"
FETCH_ERROR_MESSAGE = "Произошла ошибка при загрузке услуг"


@dataclass(frozen=True)
class ServiceListing:
    services: list[Service] = field(default_factory=list)
    groups: list[ServiceGroup] = field(default_factory=list)
    error: str | None = None


class ListServicesUseCase:
    def __init__(self, source: ContentSourcePort) -> None:
        self._source = source
        self._logger = logging.getLogger(__name__)

    def execute(self) -> ServiceListing:
        try:
            raw = self._source.fetch_services()
        except ContentStatusError as e:
            self._logger.warning("Services unavailable", extra={"error": str(e)})
            return ServiceListing(error=LOAD_ERROR_MESSAGE)
        except ContentUnavailableError as e:
            self._logger.warning("Services fetch failed", extra={"error": str(e)})
            return ServiceListing(error=FETCH_ERROR_MESSAGE)

        services = normalize(raw)
        return ServiceListing(services=services, groups=group_by_first_letter(services))

    def featured(self, limit: int = 3) -> ServiceListing:
        listing = self.execute()
        if listing.error:
            return listing
        return ServiceListing(services=first_services(listing.services, limit))
