from functools import lru_cache
import logging

from app.core.config import settings
from app.application.ports.content_source import ContentSourcePort
from app.application.use_cases.get_service import GetServiceUseCase, ListServiceSlugsUseCase
from app.application.use_cases.list_services import ListServicesUseCase
from app.infrastructure.content.mock_content import MockContentSource
from app.infrastructure.content.strapi_client import StrapiContentSource


@lru_cache
def get_content_source() -> ContentSourcePort:
    logger = logging.getLogger(__name__)
    logger.info("ENV=%s CONTENT_PROVIDER=%s", settings.ENV, settings.CONTENT_PROVIDER)

    if settings.CONTENT_PROVIDER.lower() == "mock":
        return MockContentSource()

    if not settings.CONTENT_API_BASE_URL:
        if settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockContentSource (CONTENT_API_BASE_URL missing, ENV=dev/local)")
            return MockContentSource()
        raise ValueError("CONTENT_API_BASE_URL is required to fetch services.")

    return StrapiContentSource()


def get_list_services_use_case() -> ListServicesUseCase:
    return ListServicesUseCase(source=get_content_source())


def get_service_use_case() -> GetServiceUseCase:
    return GetServiceUseCase(source=get_content_source())


def get_service_slugs_use_case() -> ListServiceSlugsUseCase:
    return ListServiceSlugsUseCase(source=get_content_source())
