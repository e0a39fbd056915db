from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.schemas import (
    ServiceCardSchema,
    ServiceDetailSchema,
    ServiceGroupSchema,
    ServiceListResponseSchema,
)
from app.application.use_cases.get_service import GetServiceUseCase, ListServiceSlugsUseCase
from app.application.use_cases.list_services import ListServicesUseCase
from app.application.utils.service_index import as_list
from app.core.config import settings
from app.wiring.dependencies import (
    get_list_services_use_case,
    get_service_slugs_use_case,
    get_service_use_case,
)


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/services", response_model=ServiceListResponseSchema)
def list_services(
    use_case: ListServicesUseCase = Depends(get_list_services_use_case),
) -> ServiceListResponseSchema:
    listing = use_case.execute()
    media_base = settings.CONTENT_MEDIA_BASE_URL
    return ServiceListResponseSchema(
        services=[ServiceCardSchema.from_entity(service, media_base) for service in as_list(listing.services)],
        catalog=[ServiceGroupSchema.from_entity(group, media_base) for group in listing.groups],
        error=listing.error,
    )


@router.get("/services/featured", response_model=ServiceListResponseSchema)
def featured_services(
    use_case: ListServicesUseCase = Depends(get_list_services_use_case),
) -> ServiceListResponseSchema:
    listing = use_case.featured(settings.FEATURED_SERVICES_LIMIT)
    media_base = settings.CONTENT_MEDIA_BASE_URL
    return ServiceListResponseSchema(
        services=[ServiceCardSchema.from_entity(service, media_base) for service in listing.services],
        error=listing.error,
    )


@router.get("/services/slugs", response_model=list[str])
def service_slugs(
    use_case: ListServiceSlugsUseCase = Depends(get_service_slugs_use_case),
) -> list[str]:
    return use_case.execute()


@router.get("/services/{slug}", response_model=ServiceDetailSchema)
def service_detail(
    slug: str,
    use_case: GetServiceUseCase = Depends(get_service_use_case),
) -> ServiceDetailSchema:
    service = use_case.execute(slug)
    if service is None:
        logger.info("Service not found", extra={"slug": slug})
        raise HTTPException(status_code=404, detail="Service not found")
    return ServiceDetailSchema.from_entity(service, settings.CONTENT_MEDIA_BASE_URL)
