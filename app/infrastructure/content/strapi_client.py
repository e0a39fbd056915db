from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from app.application.exceptions import ContentContractError, ContentStatusError, ContentUnavailableError
from app.application.ports.content_source import ContentSourcePort
from app.core.config import settings


class StrapiContentSource(ContentSourcePort):
    def __init__(
        self,
        base_url: str | None = None,
        services_path: str | None = None,
        api_token: str | None = None,
        cache_ttl_seconds: int | None = None,
        cache_max_entries: int | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = (base_url or settings.CONTENT_API_BASE_URL).rstrip("/")
        self._services_path = "/" + (services_path or settings.CONTENT_API_SERVICES_PATH).lstrip("/")
        self._api_token = api_token if api_token is not None else settings.CONTENT_API_TOKEN
        self._cache_ttl = settings.CONTENT_CACHE_TTL_SECONDS if cache_ttl_seconds is None else cache_ttl_seconds
        self._cache_max_entries = settings.CONTENT_CACHE_MAX_ENTRIES if cache_max_entries is None else cache_max_entries
        self._client = client or httpx.Client(timeout=settings.CONTENT_API_TIMEOUT)
        self._cache: dict[tuple[tuple[str, str], ...], tuple[float, list[Any]]] = {}
        self._logger = logging.getLogger(__name__)

        if not self._base_url:
            raise ValueError("CONTENT_API_BASE_URL is required for the Strapi content source")

    def fetch_services(self) -> list[Any]:
        return self._get({"populate": "*"})

    def fetch_service_by_slug(self, slug: str) -> list[Any]:
        return self._get({"filters[slug][$eq]": slug, "populate": "*"})

    def fetch_slugs(self) -> list[Any]:
        return self._get({"fields": "slug"})

    def clear_cache(self) -> None:
        self._cache.clear()

    def _get(self, params: dict[str, str]) -> list[Any]:
        cache_key = tuple(sorted(params.items()))
        cached = self._cache.get(cache_key)
        if cached and time.monotonic() - cached[0] < self._cache_ttl:
            return cached[1]

        url = f"{self._base_url}{self._services_path}"
        headers = {"Authorization": f"Bearer {self._api_token}"} if self._api_token else {}

        try:
            response = self._client.get(url, params=params, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._logger.error(
                "Content API returned an error status",
                extra={"url": url, "status": e.response.status_code},
            )
            raise ContentStatusError(f"Content API responded with {e.response.status_code}") from e
        except httpx.HTTPError as e:
            self._logger.error("Content API request failed", extra={"url": url, "error": str(e)})
            raise ContentUnavailableError("Content API request failed") from e

        try:
            body = response.json()
        except ValueError as e:
            self._logger.error("Content API body is not JSON", extra={"url": url, "error": str(e)})
            raise ContentContractError("Content API returned a non-JSON body") from e

        records = extract_records(body)
        self._logger.info("Content fetched", extra={"url": url, "count": len(records)})

        if self._cache_ttl > 0:
            self._store(cache_key, records)
        return records

    def _store(self, cache_key: tuple[tuple[str, str], ...], records: list[Any]) -> None:
        now = time.monotonic()
        for key in [key for key, (stored_at, _) in self._cache.items() if now - stored_at >= self._cache_ttl]:
            del self._cache[key]
        self._cache.pop(cache_key, None)
        # dict order is write order, so the first key is the oldest entry
        while self._cache and len(self._cache) >= self._cache_max_entries:
            del self._cache[next(iter(self._cache))]
        self._cache[cache_key] = (now, records)


def extract_records(body: Any) -> list[Any]:
    """Unwrap the `{"data": [...], "meta": {...}}` envelope."""
    if isinstance(body, dict):
        data = body.get("data")
        if isinstance(data, list):
            return data
        return []
    if isinstance(body, list):
        return body
    return []
