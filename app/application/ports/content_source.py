from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ContentSourcePort(ABC):
    @abstractmethod
    def fetch_services(self) -> list[Any]:
        """Fetch raw service records. Raises ContentUnavailableError on transport failure."""
        raise NotImplementedError

    @abstractmethod
    def fetch_service_by_slug(self, slug: str) -> list[Any]:
        """Fetch raw records whose slug equals `slug` (normally zero or one)."""
        raise NotImplementedError

    @abstractmethod
    def fetch_slugs(self) -> list[Any]:
        """Fetch raw records carrying only the slug field."""
        raise NotImplementedError
