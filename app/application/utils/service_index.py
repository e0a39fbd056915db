from __future__ import annotations

import logging
from collections.abc import Sequence

from app.domain.entities.service import Service
from app.domain.entities.service_group import UNTITLED_GROUP_KEY, ServiceGroup

logger = logging.getLogger(__name__)


def as_list(services: Sequence[Service]) -> Sequence[Service]:
    """Grid view: the services exactly as given, no sorting."""
    return services


def featured(services: Sequence[Service], limit: int = 3) -> list[Service]:
    return list(services[: max(limit, 0)])


def letter_key(service: Service) -> str:
    title = service.title
    if not title or service.untitled:
        return UNTITLED_GROUP_KEY
    first = title[0]
    upper = first.upper()
    # Some characters expand when upper-cased ("ß" -> "SS"); keep the key one character
    return upper if len(upper) == 1 else first


def group_by_first_letter(services: Sequence[Service]) -> list[ServiceGroup]:
    """Catalog view: services grouped by the first letter of their title.

    Groups are ordered by key codepoint, members keep their input order.
    Untitled services go under "#".
    """
    if services is None:
        raise TypeError("services must be a sequence, not None")

    grouped: dict[str, list[Service]] = {}
    for service in services:
        grouped.setdefault(letter_key(service), []).append(service)

    return [ServiceGroup(letter_key=key, members=tuple(grouped[key])) for key in sorted(grouped)]


def build_slug_index(services: Sequence[Service]) -> dict[str, Service]:
    """Slug lookup table. The first service with a given slug wins."""
    index: dict[str, Service] = {}
    for service in services:
        if service.slug in index:
            logger.warning(
                "Duplicate service slug ignored",
                extra={"slug": service.slug, "reason": f"id={service.id} shadowed by id={index[service.slug].id}"},
            )
            continue
        index[service.slug] = service
    return index
