from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.service import Service

UNTITLED_GROUP_KEY = "#"


@dataclass(frozen=True)
class ServiceGroup:
    letter_key: str
    members: tuple[Service, ...] = ()
