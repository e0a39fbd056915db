from __future__ import annotations

from fastapi import Response

from app.core.config import settings
from app.domain.entities.theme import Theme


def get_preferred_theme(saved: str | None, prefers_dark: bool = False) -> Theme:
    """Saved choice wins; without one, follow the client's color-scheme preference."""
    if saved == Theme.dark.value:
        return Theme.dark
    if saved:
        return Theme.light
    return Theme.dark if prefers_dark else Theme.light


def prefers_dark_scheme(header_value: str | None) -> bool:
    """Parse the Sec-CH-Prefers-Color-Scheme client hint."""
    if not header_value:
        return False
    return header_value.strip().strip('"').lower() == "dark"


def toggle(theme: Theme) -> Theme:
    return Theme.light if theme is Theme.dark else Theme.dark


def set_preference(response: Response, theme: Theme) -> None:
    response.set_cookie(
        key=settings.THEME_COOKIE_NAME,
        value=theme.value,
        max_age=settings.THEME_COOKIE_MAX_AGE,
        samesite="lax",
    )
