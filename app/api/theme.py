from __future__ import annotations

from fastapi import APIRouter, Header, Request, Response

from app.api.schemas import ThemeSchema
from app.application.utils.theme import get_preferred_theme, prefers_dark_scheme, set_preference, toggle
from app.core.config import settings
from app.domain.entities.theme import Theme


router = APIRouter()


def _current_theme(request: Request, color_scheme: str | None) -> Theme:
    return get_preferred_theme(
        request.cookies.get(settings.THEME_COOKIE_NAME),
        prefers_dark_scheme(color_scheme),
    )


@router.get("/theme", response_model=ThemeSchema)
def read_theme(
    request: Request,
    color_scheme: str | None = Header(None, alias="Sec-CH-Prefers-Color-Scheme"),
) -> ThemeSchema:
    return ThemeSchema(theme=_current_theme(request, color_scheme))


@router.post("/theme", response_model=ThemeSchema)
def save_theme(payload: ThemeSchema, response: Response) -> ThemeSchema:
    set_preference(response, payload.theme)
    return payload


@router.post("/theme/toggle", response_model=ThemeSchema)
def toggle_theme(
    request: Request,
    response: Response,
    color_scheme: str | None = Header(None, alias="Sec-CH-Prefers-Color-Scheme"),
) -> ThemeSchema:
    theme = toggle(_current_theme(request, color_scheme))
    set_preference(response, theme)
    return ThemeSchema(theme=theme)
