from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from app import theme as theme_registry
from app.api.errors import ApiException
from app.api.responses import success_payload
from app.api.schemas import ApiErrorEnvelope, ThemeEnvelope, ThemesListEnvelope

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/themes", tags=["api-themes"])


def _parse_color_mode(value: str | None) -> theme_registry.ColorMode | None:
    if value is None:
        return None
    try:
        return theme_registry.ColorMode(value.strip().lower())
    except ValueError as exc:
        raise ApiException(
            status_code=400,
            code="invalid_color_mode",
            message="Color mode must be one of: light, dark.",
            details={"color_mode": value},
        ) from exc


@router.get(
    "",
    response_model=ThemesListEnvelope,
    responses={400: {"model": ApiErrorEnvelope}},
)
async def list_themes(
    request: Request,
    color_mode: str | None = None,
):
    requested_mode = _parse_color_mode(color_mode)
    themes = [
        theme
        for theme in theme_registry.list_themes()
        if requested_mode is None or theme.color_mode is requested_mode
    ]
    logger.debug(
        "api.themes.listed",
        extra={
            "event": "api.themes.listed",
            "color_mode": requested_mode.value if requested_mode else None,
            "theme_count": len(themes),
        },
    )
    return success_payload(
        request,
        data={
            "themes": [theme.to_summary() for theme in themes],
            "default_theme": theme_registry.DEFAULT_THEME_KEY,
        },
    )


@router.get(
    "/{key:path}",
    response_model=ThemeEnvelope,
)
async def get_theme(
    key: str,
    request: Request,
):
    fallback_applied = not theme_registry.is_registered_theme(key)
    if fallback_applied:
        logger.info(
            "api.themes.fallback_resolved",
            extra={
                "event": "api.themes.fallback_resolved",
                "requested_key": key,
                "resolved_key": theme_registry.resolve_theme(key),
            },
        )
    return success_payload(
        request,
        data={
            "theme": theme_registry.get_theme(key).to_summary(),
            "requested_key": key,
            "fallback_applied": fallback_applied,
        },
    )
