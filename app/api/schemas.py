from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel


class ApiMeta(BaseModel):
    request_id: str | None = None


class ApiErrorData(BaseModel):
    code: str
    message: str
    details: Any = None


class ApiErrorEnvelope(BaseModel):
    error: ApiErrorData
    meta: ApiMeta


class ThemeItem(BaseModel):
    label: str
    value: str
    icon: str
    color_mode: Literal["light", "dark"]
    description: str


class ThemesListData(BaseModel):
    themes: list[ThemeItem]
    default_theme: str


class ThemesListEnvelope(BaseModel):
    data: ThemesListData
    meta: ApiMeta


class ThemeLookupData(BaseModel):
    theme: ThemeItem
    requested_key: str
    fallback_applied: bool


class ThemeEnvelope(BaseModel):
    data: ThemeLookupData
    meta: ApiMeta
