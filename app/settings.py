from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_host: str
    app_port: int
    app_reload: bool
    log_level: str
    log_format: str
    log_redact_fields: str
    log_uvicorn_access: bool
    log_requests: bool
    log_request_skip_paths: str


def load_settings() -> Settings:
    return Settings(
        app_name=_env_str("APP_NAME", "mdthemes"),
        app_host=_env_str("APP_HOST", "0.0.0.0"),
        app_port=_env_int("APP_PORT", 8000),
        app_reload=_env_bool("APP_RELOAD", False),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
        log_format=_env_str("LOG_FORMAT", "console").lower(),
        log_redact_fields=_env_str("LOG_REDACT_FIELDS", ""),
        log_uvicorn_access=_env_bool("LOG_UVICORN_ACCESS", False),
        log_requests=_env_bool("LOG_REQUESTS", True),
        log_request_skip_paths=_env_str("LOG_REQUEST_SKIP_PATHS", "/healthz"),
    )


settings = load_settings()
