from __future__ import annotations

import json
import logging
import re

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.logging_config import ConsoleLogFormatter, JsonLogFormatter, parse_redact_fields
from app.logging_context import set_request_id
from app.main import app
from app.web.middleware import (
    DEFAULT_SKIP_PATHS,
    REQUEST_ID_HEADER,
    RequestLoggingMiddleware,
    parse_skip_paths,
)


def _record(**extra) -> logging.LogRecord:
    return logging.makeLogRecord(
        {
            "name": "tests.logging",
            "levelno": logging.INFO,
            "levelname": "INFO",
            "msg": "api.themes.listed",
            "args": (),
            **extra,
        }
    )


def test_json_log_formatter_redacts_sensitive_fields() -> None:
    formatter = JsonLogFormatter(redact_fields=parse_redact_fields("theme_secret_key"))
    record = _record(
        password="very-secret",
        theme_secret_key="hidden",
        payload={"csrf_token": "token-value", "safe": "ok"},
        items=[{"api_key": "k"}],
        color_message="ANSI-noise",
    )

    payload = json.loads(formatter.format(record))

    assert payload["event"] == "api.themes.listed"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "tests.logging"
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}Z", payload["timestamp"])
    assert payload["password"] == "[REDACTED]"
    assert payload["theme_secret_key"] == "[REDACTED]"
    assert payload["payload"]["csrf_token"] == "[REDACTED]"
    assert payload["payload"]["safe"] == "ok"
    assert payload["items"] == [{"api_key": "[REDACTED]"}]
    assert "color_message" not in payload


def test_json_log_formatter_includes_request_id_from_context() -> None:
    formatter = JsonLogFormatter()
    set_request_id("req-42")
    try:
        payload = json.loads(formatter.format(_record(theme_count=17)))
    finally:
        set_request_id(None)

    assert payload["request_id"] == "req-42"
    assert payload["theme_count"] == 17


def test_json_log_formatter_keeps_non_ascii_text() -> None:
    line = JsonLogFormatter().format(_record(label="微信公众号"))

    assert "微信公众号" in line


def test_console_log_formatter_renders_key_value_pairs() -> None:
    line = ConsoleLogFormatter().format(_record(requested_key="nope", token="abc"))

    assert "INFO tests.logging api.themes.listed" in line
    assert "requested_key=nope" in line
    assert "token=[REDACTED]" in line


def test_parse_redact_fields_normalizes_case_and_blanks() -> None:
    assert parse_redact_fields(" API_Key , ,Session_Id ") == frozenset({"api_key", "session_id"})


def test_request_logging_middleware_sets_request_id_header() -> None:
    client = TestClient(app)

    response = client.get("/api/v1/themes", headers={REQUEST_ID_HEADER: "request-123"})

    assert response.status_code == 200
    assert response.headers[REQUEST_ID_HEADER] == "request-123"


def test_request_logging_middleware_generates_request_id_when_missing() -> None:
    client = TestClient(app)

    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.headers[REQUEST_ID_HEADER]


def test_parse_skip_paths_trims_and_discards_empty_segments() -> None:
    assert parse_skip_paths(" /healthz , , /static/ ") == ("/healthz", "/static/")


def test_request_logging_middleware_skips_healthz_by_default(caplog) -> None:
    sample_app = FastAPI()
    sample_app.add_middleware(RequestLoggingMiddleware)

    @sample_app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @sample_app.get("/themes")
    async def themes() -> dict[str, str]:
        return {"status": "ok"}

    client = TestClient(sample_app)
    with caplog.at_level(logging.INFO, logger="app.web.middleware"):
        client.get("/healthz")
        client.get("/themes")

    logged_paths = [
        record.path
        for record in caplog.records
        if getattr(record, "event", None) == "request.started"
    ]
    assert DEFAULT_SKIP_PATHS == ("/healthz",)
    assert logged_paths == ["/themes"]
