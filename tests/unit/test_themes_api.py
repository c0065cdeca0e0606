from __future__ import annotations

import logging

from fastapi.testclient import TestClient

from app.main import app
from app.theme import THEMES
from app.web.middleware import REQUEST_ID_HEADER


def test_list_themes_endpoint_returns_catalog_in_declaration_order() -> None:
    client = TestClient(app)

    response = client.get("/api/v1/themes", headers={REQUEST_ID_HEADER: "req-themes"})

    assert response.status_code == 200
    body = response.json()
    assert body["meta"] == {"request_id": "req-themes"}
    assert body["data"]["default_theme"] == "wechat"
    themes = body["data"]["themes"]
    assert [item["value"] for item in themes] == [theme.value for theme in THEMES]
    assert themes[0] == {
        "label": "微信公众号",
        "value": "wechat",
        "icon": "📱",
        "color_mode": "light",
        "description": "适合微信公众号文章排版",
    }


def test_list_themes_endpoint_filters_by_color_mode() -> None:
    client = TestClient(app)

    response = client.get("/api/v1/themes?color_mode=dark")

    assert response.status_code == 200
    assert [item["value"] for item in response.json()["data"]["themes"]] == ["dark", "dracula"]


def test_list_themes_endpoint_rejects_unknown_color_mode() -> None:
    client = TestClient(app)

    response = client.get("/api/v1/themes?color_mode=sepia")

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "invalid_color_mode"
    assert error["details"] == {"color_mode": "sepia"}


def test_get_theme_endpoint_returns_registered_theme() -> None:
    client = TestClient(app)

    response = client.get("/api/v1/themes/dracula")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["requested_key"] == "dracula"
    assert data["fallback_applied"] is False
    assert data["theme"]["color_mode"] == "dark"
    assert data["theme"]["icon"] == "🧛"


def test_get_theme_endpoint_falls_back_for_unknown_key(caplog) -> None:
    client = TestClient(app)

    with caplog.at_level(logging.INFO, logger="app.api.routers.themes"):
        response = client.get("/api/v1/themes/does-not-exist")
    fallback = client.get("/api/v1/themes/wechat").json()["data"]["theme"]

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["requested_key"] == "does-not-exist"
    assert data["fallback_applied"] is True
    assert data["theme"] == fallback
    assert any(
        getattr(record, "event", None) == "api.themes.fallback_resolved"
        for record in caplog.records
    )


def test_get_theme_endpoint_falls_back_for_keys_containing_slashes() -> None:
    client = TestClient(app)

    for path, requested_key in (
        ("/api/v1/themes/doocs/md", "doocs/md"),
        ("/api/v1/themes/doocs%2Fmd", "doocs/md"),
    ):
        response = client.get(path)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["requested_key"] == requested_key
        assert data["fallback_applied"] is True
        assert data["theme"]["value"] == "wechat"


def test_unknown_api_route_uses_error_envelope() -> None:
    client = TestClient(app)

    response = client.get("/api/v1/palettes")

    assert response.status_code == 404
    body = response.json()
    assert body["error"]["code"] == "http_404"
    assert "request_id" in body["meta"]


def test_unknown_non_api_route_keeps_default_error_shape() -> None:
    client = TestClient(app)

    response = client.get("/palettes")

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}
