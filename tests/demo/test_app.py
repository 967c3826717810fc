"""
tests.demo.test_app

Purpose:
    App wiring: health, request id + Vary middleware, header error envelope, settings.
"""

from __future__ import annotations

from fastapi.responses import HTMLResponse

from htmx_demo.main import create_app
from htmx_demo.settings import get_settings
from htmx_headers import TriggerEvent, TriggerTiming, location, push_url, set_response_headers, trigger_with_detail


def test_health_ok(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}
    assert r.headers.get("x-request-id")


def test_request_id_is_echoed(client) -> None:
    r = client.get("/health", headers={"X-Correlation-Id": "abc-123"})
    assert r.headers["x-request-id"] == "abc-123"


def test_vary_on_hx_request(client) -> None:
    r = client.get("/", headers={"HX-Request": "true"})
    assert "HX-Request" in r.headers["vary"]


def test_header_error_returns_envelope(client_factory) -> None:
    app = create_app()

    @app.get("/broken")
    def broken() -> HTMLResponse:
        response = HTMLResponse("partial")
        set_response_headers(
            response,
            location("/somewhere"),
            trigger_with_detail(TriggerTiming.IMMEDIATELY, TriggerEvent("bad", object())),
        )
        return response

    r = client_factory(app).get("/broken", headers={"X-Request-Id": "rid-1"})
    assert r.status_code == 500
    data = r.json()
    assert data["request_id"] == "rid-1"
    assert data["error_code"] == "SERIALIZATION_FAILED"
    assert "hx-location" not in r.headers


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("HTMX_DEMO_PORT", "8081")
    monkeypatch.setenv("HTMX_DEMO_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.port == 8081
    assert settings.log_level == "DEBUG"
    assert settings.host == "127.0.0.1"


def test_settings_defaults(monkeypatch) -> None:
    for name in ("HTMX_DEMO_HOST", "HTMX_DEMO_PORT", "HTMX_DEMO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.port == 3000
    assert settings.log_level == "INFO"


def test_non_latin1_header_value_returns_envelope(client_factory) -> None:
    app = create_app()

    @app.get("/bad-url")
    def bad_url() -> HTMLResponse:
        response = HTMLResponse("partial")
        set_response_headers(response, push_url("/café/✓"))
        return response

    r = client_factory(app).get("/bad-url")
    assert r.status_code == 500
    assert r.json()["error_code"] == "INVALID_HEADER_VALUE"
    assert "hx-push-url" not in r.headers
