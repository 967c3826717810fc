"""
htmx_demo.main

Purpose:
    FastAPI application entrypoint for the htmx headers demo.
"""

from __future__ import annotations

from fastapi import FastAPI

from htmx_demo.contracts.request_id_policy import RequestIdPolicy
from htmx_demo.error_handlers import register_error_handlers
from htmx_demo.logging.logging_config import configure_logging
from htmx_demo.middleware.request_id import RequestIdMiddleware
from htmx_demo.routes import demo_router
from htmx_demo.settings import Settings, get_settings


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=settings.service_version)

    app.add_middleware(RequestIdMiddleware, policy=RequestIdPolicy())

    register_error_handlers(app)

    app.include_router(demo_router)

    return app
