"""
htmx_demo.error_handlers

Purpose:
    Register global exception handlers to return stable ErrorResponse objects.
    Ensures request_id is always included.

Notes:
    - HtmxHeaderError (e.g. a trigger detail that can't be JSON-encoded) is a
      server-side bug, so it maps to 500 but keeps its specific error_code.
    - Any HX-* headers a failed pipeline managed to set live on the route's
      response object, which is discarded here; the error response starts clean.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from htmx_demo.contracts.error_contract import DemoErrorCode, ErrorResponse
from htmx_demo.logging.request_context import request_id_ctx_var
from htmx_headers.errors import HtmxHeaderError

logger = logging.getLogger(__name__)


def _get_request_id(request: Request) -> str:
    rid = getattr(getattr(request, "state", None), "request_id", None)
    if isinstance(rid, str) and rid:
        return rid

    rid2 = request_id_ctx_var.get()
    if isinstance(rid2, str) and rid2:
        return rid2

    return "-"


def register_error_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers on the FastAPI app.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        rid = _get_request_id(request)
        safe_errors = jsonable_encoder(exc.errors())
        for err in safe_errors:
            if isinstance(err, dict):
                # Drop ctx to keep payload minimal/stable
                err.pop("ctx", None)

        payload = ErrorResponse(
            request_id=rid,
            error_code=DemoErrorCode.BAD_REQUEST,
            message="Request validation failed",
            details={"errors": safe_errors},
        )
        return JSONResponse(status_code=422, content=payload.model_dump(mode="json"))

    @app.exception_handler(HtmxHeaderError)
    async def handle_header_error(request: Request, exc: HtmxHeaderError) -> JSONResponse:
        logger.error("Failed to build htmx response headers: %s", exc)

        rid = _get_request_id(request)
        payload = ErrorResponse(
            request_id=rid,
            error_code=exc.error_code,
            message=exc.message,
            details=jsonable_encoder(exc.details) if exc.details else None,
        )
        return JSONResponse(status_code=500, content=payload.model_dump(mode="json"))

    @app.exception_handler(Exception)
    async def handle_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception in demo request", exc_info=exc)

        rid = _get_request_id(request)
        payload = ErrorResponse(
            request_id=rid,
            error_code=DemoErrorCode.INTERNAL_ERROR,
            message="Internal server error",
            details=None,
        )
        return JSONResponse(status_code=500, content=payload.model_dump(mode="json"))
