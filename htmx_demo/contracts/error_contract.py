"""
htmx_demo.contracts.error_contract

Purpose:
    Stable error envelope for the demo service.
    Used by global exception handlers to ensure consistent client responses.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from htmx_headers.contracts.error_codes import HeaderErrorCode


class DemoErrorCode(str, Enum):
    INTERNAL_ERROR = "INTERNAL_ERROR"
    BAD_REQUEST = "BAD_REQUEST"


class ErrorResponse(BaseModel):
    request_id: str = Field(..., description="Request correlation id for debugging")
    error_code: DemoErrorCode | HeaderErrorCode = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Optional structured details")
