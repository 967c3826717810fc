"""
htmx_headers.errors

Purpose:
    Exception types raised by header decorators and the pipeline.
    Decorators raise; set_response_headers stops at the first raise and lets it propagate.

Notes:
    - PreconditionError is a caller bug (no response/header sink supplied).
    - SerializationError wraps the underlying json error via `raise ... from`.
    - HeaderValueError: a literal header value HTTP cannot carry (non latin-1).
    - SwapValidationError keeps the fallback SwapStrategy so callers can still
      recover the default value after catching it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from htmx_headers.contracts.error_codes import HeaderErrorCode

if TYPE_CHECKING:
    from htmx_headers.models.enums import SwapStrategy


@dataclass(eq=False)
class HtmxHeaderError(Exception):
    error_code: HeaderErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


@dataclass(eq=False)
class PreconditionError(HtmxHeaderError):
    error_code: HeaderErrorCode = HeaderErrorCode.PRECONDITION_FAILED
    message: str = "response header sink must not be None"


@dataclass(eq=False)
class SerializationError(HtmxHeaderError):
    error_code: HeaderErrorCode = HeaderErrorCode.SERIALIZATION_FAILED
    message: str = "value could not be encoded as JSON"
    header: str | None = None


@dataclass(eq=False)
class SwapValidationError(HtmxHeaderError, ValueError):
    error_code: HeaderErrorCode = HeaderErrorCode.INVALID_SWAP
    message: str = "invalid swap value"
    value: str = ""
    fallback: SwapStrategy | None = field(default=None, repr=False)


@dataclass(eq=False)
class HeaderValueError(HtmxHeaderError, ValueError):
    error_code: HeaderErrorCode = HeaderErrorCode.INVALID_HEADER_VALUE
    message: str = "header value is not latin-1 encodable"
    header: str | None = None
    value: str = ""
