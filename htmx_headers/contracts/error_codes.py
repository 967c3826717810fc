"""
htmx_headers.contracts.error_codes

Purpose:
    Stable, machine-readable error codes raised by the header helpers.
    Web apps can surface these directly in their error envelopes.
"""

from __future__ import annotations

from enum import Enum


class HeaderErrorCode(str, Enum):
    PRECONDITION_FAILED = "PRECONDITION_FAILED"
    SERIALIZATION_FAILED = "SERIALIZATION_FAILED"
    INVALID_SWAP = "INVALID_SWAP"
    INVALID_HEADER_VALUE = "INVALID_HEADER_VALUE"
