"""
htmx_headers.models.enums

Purpose:
    Enumerations with a fixed string form on the wire.

Design Notes:
    - Enum string values ARE the header encoding; keep them stable.
    - SwapStrategy values match hx-swap exactly (mixed case for innerHTML/outerHTML).
    - TriggerTiming values are the header names each timing writes to.
"""

from __future__ import annotations

import logging
from enum import Enum

from htmx_headers.contracts.header_names import HxHeaders
from htmx_headers.errors import SwapValidationError

logger = logging.getLogger(__name__)

_h = HxHeaders()


class SwapStrategy(str, Enum):
    """
    How htmx swaps returned content relative to the target element.

    See: https://htmx.org/attributes/hx-swap/
    """

    INNER_HTML = "innerHTML"
    OUTER_HTML = "outerHTML"
    BEFORE_BEGIN = "beforebegin"
    AFTER_BEGIN = "afterbegin"
    BEFORE_END = "beforeend"
    AFTER_END = "afterend"
    DELETE = "delete"
    NONE = "none"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "SwapStrategy":
        return cls.INNER_HTML

    @classmethod
    def parse(cls, value: str) -> "SwapStrategy":
        """
        Strict decode. Raises SwapValidationError (carrying the fallback) on unknown input.
        """
        strategy, err = swap_from_string(value)
        if err is not None:
            raise err
        return strategy


def swap_from_string(value: str) -> tuple[SwapStrategy, SwapValidationError | None]:
    """
    Decode an hx-swap string.

    Returns:
        (strategy, None) for one of the eight canonical forms, otherwise
        (SwapStrategy.INNER_HTML, SwapValidationError). The caller decides
        whether the error is fatal.
    """
    try:
        return SwapStrategy(value), None
    except ValueError:
        fallback = SwapStrategy.default()
        logger.debug("Unknown swap value %r, falling back to %s", value, fallback)
        return fallback, SwapValidationError(
            message=f"invalid Swap value: {value!r}",
            value=value,
            fallback=fallback,
        )


# Kept for callers that prefer the "string to X" spelling.
string_to_swap = swap_from_string


class TriggerTiming(str, Enum):
    """
    When htmx should fire the triggered events.

    Notes:
        - IMMEDIATELY: as soon as the response is received.
        - AFTER_SETTLE: after the settle step.
        - AFTER_SWAP: after the swap step.
    """

    IMMEDIATELY = _h.trigger
    AFTER_SETTLE = _h.trigger_after_settle
    AFTER_SWAP = _h.trigger_after_swap

    @property
    def header(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
