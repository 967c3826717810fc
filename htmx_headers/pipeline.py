"""
htmx_headers.pipeline

Purpose:
    Apply an ordered list of header decorators to one outbound response,
    and remove the HX-* headers this library owns.

Formal Model:
    decorator dᵢ: HeaderSink -> None (raises HtmxHeaderError on failure)

    set_response_headers(r, d₁..dₙ) = d₁(r); d₂(r); ...; dₙ(r)

Notes:
    - Order matters: later decorators overwrite headers set by earlier ones.
    - The first decorator that raises stops the pipeline. Headers already set
      are left in place (no rollback); use remove_hx_headers to clear them.
    - `target` may be a Starlette/FastAPI Response (its `.headers` is used)
      or any header mapping (MutableHeaders, dict).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from htmx_headers.contracts.header_names import KNOWN_HX_HEADERS
from htmx_headers.errors import HeaderValueError, HtmxHeaderError, PreconditionError

logger = logging.getLogger(__name__)


class HeaderSink(Protocol):
    def __setitem__(self, key: str, value: str) -> None: ...

    def __delitem__(self, key: str) -> None: ...

    def __contains__(self, key: object) -> bool: ...


# Type aliases
HeaderDecorator = Callable[[HeaderSink], None]


def resolve_sink(target: Any) -> HeaderSink:
    """
    Return the header mapping for a response-or-headers target.

    Raises:
        PreconditionError if target is None (caller bug).
    """
    if target is None:
        raise PreconditionError()

    headers = getattr(target, "headers", None)
    if headers is not None:
        return headers
    return target


def add_custom_header(key: str, value: str) -> HeaderDecorator:
    """
    Build a decorator that sets one literal header.

    Every higher-level decorator is composed from this. Values must be
    latin-1 encodable (HTTP header bytes); anything else raises HeaderValueError
    for every sink, not only the ones that encode eagerly.
    """

    def _decorate(headers: HeaderSink) -> None:
        try:
            value.encode("latin-1")
        except UnicodeEncodeError as e:
            raise HeaderValueError(
                message=f"value for {key} is not latin-1 encodable: {e.reason} at position {e.start}",
                header=key,
                value=value,
            ) from e
        headers[key] = value

    _decorate.__qualname__ = f"add_custom_header({key!r})"
    return _decorate


def set_response_headers(target: Any, *decorators: HeaderDecorator) -> None:
    """
    Apply decorators to the response headers, in order.

    Args:
        target: Response (anything with `.headers`) or a header mapping
        decorators: Header decorators to apply

    Raises:
        PreconditionError: target is None
        HtmxHeaderError: re-raised from the first failing decorator; the
            remaining decorators are not applied

    Example:
        set_response_headers(response, retarget("#error"), reswap(SwapStrategy.OUTER_HTML))
    """
    headers = resolve_sink(target)

    for index, decorator in enumerate(decorators):
        try:
            decorator(headers)
        except HtmxHeaderError as e:
            logger.warning(
                "Header pipeline aborted at decorator %d/%d (%s): %s",
                index + 1,
                len(decorators),
                getattr(decorator, "__qualname__", repr(decorator)),
                e,
            )
            raise
        logger.debug("Applied header decorator %s", getattr(decorator, "__qualname__", repr(decorator)))


def remove_hx_headers(target: Any) -> None:
    """
    Remove every HX-* header in KNOWN_HX_HEADERS from the response.

    Headers that are not set are skipped; non-HX headers are left untouched.

    Raises:
        PreconditionError if target is None.
    """
    headers = resolve_sink(target)

    removed = []
    for name in KNOWN_HX_HEADERS:
        if name in headers:
            del headers[name]
            removed.append(name)

    if removed:
        logger.debug("Removed HX headers: %s", ", ".join(removed))
