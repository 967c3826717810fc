"""
htmx_headers.decorators.trigger

Purpose:
    HX-Trigger, HX-Trigger-After-Settle and HX-Trigger-After-Swap decorators.
    See: https://htmx.org/headers/hx-trigger/

Notes:
    - `when` picks the header; TriggerTiming values are the header names.
    - trigger_with_detail encodes before writing, so a bad detail leaves the
      header untouched.
"""

from __future__ import annotations

import logging

from htmx_headers.errors import SerializationError
from htmx_headers.models.enums import TriggerTiming
from htmx_headers.models.trigger import TriggerEvent, build_event_map, encode_event_map
from htmx_headers.pipeline import HeaderDecorator, HeaderSink, add_custom_header

logger = logging.getLogger(__name__)


def trigger(when: TriggerTiming, *event_names: str) -> HeaderDecorator:
    return add_custom_header(TriggerTiming(when).header, ", ".join(event_names))


def trigger_with_detail(when: TriggerTiming, *events: TriggerEvent) -> HeaderDecorator:
    header = TriggerTiming(when).header

    def _decorate(headers: HeaderSink) -> None:
        event_map = build_event_map(events)
        try:
            value = encode_event_map(event_map)
        except (TypeError, ValueError) as e:
            logger.warning("Failed to encode %s events %s: %s", header, sorted(event_map), e)
            raise SerializationError(
                message=f"error marshalling trigger events JSON: {e}",
                header=header,
                details={"events": sorted(event_map)},
            ) from e
        headers[header] = value

    _decorate.__qualname__ = f"trigger_with_detail({header!r})"
    return _decorate
