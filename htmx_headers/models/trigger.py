# htmx_headers/models/trigger.py
# Purpose: TriggerEvent (name + JSON-able detail) and the name -> detail encoder used by HX-Trigger*.

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class TriggerEvent:
    """
    A client-side event fired by htmx, with an optional detail payload.

    `detail` can be anything json can encode: str, number, bool, None, list or dict.
    """

    name: str
    detail: Any = None


def build_event_map(events: Iterable[TriggerEvent]) -> dict[str, Any]:
    # Later events win on duplicate names.
    event_map: dict[str, Any] = {}
    for event in events:
        event_map[event.name] = event.detail
    return event_map


def encode_event_map(event_map: dict[str, Any]) -> str:
    """
    Compact, strict JSON for a header value (NaN/Infinity are rejected). Lets json's TypeError/ValueError propagate
    (unsupported types, circular references); callers wrap them.
    """
    return json.dumps(event_map, separators=(",", ":"), ensure_ascii=True, allow_nan=False)
