from htmx_headers.models.enums import SwapStrategy, TriggerTiming, string_to_swap, swap_from_string
from htmx_headers.models.location import LocationContext
from htmx_headers.models.trigger import TriggerEvent, build_event_map, encode_event_map

__all__ = [
    "SwapStrategy",
    "TriggerTiming",
    "swap_from_string",
    "string_to_swap",
    "LocationContext",
    "TriggerEvent",
    "build_event_map",
    "encode_event_map",
]
