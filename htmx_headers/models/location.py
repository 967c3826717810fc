"""
htmx_headers.models.location

Purpose:
    Optional context sent alongside an HX-Location client-side redirect.
    See: https://htmx.org/headers/hx-location/

Notes:
    - All fields are optional; unset or empty fields are omitted from the JSON.
    - `path` is not a field here; it is supplied per call and always present in output.
    - `values` / `headers` accept a pre-encoded string or a JSON-able mapping.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from htmx_headers.contracts.header_names import HxHeaders
from htmx_headers.errors import SerializationError
from htmx_headers.models.enums import SwapStrategy

logger = logging.getLogger(__name__)

_h = HxHeaders()


class LocationContext(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str | None = Field(default=None, description="The source element of the request")
    event: str | None = Field(default=None, description="An event that triggered the request")
    handler: str | None = Field(default=None, description="A callback that will handle the response HTML")
    target: str | None = Field(default=None, description="The target to swap the response into")
    swap: SwapStrategy | None = Field(default=None, description="How the response is swapped in relative to the target")
    values: str | dict[str, Any] | None = Field(default=None, description="Values to submit with the request")
    headers: str | dict[str, Any] | None = Field(default=None, description="Headers to submit with the request")
    select: str | None = Field(default=None, description="Selects the content to swap from the response")

    def to_payload(self, path: str) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for name, value in self.model_dump(mode="python").items():
            if value is None or value == "" or value == {}:
                continue
            if isinstance(value, SwapStrategy):
                value = value.value
            payload[name] = value
        payload["path"] = path
        return payload

    def to_header_value(self, path: str) -> str:
        """
        Encode this context plus `path` as the HX-Location JSON value.

        Raises:
            SerializationError if `values`/`headers` hold something json can't encode.
        """
        try:
            return json.dumps(self.to_payload(path), separators=(",", ":"), ensure_ascii=True, allow_nan=False)
        except (TypeError, ValueError) as e:
            logger.warning("Failed to encode %s context for path=%s: %s", _h.location, path, e)
            raise SerializationError(
                message=f"error marshalling context JSON: {e}",
                header=_h.location,
                details={"path": path},
            ) from e
