# htmx_demo/settings.py
"""
htmx_demo.settings

Purpose:
    Centralized configuration for the demo service.
    Defaults can be overridden through HTMX_DEMO_* environment variables.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

ENV_PREFIX = "HTMX_DEMO_"


class Settings(BaseModel):
    service_name: str = Field(default="htmx-headers-demo")
    service_version: str = Field(default="0.1.0")

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000)
    log_level: str = Field(default="INFO")


def _as_int(raw: str | None, *, default: int) -> int:
    """
    Parse an environment variable-ish value into an int.

    Accepts:
      - None / "" -> default
      - "3000" -> 3000
    Raises:
      ValueError for non-integer strings.
    """
    if raw is None:
        return default
    s = str(raw).strip()
    if not s:
        return default
    return int(s)


def get_settings() -> Settings:
    defaults = Settings()
    return Settings(
        host=os.getenv(f"{ENV_PREFIX}HOST") or defaults.host,
        port=_as_int(os.getenv(f"{ENV_PREFIX}PORT"), default=defaults.port),
        log_level=(os.getenv(f"{ENV_PREFIX}LOG_LEVEL") or defaults.log_level).upper(),
    )
