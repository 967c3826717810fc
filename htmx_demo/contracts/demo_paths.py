"""
htmx_demo.contracts.demo_paths

Purpose:
    Central definition of demo route paths.
    Keeps routes, templates and redirects pointing at the same strings.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DemoPaths:
    index: str = "/"
    send: str = "/send"
    thank_you: str = "/thankyou"
    counter: str = "/counter"
    increment: str = "/inc"
    health: str = "/health"
