"""
htmx_demo.routes.health

Purpose:
    Health endpoint for container/orchestrator checks.
"""

from __future__ import annotations

from fastapi import APIRouter

from htmx_demo.contracts.demo_paths import DemoPaths

_paths = DemoPaths()

router = APIRouter(tags=["health"])


@router.get(_paths.health)
def health() -> dict:
    return {"ok": True}
