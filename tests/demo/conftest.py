"""
tests.demo.conftest

Shared pytest fixtures for demo app tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from htmx_demo.main import create_app


@pytest.fixture()
def client_factory():
    """
    Factory fixture that creates a fresh TestClient.

    Used when tests need to set env vars or add routes before app creation.
    """

    def _make(app=None) -> TestClient:
        return TestClient(app or create_app(), raise_server_exceptions=True)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    return client_factory()
