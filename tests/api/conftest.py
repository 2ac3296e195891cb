"""Fixtures for API tests."""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from invoicekit.api.main import create_app
from invoicekit.config import Settings


@pytest.fixture
def app(isolated_settings: Settings) -> FastAPI:
    """App bound to the per-test data directory."""
    return create_app(isolated_settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Create sync test client."""
    with TestClient(app) as c:
        yield c
