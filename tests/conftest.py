from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from customer_service.config import get_settings
from customer_service.main import create_app
from customer_service.services.customer_store import CustomerStore


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("SEED_DATA", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def store() -> CustomerStore:
    return CustomerStore()


@pytest.fixture
def app() -> FastAPI:
    # A fresh application (and store) per test keeps seeded data predictable.
    return create_app()


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
