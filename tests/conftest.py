# tests/conftest.py

from typing import Callable, Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.hello import get_external_client
from app.clients.external import ExternalServiceClient
from app.config import get_settings
from app.main import app

EXTERNAL_URL = "http://external-service/api"


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_external_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], ExternalServiceClient]:
    """Build an ExternalServiceClient whose transport is the given handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> ExternalServiceClient:
        return ExternalServiceClient(
            EXTERNAL_URL,
            client=httpx.Client(transport=httpx.MockTransport(handler)),
        )

    return _make


@pytest.fixture
def client_with(make_external_client) -> Iterator[Callable[..., TestClient]]:
    """Yield a factory returning a TestClient whose outbound calls go to `handler`."""
    opened = []

    def _client(handler: Callable[[httpx.Request], httpx.Response]) -> TestClient:
        external = make_external_client(handler)
        app.dependency_overrides[get_external_client] = lambda: external
        test_client = TestClient(app)
        opened.append(external)
        return test_client

    yield _client

    app.dependency_overrides.clear()
    for external in opened:
        external.close()
