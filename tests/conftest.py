"""
Root Pytest Fixtures.

Shared fixtures available to all tests.

Mock Server:
    Tests never touch the network. MockServer stands in for the Azion APIs
    and is plugged into APIClient through httpx.MockTransport:

        def test_get(mock_server):
            mock_server.register("GET", "/edge_functions/1", json={"results": {...}})
            client = mock_server.client()
"""

import logging
from collections.abc import Generator
from typing import Any

import httpx
import pytest

from azioncli.api.client import APIClient
from azioncli.core import logging as logging_module
from azioncli.core.config import get_app_config, get_settings

EDGE_FUNCTIONS_URL = "https://api.test"
EDGE_SERVICES_URL = "https://api.test/edge_services"
TEST_TOKEN = "test-token"


# =============================================================================
# Mock Server
# =============================================================================


class MockServer:
    """
    Registry of canned responses keyed by method and URL path.

    Several responses registered for the same route are served in order;
    the last one repeats. Unregistered routes fail the test.
    """

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], list[httpx.Response | Exception]] = {}
        self.requests: list[httpx.Request] = []

    def register(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: Any = None,
        text: str | None = None,
    ) -> None:
        if json is not None:
            response = httpx.Response(status_code, json=json)
        else:
            response = httpx.Response(status_code, text=text or "")
        self._routes.setdefault((method, path), []).append(response)

    def register_error(self, method: str, path: str, error: Exception) -> None:
        self._routes.setdefault((method, path), []).append(error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self._routes:
            pytest.fail(f"Unexpected request: {request.method} {request.url}")

        queue = self._routes[key]
        outcome = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self, base_url: str = EDGE_FUNCTIONS_URL) -> APIClient:
        """APIClient pointed at this mock server."""
        return APIClient(
            base_url=base_url,
            token=TEST_TOKEN,
            timeout=10.0,
            transport=self.transport(),
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def mock_server() -> MockServer:
    """Provide an empty mock server."""
    return MockServer()


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep env-derived caches and root log handlers from leaking between tests."""
    monkeypatch.delenv("AZIONCLI_CONFIG_DIR", raising=False)
    monkeypatch.setattr(logging_module, "_logging_config", None)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
