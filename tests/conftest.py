"""Pytest configuration and fixtures for auth0-management-client tests."""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from auth0_management.endpoints import ClientsClient
from auth0_management.http import HttpApiConnection, TokenAuthProvider

BASE_URL = "https://tenant.eu.auth0.com/api/v2"


# ============================================================================
# Mock API
# ============================================================================


class MockApi:
    """
    Records requests sent through an ``HttpApiConnection`` and replays
    queued responses, using ``httpx.MockTransport``.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._responses: List[httpx.Response] = []
        self.connection = HttpApiConnection(
            base_url=BASE_URL,
            auth_provider=TokenAuthProvider(access_token="test-token"),
            transport=httpx.MockTransport(self._handle),
        )

    def respond(
        self,
        status_code: int = 200,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
        content: Optional[bytes] = None,
    ) -> None:
        """Queue the next response."""
        if content is not None:
            response = httpx.Response(status_code, content=content, headers=headers)
        else:
            response = httpx.Response(status_code, json=json, headers=headers)
        self._responses.append(response)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(204)
        return self._responses.pop(0)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @staticmethod
    def body_of(request: httpx.Request) -> Any:
        return json.loads(request.content) if request.content else None


def make_response(
    status_code: int = 200,
    json: Any = None,
    headers: Optional[Dict[str, str]] = None,
    content: Optional[bytes] = None,
) -> httpx.Response:
    """Create a real httpx.Response for materializer tests."""
    request = httpx.Request("GET", f"{BASE_URL}/clients")
    if content is not None:
        return httpx.Response(status_code, content=content, headers=headers, request=request)
    return httpx.Response(status_code, json=json, headers=headers, request=request)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def base_url():
    """Default base URL for testing."""
    return BASE_URL


@pytest.fixture
def mock_api():
    """A MockApi with an empty response queue."""
    return MockApi()


@pytest.fixture
def clients(mock_api):
    """ClientsClient wired to the mock API."""
    return ClientsClient(mock_api.connection)


@pytest.fixture
def mock_client_data():
    """Mock client data."""
    return {
        "client_id": "abc123",
        "tenant": "tenant",
        "name": "app1",
        "app_type": "spa",
        "is_first_party": True,
        "is_global": False,
        "client_secret": "old-secret",
        "callbacks": ["https://app1.example.com/callback"],
    }


@pytest.fixture
def mock_clients_list():
    """Mock list of clients."""
    return [
        {"client_id": "c-1", "name": "Client 1", "app_type": "spa"},
        {"client_id": "c-2", "name": "Client 2", "app_type": "native"},
        {"client_id": "c-3", "name": "Client 3", "app_type": "regular_web"},
    ]
