"""
Async transport for the management API.

``ApiConnection`` is the boundary resource clients are written against: it
takes an ``ApiRequest`` (verb, path template, path/query parameters, body)
and a ``Materializer`` describing the expected result. ``HttpApiConnection``
implements it on top of httpx with:
- Bearer token authentication
- Path parameter encoding and query serialization
- Request logging
- Status code to exception mapping

No retry, backoff or token refresh happens here; failures are raised to the
caller as they happen.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, TypeVar, Union
from urllib.parse import quote
import logging

import httpx
from pydantic import BaseModel

from auth0_management.exceptions import (
    NetworkError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)
from auth0_management.query import serialize_query
from auth0_management.responses import Materializer, NoContentMaterializer
from auth0_management.templates import resolve_path

logger = logging.getLogger(__name__)

R = TypeVar("R")

Body = Union[BaseModel, Dict[str, Any], None]

DEFAULT_USER_AGENT = "auth0-management-client"


class AuthProvider(ABC):
    """Abstract base class for authentication providers."""

    @abstractmethod
    async def get_access_token(self) -> Optional[str]:
        """Get the current access token."""
        ...

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Check if a token is available."""
        ...


class TokenAuthProvider(AuthProvider):
    """Static token provider. Obtaining and renewing the token is up to the caller."""

    def __init__(self, access_token: Optional[str] = None):
        self._access_token = access_token

    async def get_access_token(self) -> Optional[str]:
        return self._access_token

    def is_authenticated(self) -> bool:
        return self._access_token is not None

    def set_token(self, access_token: str) -> None:
        """Replace the access token used for subsequent requests."""
        self._access_token = access_token

    def clear_token(self) -> None:
        """Forget the access token."""
        self._access_token = None


@dataclass(frozen=True)
class ApiRequest:
    """Everything needed to issue one API call."""

    method: str
    path: str
    path_params: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    body: Body = None
    headers: Mapping[str, str] = field(default_factory=dict)


class ApiConnection(ABC):
    """
    Transport boundary used by endpoint clients.

    Implementations execute one ``ApiRequest`` per call and hand the response
    to the materializer. They must be safe to share between concurrent calls.
    """

    @abstractmethod
    async def send(self, request: ApiRequest, materializer: Materializer[R]) -> R:
        """
        Execute the request and materialize the response.

        Raises:
            TemplateError: If a path placeholder has no value
            ApiError: On non-success status codes
            NetworkError: On transport failures
            DeserializationError: If the body does not fit the materializer
        """
        ...

    async def get(
        self,
        path: str,
        *,
        materializer: Materializer[R],
        path_params: Optional[Mapping[str, str]] = None,
        query: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> R:
        """Make a GET request."""
        return await self.send(
            ApiRequest("GET", path, path_params or {}, query or {}, None, headers or {}),
            materializer,
        )

    async def post(
        self,
        path: str,
        *,
        materializer: Materializer[R],
        body: Body = None,
        path_params: Optional[Mapping[str, str]] = None,
        query: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> R:
        """Make a POST request."""
        return await self.send(
            ApiRequest("POST", path, path_params or {}, query or {}, body, headers or {}),
            materializer,
        )

    async def patch(
        self,
        path: str,
        *,
        materializer: Materializer[R],
        body: Body = None,
        path_params: Optional[Mapping[str, str]] = None,
    ) -> R:
        """Make a PATCH request."""
        return await self.send(
            ApiRequest("PATCH", path, path_params or {}, {}, body),
            materializer,
        )

    async def delete(
        self,
        path: str,
        *,
        path_params: Optional[Mapping[str, str]] = None,
        body: Body = None,
        materializer: Optional[Materializer[R]] = None,
    ) -> Optional[R]:
        """Make a DELETE request."""
        return await self.send(
            ApiRequest("DELETE", path, path_params or {}, {}, body),
            materializer or NoContentMaterializer(),
        )

    async def close(self) -> None:
        """Release transport resources."""


class HttpApiConnection(ApiConnection):
    """
    httpx based ``ApiConnection``.

    One ``httpx.AsyncClient`` is created lazily and shared by all calls.
    """

    def __init__(
        self,
        base_url: str,
        auth_provider: Optional[AuthProvider] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the connection.

        Args:
            base_url: API root (e.g., "https://tenant.auth0.com/api/v2")
            auth_provider: Supplies the bearer token
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            user_agent: User-Agent header value
            transport: Custom httpx transport (e.g. ``httpx.MockTransport``)
        """
        self.base_url = base_url.rstrip("/")
        self.auth_provider = auth_provider or TokenAuthProvider()
        self.timeout = timeout
        self.user_agent = user_agent
        self._default_headers = headers or {}
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "HttpApiConnection":
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(self, extra_headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Build request headers without authentication."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
            **self._default_headers,
        }
        if extra_headers:
            headers.update(extra_headers)
        return headers

    async def _add_auth_header(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Add authentication header if available."""
        if self.auth_provider.is_authenticated():
            token = await self.auth_provider.get_access_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    def build_path(self, request: ApiRequest) -> str:
        """Resolve the request path, percent-encoding every path parameter."""
        encoded = {
            name: quote(str(value), safe="") if value is not None else None
            for name, value in request.path_params.items()
        }
        return resolve_path(request.path, encoded)

    @staticmethod
    def _dump_body(body: Body) -> Optional[Dict[str, Any]]:
        if isinstance(body, BaseModel):
            return body.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return body

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Convert HTTP error responses to the matching exception."""
        try:
            body = response.json()
        except ValueError:
            body = response.text
        logger.debug(f"{response.request.method} {response.request.url.path} failed with HTTP {response.status_code}")
        raise exception_from_response(response.status_code, body, response.headers)

    async def send(self, request: ApiRequest, materializer: Materializer[R]) -> R:
        # Both may raise before any I/O happens
        path = self.build_path(request)
        params = serialize_query(request.query)

        headers = await self._add_auth_header(self._build_headers(request.headers))
        json_data = self._dump_body(request.body)

        client = self._get_client()
        logger.debug(f"{request.method} {path}")
        try:
            response = await client.request(
                method=request.method,
                url=path,
                params=params or None,
                json=json_data,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            raise ClientTimeoutError(f"Request timed out: {e}") from e
        except httpx.TransportError as e:
            raise NetworkError(f"Request failed: {e}") from e

        if not response.is_success:
            self._raise_for_status(response)

        return materializer.materialize(response)
