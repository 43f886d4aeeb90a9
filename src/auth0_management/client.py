"""
Main management API client.

This module provides the ManagementApiClient class, the entry point that
owns the connection and hands out endpoint clients.
"""

from typing import Any, Dict, Optional, Type, TypeVar
import logging

from auth0_management.config import ManagementApiSettings, get_settings
from auth0_management.endpoints import ClientsClient
from auth0_management.http import (
    DEFAULT_USER_AGENT,
    ApiConnection,
    HttpApiConnection,
    TokenAuthProvider,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ManagementApiClient:
    """
    Client for the identity management API.

    Example usage:
        ```python
        async with ManagementApiClient(
            base_url="https://tenant.eu.auth0.com/api/v2",
            token="eyJ...",
        ) as api:
            app = await api.clients.create(ClientCreateRequest(name="app1"))
            page = await api.clients.list_paged(include_totals=True)
        ```

    Or from environment variables (AUTH0_DOMAIN, AUTH0_TOKEN, ...):
        ```python
        api = ManagementApiClient.from_settings()
        ```
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        token: Optional[str] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        connection: Optional[ApiConnection] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root (e.g., "https://tenant.eu.auth0.com/api/v2")
            token: Management API access token
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            user_agent: User-Agent header value
            connection: Pre-built connection; base_url and the HTTP options
                are ignored when given. The caller keeps ownership of it
                and must close it; close() only closes connections built here.
        """
        if connection is None:
            if not base_url:
                raise ValueError("Either base_url or connection is required")
            self._auth_provider = TokenAuthProvider(access_token=token)
            self._owns_connection = True
            connection = HttpApiConnection(
                base_url=base_url,
                auth_provider=self._auth_provider,
                timeout=timeout,
                headers=headers,
                user_agent=user_agent,
            )
        else:
            self._auth_provider = None
            self._owns_connection = False

        self._connection = connection

        # Endpoint clients (lazy-loaded)
        self._endpoint_clients: Dict[str, Any] = {}

    @classmethod
    def from_settings(cls, settings: Optional[ManagementApiSettings] = None) -> "ManagementApiClient":
        """Create a client from ``ManagementApiSettings`` (environment by default)."""
        settings = settings or get_settings()
        logger.debug(f"Creating management client for {settings.base_url}")
        return cls(
            settings.base_url,
            token=settings.token,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )

    @property
    def connection(self) -> ApiConnection:
        """Get the underlying connection for custom requests."""
        return self._connection

    def set_token(self, access_token: str) -> None:
        """
        Replace the access token used for subsequent requests.

        Raises:
            RuntimeError: If the client was built around a custom connection
        """
        if self._auth_provider is None:
            raise RuntimeError("Token is managed by the custom connection")
        self._auth_provider.set_token(access_token)

    # =========================================================================
    # Endpoint Clients
    # =========================================================================

    def _get_endpoint_client(self, client_class: Type[T]) -> T:
        """Get or create an endpoint client instance."""
        class_name = client_class.__name__
        if class_name not in self._endpoint_clients:
            self._endpoint_clients[class_name] = client_class(self._connection)
        return self._endpoint_clients[class_name]

    @property
    def clients(self) -> ClientsClient:
        """Operations on client applications."""
        return self._get_endpoint_client(ClientsClient)

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    async def close(self) -> None:
        """Close the client and the connection it created."""
        if self._owns_connection:
            await self._connection.close()
        self._endpoint_clients.clear()
        logger.debug("Client closed")

    async def __aenter__(self) -> "ManagementApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        base_url = getattr(self._connection, "base_url", None)
        return f"ManagementApiClient(base_url={base_url!r})"
