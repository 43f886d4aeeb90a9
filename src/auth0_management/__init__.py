"""
Typed async client for the identity management API.

Example usage:
    ```python
    from auth0_management import ManagementApiClient
    from auth0_management.models import ClientApplicationType, ClientCreateRequest

    async with ManagementApiClient(
        base_url="https://tenant.eu.auth0.com/api/v2",
        token="eyJ...",
    ) as api:
        app = await api.clients.create(ClientCreateRequest(name="app1"))

        page = await api.clients.list_paged(
            per_page=10,
            include_totals=True,
            app_type=[ClientApplicationType.SPA],
        )
        print(page.paging.total)
    ```
"""

__version__ = "0.1.0"

# Main client
from auth0_management.client import ManagementApiClient

# Configuration
from auth0_management.config import (
    ManagementApiSettings,
    configure_settings,
    get_settings,
    reset_settings,
)

# Transport components (for advanced usage)
from auth0_management.http import (
    ApiConnection,
    ApiRequest,
    AuthProvider,
    HttpApiConnection,
    TokenAuthProvider,
)

# Request construction and response materialization
from auth0_management.base import BaseEndpointClient
from auth0_management.query import FieldsQuery, QueryModel, serialize_query
from auth0_management.responses import (
    EntityMaterializer,
    ListMaterializer,
    Materializer,
    NoContentMaterializer,
    PagedList,
    PagedListMaterializer,
    PagingInformation,
)
from auth0_management.templates import resolve_path
from auth0_management.wire import from_wire_name, wire_name

# Exceptions
from auth0_management.exceptions import (
    ManagementApiError,
    TemplateError,
    MappingError,
    DeserializationError,
    ApiError,
    BadRequestError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    NetworkError,
    TimeoutError,
    exception_from_response,
)

__all__ = [
    # Version
    "__version__",
    # Main client
    "ManagementApiClient",
    # Configuration
    "ManagementApiSettings",
    "configure_settings",
    "get_settings",
    "reset_settings",
    # Transport
    "ApiConnection",
    "ApiRequest",
    "AuthProvider",
    "HttpApiConnection",
    "TokenAuthProvider",
    # Core
    "BaseEndpointClient",
    "FieldsQuery",
    "QueryModel",
    "serialize_query",
    "EntityMaterializer",
    "ListMaterializer",
    "Materializer",
    "NoContentMaterializer",
    "PagedList",
    "PagedListMaterializer",
    "PagingInformation",
    "resolve_path",
    "from_wire_name",
    "wire_name",
    # Exceptions
    "ManagementApiError",
    "TemplateError",
    "MappingError",
    "DeserializationError",
    "ApiError",
    "BadRequestError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "NetworkError",
    "TimeoutError",
    "exception_from_response",
]
