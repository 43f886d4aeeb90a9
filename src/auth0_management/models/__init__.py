from auth0_management.models.clients import (
    Client,
    ClientApplicationType,
    ClientCreateRequest,
    ClientListQuery,
    ClientUpdateRequest,
    JwtConfiguration,
    TokenEndpointAuthMethod,
)

__all__ = [
    "Client",
    "ClientApplicationType",
    "ClientCreateRequest",
    "ClientListQuery",
    "ClientUpdateRequest",
    "JwtConfiguration",
    "TokenEndpointAuthMethod",
]
