"""
Endpoint clients, one per resource family.
"""

from auth0_management.endpoints.clients import ClientsClient

__all__ = [
    "ClientsClient",
]
