"""
Base class for typed endpoint clients.
"""

from typing import Any, Dict, Optional, Type

from pydantic import BaseModel

from auth0_management.http import ApiConnection
from auth0_management.query import QueryModel
from auth0_management.responses import (
    EntityMaterializer,
    ListMaterializer,
    PagedListMaterializer,
)


class BaseEndpointClient:
    """
    Shared plumbing for one resource family.

    Subclasses declare the collection path and issue requests through the
    connection with path templates relative to it.
    """

    def __init__(
        self,
        connection: ApiConnection,
        base_path: str,
    ):
        """
        Initialize the endpoint client.

        Args:
            connection: The transport used to talk to the API
            base_path: Collection path for this endpoint (e.g., "clients")
        """
        self._connection = connection
        self._base_path = base_path.strip("/")

    @property
    def base_path(self) -> str:
        """Get the collection path for this endpoint."""
        return self._base_path

    def _build_path(self, *parts: str) -> str:
        """Build a path template from the collection path and additional parts."""
        clean_parts = [p.strip("/") for p in parts if p]
        if clean_parts:
            return f"{self._base_path}/{'/'.join(clean_parts)}"
        return self._base_path

    @staticmethod
    def _query_to_params(query: Optional[QueryModel]) -> Dict[str, Any]:
        """Convert a query model to request parameters."""
        if query is None:
            return {}
        return query.to_params()

    @staticmethod
    def _entity(model: Type[BaseModel]) -> EntityMaterializer:
        return EntityMaterializer(model)

    @staticmethod
    def _list(model: Type[BaseModel]) -> ListMaterializer:
        return ListMaterializer(model)

    def _paged(self, model: Type[BaseModel]) -> PagedListMaterializer:
        return PagedListMaterializer(model, collection_key=self._base_path)
