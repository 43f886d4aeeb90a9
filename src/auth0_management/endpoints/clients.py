"""
Client for the ``/clients`` endpoints (application registrations).
"""

from typing import Any, AsyncIterator, Dict, List, Optional, Union
import warnings

from auth0_management.base import BaseEndpointClient
from auth0_management.http import ApiConnection
from auth0_management.models.clients import (
    Client,
    ClientCreateRequest,
    ClientListQuery,
    ClientUpdateRequest,
)
from auth0_management.query import FieldsQuery
from auth0_management.responses import PagedList


class ClientsClient(BaseEndpointClient):
    """
    Client for clients endpoints.
    """

    def __init__(self, connection: ApiConnection) -> None:
        super().__init__(connection, "clients")

    async def create(
        self,
        data: Union[ClientCreateRequest, Dict[str, Any]],
    ) -> Client:
        """
        Create a new client application.

        Args:
            data: Properties of the new client

        Returns:
            The created client
        """
        return await self._connection.post(
            self._build_path(),
            body=data,
            materializer=self._entity(Client),
        )

    async def delete(self, id: str) -> None:
        """
        Delete a client and all its related assets (rules, connections, ...).

        Raises:
            TemplateError: If ``id`` is empty
        """
        await self._connection.delete(
            self._build_path("{id}"),
            path_params={"id": id},
        )

    async def get(
        self,
        id: str,
        fields: Optional[str] = None,
        include_fields: bool = True,
    ) -> Client:
        """
        Retrieve a client by its id.

        Args:
            id: The id of the client to retrieve
            fields: Comma separated list of fields to include or exclude
                (depending on include_fields), None for all fields
            include_fields: Whether the listed fields are included or excluded
        """
        query = FieldsQuery(fields=fields, include_fields=include_fields)
        return await self._connection.get(
            self._build_path("{id}"),
            path_params={"id": id},
            query=self._query_to_params(query),
            materializer=self._entity(Client),
        )

    async def list_paged(
        self,
        query: Optional[ClientListQuery] = None,
        **filters: Any,
    ) -> PagedList[Client]:
        """
        Retrieve one page of client applications.

        Filters can be given as a ``ClientListQuery`` and/or as keyword
        arguments with the same names; keyword arguments win.

        Paging totals are only reported when ``include_totals`` is true.

        Example:
            page = await clients.list_paged(
                page=2,
                per_page=10,
                include_totals=True,
                app_type=[ClientApplicationType.SPA, ClientApplicationType.NATIVE],
            )
            print(page.paging.total, [c.name for c in page])
        """
        if query is None:
            query = ClientListQuery(**filters)
        elif filters:
            query = ClientListQuery(**{**query.model_dump(exclude_unset=True), **filters})

        return await self._connection.get(
            self._build_path(),
            query=self._query_to_params(query),
            materializer=self._paged(Client),
        )

    async def list_all(
        self,
        fields: Optional[str] = None,
        include_fields: bool = True,
    ) -> List[Client]:
        """
        Retrieve all client applications in a single, unpaginated request.

        Deprecated: use ``list_paged`` or ``iterate`` instead.
        """
        warnings.warn(
            "ClientsClient.list_all is deprecated, use list_paged or iterate instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        query = FieldsQuery(fields=fields, include_fields=include_fields)
        return await self._connection.get(
            self._build_path(),
            query=self._query_to_params(query),
            materializer=self._list(Client),
        )

    async def iterate(
        self,
        query: Optional[ClientListQuery] = None,
        per_page: int = 50,
    ) -> AsyncIterator[Client]:
        """
        Yield every client matching the query, fetching one page at a time.

        Starts at ``query.page`` (or the first page) and stops on an empty
        page, on a page shorter than the page size the server reports, or
        once the reported total has been reached. The server may cap
        ``per_page``, so the requested size is never used to detect the end.
        """
        query = query or ClientListQuery()
        first_page = page_index = query.page or 0
        size = query.per_page or per_page
        if size < 1:
            raise ValueError("per_page must be at least 1")

        yielded = 0
        while True:
            page = await self.list_paged(
                query,
                page=page_index,
                per_page=size,
                include_totals=True,
            )
            for client in page:
                yield client
            yielded += len(page)

            if not len(page):
                break
            server_size = page.paging.per_page
            if server_size and len(page) < server_size:
                break
            if page.paging.includes_total:
                skipped = first_page * (server_size or size)
                if skipped + yielded >= page.paging.total:
                    break
            page_index += 1

    async def rotate_secret(self, id: str) -> Client:
        """
        Rotate a client secret.

        The returned client carries the new secret exactly as generated by
        the server; it is NOT base64 encoded.
        """
        return await self._connection.post(
            self._build_path("{id}", "rotate-secret"),
            path_params={"id": id},
            materializer=self._entity(Client),
        )

    async def update(
        self,
        id: str,
        data: Union[ClientUpdateRequest, Dict[str, Any]],
    ) -> Client:
        """
        Update a client application.

        Only the fields present in ``data`` are changed.
        """
        return await self._connection.patch(
            self._build_path("{id}"),
            path_params={"id": id},
            body=data,
            materializer=self._entity(Client),
        )
