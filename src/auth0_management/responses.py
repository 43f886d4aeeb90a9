"""
Response materialization.

A ``Materializer`` turns a successful ``httpx.Response`` into the value an
operation returns. Call sites pick the shape:

- ``EntityMaterializer``: one model instance
- ``ListMaterializer``: a plain list of model instances
- ``PagedListMaterializer``: a ``PagedList`` with paging metadata
- ``NoContentMaterializer``: nothing (e.g. DELETE)

Paging metadata is read separately from the item array. When the body is a
bare JSON array it comes from the ``X-Total-Count``, ``X-Page`` and
``X-Per-Page`` response headers; when the body is a totals envelope
(``{"start", "limit", "total", "<collection>": [...]}``) it comes from the
envelope. Without either, all metadata fields stay unset while the items are
still populated, so "not requested" can be told apart from "zero items".
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterator, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from auth0_management.exceptions import DeserializationError

TOTAL_COUNT_HEADER = "X-Total-Count"
PAGE_HEADER = "X-Page"
PER_PAGE_HEADER = "X-Per-Page"

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)
R = TypeVar("R")


class PagingInformation(BaseModel):
    """Out-of-band paging metadata of a list response."""

    total: Optional[int] = Field(None, description="Total number of items across all pages")
    page: Optional[int] = Field(None, description="Zero-based index of the returned page")
    per_page: Optional[int] = Field(None, description="Number of items per page")

    @property
    def includes_total(self) -> bool:
        """Whether the server reported a total count."""
        return self.total is not None


class PagedList(BaseModel, Generic[T]):
    """
    One page of items plus its paging metadata.

    Items keep the order of the server response. Iterating, indexing and
    ``len()`` operate on the items.
    """

    items: List[T] = Field(default_factory=list)
    paging: PagingInformation = Field(default_factory=PagingInformation)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]


def _parse_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise DeserializationError(
            f"Response body is not valid JSON: {e}",
            status_code=response.status_code,
            body=response.text,
        ) from e


def _shape_error(response: httpx.Response, message: str, cause: Optional[Exception] = None) -> DeserializationError:
    details = {}
    if isinstance(cause, PydanticValidationError):
        details["errors"] = cause.errors(include_url=False)
    return DeserializationError(
        message,
        status_code=response.status_code,
        body=response.text,
        details=details,
    )


class Materializer(ABC, Generic[R]):
    """Builds the typed result of an operation from its response."""

    @abstractmethod
    def materialize(self, response: httpx.Response) -> R:
        """
        Build the result from the response.

        Raises:
            DeserializationError: If the body does not fit the expected shape
        """
        ...


class NoContentMaterializer(Materializer[None]):
    """Ignores the body."""

    def materialize(self, response: httpx.Response) -> None:
        return None


class EntityMaterializer(Materializer[M]):
    """Validates the body as a single model instance."""

    def __init__(self, model: Type[M]):
        self.model = model

    def materialize(self, response: httpx.Response) -> M:
        data = _parse_json(response)
        try:
            return self.model.model_validate(data)
        except PydanticValidationError as e:
            raise _shape_error(response, f"Response body is not a valid {self.model.__name__}", e) from e


class ListMaterializer(Materializer[List[M]]):
    """Validates a JSON array body as a list of model instances."""

    def __init__(self, model: Type[M]):
        self.model = model
        self._adapter = TypeAdapter(List[model])

    def materialize(self, response: httpx.Response) -> List[M]:
        data = _parse_json(response)
        if not isinstance(data, list):
            raise _shape_error(response, f"Expected a JSON array of {self.model.__name__}")
        try:
            return self._adapter.validate_python(data)
        except PydanticValidationError as e:
            raise _shape_error(response, f"Response body is not a list of {self.model.__name__}", e) from e


class PagedListMaterializer(Materializer[PagedList[M]]):
    """
    Builds a ``PagedList`` from the body and the paging channel.

    Args:
        model: Item model
        collection_key: Envelope key holding the items (e.g. "clients")
    """

    def __init__(self, model: Type[M], collection_key: Optional[str] = None):
        self.model = model
        self.collection_key = collection_key
        self._paged_model = PagedList[model]

    def materialize(self, response: httpx.Response) -> PagedList[M]:
        data = _parse_json(response)

        if isinstance(data, list):
            items = data
            paging = {}
        elif isinstance(data, dict) and self.collection_key and isinstance(data.get(self.collection_key), list):
            items = data[self.collection_key]
            paging = self._paging_from_envelope(data, response)
        else:
            raise _shape_error(response, f"Expected a JSON array of {self.model.__name__}")

        paging.update(self._paging_from_headers(response))

        try:
            return self._paged_model.model_validate({"items": items, "paging": paging})
        except PydanticValidationError as e:
            raise _shape_error(response, f"Response body is not a page of {self.model.__name__}", e) from e

    def _paging_from_headers(self, response: httpx.Response) -> dict:
        paging = {}
        for field, header in (
            ("total", TOTAL_COUNT_HEADER),
            ("page", PAGE_HEADER),
            ("per_page", PER_PAGE_HEADER),
        ):
            value = response.headers.get(header)
            if value is None:
                continue
            try:
                paging[field] = int(value)
            except ValueError:
                raise _shape_error(response, f"Paging header {header} is not an integer: {value!r}") from None
        return paging

    def _paging_from_envelope(self, data: dict, response: httpx.Response) -> dict:
        paging = {}
        try:
            if data.get("total") is not None:
                paging["total"] = int(data["total"])
            limit = data.get("limit")
            if limit is not None:
                limit = int(limit)
                paging["per_page"] = limit
                start = int(data.get("start") or 0)
                paging["page"] = start // limit if limit else 0
        except (TypeError, ValueError):
            raise _shape_error(response, "Paging envelope fields must be integers") from None
        return paging
