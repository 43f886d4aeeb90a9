"""Tests for response materializers."""

from typing import Optional

import pytest
from pydantic import BaseModel

from auth0_management.exceptions import DeserializationError
from auth0_management.responses import (
    EntityMaterializer,
    ListMaterializer,
    NoContentMaterializer,
    PagedList,
    PagedListMaterializer,
    PagingInformation,
)

from conftest import make_response


class MockItem(BaseModel):
    """Mock model for materializer tests."""
    id: str
    name: Optional[str] = None


ITEMS = [
    {"id": "1", "name": "First"},
    {"id": "2", "name": "Second"},
    {"id": "3", "name": "Third"},
]

PAGING_HEADERS = {"X-Total-Count": "57", "X-Page": "2", "X-Per-Page": "10"}


class TestEntityMaterializer:

    def test_valid_body(self):
        result = EntityMaterializer(MockItem).materialize(make_response(json={"id": "1", "name": "First"}))
        assert isinstance(result, MockItem)
        assert result.id == "1"

    def test_shape_mismatch(self):
        response = make_response(json={"name": "no id"})
        with pytest.raises(DeserializationError) as exc_info:
            EntityMaterializer(MockItem).materialize(response)
        assert exc_info.value.status_code == 200
        assert exc_info.value.body == response.text
        assert exc_info.value.details["errors"]

    def test_invalid_json(self):
        with pytest.raises(DeserializationError, match="not valid JSON") as exc_info:
            EntityMaterializer(MockItem).materialize(make_response(content=b"<html>oops</html>"))
        assert exc_info.value.body == "<html>oops</html>"

    def test_empty_body(self):
        with pytest.raises(DeserializationError):
            EntityMaterializer(MockItem).materialize(make_response(content=b""))


class TestListMaterializer:

    def test_preserves_order(self):
        result = ListMaterializer(MockItem).materialize(make_response(json=ITEMS))
        assert [item.id for item in result] == ["1", "2", "3"]
        assert all(isinstance(item, MockItem) for item in result)

    def test_empty_array(self):
        assert ListMaterializer(MockItem).materialize(make_response(json=[])) == []

    def test_object_body_rejected(self):
        with pytest.raises(DeserializationError, match="JSON array"):
            ListMaterializer(MockItem).materialize(make_response(json={"id": "1"}))

    def test_invalid_item(self):
        with pytest.raises(DeserializationError):
            ListMaterializer(MockItem).materialize(make_response(json=[{"id": "1"}, {"name": "x"}]))


class TestPagedListMaterializer:

    def test_with_paging_headers(self):
        response = make_response(json=ITEMS, headers=PAGING_HEADERS)
        result = PagedListMaterializer(MockItem).materialize(response)

        assert isinstance(result, PagedList)
        assert [item.id for item in result] == ["1", "2", "3"]
        assert result.paging.total == 57
        assert result.paging.page == 2
        assert result.paging.per_page == 10
        assert result.paging.includes_total

    def test_without_paging_headers(self):
        result = PagedListMaterializer(MockItem).materialize(make_response(json=ITEMS))

        assert len(result) == 3
        assert result.paging.total is None
        assert result.paging.page is None
        assert result.paging.per_page is None
        assert not result.paging.includes_total

    def test_zero_items_with_totals(self):
        response = make_response(json=[], headers={"X-Total-Count": "0", "X-Page": "0", "X-Per-Page": "50"})
        result = PagedListMaterializer(MockItem).materialize(response)

        assert len(result) == 0
        assert result.paging.total == 0
        assert result.paging.includes_total

    def test_partial_headers(self):
        response = make_response(json=ITEMS, headers={"X-Total-Count": "3"})
        result = PagedListMaterializer(MockItem).materialize(response)

        assert result.paging.total == 3
        assert result.paging.page is None

    def test_invalid_header(self):
        response = make_response(json=ITEMS, headers={"X-Total-Count": "many"})
        with pytest.raises(DeserializationError, match="X-Total-Count"):
            PagedListMaterializer(MockItem).materialize(response)

    def test_totals_envelope(self):
        body = {"start": 20, "limit": 10, "length": 3, "total": 57, "items": ITEMS}
        result = PagedListMaterializer(MockItem, collection_key="items").materialize(make_response(json=body))

        assert [item.id for item in result] == ["1", "2", "3"]
        assert result.paging == PagingInformation(total=57, page=2, per_page=10)

    def test_headers_take_precedence_over_envelope(self):
        body = {"start": 0, "limit": 10, "total": 3, "items": ITEMS}
        response = make_response(json=body, headers={"X-Total-Count": "99"})
        result = PagedListMaterializer(MockItem, collection_key="items").materialize(response)

        assert result.paging.total == 99
        assert result.paging.page == 0

    def test_envelope_without_collection_key(self):
        body = {"start": 0, "limit": 10, "total": 3, "items": ITEMS}
        with pytest.raises(DeserializationError):
            PagedListMaterializer(MockItem).materialize(make_response(json=body))

    def test_invalid_item(self):
        with pytest.raises(DeserializationError):
            PagedListMaterializer(MockItem).materialize(make_response(json=[{"name": "no id"}]))


class TestPagedList:

    def test_sequence_behaviour(self):
        page = PagedList[MockItem](items=[MockItem(id="1"), MockItem(id="2")])
        assert len(page) == 2
        assert page[1].id == "2"
        assert [item.id for item in page] == ["1", "2"]

    def test_defaults(self):
        page = PagedList[MockItem]()
        assert page.items == []
        assert page.paging == PagingInformation()


def test_no_content_materializer_ignores_body():
    assert NoContentMaterializer().materialize(make_response(content=b"")) is None
    assert NoContentMaterializer().materialize(make_response(json={"ignored": True})) is None
