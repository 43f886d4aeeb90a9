"""
Query string serialization.

``serialize_query`` flattens a mapping of optional typed values into the
string pairs that go on the URL. Endpoint clients usually describe their
optional parameters with a ``QueryModel`` subclass, whose field names are the
wire keys.
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from auth0_management.wire import wire_name


def _serialize_item(value: Any) -> str:
    if isinstance(value, Enum):
        return wire_name(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"Unsupported list item type for query parameter: {type(value).__name__}")


def serialize_value(value: Any) -> Optional[str]:
    """
    Serialize one query value, or return None when the key must be omitted.

    Raises:
        TypeError: For value types the API has no query representation for
    """
    if value is None:
        return None
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    # Enum before str/int: mixin enums are also str/int instances
    if isinstance(value, Enum):
        return wire_name(value)
    if isinstance(value, (int, str)):
        return str(value)
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        return ",".join(_serialize_item(item) for item in value)
    raise TypeError(f"Unsupported query parameter type: {type(value).__name__}")


def serialize_query(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """
    Convert optional typed query values into wire strings.

    - ``None`` and empty lists are omitted entirely
    - booleans become ``"true"``/``"false"``
    - enums become their wire name
    - lists of enums become one comma-joined string, in input order
    - ints and strings use their plain string form

    Args:
        params: Query parameter name to optional value

    Returns:
        Query parameter name to string, in input order
    """
    serialized: Dict[str, str] = {}
    for key, value in (params or {}).items():
        text = serialize_value(value)
        if text is not None:
            serialized[key] = text
    return serialized


class QueryModel(BaseModel):
    """Base class for the optional query parameters of an operation."""

    model_config = ConfigDict(extra="forbid")

    def to_params(self) -> Dict[str, str]:
        """Serialize the model fields, keyed by field name."""
        return serialize_query({name: getattr(self, name) for name in type(self).model_fields})


class FieldsQuery(QueryModel):
    fields: Optional[str] = Field(
        None,
        description="Comma separated list of fields to include or exclude, empty for all fields",
    )
    include_fields: Optional[bool] = Field(
        None,
        description="Whether the listed fields are included (true) or excluded (false)",
    )
