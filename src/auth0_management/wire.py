"""
Enumeration wire names.

Every enum sent to the API declares its wire token as the member value, so
the symbolic name (``REGULAR_WEB``) and the token (``"regular_web"``) are
independent. The reverse direction uses the value table the enum class builds
when it is defined; nothing is discovered per call.
"""

from enum import Enum
from typing import Type, TypeVar

from auth0_management.exceptions import MappingError

E = TypeVar("E", bound=Enum)


def wire_name(member: Enum) -> str:
    """
    Return the wire token declared for an enum member.

    Raises:
        MappingError: If the member's value is not a non-empty string
    """
    value = member.value
    if not isinstance(value, str) or not value:
        raise MappingError(
            f"{type(member).__name__}.{member.name} has no wire name",
            details={"enum": type(member).__name__, "member": member.name},
        )
    return value


def from_wire_name(enum_cls: Type[E], token: str) -> E:
    """
    Look up the enum member transmitted as ``token``.

    Raises:
        MappingError: If no member declares that token
    """
    try:
        return enum_cls(token)
    except ValueError:
        raise MappingError(
            f"'{token}' is not a wire name of {enum_cls.__name__}",
            details={"enum": enum_cls.__name__, "token": token},
        ) from None
