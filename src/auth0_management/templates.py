"""
Path template resolution.

Templates use ``{name}`` placeholders, e.g. ``"clients/{id}/rotate-secret"``.

Values are substituted verbatim: this module does NOT URL-encode them. An
identifier containing reserved characters such as ``/``, ``?`` or ``#`` would
change the meaning of the resolved path, so encoding is the transport's job
(see ``HttpApiConnection``, which quotes every value before resolving).
"""

import re
from typing import Any, List, Mapping, Optional

from auth0_management.exceptions import TemplateError

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def placeholders(template: str) -> List[str]:
    """Return the placeholder names of a template, in order of appearance."""
    return _PLACEHOLDER.findall(template)


def resolve_path(template: str, path_params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Substitute path parameters into a template.

    Args:
        template: Path template with ``{name}`` placeholders
        path_params: Placeholder name to value; extra entries are ignored

    Returns:
        The resolved path

    Raises:
        TemplateError: If a placeholder has no value, or its value is empty
    """
    params = path_params or {}

    def substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        value = params.get(name)
        if value is None or str(value) == "":
            raise TemplateError(name, template)
        return str(value)

    return _PLACEHOLDER.sub(substitute, template)
