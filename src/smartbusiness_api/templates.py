"""
Path template helpers.

Templates are plain strings such as ``/contacts/{contactId}/addresses`` whose
``{name}`` tokens are replaced literally (``str.replace``), never via regex.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from .errors import InvalidUseError, UnresolvedPlaceholderError
from .parameters import QueryParameters

PLACEHOLDER_RE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")

Replacements = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def token(name: str) -> str:
    return "{" + name + "}"


def placeholders(template: str) -> List[str]:
    """Return placeholder names in order of first appearance."""
    seen: List[str] = []
    for name in PLACEHOLDER_RE.findall(template):
        if name not in seen:
            seen.append(name)
    return seen


def _pairs(replacements: Replacements) -> List[Tuple[str, Any]]:
    if isinstance(replacements, Mapping):
        return list(replacements.items())
    return list(replacements)


def resolve(template: str, replacements: Replacements, *, strict: bool = True) -> str:
    """
    Substitute every ``{name}`` occurrence for each (name, value) pair.

    In strict mode a pair whose placeholder is absent from the template, or a
    template placeholder left without a value, raises
    UnresolvedPlaceholderError. With strict=False missing placeholders are a
    silent no-op.
    """
    pairs = _pairs(replacements)
    expected = placeholders(template)
    supplied = [name for name, _ in pairs]

    if strict:
        absent = [name for name in supplied if name not in expected]
        if absent:
            raise UnresolvedPlaceholderError(
                f"Placeholder(s) {', '.join(map(token, absent))} "
                f"not found in {template!r}"
            )
        missing = [name for name in expected if name not in supplied]
        if missing:
            raise UnresolvedPlaceholderError(
                f"No value for placeholder(s) {', '.join(map(token, missing))} "
                f"in {template!r}"
            )

    resolved = template
    for name, value in pairs:
        resolved = resolved.replace(token(name), str(value))
    return resolved


def format_id(value: Any) -> str:
    """Render an integer identifier as a path segment."""
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidUseError(f"Identifiers must be integers, got {value!r}")
    return str(value)


def join_ids(ids: Union[int, Iterable[int]]) -> str:
    """Join identifiers with commas in input order; a scalar passes through."""
    if isinstance(ids, (int, str, bytes)):
        return format_id(ids)
    joined = [format_id(i) for i in ids]
    if not joined:
        raise InvalidUseError("At least one identifier is required.")
    return ",".join(joined)


def build_url(
    base_url: str, template: str, parameters: Optional[QueryParameters] = None
) -> str:
    """
    base_url + template, plus ``?<query>`` when parameters carry any values.
    Path placeholders are left in place for resolve().
    """
    url = base_url.rstrip("/") + template
    if parameters is None:
        return url
    query = parameters.query_string()
    return f"{url}?{query}" if query else url


__all__ = [
    "PLACEHOLDER_RE",
    "token",
    "placeholders",
    "resolve",
    "format_id",
    "join_ids",
    "build_url",
]
