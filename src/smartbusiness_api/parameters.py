"""
Query-parameter carriers for list and get calls.

Both models accept unknown keys, which are passed through to the query
string unchanged. Serialization is canonical: pairs are sorted by key.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional, Tuple

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _format(value: Any) -> Optional[str]:
    if isinstance(value, (list, tuple, set, frozenset)):
        items = [_format_scalar(v) for v in value if v is not None]
        return ",".join(items) if items else None
    return _format_scalar(value)


def _split_csv(value: Any) -> Any:
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


class QueryParameters(BaseModel):
    """Base for parameter objects; subclasses only declare fields."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    # Mapping fields flattened as "<prefix>[<key>]"
    NESTED_PREFIXES: ClassVar[Dict[str, str]] = {"filters": "filter"}

    def to_query(self) -> List[Tuple[str, str]]:
        pairs: List[Tuple[str, str]] = []
        for key, value in self.model_dump(exclude_none=True).items():
            if isinstance(value, dict):
                prefix = self.NESTED_PREFIXES.get(key, key)
                for sub_key, sub_value in value.items():
                    if sub_value is None:
                        continue
                    formatted = _format(sub_value)
                    if formatted is not None:
                        pairs.append((f"{prefix}[{sub_key}]", formatted))
                continue

            formatted = _format(value)
            if formatted is not None:
                pairs.append((key, formatted))

        return sorted(pairs, key=lambda kv: kv[0])

    def query_string(self) -> str:
        return str(httpx.QueryParams(self.to_query()))


class ListParameters(QueryParameters):
    page: Optional[int] = Field(default=None, ge=1)
    limit: Optional[int] = Field(default=None, ge=1)
    sort: Optional[List[str]] = None
    fields: Optional[List[str]] = None
    filters: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("sort", "fields", mode="before")
    @classmethod
    def _accept_csv(cls, value: Any) -> Any:
        return _split_csv(value)


class GetParameters(QueryParameters):
    fields: Optional[List[str]] = None
    expand: Optional[List[str]] = None

    @field_validator("fields", "expand", mode="before")
    @classmethod
    def _accept_csv(cls, value: Any) -> Any:
        return _split_csv(value)


__all__ = ["QueryParameters", "ListParameters", "GetParameters"]
