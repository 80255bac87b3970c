from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .errors import ModelValidationError, ParseError

T = TypeVar("T", bound=BaseModel)

# Keys under which collection payloads carry their elements
COLLECTION_KEYS = ("data", "items")


@dataclass(frozen=True)
class Response:
    """
    Read-only view of an API response.
    - headers are lower-cased and immutable
    - data is the decoded JSON body, or None for an empty body
    """

    status_code: int
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    data: Any = None

    def __post_init__(self) -> None:
        normalized = {k.lower(): v for k, v in dict(self.headers).items()}
        object.__setattr__(self, "headers", MappingProxyType(normalized))

    @classmethod
    def from_httpx(cls, resp: httpx.Response) -> "Response":
        return cls(
            status_code=resp.status_code,
            method=resp.request.method,
            url=str(resp.request.url),
            headers=dict(resp.headers),
            data=_decode_json(resp),
        )

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_empty(self) -> bool:
        return self.data is None

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.headers.get(name.lower(), default)

    @property
    def items(self) -> List[Any]:
        """Elements of a collection payload (top-level list or under data/items)."""
        if isinstance(self.data, list):
            return list(self.data)
        if isinstance(self.data, dict):
            for key in COLLECTION_KEYS:
                value = self.data.get(key)
                if isinstance(value, list):
                    return list(value)
        return []

    def as_model(self, model: Type[T]) -> T:
        payload = self.data
        if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
            payload = payload["data"]
        return _validate(model, payload)

    def as_models(self, model: Type[T]) -> List[T]:
        return [_validate(model, item) for item in self.items]


def _validate(model: Type[T], payload: Any) -> T:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ModelValidationError(
            f"Response did not match model {model.__name__}: {exc}"
        ) from exc


def _decode_json(resp: httpx.Response) -> Any:
    # 204 No Content and other empty bodies
    if not resp.content:
        return None

    try:
        return resp.json()
    except ValueError as exc:
        snippet = (resp.text or "")[:500]
        raise ParseError(
            f"Expected JSON from {resp.request.method} "
            f"{resp.request.url}, got non-JSON body snippet: "
            f"{snippet!r}"
        ) from exc


def error_details(resp: httpx.Response) -> Dict[str, Any]:
    """Best-effort message extraction from an error response body."""
    response_json: Optional[Dict[str, Any]] = None
    response_text: Optional[str] = None
    message = "request failed"

    try:
        parsed = resp.json()
        if isinstance(parsed, dict):
            response_json = parsed
            message = (
                parsed.get("message")
                or parsed.get("error_description")
                or parsed.get("error")
                or message
            )
    except ValueError:
        response_text = (resp.text or "")[:500]

    return {
        "message": str(message),
        "response_json": response_json,
        "response_text": response_text,
    }


__all__ = ["Response", "COLLECTION_KEYS", "error_details"]
