from typing import Optional

import httpx
import pytest
from pydantic import BaseModel
from smartbusiness_api.errors import ModelValidationError, ParseError
from smartbusiness_api.models import Resource
from smartbusiness_api.response import Response, error_details


class Unit(BaseModel):
    id: int
    name: str
    abbreviation: Optional[str] = None


def _httpx(status: int, **kwargs) -> httpx.Response:
    request = httpx.Request("GET", "https://mock-sb.com/catalog/configuration/units")
    return httpx.Response(status, request=request, **kwargs)


def test_from_httpx_decodes_body_and_headers():
    resp = Response.from_httpx(
        _httpx(200, json={"id": 1}, headers={"X-Total-Count": "1"})
    )

    assert resp.status_code == 200
    assert resp.method == "GET"
    assert resp.url == "https://mock-sb.com/catalog/configuration/units"
    assert resp.data == {"id": 1}
    assert resp.header("x-total-count") == "1"
    assert resp.header("X-Total-Count") == "1"
    assert resp.headers["content-type"] == "application/json"


def test_headers_are_read_only():
    resp = Response(200, "GET", "https://mock-sb.com", headers={"A": "b"})

    assert resp.headers == {"a": "b"}
    with pytest.raises(TypeError):
        resp.headers["a"] = "c"


def test_empty_body_is_none():
    resp = Response.from_httpx(_httpx(204))
    assert resp.is_empty
    assert resp.items == []


def test_non_json_body_raises_parse_error():
    with pytest.raises(ParseError):
        Response.from_httpx(_httpx(200, text="not json"))


@pytest.mark.parametrize(
    "payload",
    [
        [{"id": 1, "name": "kg"}],
        {"data": [{"id": 1, "name": "kg"}]},
        {"items": [{"id": 1, "name": "kg"}], "total": 1},
    ],
)
def test_items_from_collection_shapes(payload):
    resp = Response(200, "GET", "https://mock-sb.com", data=payload)
    assert resp.items == [{"id": 1, "name": "kg"}]
    assert [u.name for u in resp.as_models(Unit)] == ["kg"]


def test_as_model_unwraps_data_envelope():
    resp = Response(200, "GET", "https://mock-sb.com", data={"data": {"id": 2, "name": "m"}})
    assert resp.as_model(Unit) == Unit(id=2, name="m")


def test_as_model_mismatch_raises():
    resp = Response(200, "GET", "https://mock-sb.com", data={"name": "no id"})
    with pytest.raises(ModelValidationError):
        resp.as_model(Unit)


def test_resource_keeps_unknown_fields():
    resp = Response(200, "GET", "https://mock-sb.com", data={"id": 3, "iban": "SK00"})
    account = resp.as_model(Resource)

    assert account.id == 3
    assert account.model_dump() == {"id": 3, "iban": "SK00"}


def test_error_details_prefers_message():
    details = error_details(
        _httpx(400, json={"message": "Bad input", "error": "validation"})
    )
    assert details["message"] == "Bad input"
    assert details["response_json"]["error"] == "validation"
    assert details["response_text"] is None


def test_error_details_falls_back_to_text():
    details = error_details(_httpx(502, text="Bad Gateway"))
    assert details == {
        "message": "request failed",
        "response_json": None,
        "response_text": "Bad Gateway",
    }
