import json

import pytest
import respx
from httpx import Response
from smartbusiness_api.client import SmartBusinessClient
from smartbusiness_api.endpoint import NestedEndpoint
from smartbusiness_api.endpoints import (
    ADDRESSES,
    UNITS,
    AddressesEndpoint,
    PeopleEndpoint,
)
from smartbusiness_api.errors import InvalidUseError

BASE = "https://mock-sb.com"


def _client() -> SmartBusinessClient:
    return SmartBusinessClient(base_url=BASE, access_token="mock-token")


@pytest.mark.asyncio
@respx.mock
async def test_bound_contact_create():
    route = respx.post(f"{BASE}/contacts/10/addresses").mock(
        return_value=Response(201, json={"id": 1, "city": "X"})
    )

    async with _client() as client:
        addresses = AddressesEndpoint(client)
        addresses.set_contact_id(10)
        await addresses.create({"city": "X"})

    assert route.called
    assert json.loads(route.calls[0].request.content) == {"city": "X"}


@pytest.mark.asyncio
@respx.mock
async def test_bound_contact_all_operations():
    base = f"{BASE}/contacts/10/people"
    list_route = respx.get(base).mock(return_value=Response(200, json=[]))
    get_route = respx.get(f"{base}/2").mock(return_value=Response(200, json={}))
    put_route = respx.put(f"{base}/2").mock(return_value=Response(200, json={}))
    delete_route = respx.delete(f"{base}/2,3").mock(return_value=Response(204))

    async with _client() as client:
        people = PeopleEndpoint(client)
        people.set_contact_id(10)
        assert people.contact_id == 10

        await people.list()
        await people.get(2)
        await people.update(2, {"firstname": "Jana"})
        await people.delete([2, 3])

    assert list_route.called
    assert get_route.called
    assert put_route.called
    assert delete_route.called


@pytest.mark.asyncio
@respx.mock
async def test_explicit_contact_calls_need_no_binding():
    list_route = respx.get(f"{BASE}/contacts/7/addresses").mock(
        return_value=Response(200, json=[])
    )
    get_route = respx.get(f"{BASE}/contacts/7/addresses/4").mock(
        return_value=Response(200, json={"id": 4})
    )
    delete_route = respx.delete(f"{BASE}/contacts/7/addresses/4").mock(
        return_value=Response(204)
    )

    async with _client() as client:
        addresses = AddressesEndpoint(client)
        await addresses.list_for_contact(7)
        await addresses.get_for_contact(7, 4)
        await addresses.delete_for_contact(7, 4)
        assert addresses.contact_id is None

    assert list_route.called
    assert get_route.called
    assert delete_route.called


@pytest.mark.asyncio
@respx.mock
async def test_explicit_contact_ignores_bound_contact():
    put_route = respx.put(f"{BASE}/contacts/8/addresses/1").mock(
        return_value=Response(200, json={})
    )
    post_route = respx.post(f"{BASE}/contacts/8/addresses").mock(
        return_value=Response(201, json={"id": 2})
    )

    async with _client() as client:
        addresses = AddressesEndpoint(client)
        addresses.set_contact_id(10)
        await addresses.update_for_contact(8, 1, {"city": "Y"})
        await addresses.create_for_contact(8, {"city": "Z"})
        assert addresses.contact_id == 10

    assert put_route.called
    assert post_route.called


@pytest.mark.asyncio
@respx.mock
async def test_unbound_calls_raise_without_request():
    async with _client() as client:
        addresses = AddressesEndpoint(client)

        with pytest.raises(InvalidUseError) as exc:
            await addresses.list()
        with pytest.raises(InvalidUseError):
            await addresses.get(1)
        with pytest.raises(InvalidUseError):
            await addresses.create({"city": "X"})
        with pytest.raises(InvalidUseError):
            await addresses.update(1, {"city": "X"})
        with pytest.raises(InvalidUseError):
            await addresses.delete([1])

    assert str(exc.value) == "Contact id should be first set by set_contact_id method."


@pytest.mark.asyncio
@respx.mock
async def test_rebinding_changes_target():
    first = respx.get(f"{BASE}/contacts/1/addresses").mock(
        return_value=Response(200, json=[])
    )
    second = respx.get(f"{BASE}/contacts/2/addresses").mock(
        return_value=Response(200, json=[])
    )

    async with _client() as client:
        addresses = AddressesEndpoint(client)
        addresses.set_contact_id(1)
        await addresses.list()
        addresses.set_contact_id(2)
        await addresses.list()

    assert first.call_count == 1
    assert second.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_generic_nested_endpoint_with_parent_id():
    route = respx.get(f"{BASE}/contacts/3/addresses").mock(
        return_value=Response(200, json=[])
    )

    async with _client() as client:
        nested = NestedEndpoint(client, ADDRESSES, parent_id=3)
        await nested.list()

    assert route.called


@pytest.mark.asyncio
async def test_generic_nested_endpoint_unbound_message():
    async with _client() as client:
        nested = NestedEndpoint(client, ADDRESSES)
        with pytest.raises(InvalidUseError) as exc:
            await nested.list()

    assert "set_parent_id" in str(exc.value)


@pytest.mark.asyncio
async def test_nested_endpoint_rejects_flat_definition():
    async with _client() as client:
        with pytest.raises(InvalidUseError):
            NestedEndpoint(client, UNITS)


@pytest.mark.asyncio
@respx.mock
async def test_non_integer_contact_id_raises_before_request():
    async with _client() as client:
        addresses = AddressesEndpoint(client)
        addresses.set_contact_id("10/../../configuration")
        with pytest.raises(InvalidUseError):
            await addresses.list()
        with pytest.raises(InvalidUseError):
            await addresses.get_for_contact(10, "1?x=")
