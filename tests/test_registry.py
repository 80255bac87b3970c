from types import ModuleType

import pytest
import respx
from httpx import Response
from smartbusiness_api.api import SmartBusinessApi
from smartbusiness_api.client import SmartBusinessClient
from smartbusiness_api.endpoint import (
    Capability,
    ContactEndpoint,
    Endpoint,
    EndpointDefinition,
)
from smartbusiness_api.endpoints import AddressesEndpoint, GroupsEndpoint
from smartbusiness_api.registry import (
    build_endpoints,
    discover_endpoint_modules,
    iter_endpoint_classes,
    required_scopes,
)

BASE = "https://mock-sb.com"

ALL_NAMES = {
    "units",
    "bank_accounts",
    "exchange_rates",
    "groups",
    "addresses",
    "people",
}


def _client() -> SmartBusinessClient:
    return SmartBusinessClient(base_url=BASE, access_token="mock-token")


def _make_module(name: str, **members) -> ModuleType:
    module = ModuleType(name)
    for attr, value in members.items():
        if isinstance(value, type):
            value.__module__ = name
        setattr(module, attr, value)
    return module


def test_discover_endpoint_modules_finds_resource_modules():
    names = {m.__name__ for m in discover_endpoint_modules()}
    assert {
        "smartbusiness_api.endpoints.catalog",
        "smartbusiness_api.endpoints.configuration",
        "smartbusiness_api.endpoints.contacts",
    } <= names


def test_iter_endpoint_classes_skips_imported_and_abstract():
    things = EndpointDefinition(name="things", templates={Capability.LIST: "/things"})

    class ThingsEndpoint(Endpoint):
        definition = things

    class Incomplete(Endpoint):
        pass

    module = _make_module("fake_mod", ThingsEndpoint=ThingsEndpoint, Incomplete=Incomplete)
    # imported base classes live in another module and are ignored
    module.ContactEndpoint = ContactEndpoint

    assert list(iter_endpoint_classes(module)) == [ThingsEndpoint]


@pytest.mark.asyncio
async def test_build_endpoints_registers_all_resources():
    async with _client() as client:
        endpoints = build_endpoints(client)

    assert set(endpoints) == ALL_NAMES
    assert isinstance(endpoints["groups"], GroupsEndpoint)
    assert isinstance(endpoints["addresses"], AddressesEndpoint)
    assert all(e.client is client for e in endpoints.values())


@pytest.mark.asyncio
async def test_build_endpoints_rejects_duplicates():
    dup = EndpointDefinition(name="units", templates={Capability.LIST: "/units"})

    class DuplicateUnits(Endpoint):
        definition = dup

    module = _make_module("dup_mod", DuplicateUnits=DuplicateUnits)

    async with _client() as client:
        with pytest.raises(ValueError) as exc:
            build_endpoints(client, discover_endpoint_modules() + [module])

    assert "Duplicate endpoint name detected: units" in str(exc.value)


@pytest.mark.asyncio
async def test_required_scopes_is_sorted_union():
    async with _client() as client:
        endpoints = build_endpoints(client)

    assert required_scopes(endpoints.values()) == ("configuration", "contact")


@pytest.mark.asyncio
@respx.mock
async def test_api_facade_attribute_access():
    route = respx.get(f"{BASE}/contacts/configuration/groups/5").mock(
        return_value=Response(200, json={"id": 5})
    )

    async with SmartBusinessApi(_client()) as api:
        resp = await api.groups.get(5)

        assert "units" in api
        assert list(api) == sorted(ALL_NAMES)
        assert api["people"] is api.people
        assert api.required_scopes == ("configuration", "contact")

    assert route.called
    assert resp.data == {"id": 5}


@pytest.mark.asyncio
async def test_api_facade_unknown_endpoint():
    async with SmartBusinessApi(_client()) as api:
        with pytest.raises(AttributeError):
            api.invoices


@pytest.mark.asyncio
async def test_api_from_env(monkeypatch):
    monkeypatch.setattr("smartbusiness_api.config.load_dotenv", lambda *a, **k: None)
    for name in ("STAGING", "SMARTBUSINESS_TOKEN_URL", "SMARTBUSINESS_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CLIENT_ID", "my-id")
    monkeypatch.setenv("CLIENT_SECRET", "my-secret")
    monkeypatch.setenv("SMARTBUSINESS_BASE_URL", BASE)

    async with SmartBusinessApi.from_env() as api:
        assert api.client.base_url == BASE
        assert set(api.endpoints) == ALL_NAMES
