"""Catalog configuration resources."""

from __future__ import annotations

from smartbusiness_api.endpoint import Capability, Endpoint, EndpointDefinition

ENDPOINT_CATALOG_CONFIGURATION_UNITS_LIST = "/catalog/configuration/units"
ENDPOINT_CATALOG_CONFIGURATION_UNITS_GET = "/catalog/configuration/units/{unitId}"

UNITS = EndpointDefinition(
    name="units",
    scopes=("configuration",),
    id_placeholder="unitId",
    templates={
        Capability.LIST: ENDPOINT_CATALOG_CONFIGURATION_UNITS_LIST,
        Capability.GET: ENDPOINT_CATALOG_CONFIGURATION_UNITS_GET,
    },
)


class UnitsEndpoint(Endpoint):
    definition = UNITS
