"""
Contact resources.

Addresses and people live under a contact and are served by ContactEndpoint:
either pass the contact id explicitly (``list_for_contact(10)``) or bind it
once with ``set_contact_id(10)`` and use the plain calls.
"""

from __future__ import annotations

from smartbusiness_api.endpoint import (
    Capability,
    ContactEndpoint,
    Endpoint,
    EndpointDefinition,
)

ENDPOINT_CONTACT_CONFIGURATION_GROUPS_LIST = "/contacts/configuration/groups"
ENDPOINT_CONTACT_CONFIGURATION_GROUPS_GET = "/contacts/configuration/groups/{groupId}"
ENDPOINT_CONTACT_CONFIGURATION_GROUPS_POST = "/contacts/configuration/groups"
ENDPOINT_CONTACT_CONFIGURATION_GROUPS_PUT = "/contacts/configuration/groups/{groupId}"
ENDPOINT_CONTACT_CONFIGURATION_GROUPS_DELETE = (
    "/contacts/configuration/groups/{groupsIds}"
)

ENDPOINT_CONTACT_ADDRESSES_LIST = "/contacts/{contactId}/addresses"
ENDPOINT_CONTACT_ADDRESSES_GET = "/contacts/{contactId}/addresses/{addressId}"
ENDPOINT_CONTACT_ADDRESSES_POST = "/contacts/{contactId}/addresses"
ENDPOINT_CONTACT_ADDRESSES_PUT = "/contacts/{contactId}/addresses/{addressId}"
ENDPOINT_CONTACT_ADDRESSES_DELETE = "/contacts/{contactId}/addresses/{addressesIds}"

ENDPOINT_CONTACT_PEOPLE_LIST = "/contacts/{contactId}/people"
ENDPOINT_CONTACT_PEOPLE_GET = "/contacts/{contactId}/people/{personId}"
ENDPOINT_CONTACT_PEOPLE_POST = "/contacts/{contactId}/people"
ENDPOINT_CONTACT_PEOPLE_PUT = "/contacts/{contactId}/people/{personId}"
ENDPOINT_CONTACT_PEOPLE_DELETE = "/contacts/{contactId}/people/{peopleIds}"

GROUPS = EndpointDefinition(
    name="groups",
    scopes=("contact",),
    id_placeholder="groupId",
    ids_placeholder="groupsIds",
    templates={
        Capability.LIST: ENDPOINT_CONTACT_CONFIGURATION_GROUPS_LIST,
        Capability.GET: ENDPOINT_CONTACT_CONFIGURATION_GROUPS_GET,
        Capability.CREATE: ENDPOINT_CONTACT_CONFIGURATION_GROUPS_POST,
        Capability.UPDATE: ENDPOINT_CONTACT_CONFIGURATION_GROUPS_PUT,
        Capability.DELETE: ENDPOINT_CONTACT_CONFIGURATION_GROUPS_DELETE,
    },
)

ADDRESSES = EndpointDefinition(
    name="addresses",
    scopes=("contact",),
    parent_placeholder="contactId",
    id_placeholder="addressId",
    ids_placeholder="addressesIds",
    templates={
        Capability.LIST: ENDPOINT_CONTACT_ADDRESSES_LIST,
        Capability.GET: ENDPOINT_CONTACT_ADDRESSES_GET,
        Capability.CREATE: ENDPOINT_CONTACT_ADDRESSES_POST,
        Capability.UPDATE: ENDPOINT_CONTACT_ADDRESSES_PUT,
        Capability.DELETE: ENDPOINT_CONTACT_ADDRESSES_DELETE,
    },
)

PEOPLE = EndpointDefinition(
    name="people",
    scopes=("contact",),
    parent_placeholder="contactId",
    id_placeholder="personId",
    ids_placeholder="peopleIds",
    templates={
        Capability.LIST: ENDPOINT_CONTACT_PEOPLE_LIST,
        Capability.GET: ENDPOINT_CONTACT_PEOPLE_GET,
        Capability.CREATE: ENDPOINT_CONTACT_PEOPLE_POST,
        Capability.UPDATE: ENDPOINT_CONTACT_PEOPLE_PUT,
        Capability.DELETE: ENDPOINT_CONTACT_PEOPLE_DELETE,
    },
)


class GroupsEndpoint(Endpoint):
    definition = GROUPS


class AddressesEndpoint(ContactEndpoint):
    definition = ADDRESSES


class PeopleEndpoint(ContactEndpoint):
    definition = PEOPLE
