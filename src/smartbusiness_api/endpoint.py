"""
Generic resource endpoint.

A resource is described by an immutable EndpointDefinition (path template per
capability, placeholder names, required scopes). Endpoint binds a definition
to a SmartBusinessClient; NestedEndpoint adds an optional bound parent id for
resources living under another one (e.g. a contact's addresses).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import (
    Any,
    ClassVar,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    Union,
)

from pydantic import BaseModel

from . import templates
from .client import Payload, SmartBusinessClient
from .errors import InvalidUseError, UnsupportedOperationError
from .models import Resource
from .parameters import GetParameters, ListParameters, QueryParameters
from .response import Response

ResourceId = int
ResourceIds = Union[ResourceId, Iterable[ResourceId]]


class Capability(str, Enum):
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


METHOD_GET = "GET"
METHOD_POST = "POST"
METHOD_PUT = "PUT"
METHOD_DELETE = "DELETE"

HTTP_METHODS: Mapping[Capability, str] = MappingProxyType(
    {
        Capability.LIST: METHOD_GET,
        Capability.GET: METHOD_GET,
        Capability.CREATE: METHOD_POST,
        Capability.UPDATE: METHOD_PUT,
        Capability.DELETE: METHOD_DELETE,
    }
)


@dataclass(frozen=True)
class EndpointDefinition:
    name: str
    templates: Mapping[Capability, str]
    scopes: Tuple[str, ...] = ()
    id_placeholder: Optional[str] = None
    ids_placeholder: Optional[str] = None
    parent_placeholder: Optional[str] = None
    model: Type[BaseModel] = Resource

    def __post_init__(self) -> None:
        normalized = {Capability(k): v for k, v in dict(self.templates).items()}
        object.__setattr__(self, "templates", MappingProxyType(normalized))
        object.__setattr__(self, "scopes", tuple(self.scopes))
        self._validate()

    def _validate(self) -> None:
        if not self.templates:
            raise ValueError(f"{self.name}: at least one template is required")

        for capability, template in self.templates.items():
            needed = self.required_placeholders(capability)
            found = templates.placeholders(template)
            missing = [p for p in needed if p not in found]
            if missing:
                raise ValueError(
                    f"{self.name}.{capability.value}: template {template!r} lacks "
                    f"{', '.join(map(templates.token, missing))}"
                )
            unexpected = [p for p in found if p not in needed]
            if unexpected:
                raise ValueError(
                    f"{self.name}.{capability.value}: template {template!r} has "
                    f"unbound {', '.join(map(templates.token, unexpected))}"
                )

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        return frozenset(self.templates)

    @property
    def is_nested(self) -> bool:
        return self.parent_placeholder is not None

    def supports(self, capability: Capability) -> bool:
        return capability in self.templates

    def required_placeholders(self, capability: Capability) -> List[str]:
        needed: List[str] = []
        if self.parent_placeholder:
            needed.append(self.parent_placeholder)
        if capability in (Capability.GET, Capability.UPDATE):
            if not self.id_placeholder:
                raise ValueError(f"{self.name}: id_placeholder is required")
            needed.append(self.id_placeholder)
        elif capability is Capability.DELETE:
            if not self.ids_placeholder:
                raise ValueError(f"{self.name}: ids_placeholder is required")
            needed.append(self.ids_placeholder)
        return needed

    def template_for(self, capability: Capability) -> str:
        try:
            return self.templates[capability]
        except KeyError:
            raise UnsupportedOperationError(
                f"'{self.name}' does not support {capability.value}"
            ) from None


class Endpoint:
    """
    Client for one REST resource family.

    Subclasses only bind a definition:

        class UnitsEndpoint(Endpoint):
            definition = UNITS
    """

    definition: ClassVar[Optional[EndpointDefinition]] = None

    def __init__(
        self,
        client: SmartBusinessClient,
        definition: Optional[EndpointDefinition] = None,
    ):
        definition = definition or type(self).definition
        if definition is None:
            raise InvalidUseError(f"{type(self).__name__} has no endpoint definition")
        self.client = client
        self.definition = definition

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, base_url={self.base_url!r})"

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def scopes(self) -> Tuple[str, ...]:
        return self.definition.scopes

    @property
    def base_url(self) -> str:
        return self.client.base_url

    # --- URL building ------------------------------------------------------ #

    def prepare_list_url(
        self, template: str, parameters: Optional[ListParameters] = None
    ) -> str:
        return templates.build_url(self.base_url, template, parameters)

    def prepare_get_url(
        self, template: str, parameters: Optional[GetParameters] = None
    ) -> str:
        return templates.build_url(self.base_url, template, parameters)

    def _url(
        self,
        capability: Capability,
        replacements: Dict[str, Any],
        parameters: Optional[QueryParameters] = None,
    ) -> str:
        template = self.definition.template_for(capability)
        if capability is Capability.LIST:
            url = self.prepare_list_url(template, parameters)
        elif capability is Capability.GET:
            url = self.prepare_get_url(template, parameters)
        else:
            url = templates.build_url(self.base_url, template)
        return templates.resolve(url, replacements)

    def _parent_values(self, parent_id: Optional[ResourceId]) -> Dict[str, Any]:
        placeholder = self.definition.parent_placeholder
        if placeholder is None:
            return {}
        if parent_id is None:
            raise InvalidUseError(f"'{self.name}' requires a parent id")
        return {placeholder: templates.format_id(parent_id)}

    async def call_api(
        self, method: str, url: str, body: Optional[Payload] = None
    ) -> Response:
        return await self.client.call_api(method, url, body, endpoint=self.name)

    def parse(self, response: Response) -> BaseModel:
        """Validate a single-resource payload into the definition's model."""
        return response.as_model(self.definition.model)

    def parse_many(self, response: Response) -> List[BaseModel]:
        return response.as_models(self.definition.model)

    # --- Operations -------------------------------------------------------- #

    async def _list(
        self, parent_id: Optional[ResourceId], parameters: Optional[ListParameters]
    ) -> Response:
        url = self._url(Capability.LIST, self._parent_values(parent_id), parameters)
        return await self.call_api(HTTP_METHODS[Capability.LIST], url)

    async def _get(
        self,
        parent_id: Optional[ResourceId],
        resource_id: ResourceId,
        parameters: Optional[GetParameters],
    ) -> Response:
        values = self._parent_values(parent_id)
        values[self.definition.id_placeholder] = templates.format_id(resource_id)
        url = self._url(Capability.GET, values, parameters)
        return await self.call_api(HTTP_METHODS[Capability.GET], url)

    async def _create(
        self, parent_id: Optional[ResourceId], data: Payload
    ) -> Response:
        url = self._url(Capability.CREATE, self._parent_values(parent_id))
        return await self.call_api(HTTP_METHODS[Capability.CREATE], url, data)

    async def _update(
        self, parent_id: Optional[ResourceId], resource_id: ResourceId, data: Payload
    ) -> Response:
        values = self._parent_values(parent_id)
        values[self.definition.id_placeholder] = templates.format_id(resource_id)
        url = self._url(Capability.UPDATE, values)
        return await self.call_api(HTTP_METHODS[Capability.UPDATE], url, data)

    async def _delete(
        self, parent_id: Optional[ResourceId], resource_ids: ResourceIds
    ) -> Response:
        # resolve capability first so unsupported deletes fail before id checks
        self.definition.template_for(Capability.DELETE)
        values = self._parent_values(parent_id)
        values[self.definition.ids_placeholder] = templates.join_ids(resource_ids)
        url = self._url(Capability.DELETE, values)
        return await self.call_api(HTTP_METHODS[Capability.DELETE], url)

    async def list(self, parameters: Optional[ListParameters] = None) -> Response:
        return await self._list(None, parameters)

    async def get(
        self, resource_id: ResourceId, parameters: Optional[GetParameters] = None
    ) -> Response:
        return await self._get(None, resource_id, parameters)

    async def create(self, data: Payload) -> Response:
        return await self._create(None, data)

    async def update(self, resource_id: ResourceId, data: Payload) -> Response:
        return await self._update(None, resource_id, data)

    async def delete(self, resource_ids: ResourceIds) -> Response:
        """Delete one or many resources in a single request."""
        return await self._delete(None, resource_ids)


class NestedEndpoint(Endpoint):
    """
    Endpoint for resources under a parent. Two calling conventions:
    - explicit ``*_for(parent_id, ...)`` calls, valid at any time
    - plain calls using the id bound by set_parent_id(), which raise
      InvalidUseError while nothing is bound
    """

    unbound_message: ClassVar[str] = (
        "Parent id should be first set by set_parent_id method."
    )

    def __init__(
        self,
        client: SmartBusinessClient,
        definition: Optional[EndpointDefinition] = None,
        *,
        parent_id: Optional[ResourceId] = None,
    ):
        super().__init__(client, definition)
        if not self.definition.is_nested:
            raise InvalidUseError(f"'{self.name}' is not a nested resource")
        self._parent_id = parent_id

    @property
    def parent_id(self) -> Optional[ResourceId]:
        return self._parent_id

    def set_parent_id(self, parent_id: ResourceId) -> None:
        self._parent_id = parent_id

    def _bound_parent(self) -> ResourceId:
        if self._parent_id is None:
            raise InvalidUseError(self.unbound_message)
        return self._parent_id

    async def list_for(
        self, parent_id: ResourceId, parameters: Optional[ListParameters] = None
    ) -> Response:
        return await self._list(parent_id, parameters)

    async def get_for(
        self,
        parent_id: ResourceId,
        resource_id: ResourceId,
        parameters: Optional[GetParameters] = None,
    ) -> Response:
        return await self._get(parent_id, resource_id, parameters)

    async def create_for(self, parent_id: ResourceId, data: Payload) -> Response:
        return await self._create(parent_id, data)

    async def update_for(
        self, parent_id: ResourceId, resource_id: ResourceId, data: Payload
    ) -> Response:
        return await self._update(parent_id, resource_id, data)

    async def delete_for(
        self, parent_id: ResourceId, resource_ids: ResourceIds
    ) -> Response:
        return await self._delete(parent_id, resource_ids)

    async def list(self, parameters: Optional[ListParameters] = None) -> Response:
        return await self.list_for(self._bound_parent(), parameters)

    async def get(
        self, resource_id: ResourceId, parameters: Optional[GetParameters] = None
    ) -> Response:
        return await self.get_for(self._bound_parent(), resource_id, parameters)

    async def create(self, data: Payload) -> Response:
        return await self.create_for(self._bound_parent(), data)

    async def update(self, resource_id: ResourceId, data: Payload) -> Response:
        return await self.update_for(self._bound_parent(), resource_id, data)

    async def delete(self, resource_ids: ResourceIds) -> Response:
        return await self.delete_for(self._bound_parent(), resource_ids)


class ContactEndpoint(NestedEndpoint):
    """Nested endpoint whose parent is a contact."""

    unbound_message: ClassVar[str] = (
        "Contact id should be first set by set_contact_id method."
    )

    @property
    def contact_id(self) -> Optional[ResourceId]:
        return self.parent_id

    def set_contact_id(self, contact_id: ResourceId) -> None:
        self.set_parent_id(contact_id)

    async def list_for_contact(
        self, contact_id: ResourceId, parameters: Optional[ListParameters] = None
    ) -> Response:
        return await self.list_for(contact_id, parameters)

    async def get_for_contact(
        self,
        contact_id: ResourceId,
        resource_id: ResourceId,
        parameters: Optional[GetParameters] = None,
    ) -> Response:
        return await self.get_for(contact_id, resource_id, parameters)

    async def create_for_contact(
        self, contact_id: ResourceId, data: Payload
    ) -> Response:
        return await self.create_for(contact_id, data)

    async def update_for_contact(
        self, contact_id: ResourceId, resource_id: ResourceId, data: Payload
    ) -> Response:
        return await self.update_for(contact_id, resource_id, data)

    async def delete_for_contact(
        self, contact_id: ResourceId, resource_ids: ResourceIds
    ) -> Response:
        return await self.delete_for(contact_id, resource_ids)


__all__ = [
    "Capability",
    "HTTP_METHODS",
    "METHOD_GET",
    "METHOD_POST",
    "METHOD_PUT",
    "METHOD_DELETE",
    "EndpointDefinition",
    "Endpoint",
    "NestedEndpoint",
    "ContactEndpoint",
    "ResourceId",
    "ResourceIds",
]
