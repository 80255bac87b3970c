from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional, Tuple

from .client import SmartBusinessClient
from .endpoint import Endpoint
from .registry import build_endpoints, required_scopes

log = logging.getLogger("smartbusiness_api.api")


class SmartBusinessApi:
    """
    One client, every endpoint.

        async with SmartBusinessApi.from_env() as api:
            units = await api.units.list()
            api.addresses.set_contact_id(10)
            await api.addresses.create({"city": "Bratislava"})
    """

    def __init__(
        self,
        client: SmartBusinessClient,
        endpoints: Optional[Dict[str, Endpoint]] = None,
    ):
        self.client = client
        self._endpoints = endpoints if endpoints is not None else build_endpoints(client)
        log.debug("SmartBusinessApi ready with %d endpoints", len(self._endpoints))

    @classmethod
    def from_env(cls, **kwargs) -> "SmartBusinessApi":
        return cls(SmartBusinessClient.from_env(**kwargs))

    def __getattr__(self, name: str) -> Endpoint:
        endpoints = self.__dict__.get("_endpoints", {})
        try:
            return endpoints[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} has no endpoint {name!r}"
            ) from None

    def __getitem__(self, name: str) -> Endpoint:
        return self._endpoints[name]

    def __contains__(self, name: object) -> bool:
        return name in self._endpoints

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._endpoints))

    @property
    def endpoints(self) -> Dict[str, Endpoint]:
        return dict(self._endpoints)

    @property
    def required_scopes(self) -> Tuple[str, ...]:
        return required_scopes(self._endpoints.values())

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "SmartBusinessApi":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


__all__ = ["SmartBusinessApi"]
