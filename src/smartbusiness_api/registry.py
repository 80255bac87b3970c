from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import Dict, Iterable, List, Optional, Tuple, Type

from .client import SmartBusinessClient
from .endpoint import Endpoint

log = logging.getLogger("smartbusiness_api.registry")


# --- Discovery helpers ----------------------------------------------------- #


def discover_endpoint_modules(
    package_name: str = "smartbusiness_api.endpoints",
) -> List[ModuleType]:
    """Import all modules under the given endpoints package."""
    base_pkg = importlib.import_module(package_name)
    return [
        importlib.import_module(info.name)
        for info in pkgutil.iter_modules(base_pkg.__path__, base_pkg.__name__ + ".")
    ]


def iter_endpoint_classes(module: ModuleType) -> Iterable[Type[Endpoint]]:
    """Yield Endpoint subclasses defined (not imported) in module with a definition."""
    for _, cls in inspect.getmembers(module, inspect.isclass):
        if not issubclass(cls, Endpoint) or cls.__module__ != module.__name__:
            continue
        if cls.definition is None:
            log.debug("Skipping %s.%s: no definition", module.__name__, cls.__name__)
            continue
        yield cls


# --- Instantiation --------------------------------------------------------- #


def build_endpoints(
    client: SmartBusinessClient,
    modules: Optional[List[ModuleType]] = None,
) -> Dict[str, Endpoint]:
    """Instantiate every discovered endpoint, keyed by definition name."""
    modules = modules if modules is not None else discover_endpoint_modules()
    endpoints: Dict[str, Endpoint] = {}

    for module in modules:
        for cls in iter_endpoint_classes(module):
            name = cls.definition.name
            if name in endpoints:
                raise ValueError(f"Duplicate endpoint name detected: {name}")
            endpoints[name] = cls(client)
            log.debug("Registered endpoint: %s (%s)", name, module.__name__)

    return endpoints


def required_scopes(endpoints: Iterable[Endpoint]) -> Tuple[str, ...]:
    """Sorted union of the OAuth2 scopes the given endpoints need."""
    scopes = set()
    for endpoint in endpoints:
        scopes.update(endpoint.scopes)
    return tuple(sorted(scopes))


__all__ = [
    "discover_endpoint_modules",
    "iter_endpoint_classes",
    "build_endpoints",
    "required_scopes",
]
