"""smartbusiness_api package exports."""

from .api import SmartBusinessApi
from .client import RetryConfig, SmartBusinessClient
from .config import ClientSettings, create_client_from_env, load_env_config
from .endpoint import (
    Capability,
    ContactEndpoint,
    Endpoint,
    EndpointDefinition,
    NestedEndpoint,
)
from .endpoints import (
    AddressesEndpoint,
    BankAccountsEndpoint,
    ExchangeRateEndpoint,
    GroupsEndpoint,
    PeopleEndpoint,
    UnitsEndpoint,
)
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    HTTPError,
    InvalidUseError,
    ModelValidationError,
    NotFoundError,
    ParseError,
    SmartBusinessError,
    TransportError,
    UnresolvedPlaceholderError,
    UnsupportedOperationError,
)
from .parameters import GetParameters, ListParameters
from .registry import build_endpoints, discover_endpoint_modules
from .response import Response

__all__ = [
    # Client
    "SmartBusinessApi",
    "SmartBusinessClient",
    "RetryConfig",
    "Response",
    # Configuration
    "ClientSettings",
    "load_env_config",
    "create_client_from_env",
    # Endpoints
    "Capability",
    "EndpointDefinition",
    "Endpoint",
    "NestedEndpoint",
    "ContactEndpoint",
    "UnitsEndpoint",
    "BankAccountsEndpoint",
    "ExchangeRateEndpoint",
    "GroupsEndpoint",
    "AddressesEndpoint",
    "PeopleEndpoint",
    "ListParameters",
    "GetParameters",
    # Registry
    "discover_endpoint_modules",
    "build_endpoints",
    # Exceptions
    "SmartBusinessError",
    "ApiError",
    "HTTPError",
    "NotFoundError",
    "TransportError",
    "ParseError",
    "AuthenticationError",
    "ModelValidationError",
    "InvalidUseError",
    "UnresolvedPlaceholderError",
    "UnsupportedOperationError",
    "ConfigurationError",
]
