"""
Resource endpoints.

Each module declares EndpointDefinition tables and binds them to named
Endpoint classes; registry.discover_endpoint_modules() imports every module in
this package.
"""

from .catalog import UNITS, UnitsEndpoint
from .configuration import (
    BANK_ACCOUNTS,
    EXCHANGE_RATES,
    BankAccountsEndpoint,
    ExchangeRateEndpoint,
)
from .contacts import (
    ADDRESSES,
    GROUPS,
    PEOPLE,
    AddressesEndpoint,
    GroupsEndpoint,
    PeopleEndpoint,
)

__all__ = [
    "UNITS",
    "BANK_ACCOUNTS",
    "EXCHANGE_RATES",
    "GROUPS",
    "ADDRESSES",
    "PEOPLE",
    "UnitsEndpoint",
    "BankAccountsEndpoint",
    "ExchangeRateEndpoint",
    "GroupsEndpoint",
    "AddressesEndpoint",
    "PeopleEndpoint",
]
