"""Company configuration resources: bank accounts and exchange rates."""

from __future__ import annotations

from smartbusiness_api.endpoint import Capability, Endpoint, EndpointDefinition

ENDPOINT_CONFIGURATION_BANK_ACCOUNTS_LIST = "/configuration/bank-accounts"
ENDPOINT_CONFIGURATION_BANK_ACCOUNTS_GET = "/configuration/bank-accounts/{accountId}"
ENDPOINT_CONFIGURATION_BANK_ACCOUNTS_POST = "/configuration/bank-accounts"
ENDPOINT_CONFIGURATION_BANK_ACCOUNTS_PUT = "/configuration/bank-accounts/{accountId}"
ENDPOINT_CONFIGURATION_BANK_ACCOUNTS_DELETE = (
    "/configuration/bank-accounts/{accountsIds}"
)

ENDPOINT_CONFIGURATION_EXCHANGE_RATES_LIST = "/configuration/exchange-rates"
ENDPOINT_CONFIGURATION_EXCHANGE_RATES_GET = "/configuration/exchange-rates/{exchangeId}"
ENDPOINT_CONFIGURATION_EXCHANGE_RATES_POST = "/configuration/exchange-rates"
ENDPOINT_CONFIGURATION_EXCHANGE_RATES_PUT = "/configuration/exchange-rates/{exchangeId}"
ENDPOINT_CONFIGURATION_EXCHANGE_RATES_DELETE = (
    "/configuration/exchange-rates/{exchangeIds}"
)

BANK_ACCOUNTS = EndpointDefinition(
    name="bank_accounts",
    scopes=("configuration",),
    id_placeholder="accountId",
    ids_placeholder="accountsIds",
    templates={
        Capability.LIST: ENDPOINT_CONFIGURATION_BANK_ACCOUNTS_LIST,
        Capability.GET: ENDPOINT_CONFIGURATION_BANK_ACCOUNTS_GET,
        Capability.CREATE: ENDPOINT_CONFIGURATION_BANK_ACCOUNTS_POST,
        Capability.UPDATE: ENDPOINT_CONFIGURATION_BANK_ACCOUNTS_PUT,
        Capability.DELETE: ENDPOINT_CONFIGURATION_BANK_ACCOUNTS_DELETE,
    },
)

EXCHANGE_RATES = EndpointDefinition(
    name="exchange_rates",
    scopes=("configuration",),
    id_placeholder="exchangeId",
    ids_placeholder="exchangeIds",
    templates={
        Capability.LIST: ENDPOINT_CONFIGURATION_EXCHANGE_RATES_LIST,
        Capability.GET: ENDPOINT_CONFIGURATION_EXCHANGE_RATES_GET,
        Capability.CREATE: ENDPOINT_CONFIGURATION_EXCHANGE_RATES_POST,
        Capability.UPDATE: ENDPOINT_CONFIGURATION_EXCHANGE_RATES_PUT,
        Capability.DELETE: ENDPOINT_CONFIGURATION_EXCHANGE_RATES_DELETE,
    },
)


class BankAccountsEndpoint(Endpoint):
    definition = BANK_ACCOUNTS


class ExchangeRateEndpoint(Endpoint):
    definition = EXCHANGE_RATES
