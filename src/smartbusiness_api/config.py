from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple

from dotenv import load_dotenv

from .errors import ConfigurationError

if TYPE_CHECKING:
    from .client import SmartBusinessClient

PRODUCTION_BASE_URL = "https://api.smartbusiness.sk/api2"
STAGING_BASE_URL = "https://api-staging.smartbusiness.sk/api2"
TOKEN_PATH = "/oauth2/token"
DEFAULT_TIMEOUT_SECONDS = 10.0

_FALSY = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class ClientSettings:
    client_id: str
    client_secret: str
    base_url: str
    token_url: str
    staging: bool = False
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    scopes: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)


def is_staging(value: Optional[str]) -> bool:
    """STAGING is enabled by any value except empty/0/false/no/off."""
    if value is None:
        return False
    return value.strip().lower() not in _FALSY


def select_base_url(staging: bool) -> str:
    return STAGING_BASE_URL if staging else PRODUCTION_BASE_URL


def token_url_for(base_url: str) -> str:
    return base_url.rstrip("/") + TOKEN_PATH


def _split_scopes(raw: str) -> Tuple[str, ...]:
    return tuple(s for s in raw.replace(",", " ").split() if s)


def load_env_config(*, use_dotenv: bool = True) -> ClientSettings:
    """Read client settings from the environment (optionally seeded from .env)."""
    if use_dotenv:
        load_dotenv(override=False)

    staging = is_staging(os.getenv("STAGING"))
    base_url = (
        os.getenv("SMARTBUSINESS_BASE_URL", "").strip() or select_base_url(staging)
    )
    token_url = os.getenv("SMARTBUSINESS_TOKEN_URL", "").strip() or token_url_for(
        base_url
    )

    raw_timeout = os.getenv("SMARTBUSINESS_TIMEOUT_SECONDS", "").strip()
    try:
        timeout_seconds = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_SECONDS
    except ValueError as exc:
        raise ConfigurationError(
            f"SMARTBUSINESS_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}"
        ) from exc

    return ClientSettings(
        client_id=os.getenv("CLIENT_ID", "").strip(),
        client_secret=os.getenv("CLIENT_SECRET", "").strip(),
        base_url=base_url.rstrip("/"),
        token_url=token_url,
        staging=staging,
        timeout_seconds=timeout_seconds,
        scopes=_split_scopes(os.getenv("SMARTBUSINESS_SCOPES", "")),
    )


def create_client_from_env(**kwargs) -> "SmartBusinessClient":
    """Create a SmartBusinessClient from CLIENT_ID / CLIENT_SECRET / STAGING."""
    from .client import SmartBusinessClient

    return SmartBusinessClient.from_settings(load_env_config(), **kwargs)


__all__ = [
    "ClientSettings",
    "PRODUCTION_BASE_URL",
    "STAGING_BASE_URL",
    "TOKEN_PATH",
    "DEFAULT_TIMEOUT_SECONDS",
    "is_staging",
    "select_base_url",
    "token_url_for",
    "load_env_config",
    "create_client_from_env",
]
