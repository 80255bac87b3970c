"""
OAuth2 authentication flows for httpx.

ClientCredentialsAuth obtains a bearer token with the client-credentials grant,
caches it until shortly before it expires, and on a 401 from the API fetches a
fresh token and replays the request once.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Generator, Iterable, Optional

import httpx
from pydantic import ValidationError

from .errors import AuthenticationError, ConfigurationError
from .models import TokenResponse
from .response import error_details

log = logging.getLogger("smartbusiness_api.auth")


class BearerTokenAuth(httpx.Auth):
    """Static, pre-obtained access token."""

    def __init__(self, access_token: str):
        if not access_token:
            raise ConfigurationError("access_token must be provided.")
        self._access_token = access_token

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._access_token}"
        yield request


class ClientCredentialsAuth(httpx.Auth):
    requires_response_body = True

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        token_url: str,
        scopes: Iterable[str] = (),
        leeway_seconds: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        if not client_id or not client_secret:
            raise ConfigurationError("client_id and client_secret must be provided.")
        if not token_url:
            raise ConfigurationError("token_url must be provided.")

        self.client_id = client_id
        self._client_secret = client_secret
        self.token_url = token_url
        self.scopes = tuple(scopes)
        self.leeway_seconds = leeway_seconds
        self._clock = clock

        self._access_token: Optional[str] = None
        self._expires_at: Optional[float] = None

    @property
    def has_valid_token(self) -> bool:
        if self._access_token is None:
            return False
        return self._expires_at is None or self._clock() < self._expires_at

    def invalidate(self) -> None:
        self._access_token = None
        self._expires_at = None

    def build_token_request(self) -> httpx.Request:
        data = {
            "grant_type": "client_credentials",
            "client_id": self.client_id,
            "client_secret": self._client_secret,
        }
        if self.scopes:
            data["scope"] = " ".join(self.scopes)
        return httpx.Request(
            "POST", self.token_url, data=data, headers={"Accept": "application/json"}
        )

    def update_token(self, response: httpx.Response) -> None:
        if not response.is_success:
            details = error_details(response)
            raise AuthenticationError(
                f"Token request failed: {response.status_code} {details['message']}"
            )

        try:
            token = TokenResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise AuthenticationError(
                f"Token endpoint returned an unusable payload: {exc}"
            ) from exc

        self._access_token = token.access_token
        self._expires_at = (
            self._clock() + token.expires_in - self.leeway_seconds
            if token.expires_in is not None
            else None
        )
        # never log the token itself
        log.debug(
            "oauth.token",
            extra={"status": response.status_code, "expires_in": token.expires_in},
        )

    def _authorize(self, request: httpx.Request) -> None:
        request.headers["Authorization"] = f"Bearer {self._access_token}"

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        if not self.has_valid_token:
            token_response = yield self.build_token_request()
            self.update_token(token_response)

        self._authorize(request)
        response = yield request

        if response.status_code == 401:
            self.invalidate()
            token_response = yield self.build_token_request()
            self.update_token(token_response)
            self._authorize(request)
            yield request


__all__ = ["BearerTokenAuth", "ClientCredentialsAuth"]
