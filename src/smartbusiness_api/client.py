import asyncio
import logging
import time
from dataclasses import dataclass
from functools import partial
from typing import Any, Dict, Iterable, Optional, Union

import httpx
from pydantic import BaseModel

from .auth import BearerTokenAuth, ClientCredentialsAuth
from .config import ClientSettings, load_env_config, token_url_for
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    HTTPError,
    NotFoundError,
    TransportError,
)
from .observability import log_api_call
from .response import Response, error_details

Payload = Union[Dict[str, Any], BaseModel]


@dataclass(frozen=True)
class RetryConfig:
    max_retries: int = 0  # total extra attempts; off unless asked for
    backoff_base_seconds: float = 0.3  # 0.3, 0.6, 1.2...
    retry_statuses: frozenset[int] = frozenset({502, 503, 504})
    retry_on_429: bool = False


class SmartBusinessClient:
    """
    Shared OAuth2-authenticated HTTP client for the SmartBusiness API.
    - Owns credentials, the resolved base URL and the httpx transport
    - call_api() is the single funnel every endpoint goes through
    - Returns Response wrappers; no resource-specific logic lives here
    """

    def __init__(
        self,
        *,
        base_url: str,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        access_token: Optional[str] = None,
        token_url: Optional[str] = None,
        scopes: Iterable[str] = (),
        auth: Optional[httpx.Auth] = None,
        timeout_seconds: float = 10.0,
        retry: Optional[RetryConfig] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        base_url = (base_url or "").rstrip("/")
        if not base_url:
            raise ConfigurationError("base_url must be provided.")

        if auth is None:
            if access_token:
                auth = BearerTokenAuth(access_token)
            elif client_id or client_secret:
                auth = ClientCredentialsAuth(
                    client_id=client_id or "",
                    client_secret=client_secret or "",
                    token_url=token_url or token_url_for(base_url),
                    scopes=scopes,
                )
            else:
                raise ConfigurationError(
                    "client_id and client_secret (or access_token) must be provided."
                )

        self.base_url = base_url
        self.auth = auth
        self.timeout_seconds = timeout_seconds
        self.retry = retry if retry is not None else RetryConfig()
        self.log = logger or logging.getLogger("smartbusiness_api.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Accept": "application/json"},
            timeout=timeout_seconds,
        )

    @classmethod
    def from_settings(cls, settings: ClientSettings, **kwargs) -> "SmartBusinessClient":
        if not settings.has_credentials:
            raise ConfigurationError(
                "Client-ID or/and secret not available from environment variables "
                "(CLIENT_ID, CLIENT_SECRET)."
            )
        kwargs.setdefault("timeout_seconds", settings.timeout_seconds)
        kwargs.setdefault("scopes", settings.scopes)
        kwargs.setdefault("token_url", settings.token_url)
        return cls(
            base_url=settings.base_url,
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            **kwargs,
        )

    @classmethod
    def from_env(cls, **kwargs) -> "SmartBusinessClient":
        return cls.from_settings(load_env_config(), **kwargs)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "SmartBusinessClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def call_api(
        self,
        method: str,
        url: str,
        json: Optional[Payload] = None,
        *,
        endpoint: Optional[str] = None,
    ) -> Response:
        """
        Issue one authenticated request.
        - Raises NotFoundError on 404, HTTPError on any other non-2xx status
        - Raises TransportError on network/timeout errors (after opt-in retries)
        - Raises ParseError if a success body isn't valid JSON
        - Returns a Response wrapper on success
        """
        method = method.upper()
        if isinstance(json, BaseModel):
            json = json.model_dump(mode="json", exclude_none=True)

        start = time.perf_counter()
        attempt = 0
        log_call = partial(
            log_api_call,
            method=method,
            path=httpx.URL(url).path,
            endpoint=endpoint,
            started=start,
        )

        while True:
            try:
                resp = await self.http.request(method, url, json=json, auth=self.auth)
            except (httpx.ConnectError, httpx.TimeoutException) as exc:
                if attempt < self.retry.max_retries:
                    await asyncio.sleep(self.retry.backoff_base_seconds * (2**attempt))
                    attempt += 1
                    continue
                log_call(attempt=attempt, exc=exc)
                raise TransportError(
                    f"Network/timeout error calling {method} {url}: {exc}"
                ) from exc
            except httpx.HTTPError as exc:
                # Other httpx exceptions (rare) - do not blindly retry
                log_call(attempt=attempt, exc=exc)
                raise ApiError(f"HTTPX error calling {method} {url}: {exc}") from exc
            except AuthenticationError as exc:
                log_call(attempt=attempt, exc=exc)
                raise

            self.log.debug(
                "api.request",
                extra={
                    "endpoint": endpoint,
                    "method": method,
                    "path": resp.request.url.path,
                    "status": resp.status_code,
                    "attempt": attempt,
                },
            )

            if resp.status_code in self.retry.retry_statuses or (
                self.retry.retry_on_429 and resp.status_code == 429
            ):
                if attempt < self.retry.max_retries:
                    await asyncio.sleep(self.retry.backoff_base_seconds * (2**attempt))
                    attempt += 1
                    continue

            log_call(attempt=attempt, status=resp.status_code)

            if not resp.is_success:
                raise self._to_http_error(resp, method=method)

            return Response.from_httpx(resp)

    def _to_http_error(self, resp: httpx.Response, *, method: str) -> HTTPError:
        error_cls = NotFoundError if resp.status_code == 404 else HTTPError
        return error_cls(
            status_code=resp.status_code,
            method=method,
            url=str(resp.request.url),
            **error_details(resp),
        )


__all__ = ["SmartBusinessClient", "RetryConfig"]
