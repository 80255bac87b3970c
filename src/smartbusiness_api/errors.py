"""Exception hierarchy for the SmartBusiness client."""

from __future__ import annotations

from typing import Any, Dict, Optional


class SmartBusinessError(Exception):
    """Base error for everything raised by this package."""


class ApiError(SmartBusinessError):
    """Generic API failure (any non-success outcome of a request)."""


class HTTPError(ApiError):
    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        url: str,
        message: str,
        response_json: Optional[Dict[str, Any]] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(f"{status_code} {method} {url}: {message}")
        self.status_code = status_code
        self.method = method
        self.url = url
        self.message = message
        self.response_json = response_json
        self.response_text = response_text


class NotFoundError(HTTPError):
    """The requested resource does not exist server-side (HTTP 404)."""


class TransportError(ApiError):
    """Network or timeout failure before a response was received."""


class ParseError(ApiError):
    pass


class AuthenticationError(ApiError):
    """OAuth2 token could not be obtained."""


class ModelValidationError(SmartBusinessError):
    pass


class InvalidUseError(SmartBusinessError):
    """Local programming-contract violation; no request was attempted."""


class UnresolvedPlaceholderError(InvalidUseError):
    pass


class UnsupportedOperationError(InvalidUseError):
    pass


class ConfigurationError(SmartBusinessError, ValueError):
    """Required settings (credentials, base URL) are missing."""


__all__ = [
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
