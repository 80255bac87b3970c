from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Resource(BaseModel):
    """
    Loosely typed API resource.
    Field sets are defined by the remote API, so unknown keys are kept as-is
    and remain reachable through attribute access and model_dump().
    """

    id: Optional[int] = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "Bearer"
    expires_in: Optional[int] = None
    scope: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


__all__ = ["Resource", "TokenResponse"]
