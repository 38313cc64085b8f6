"""Authentication token model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AuthToken(BaseModel):
    """Token returned after successful login.

    Parameters
    ----------
    access_token : str
        Opaque bearer token authorizing data endpoint calls.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    access_token: str = Field(min_length=1)
