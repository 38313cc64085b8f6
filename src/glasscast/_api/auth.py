"""Account endpoints.

Endpoints:
  - /auth/create
  - /auth/login
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from glasscast._constants import AUTH_CREATE, AUTH_LOGIN
from glasscast._redact import redact_for_log
from glasscast._transport import Transport
from glasscast.exceptions import GlasscastApiError
from glasscast.models.token import AuthToken

_logger = logging.getLogger(__name__)


def build_auth_request(email: str, password: str) -> dict[str, str]:
    """Build the JSON body shared by the create and login endpoints."""
    return {"email": email.strip(), "password": password}


def parse_login_response(response: Any) -> AuthToken:
    """Extract the bearer token from a login response.

    Raises
    ------
    GlasscastApiError
        If the response carries no usable ``access_token``.
    """
    _logger.debug("Login response parsed=%s", redact_for_log(response))
    if not isinstance(response, dict):
        raise GlasscastApiError("Login response is not an object", endpoint=AUTH_LOGIN)
    try:
        return AuthToken.model_validate(response)
    except ValidationError as exc:
        raise GlasscastApiError("Login response missing access_token", endpoint=AUTH_LOGIN) from exc


async def create_account(transport: Transport, email: str, password: str) -> None:
    """Register a new account.  Registration does not authenticate."""
    await transport.request_json("POST", AUTH_CREATE, body=build_auth_request(email, password))


async def login(transport: Transport, email: str, password: str) -> AuthToken:
    """Exchange credentials for a bearer token."""
    response = await transport.request_json("POST", AUTH_LOGIN, body=build_auth_request(email, password))
    return parse_login_response(response)
