"""JSON-over-HTTP transport with bearer authorization."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from glasscast._constants import AUTH_REJECTED_STATUSES
from glasscast._redact import redact_for_log
from glasscast.config import GlasscastConfig
from glasscast.exceptions import AuthenticationError, GlasscastTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request_json(
        self,
        method: str,
        endpoint: str,
        *,
        body: Mapping[str, Any] | None = None,
        token: str | None = None,
    ) -> Any:
        ...


def _error_detail(text: str) -> str:
    """Pull a human-readable message out of an error body."""
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return text[:200]
    if isinstance(parsed, dict):
        for key in ("detail", "message", "error"):
            value = parsed.get(key)
            if isinstance(value, str) and value:
                return value
    return text[:200]


class HttpTransport:
    """aiohttp-backed transport that sends and receives JSON."""

    def __init__(self, config: GlasscastConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def request_json(
        self,
        method: str,
        endpoint: str,
        *,
        body: Mapping[str, Any] | None = None,
        token: str | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        ``null`` bodies decode to ``None``; callers decide whether that is
        acceptable for the endpoint.
        """
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        if token:
            headers["authorization"] = f"Bearer {token}"

        url = f"{self._config.base_url}{endpoint}"
        _logger.debug("%s %s body=%s", method, url, redact_for_log(body))

        try:
            async with self._http.request(
                method,
                url,
                json=dict(body) if body is not None else None,
                headers=headers,
                timeout=self._timeout,
            ) as resp:
                text = await resp.text()
                status = resp.status
        except aiohttp.ClientError as exc:
            raise GlasscastTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc
        except asyncio.TimeoutError as exc:
            raise GlasscastTransportError(
                f"Request to {endpoint} timed out after {self._config.request_timeout}s",
                endpoint=endpoint,
            ) from exc

        if status in AUTH_REJECTED_STATUSES:
            raise AuthenticationError(
                f"HTTP {status} from {endpoint}: {_error_detail(text)}",
                endpoint=endpoint,
            )
        if not 200 <= status < 300:
            raise GlasscastTransportError(
                f"HTTP {status} from {endpoint}: {_error_detail(text)}",
                status_code=status,
                endpoint=endpoint,
            )

        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise GlasscastTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                status_code=status,
                endpoint=endpoint,
            ) from exc
