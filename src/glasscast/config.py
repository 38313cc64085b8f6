"""Client configuration for glasscast."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from glasscast._constants import BASE_URL, REQUEST_TIMEOUT_S, USER_AGENT
from glasscast.exceptions import GlasscastConfigError


def _env_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise GlasscastConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class GlasscastConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Weather service base URL, including the API version prefix.
    request_timeout : float
        Total timeout in seconds applied to every HTTP request.  This is
        the only timeout in the library; the sync engine defers to it.
    user_agent : str
        ``User-Agent`` header sent with every request.
    cache_path : str or None
        File backing the city cache.  ``None`` keeps the cache in memory.
    credential_path : str or None
        File holding the bearer token.  ``None`` keeps it in memory.
    """

    base_url: str = BASE_URL
    request_timeout: float = REQUEST_TIMEOUT_S
    user_agent: str = USER_AGENT
    cache_path: str | None = None
    credential_path: str | None = None

    def __post_init__(self) -> None:
        if not self.base_url:
            raise GlasscastConfigError("base_url must be non-empty")
        if self.request_timeout <= 0:
            raise GlasscastConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        # Endpoint templates start with "/".
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> GlasscastConfig:
        """Create configuration from environment variables.

        Reads the optional ``GLASSCAST_*`` variables.  Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        GlasscastConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "GLASSCAST_BASE_URL": "base_url",
            "GLASSCAST_USER_AGENT": "user_agent",
            "GLASSCAST_CACHE_PATH": "cache_path",
            "GLASSCAST_CREDENTIAL_PATH": "credential_path",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # request_timeout is numeric, handle separately
        timeout_env = env.get("GLASSCAST_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_float("GLASSCAST_REQUEST_TIMEOUT", timeout_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
