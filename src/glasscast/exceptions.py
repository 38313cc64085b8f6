"""Custom exception hierarchy for glasscast."""

from __future__ import annotations


class GlasscastError(Exception):
    """Base exception for all glasscast errors."""


class GlasscastConfigError(GlasscastError):
    """Invalid or missing configuration."""


class GlasscastTransportError(GlasscastError):
    """HTTP-level failure (network, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class GlasscastApiError(GlasscastError):
    """The service answered, but the payload is not usable."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class AuthenticationError(GlasscastApiError):
    """No credential available, or the service rejected it (HTTP 401/403)."""


class AuthError(GlasscastError):
    """Login or registration was rejected.

    The message is the underlying transport/API message, unchanged, so it
    can be shown to the user as is.
    """


class SearchError(GlasscastError):
    """Empty query, failed search call, or no candidates for a query."""

    def __init__(self, message: str, *, query: str = "") -> None:
        self.query = query
        super().__init__(message)


class FetchError(GlasscastError):
    """Weather or forecast retrieval for a city failed.

    Raised for the whole weather + forecast pair: a single failed sub-fetch
    fails the pair.
    """

    def __init__(self, message: str, *, city_id: int) -> None:
        self.city_id = city_id
        super().__init__(message)


class FavoriteError(GlasscastError):
    """Server-side favorite registration failed."""

    def __init__(self, message: str, *, city_id: int) -> None:
        self.city_id = city_id
        super().__init__(message)
