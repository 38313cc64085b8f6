"""Weather source: the network-facing capability used by the sync engine.

:class:`WeatherSource` and :class:`AuthBackend` are the narrow contracts
the engine, suggestion fetcher, and auth gate depend on.
:class:`HttpWeatherSource` implements both on top of the HTTP transport.
"""

from __future__ import annotations

from typing import Protocol

from glasscast._api import auth as _auth_api
from glasscast._api import data as _data_api
from glasscast._transport import Transport
from glasscast.credentials import CredentialStore
from glasscast.exceptions import AuthenticationError
from glasscast.models.city import CitySearchCandidate
from glasscast.models.token import AuthToken
from glasscast.models.weather import WeatherSnapshot


class WeatherSource(Protocol):
    """City weather capability.

    Every call needs a valid credential and raises
    :class:`~glasscast.exceptions.AuthenticationError` without one.
    """

    async def fetch_weather(self, city_id: int) -> WeatherSnapshot | None:
        ...

    async def fetch_forecast(self, city_id: int) -> list[WeatherSnapshot]:
        ...

    async def search_cities(self, query: str) -> list[CitySearchCandidate]:
        ...

    async def mark_favorite(self, city_id: int) -> bool:
        ...

    async def list_favorite_ids(self) -> list[int]:
        ...


class AuthBackend(Protocol):
    """Remote account operations."""

    async def register(self, email: str, password: str) -> None:
        ...

    async def login(self, email: str, password: str) -> AuthToken:
        ...


class HttpWeatherSource:
    """:class:`WeatherSource` and :class:`AuthBackend` over HTTP."""

    def __init__(self, transport: Transport, credentials: CredentialStore) -> None:
        self._transport = transport
        self._credentials = credentials

    def _require_token(self) -> str:
        token = self._credentials.get()
        if not token:
            raise AuthenticationError("Not signed in: no access token available")
        return token

    # ------------------------------------------------------------------
    # Account
    # ------------------------------------------------------------------

    async def register(self, email: str, password: str) -> None:
        await _auth_api.create_account(self._transport, email, password)

    async def login(self, email: str, password: str) -> AuthToken:
        return await _auth_api.login(self._transport, email, password)

    # ------------------------------------------------------------------
    # City data
    # ------------------------------------------------------------------

    async def fetch_weather(self, city_id: int) -> WeatherSnapshot | None:
        return await _data_api.fetch_weather(self._transport, self._require_token(), city_id)

    async def fetch_forecast(self, city_id: int) -> list[WeatherSnapshot]:
        return await _data_api.fetch_forecast(self._transport, self._require_token(), city_id)

    async def search_cities(self, query: str) -> list[CitySearchCandidate]:
        return await _data_api.search_cities(self._transport, self._require_token(), query)

    async def mark_favorite(self, city_id: int) -> bool:
        return await _data_api.add_favorite(self._transport, self._require_token(), city_id)

    async def list_favorite_ids(self) -> list[int]:
        return await _data_api.fetch_favorite_ids(self._transport, self._require_token())
