"""High-level async client for the Glasscast weather service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import aiohttp

from glasscast._transport import HttpTransport
from glasscast.auth import AuthGate
from glasscast.config import GlasscastConfig
from glasscast.credentials import CredentialStore, FileCredentialStore, MemoryCredentialStore
from glasscast.exceptions import FetchError, GlasscastError
from glasscast.models.city import CityRecord, CitySearchCandidate
from glasscast.source import HttpWeatherSource
from glasscast.storage.slot import FileSlot, KeyValueSlot, MemorySlot
from glasscast.storage.store import CityStore
from glasscast.suggestions import SuggestionFetcher
from glasscast.sync.engine import SyncEngine
from glasscast.sync.state import EngineState

_logger = logging.getLogger(__name__)


class GlasscastClient:
    """Async client wiring auth, sync engine, and suggestions together.

    Usage::

        async with GlasscastClient(config) as client:
            await client.login("me@example.com", "secret")
            city = await client.search_city("Paris")
    """

    def __init__(
        self,
        config: GlasscastConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        credentials: CredentialStore | None = None,
        slot: KeyValueSlot | None = None,
        on_state_change: Callable[[EngineState], None] | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._credentials = credentials if credentials is not None else _default_credentials(config)
        self._slot = slot if slot is not None else _default_slot(config)
        self._on_state_change = on_state_change
        self._source: HttpWeatherSource | None = None
        self._auth: AuthGate | None = None
        self._engine: SyncEngine | None = None
        self._suggestions: SuggestionFetcher | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> GlasscastClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        transport = HttpTransport(self._config, self._http_session)
        self._source = HttpWeatherSource(transport, self._credentials)
        self._auth = AuthGate(self._source, self._credentials)
        self._auth.restore()
        self._engine = SyncEngine(
            self._source,
            CityStore(self._slot),
            on_change=self._on_state_change,
        )
        self._engine.bootstrap()
        self._suggestions = SuggestionFetcher(self._source)
        _logger.debug("Client ready: authenticated=%s", self._auth.is_authenticated)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._source = None
        self._auth = None
        self._engine = None
        self._suggestions = None

    def _require(self) -> tuple[HttpWeatherSource, AuthGate, SyncEngine, SuggestionFetcher]:
        if self._source is None or self._auth is None or self._engine is None or self._suggestions is None:
            raise GlasscastError("Client not initialized. Use 'async with GlasscastClient(...) as client:'")
        return self._source, self._auth, self._engine, self._suggestions

    @property
    def auth(self) -> AuthGate:
        return self._require()[1]

    @property
    def engine(self) -> SyncEngine:
        return self._require()[2]

    @property
    def state(self) -> EngineState:
        return self.engine.state

    @property
    def suggestions(self) -> list[CitySearchCandidate]:
        return self._require()[3].suggestions

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    async def login(self, email: str, password: str) -> None:
        await self.auth.login(email, password)

    async def register(self, email: str, password: str) -> None:
        await self.auth.register(email, password)

    def sign_out(self) -> None:
        self.auth.sign_out()

    # ------------------------------------------------------------------
    # Cities
    # ------------------------------------------------------------------

    async def search_city(self, text: str) -> CityRecord | None:
        return await self.engine.resolve_city_by_query(text)

    async def load_city(self, city_id: int, name: str, *, is_favorite: bool = False) -> CityRecord | None:
        return await self.engine.load_city(city_id, name, is_favorite)

    async def add_favorite(self, city_id: int, name: str) -> CityRecord | None:
        return await self.engine.add_favorite(city_id, name)

    async def refresh_favorites(self) -> dict[int, FetchError]:
        return await self.engine.refresh_favorites()

    async def fetch_suggestions(self, query: str) -> list[CitySearchCandidate]:
        return await self._require()[3].fetch_suggestions(query)

    async def favorite_ids(self) -> list[int]:
        """Ids the service has recorded as favorites for this account."""
        return await self._require()[0].list_favorite_ids()


def _default_credentials(config: GlasscastConfig) -> CredentialStore:
    if config.credential_path:
        return FileCredentialStore(config.credential_path)
    return MemoryCredentialStore()


def _default_slot(config: GlasscastConfig) -> KeyValueSlot:
    if config.cache_path:
        return FileSlot(config.cache_path)
    return MemorySlot()
