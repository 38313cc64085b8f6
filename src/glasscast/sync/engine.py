"""Synchronization engine for the current city and favorite cities.

The engine runs on a single asyncio event loop, which is the one owner of
the working set.  Mutations happen between awaits, so each replace-by-id
is atomic with respect to concurrent loads.  Superseded loads are not
cancelled; instead every load takes a request token for its slot and only
the latest token for a slot may apply its result.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from collections.abc import Callable
from datetime import UTC, datetime

from glasscast.exceptions import FavoriteError, FetchError, GlasscastError, SearchError
from glasscast.models.city import CityRecord
from glasscast.source import WeatherSource
from glasscast.storage.store import CityStore, StoreLoadResult
from glasscast.sync.state import EngineState, slot_key

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SyncEngine:
    """Owns the working set and keeps it in sync with the weather source.

    Parameters
    ----------
    source : WeatherSource
        Where weather, forecasts, and search results come from.
    store : CityStore
        Durable store receiving the full working set after every merge.
    clock : callable
        Returns the ``last_updated`` timestamp for new records.
    on_change : callable or None
        Called with an :class:`EngineState` after every observable change.
        Exceptions raised by the callback are logged and ignored.
    """

    def __init__(
        self,
        source: WeatherSource,
        store: CityStore,
        *,
        clock: Callable[[], datetime] = _utcnow,
        on_change: Callable[[EngineState], None] | None = None,
    ) -> None:
        self._source = source
        self._store = store
        self._clock = clock
        self._on_change = on_change
        self._current_city: CityRecord | None = None
        self._favorite_cities: list[CityRecord] = []
        self._in_flight = 0
        self._last_error: str | None = None
        self._tokens = itertools.count(1)
        self._latest_token: dict[str, int] = {}

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def current_city(self) -> CityRecord | None:
        return self._current_city

    @property
    def favorite_cities(self) -> list[CityRecord]:
        return list(self._favorite_cities)

    @property
    def loading(self) -> bool:
        """True while any engine operation is waiting on the network."""
        return self._in_flight > 0

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def state(self) -> EngineState:
        return EngineState(
            current_city=self._current_city,
            favorite_cities=list(self._favorite_cities),
            loading=self.loading,
            last_error=self._last_error,
        )

    def _notify(self) -> None:
        if self._on_change is None:
            return
        try:
            self._on_change(self.state)
        except Exception:
            _logger.debug("on_change callback failed", exc_info=True)

    def _begin(self) -> None:
        self._in_flight += 1
        self._notify()

    def _end(self) -> None:
        self._in_flight -= 1
        self._notify()

    def _set_error(self, message: str) -> None:
        self._last_error = message
        _logger.debug("Engine error: %s", message)
        self._notify()

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------

    def bootstrap(self) -> StoreLoadResult:
        """Seed the working set from the store.  No network calls.

        The first non-favorite record becomes the current city; all
        favorites are kept in store order.  Calling it again re-reads the
        store and yields the same state.
        """
        result = self._store.load_result()
        self._favorite_cities = [record for record in result.records if record.is_favorite]
        self._current_city = next((record for record in result.records if not record.is_favorite), None)
        _logger.debug(
            "Bootstrapped from store (%s): current=%s favorites=%d",
            result.status,
            self._current_city.id if self._current_city is not None else None,
            len(self._favorite_cities),
        )
        self._notify()
        return result

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def resolve_city_by_query(self, text: str) -> CityRecord | None:
        """Search for *text* and load the best match as the current city.

        Raises
        ------
        SearchError
            Blank query, failed search call, or no candidates.
        FetchError
            The best match was found but its weather could not be loaded.
        """
        query = text.strip()
        if not query:
            message = "Search failed: empty query"
            self._set_error(message)
            raise SearchError(message, query=text)

        self._last_error = None
        self._begin()
        try:
            try:
                candidates = await self._source.search_cities(query)
            except GlasscastError as exc:
                message = f"Search failed: {exc}"
                self._set_error(message)
                raise SearchError(message, query=query) from exc

            if not candidates:
                message = f"Search failed: no city matches {query!r}"
                self._set_error(message)
                raise SearchError(message, query=query)

            best = candidates[0]
            return await self.load_city(best.city_id, best.name, is_favorite=False)
        finally:
            self._end()

    async def load_city(self, city_id: int, name: str, is_favorite: bool) -> CityRecord | None:
        """Fetch weather and forecast for a city and merge it into the working set.

        Both fetches run concurrently and must both succeed; a single
        failure fails the pair and nothing is stored.  On success the new
        record replaces any record with the same id and the full working
        set is saved.

        Returns
        -------
        CityRecord or None
            The record now held in the working set, or ``None`` when a
            newer load for the same slot was issued while this one was in
            flight.  Its result is discarded, including a failure.

        Raises
        ------
        FetchError
            Weather or forecast retrieval failed.  The working set and the
            store are left as they were.
        """
        slot = slot_key(city_id, is_favorite)
        token = next(self._tokens)
        self._latest_token[slot] = token
        self._last_error = None
        self._begin()
        try:
            weather, forecast = await asyncio.gather(
                self._source.fetch_weather(city_id),
                self._source.fetch_forecast(city_id),
                return_exceptions=True,
            )
            if self._latest_token.get(slot) != token:
                _logger.debug("Discarding superseded load of city %s for slot %s", city_id, slot)
                return None

            for part, result in (("weather", weather), ("forecast", forecast)):
                if isinstance(result, BaseException):
                    message = f"Failed to load {part} for {name}: {result}"
                    self._set_error(message)
                    raise FetchError(message, city_id=city_id) from result

            record = CityRecord(
                id=city_id,
                name=name,
                weather=weather,
                forecast=forecast,
                last_updated=self._clock(),
                is_favorite=is_favorite,
            )
            applied = self._apply(record)
            self._persist()
            self._notify()
            return applied
        finally:
            self._end()

    async def add_favorite(self, city_id: int, name: str) -> CityRecord | None:
        """Register a favorite server-side, then load it into the favorites.

        Raises
        ------
        FavoriteError
            The service did not accept the favorite; nothing changes locally.
        FetchError
            The favorite was registered but its weather could not be loaded.
        """
        self._last_error = None
        self._begin()
        try:
            try:
                accepted = await self._source.mark_favorite(city_id)
            except GlasscastError as exc:
                message = f"Failed to add favorite {name}: {exc}"
                self._set_error(message)
                raise FavoriteError(message, city_id=city_id) from exc
            if not accepted:
                message = f"Failed to add favorite {name}: rejected by the service"
                self._set_error(message)
                raise FavoriteError(message, city_id=city_id)

            return await self.load_city(city_id, name, is_favorite=True)
        finally:
            self._end()

    async def refresh_favorites(self) -> dict[int, FetchError]:
        """Reload every favorite independently.

        All loads run concurrently; a failed load leaves that favorite as
        it was and does not affect the others.

        Returns
        -------
        dict
            Failures keyed by city id; empty when every refresh succeeded.
        """
        favorites = list(self._favorite_cities)
        if not favorites:
            return {}

        results = await asyncio.gather(
            *(self.load_city(city.id, city.name, is_favorite=True) for city in favorites),
            return_exceptions=True,
        )

        failures: dict[int, FetchError] = {}
        for city, result in zip(favorites, results):
            if isinstance(result, FetchError):
                failures[city.id] = result
            elif isinstance(result, BaseException):
                raise result

        if failures:
            self._set_error("; ".join(str(exc) for exc in failures.values()))
        _logger.debug("Refreshed %d favorite(s), %d failed", len(favorites), len(failures))
        return failures

    # ------------------------------------------------------------------
    # Merge + persistence
    # ------------------------------------------------------------------

    def _favorite_index(self, city_id: int) -> int | None:
        for index, city in enumerate(self._favorite_cities):
            if city.id == city_id:
                return index
        return None

    def _apply(self, record: CityRecord) -> CityRecord:
        """Route *record* into its slot and return it.

        A favorite replaces the favorite with the same id or is appended,
        and evicts a current city with that id.  A non-favorite always
        becomes the current city, even when its id is also a favorite.
        """
        if record.is_favorite:
            index = self._favorite_index(record.id)
            if index is None:
                self._favorite_cities.append(record)
            else:
                self._favorite_cities[index] = record
            if self._current_city is not None and self._current_city.id == record.id:
                self._current_city = None
            return record

        self._current_city = record
        return record

    def _persist(self) -> None:
        """Write the whole working set, replacing what the store held."""
        try:
            self._store.save(self.state.all_cities())
        except OSError as exc:
            _logger.warning("Failed to save city cache: %s", exc)
            self._set_error(f"Failed to save city cache: {exc}")
