"""City data endpoints.

Endpoints:
  - /data/search/{query}
  - /data/weather/{city_id}
  - /data/forecast/{city_id}
  - /data/add_favorite/{city_id}
  - /data/favorites

All of them require a bearer token.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError

from glasscast._constants import (
    DATA_ADD_FAVORITE,
    DATA_FAVORITES,
    DATA_FORECAST,
    DATA_SEARCH,
    DATA_WEATHER,
)
from glasscast._transport import Transport
from glasscast.exceptions import GlasscastApiError
from glasscast.models.city import CitySearchCandidate
from glasscast.models.weather import WeatherSnapshot

_logger = logging.getLogger(__name__)

_CANDIDATES = TypeAdapter(list[CitySearchCandidate])
_WEATHER = TypeAdapter(WeatherSnapshot)
_FORECAST = TypeAdapter(list[WeatherSnapshot])
_CITY_IDS = TypeAdapter(list[int])


def _validate(adapter: TypeAdapter[Any], payload: Any, endpoint: str) -> Any:
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        raise GlasscastApiError(
            f"Unexpected payload from {endpoint}: {exc.error_count()} validation error(s)",
            endpoint=endpoint,
        ) from exc


async def search_cities(transport: Transport, token: str, query: str) -> list[CitySearchCandidate]:
    """Return ranked city candidates for a free-text query."""
    endpoint = DATA_SEARCH.format(query=quote(query, safe=""))
    payload = await transport.request_json("GET", endpoint, token=token)
    if payload is None:
        return []
    candidates: list[CitySearchCandidate] = _validate(_CANDIDATES, payload, endpoint)
    _logger.debug("Search %r returned %d candidate(s)", query, len(candidates))
    return candidates


async def fetch_weather(transport: Transport, token: str, city_id: int) -> WeatherSnapshot | None:
    """Return current conditions, or ``None`` when the service has none."""
    endpoint = DATA_WEATHER.format(city_id=city_id)
    payload = await transport.request_json("GET", endpoint, token=token)
    if payload is None:
        return None
    snapshot: WeatherSnapshot = _validate(_WEATHER, payload, endpoint)
    return snapshot


async def fetch_forecast(transport: Transport, token: str, city_id: int) -> list[WeatherSnapshot]:
    """Return the forecast sequence; a ``null`` body is an empty forecast."""
    endpoint = DATA_FORECAST.format(city_id=city_id)
    payload = await transport.request_json("GET", endpoint, token=token)
    if payload is None:
        return []
    forecast: list[WeatherSnapshot] = _validate(_FORECAST, payload, endpoint)
    return forecast


async def add_favorite(transport: Transport, token: str, city_id: int) -> bool:
    """Mark a city as favorite server-side.

    Returns ``False`` only when the service explicitly answers ``false``.
    """
    endpoint = DATA_ADD_FAVORITE.format(city_id=city_id)
    payload = await transport.request_json("GET", endpoint, token=token)
    return payload is not False


async def fetch_favorite_ids(transport: Transport, token: str) -> list[int]:
    """Return the ids the service has recorded as favorites."""
    payload = await transport.request_json("GET", DATA_FAVORITES, token=token)
    if payload is None:
        return []
    city_ids: list[int] = _validate(_CITY_IDS, payload, DATA_FAVORITES)
    return city_ids
