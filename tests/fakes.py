"""Test doubles shared by the test modules."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from glasscast.exceptions import AuthenticationError, GlasscastTransportError
from glasscast.models.city import CitySearchCandidate
from glasscast.models.token import AuthToken
from glasscast.models.weather import WeatherSnapshot


def weather_payload(*, temp: float = 290.0, reference_time: int = 1_768_900_000, **extra: Any) -> dict[str, Any]:
    """A realistic ``/data/weather`` body."""
    payload: dict[str, Any] = {
        "reference_time": reference_time,
        "sunrise_time": reference_time - 3600,
        "sunset_time": reference_time + 30000,
        "clouds": 40,
        "rain": {"1h": 0.2},
        "snow": None,
        "wind": {"speed": 3.6, "deg": 220, "gust": None},
        "humidity": 71,
        "pressure": {"press": 1013, "sea_level": 1016},
        "temperature": {
            "temp": temp,
            "temp_kf": None,
            "temp_max": temp + 1.5,
            "temp_min": temp - 2.0,
            "feels_like": temp - 0.8,
        },
        "status": "Clouds",
        "detailed_status": "scattered clouds",
        "weather_code": 802,
        "weather_icon_name": "03d",
        "visibility_distance": 10000,
        "dewpoint": None,
        "humidex": None,
        "heat_index": None,
        "utc_offset": 3600,
        "uvi": 1.2,
        "precipitation_probability": 0.1,
    }
    payload.update(extra)
    return payload


def make_snapshot(temp: float = 290.0, reference_time: int = 1_768_900_000) -> WeatherSnapshot:
    return WeatherSnapshot.model_validate(weather_payload(temp=temp, reference_time=reference_time))


def make_forecast(count: int = 3, temp: float = 288.0) -> list[WeatherSnapshot]:
    return [make_snapshot(temp=temp + i, reference_time=1_768_900_000 + 10800 * i) for i in range(count)]


class Gate:
    """A queued response released by the test.

    ``await gate.wait_started()`` returns once the fetch is blocked on the
    gate; ``gate.release()`` lets it finish with *value*.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        self._started = asyncio.Event()
        self._released = asyncio.Event()

    async def resolve(self) -> Any:
        self._started.set()
        await self._released.wait()
        return self.value

    async def wait_started(self) -> None:
        await self._started.wait()

    def release(self) -> None:
        self._released.set()


@dataclass
class FakeWeatherSource:
    """Scripted :class:`~glasscast.source.WeatherSource`.

    Responses are queued per city id (or query) and consumed in order; the
    last queued response is reused once the queue is down to one entry.
    A queued exception is raised, a queued :class:`Gate` blocks until
    released.
    """

    weather: dict[int, list[Any]] = field(default_factory=dict)
    forecast: dict[int, list[Any]] = field(default_factory=dict)
    candidates: dict[str, list[Any]] = field(default_factory=dict)
    favorite_answers: dict[int, list[Any]] = field(default_factory=dict)
    favorite_ids: list[int] = field(default_factory=list)
    calls: list[tuple[str, Any]] = field(default_factory=list)

    def set_city(self, city_id: int, weather: Any, forecast: Any) -> None:
        self.weather[city_id] = [weather]
        self.forecast[city_id] = [forecast]

    def count(self, name: str) -> int:
        return sum(1 for call, _ in self.calls if call == name)

    @staticmethod
    async def _next(queue: dict[Any, list[Any]], key: Any) -> Any:
        responses = queue.get(key)
        if not responses:
            raise GlasscastTransportError(f"no scripted response for {key!r}", status_code=404)
        response = responses.pop(0) if len(responses) > 1 else responses[0]
        if isinstance(response, Gate):
            response = await response.resolve()
        if isinstance(response, BaseException):
            raise response
        return response

    async def fetch_weather(self, city_id: int) -> WeatherSnapshot | None:
        self.calls.append(("fetch_weather", city_id))
        return await self._next(self.weather, city_id)

    async def fetch_forecast(self, city_id: int) -> list[WeatherSnapshot]:
        self.calls.append(("fetch_forecast", city_id))
        return await self._next(self.forecast, city_id)

    async def search_cities(self, query: str) -> list[CitySearchCandidate]:
        self.calls.append(("search_cities", query))
        return await self._next(self.candidates, query)

    async def mark_favorite(self, city_id: int) -> bool:
        self.calls.append(("mark_favorite", city_id))
        return await self._next(self.favorite_answers, city_id)

    async def list_favorite_ids(self) -> list[int]:
        self.calls.append(("list_favorite_ids", None))
        return list(self.favorite_ids)


@dataclass
class FakeAuthBackend:
    """Scripted :class:`~glasscast.source.AuthBackend`."""

    token: str = "token-1"
    login_error: Exception | None = None
    register_error: Exception | None = None
    calls: list[tuple[str, str]] = field(default_factory=list)

    async def register(self, email: str, password: str) -> None:
        self.calls.append(("register", email))
        if self.register_error is not None:
            raise self.register_error

    async def login(self, email: str, password: str) -> AuthToken:
        self.calls.append(("login", email))
        if self.login_error is not None:
            raise self.login_error
        return AuthToken(access_token=self.token)


@dataclass
class FakeGlasscastBackend:
    """Fake HTTP service answering ``HttpTransport.request_json`` calls."""

    email: str = "user@example.com"
    password: str = "secret"
    access_token: str = "access-token-1"
    registered: set[str] = field(default_factory=set)
    favorites: list[int] = field(default_factory=list)
    forecast_fails: set[int] = field(default_factory=set)
    calls: dict[str, int] = field(default_factory=dict)
    tokens_seen: list[str | None] = field(default_factory=list)

    def _record_call(self, endpoint: str) -> None:
        self.calls[endpoint] = self.calls.get(endpoint, 0) + 1

    def _require_token(self, endpoint: str, token: str | None) -> None:
        self.tokens_seen.append(token)
        if token != self.access_token:
            raise AuthenticationError(f"HTTP 401 from {endpoint}: Not authenticated", endpoint=endpoint)

    async def request_json(
        self,
        method: str,
        endpoint: str,
        *,
        body: Mapping[str, Any] | None = None,
        token: str | None = None,
    ) -> Any:
        self._record_call(endpoint)

        if endpoint == "/auth/create":
            assert method == "POST"
            assert body is not None
            self.registered.add(str(body["email"]))
            return {"access_token": "ignored-registration-token"}

        if endpoint == "/auth/login":
            assert body is not None
            if body["email"] != self.email or body["password"] != self.password:
                raise AuthenticationError(f"HTTP 401 from {endpoint}: Invalid email or password", endpoint=endpoint)
            return {"access_token": self.access_token, "token_type": "bearer"}

        self._require_token(endpoint, token)

        if endpoint.startswith("/data/search/"):
            if endpoint == "/data/search/Paris":
                return [["Paris", 42], ["Paris, TX", 4717560]]
            return []

        if endpoint.startswith("/data/weather/"):
            return weather_payload(temp=290.0)

        if endpoint.startswith("/data/forecast/"):
            city_id = int(endpoint.rsplit("/", 1)[1])
            if city_id in self.forecast_fails:
                raise GlasscastTransportError(f"HTTP 500 from {endpoint}: boom", status_code=500, endpoint=endpoint)
            return [weather_payload(temp=288.0 + i, reference_time=1_768_900_000 + 10800 * i) for i in range(3)]

        if endpoint.startswith("/data/add_favorite/"):
            self.favorites.append(int(endpoint.rsplit("/", 1)[1]))
            return True

        if endpoint == "/data/favorites":
            return list(self.favorites)

        raise AssertionError(f"Unexpected endpoint in fake backend: {endpoint}")
