"""Tests for pydantic model parsing."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from fakes import weather_payload
from pydantic import ValidationError

from glasscast.models.city import CityRecord, CitySearchCandidate
from glasscast.models.token import AuthToken
from glasscast.models.weather import WeatherSnapshot

# ------------------------------------------------------------------
# WeatherSnapshot
# ------------------------------------------------------------------


class TestWeatherSnapshot:
    def test_parses_wire_payload(self) -> None:
        snapshot = WeatherSnapshot.model_validate(weather_payload(temp=290.0))

        assert snapshot.temperature.temp == 290.0
        assert snapshot.temperature.temp_min == 288.0
        assert snapshot.wind.deg == 220
        assert snapshot.wind.gust is None
        assert snapshot.pressure.sea_level == 1016
        assert snapshot.weather_icon_name == "03d"
        assert snapshot.rain == {"1h": 0.2}

    def test_ignores_unknown_keys(self) -> None:
        snapshot = WeatherSnapshot.model_validate(weather_payload(new_server_field="x"))

        assert not hasattr(snapshot, "new_server_field")

    def test_reference_datetime_is_utc(self) -> None:
        snapshot = WeatherSnapshot.model_validate(weather_payload(reference_time=1_768_900_000))

        assert snapshot.reference_datetime == datetime.fromtimestamp(1_768_900_000, tz=UTC)

    def test_reference_datetime_accepts_milliseconds(self) -> None:
        snapshot = WeatherSnapshot.model_validate(weather_payload(reference_time=1_768_900_000_000))

        assert snapshot.reference_datetime == datetime.fromtimestamp(1_768_900_000, tz=UTC)

    def test_is_frozen(self) -> None:
        snapshot = WeatherSnapshot.model_validate(weather_payload())

        with pytest.raises(ValidationError):
            snapshot.humidity = 10  # type: ignore[misc]

    def test_missing_required_field_fails(self) -> None:
        payload = weather_payload()
        del payload["temperature"]

        with pytest.raises(ValidationError):
            WeatherSnapshot.model_validate(payload)


# ------------------------------------------------------------------
# CitySearchCandidate
# ------------------------------------------------------------------


class TestCitySearchCandidate:
    def test_parses_name_id_pair(self) -> None:
        candidate = CitySearchCandidate.model_validate(["Paris", 42])

        assert candidate.city_id == 42
        assert candidate.name == "Paris"

    def test_parses_object_form(self) -> None:
        candidate = CitySearchCandidate.model_validate({"name": "Tokyo", "cityId": 7})

        assert candidate.city_id == 7

    def test_rejects_wrong_pair_length(self) -> None:
        with pytest.raises(ValidationError):
            CitySearchCandidate.model_validate(["Paris", 42, "FR"])


# ------------------------------------------------------------------
# CityRecord
# ------------------------------------------------------------------


class TestCityRecord:
    def test_accepts_camel_case_and_snake_case(self) -> None:
        camel = CityRecord.model_validate(
            {"id": 1, "name": "Rome", "lastUpdated": "2026-01-20T08:30:00Z", "isFavorite": True}
        )
        snake = CityRecord(id=1, name="Rome", last_updated=datetime(2026, 1, 20, 8, 30, tzinfo=UTC), is_favorite=True)

        assert camel == snake

    def test_naive_timestamp_is_treated_as_utc(self) -> None:
        record = CityRecord(id=1, name="Rome", last_updated=datetime(2026, 1, 20, 8, 30))

        assert record.last_updated.tzinfo is UTC

    def test_dump_by_alias_uses_camel_case(self) -> None:
        record = CityRecord(id=1, name="Rome", last_updated=datetime(2026, 1, 20, tzinfo=UTC))

        dumped = record.model_dump(by_alias=True)

        assert set(dumped) == {"id", "name", "weather", "forecast", "lastUpdated", "isFavorite"}
        assert dumped["isFavorite"] is False


def test_auth_token_requires_non_empty_token() -> None:
    assert AuthToken.model_validate({"access_token": " abc "}).access_token == "abc"
    with pytest.raises(ValidationError):
        AuthToken.model_validate({"access_token": ""})
