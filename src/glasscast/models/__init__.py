"""Data models for weather service payloads and the city cache."""

from glasscast.models._base import GlasscastBaseModel, ensure_utc, parse_epoch_timestamp
from glasscast.models.city import CityRecord, CitySearchCandidate
from glasscast.models.token import AuthToken
from glasscast.models.weather import Pressure, Temperature, WeatherSnapshot, Wind

__all__ = [
    "AuthToken",
    "CityRecord",
    "CitySearchCandidate",
    "GlasscastBaseModel",
    "Pressure",
    "Temperature",
    "WeatherSnapshot",
    "Wind",
    "ensure_utc",
    "parse_epoch_timestamp",
]
