"""City models: search candidates and cached city records."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from glasscast.models._base import GlasscastBaseModel, ensure_utc
from glasscast.models.weather import WeatherSnapshot


class CitySearchCandidate(GlasscastBaseModel):
    """A city matching a free-text search.

    The service encodes each candidate as a ``[name, cityId]`` pair;
    objects with ``name``/``cityId`` keys are accepted too.
    """

    city_id: int = Field(validation_alias=AliasChoices("cityId", "city_id"))
    name: str

    @model_validator(mode="before")
    @classmethod
    def _unpack_pair(cls, values: Any) -> Any:
        if isinstance(values, (list, tuple)):
            if len(values) != 2:
                raise ValueError(f"expected [name, cityId] pair, got {len(values)} items")
            name, city_id = values
            return {"name": name, "city_id": city_id}
        return values


class CityRecord(GlasscastBaseModel):
    """One city's latest weather + forecast, the unit of cache and sync.

    Records are replaced wholesale on every fetch; there is no field-level
    merge.  Persisted with camelCase keys (``lastUpdated``, ``isFavorite``).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: int
    name: str
    weather: WeatherSnapshot | None = None
    forecast: list[WeatherSnapshot] | None = None
    last_updated: datetime
    is_favorite: bool = False

    @field_validator("last_updated")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        return ensure_utc(value)
