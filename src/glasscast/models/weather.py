"""Weather snapshot models.

Field names follow the service's snake_case wire format.  Temperatures
are stored as sent (Kelvin); unit conversion belongs to the presentation
layer.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from glasscast.models._base import GlasscastBaseModel, parse_epoch_timestamp


class Wind(GlasscastBaseModel):
    """Wind conditions."""

    speed: float
    """Wind speed in m/s."""
    deg: int
    """Direction in meteorological degrees."""
    gust: float | None = None
    """Gust speed in m/s, when reported."""


class Pressure(GlasscastBaseModel):
    """Atmospheric pressure in hPa."""

    press: int
    sea_level: int


class Temperature(GlasscastBaseModel):
    """Temperature envelope, absolute (Kelvin) units."""

    temp: float
    temp_min: float
    temp_max: float
    feels_like: float
    temp_kf: float | None = None


class WeatherSnapshot(GlasscastBaseModel):
    """One observation or forecast step for a city.

    Produced only by the weather source.  Used both for the current
    conditions and for every entry of a forecast sequence.
    """

    reference_time: int
    """Epoch seconds the snapshot refers to."""
    sunrise_time: int
    sunset_time: int | None = None
    clouds: int
    """Cloud cover percentage."""
    rain: dict[str, float] | None = None
    """Rain volume in mm keyed by window (e.g. ``"1h"``)."""
    snow: dict[str, float] | None = None
    wind: Wind
    humidity: int
    pressure: Pressure
    temperature: Temperature
    status: str
    """Short status label (e.g. ``"Clouds"``)."""
    detailed_status: str
    weather_code: int
    weather_icon_name: str
    visibility_distance: int
    """Visibility in metres."""
    dewpoint: float | None = None
    humidex: float | None = None
    heat_index: float | None = None
    utc_offset: int | None = None
    uvi: float | None = None
    precipitation_probability: float | None = Field(default=None, ge=0.0, le=1.0)

    @property
    def reference_datetime(self) -> datetime | None:
        """``reference_time`` as a UTC datetime."""
        return parse_epoch_timestamp(self.reference_time)
