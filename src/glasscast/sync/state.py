"""Observable engine state."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from glasscast.models.city import CityRecord

CURRENT_SLOT = "current"


def slot_key(city_id: int, is_favorite: bool) -> str:
    """Working-set slot a load for *city_id* targets."""
    return f"favorite:{city_id}" if is_favorite else CURRENT_SLOT


class EngineState(BaseModel):
    """Snapshot of the engine's observable fields, handed to observers."""

    model_config = ConfigDict(frozen=True)

    current_city: CityRecord | None = None
    favorite_cities: list[CityRecord] = Field(default_factory=list)
    loading: bool = False
    last_error: str | None = None

    def all_cities(self) -> list[CityRecord]:
        """Flat view in persisted order: favorites, then the current city."""
        cities = list(self.favorite_cities)
        if self.current_city is not None:
            cities.append(self.current_city)
        return cities
