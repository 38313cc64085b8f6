"""Persistent city store.

Saves are full replacements of the stored set.  Loading never raises:
:meth:`CityStore.load` collapses "never saved" and "unreadable" into an
empty list, while :meth:`CityStore.load_result` keeps the distinction.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from glasscast.models.city import CityRecord
from glasscast.storage.slot import KeyValueSlot

_logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[CityRecord])


class StoreLoadStatus(StrEnum):
    ABSENT = "absent"
    CORRUPT = "corrupt"
    PRESENT = "present"


class StoreLoadResult(BaseModel):
    """Outcome of reading the store."""

    model_config = ConfigDict(frozen=True)

    status: StoreLoadStatus
    records: list[CityRecord] = Field(default_factory=list)
    detail: str = ""


class CityStore:
    """Serialize cached city records to and from a :class:`KeyValueSlot`."""

    def __init__(self, slot: KeyValueSlot) -> None:
        self._slot = slot

    def save(self, records: Sequence[CityRecord]) -> None:
        """Overwrite the slot with exactly *records*."""
        self._slot.write(_RECORDS.dump_json(list(records), by_alias=True))
        _logger.debug("Saved %d city record(s)", len(records))

    def load_result(self) -> StoreLoadResult:
        try:
            data = self._slot.read()
        except OSError as exc:
            _logger.warning("City cache unreadable: %s", exc)
            return StoreLoadResult(status=StoreLoadStatus.CORRUPT, detail=str(exc))

        if data is None:
            return StoreLoadResult(status=StoreLoadStatus.ABSENT)

        try:
            records = _RECORDS.validate_json(data)
        except ValidationError as exc:
            _logger.warning("Discarding corrupt city cache: %d validation error(s)", exc.error_count())
            return StoreLoadResult(status=StoreLoadStatus.CORRUPT, detail=str(exc))

        return StoreLoadResult(status=StoreLoadStatus.PRESENT, records=records)

    def load(self) -> list[CityRecord]:
        """Return stored records, or an empty list if absent or corrupt."""
        return self.load_result().records
