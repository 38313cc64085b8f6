"""Base model and timestamp helpers for weather service payloads.

Every wire model inherits from :class:`GlasscastBaseModel`, which is
frozen (snapshots are produced by the service and never mutated) and
ignores unknown keys so server-side additions do not break parsing.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

# Threshold to distinguish seconds from milliseconds.
_MS_THRESHOLD = 1_000_000_000_000


def parse_epoch_timestamp(value: Any) -> datetime | None:
    """Convert an epoch timestamp (seconds **or** milliseconds) to a UTC datetime.

    Returns ``None`` when the value is ``None``.
    """
    if value is None:
        return value
    if isinstance(value, datetime):
        return value
    ts = int(value)
    if ts >= _MS_THRESHOLD:
        ts = ts // 1000
    return datetime.fromtimestamp(ts, tz=UTC)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class GlasscastBaseModel(BaseModel):
    """Base for weather service response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
