"""Position models.

:class:`Position` is the validated value that the reducer stores.
:class:`RawPosition` is the lenient boundary model used to read untrusted
remote documents; it never raises on bad field values, it only leaves them
unset.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from muratrack.exceptions import InvalidPositionError
from muratrack.ingestion.normalize import normalize_timestamp_seconds, safe_float


class Position(BaseModel):
    """A single accepted location report.

    Parameters
    ----------
    lat : float
        Latitude in degrees, within [-90, 90].
    lng : float
        Longitude in degrees, within [-180, 180].
    ts : float or None
        Epoch seconds reported by the source, if any.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)
    ts: float | None = None

    def as_pair(self) -> tuple[float, float]:
        return (self.lat, self.lng)


def coerce_position(lat: Any, lng: Any, ts: Any = None) -> Position:
    """Build a :class:`Position` or raise :class:`InvalidPositionError`.

    Missing coordinates are rejected rather than defaulted.
    """
    lat_value = safe_float(lat)
    lng_value = safe_float(lng)
    if lat_value is None or lng_value is None:
        raise InvalidPositionError("position is missing a coordinate", lat=lat, lng=lng)
    try:
        return Position(lat=lat_value, lng=lng_value, ts=normalize_timestamp_seconds(ts))
    except ValidationError as exc:
        raise InvalidPositionError(
            f"position out of range: ({lat_value}, {lng_value})", lat=lat, lng=lng
        ) from exc


class RawPosition(BaseModel):
    """Position fields as delivered by the remote document store.

    Session documents carry ``lastLat``/``lastLng``; history records carry
    ``lat``/``lng`` and ``ts``. Both shapes are accepted.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    lat: float | None = Field(default=None, validation_alias=AliasChoices("lastLat", "lat", "latitude"))
    lng: float | None = Field(
        default=None,
        validation_alias=AliasChoices("lastLng", "lng", "lon", "longitude"),
    )
    ts: float | None = Field(
        default=None,
        validation_alias=AliasChoices("ts", "lastTs", "updatedAt", "timestamp"),
    )

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def _coerce_floats(cls, value: Any) -> float | None:
        return safe_float(value)

    @field_validator("ts", mode="before")
    @classmethod
    def _coerce_timestamp(cls, value: Any) -> float | None:
        return normalize_timestamp_seconds(value)

    @classmethod
    def from_fields(cls, fields: Any) -> RawPosition:
        """Read a document payload; anything that is not a mapping yields an empty model."""
        if not isinstance(fields, Mapping):
            return cls()
        return cls.model_validate(dict(fields))

    def to_position(self) -> Position:
        return coerce_position(self.lat, self.lng, self.ts)
