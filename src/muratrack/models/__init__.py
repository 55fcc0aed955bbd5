"""Typed models for muratrack."""

from muratrack.models.position import Position, RawPosition, coerce_position

__all__ = [
    "Position",
    "RawPosition",
    "coerce_position",
]
