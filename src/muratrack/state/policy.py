"""Recentre decision policy.

Kept free of state bookkeeping so both modes can be tested on their own.
"""

from __future__ import annotations

from muratrack.config import RecenterMode
from muratrack.geo import haversine_m
from muratrack.models.position import Position


def should_recenter(
    *,
    mode: RecenterMode,
    view_center: tuple[float, float] | None,
    incoming: Position,
    threshold_m: float,
) -> bool:
    """Decide whether the view should move to *incoming*.

    Policy:
    - follow: always.
    - free-roam: only when the subject is more than *threshold_m* metres
      from the current view centre. Without a known centre, recentre.
    """
    if mode == RecenterMode.FOLLOW:
        return True
    if view_center is None:
        return True
    distance = haversine_m(view_center[0], view_center[1], incoming.lat, incoming.lng)
    return distance > threshold_m
