"""Normalization helpers.

Centralizes defensive parsing of untrusted remote fields.
"""

from __future__ import annotations

import math
from typing import Any


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or value == "--":
        return None
    if isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def normalize_timestamp_seconds(value: Any) -> float | None:
    """Normalize remote timestamps to epoch seconds.

    - Empty/missing -> None
    - <= 0 -> None
    - Milliseconds (> 1e11) -> seconds
    - Objects exposing ``timestamp()`` (datetimes, store timestamps) -> seconds
    """

    if value is None or value == "":
        return None
    to_seconds = getattr(value, "timestamp", None)
    if callable(to_seconds):
        try:
            value = to_seconds()
        except (TypeError, ValueError, OverflowError):
            return None
    ts = safe_float(value)
    if ts is None or ts <= 0:
        return None
    if ts > 1e11:
        ts /= 1000.0
    return ts

