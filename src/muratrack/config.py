"""Tracker configuration for muratrack."""

from __future__ import annotations

import dataclasses
import os
from enum import StrEnum
from typing import Any

from muratrack._constants import (
    DEFAULT_MAX_PATH_LENGTH,
    DEFAULT_ORIGIN,
    DEFAULT_RECENTER_THRESHOLD_M,
    DEFAULT_SIMULATION_DELTA,
    DEFAULT_SIMULATION_STEPS,
    DEFAULT_TICK_INTERVAL_MS,
)
from muratrack.exceptions import MuraConfigError


class RecenterMode(StrEnum):
    """How the view follows the tracked subject."""

    FREE_ROAM = "free-roam"
    FOLLOW = "follow"


def _parse_mode(value: Any) -> RecenterMode:
    if isinstance(value, RecenterMode):
        return value
    normalized = str(value).strip().lower().replace("_", "-")
    try:
        return RecenterMode(normalized)
    except ValueError as exc:
        raise MuraConfigError(f"unknown recenter mode: {value!r}") from exc


def _parse_number(name: str, value: str, kind: type[int] | type[float]) -> int | float:
    try:
        return kind(value)
    except ValueError as exc:
        raise MuraConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class TrackerConfig:
    """Per-session tracker configuration.

    Parameters
    ----------
    recenter_mode : RecenterMode
        ``free-roam`` keeps the operator's view unless the subject drifts
        further than ``recenter_threshold_m``; ``follow`` recentres on every
        accepted position.
    recenter_threshold_m : float
        Great-circle distance in metres between the view centre and a new
        position beyond which free-roam mode recentres.
    max_path_length : int
        Maximum number of positions kept in the drawn path.
    tick_interval_ms : int
        Cadence of the simulated position source.
    simulation_steps : int
        Number of points generated for a simulated route.
    simulation_delta : float
        Per-axis jitter magnitude in degrees for simulated routes.
    origin_lat : float
        Initial map centre latitude.
    origin_lng : float
        Initial map centre longitude.
    """

    recenter_mode: RecenterMode = RecenterMode.FREE_ROAM
    recenter_threshold_m: float = DEFAULT_RECENTER_THRESHOLD_M
    max_path_length: int = DEFAULT_MAX_PATH_LENGTH
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS
    simulation_steps: int = DEFAULT_SIMULATION_STEPS
    simulation_delta: float = DEFAULT_SIMULATION_DELTA
    origin_lat: float = DEFAULT_ORIGIN[0]
    origin_lng: float = DEFAULT_ORIGIN[1]

    def __post_init__(self) -> None:
        object.__setattr__(self, "recenter_mode", _parse_mode(self.recenter_mode))
        if self.max_path_length < 1:
            raise MuraConfigError("max_path_length must be at least 1")
        if self.recenter_threshold_m < 0:
            raise MuraConfigError("recenter_threshold_m must be non-negative")
        if self.tick_interval_ms <= 0:
            raise MuraConfigError("tick_interval_ms must be positive")
        if self.simulation_steps < 0:
            raise MuraConfigError("simulation_steps must be non-negative")
        if not -90.0 <= self.origin_lat <= 90.0 or not -180.0 <= self.origin_lng <= 180.0:
            raise MuraConfigError(f"origin out of range: ({self.origin_lat}, {self.origin_lng})")

    @property
    def origin(self) -> tuple[float, float]:
        return (self.origin_lat, self.origin_lng)

    @classmethod
    def from_env(cls, **overrides: Any) -> TrackerConfig:
        """Create configuration from environment variables.

        Reads optional ``MURA_*`` variables. Explicit keyword arguments
        override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        TrackerConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_NUMERIC_MAP: dict[str, tuple[str, type[int] | type[float]]] = {
            "MURA_RECENTER_THRESHOLD_M": ("recenter_threshold_m", float),
            "MURA_MAX_PATH_LENGTH": ("max_path_length", int),
            "MURA_TICK_INTERVAL_MS": ("tick_interval_ms", int),
            "MURA_SIMULATION_STEPS": ("simulation_steps", int),
            "MURA_SIMULATION_DELTA": ("simulation_delta", float),
            "MURA_ORIGIN_LAT": ("origin_lat", float),
            "MURA_ORIGIN_LNG": ("origin_lng", float),
        }
        config_kwargs: dict[str, Any] = {}

        mode_env = env.get("MURA_RECENTER_MODE")
        if mode_env is not None and "recenter_mode" not in overrides:
            config_kwargs["recenter_mode"] = _parse_mode(mode_env)

        for env_key, (field_name, kind) in _ENV_NUMERIC_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _parse_number(env_key, val, kind)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
