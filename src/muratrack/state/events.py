"""Reducer input events.

Every source (simulator ticks, remote snapshot and history listeners,
operator controls) converts its input into one of these events. Only the
reducer interprets them.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class SimulatedTick(_Event):
    """One point of a simulated route."""

    kind: Literal["simulated_tick"] = "simulated_tick"
    lat: float | None
    lng: float | None
    ts: float | None = None


class RemoteSnapshot(_Event):
    """Latest session document; fields are untrusted."""

    kind: Literal["remote_snapshot"] = "remote_snapshot"
    data: dict[str, Any] = Field(default_factory=dict)


class RemoteHistory(_Event):
    """Complete replacement batch of the earliest N history records, ascending by ``ts``."""

    kind: Literal["remote_history"] = "remote_history"
    records: tuple[dict[str, Any], ...] = ()


class ManualRecenter(_Event):
    kind: Literal["manual_recenter"] = "manual_recenter"


class SessionEnd(_Event):
    kind: Literal["session_end"] = "session_end"


class ViewReady(_Event):
    """The map view finished its initial setup."""

    kind: Literal["view_ready"] = "view_ready"
    center: tuple[float, float] | None = None


class ViewMoved(_Event):
    """The operator panned or zoomed the map."""

    kind: Literal["view_moved"] = "view_moved"
    center: tuple[float, float]


class SourceFailure(_Event):
    """A remote subscription reported an error."""

    kind: Literal["source_failure"] = "source_failure"
    source: str = ""
    message: str = ""


PositionEvent = (
    SimulatedTick
    | RemoteSnapshot
    | RemoteHistory
    | ManualRecenter
    | SessionEnd
    | ViewReady
    | ViewMoved
    | SourceFailure
)
