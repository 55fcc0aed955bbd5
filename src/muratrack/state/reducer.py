"""Deterministic position stream reducer.

This is the only component allowed to advance a :class:`TrackerState`.
Given the same state, event and clock reading it always produces the same
``(state, command)`` pair, and it never raises on malformed input.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from muratrack._constants import (
    STATUS_ENDED,
    STATUS_INVALID_LINK,
    STATUS_NOT_READY,
    STATUS_SOURCE_UNAVAILABLE,
    STATUS_UPDATED,
    STATUS_WAITING,
)
from muratrack._redact import mask_session_id
from muratrack.config import TrackerConfig
from muratrack.exceptions import InvalidPositionError, MuraError, NotReadyError, SourceUnavailableError
from muratrack.models.position import Position, RawPosition, coerce_position
from muratrack.state.commands import (
    MoveMarkerAndMaybeRecenter,
    NoOp,
    RecenterOn,
    RenderCommand,
    ReplacePath,
    ShowStatus,
)
from muratrack.state.events import (
    ManualRecenter,
    PositionEvent,
    RemoteHistory,
    RemoteSnapshot,
    SessionEnd,
    SimulatedTick,
    SourceFailure,
    ViewMoved,
    ViewReady,
)
from muratrack.state.policy import should_recenter

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TrackerPhase(StrEnum):
    INITIALIZING = "initializing"
    LIVE = "live"
    ENDED = "ended"


class TrackerState(BaseModel):
    """Everything the viewer knows about one tracked session.

    ``current_position`` and ``path`` are updated by different events and may
    diverge: snapshots move the marker and extend the path, history batches
    replace the path only.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    session_id: str | None = None
    phase: TrackerPhase = TrackerPhase.INITIALIZING
    path: tuple[Position, ...] = ()
    current_position: Position | None = None
    view_center: tuple[float, float] | None = None
    manual_recenter: bool = False
    status: str = STATUS_NOT_READY
    status_at: datetime | None = None

    @classmethod
    def initial(cls, session_id: str | None, *, config: TrackerConfig | None = None) -> TrackerState:
        """Create the state for a freshly opened viewer.

        A missing or blank session id produces a terminal state carrying the
        "invalid link" status; no stream should be attached to it.
        """
        cfg = config or TrackerConfig()
        sid = session_id.strip() if session_id else ""
        if not sid:
            return cls(
                session_id=None,
                phase=TrackerPhase.ENDED,
                view_center=cfg.origin,
                status=STATUS_INVALID_LINK,
            )
        return cls(session_id=sid, view_center=cfg.origin)

    def position_age(self, now: datetime) -> float | None:
        """Seconds since the current position was reported, when it carries a timestamp."""
        if self.current_position is None or self.current_position.ts is None:
            return None
        return now.timestamp() - self.current_position.ts


def _error_status(exc: MuraError) -> str:
    if isinstance(exc, InvalidPositionError):
        return STATUS_WAITING
    if isinstance(exc, NotReadyError):
        return STATUS_NOT_READY
    if isinstance(exc, SourceUnavailableError):
        message = str(exc)
        return f"{STATUS_SOURCE_UNAVAILABLE}: {message}" if message else STATUS_SOURCE_UNAVAILABLE
    return str(exc)


class PositionStreamReducer:
    """Fold position events into tracker state and render commands."""

    def __init__(
        self,
        config: TrackerConfig | None = None,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config or TrackerConfig()
        self._clock = clock

    @property
    def config(self) -> TrackerConfig:
        return self._config

    def reduce(self, state: TrackerState, event: PositionEvent) -> tuple[TrackerState, RenderCommand]:
        """Apply one event.

        Rejected input (bad coordinates, events before the view is ready,
        source failures) yields a :class:`ShowStatus` and leaves *state*
        untouched.
        """
        now = self._clock()

        if state.phase == TrackerPhase.ENDED:
            # Remote listeners outlive the session; their deliveries are ignored.
            return state, NoOp()

        try:
            if state.phase == TrackerPhase.INITIALIZING:
                if isinstance(event, ViewReady):
                    return self._on_view_ready(state, event, now)
                raise NotReadyError(f"{event.kind} received before the view is ready")
            return self._on_live_event(state, event, now)
        except MuraError as exc:
            _logger.debug("Rejected %s for session=%s: %s", event.kind, mask_session_id(state.session_id), exc)
            return state, ShowStatus(message=_error_status(exc), timestamp=now)

    def _on_live_event(
        self,
        state: TrackerState,
        event: PositionEvent,
        now: datetime,
    ) -> tuple[TrackerState, RenderCommand]:
        if isinstance(event, SimulatedTick):
            return self._accept(state, coerce_position(event.lat, event.lng, event.ts), now)
        if isinstance(event, RemoteSnapshot):
            return self._accept(state, RawPosition.from_fields(event.data).to_position(), now)
        if isinstance(event, RemoteHistory):
            return self._replace_path(state, event)
        if isinstance(event, ManualRecenter):
            return self._manual_recenter(state)
        if isinstance(event, ViewMoved):
            center = self._valid_center(state, event.center)
            if center is None:
                return state, NoOp()
            return state.model_copy(update={"view_center": center, "manual_recenter": True}), NoOp()
        if isinstance(event, SourceFailure):
            raise SourceUnavailableError(event.message, source=event.source)
        if isinstance(event, SessionEnd):
            _logger.debug(
                "Session ended session=%s path_len=%d", mask_session_id(state.session_id), len(state.path)
            )
            ended = state.model_copy(
                update={"phase": TrackerPhase.ENDED, "status": STATUS_ENDED, "status_at": now},
            )
            return ended, ShowStatus(message=STATUS_ENDED, timestamp=now)
        # ViewReady while already live.
        return state, NoOp()

    def _on_view_ready(
        self,
        state: TrackerState,
        event: ViewReady,
        now: datetime,
    ) -> tuple[TrackerState, RenderCommand]:
        center = self._valid_center(state, event.center) or state.view_center
        live = state.model_copy(
            update={
                "phase": TrackerPhase.LIVE,
                "view_center": center,
                "status": STATUS_WAITING,
                "status_at": now,
            }
        )
        return live, ShowStatus(message=STATUS_WAITING, timestamp=now)

    def _valid_center(self, state: TrackerState, center: tuple[float, float] | None) -> tuple[float, float] | None:
        """Bounds-check a reported view centre; an out-of-range centre is dropped."""
        if center is None:
            return None
        try:
            return coerce_position(*center).as_pair()
        except InvalidPositionError as exc:
            _logger.debug("Ignoring view centre for session=%s: %s", mask_session_id(state.session_id), exc)
            return None

    def _accept(
        self,
        state: TrackerState,
        position: Position,
        now: datetime,
    ) -> tuple[TrackerState, RenderCommand]:
        recenter = should_recenter(
            mode=self._config.recenter_mode,
            view_center=state.view_center,
            incoming=position,
            threshold_m=self._config.recenter_threshold_m,
        )
        path = (*state.path, position)[-self._config.max_path_length :]
        update: dict[str, object] = {
            "current_position": position,
            "path": path,
            "status": STATUS_UPDATED,
            "status_at": now,
        }
        if recenter:
            update["view_center"] = position.as_pair()
            update["manual_recenter"] = False
        return state.model_copy(update=update), MoveMarkerAndMaybeRecenter(
            position=position,
            should_recenter=recenter,
        )

    def _replace_path(self, state: TrackerState, event: RemoteHistory) -> tuple[TrackerState, RenderCommand]:
        accepted: list[Position] = []
        skipped = 0
        for record in event.records:
            try:
                accepted.append(RawPosition.from_fields(record).to_position())
            except InvalidPositionError:
                skipped += 1
        if skipped:
            _logger.debug(
                "History batch skipped %d invalid records session=%s",
                skipped,
                mask_session_id(state.session_id),
            )

        path = tuple(accepted[-self._config.max_path_length :])
        return state.model_copy(update={"path": path}), ReplacePath(positions=path)

    def _manual_recenter(self, state: TrackerState) -> tuple[TrackerState, RenderCommand]:
        current = state.current_position
        if current is None:
            raise InvalidPositionError("no position to recenter on")
        recentred = state.model_copy(update={"view_center": current.as_pair(), "manual_recenter": True})
        return recentred, RecenterOn(position=current)
