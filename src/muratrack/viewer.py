"""Viewer session driver.

Owns the single :class:`TrackerState` of a viewing session and serializes
every event source through the reducer.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime

from muratrack._redact import mask_session_id, redact_for_log
from muratrack.config import TrackerConfig
from muratrack.session import parse_session_id
from muratrack.state.commands import RenderCommand, ShowStatus
from muratrack.state.events import PositionEvent
from muratrack.state.reducer import PositionStreamReducer, TrackerState, _utcnow

_logger = logging.getLogger(__name__)

RenderSink = Callable[[RenderCommand], None]


class TrackerSession:
    """One viewing session.

    Parameters
    ----------
    session_id : str or None
        Opaque id from the share link. ``None`` or blank opens a session
        that only ever reports an invalid link.
    config : TrackerConfig or None
        Tracker configuration; defaults are used when omitted.
    sink : callable or None
        Presentation callback receiving every emitted command.
    clock : callable
        Source of "now" for status timestamps.
    """

    def __init__(
        self,
        session_id: str | None,
        *,
        config: TrackerConfig | None = None,
        sink: RenderSink | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config or TrackerConfig()
        self._clock = clock
        self._sink = sink
        self._reducer = PositionStreamReducer(self._config, clock=clock)
        self._state = TrackerState.initial(session_id, config=self._config)

    @classmethod
    def from_url(cls, url: str | None, **kwargs: object) -> TrackerSession:
        """Open a session for the viewer URL (or query string) *url*."""
        return cls(parse_session_id(url), **kwargs)  # type: ignore[arg-type]

    @property
    def state(self) -> TrackerState:
        return self._state

    @property
    def config(self) -> TrackerConfig:
        return self._config

    @property
    def session_id(self) -> str | None:
        return self._state.session_id

    @property
    def has_stream(self) -> bool:
        """Whether event sources should be attached at all."""
        return self._state.session_id is not None

    def start(self) -> ShowStatus:
        """Publish the initial status (``not ready`` or ``invalid link``)."""
        command = ShowStatus(message=self._state.status, timestamp=self._clock())
        self._emit(command)
        return command

    def dispatch(self, event: PositionEvent) -> RenderCommand:
        """Run one event through the reducer and forward the resulting command."""
        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug(
                "Event %s session=%s payload=%s",
                event.kind,
                mask_session_id(self._state.session_id),
                redact_for_log(event.model_dump(exclude={"kind"})),
            )
        self._state, command = self._reducer.reduce(self._state, event)
        self._emit(command)
        return command

    async def consume(self, queue: asyncio.Queue[PositionEvent | None]) -> None:
        """Dispatch events from *queue* one at a time until ``None`` is received."""
        while True:
            event = await queue.get()
            try:
                if event is None:
                    return
                self.dispatch(event)
            finally:
                queue.task_done()

    def position_age(self, now: datetime | None = None) -> float | None:
        return self._state.position_age(now or self._clock())

    def _emit(self, command: RenderCommand) -> None:
        if self._sink is None:
            return
        try:
            self._sink(command)
        except Exception:
            _logger.debug("Render sink failed for %s", command.kind, exc_info=True)
