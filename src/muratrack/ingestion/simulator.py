"""Simulated position source for demo sessions.

A route is a bounded random walk around an origin. Each call to
:func:`make_route` produces a fresh walk; routes are never resumed.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from muratrack._constants import DEFAULT_SIMULATION_DELTA, DEFAULT_SIMULATION_STEPS
from muratrack.config import TrackerConfig
from muratrack.models.position import Position, coerce_position
from muratrack.state.events import PositionEvent, SessionEnd, SimulatedTick

if TYPE_CHECKING:
    from muratrack.viewer import TrackerSession

_logger = logging.getLogger(__name__)


def make_route(
    origin: tuple[float, float],
    steps: int = DEFAULT_SIMULATION_STEPS,
    delta: float = DEFAULT_SIMULATION_DELTA,
    *,
    rng: random.Random | None = None,
) -> list[Position]:
    """Generate *steps* positions, each jittered from the previous one.

    Both axes move independently by ``uniform(-delta / 2, delta / 2)``.
    The origin itself is not part of the route. Points are clamped to the
    valid coordinate range.
    """
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")
    source = rng or random.Random()
    half = delta / 2
    lat, lng = origin
    points: list[Position] = []
    for _ in range(steps):
        lat = min(90.0, max(-90.0, lat + source.uniform(-half, half)))
        lng = min(180.0, max(-180.0, lng + source.uniform(-half, half)))
        points.append(coerce_position(lat, lng))
    return points


def route_from_config(config: TrackerConfig, *, rng: random.Random | None = None) -> list[Position]:
    return make_route(config.origin, config.simulation_steps, config.simulation_delta, rng=rng)


def simulated_events(route: Sequence[Position]) -> Iterator[PositionEvent]:
    """Yield one tick per route point, then the end of the session."""
    for point in route:
        yield SimulatedTick(lat=point.lat, lng=point.lng, ts=point.ts)
    yield SessionEnd()


async def play_route(
    session: TrackerSession,
    route: Sequence[Position],
    interval_ms: int | None = None,
) -> None:
    """Feed *route* into *session* at a fixed cadence until exhausted.

    The cadence defaults to the session's ``tick_interval_ms``.
    """
    if interval_ms is None:
        interval_ms = session.config.tick_interval_ms
    interval = interval_ms / 1000.0
    _logger.debug("Playing simulated route of %d points every %dms", len(route), interval_ms)
    for event in simulated_events(route):
        await asyncio.sleep(interval)
        session.dispatch(event)
