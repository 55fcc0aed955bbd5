#!/usr/bin/env python3
"""Replay a simulated demo session and print every render command.

Useful to eyeball what the viewer would do for a given recentre mode
without a browser.

Usage
-----
::

    python scripts/simulate_session.py --id demo123

Options::

    --id ID              Session id (omit to see the invalid-link path)
    --mode MODE          free-roam (default) or follow
    --steps N            Number of simulated points (default from MURA_SIMULATION_STEPS or 40)
    --interval-ms MS     Tick cadence (default 0 for an instant replay)
    --seed N             Seed the random walk for a reproducible route
    --json               Emit one JSON object per command
    -v, --verbose        Enable DEBUG logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import random
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from muratrack import RenderCommand, TrackerConfig, TrackerSession, ViewReady  # noqa: E402
from muratrack.ingestion.simulator import play_route, route_from_config  # noqa: E402


def _format_command(command: RenderCommand) -> str:
    payload = command.model_dump(mode="json", exclude={"kind"})
    if "positions" in payload:
        payload["positions"] = f"<{len(payload['positions'])} points>"
    fields = " ".join(f"{key}={value}" for key, value in payload.items())
    return f"{command.kind:<14} {fields}"


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Replay a simulated MÜRA viewer session.")
    parser.add_argument("--id", dest="session_id", default=None)
    parser.add_argument("--mode", dest="recenter_mode", default=None)
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument("--interval-ms", type=int, default=0)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--json", dest="json_mode", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    overrides: dict[str, object] = {}
    if args.recenter_mode is not None:
        overrides["recenter_mode"] = args.recenter_mode
    if args.steps is not None:
        overrides["simulation_steps"] = args.steps
    config = TrackerConfig.from_env(**overrides)

    def _sink(command: RenderCommand) -> None:
        if args.json_mode:
            print(command.model_dump_json())
        else:
            print(_format_command(command))

    session = TrackerSession(args.session_id, config=config, sink=_sink)
    session.start()
    if not session.has_stream:
        return 1

    session.dispatch(ViewReady())
    rng = random.Random(args.seed) if args.seed is not None else None
    route = route_from_config(config, rng=rng)
    await play_route(session, route, interval_ms=args.interval_ms)

    if not args.json_mode:
        state = session.state
        print(json.dumps({"phase": state.phase, "path_len": len(state.path), "status": state.status}))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
