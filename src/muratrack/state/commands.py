"""Render commands emitted by the reducer.

The presentation layer applies these to a map widget and a status region.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

from muratrack.models.position import Position


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class MoveMarkerAndMaybeRecenter(_Command):
    kind: Literal["move_marker"] = "move_marker"
    position: Position
    should_recenter: bool


class ReplacePath(_Command):
    kind: Literal["replace_path"] = "replace_path"
    positions: tuple[Position, ...]


class RecenterOn(_Command):
    kind: Literal["recenter"] = "recenter"
    position: Position


class ShowStatus(_Command):
    kind: Literal["show_status"] = "show_status"
    message: str
    timestamp: datetime


class NoOp(_Command):
    kind: Literal["noop"] = "noop"


RenderCommand = MoveMarkerAndMaybeRecenter | ReplacePath | RecenterOn | ShowStatus | NoOp
