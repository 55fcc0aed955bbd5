"""muratrack - position stream core for the MÜRA live location viewer."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("muratrack")
except PackageNotFoundError:
    __version__ = "0+local"
from muratrack.config import RecenterMode, TrackerConfig
from muratrack.exceptions import (
    InvalidPositionError,
    MuraConfigError,
    MuraError,
    NotReadyError,
    SourceUnavailableError,
)
from muratrack.models import Position
from muratrack.session import build_share_url, parse_session_id
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
from muratrack.state.reducer import PositionStreamReducer, TrackerPhase, TrackerState
from muratrack.viewer import TrackerSession

__all__ = [
    "__version__",
    "InvalidPositionError",
    "ManualRecenter",
    "MoveMarkerAndMaybeRecenter",
    "MuraConfigError",
    "MuraError",
    "NoOp",
    "NotReadyError",
    "Position",
    "PositionEvent",
    "PositionStreamReducer",
    "RecenterMode",
    "RecenterOn",
    "RemoteHistory",
    "RemoteSnapshot",
    "RenderCommand",
    "ReplacePath",
    "SessionEnd",
    "ShowStatus",
    "SimulatedTick",
    "SourceFailure",
    "SourceUnavailableError",
    "TrackerConfig",
    "TrackerPhase",
    "TrackerSession",
    "TrackerState",
    "ViewMoved",
    "ViewReady",
    "build_share_url",
    "parse_session_id",
]
