"""Internal constants shared across the library."""

# Bogotá, the default map origin of the viewer.
DEFAULT_ORIGIN: tuple[float, float] = (4.7110, -74.0721)

DEFAULT_MAX_PATH_LENGTH = 500
DEFAULT_RECENTER_THRESHOLD_M = 2000.0
DEFAULT_TICK_INTERVAL_MS = 1200
DEFAULT_SIMULATION_STEPS = 40
DEFAULT_SIMULATION_DELTA = 0.0008

EARTH_RADIUS_M = 6_371_000.0

# Remote document store layout.
SESSIONS_COLLECTION = "sessions"
POSITIONS_COLLECTION = "positions"
HISTORY_QUERY_LIMIT = 500
SESSION_QUERY_PARAM = "id"

# ------------------------------------------------------------------
# Status texts shown in the viewer's status region
# ------------------------------------------------------------------

STATUS_WAITING = "waiting for location"
STATUS_NOT_READY = "not ready"
STATUS_UPDATED = "updated"
STATUS_ENDED = "session ended"
STATUS_INVALID_LINK = "invalid link"
STATUS_SOURCE_UNAVAILABLE = "source unavailable"
