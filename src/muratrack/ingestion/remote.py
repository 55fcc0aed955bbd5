"""Remote document store ingestion helpers.

The store's own listener API is owned by the caller. These helpers turn what
its callbacks deliver into reducer events:

- ``sessions/{id}`` document snapshots -> :class:`RemoteSnapshot`
- ``sessions/{id}/positions`` ordered by ``ts`` ascending, limited to
  :data:`HISTORY_QUERY_LIMIT` -> :class:`RemoteHistory`
- listener errors -> :class:`SourceFailure`
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from muratrack._constants import HISTORY_QUERY_LIMIT, POSITIONS_COLLECTION, SESSIONS_COLLECTION
from muratrack.exceptions import SourceUnavailableError
from muratrack.state.events import RemoteHistory, RemoteSnapshot, SourceFailure

SNAPSHOT_SOURCE = "snapshot"
HISTORY_SOURCE = "history"


def session_document_path(session_id: str) -> str:
    return f"{SESSIONS_COLLECTION}/{session_id}"


def positions_collection_path(session_id: str) -> str:
    return f"{SESSIONS_COLLECTION}/{session_id}/{POSITIONS_COLLECTION}"


def snapshot_event(data: Mapping[str, Any] | None) -> RemoteSnapshot:
    """Wrap a session document payload; a missing document becomes an empty snapshot."""
    if not isinstance(data, Mapping):
        return RemoteSnapshot()
    return RemoteSnapshot(data=dict(data))


def history_event(records: Iterable[Mapping[str, Any] | None], *, limit: int = HISTORY_QUERY_LIMIT) -> RemoteHistory:
    """Wrap an ordered history delivery.

    Non-mapping records are dropped here; coordinate validation is left to the
    reducer. Deliveries larger than *limit* keep their most recent records.
    """
    kept = [dict(record) for record in records if isinstance(record, Mapping)]
    if len(kept) > limit:
        kept = kept[-limit:]
    return RemoteHistory(records=tuple(kept))


def failure_event(exc: BaseException, *, source: str = SNAPSHOT_SOURCE) -> SourceFailure:
    """Describe a listener error for the status region."""
    if isinstance(exc, SourceUnavailableError) and exc.source:
        source = exc.source
    message = str(exc) or type(exc).__name__
    return SourceFailure(source=source, message=message)
