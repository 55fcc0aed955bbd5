"""Helpers for safe debug logging.

A session id is a bearer capability: anyone holding the share link can watch
the tracked person move. This module masks ids and links before payloads
are emitted in DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        "id",
        "sessionid",
        "session_id",
        "url",
        "href",
        "link",
        "shareurl",
        "token",
        "authorization",
    }
)


def mask_session_id(session_id: str | None) -> str:
    """Keep only the first characters of a session id."""
    if not session_id:
        return "<none>"
    if len(session_id) <= 4:
        return "****"
    return f"{session_id[:4]}…"


def redact_for_log(value: Any, *, max_string: int = 512) -> Any:
    """Return a redacted copy of an event payload for debug logs.

    Payloads are pydantic dumps: mappings, lists, tuples and scalars.
    """
    if isinstance(value, str):
        return value if len(value) <= max_string else f"{value[:max_string]}…<truncated>"
    if isinstance(value, Mapping):
        return {
            str(key): "<redacted>"
            if str(key).lower() in _SENSITIVE_VALUE_KEYS
            else redact_for_log(item, max_string=max_string)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact_for_log(item, max_string=max_string) for item in value]
    return value
