"""Share link handling.

A viewer is opened with ``?id=<session>``; the same URL is what the copy
control places on the clipboard.
"""

from __future__ import annotations

from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from muratrack._constants import SESSION_QUERY_PARAM


def parse_session_id(url_or_query: str | None) -> str | None:
    """Extract the session id from a viewer URL or a bare query string.

    Returns ``None`` when the parameter is absent or blank, which callers
    must treat as "no session" rather than as an id.
    """
    if not url_or_query:
        return None
    text = url_or_query.strip()
    if "?" in text or "://" in text:
        query = urlsplit(text).query
    else:
        query = text.lstrip("?")
    values = parse_qs(query, keep_blank_values=True).get(SESSION_QUERY_PARAM, [])
    for value in values:
        session_id = value.strip()
        if session_id:
            return session_id
    return None


def build_share_url(base_url: str, session_id: str) -> str:
    """Return *base_url* with its ``id`` parameter set to *session_id*."""
    session_id = session_id.strip()
    if not session_id:
        raise ValueError("session_id must be non-empty")
    parts = urlsplit(base_url)
    params = [
        (key, value)
        for key, values in parse_qs(parts.query, keep_blank_values=True).items()
        if key != SESSION_QUERY_PARAM
        for value in values
    ]
    params.append((SESSION_QUERY_PARAM, session_id))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(params), parts.fragment))
