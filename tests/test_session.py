from __future__ import annotations

import pytest

from muratrack.session import build_share_url, parse_session_id


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("https://mura.example/viewer.html?id=abc123", "abc123"),
        ("?id=abc123&zoom=14", "abc123"),
        ("id=%20abc%20", "abc"),
        ("https://mura.example/viewer.html?id=", None),
        ("https://mura.example/viewer.html", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_session_id(value: str | None, expected: str | None) -> None:
    assert parse_session_id(value) == expected


def test_build_share_url_replaces_existing_id() -> None:
    url = build_share_url("https://mura.example/viewer.html?id=old&lang=es#map", "new")

    assert url == "https://mura.example/viewer.html?lang=es&id=new#map"
    assert parse_session_id(url) == "new"


def test_build_share_url_rejects_blank_id() -> None:
    with pytest.raises(ValueError):
        build_share_url("https://mura.example/viewer.html", "  ")
