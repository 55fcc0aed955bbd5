from __future__ import annotations

import pytest

from muratrack.config import RecenterMode
from muratrack.geo import haversine_m
from muratrack.models.position import Position
from muratrack.state.policy import should_recenter

BOGOTA = (4.7110, -74.0721)


def test_haversine_zero_for_same_point() -> None:
    assert haversine_m(*BOGOTA, *BOGOTA) == 0.0


def test_haversine_one_degree_of_latitude() -> None:
    assert haversine_m(0.0, 0.0, 1.0, 0.0) == pytest.approx(111_195, rel=1e-3)


def test_haversine_antipodal_points_do_not_fail() -> None:
    assert haversine_m(0.0, 0.0, 0.0, 180.0) == pytest.approx(20_015_087, rel=1e-3)


def test_follow_ignores_distance() -> None:
    incoming = Position(lat=BOGOTA[0], lng=BOGOTA[1])

    assert should_recenter(mode=RecenterMode.FOLLOW, view_center=BOGOTA, incoming=incoming, threshold_m=2000)


@pytest.mark.parametrize(
    ("lat_offset", "expected"),
    [
        (0.0, False),
        (0.017, False),  # ~1.9 km
        (0.0185, True),  # ~2.06 km
        (1.0, True),
    ],
)
def test_free_roam_threshold(lat_offset: float, expected: bool) -> None:
    incoming = Position(lat=BOGOTA[0] + lat_offset, lng=BOGOTA[1])

    result = should_recenter(
        mode=RecenterMode.FREE_ROAM,
        view_center=BOGOTA,
        incoming=incoming,
        threshold_m=2000,
    )

    assert result is expected


def test_free_roam_without_view_center_recenters() -> None:
    incoming = Position(lat=0.0, lng=0.0)

    assert should_recenter(mode=RecenterMode.FREE_ROAM, view_center=None, incoming=incoming, threshold_m=2000)


def test_free_roam_distance_equal_to_threshold_does_not_recenter() -> None:
    incoming = Position(lat=BOGOTA[0] + 0.018, lng=BOGOTA[1])
    threshold = haversine_m(*BOGOTA, incoming.lat, incoming.lng)

    result = should_recenter(
        mode=RecenterMode.FREE_ROAM,
        view_center=BOGOTA,
        incoming=incoming,
        threshold_m=threshold,
    )

    assert result is False
