from __future__ import annotations

import pytest

from muratrack.config import RecenterMode, TrackerConfig
from muratrack.exceptions import MuraConfigError


def test_defaults_match_viewer() -> None:
    config = TrackerConfig()

    assert config.recenter_mode == RecenterMode.FREE_ROAM
    assert config.recenter_threshold_m == 2000.0
    assert config.max_path_length == 500
    assert config.tick_interval_ms == 1200
    assert config.simulation_steps == 40
    assert config.simulation_delta == 0.0008
    assert config.origin == (4.7110, -74.0721)


def test_recenter_mode_accepts_strings() -> None:
    assert TrackerConfig(recenter_mode="FOLLOW").recenter_mode == RecenterMode.FOLLOW  # type: ignore[arg-type]
    assert TrackerConfig(recenter_mode="free_roam").recenter_mode == RecenterMode.FREE_ROAM  # type: ignore[arg-type]


def test_from_env_reads_mura_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MURA_RECENTER_MODE", "follow")
    monkeypatch.setenv("MURA_MAX_PATH_LENGTH", "250")
    monkeypatch.setenv("MURA_RECENTER_THRESHOLD_M", "1500.5")

    config = TrackerConfig.from_env()

    assert config.recenter_mode == RecenterMode.FOLLOW
    assert config.max_path_length == 250
    assert config.recenter_threshold_m == 1500.5


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MURA_RECENTER_MODE", "follow")
    monkeypatch.setenv("MURA_TICK_INTERVAL_MS", "500")

    config = TrackerConfig.from_env(recenter_mode=RecenterMode.FREE_ROAM, tick_interval_ms=100)

    assert config.recenter_mode == RecenterMode.FREE_ROAM
    assert config.tick_interval_ms == 100


def test_from_env_rejects_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MURA_MAX_PATH_LENGTH", "many")

    with pytest.raises(MuraConfigError):
        TrackerConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"recenter_mode": "sideways"},
        {"max_path_length": 0},
        {"recenter_threshold_m": -1.0},
        {"tick_interval_ms": 0},
        {"origin_lat": 95.0},
    ],
)
def test_invalid_config_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(MuraConfigError):
        TrackerConfig(**kwargs)  # type: ignore[arg-type]
