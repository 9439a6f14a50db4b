from __future__ import annotations

import pytest

from gpsdsensor.config import DEFAULT_GPSD_PORT, GpsdConfig

_ENV_KEYS = ("GPSD_HOST", "GPSD_PORT", "GPSD_CONNECT_TIMEOUT", "GPSD_STALE_AFTER")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = GpsdConfig()

    assert config.address == f"localhost:{DEFAULT_GPSD_PORT}"
    assert config.stale_after == 60.0


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GPSD_HOST", " gps.lan ")
    monkeypatch.setenv("GPSD_PORT", "3000")
    monkeypatch.setenv("GPSD_CONNECT_TIMEOUT", "2.5")
    monkeypatch.setenv("GPSD_STALE_AFTER", "30")

    config = GpsdConfig.from_env()

    assert config.host == "gps.lan"
    assert config.port == 3000
    assert config.connect_timeout == 2.5
    assert config.stale_after == 30.0


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GPSD_HOST", "gps.lan")
    monkeypatch.setenv("GPSD_PORT", "3000")

    config = GpsdConfig.from_env(host="127.0.0.1", port=4000)

    assert config.address == "127.0.0.1:4000"


def test_from_env_without_variables_uses_defaults() -> None:
    assert GpsdConfig.from_env() == GpsdConfig()
