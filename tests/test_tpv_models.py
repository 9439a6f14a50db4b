"""Tests for Pydantic model parsing with GpsdBaseModel + GpsdEnum."""

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from gpsdsensor.models.geometry import GeoPoint
from gpsdsensor.models.options import ReadOptions
from gpsdsensor.models.tpv import FixMode, TpvReport

# ------------------------------------------------------------------
# GpsdEnum
# ------------------------------------------------------------------


class TestFixMode:
    def test_unknown_value_falls_back(self) -> None:
        assert FixMode(7) == FixMode.UNKNOWN

    def test_known_value(self) -> None:
        assert FixMode(2) == FixMode.FIX_2D


# ------------------------------------------------------------------
# TpvReport
# ------------------------------------------------------------------


class TestTpvReport:
    def test_parses_gpsd_keys(self) -> None:
        report = TpvReport.model_validate(
            {
                "class": "TPV",
                "device": "/dev/ttyACM0",
                "mode": 3,
                "time": "2005-06-08T10:34:48.283Z",
                "lat": 46.498293369,
                "lon": 7.567411672,
                "alt": 1343.127,
                "track": 10.3788,
                "speed": 0.091,
                "climb": -0.085,
                "epx": 15.319,
                "epv": 32.4,
            }
        )

        assert report.latitude == pytest.approx(46.498293369)
        assert report.longitude == pytest.approx(7.567411672)
        assert report.altitude == pytest.approx(1343.127)
        assert report.track == pytest.approx(10.3788)
        assert report.speed == pytest.approx(0.091)
        assert report.climb == pytest.approx(-0.085)
        assert report.epx == pytest.approx(15.319)
        assert report.epy is None
        assert report.mode == FixMode.FIX_3D
        assert report.has_fix
        assert report.device == "/dev/ttyACM0"
        assert report.time == datetime(2005, 6, 8, 10, 34, 48, 283000, tzinfo=UTC)
        assert report.raw["class"] == "TPV"

    def test_altitude_falls_back_to_msl_then_hae(self) -> None:
        assert TpvReport.model_validate({"altMSL": 5.0, "altHAE": 7.0}).altitude == 5.0
        assert TpvReport.model_validate({"altHAE": 7.0}).altitude == 7.0

    def test_missing_fields_read_as_zero(self) -> None:
        report = TpvReport.model_validate({"class": "TPV", "mode": 1})

        assert (report.latitude, report.longitude, report.altitude) == (0.0, 0.0, 0.0)
        assert report.speed == 0.0
        assert report.track == 0.0
        assert report.time is None
        assert not report.has_fix

    def test_null_and_nan_values_use_defaults(self) -> None:
        report = TpvReport.model_validate(json.loads('{"lat": NaN, "lon": null, "epx": null, "mode": null}'))

        assert report.latitude == 0.0
        assert report.longitude == 0.0
        assert report.epx is None
        assert report.mode == FixMode.UNKNOWN

    def test_unparseable_values_use_defaults(self) -> None:
        report = TpvReport.model_validate({"lat": "north", "time": "yesterday", "speed": True})

        assert report.latitude == 0.0
        assert report.time is None
        assert report.speed == 0.0

    def test_kwargs_construction(self) -> None:
        report = TpvReport(latitude=1.5, longitude=2.5, track=180.0)

        assert report.latitude == 1.5
        assert report.track == 180.0
        assert report.raw == {"latitude": 1.5, "longitude": 2.5, "track": 180.0}

    def test_report_is_frozen(self) -> None:
        report = TpvReport(latitude=1.0)

        with pytest.raises(ValidationError):
            report.latitude = 2.0  # type: ignore[misc]


# ------------------------------------------------------------------
# Geometry and options
# ------------------------------------------------------------------


def test_geo_point_defaults_to_zero() -> None:
    assert GeoPoint() == GeoPoint(latitude=0.0, longitude=0.0)


class TestReadOptions:
    def test_default_is_not_capture(self) -> None:
        assert not ReadOptions().from_automated_capture

    def test_from_extra_recognizes_capture_key(self) -> None:
        assert ReadOptions.from_extra({"fromDataManagement": True}).from_automated_capture

    def test_from_extra_requires_exact_true(self) -> None:
        assert not ReadOptions.from_extra({"fromDataManagement": "true"}).from_automated_capture
        assert not ReadOptions.from_extra({"fromDataManagement": 1}).from_automated_capture
        assert not ReadOptions.from_extra({"other": True}).from_automated_capture

    def test_from_extra_none(self) -> None:
        assert ReadOptions.from_extra(None) == ReadOptions()

    def test_unknown_option_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ReadOptions(from_capture=True)  # type: ignore[call-arg]
