"""Time-position-velocity report model."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, Field, field_validator

from gpsdsensor._normalize import parse_gpsd_time, safe_float, safe_int, safe_str
from gpsdsensor.models._base import GpsdBaseModel, GpsdEnum

#: gpsd report class carrying position, velocity and time.
TPV_CLASS = "TPV"


class FixMode(GpsdEnum):
    """NMEA fix mode as reported by gpsd."""

    UNKNOWN = 0
    NO_FIX = 1
    FIX_2D = 2
    FIX_3D = 3


class TpvReport(GpsdBaseModel):
    """A decoded gpsd ``TPV`` report.

    Position and motion fields default to ``0.0`` so that an empty
    report reads as the zero position rather than failing validation.

    Parameters
    ----------
    latitude : float
        Latitude in degrees, positive north.
    longitude : float
        Longitude in degrees, positive east.
    altitude : float
        Altitude in meters.
    speed : float
        Ground speed in meters per second.
    track : float
        Course over ground in degrees from true north.
    climb : float or None
        Vertical speed in meters per second.
    mode : FixMode
        Fix quality.
    time : datetime or None
        Fix time (UTC).
    device : str or None
        Device path the report came from.
    epx, epy, epv, eps, ept : float or None
        gpsd's 95% confidence error estimates.
    raw : dict
        Full report object.
    """

    latitude: float = Field(default=0.0, validation_alias=AliasChoices("latitude", "lat"))
    longitude: float = Field(default=0.0, validation_alias=AliasChoices("longitude", "lon"))
    altitude: float = Field(
        default=0.0,
        validation_alias=AliasChoices("altitude", "alt", "altMSL", "altHAE"),
    )
    speed: float = 0.0
    track: float = Field(default=0.0, validation_alias=AliasChoices("track", "heading"))
    climb: float | None = None
    mode: FixMode = FixMode.UNKNOWN
    time: datetime | None = None
    device: str | None = None
    epx: float | None = None
    epy: float | None = None
    epv: float | None = None
    eps: float | None = None
    ept: float | None = None

    @field_validator("latitude", "longitude", "altitude", "speed", "track", mode="before")
    @classmethod
    def _coerce_motion(cls, value: Any) -> float:
        parsed = safe_float(value)
        return 0.0 if parsed is None else parsed

    @field_validator("climb", "epx", "epy", "epv", "eps", "ept", mode="before")
    @classmethod
    def _coerce_optional_floats(cls, value: Any) -> float | None:
        return safe_float(value)

    @field_validator("mode", mode="before")
    @classmethod
    def _coerce_mode(cls, value: Any) -> FixMode:
        parsed = safe_int(value)
        return FixMode.UNKNOWN if parsed is None else FixMode(parsed)

    @field_validator("time", mode="before")
    @classmethod
    def _coerce_time(cls, value: Any) -> datetime | None:
        return parse_gpsd_time(value)

    @field_validator("device", mode="before")
    @classmethod
    def _coerce_device(cls, value: Any) -> str | None:
        return safe_str(value)

    @property
    def has_fix(self) -> bool:
        """Whether gpsd reported at least a 2D fix."""
        return self.mode >= FixMode.FIX_2D
