"""Geometric value types returned by sensor reads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GeoPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = 0.0
    longitude: float = 0.0


class Vector3(BaseModel):
    """Cartesian vector; units depend on the read that returned it."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class AngularVelocity(BaseModel):
    """Angular velocity in degrees per second about each axis."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class EulerAngles(BaseModel):
    """Orientation as roll/pitch/yaw in radians."""

    model_config = ConfigDict(frozen=True)

    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0
