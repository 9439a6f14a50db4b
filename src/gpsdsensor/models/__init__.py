"""Pydantic models for gpsd reports and sensor reads."""

from gpsdsensor.models._base import GpsdBaseModel, GpsdEnum
from gpsdsensor.models.geometry import AngularVelocity, EulerAngles, GeoPoint, Vector3
from gpsdsensor.models.options import FROM_DATA_MANAGEMENT_KEY, ReadOptions
from gpsdsensor.models.properties import DELIVERED_PROPERTIES, Properties
from gpsdsensor.models.tpv import TPV_CLASS, FixMode, TpvReport

__all__ = [
    "AngularVelocity",
    "DELIVERED_PROPERTIES",
    "EulerAngles",
    "FROM_DATA_MANAGEMENT_KEY",
    "FixMode",
    "GeoPoint",
    "GpsdBaseModel",
    "GpsdEnum",
    "Properties",
    "ReadOptions",
    "TPV_CLASS",
    "TpvReport",
    "Vector3",
]
