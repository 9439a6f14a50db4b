"""Sensor capability flags."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Properties(BaseModel):
    """Which reads the sensor can answer with real data.

    The delivered flags turn on with the first report and stay on for the
    lifetime of the sensor. They say the data channel has worked, not that
    the data is fresh.
    """

    model_config = ConfigDict(frozen=True)

    position_supported: bool = False
    compass_heading_supported: bool = False
    linear_velocity_supported: bool = False
    angular_velocity_supported: bool = False
    linear_acceleration_supported: bool = False
    orientation_supported: bool = False


#: Flags after at least one TPV report has been delivered.
DELIVERED_PROPERTIES = Properties(
    position_supported=True,
    compass_heading_supported=True,
    linear_velocity_supported=True,
)
