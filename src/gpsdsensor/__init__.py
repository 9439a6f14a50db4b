"""gpsdsensor - Async movement sensor over a live gpsd feed."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gpsdsensor")
except PackageNotFoundError:
    __version__ = "0+local"
from gpsdsensor.config import GpsdConfig
from gpsdsensor.exceptions import (
    GpsdConnectionError,
    GpsdSensorError,
    GpsdShutdownError,
    NoCaptureToStoreError,
    StaleDataError,
)
from gpsdsensor.models import (
    AngularVelocity,
    EulerAngles,
    FixMode,
    GeoPoint,
    Properties,
    ReadOptions,
    TpvReport,
    Vector3,
)
from gpsdsensor.sensor import GpsdMovementSensor, readings
from gpsdsensor.state.cache import CacheSnapshot, ReportCache

__all__ = [
    "__version__",
    "AngularVelocity",
    "CacheSnapshot",
    "EulerAngles",
    "FixMode",
    "GeoPoint",
    "GpsdConfig",
    "GpsdConnectionError",
    "GpsdMovementSensor",
    "GpsdSensorError",
    "GpsdShutdownError",
    "NoCaptureToStoreError",
    "Properties",
    "ReadOptions",
    "ReportCache",
    "StaleDataError",
    "TpvReport",
    "Vector3",
    "readings",
]
