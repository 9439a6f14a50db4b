"""Custom exception hierarchy for gpsdsensor."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gpsdsensor.models.options import ReadOptions


class GpsdSensorError(Exception):
    """Base exception for all gpsdsensor errors."""


class GpsdConnectionError(GpsdSensorError, ConnectionError):
    """The gpsd feed could not be dialed or watched."""

    def __init__(self, message: str, *, address: str = "") -> None:
        self.address = address
        super().__init__(message)


class GpsdShutdownError(GpsdSensorError):
    """Closing the gpsd feed failed."""


class StaleDataError(GpsdSensorError):
    """Cached data is older than the freshness window.

    ``value`` carries the best-known (stale) reading when the error is
    raised from a sensor read, so callers can still inspect it.
    """

    def __init__(
        self,
        message: str,
        *,
        last_update: datetime | None,
        options: ReadOptions | None = None,
        value: Any = None,
    ) -> None:
        self.last_update = last_update
        self.options = options
        self.value = value
        super().__init__(message)


class NoCaptureToStoreError(GpsdSensorError):
    """Nothing new to persist this cycle.

    Raised instead of :class:`StaleDataError` when the read comes from an
    automated data-capture loop. It is not a failure; capture loops skip
    the cycle silently.
    """

    def __init__(self, *, last_update: datetime | None, value: Any = None) -> None:
        self.last_update = last_update
        self.value = value
        super().__init__("no new data to capture")
