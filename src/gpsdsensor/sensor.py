"""Movement sensor backed by a live gpsd feed."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

from gpsdsensor._gpsd import GpsdSession
from gpsdsensor.config import GpsdConfig
from gpsdsensor.exceptions import (
    GpsdSensorError,
    GpsdShutdownError,
    NoCaptureToStoreError,
    StaleDataError,
)
from gpsdsensor.models.geometry import AngularVelocity, EulerAngles, GeoPoint, Vector3
from gpsdsensor.models.options import ReadOptions
from gpsdsensor.models.properties import Properties
from gpsdsensor.models.tpv import TPV_CLASS, TpvReport
from gpsdsensor.state.cache import CacheSnapshot, ReportCache
from gpsdsensor.state.policy import check_freshness

_logger = logging.getLogger(__name__)

SessionFactory = Callable[..., GpsdSession]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class GpsdMovementSensor:
    """Serves position, velocity and heading from the latest gpsd report.

    Usage::

        sensor = await GpsdMovementSensor.create("gps")
        try:
            point, altitude = await sensor.get_position()
        finally:
            await sensor.close()

    Reads never wait for new data. Position, linear velocity and compass
    heading raise :class:`StaleDataError` (or :class:`NoCaptureToStoreError`
    for capture loops) once the cached report is older than
    ``config.stale_after``; the stale reading is attached as ``error.value``.
    """

    def __init__(
        self,
        name: str,
        *,
        config: GpsdConfig | None = None,
        logger: logging.Logger | None = None,
        session_factory: SessionFactory = GpsdSession,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._name = name
        self._config = config or GpsdConfig()
        self._logger = logger or _logger
        self._session_factory = session_factory
        self._clock = clock
        self._max_age = timedelta(seconds=self._config.stale_after)
        self._cache = ReportCache(clock=clock)
        self._session: GpsdSession | None = None
        self._closed = False

    @classmethod
    async def create(cls, name: str, **kwargs: Any) -> GpsdMovementSensor:
        """Construct a sensor and start its feed.

        Raises :class:`~gpsdsensor.exceptions.GpsdConnectionError` when gpsd
        cannot be reached; no sensor is returned in that case.
        """
        sensor = cls(name, **kwargs)
        await sensor.start()
        return sensor

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> GpsdMovementSensor:
        if self._session is None and not self._closed:
            await self.start()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def start(self) -> None:
        """Dial gpsd once and begin watching for TPV reports."""
        if self._session is not None or self._closed:
            raise GpsdSensorError(f"Sensor {self._name!r} was already started")

        loop = asyncio.get_running_loop()
        session = self._session_factory(
            host=self._config.host,
            port=self._config.port,
            loop=loop,
            connect_timeout=self._config.connect_timeout,
            logger=self._logger,
        )
        await loop.run_in_executor(None, session.dial)
        session.add_filter(TPV_CLASS, self._on_tpv)
        try:
            await loop.run_in_executor(None, session.watch)
        except Exception:
            with contextlib.suppress(GpsdShutdownError):
                await loop.run_in_executor(None, session.close)
            raise

        self._session = session
        self._logger.debug("Sensor %s watching gpsd at %s", self._name, self._config.address)

    async def close(self) -> None:
        """Close the gpsd feed. Cached data stays readable and keeps aging."""
        self._closed = True
        session = self._session
        if session is None:
            return
        loop = asyncio.get_running_loop()
        # On failure the session is kept so close() can be retried.
        await loop.run_in_executor(None, session.close)
        self._session = None
        self._logger.debug("Sensor %s closed", self._name)

    def _on_tpv(self, report: TpvReport) -> None:
        self._cache.update(report)
        self._logger.debug(
            "Sensor %s cached TPV lat=%s lon=%s mode=%s",
            self._name,
            report.latitude,
            report.longitude,
            report.mode,
        )

    # ------------------------------------------------------------------
    # Identity and diagnostics
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> GpsdConfig:
        return self._config

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def last_update(self) -> datetime | None:
        """Arrival time of the cached report; ``None`` before the first one."""
        return self._cache.snapshot().last_update

    @property
    def report(self) -> TpvReport:
        """The cached report, however old."""
        return self._cache.snapshot().report

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _ensure_fresh(self, snapshot: CacheSnapshot, options: ReadOptions | None, value: Any) -> None:
        try:
            check_freshness(
                now=self._clock(),
                last_update=snapshot.last_update,
                options=options,
                max_age=self._max_age,
            )
        except (StaleDataError, NoCaptureToStoreError) as exc:
            exc.value = value
            raise

    # ------------------------------------------------------------------
    # Reads backed by gpsd data
    # ------------------------------------------------------------------

    async def get_position(self, *, options: ReadOptions | None = None) -> tuple[GeoPoint, float]:
        """Return ``(point, altitude_m)`` from the cached report."""
        snapshot = self._cache.snapshot()
        report = snapshot.report
        value = (GeoPoint(latitude=report.latitude, longitude=report.longitude), report.altitude)
        self._ensure_fresh(snapshot, options, value)
        return value

    async def get_linear_velocity(self, *, options: ReadOptions | None = None) -> Vector3:
        """Ground speed on the y axis; gpsd gives no direction-resolved velocity."""
        snapshot = self._cache.snapshot()
        value = Vector3(x=0.0, y=snapshot.report.speed, z=0.0)
        self._ensure_fresh(snapshot, options, value)
        return value

    async def get_compass_heading(self, *, options: ReadOptions | None = None) -> float:
        snapshot = self._cache.snapshot()
        value = snapshot.report.track
        self._ensure_fresh(snapshot, options, value)
        return value

    # ------------------------------------------------------------------
    # Reads gpsd never supplies
    # ------------------------------------------------------------------

    async def get_angular_velocity(self, *, options: ReadOptions | None = None) -> AngularVelocity:
        return AngularVelocity()

    async def get_linear_acceleration(self, *, options: ReadOptions | None = None) -> Vector3:
        return Vector3()

    async def get_orientation(self, *, options: ReadOptions | None = None) -> EulerAngles:
        return EulerAngles()

    async def get_accuracy(self, *, options: ReadOptions | None = None) -> dict[str, float]:
        return {}

    async def do_command(
        self,
        command: Mapping[str, Any],
        *,
        options: ReadOptions | None = None,
    ) -> dict[str, Any]:
        """No commands are implemented; always returns an empty result."""
        return {}

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    async def get_properties(self, *, options: ReadOptions | None = None) -> Properties:
        return self._cache.snapshot().properties

    async def get_readings(self, *, options: ReadOptions | None = None) -> dict[str, Any]:
        return await readings(self, options=options)


async def readings(sensor: GpsdMovementSensor, *, options: ReadOptions | None = None) -> dict[str, Any]:
    """Collect every movement reading of *sensor* into one dict.

    Reads run one after another; the first freshness error propagates.
    """
    point, altitude = await sensor.get_position(options=options)
    result: dict[str, Any] = {"position": point, "altitude": altitude}
    result["linear_velocity"] = await sensor.get_linear_velocity(options=options)
    result["linear_acceleration"] = await sensor.get_linear_acceleration(options=options)
    result["angular_velocity"] = await sensor.get_angular_velocity(options=options)
    result["compass"] = await sensor.get_compass_heading(options=options)
    result["orientation"] = await sensor.get_orientation(options=options)
    return result
