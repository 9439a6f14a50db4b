"""Thread-safe cache of the latest gpsd report.

This is the only component allowed to hold report state. The gpsd delivery
path writes through :meth:`ReportCache.update`; every read goes through
:meth:`ReportCache.snapshot`.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from gpsdsensor.models.properties import DELIVERED_PROPERTIES, Properties
from gpsdsensor.models.tpv import TpvReport


def _utcnow() -> datetime:
    return datetime.now(UTC)


class CacheSnapshot(BaseModel):
    """Report, last-update time and capability flags taken together."""

    model_config = ConfigDict(frozen=True)

    report: TpvReport = Field(default_factory=TpvReport)
    last_update: datetime | None = None
    properties: Properties = Field(default_factory=Properties)


class ReportCache:
    """Latest report plus its arrival time, guarded by one lock.

    All stored values are frozen models, so a snapshot handed out stays
    consistent after the lock is released.
    """

    def __init__(self, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._snapshot = CacheSnapshot()

    def update(self, report: TpvReport) -> None:
        """Replace the cached report and stamp it with the current time."""
        with self._lock:
            now = self._clock()
            previous = self._snapshot.last_update
            # Never move last_update backwards, even if the wall clock does.
            if previous is not None and now < previous:
                now = previous
            self._snapshot = CacheSnapshot(
                report=report,
                last_update=now,
                properties=DELIVERED_PROPERTIES,
            )

    def snapshot(self) -> CacheSnapshot:
        with self._lock:
            return self._snapshot
