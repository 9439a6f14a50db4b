"""Data freshness policy.

This module contains no locking and no I/O; callers pass in the
last-update time they read from the cache and the current time.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from gpsdsensor.exceptions import NoCaptureToStoreError, StaleDataError
from gpsdsensor.models.options import ReadOptions

#: Default freshness window.
DEFAULT_MAX_AGE = timedelta(minutes=1)


def data_age(now: datetime, last_update: datetime | None) -> timedelta:
    """Age of cached data; ``timedelta.max`` when nothing was ever received."""
    if last_update is None:
        return timedelta.max
    return now - last_update


def is_fresh(now: datetime, last_update: datetime | None, max_age: timedelta = DEFAULT_MAX_AGE) -> bool:
    return data_age(now, last_update) < max_age


def check_freshness(
    *,
    now: datetime,
    last_update: datetime | None,
    options: ReadOptions | None = None,
    max_age: timedelta = DEFAULT_MAX_AGE,
) -> None:
    """Raise when cached data is too old to be trusted.

    Policy:
    - Younger than ``max_age``: return normally.
    - Stale and read by a data-capture loop: raise NoCaptureToStoreError so
      the loop skips this cycle without logging.
    - Stale otherwise: raise StaleDataError naming the last update.
    """
    if is_fresh(now, last_update, max_age):
        return

    opts = options if options is not None else ReadOptions()
    if opts.from_automated_capture:
        raise NoCaptureToStoreError(last_update=last_update)

    raise StaleDataError(
        f"last update too old: {last_update} ({opts!r})",
        last_update=last_update,
        options=opts,
    )
