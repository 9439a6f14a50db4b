#!/usr/bin/env python3
"""Watch a gpsd feed through the gpsdsensor cache.

Connects to gpsd, then prints every reading the sensor serves at a fixed
interval, including staleness errors, so you can see what a caller of the
library would see.

Usage
-----
::

    export GPSD_HOST=localhost
    python scripts/watch_gps.py

Options::

    --interval SECONDS   Seconds between reads (default: 2)
    --count N            Stop after N reads (default: run until Ctrl-C)
    --capture            Read as an automated data-capture loop
    --json               Print each reading as JSON
    --verbose, -v        Enable debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from gpsdsensor import (  # noqa: E402
    GpsdConfig,
    GpsdConnectionError,
    GpsdMovementSensor,
    NoCaptureToStoreError,
    ReadOptions,
    StaleDataError,
)


def _jsonable(value: Any) -> Any:
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json", exclude={"raw"})
    return value


async def main() -> int:
    parser = argparse.ArgumentParser(description="Print readings served from a live gpsd feed.")
    parser.add_argument("--interval", type=float, default=2.0, help="Seconds between reads")
    parser.add_argument("--count", type=int, default=0, help="Stop after N reads (0 = forever)")
    parser.add_argument("--capture", action="store_true", help="Read as an automated data-capture loop")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    config = GpsdConfig.from_env()
    options = ReadOptions(from_automated_capture=args.capture)

    try:
        sensor = await GpsdMovementSensor.create("gps", config=config)
    except GpsdConnectionError as exc:
        print(f"!! {exc}", file=sys.stderr)
        return 1

    reads = 0
    async with sensor:
        while args.count <= 0 or reads < args.count:
            reads += 1
            now = datetime.now(UTC).isoformat()
            try:
                result = await sensor.get_readings(options=options)
            except NoCaptureToStoreError:
                print(f"{now}  (nothing to capture)")
            except StaleDataError as exc:
                print(f"{now}  !! {exc}")
            else:
                if args.json_mode:
                    print(json.dumps({k: _jsonable(v) for k, v in result.items()}, default=str))
                else:
                    point = result["position"]
                    print(
                        f"{now}  lat={point.latitude:.6f} lon={point.longitude:.6f} "
                        f"alt={result['altitude']:.1f}m speed={result['linear_velocity'].y:.2f}m/s "
                        f"track={result['compass']:.1f}"
                    )
            await asyncio.sleep(args.interval)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        pass
