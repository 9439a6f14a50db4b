"""Sensor configuration for gpsdsensor."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

#: gpsd's registered TCP port.
DEFAULT_GPSD_PORT = 2947


@dataclasses.dataclass(frozen=True)
class GpsdConfig:
    """Sensor configuration.

    Parameters
    ----------
    host : str
        Host name or address gpsd listens on.
    port : int
        gpsd TCP port.
    connect_timeout : float
        Seconds to wait for the initial dial before giving up.
    stale_after : float
        Age in seconds at which cached data stops being fresh.
    """

    host: str = "localhost"
    port: int = DEFAULT_GPSD_PORT
    connect_timeout: float = 10.0
    stale_after: float = 60.0

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_env(cls, **overrides: Any) -> GpsdConfig:
        """Create configuration from environment variables.

        Reads ``GPSD_HOST``, ``GPSD_PORT``, ``GPSD_CONNECT_TIMEOUT`` and
        ``GPSD_STALE_AFTER``. Explicit keyword arguments override
        environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        GpsdConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        host_env = env.get("GPSD_HOST")
        if host_env:
            config_kwargs["host"] = host_env.strip()

        port_env = env.get("GPSD_PORT")
        if port_env is not None and "port" not in overrides:
            config_kwargs["port"] = int(port_env)

        timeout_env = env.get("GPSD_CONNECT_TIMEOUT")
        if timeout_env is not None and "connect_timeout" not in overrides:
            config_kwargs["connect_timeout"] = float(timeout_env)

        stale_env = env.get("GPSD_STALE_AFTER")
        if stale_env is not None and "stale_after" not in overrides:
            config_kwargs["stale_after"] = float(stale_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
