"""Per-read options."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

#: Extra-map key data-capture loops set on their reads.
FROM_DATA_MANAGEMENT_KEY = "fromDataManagement"


class ReadOptions(BaseModel):
    """Options accepted by every sensor read.

    Parameters
    ----------
    from_automated_capture : bool
        The read comes from an automated data-capture loop. Stale data then
        raises :class:`~gpsdsensor.exceptions.NoCaptureToStoreError` instead
        of :class:`~gpsdsensor.exceptions.StaleDataError`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    from_automated_capture: bool = False

    @classmethod
    def from_extra(cls, extra: Mapping[str, Any] | None) -> ReadOptions:
        """Build options from a loosely-typed extra map.

        Only an exact boolean ``True`` under ``fromDataManagement`` marks the
        read as coming from data capture.
        """
        if not extra:
            return cls()
        return cls(from_automated_capture=extra.get(FROM_DATA_MANAGEMENT_KEY) is True)
