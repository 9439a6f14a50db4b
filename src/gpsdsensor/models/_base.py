"""Base model and enum for gpsd reports.

Every gpsd report model inherits from :class:`GpsdBaseModel` which
provides:

* A ``model_validator(mode="before")`` that drops ``null`` and NaN
  values so the field default is used.
* A ``raw`` dict that captures the original JSON object.

Report enums inherit from :class:`GpsdEnum` whose ``_missing_`` hook
returns the ``UNKNOWN`` member for any value without a mapped member.
"""

from __future__ import annotations

import enum
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GpsdEnum(enum.IntEnum):
    """Base for gpsd report enums.

    Every subclass **must** define an ``UNKNOWN`` member.
    """

    @classmethod
    def _missing_(cls, value: object) -> GpsdEnum:
        if hasattr(cls, "UNKNOWN"):
            unknown: GpsdEnum = cls.UNKNOWN  # type: ignore[attr-defined]
            return unknown
        return next(iter(cls))


class GpsdBaseModel(BaseModel):
    """Base for gpsd report models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict)
    """Original report object as received from gpsd."""

    @model_validator(mode="before")
    @classmethod
    def _clean_gpsd_values(cls, values: Any) -> Any:
        """Drop null/NaN values and stash the raw payload."""
        if not isinstance(values, dict):
            return values

        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, float) and math.isnan(value):
                continue
            cleaned[key] = value

        # Keep an explicitly passed raw= (kwargs construction).
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned
