"""Shared type definitions for axis-constraints.

Enums and small aliases used across the layout model, the constraint core,
and renderers.
"""

from __future__ import annotations

from enum import Enum

AxisId = str  # "x", "x2", "y3"
AxisName = str  # "xaxis", "xaxis2", "yaxis3"


class AxisType(Enum):
    AUTO = "-"  # not yet determined
    LINEAR = "linear"
    LOG = "log"
    DATE = "date"
    CATEGORY = "category"

    @classmethod
    def default(cls) -> AxisType:
        return cls.AUTO

    @classmethod
    def parse(cls, value: object) -> AxisType:
        """Map a user-supplied type string onto an AxisType.

        None means the type was never given and maps to AUTO.
        """
        if value is None:
            return cls.default()
        if isinstance(value, AxisType):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise ValueError(f"Unknown axis type {value!r}; use linear, log, date, category, or -")
