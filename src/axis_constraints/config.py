"""Centralized configuration for axis-constraints."""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass
class SolveConfig:
    """Configuration for one constraint solve.

    ``default_ratio`` is checked at construction, so the defaults pass can
    hand it to ``link`` without checking it again.
    """

    default_ratio: float = 1.0
    warn_on_type_mismatch: bool = True
    log_level: int = logging.WARNING

    def __post_init__(self) -> None:
        # constraints.engine imports this module
        from axis_constraints.constraints.groups import validate_ratio

        self.default_ratio = validate_ratio(self.default_ratio)


@dataclass
class RenderConfig:
    """Configuration for the output stage."""

    format: str = "text"
