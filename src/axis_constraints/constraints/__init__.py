"""Constraint group manager, per-axis defaults pass and solve entry points."""

from __future__ import annotations

from axis_constraints.constraints.defaults import AxisOut, coerce_enumerated, coerce_ratio, handle_constraint_defaults
from axis_constraints.constraints.engine import ConstraintResult, solve_constraints, solve_layout_dict
from axis_constraints.constraints.groups import (
    ConstraintGroup,
    ConstraintGroupCollection,
    CyclicLinkError,
    InvalidRatioError,
    LinkOptions,
    compute_link_options,
    link,
    validate_ratio,
)

__all__ = [
    "AxisOut",
    "ConstraintGroup",
    "ConstraintGroupCollection",
    "ConstraintResult",
    "CyclicLinkError",
    "InvalidRatioError",
    "LinkOptions",
    "coerce_enumerated",
    "coerce_ratio",
    "compute_link_options",
    "handle_constraint_defaults",
    "link",
    "solve_constraints",
    "solve_layout_dict",
    "validate_ratio",
]
