"""axis-constraints: scale-constraint groups for chart axes."""

from __future__ import annotations

import json

from axis_constraints.config import RenderConfig, SolveConfig
from axis_constraints.constraints import (
    AxisOut,
    ConstraintGroup,
    ConstraintGroupCollection,
    ConstraintResult,
    CyclicLinkError,
    InvalidRatioError,
    LinkOptions,
    compute_link_options,
    handle_constraint_defaults,
    link,
    solve_constraints,
    solve_layout_dict,
)
from axis_constraints.ir import AxisSpec, LayoutSpec, LinkGraph
from axis_constraints.renderers import get_renderer
from axis_constraints.types import AxisType


def solve_json(src: str, config: SolveConfig | None = None) -> ConstraintResult:
    """Parse a JSON layout document and solve its constraint groups.

    Raises:
        ValueError: If the document is not valid JSON or not a valid layout.
    """
    return solve_layout_dict(json.loads(src), config)


def render_json(src: str, fmt: str = "text", config: SolveConfig | None = None) -> str:
    """Solve a JSON layout document and render the groups.

    Args:
        src: JSON text of a Plotly-style layout mapping.
        fmt: Output format, ``text`` or ``json``.
        config: Solve options; defaults to SolveConfig().

    Returns:
        The rendered groups and warnings.

    Raises:
        ValueError: If the input cannot be parsed or the format is unknown.
    """
    renderer = get_renderer(fmt)
    return renderer.render(solve_json(src, config))


__all__ = [
    "AxisOut",
    "AxisSpec",
    "AxisType",
    "ConstraintGroup",
    "ConstraintGroupCollection",
    "ConstraintResult",
    "CyclicLinkError",
    "InvalidRatioError",
    "LayoutSpec",
    "LinkGraph",
    "LinkOptions",
    "RenderConfig",
    "SolveConfig",
    "compute_link_options",
    "handle_constraint_defaults",
    "link",
    "render_json",
    "solve_constraints",
    "solve_json",
    "solve_layout_dict",
]
