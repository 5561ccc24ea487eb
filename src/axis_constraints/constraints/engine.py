"""Constraint solve: run the defaults pass over every axis of one layout."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from axis_constraints.config import SolveConfig
from axis_constraints.constraints.defaults import AxisOut, WarnSink, handle_constraint_defaults
from axis_constraints.constraints.groups import ConstraintGroupCollection
from axis_constraints.ir.axes import LayoutSpec
from axis_constraints.ir.graph import LinkGraph
from axis_constraints.types import AxisId

logger = logging.getLogger(__name__)


@dataclass
class ConstraintResult:
    """Everything one solve produced, for renderers and range computation."""

    groups: ConstraintGroupCollection = field(default_factory=ConstraintGroupCollection)
    axes: list[AxisOut] = field(default_factory=list)
    link_graph: LinkGraph = field(default_factory=LinkGraph)
    warnings: list[str] = field(default_factory=list)

    def axis(self, axis_id: AxisId) -> AxisOut | None:
        for out in self.axes:
            if out.id == axis_id:
                return out
        return None


def solve_constraints(
    layout: LayoutSpec,
    config: SolveConfig | None = None,
    warn: WarnSink | None = None,
) -> ConstraintResult:
    """Build the constraint groups of ``layout`` from scratch.

    Axes are processed in layout order; each accepted link may change the
    options of the axes after it. Warnings are collected on the result and
    also passed to ``warn`` (or logged when no sink is given).
    """
    config = config or SolveConfig()
    result = ConstraintResult()
    axis_types = layout.axis_types()

    def _collect(message: str) -> None:
        result.warnings.append(message)
        if warn is not None:
            warn(message)
        else:
            logger.warning(message)

    for axis in layout.axes:
        out = handle_constraint_defaults(
            axis,
            result.groups,
            layout.counter_axes(axis.id),
            axis_types,
            warn=_collect,
            default_ratio=config.default_ratio,
            warn_on_type_mismatch=config.warn_on_type_mismatch,
        )
        result.axes.append(out)
        if out.scalewith is not None and out.scaleratio is not None:
            result.link_graph.add_link(out.id, out.scalewith, out.scaleratio)

    logger.debug("solved %d axes into %d constraint groups", len(layout.axes), len(result.groups))
    return result


def solve_layout_dict(
    layout: Mapping[str, object],
    config: SolveConfig | None = None,
    warn: WarnSink | None = None,
) -> ConstraintResult:
    """Convenience wrapper: parse a Plotly-style layout mapping and solve it."""
    return solve_constraints(LayoutSpec.from_dict(layout), config, warn)
