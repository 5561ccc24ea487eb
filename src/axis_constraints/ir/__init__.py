"""Intermediate representation: layout model and link graph."""

from axis_constraints.ir.axes import AxisSpec, LayoutSpec
from axis_constraints.ir.graph import LinkGraph

__all__ = [
    "AxisSpec",
    "LayoutSpec",
    "LinkGraph",
]
