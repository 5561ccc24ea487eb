"""Layout model: the axes of one layout and their raw link requests.

Values here are what the user supplied. ``scalewith`` and ``scaleratio`` are
kept raw so the defaults pass can coerce them and report what it rejected.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from axis_constraints.ids import AXIS_LETTERS, axis_letter, axis_number, counter_letter, is_axis_name, list_ids, name2id
from axis_constraints.types import AxisId, AxisType


@dataclass
class AxisSpec:
    id: AxisId
    type: AxisType = field(default_factory=AxisType.default)
    scalewith: object = None
    scaleratio: object = None

    @classmethod
    def from_dict(cls, axis_id: AxisId, container: Mapping[str, object]) -> AxisSpec:
        return cls(
            id=axis_id,
            type=AxisType.parse(container.get("type")),
            scalewith=container.get("scalewith"),
            scaleratio=container.get("scaleratio"),
        )


def _sort_key(axis_id: AxisId) -> tuple[int, int]:
    return AXIS_LETTERS.index(axis_letter(axis_id)), axis_number(axis_id)


@dataclass
class LayoutSpec:
    """All axes of one layout, in processing order (x axes, then y axes)."""

    axes: list[AxisSpec] = field(default_factory=list)

    @classmethod
    def from_dict(cls, layout: Mapping[str, object]) -> LayoutSpec:
        """Build a LayoutSpec from a Plotly-style layout mapping.

        Keys that are not axis names are ignored. Every axis name must map to
        a mapping of axis attributes.

        Raises:
            ValueError: If an axis container is not a mapping, an axis type is
                unknown, or two keys name the same axis (``xaxis`` and ``xaxis1``).
        """
        if not isinstance(layout, Mapping):
            raise ValueError(f"Layout must be a mapping, got {type(layout).__name__}")
        seen: dict[AxisId, AxisSpec] = {}
        for key, container in layout.items():
            if not is_axis_name(key):
                continue
            if not isinstance(container, Mapping):
                raise ValueError(f"{key} must be a mapping of axis attributes")
            axis_id = name2id(key)
            if axis_id in seen:
                raise ValueError(f"{key} duplicates axis {axis_id!r}")
            seen[axis_id] = AxisSpec.from_dict(axis_id, container)
        axes = sorted(seen.values(), key=lambda a: _sort_key(a.id))
        return cls(axes=axes)

    def ids(self) -> list[AxisId]:
        return list_ids(self)

    def get(self, axis_id: AxisId) -> AxisSpec | None:
        for axis in self.axes:
            if axis.id == axis_id:
                return axis
        return None

    def axis_types(self) -> dict[AxisId, AxisType]:
        return {axis.id: axis.type for axis in self.axes}

    def counter_axes(self, axis_id: AxisId) -> list[AxisId]:
        """Axes of the other letter, in layout order: y axes for an x axis."""
        return list_ids(self, counter_letter(axis_letter(axis_id)))
