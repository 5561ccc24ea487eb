"""Axis constraint groups: which axes scale together, and at what ratio.

A constraint group maps axis ids to relative scale factors. Only ratios
between factors of the same group mean anything: ``{x: 1, y: 2}`` says one
data unit of ``y`` spans twice as many pixels as one data unit of ``x``.
The collection keeps the groups disjoint; every axis is in at most one group.

Groups grow one link at a time:
  1. An ungrouped axis starts a new group ``{axis: 1}``.
  2. If the target already belongs to another group, the requesting axis's
     whole group is merged into it, re-scaled against the target's factor.
  3. Otherwise the target joins the requesting group as its new reference
     (factor 1) and the existing members are re-scaled by the ratio.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field

from axis_constraints.types import AxisId, AxisType

logger = logging.getLogger(__name__)


class InvalidRatioError(ValueError):
    """A scale ratio that is not a finite, strictly positive number."""


class CyclicLinkError(ValueError):
    """A link whose target already shares a group with the requesting axis."""


def validate_ratio(ratio: object) -> float:
    """Return ``ratio`` as a float, or raise InvalidRatioError."""
    if isinstance(ratio, bool) or not isinstance(ratio, numbers.Real):
        raise InvalidRatioError(f"scale ratio must be a number, got {ratio!r}")
    value = float(ratio)
    if not math.isfinite(value) or value <= 0:
        raise InvalidRatioError(f"scale ratio must be finite and positive, got {ratio!r}")
    return value


# ─── Constraint Group ────────────────────────────────────────────────────────


class ConstraintGroup(MutableMapping[AxisId, float]):
    """Ordered mapping of axis id to a strictly positive relative scale factor."""

    def __init__(self, factors: Mapping[AxisId, float] | Iterable[tuple[AxisId, float]] = ()) -> None:
        self._factors: dict[AxisId, float] = {}
        items = factors.items() if isinstance(factors, Mapping) else factors
        for axis_id, factor in items:
            self[axis_id] = factor

    @classmethod
    def singleton(cls, axis_id: AxisId) -> ConstraintGroup:
        return cls({axis_id: 1.0})

    def __getitem__(self, axis_id: AxisId) -> float:
        return self._factors[axis_id]

    def __setitem__(self, axis_id: AxisId, factor: float) -> None:
        self.update_all({axis_id: factor})

    def __delitem__(self, axis_id: AxisId) -> None:
        del self._factors[axis_id]

    def __iter__(self) -> Iterator[AxisId]:
        return iter(self._factors)

    def __len__(self) -> int:
        return len(self._factors)

    def __repr__(self) -> str:
        return f"ConstraintGroup({self._factors!r})"

    def scale(self, ratio: float) -> None:
        """Multiply every factor by ``ratio``; ratios between members are unchanged."""
        if ratio == 1:
            return
        self.update_all({axis_id: factor * ratio for axis_id, factor in self._factors.items()})

    def update_all(self, factors: Mapping[AxisId, float]) -> None:
        """Set several factors at once; nothing changes if any of them is invalid."""
        checked: dict[AxisId, float] = {}
        for axis_id, factor in factors.items():
            try:
                checked[axis_id] = validate_ratio(factor)
            except InvalidRatioError as exc:
                raise InvalidRatioError(f"factor for {axis_id!r}: {exc}") from exc
        self._factors.update(checked)

    def ratio(self, a: AxisId, b: AxisId) -> float:
        """Visual scale of ``a`` relative to ``b``."""
        return self._factors[a] / self._factors[b]

    def as_dict(self) -> dict[AxisId, float]:
        return dict(self._factors)


# ─── Group Collection ────────────────────────────────────────────────────────


class ConstraintGroupCollection:
    """The disjoint constraint groups of one layout solve."""

    def __init__(self, groups: Iterable[ConstraintGroup] = ()) -> None:
        self._groups: list[ConstraintGroup] = list(groups)

    def __iter__(self) -> Iterator[ConstraintGroup]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __getitem__(self, index: int) -> ConstraintGroup:
        return self._groups[index]

    def __repr__(self) -> str:
        return f"ConstraintGroupCollection({self._groups!r})"

    def add(self, group: ConstraintGroup) -> None:
        self._groups.append(group)

    def index_of(self, group: ConstraintGroup) -> int:
        # identity, not equality: two groups may compare equal while distinct
        for i, g in enumerate(self._groups):
            if g is group:
                return i
        raise ValueError(f"{group!r} is not in the collection")

    def remove(self, group: ConstraintGroup) -> None:
        del self._groups[self.index_of(group)]

    def find(self, axis_id: AxisId, exclude: ConstraintGroup | None = None) -> ConstraintGroup | None:
        """Return the first group containing ``axis_id``, skipping ``exclude``."""
        for group in self._groups:
            if group is not exclude and axis_id in group:
                return group
        return None

    def members(self) -> list[AxisId]:
        return [axis_id for group in self._groups for axis_id in group]

    def is_partition(self) -> bool:
        all_members = self.members()
        return len(all_members) == len(set(all_members))

    def as_list(self) -> list[dict[AxisId, float]]:
        return [group.as_dict() for group in self._groups]

    def link_options(
        self,
        axis_id: AxisId,
        candidate_axes: Iterable[AxisId],
        axis_types: Mapping[AxisId, AxisType],
    ) -> LinkOptions:
        return compute_link_options(self, axis_id, candidate_axes, axis_types)

    def link(self, axis_id: AxisId, target_axis_id: AxisId, ratio: float) -> None:
        link(self, axis_id, target_axis_id, ratio)


# ─── Operations ──────────────────────────────────────────────────────────────


@dataclass
class LinkOptions:
    eligible_targets: list[AxisId] = field(default_factory=list)
    this_group: ConstraintGroup | None = None


def compute_link_options(
    collection: ConstraintGroupCollection,
    axis_id: AxisId,
    candidate_axes: Iterable[AxisId],
    axis_types: Mapping[AxisId, AxisType],
) -> LinkOptions:
    """Which candidates ``axis_id`` may scale with, and the group it is already in.

    A candidate is eligible when it has the same axis type and is not already
    a member of ``axis_id``'s group; linking to a group member would close a
    loop. Candidate order is preserved. Nothing is mutated.
    """
    this_type = axis_types[axis_id]
    this_group = collection.find(axis_id)
    eligible = [
        candidate
        for candidate in candidate_axes
        if axis_types.get(candidate) == this_type and (this_group is None or candidate not in this_group)
    ]
    return LinkOptions(eligible_targets=eligible, this_group=this_group)


def link(collection: ConstraintGroupCollection, axis_id: AxisId, target_axis_id: AxisId, ratio: float) -> None:
    """Constrain ``axis_id`` to scale with ``target_axis_id`` at ``ratio``.

    ``ratio`` is the scale of ``axis_id`` relative to the target. The caller
    is expected to have picked the target from ``compute_link_options``.

    Raises:
        InvalidRatioError: If ratio is not a finite positive number.
        CyclicLinkError: If the target is the axis itself or already in its group.
    """
    ratio = validate_ratio(ratio)
    this_group = collection.find(axis_id)
    if target_axis_id == axis_id or (this_group is not None and target_axis_id in this_group):
        raise CyclicLinkError(f"{axis_id!r} already scales with {target_axis_id!r}")

    created = this_group is None
    if this_group is None:
        this_group = ConstraintGroup.singleton(axis_id)

    # new factors are checked before any group is touched, so an overflowing
    # product leaves the collection as it was
    other_group = collection.find(target_axis_id, exclude=this_group)
    if other_group is not None:
        base_scale = other_group[target_axis_id]
        other_group.update_all({member: base_scale * ratio * factor for member, factor in this_group.items()})
        if not created:
            collection.remove(this_group)
        logger.debug(
            "merged %s into group of %r (base scale %g, ratio %g)", list(this_group), target_axis_id, base_scale, ratio
        )
        return

    this_group.scale(ratio)
    this_group[target_axis_id] = 1.0
    if created:
        collection.add(this_group)
    logger.debug("%r joined group of %r as reference (ratio %g)", target_axis_id, axis_id, ratio)
