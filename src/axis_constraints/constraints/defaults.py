"""Per-axis constraint defaults: coerce ``scalewith``/``scaleratio`` and link.

Runs once per axis, in layout order, against a shared group collection.
Bad user input never raises here: an unusable ratio falls back to the default
and a rejected target is reported through the warning sink and dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from axis_constraints.constraints.groups import (
    ConstraintGroupCollection,
    InvalidRatioError,
    compute_link_options,
    link,
    validate_ratio,
)
from axis_constraints.ids import id2name
from axis_constraints.ir.axes import AxisSpec
from axis_constraints.types import AxisId, AxisType

logger = logging.getLogger(__name__)

WarnSink = Callable[[str], None]


@dataclass
class AxisOut:
    """Coerced constraint attributes of one axis."""

    id: AxisId
    scalewith: AxisId | None = None
    scaleratio: float | None = None


def coerce_enumerated(value: object, values: Sequence[str]) -> str | None:
    """Return ``value`` if it is one of ``values``, else None."""
    if isinstance(value, str) and value in values:
        return value
    return None


def coerce_ratio(value: object, default: float = 1.0, warn: WarnSink | None = None, name: str = "") -> float:
    """Return a usable scale ratio, falling back to ``default``.

    A missing ratio (None) is silent; an explicit invalid one is reported.
    An invalid ``default`` raises ``InvalidRatioError``.
    """
    default = validate_ratio(default)
    if value is None:
        return default
    try:
        return validate_ratio(value)
    except InvalidRatioError:
        if warn is not None:
            warn(f"ignored {name}.scaleratio: {value!r}; using {default:g}.")
        return default


def _rejection(
    name: str,
    target: object,
    counter_axes: Sequence[AxisId],
    this_group: Mapping[AxisId, float] | None,
    this_type: AxisType,
    axis_types: Mapping[AxisId, AxisType],
) -> tuple[str, str]:
    """Classify a rejected target as ("unknown" | "cycle" | "type", message)."""
    if target not in counter_axes:
        return "unknown", f'ignored {name}.scalewith: "{target}" because it is not a valid counter axis.'
    if this_group is not None and target in this_group:
        return "cycle", (
            f'ignored {name}.scalewith: "{target}" to avoid an infinite loop '
            "and possibly inconsistent scaleratios."
        )
    target_type = axis_types.get(str(target))
    type_label = target_type.value if target_type is not None else "unknown"
    return "type", f'ignored {name}.scalewith: "{target}" because axis types differ ({this_type.value} vs {type_label}).'


def handle_constraint_defaults(
    axis: AxisSpec,
    collection: ConstraintGroupCollection,
    counter_axes: Sequence[AxisId],
    axis_types: Mapping[AxisId, AxisType],
    warn: WarnSink | None = None,
    default_ratio: float = 1.0,
    warn_on_type_mismatch: bool = True,
) -> AxisOut:
    """Coerce one axis's link request and add it to ``collection``.

    Args:
        axis: The axis being processed, with its raw user values.
        collection: Constraint groups built so far in this solve; mutated.
        counter_axes: Axes of the other letter, the candidates to link to.
        axis_types: Type of every axis in the layout.
        warn: Sink for user-facing warnings; defaults to the module logger.
        default_ratio: Ratio used when none (or an invalid one) is given.
        warn_on_type_mismatch: Report targets rejected only for their type.

    Returns:
        The coerced ``scalewith``/``scaleratio`` values for this axis.
    """
    sink = warn if warn is not None else logger.warning
    out = AxisOut(id=axis.id)
    if not axis.scalewith:
        return out

    name = id2name(axis.id)
    options = compute_link_options(collection, axis.id, counter_axes, axis_types)
    scalewith = coerce_enumerated(axis.scalewith, options.eligible_targets)

    if scalewith is None:
        kind, message = _rejection(
            name, axis.scalewith, counter_axes, options.this_group, axis_types[axis.id], axis_types
        )
        if kind != "type" or warn_on_type_mismatch:
            sink(message)
        return out

    scaleratio = coerce_ratio(axis.scaleratio, default_ratio, sink, name)
    try:
        link(collection, axis.id, scalewith, scaleratio)
    except InvalidRatioError:
        # link leaves the collection untouched when a new factor is not finite
        sink(f'ignored {name}.scalewith: "{scalewith}" because the scale factors overflow.')
        return out
    out.scalewith = scalewith
    out.scaleratio = scaleratio
    return out
