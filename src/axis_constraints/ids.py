"""Axis id helpers.

Axes are addressed two ways: by id (``x``, ``x2``, ``y3``) inside constraint
groups and link requests, and by name (``xaxis``, ``xaxis2``, ``yaxis3``) as
keys of a layout mapping.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from axis_constraints.types import AxisId, AxisName

if TYPE_CHECKING:
    from axis_constraints.ir.axes import LayoutSpec

AXIS_LETTERS: tuple[str, ...] = ("x", "y")

_ID_RE = re.compile(r"^([xy])([1-9][0-9]*)?$")
_NAME_RE = re.compile(r"^([xy])axis([1-9][0-9]*)?$")


def is_axis_name(value: object) -> bool:
    return isinstance(value, str) and _NAME_RE.match(value) is not None


def _suffix(num: str | None) -> str:
    # "x1" and "xaxis1" are the same axis as "x" and "xaxis"
    if num is None or num == "1":
        return ""
    return num


def id2name(axis_id: AxisId) -> AxisName:
    """``x2`` -> ``xaxis2``."""
    m = _ID_RE.match(axis_id) if isinstance(axis_id, str) else None
    if m is None:
        raise ValueError(f"Invalid axis id {axis_id!r}")
    return f"{m.group(1)}axis{_suffix(m.group(2))}"


def name2id(name: AxisName) -> AxisId:
    """``yaxis3`` -> ``y3``."""
    m = _NAME_RE.match(name) if isinstance(name, str) else None
    if m is None:
        raise ValueError(f"Invalid axis name {name!r}")
    return f"{m.group(1)}{_suffix(m.group(2))}"


def axis_letter(axis_id: AxisId) -> str:
    m = _ID_RE.match(axis_id) if isinstance(axis_id, str) else None
    if m is None:
        raise ValueError(f"Invalid axis id {axis_id!r}")
    return m.group(1)


def axis_number(axis_id: AxisId) -> int:
    m = _ID_RE.match(axis_id) if isinstance(axis_id, str) else None
    if m is None:
        raise ValueError(f"Invalid axis id {axis_id!r}")
    return int(m.group(2) or 1)


def counter_letter(letter: str) -> str:
    if letter == "x":
        return "y"
    if letter == "y":
        return "x"
    raise ValueError(f"Invalid axis letter {letter!r}")


def list_ids(layout: LayoutSpec, letter: str | None = None) -> list[AxisId]:
    """List axis ids of a layout in processing order, optionally for one letter only."""
    return [axis.id for axis in layout.axes if letter is None or axis_letter(axis.id) == letter]
