"""Plain text renderer: one line per constraint group, then warnings."""

from __future__ import annotations

from axis_constraints.constraints.engine import ConstraintResult
from axis_constraints.constraints.groups import ConstraintGroup


def format_factor(factor: float) -> str:
    return f"{factor:g}"


def format_group(group: ConstraintGroup) -> str:
    return " ".join(f"{axis_id}={format_factor(factor)}" for axis_id, factor in group.items())


class TextRenderer:
    """Render groups as ``group N: x=1 y=2`` lines."""

    def render(self, result: ConstraintResult) -> str:
        lines: list[str] = []
        if len(result.groups) == 0:
            lines.append("no constraint groups")
        for i, group in enumerate(result.groups, start=1):
            lines.append(f"group {i}: {format_group(group)}")
        for message in result.warnings:
            lines.append(f"warning: {message}")
        return "\n".join(lines) + "\n"
