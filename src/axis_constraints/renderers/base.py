"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from axis_constraints.constraints.engine import ConstraintResult


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, result: ConstraintResult) -> str:
        """Render a solved layout's constraint groups to an output string."""
        ...
