"""JSON renderer: groups and warnings as a JSON document."""

from __future__ import annotations

import json

from axis_constraints.constraints.engine import ConstraintResult


class JsonRenderer:
    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def render(self, result: ConstraintResult) -> str:
        doc = {
            "groups": result.groups.as_list(),
            "warnings": list(result.warnings),
        }
        return json.dumps(doc, indent=self.indent) + "\n"
