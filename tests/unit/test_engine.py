"""Tests for constraints/engine.py: whole-layout solves."""

from __future__ import annotations

import math

import pytest

from axis_constraints.config import SolveConfig
from axis_constraints.constraints.engine import ConstraintResult, solve_constraints, solve_layout_dict
from axis_constraints.ir.axes import LayoutSpec


def _solve(layout: dict, **config) -> ConstraintResult:
    sink: list[str] = []
    result = solve_layout_dict(layout, SolveConfig(**config), warn=sink.append)
    assert sink == result.warnings
    return result


class TestSolve:
    def test_empty_layout(self):
        result = _solve({})
        assert len(result.groups) == 0
        assert result.axes == []
        assert result.warnings == []

    def test_axes_without_links(self):
        result = _solve({"xaxis": {}, "yaxis": {}})
        assert len(result.groups) == 0
        assert [a.id for a in result.axes] == ["x", "y"]

    def test_chained_links(self):
        result = _solve(
            {
                "yaxis2": {"type": "linear", "scalewith": "x"},
                "yaxis": {"type": "linear", "scalewith": "x", "scaleratio": 2},
                "xaxis2": {"type": "linear", "scalewith": "y", "scaleratio": 3},
                "xaxis": {"type": "linear"},
            }
        )
        assert result.groups.as_list() == [{"x2": 6.0, "y": 2.0, "x": 1.0, "y2": 1.0}]
        assert result.warnings == []

    def test_processing_order_is_x_then_y(self):
        result = _solve({"yaxis": {"scalewith": "x"}, "xaxis": {"scalewith": "y"}})
        # x links first; y's request would close a loop
        assert result.axis("x").scalewith == "y"
        assert result.axis("y").scalewith is None
        assert len(result.warnings) == 1
        assert "infinite loop" in result.warnings[0]

    def test_separate_groups_per_type(self):
        result = _solve(
            {
                "xaxis": {"type": "date", "scalewith": "y"},
                "xaxis2": {"type": "linear", "scalewith": "y2", "scaleratio": 0.5},
                "yaxis": {"type": "date"},
                "yaxis2": {"type": "linear"},
            }
        )
        assert result.groups.as_list() == [{"x": 1.0, "y": 1.0}, {"x2": 0.5, "y2": 1.0}]

    def test_link_graph_matches_groups(self):
        result = _solve(
            {
                "xaxis": {"scalewith": "y", "scaleratio": 2},
                "xaxis2": {"scalewith": "y2"},
                "xaxis3": {"scalewith": "y", "scaleratio": 3},
                "yaxis": {},
                "yaxis2": {"scalewith": "x3"},
            }
        )
        assert result.link_graph.is_forest()
        group_members = sorted(sorted(g) for g in result.groups)
        assert result.link_graph.components() == group_members
        assert result.groups.is_partition()

    def test_declared_ratios_hold_after_solve(self):
        result = _solve(
            {
                "xaxis": {"scalewith": "y", "scaleratio": 2},
                "xaxis2": {"scalewith": "y2", "scaleratio": 5},
                "yaxis": {},
                "yaxis2": {"scalewith": "x", "scaleratio": 0.5},
            }
        )
        assert len(result.groups) == 1
        group = result.groups[0]
        for source, target, ratio in result.link_graph.links():
            assert math.isclose(group.ratio(source, target), ratio)

    def test_default_ratio_from_config(self):
        result = _solve({"xaxis": {"scalewith": "y"}, "yaxis": {}}, default_ratio=2.0)
        assert result.groups.as_list() == [{"x": 2.0, "y": 1.0}]

    def test_type_warnings_can_be_disabled(self):
        layout = {"xaxis": {"type": "log", "scalewith": "y"}, "yaxis": {"type": "linear"}}
        assert len(_solve(layout).warnings) == 1
        assert _solve(layout, warn_on_type_mismatch=False).warnings == []

    def test_fresh_collection_per_solve(self):
        layout = LayoutSpec.from_dict({"xaxis": {"scalewith": "y"}, "yaxis": {}})
        first = solve_constraints(layout)
        second = solve_constraints(layout)
        assert first.groups is not second.groups
        assert second.groups.as_list() == [{"x": 1.0, "y": 1.0}]

    def test_warnings_logged_without_sink(self, caplog):
        layout = LayoutSpec.from_dict({"xaxis": {"scalewith": "y7"}, "yaxis": {}})
        with caplog.at_level("WARNING", logger="axis_constraints"):
            result = solve_constraints(layout)
        assert len(result.warnings) == 1
        assert result.warnings[0] in caplog.text

    def test_overflowing_link_is_dropped_with_warning(self):
        result = _solve(
            {
                "xaxis": {"scalewith": "y", "scaleratio": 1e200},
                "xaxis2": {"scalewith": "y2", "scaleratio": 1e200},
                "yaxis": {"scalewith": "x2", "scaleratio": 1e200},
                "yaxis2": {},
            }
        )
        # merging y's group into x2's would need a factor of 1e400
        assert result.groups.as_list() == [{"x": 1e200, "y": 1.0}, {"x2": 1e200, "y2": 1.0}]
        assert result.axis("y").scalewith is None
        assert result.axis("y").scaleratio is None
        assert result.warnings == ['ignored yaxis.scalewith: "x2" because the scale factors overflow.']
        assert result.link_graph.edge_count() == 2


class TestSolveConfig:
    @pytest.mark.parametrize("bad", [0, -1.5, float("nan"), float("inf")])
    def test_invalid_default_ratio(self, bad):
        with pytest.raises(ValueError):
            SolveConfig(default_ratio=bad)

    def test_default_ratio_is_float(self):
        assert SolveConfig(default_ratio=2).default_ratio == 2.0
