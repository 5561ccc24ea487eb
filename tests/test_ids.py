"""Tests for ids.py and types.py: axis id/name conversion and axis types."""

import pytest

from axis_constraints.ids import (
    axis_letter,
    axis_number,
    counter_letter,
    id2name,
    is_axis_name,
    list_ids,
    name2id,
)
from axis_constraints.ir.axes import LayoutSpec
from axis_constraints.types import AxisType


class TestIdNameConversion:
    @pytest.mark.parametrize(
        "axis_id,name",
        [("x", "xaxis"), ("y", "yaxis"), ("x2", "xaxis2"), ("y10", "yaxis10")],
    )
    def test_round_trip(self, axis_id, name):
        assert id2name(axis_id) == name
        assert name2id(name) == axis_id

    def test_one_suffix_is_first_axis(self):
        assert id2name("x1") == "xaxis"
        assert name2id("yaxis1") == "y"

    @pytest.mark.parametrize("bad", ["z", "x0", "x02", "xaxis", "", None, 3])
    def test_invalid_id(self, bad):
        with pytest.raises(ValueError):
            id2name(bad)

    @pytest.mark.parametrize("bad", ["x", "zaxis", "xaxis0", "x_axis", "title"])
    def test_invalid_name(self, bad):
        with pytest.raises(ValueError):
            name2id(bad)


class TestPredicates:
    def test_is_axis_name(self):
        assert is_axis_name("xaxis")
        assert is_axis_name("yaxis12")
        assert not is_axis_name("y")
        assert not is_axis_name("legend")


class TestLetters:
    def test_axis_letter_and_number(self):
        assert axis_letter("y4") == "y"
        assert axis_number("y4") == 4
        assert axis_number("x") == 1

    def test_counter_letter(self):
        assert counter_letter("x") == "y"
        assert counter_letter("y") == "x"
        with pytest.raises(ValueError):
            counter_letter("z")

    def test_list_ids(self):
        layout = LayoutSpec.from_dict({"yaxis": {}, "xaxis2": {}, "xaxis": {}})
        assert list_ids(layout) == ["x", "x2", "y"]
        assert list_ids(layout, "x") == ["x", "x2"]
        assert list_ids(layout, "y") == ["y"]


class TestAxisType:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("linear", AxisType.LINEAR),
            ("LOG", AxisType.LOG),
            (" date ", AxisType.DATE),
            ("category", AxisType.CATEGORY),
            ("-", AxisType.AUTO),
            (None, AxisType.AUTO),
            (AxisType.LOG, AxisType.LOG),
        ],
    )
    def test_parse(self, raw, expected):
        assert AxisType.parse(raw) == expected

    @pytest.mark.parametrize("bad", ["polar", 1, ""])
    def test_parse_unknown(self, bad):
        with pytest.raises(ValueError):
            AxisType.parse(bad)
