"""Tests for the slider curve data model and JSON curve parser."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from burai_checker.data.curves import (
    CurveType,
    Point2D,
    SliderCurve,
    parse_curve_file,
    parse_curve_type,
    parse_curves_json,
)

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

SAMPLE_CURVES = {
    "curves": [
        {
            "label": "slider-1",
            "time": 1500,
            "type": "B",
            "points": [[0, 0], [10, 0], [20, 5]],
        },
        {
            "type": "perfect",
            "points": [{"x": 1.5, "y": 2.5}, {"x": 3, "y": 4}],
        },
        [[5, 5], [6, 6]],
    ]
}


class TestPoint2D:
    def test_immutable(self):
        p = Point2D(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore[misc]

    def test_value_equality(self):
        assert Point2D(1.0, 2.0) == Point2D(1.0, 2.0)


class TestSliderCurve:
    def test_defaults(self):
        curve = SliderCurve()
        assert curve.points == []
        assert curve.is_bezier
        assert curve.time is None

    def test_is_finite(self):
        assert SliderCurve(points=[Point2D(0, 0), Point2D(1, 1)]).is_finite()
        assert not SliderCurve(points=[Point2D(0, float("nan"))]).is_finite()
        assert not SliderCurve(points=[Point2D(float("inf"), 0)]).is_finite()


class TestParseCurveType:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("B", CurveType.BEZIER),
            ("C", CurveType.CATMULL),
            ("L", CurveType.LINEAR),
            ("P", CurveType.PERFECT),
            ("bezier", CurveType.BEZIER),
            ("Linear", CurveType.LINEAR),
            (None, CurveType.BEZIER),
        ],
    )
    def test_known(self, value, expected):
        assert parse_curve_type(value) is expected

    def test_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown curve type"):
            parse_curve_type("spline")


class TestParseCurvesJson:
    def test_mixed_layouts(self):
        curves = parse_curves_json(SAMPLE_CURVES)
        assert len(curves) == 3

        first = curves[0]
        assert first.label == "slider-1"
        assert first.time == 1500.0
        assert first.curve_type is CurveType.BEZIER
        assert first.points == [Point2D(0, 0), Point2D(10, 0), Point2D(20, 5)]

        second = curves[1]
        assert second.curve_type is CurveType.PERFECT
        assert second.points == [Point2D(1.5, 2.5), Point2D(3, 4)]
        assert second.label is None

        third = curves[2]
        assert third.is_bezier
        assert third.points == [Point2D(5, 5), Point2D(6, 6)]

    def test_bare_list(self):
        curves = parse_curves_json([[[0, 0], [1, 1]]])
        assert len(curves) == 1

    def test_empty(self):
        assert parse_curves_json({"curves": []}) == []

    def test_missing_curves_key(self):
        with pytest.raises(ValueError, match="no 'curves' key"):
            parse_curves_json({"sliders": []})

    def test_not_a_list(self):
        with pytest.raises(ValueError):
            parse_curves_json({"curves": "nope"})

    def test_malformed_point(self):
        with pytest.raises(ValueError, match="malformed point"):
            parse_curves_json([[[0, 0, 0]]])

    def test_null_coordinate(self):
        with pytest.raises(ValueError, match="malformed point"):
            parse_curves_json([[[0, 0], [None, 1]]])

    def test_non_numeric_coordinate(self):
        with pytest.raises(ValueError, match="malformed point"):
            parse_curves_json({"curves": [{"points": [[0, 0], ["a", 1]]}]})

    def test_missing_coordinate_key(self):
        with pytest.raises(ValueError, match="malformed point"):
            parse_curves_json({"curves": [{"points": [{"x": 1.0}]}]})

    def test_non_string_type(self):
        with pytest.raises(ValueError, match="must be a string"):
            parse_curves_json([{"points": [[0, 0]], "type": ["B"]}])

    def test_malformed_time(self):
        with pytest.raises(ValueError, match="malformed time"):
            parse_curves_json([{"points": [[0, 0]], "time": [1]}])

    def test_non_finite_curve_skipped(self):
        data = {
            "curves": [
                {"points": [[0, 0], [float("nan"), 1]]},
                {"points": [[0, 0], [1, 1]]},
            ]
        }
        curves = parse_curves_json(data)
        assert len(curves) == 1
        assert curves[0].points[1] == Point2D(1, 1)


class TestParseCurveFile:
    def test_round_trip(self, tmp_path: Path):
        path = tmp_path / "curves.json"
        path.write_text(json.dumps(SAMPLE_CURVES), encoding="utf-8")
        curves = parse_curve_file(path)
        assert len(curves) == 3
        assert curves[0].label == "slider-1"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            parse_curve_file(tmp_path / "missing.json")

    def test_malformed_file_raises_value_error(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([[[0, 0], [None, 1]]]), encoding="utf-8")
        with pytest.raises(ValueError):
            parse_curve_file(path)
