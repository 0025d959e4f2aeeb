"""Slider curve data model and curve-file parsing."""

from burai_checker.data.curves import (
    CurveType,
    Point2D,
    SliderCurve,
    parse_curve_file,
    parse_curve_type,
    parse_curves_json,
)

__all__ = [
    "CurveType",
    "Point2D",
    "SliderCurve",
    "parse_curve_file",
    "parse_curve_type",
    "parse_curves_json",
]
