"""Slider curve data model and JSON curve-file parser.

A curve file holds already-rasterized slider paths: each curve is an ordered
list of pixel-space sample points plus whatever the host uses to identify it
(hit time, label) and the curve type the slider was authored with.

Accepted layouts:
    {"curves": [<curve>, ...]}
    [<curve>, ...]

where each <curve> is either a bare list of [x, y] pairs or an object:
    {"points": [[x, y], ...], "type": "B", "time": 1234, "label": "..."}
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Point2D:
    """A sample position in osu! pixel space."""

    x: float
    y: float


class CurveType(str, Enum):
    """How the slider path was authored (osu! single-letter codes)."""

    BEZIER = "bezier"  # B
    CATMULL = "catmull"  # C
    LINEAR = "linear"  # L
    PERFECT = "perfect"  # P (circular arc)


_CURVE_TYPE_CODES = {
    "B": CurveType.BEZIER,
    "C": CurveType.CATMULL,
    "L": CurveType.LINEAR,
    "P": CurveType.PERFECT,
}


@dataclass(slots=True)
class SliderCurve:
    """One sampled slider path."""

    points: list[Point2D] = field(default_factory=list)
    curve_type: CurveType = CurveType.BEZIER
    time: float | None = None  # ms, passed through untouched
    label: str | None = None

    @property
    def is_bezier(self) -> bool:
        return self.curve_type is CurveType.BEZIER

    def is_finite(self) -> bool:
        """True if every coordinate is a finite float."""
        return all(math.isfinite(p.x) and math.isfinite(p.y) for p in self.points)


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def parse_curve_file(path: Path | str) -> list[SliderCurve]:
    """Parse a JSON curve file.

    Args:
        path: Path to a .json curve file.

    Returns:
        Parsed curves, minus any with non-finite coordinates.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a recognised curve layout.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Curve file not found: {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    return parse_curves_json(data)


def parse_curves_json(data: Any) -> list[SliderCurve]:
    """Parse curves from an already-loaded JSON document.

    Curves with NaN or infinite coordinates are dropped with a warning, the
    scanner is not meant to see them.
    """
    if isinstance(data, dict):
        if "curves" not in data:
            raise ValueError("Curve document has no 'curves' key")
        entries = data["curves"]
    else:
        entries = data

    if not isinstance(entries, list):
        raise ValueError(f"Expected a list of curves, got {type(entries).__name__}")

    curves: list[SliderCurve] = []
    for idx, entry in enumerate(entries):
        curve = _parse_curve(entry, idx)
        if not curve.is_finite():
            logger.warning("Curve %d has non-finite coordinates — skipping", idx)
            continue
        curves.append(curve)

    logger.debug("Parsed %d/%d curves", len(curves), len(entries))
    return curves


def parse_curve_type(value: Any) -> CurveType:
    """Resolve a curve type from its long name or single-letter code."""
    if value is None:
        return CurveType.BEZIER
    if not isinstance(value, str):
        raise ValueError(f"Curve type must be a string, got {type(value).__name__}")
    if value in _CURVE_TYPE_CODES:
        return _CURVE_TYPE_CODES[value]
    try:
        return CurveType(value.lower())
    except ValueError:
        raise ValueError(f"Unknown curve type: {value!r}") from None


# ---------------------------------------------------------------------------
# Internal parsers
# ---------------------------------------------------------------------------


def _parse_curve(entry: Any, idx: int) -> SliderCurve:
    if isinstance(entry, list):
        return SliderCurve(points=_parse_points(entry, idx))

    if not isinstance(entry, dict):
        raise ValueError(f"Curve {idx}: expected list or object, got {type(entry).__name__}")

    time = entry.get("time")
    label = entry.get("label")
    try:
        time = float(time) if time is not None else None
    except (TypeError, ValueError):
        raise ValueError(f"Curve {idx}: malformed time {time!r}") from None

    return SliderCurve(
        points=_parse_points(entry.get("points", []), idx),
        curve_type=parse_curve_type(entry.get("type")),
        time=time,
        label=str(label) if label is not None else None,
    )


def _parse_points(raw: Any, idx: int) -> list[Point2D]:
    if not isinstance(raw, list):
        raise ValueError(f"Curve {idx}: 'points' must be a list")

    points: list[Point2D] = []
    for p in raw:
        if isinstance(p, dict) and "x" in p and "y" in p:
            x, y = p["x"], p["y"]
        elif isinstance(p, (list, tuple)) and len(p) == 2:
            x, y = p
        else:
            raise ValueError(f"Curve {idx}: malformed point {p!r}")
        try:
            points.append(Point2D(x=float(x), y=float(y)))
        except (TypeError, ValueError):
            raise ValueError(f"Curve {idx}: malformed point {p!r}") from None
    return points
