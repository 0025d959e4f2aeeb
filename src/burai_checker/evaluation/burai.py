"""Burai slider detection and scoring.

A slider is "burai" when its path doubles back over itself in a way that is
hard to read. Detection walks all index pairs of the sampled path looking for
places where the curve first moves at least MAX_DISTANCE away from a point and
then comes back within MAX_DISTANCE of it. Each such return is scored from
its distance and from how parallel the two tangents are there:

    distance_score = 100 * sqrt(10) / 10^(2d) / 125
    angle_score    = 1 / ((angle_diff / pi * 20)^3 + 0.01) / 250

Overlaps with near-identical tangents at near-zero distance dominate. Per-event
scores are then combined worst-first with 0.9 decay and classified:

    score > 5       -> UNRANKABLE
    1 < score <= 5  -> WARNING
    score <= 1      -> NONE

Small burai-like structure within MAX_DISTANCE of itself is never counted,
it is usually readable.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from burai_checker.evaluation.geometry import (
    CurveLike,
    as_point_array,
    as_points,
    pairwise_distances,
    tangent_angle,
    wrap_angle,
)

logger = logging.getLogger(__name__)

# Minimum separation (px) before a return counts as an intersection
MAX_DISTANCE = 3.0

# Each lower-ranked event is worth 90% of the one above it
SCORE_DECAY = 0.9

UNRANKABLE_THRESHOLD = 5.0
WARNING_THRESHOLD = 1.0


class Severity(str, Enum):
    NONE = "none"
    WARNING = "warning"
    UNRANKABLE = "unrankable"


@dataclass(frozen=True, slots=True)
class BuraiResult:
    """Aggregated burai score for one curve."""

    score: float
    severity: Severity
    event_count: int


def distance_score(distance: float) -> float:
    return 100 * math.sqrt(10) / math.pow(10, 2 * distance) / 125


def angle_score(angle_diff: float) -> float:
    return 1 / (math.pow(angle_diff / math.pi * 20, 3) + 0.01) / 250


def scan_intersections(curve: CurveLike) -> list[float]:
    """Find every close return of a curve onto itself and score it.

    For each point i (from the second point on), the margin latch is armed
    the first time a later point j is at least MAX_DISTANCE away. Once armed
    it stays armed for the rest of that i, and every later j closer than
    MAX_DISTANCE produces one event. The last point is never a j since the
    segment j -> j+1 gives the tangent there.

    Args:
        curve: Ordered sample points, as Point2D, (x, y) pairs or an [N, 2] array.

    Returns:
        Raw per-event scores in scan order, each >= 0. Empty for curves with
        fewer than 2 points.
    """
    points = as_points(curve)
    n = len(points)
    if n < 2:
        return []

    dist = pairwise_distances(as_point_array(points))
    scores: list[float] = []

    for i in range(1, n):
        passed_margin = False

        for j in range(i + 1, n - 1):
            distance = float(dist[i, j])

            if not passed_margin and distance >= MAX_DISTANCE:
                passed_margin = True
            elif passed_margin and distance < MAX_DISTANCE:
                angle_a = tangent_angle(points[i - 1], points[i])
                angle_b = tangent_angle(points[j], points[j + 1])
                # Tangents, so the difference folds at 90 degrees
                angle_diff = abs(wrap_angle(angle_a - angle_b, 0.5))

                scores.append(angle_score(angle_diff) * distance_score(distance))

    return scores


def aggregate_scores(scores: Iterable[float]) -> float:
    """Combine event scores worst-first, each weighted 0.9x the previous."""
    ordered = sorted(scores, reverse=True)
    return sum((s * SCORE_DECAY**k for k, s in enumerate(ordered)), 0.0)


def classify(total_score: float) -> Severity:
    """Map an aggregated score to a severity.

    Note that low scores may still hide slight but readable overlaps, those
    are deliberately let through.
    """
    if total_score > UNRANKABLE_THRESHOLD:
        return Severity.UNRANKABLE
    if total_score > WARNING_THRESHOLD:
        return Severity.WARNING
    return Severity.NONE


def score_curve(curve: CurveLike) -> BuraiResult:
    """Run scan, aggregation and classification on one curve."""
    events = scan_intersections(curve)
    total = aggregate_scores(events)
    severity = classify(total)
    logger.debug("Burai scan: %d events, score=%.4f (%s)", len(events), total, severity.value)
    return BuraiResult(score=total, severity=severity, event_count=len(events))
