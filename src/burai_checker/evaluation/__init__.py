"""Burai detection, scoring and batch checks for slider curves."""

from burai_checker.evaluation.burai import (
    MAX_DISTANCE,
    BuraiResult,
    Severity,
    aggregate_scores,
    classify,
    scan_intersections,
    score_curve,
)
from burai_checker.evaluation.geometry import (
    euclidean_distance,
    pairwise_distances,
    tangent_angle,
    wrap_angle,
)
from burai_checker.evaluation.metrics import severity_counts, summarize_results
from burai_checker.evaluation.playability import (
    BuraiIssue,
    BuraiReport,
    check_burai,
    report_to_dict,
    run_check,
    score_curves,
)

__all__ = [
    # Scoring
    "MAX_DISTANCE",
    "BuraiResult",
    "Severity",
    "aggregate_scores",
    "classify",
    "scan_intersections",
    "score_curve",
    # Geometry
    "euclidean_distance",
    "pairwise_distances",
    "tangent_angle",
    "wrap_angle",
    # Metrics
    "severity_counts",
    "summarize_results",
    # Batch
    "BuraiIssue",
    "BuraiReport",
    "check_burai",
    "report_to_dict",
    "run_check",
    "score_curves",
]
