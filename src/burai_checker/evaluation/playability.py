"""Batch burai checks over the sliders of a map.

Each curve is scored independently, so a batch can be spread over a process
pool with no coordination beyond collecting results in input order. Only
Bezier sliders are checked by default; perfect-circle, linear and Catmull
paths cannot fold back on themselves the same way.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass

from burai_checker.data.curves import SliderCurve
from burai_checker.evaluation.burai import BuraiResult, Severity, score_curve
from burai_checker.evaluation.metrics import severity_counts, summarize_results

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BuraiIssue:
    """A slider whose burai score crossed a severity threshold."""

    index: int  # position in the full batch
    severity: Severity
    score: float
    time: float | None = None
    label: str | None = None


@dataclass(frozen=True, slots=True)
class BuraiReport:
    """Scores and issues for the checked subset of a batch."""

    checked: list[int]  # batch indices of the curves that were scored
    results: list[BuraiResult]  # aligned with checked
    issues: list[BuraiIssue]


def score_curves(curves: Iterable[SliderCurve], workers: int = 1) -> list[BuraiResult]:
    """Score every curve, optionally across a process pool.

    Args:
        curves: Curves to score.
        workers: Number of worker processes. 1 or less runs in-process.

    Returns:
        One BuraiResult per curve, in input order.
    """
    point_lists = [c.points for c in curves]
    if workers <= 1 or len(point_lists) < 2:
        return [score_curve(points) for points in point_lists]

    with ProcessPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(score_curve, point_lists))


def run_check(
    curves: Iterable[SliderCurve],
    workers: int = 1,
    bezier_only: bool = True,
) -> BuraiReport:
    """Score the checked curves of a batch and collect their issues.

    Curves passed over by `bezier_only` are neither scored nor counted, so
    anything summarised from `results` agrees with `issues`.

    Args:
        curves: Sampled slider curves, typically every slider of one difficulty.
        workers: Number of worker processes for scoring.
        bezier_only: Skip curves not authored as Bezier paths.
    """
    curves = list(curves)
    checked = [(i, c) for i, c in enumerate(curves) if c.is_bezier or not bezier_only]
    results = score_curves((c for _, c in checked), workers=workers)
    issues = _issues_for(checked, results)

    n_unrankable = sum(1 for i in issues if i.severity is Severity.UNRANKABLE)
    logger.info(
        "Burai check: %d/%d curves checked, %d unrankable, %d warning",
        len(checked), len(curves), n_unrankable, len(issues) - n_unrankable,
    )
    return BuraiReport(checked=[i for i, _ in checked], results=results, issues=issues)


def check_burai(
    curves: Iterable[SliderCurve],
    workers: int = 1,
    bezier_only: bool = True,
) -> list[BuraiIssue]:
    """Run the burai check on a batch of slider curves.

    Returns:
        Issues for curves scoring WARNING or UNRANKABLE, in input order.
    """
    return run_check(curves, workers=workers, bezier_only=bezier_only).issues


def _issues_for(
    checked: Sequence[tuple[int, SliderCurve]],
    results: Sequence[BuraiResult],
) -> list[BuraiIssue]:
    issues: list[BuraiIssue] = []
    for (idx, curve), result in zip(checked, results):
        # A zero score never flags, whatever the thresholds say
        if result.score <= 0 or result.severity is Severity.NONE:
            continue
        issues.append(
            BuraiIssue(
                index=idx,
                severity=result.severity,
                score=result.score,
                time=curve.time,
                label=curve.label,
            )
        )
    return issues


def report_to_dict(report: BuraiReport) -> dict:
    """Convert a BuraiReport to a JSON-serialisable dict.

    Summary and severity counts cover the checked curves only, the same
    curves the issue list is drawn from.
    """
    return {
        "checked": len(report.checked),
        "summary": summarize_results(report.results),
        "severities": severity_counts(report.results),
        "issues": [
            {
                "index": i.index,
                "label": i.label,
                "time": i.time,
                "severity": i.severity.value,
                "score": i.score,
            }
            for i in report.issues
        ],
    }
