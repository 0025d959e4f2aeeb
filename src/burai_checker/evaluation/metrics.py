"""Summary metrics over a batch of burai results.

Metrics:
    - Severity counts: how many curves landed in each severity.
    - Score statistics: max and mean aggregated score, total event count.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

import numpy as np

from burai_checker.evaluation.burai import BuraiResult, Severity

logger = logging.getLogger(__name__)


def severity_counts(results: Sequence[BuraiResult]) -> dict[str, int]:
    """Count results per severity, with every severity present as a key."""
    counts = Counter(r.severity for r in results)
    return {s.value: counts.get(s, 0) for s in Severity}


def summarize_results(results: Sequence[BuraiResult]) -> dict[str, float]:
    """Compute batch-level score statistics.

    Args:
        results: Per-curve results from score_curves().

    Returns:
        Dictionary with curve count, event count, max/mean score and the
        fraction of curves flagged at any severity above NONE.
    """
    if not results:
        return {
            "curves": 0,
            "events": 0,
            "max_score": 0.0,
            "mean_score": 0.0,
            "flagged_ratio": 0.0,
        }

    scores = np.array([r.score for r in results], dtype=np.float64)
    flagged = sum(1 for r in results if r.severity is not Severity.NONE)

    return {
        "curves": len(results),
        "events": sum(r.event_count for r in results),
        "max_score": float(scores.max()),
        "mean_score": float(scores.mean()),
        "flagged_ratio": flagged / len(results),
    }
