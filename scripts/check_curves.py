"""CLI: Check a curve file for burai sliders.

Usage:
    python scripts/check_curves.py curves.json
    python scripts/check_curves.py curves.json --workers 4 --all
    python scripts/check_curves.py curves.json --include-non-bezier --json report.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from burai_checker.data.curves import parse_curve_file
from burai_checker.evaluation.burai import Severity
from burai_checker.evaluation.playability import report_to_dict, run_check

logger = logging.getLogger(__name__)


def main() -> None:
    """Check one curve file and print a burai report."""
    parser = argparse.ArgumentParser(
        description="Check sampled slider curves for burai shapes",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("curves", type=Path, help="Input curve file (.json)")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes for scoring")
    parser.add_argument(
        "--include-non-bezier",
        action="store_true",
        help="Also check linear, perfect-circle and Catmull curves",
    )
    parser.add_argument(
        "--all", action="store_true", help="Print the score of every curve, not just issues"
    )
    parser.add_argument(
        "--json", type=Path, default=None, dest="json_path", help="Write a JSON report here"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        curves = parse_curve_file(args.curves)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Could not read %s: %s", args.curves, e)
        sys.exit(1)

    report = run_check(curves, workers=args.workers, bezier_only=not args.include_non_bezier)
    payload = report_to_dict(report)

    print(f"\n{'=' * 60}")
    print(f"Burai check — {args.curves.name}")
    print(f"{'=' * 60}")
    print(f"Curves: {len(curves)} ({payload['checked']} checked)")
    for sev, count in payload["severities"].items():
        print(f"  {sev}: {count}")

    if args.all:
        print("\nScores:")
        for idx, result in zip(report.checked, report.results):
            curve = curves[idx]
            name = curve.label or f"#{idx}"
            print(f"  {name:<16} {curve.curve_type.value:<8} {result.score:10.4f}  "
                  f"{result.severity.value}")

    if report.issues:
        print("\nIssues:")
        for issue in report.issues:
            name = issue.label or f"#{issue.index}"
            when = f" @ {issue.time:g}ms" if issue.time is not None else ""
            print(f"  [{issue.severity.value}] {name}{when} score={issue.score:.3f}")
    else:
        print("\nNo burai sliders found.")

    if args.json_path is not None:
        with open(args.json_path, "w") as f:
            json.dump({"file": str(args.curves), **payload}, f, indent=2)
        logger.info("Report written: %s", args.json_path)

    if any(i.severity is Severity.UNRANKABLE for i in report.issues):
        sys.exit(2)


if __name__ == "__main__":
    main()
