"""CLI: Scan a directory of curve files for burai sliders.

Usage:
    python scripts/scan.py
    python scripts/scan.py input_dir=data/curves workers=4
    python scripts/scan.py input_dir=data/curves bezier_only=false report_path=report.json

Every file matching `pattern` under `input_dir` is parsed and scored. Files
that fail to parse are logged and skipped. A JSON report with per-file issues
and summary metrics is written to `report_path`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import hydra
from hydra.utils import to_absolute_path
from omegaconf import DictConfig
from tqdm import tqdm

from burai_checker.data.curves import parse_curve_file
from burai_checker.evaluation.playability import report_to_dict, run_check

logger = logging.getLogger(__name__)


def scan_file(path: Path, workers: int = 1, bezier_only: bool = True) -> dict:
    """Score the checked curves in one file and build its report entry."""
    curves = parse_curve_file(path)
    report = run_check(curves, workers=workers, bezier_only=bezier_only)
    return {"file": str(path), "curves": len(curves), **report_to_dict(report)}


@hydra.main(config_path="../configs", config_name="scan", version_base=None)
def main(cfg: DictConfig) -> None:
    """Entry point for the batch scan CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    input_dir = Path(to_absolute_path(cfg.input_dir))
    report_path = Path(to_absolute_path(cfg.report_path))
    files = sorted(input_dir.rglob(cfg.pattern))
    logger.info("Scanning %d files in %s", len(files), input_dir)

    entries: list[dict] = []
    failed = 0
    for path in tqdm(files, desc="Scanning", unit="file"):
        try:
            entries.append(
                scan_file(path, workers=cfg.workers, bezier_only=cfg.bezier_only)
            )
        except (ValueError, OSError) as e:
            logger.warning("Failed to scan %s: %s", path, e)
            failed += 1

    n_issues = sum(len(e["issues"]) for e in entries)
    logger.info(
        "Scanned %d files (%d failed), %d burai issues", len(entries), failed, n_issues
    )

    report_path.parent.mkdir(parents=True, exist_ok=True)
    with open(report_path, "w") as f:
        json.dump({"files": entries, "failed": failed}, f, indent=2)
    logger.info("Report written: %s", report_path)


if __name__ == "__main__":
    main()
