"""Entrypoint reporting overlapping claims read from stdin or a file."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import List, Optional

from fabric_claims.src.core.cell_state import CELL_STATES
from fabric_claims.src.data.claim_reader import load_claims, read_claims
from fabric_claims.src.data.heatmap import save_heatmap
from fabric_claims.src.errors import ClaimSheetError
from fabric_claims.src.evaluation.report import NO_CLAIMS_MESSAGE, analyze_claims
from fabric_claims.src.utils import config_loader
from fabric_claims.src.utils.logger import get_logger, set_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Count overlapping fabric claims")
    parser.add_argument(
        "input", type=Path, nargs="?", help="File of claims, one per line (default: stdin)"
    )
    parser.add_argument("--config", type=Path, help="YAML or JSON config file")
    parser.add_argument("--cell-state", choices=sorted(CELL_STATES), help="Sheet cell representation")
    parser.add_argument(
        "--heatmap",
        nargs="?",
        const="",
        metavar="PATH",
        help="Write a PNG heatmap (to PATH or the configured path)",
    )
    parser.add_argument(
        "--overlap-free", action="store_true", help="Also report claims overlapping no other claim"
    )
    parser.add_argument("--log-level", help="Logging level for diagnostics on stderr")
    return parser


def _apply_args(args: argparse.Namespace) -> None:
    if args.config is not None:
        config_loader.apply_config(config_loader.load_config(args.config))
    if args.cell_state:
        config_loader.set_cell_state(args.cell_state)
    if args.heatmap is not None:
        config_loader.set_heatmap_enabled(True)
        if args.heatmap:
            config_loader.set_heatmap_path(args.heatmap)
    if args.overlap_free:
        config_loader.set_report_overlap_free(True)
    if args.log_level:
        config_loader.set_log_level(args.log_level)
    set_level(config_loader.LOG_LEVEL)


def run(args: argparse.Namespace) -> None:
    _apply_args(args)
    logger = get_logger("fabric_claims.run_overlap")
    logger.debug("Runtime configuration: %s", config_loader.runtime_config())

    if args.input is None:
        claims = read_claims(sys.stdin.buffer)
    else:
        claims = load_claims(args.input)

    if not claims:
        print(NO_CLAIMS_MESSAGE)
        return

    report, sheet = analyze_claims(
        claims,
        config_loader.CELL_STATE,
        overlap_free=config_loader.REPORT_OVERLAP_FREE,
    )
    for line in report.lines():
        print(line)

    if config_loader.HEATMAP_ENABLED:
        path = save_heatmap(sheet.counts(), config_loader.HEATMAP_PATH)
        print(f"Heatmap generated and saved to {path}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except ClaimSheetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
