"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from checkmateiq.analysis import (
    AnalysisError,
    AnalysisSettings,
    GameAnalysisReport,
    GameAnalyzer,
)

_LOGGER = logging.getLogger(__name__)

EXIT_USER_ERROR = 2
EXIT_INTERNAL_ERROR = 3


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="checkmateiq",
        description="Annotate every move of a chess game with a quality rank.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="text or PGN file to read (default: stdin)",
    )
    parser.add_argument("--seed", type=int, default=0, help="variation seed")
    parser.add_argument(
        "--no-variation",
        action="store_true",
        help="disable the evaluation variation term",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="input is noisy OCR/pasted text; extract the moves first",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def format_report(report: GameAnalysisReport) -> str:
    """Render a report as a plain-text move list."""
    lines = [f"Opening: {report.opening}"]
    for record in report.timeline:
        nag = record.rank.nag
        lines.append(
            f"{record.label:<6} {record.san + nag:<10} {record.evaluation:+6.2f}  "
            f"{record.rank.value:<10} {record.tip}"
        )
    lines.append(f"Final evaluation: {report.final_evaluation:+.2f}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI; returns the process exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    text = args.file.read_text(encoding="utf-8") if args.file else sys.stdin.read()
    settings = AnalysisSettings(variation_seed=args.seed)
    if args.no_variation:
        settings.variation_amplitude = 0.0
    analyzer = GameAnalyzer(settings)
    try:
        if args.raw:
            report = analyzer.analyze_text(text)
        else:
            report = analyzer.analyze_moves(text)
    except AnalysisError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        if not exc.user_facing:
            _LOGGER.error("Internal analysis failure: %s", exc)
            return EXIT_INTERNAL_ERROR
        return EXIT_USER_ERROR

    print(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
