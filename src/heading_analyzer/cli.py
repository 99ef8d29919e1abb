"""
Command-line interface for the heading analyzer.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Union

from heading_analyzer import __version__
from heading_analyzer.core import (
    HEADING_LEVELS,
    Heading,
    HeadingAnalysisError,
    HeadingStats,
    calculate_stats,
    extract_headings,
    fetch_html,
    format_heading_line,
    write_report,
)

LOG_LEVEL_ENV = "HEADING_ANALYZER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING

logger = logging.getLogger(__name__)


def _normalise_level(level: Optional[Union[str, int]]) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        value = level.strip().upper()
        if value.isdigit():
            return int(value)
        named = logging.getLevelName(value)
        if isinstance(named, int):
            return named
    return DEFAULT_LOG_LEVEL


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Send log records to stderr so stdout only carries the report."""
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    logging.basicConfig(
        level=_normalise_level(level),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def print_report(headings: List[Heading], stats: HeadingStats, out: Optional[TextIO] = None) -> None:
    """Print level distribution and the numbered heading listing."""
    out = out or sys.stdout
    out.write("\n--- Heading Analysis Results ---\n")
    out.write(f"Total heading count: {len(headings)}\n")

    out.write("\nDistribution by heading level:\n")
    for level in HEADING_LEVELS:
        out.write(f"  H{level}: {stats.count(level)} items\n")

    out.write("\nFound headings:\n")
    for i, heading in enumerate(headings, start=1):
        out.write(format_heading_line(i, heading) + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="heading-analyzer",
        description="Analyze the H1-H6 headings of a web page.",
    )
    parser.add_argument("-u", "--url", required=True, help="URL of the page to analyze")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="File to save the found headings to (optional)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the heading analyzer CLI."""
    args = build_parser().parse_args(argv)
    configure_logging(os.getenv(LOG_LEVEL_ENV))

    print(f"Analyzing website: {args.url}")

    try:
        headings = extract_headings(fetch_html(args.url))

        if not headings:
            print("No headings found on the website!")
            return 0

        stats = calculate_stats(headings)
        print_report(headings, stats)

        if args.output is not None:
            write_report(headings, args.output)
            print(f"Headings saved to {args.output}.")
    except HeadingAnalysisError as e:
        logger.debug("Aborting after %s failure", e.stage, exc_info=True)
        sys.stderr.write(f"error: {e.stage}: {e}\n")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
