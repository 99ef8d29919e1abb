"""
Core heading extraction logic and data structures.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Union

import requests
from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

logger = logging.getLogger(__name__)

# Fixed scan order; extraction output is grouped by level in this order
HEADING_LEVELS: tuple[int, ...] = (1, 2, 3, 4, 5, 6)

REPORT_TITLE = "# Heading Analysis"


class HeadingAnalysisError(Exception):
    """Base class for failures that abort the analysis pipeline."""

    stage = "analysis"


class NetworkError(HeadingAnalysisError):
    """The page could not be fetched."""

    stage = "fetch"


class InvalidSelectorError(HeadingAnalysisError):
    """A heading selector could not be compiled."""

    stage = "extract"


class FilesystemError(HeadingAnalysisError):
    """The output file could not be created or written."""

    stage = "write"


@dataclass(frozen=True, slots=True)
class Heading:
    """A single non-empty heading found on the page."""
    level: int
    text: str

    def __post_init__(self) -> None:
        if self.level not in HEADING_LEVELS:
            raise ValueError(f"Heading level must be 1-6, got {self.level!r}")
        if not self.text or not self.text.strip():
            raise ValueError("Heading text must not be empty")


@dataclass(slots=True)
class HeadingStats:
    """Heading counts per level."""
    level_counts: Dict[int, int] = field(
        default_factory=lambda: dict.fromkeys(HEADING_LEVELS, 0)
    )

    def record(self, heading: Heading) -> None:
        """Count one heading against its level."""
        self.level_counts[heading.level] = self.level_counts.get(heading.level, 0) + 1

    def count(self, level: int) -> int:
        return self.level_counts.get(level, 0)

    @property
    def total(self) -> int:
        return sum(self.level_counts.values())


def fetch_html(url: str) -> str:
    """
    Fetch a page and return its body as text.

    The status code is not checked: an error page with a readable body is
    analysed like any other page.

    Raises:
        NetworkError: on connection, DNS or other transport failures.
    """
    logger.debug("Fetching %s", url)
    try:
        resp = requests.get(url)
    except requests.RequestException as e:
        raise NetworkError(f"could not fetch {url}: {e}") from e

    logger.debug("Fetched %s (status %s, %d chars)", url, resp.status_code, len(resp.text))
    return resp.text


def extract_headings(html: str) -> List[Heading]:
    """
    Extract H1-H6 headings from HTML.

    Levels are scanned one at a time, so the result holds every H1 first,
    then every H2 and so on; document order is kept only within a level.
    Headings whose text is empty after stripping are skipped.
    """
    soup = BeautifulSoup(html, "lxml")
    headings: List[Heading] = []

    for level in HEADING_LEVELS:
        selector = f"h{level}"
        try:
            elements = soup.select(selector)
        except SelectorSyntaxError as e:
            raise InvalidSelectorError(f"invalid selector {selector!r}: {e}") from e

        found = [
            Heading(level=level, text=text) for el in elements
            if (text := el.get_text(separator=" ", strip=True))
        ]
        logger.debug("Found %d non-empty %s elements (of %d)", len(found), selector, len(elements))
        headings.extend(found)

    return headings


def calculate_stats(headings: Iterable[Heading]) -> HeadingStats:
    """Count headings per level."""
    stats = HeadingStats()
    for heading in headings:
        stats.record(heading)
    return stats


def format_heading_line(index: int, heading: Heading) -> str:
    """Format one numbered listing line, e.g. ``1. [H2] Title``."""
    return f"{index}. [H{heading.level}] {heading.text}"


def write_report(headings: List[Heading], path: Union[str, Path]) -> None:
    """
    Write the numbered heading listing to ``path``.

    The file is created or truncated. Missing parent directories are not
    created.

    Raises:
        FilesystemError: if the file cannot be opened or written.
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(f"{REPORT_TITLE}\n\n")
            for i, heading in enumerate(headings, start=1):
                f.write(format_heading_line(i, heading) + "\n")
    except OSError as e:
        raise FilesystemError(f"could not write {path}: {e}") from e

    logger.info("Wrote %d headings to %s", len(headings), path)
