"""
Web page heading analyzer.
Fetches one URL, extracts H1-H6 headings, reports counts per level and
optionally saves the heading list to a text file.
"""
__version__ = "1.0.0"

from heading_analyzer.core import (
    FilesystemError,
    Heading,
    HeadingAnalysisError,
    HeadingStats,
    InvalidSelectorError,
    NetworkError,
    calculate_stats,
    extract_headings,
    fetch_html,
    write_report,
)

__all__ = [
    "FilesystemError",
    "Heading",
    "HeadingAnalysisError",
    "HeadingStats",
    "InvalidSelectorError",
    "NetworkError",
    "calculate_stats",
    "extract_headings",
    "fetch_html",
    "write_report",
]
