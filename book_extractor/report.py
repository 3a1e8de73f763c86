"""Render grouped books to the text report."""
import logging
from pathlib import Path
from typing import Dict, List, Union

from tabulate import tabulate

from book_extractor.errors import ReportError
from book_extractor.models import Book

logger = logging.getLogger(__name__)

DEFAULT_REPORT_FILE = "result.txt"


def format_report(grouped: Dict[str, List[Book]]) -> str:
    """
    Render groups as report text.

    Each group is its parent name, one "<display_name> <states>" line per
    book, then a blank line.
    """
    lines = []

    for parent_name, books in grouped.items():
        lines.append(parent_name)
        for book in books:
            lines.append(f"{book.display_name} {book.states_str}")
        lines.append("")

    return "".join(f"{line}\n" for line in lines)


def save_report(
    grouped: Dict[str, List[Book]],
    path: Union[str, Path] = DEFAULT_REPORT_FILE
) -> Path:
    """
    Write the report file, replacing any existing one.

    Args:
        grouped: Books grouped by parent name
        path: Output file

    Returns:
        Path of the written file

    Raises:
        ReportError: If the file cannot be opened or written
    """
    path = Path(path)
    try:
        # Unencodable characters such as lone surrogates are written as "?"
        with open(path, "w", encoding="utf-8", errors="replace") as f:
            f.write(format_report(grouped))
    except OSError as e:
        raise ReportError(f"Failed to write report to '{path}': {e}") from e

    logger.debug(f"Wrote {len(grouped)} groups to {path}")
    return path


def summarize_groups(grouped: Dict[str, List[Book]]) -> str:
    """Build a console table with one row per group."""
    headers = ["Parent", "Books", "States"]
    rows = []
    for parent_name, books in grouped.items():
        states = sorted({state for book in books for state in book.meta.states})
        rows.append([parent_name, len(books), ", ".join(states)])

    return tabulate(rows, headers=headers, tablefmt="grid")
