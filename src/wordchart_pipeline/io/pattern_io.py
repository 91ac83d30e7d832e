"""Read/write helpers for pattern source artifacts."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from wordchart_pipeline.models import PatternRow


def format_pattern_source(rows: Sequence[PatternRow]) -> str:
    """Join formatted rows into one pattern-source string, one row per line."""

    return "\n".join(row.format() for row in rows).strip()


def write_pattern_text(rows: Sequence[PatternRow], output_path: Path) -> None:
    """Write parsed rows as a UTF-8 pattern-source file.

    Args:
        rows: Parsed rows to serialize.
        output_path: Destination text file path.
    """

    source = format_pattern_source(rows)
    with output_path.open("w", encoding="utf-8") as handle:
        if source:
            handle.write(source)
            handle.write("\n")


def read_text_input(input_path: Path) -> str:
    """Read already-extracted document text, e.g. a saved page-text dump."""

    return input_path.read_text(encoding="utf-8")
