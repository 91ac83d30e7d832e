"""Validation helpers for parsed pattern rows and summary statistics."""

from __future__ import annotations

from collections import Counter
import re
from typing import Sequence

from wordchart_pipeline.models import PatternRow
from wordchart_pipeline.wordchart.notation import parse_canonical_token

ROW_LINE_RE = re.compile(r"^Row \d+(?:&\d+)? \([LR]\) (?:\(\d+\)[A-Z]+(?:, \(\d+\)[A-Z]+)*)?$")
MAX_GAP_SPAN_FACTOR = 10


def validate_pattern_rows(rows: Sequence[PatternRow]) -> None:
    """Validate parsed rows for output shape and source-line ordering.

    Args:
        rows: Rows returned by the table parser.

    Raises:
        ValueError: If any row is malformed, or two rows share source lines.
    """

    errors: list[str] = []
    previous: PatternRow | None = None
    for idx, row in enumerate(rows, start=1):
        formatted = row.format()
        if not ROW_LINE_RE.fullmatch(formatted):
            errors.append(f"Row {idx}: invalid row format '{formatted}'")
        if row.last_line < row.first_line:
            errors.append(f"Row {idx}: invalid source span {row.first_line}-{row.last_line}")
        if previous is not None and row.first_line <= previous.last_line:
            errors.append(
                f"Row {idx}: source lines {row.first_line}-{row.last_line} overlap "
                f"previous row lines {previous.first_line}-{previous.last_line}"
            )
        previous = row

    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:25])
        rest = len(errors) - min(25, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(f"Pattern validation failed with {len(errors)} errors:\n{preview}{more}")


def missing_row_numbers(rows: Sequence[PatternRow]) -> list[int]:
    """Compute row numbers absent from the observed row range.

    A range row such as ``1&2`` covers its two row numbers only. Gaps are
    reported only when the observed span is at most ``MAX_GAP_SPAN_FACTOR``
    times the number of observed rows; a wider span means a stray number
    rather than missing rows, and yields no gaps.

    Args:
        rows: Parsed rows.

    Returns:
        Missing row numbers between min/max observed values.
    """

    observed: set[int] = set()
    for row in rows:
        observed.update(row.row_numbers)

    if not observed:
        return []

    low, high = min(observed), max(observed)
    if high - low + 1 > MAX_GAP_SPAN_FACTOR * len(observed):
        return []
    return [num for num in range(low, high + 1) if num not in observed]


def descending_ranges(rows: Sequence[PatternRow]) -> list[str]:
    """Return labels of range rows whose end row is before their start row."""

    return [row.label for row in rows if row.end_row is not None and row.end_row < row.start_row]


def collect_color_counts(rows: Sequence[PatternRow]) -> dict[str, int]:
    """Count beads per color across all rows.

    Range rows count once; the same sequence is not duplicated per row.

    Args:
        rows: Parsed rows with canonical tokens.

    Returns:
        Dictionary of color code to total bead count.
    """

    counter: Counter[str] = Counter()
    for row in rows:
        for token in row.tokens:
            bead = parse_canonical_token(token)
            counter[bead.color] += bead.count
    return dict(counter)
