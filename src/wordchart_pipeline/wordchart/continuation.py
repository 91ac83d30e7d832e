"""Continuation handling for row instructions split across several lines.

Page text extraction wraps long bead sequences onto following lines. Those
fragments carry bead tokens but no row number or direction, and belong to the
row instruction directly above them.
"""

from __future__ import annotations

from typing import Sequence

from wordchart_pipeline.models import (
    ContinuationCandidate,
    GridBoundary,
    RangeRowMatch,
    SectionHeaderMarker,
    SingleRowMatch,
    TableHeaderMarker,
)
from wordchart_pipeline.wordchart.classifier import classify

BOUNDARY_TYPES = (
    SingleRowMatch,
    RangeRowMatch,
    GridBoundary,
    SectionHeaderMarker,
    TableHeaderMarker,
)


def resolve_continuation(
    lines: Sequence[str],
    match_index: int,
    initial_sequence: str,
) -> tuple[str, int]:
    """Absorb continuation lines that follow a matched row instruction.

    Scanning starts at ``match_index + 1`` and stops, without consuming, at
    the first structural boundary (row, range, grid, or header line) or at
    the first line that carries no bead tokens.

    Args:
        lines: Trimmed, non-empty lines of the whole document.
        match_index: Index of the matched row or range line.
        initial_sequence: Bead sequence captured on the matched line.

    Returns:
        Tuple of the space-joined, trimmed full sequence and the index of the
        last consumed line (``match_index`` when nothing was absorbed).
    """

    parts = [initial_sequence]
    cursor = match_index + 1
    while cursor < len(lines):
        classification = classify(lines[cursor])
        if isinstance(classification, BOUNDARY_TYPES):
            break
        if not isinstance(classification, ContinuationCandidate):
            break
        parts.append(classification.text)
        cursor += 1

    return " ".join(parts).strip(), cursor - 1
