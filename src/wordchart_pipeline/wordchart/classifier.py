"""Line classification for Word Chart pattern tables.

Each trimmed line is tagged with exactly one role. Rules are tried in a fixed
order and the first match wins, so a header that happens to contain digits is
never read as a row, and a row is never read as a continuation.
"""

from __future__ import annotations

import re

from wordchart_pipeline.models import (
    ContinuationCandidate,
    Direction,
    GridBoundary,
    LineClassification,
    RangeRowMatch,
    SectionHeaderMarker,
    SingleRowMatch,
    TableHeaderMarker,
    Unrelated,
)

TABLE_HEADER_RE = re.compile(r"row\s+direction\s+word\s+chart", re.IGNORECASE)
SECTION_HEADER_PHRASES = ("word chart", "word cart")
GRID_PHRASE = "grid"
RANGE_ROW_RE = re.compile(r"^([0-9]+)\s*&\s*([0-9]+)\s+([RL])\s+(.+)$")
SINGLE_ROW_RE = re.compile(r"^([0-9]+)\s+([RL])\s+(.+)$")
ROW_START_RE = re.compile(r"^[0-9]+\s+[RL]")
BEAD_TOKEN_RE = re.compile(r"[0-9]+\([A-Z]+\)|\([0-9]+\)[A-Z]+")


class PatternIntegrityError(ValueError):
    """A matched row line could not be turned into row numbers.

    Row patterns only capture ASCII digits, so this signals that the
    classifier and the parser disagree about the line format.
    """


def parse_row_number(text: str, line: str) -> int:
    """Parse a captured row number as a base-10 integer.

    Args:
        text: Digits captured by a row pattern.
        line: Full source line, used in the error message.

    Returns:
        Parsed row number.

    Raises:
        PatternIntegrityError: If ``text`` is not a base-10 integer.
    """

    try:
        return int(text, 10)
    except ValueError as exc:
        raise PatternIntegrityError(
            f"Malformed row number '{text}' in matched row line '{line}'"
        ) from exc


def is_table_header(line: str) -> bool:
    return bool(TABLE_HEADER_RE.search(line))


def is_section_header(line: str) -> bool:
    lowered = line.lower()
    return any(phrase in lowered for phrase in SECTION_HEADER_PHRASES)


def is_grid_boundary(line: str) -> bool:
    return GRID_PHRASE in line.lower()


def is_row_start(line: str) -> bool:
    """Return True if ``line`` begins like a single-row instruction."""

    return bool(ROW_START_RE.match(line))


def has_bead_token(line: str) -> bool:
    """Return True if ``line`` contains at least one ``3(G)`` or ``(3)G`` token."""

    return bool(BEAD_TOKEN_RE.search(line))


def classify(line: str) -> LineClassification:
    """Tag one trimmed line with its role in the pattern table.

    Args:
        line: Trimmed, non-empty source line.

    Returns:
        The classification of the first rule that matches.

    Raises:
        PatternIntegrityError: If a matched row line carries an unparsable
            row number.
    """

    if is_table_header(line):
        return TableHeaderMarker()
    if is_section_header(line):
        return SectionHeaderMarker()
    if is_grid_boundary(line):
        return GridBoundary()

    match = RANGE_ROW_RE.match(line)
    if match:
        start, end, direction, tail = match.groups()
        return RangeRowMatch(
            start_row=parse_row_number(start, line),
            end_row=parse_row_number(end, line),
            direction=Direction(direction),
            sequence_tail=tail,
        )

    match = SINGLE_ROW_RE.match(line)
    if match:
        row, direction, tail = match.groups()
        return SingleRowMatch(
            row=parse_row_number(row, line),
            direction=Direction(direction),
            sequence_tail=tail,
        )

    if has_bead_token(line) and not is_row_start(line):
        return ContinuationCandidate(text=line)
    return Unrelated()
