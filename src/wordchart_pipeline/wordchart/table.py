"""Word Chart table parsing from sanitized document text.

The parser walks the document lines once. A ``Word Chart`` header (or its
misspelled ``Word Cart`` variant, or the ``Row Direction Word Chart`` column
header) opens the table; a line mentioning the grid closes it. Row and range
instructions inside the table are stitched with their continuation lines and
converted to canonical ``(count)COLOR`` notation.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from wordchart_pipeline.models import (
    DroppedToken,
    GridBoundary,
    ParseReport,
    PatternRow,
    RangeRowMatch,
    SectionHeaderMarker,
    SingleRowMatch,
    TableHeaderMarker,
    ZeroCountToken,
)
from wordchart_pipeline.stages.stage2_sanitize import sanitize, split_lines
from wordchart_pipeline.wordchart.classifier import classify
from wordchart_pipeline.wordchart.continuation import resolve_continuation
from wordchart_pipeline.wordchart.notation import convert_fragments

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableParseResult:
    """Result bundle returned by :func:`parse_table_detailed`.

    Attributes:
        rows: Recognised rows in order of first appearance.
        report: Diagnostics collected while parsing.
    """

    rows: tuple[PatternRow, ...]
    report: ParseReport

    @property
    def formatted_rows(self) -> list[str]:
        return [row.format() for row in self.rows]


def parse_table_detailed(text: str) -> TableParseResult:
    """Parse Word Chart rows and collect per-token diagnostics.

    Args:
        text: Newline-joined page text, possibly containing control
            characters, page furniture and unrelated prose.

    Returns:
        ``TableParseResult`` with rows and a ``ParseReport``. Text without a
        Word Chart section, or a section without rows, yields no rows.

    Raises:
        PatternIntegrityError: If a matched row line has an unparsable row
            number.
    """

    sanitized = sanitize(text)
    lines = split_lines(sanitized)

    rows: list[PatternRow] = []
    dropped: list[DroppedToken] = []
    zero_count: list[ZeroCountToken] = []
    inside_table = False
    table_found = False
    grid_terminated = False

    index = 0
    while index < len(lines):
        classification = classify(lines[index])

        if isinstance(classification, (TableHeaderMarker, SectionHeaderMarker)):
            if not inside_table:
                logger.debug("Word Chart section starts at line %d", index)
            inside_table = True
            table_found = True
            index += 1
            continue

        if isinstance(classification, GridBoundary):
            if inside_table:
                logger.debug("Grid section at line %d ends the Word Chart", index)
                grid_terminated = True
                break
            index += 1
            continue

        if inside_table and isinstance(classification, (SingleRowMatch, RangeRowMatch)):
            full_sequence, last_index = resolve_continuation(
                lines, index, classification.sequence_tail
            )
            converted = convert_fragments(full_sequence)
            if isinstance(classification, RangeRowMatch):
                start_row, end_row = classification.start_row, classification.end_row
            else:
                start_row, end_row = classification.row, None
            row = PatternRow(
                start_row=start_row,
                end_row=end_row,
                direction=classification.direction,
                tokens=converted.tokens,
                first_line=index,
                last_line=last_index,
            )
            rows.append(row)
            dropped.extend(DroppedToken(row.label, fragment) for fragment in converted.dropped)
            zero_count.extend(ZeroCountToken(row.label, token) for token in converted.zero_count)
            index = last_index + 1
            continue

        index += 1

    report = ParseReport(
        line_count=len(lines),
        sanitized=isinstance(text, str) and sanitized != text,
        table_found=table_found,
        grid_terminated=grid_terminated,
        dropped_tokens=tuple(dropped),
        zero_count_tokens=tuple(zero_count),
    )
    return TableParseResult(rows=tuple(rows), report=report)


def parse_table(text: str) -> list[str]:
    """Parse Word Chart rows into formatted pattern strings.

    Each string reads ``Row <n> (<L|R>) (<count>)<COLOR>, ...`` or, for a
    range, ``Row <start>&<end> (<L|R>) ...``.
    """

    return parse_table_detailed(text).formatted_rows
