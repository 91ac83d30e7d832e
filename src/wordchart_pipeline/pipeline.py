"""Top-level orchestration for Word Chart pattern extraction."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from wordchart_pipeline.io.pattern_io import format_pattern_source
from wordchart_pipeline.models import ParseReport, PatternRow
from wordchart_pipeline.stages.stage1_extract import extract_document_text
from wordchart_pipeline.validation import (
    descending_ranges,
    missing_row_numbers,
    validate_pattern_rows,
)
from wordchart_pipeline.wordchart.table import parse_table_detailed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Result bundle returned by :func:`run_pipeline`.

    Attributes:
        rows: Parsed pattern rows.
        report: Table parser diagnostics.
        missing_rows: Row numbers absent from the covered row range.
        descending_ranges: Labels of range rows written end-before-start.
    """

    rows: tuple[PatternRow, ...]
    report: ParseReport
    missing_rows: tuple[int, ...]
    descending_ranges: tuple[str, ...] = ()

    @property
    def pattern_source(self) -> str:
        return format_pattern_source(self.rows)


def run_text_pipeline(text: str, allow_empty: bool = False) -> PipelineResult:
    """Parse and validate already-extracted document text.

    Args:
        text: Newline-joined page text.
        allow_empty: Whether a document without pattern rows is acceptable.

    Returns:
        ``PipelineResult`` containing rows, report, and continuity diagnostics.

    Raises:
        ValueError: If no rows were recognised and ``allow_empty`` is false,
            or if parsed rows fail validation.
    """

    result = parse_table_detailed(text)
    if not result.rows:
        if not allow_empty:
            raise ValueError(
                "No Word Chart pattern rows recognized. "
                "Check that the document contains a 'Word Chart' section."
            )
        logger.warning("No Word Chart pattern rows recognized")

    validate_pattern_rows(result.rows)
    backwards = descending_ranges(result.rows)
    if backwards:
        logger.warning("Range rows with end before start: %s", ", ".join(backwards))
    return PipelineResult(
        rows=result.rows,
        report=result.report,
        missing_rows=tuple(missing_row_numbers(result.rows)),
        descending_ranges=tuple(backwards),
    )


def run_pipeline(
    pdf_path: Path,
    page_start: int | None = None,
    page_end: int | None = None,
    allow_empty: bool = False,
) -> PipelineResult:
    """Execute all stages from PDF text extraction to validated rows.

    Args:
        pdf_path: Source pattern PDF path.
        page_start: 1-based inclusive start page or ``None``.
        page_end: 1-based inclusive end page or ``None``.
        allow_empty: Whether a document without pattern rows is acceptable.

    Returns:
        ``PipelineResult`` containing rows, report, and continuity diagnostics.
    """

    text = extract_document_text(pdf_path, page_start=page_start, page_end=page_end)
    return run_text_pipeline(text, allow_empty=allow_empty)


def load_pattern_source(text: str) -> str:
    """Return the parsed rows of ``text`` joined by newlines.

    This is the pattern-source string handed to shorthand consumers; it is
    empty when no Word Chart rows are found. Rows are returned as parsed,
    without the checks of :func:`run_text_pipeline`.
    """

    return format_pattern_source(parse_table_detailed(text).rows)
