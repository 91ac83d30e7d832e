"""Markdown report generation for extraction run summaries."""

from __future__ import annotations

from typing import Iterable, Sequence

from wordchart_pipeline.models import ParseReport, PatternRow
from wordchart_pipeline.validation import (
    collect_color_counts,
    descending_ranges,
    missing_row_numbers,
)


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def build_report_md(rows: Sequence[PatternRow], report: ParseReport) -> str:
    """Build the extraction markdown report for one pipeline run.

    Args:
        rows: Parsed pattern rows.
        report: Diagnostics collected by the table parser.

    Returns:
        Full markdown content with summary tables.
    """

    missing = missing_row_numbers(rows)
    summary_rows = [
        ("lines_scanned", str(report.line_count)),
        ("word_chart_found", "yes" if report.table_found else "no"),
        ("ended_at_grid", "yes" if report.grid_terminated else "no"),
        ("control_characters_removed", "yes" if report.sanitized else "no"),
        ("pattern_rows", str(len(rows))),
        ("range_rows", str(sum(1 for row in rows if row.end_row is not None))),
        ("missing_row_numbers", ", ".join(str(num) for num in missing) or "none"),
        ("descending_ranges", ", ".join(descending_ranges(rows)) or "none"),
    ]

    color_counts = collect_color_counts(rows)
    color_rows = [
        (color, str(color_counts[color]))
        for color in sorted(color_counts, key=lambda item: (-color_counts[item], item))
    ]

    dropped_rows = [(item.row_label, f"`{item.fragment}`") for item in report.dropped_tokens]
    zero_rows = [(item.row_label, item.fragment) for item in report.zero_count_tokens]

    sections = [
        "# Extraction Report",
        "",
        "## Summary",
        _markdown_table(["metric", "value"], summary_rows),
        "",
        "## Beads per color",
        _markdown_table(["color", "bead_count"], color_rows),
        "",
        "## Dropped tokens",
        _markdown_table(["row", "fragment"], dropped_rows),
        "",
        "## Zero-count tokens",
        _markdown_table(["row", "token"], zero_rows),
    ]

    return "\n".join(sections) + "\n"
