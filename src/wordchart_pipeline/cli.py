"""CLI entrypoint for Word Chart pattern extraction."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from wordchart_pipeline.io.pattern_io import read_text_input, write_pattern_text
from wordchart_pipeline.pipeline import PipelineResult, run_pipeline, run_text_pipeline
from wordchart_pipeline.reporting.report_md import build_report_md
from wordchart_pipeline.validation import collect_color_counts


def _format_integer_ranges(values: Sequence[int]) -> str:
    """Format sorted integers as compact ranges like ``3-5, 8, 10-12``.

    Args:
        values: Sorted integer list.

    Returns:
        Compact range string.
    """

    if not values:
        return ""

    ranges: list[str] = []
    start = values[0]
    prev = values[0]

    for value in values[1:]:
        if value == prev + 1:
            prev = value
            continue
        ranges.append(f"{start}-{prev}" if start != prev else str(start))
        start = value
        prev = value

    ranges.append(f"{start}-{prev}" if start != prev else str(start))
    return ", ".join(ranges)


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for extraction command.
    """

    parser = argparse.ArgumentParser(
        description="Extract Word Chart bead pattern rows into pattern shorthand."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--pdf", type=Path, help="Path to source pattern PDF.")
    source.add_argument("--text", type=Path, help="Path to already-extracted UTF-8 page text.")
    parser.add_argument(
        "--output", required=True, type=Path, help="Destination pattern text path."
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Markdown report output path (default: report.md next to output).",
    )
    parser.add_argument("--page-start", type=int, default=1, help="1-based start page (inclusive).")
    parser.add_argument("--page-end", type=int, default=None, help="1-based end page (inclusive).")
    parser.add_argument(
        "--allow-empty",
        action="store_true",
        help="Write an empty pattern instead of failing when no rows are recognized.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics.",
    )
    return parser


def _print_output_analysis(result: PipelineResult) -> None:
    """Print continuity and color summary tables for extracted rows."""

    if not result.rows:
        print("No rows parsed; skipping output analysis.")
        return

    if result.missing_rows:
        print(
            "WARNING: Missing row numbers "
            f"({len(result.missing_rows)}): {_format_integer_ranges(result.missing_rows)}"
        )
    else:
        print("Row continuity check: no missing row numbers.")

    if result.descending_ranges:
        print(
            "WARNING: Range rows with end before start: " + ", ".join(result.descending_ranges)
        )

    color_counts = collect_color_counts(result.rows)
    color_rows = [
        [color, str(count)]
        for color, count in sorted(color_counts.items(), key=lambda item: (-item[1], item[0]))
    ]
    print("\nBeads per color in output pattern:")
    print(_format_table(["color", "bead_count"], color_rows))


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through artifact generation.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    source_path = args.pdf if args.pdf is not None else args.text
    if not source_path.exists():
        raise SystemExit(f"Input not found: {source_path}")

    report_path = args.report if args.report is not None else args.output.parent / "report.md"

    if args.pdf is not None:
        result = run_pipeline(
            pdf_path=args.pdf,
            page_start=args.page_start,
            page_end=args.page_end,
            allow_empty=args.allow_empty,
        )
    else:
        result = run_text_pipeline(read_text_input(args.text), allow_empty=args.allow_empty)

    write_pattern_text(result.rows, output_path=args.output)
    report_path.write_text(build_report_md(result.rows, result.report), encoding="utf-8")

    print(f"Wrote {len(result.rows)} rows to {args.output}")
    print(f"Wrote report to {report_path}")
    _print_output_analysis(result)
    print(
        "\nToken summary: "
        f"dropped={len(result.report.dropped_tokens)}, "
        f"zero_count={len(result.report.zero_count_tokens)}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
