"""Integration tests chaining PDF text extraction, parsing and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from wordchart_pipeline.pipeline import load_pattern_source, run_pipeline, run_text_pipeline
from wordchart_pipeline.stages import stage1_extract

PAGE_ONE = "\n".join(
    [
        "Pattern Name: Sunset Cuff",
        "Word Chart",
        "Row Direction Word Chart",
        "1 & 2 L 3(G) 1(Y)",
        "Page 1 of 2",
    ]
)
PAGE_TWO = "\n".join(
    [
        "2(B) 1(Y)",
        "3 R 1(G) 0(Y)",
        "4 L A oops B",
        "Created with BeadTool 4",
        "Bead Grid",
        "5 R 1(G)",
    ]
)


class FakePage:
    def __init__(self, text: str) -> None:
        self._text = text

    def extract_text(self, **kwargs: object) -> str:
        return self._text


class FakePdf:
    def __init__(self, texts: list[str]) -> None:
        self.pages = [FakePage(text) for text in texts]

    def __enter__(self) -> "FakePdf":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


@pytest.fixture
def pattern_pdf(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    pdf_path = tmp_path / "sunset.pdf"
    pdf_path.write_bytes(b"%PDF-1.4\n")
    monkeypatch.setattr(
        stage1_extract.pdfplumber, "open", lambda path: FakePdf([PAGE_ONE, PAGE_TWO])
    )
    return pdf_path


def test_run_pipeline_stitches_rows_across_pages(pattern_pdf: Path) -> None:
    """A range row continued on the next page becomes one row; the grid ends the chart."""

    result = run_pipeline(pattern_pdf)

    assert [row.format() for row in result.rows] == [
        "Row 1&2 (L) (3)G, (1)Y, (2)B, (1)Y",
        "Row 3 (R) (1)G, (0)Y",
        "Row 4 (L) (1)A, (1)B",
    ]
    assert result.missing_rows == ()
    assert result.report.table_found is True
    assert result.report.grid_terminated is True
    assert [item.fragment for item in result.report.dropped_tokens] == ["oops"]
    assert [item.fragment for item in result.report.zero_count_tokens] == ["(0)Y"]
    assert result.pattern_source.splitlines()[0] == "Row 1&2 (L) (3)G, (1)Y, (2)B, (1)Y"


def test_run_pipeline_rejects_non_pdf(tmp_path: Path) -> None:
    text_path = tmp_path / "pattern.txt"
    text_path.write_text("Word Chart\n1 L A\n", encoding="utf-8")

    with pytest.raises(ValueError, match="File must be a PDF document"):
        run_pipeline(text_path)


def test_run_text_pipeline_requires_rows_unless_allowed() -> None:
    with pytest.raises(ValueError, match="No Word Chart pattern rows recognized"):
        run_text_pipeline("No table structure here\nRow 1: Something")

    result = run_text_pipeline("No table structure here", allow_empty=True)
    assert result.rows == ()
    assert result.pattern_source == ""


def test_load_pattern_source_joins_rows_with_newlines() -> None:
    text = "Word Chart\n1 L A B C\n2 R C B A\n"

    assert load_pattern_source(text) == "Row 1 (L) (1)A, (1)B, (1)C\nRow 2 (R) (1)C, (1)B, (1)A"
    assert load_pattern_source("nothing here") == ""


def test_load_pattern_source_keeps_descending_range() -> None:
    """A range written end-before-start is passed through like any other row."""

    text = "Word Chart\n5 & 3 L A\n6 R B"

    assert load_pattern_source(text) == "Row 5&3 (L) (1)A\nRow 6 (R) (1)B"

    result = run_text_pipeline(text)
    assert result.descending_ranges == ("5&3",)
    assert result.missing_rows == (4,)


def test_pipeline_handles_huge_row_numbers() -> None:
    """Stray large row numbers must not make gap detection enumerate the span."""

    text = "Word Chart\n1 & 30000000 L A\n2024 R B"

    assert load_pattern_source(text) == "Row 1&30000000 (L) (1)A\nRow 2024 (R) (1)B"

    result = run_text_pipeline(text)
    assert len(result.rows) == 2
    assert result.missing_rows == ()
