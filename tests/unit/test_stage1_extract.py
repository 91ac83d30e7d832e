"""Unit tests for Stage 1 PDF text extraction helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from wordchart_pipeline.stages import stage1_extract
from wordchart_pipeline.stages.stage1_extract import (
    MAX_PDF_SIZE_BYTES,
    clean_page_text,
    extract_page_texts,
    join_pages,
    validate_pdf_file,
)


class FakePage:
    def __init__(self, text: str | None) -> None:
        self._text = text

    def extract_text(self, **kwargs: object) -> str | None:
        return self._text


class FakePdf:
    def __init__(self, texts: list[str | None]) -> None:
        self.pages = [FakePage(text) for text in texts]

    def __enter__(self) -> "FakePdf":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


def _install_fake_pdf(monkeypatch: pytest.MonkeyPatch, texts: list[str | None]) -> list[Path]:
    opened: list[Path] = []

    def fake_open(path: Path) -> FakePdf:
        opened.append(path)
        return FakePdf(texts)

    monkeypatch.setattr(stage1_extract.pdfplumber, "open", fake_open)
    return opened


def test_clean_page_text_removes_page_furniture() -> None:
    """Page numbers and generator footers are dropped; other lines keep their order."""

    text = "Word Chart\nPage 1 of 3\n1 L A\nCreated with BeadTool 4\nPage 2\n2 R B"

    assert clean_page_text(text) == "Word Chart\n1 L A\n2 R B"


def test_clean_page_text_keeps_lines_that_only_mention_pages() -> None:
    assert clean_page_text("See Page 4 for the grid") == "See Page 4 for the grid"


def test_join_pages_preserves_page_order() -> None:
    assert join_pages(["Word Chart\n1 L A\nPage 1 of 2", "2(B)\nPage 2 of 2"]) == (
        "Word Chart\n1 L A\n2(B)"
    )


def test_extract_page_texts_honors_inclusive_page_range(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    opened = _install_fake_pdf(monkeypatch, ["cover", "Word Chart", None, "Grid"])
    pdf_path = tmp_path / "pattern.pdf"

    assert extract_page_texts(pdf_path, page_start=2, page_end=3) == ["Word Chart", ""]
    assert extract_page_texts(pdf_path) == ["cover", "Word Chart", "", "Grid"]
    assert extract_page_texts(pdf_path, page_start=3, page_end=99) == ["", "Grid"]
    assert opened == [pdf_path, pdf_path, pdf_path]


def test_validate_pdf_file_accepts_regular_pdf(tmp_path: Path) -> None:
    pdf_path = tmp_path / "pattern.PDF"
    pdf_path.write_bytes(b"%PDF-1.4\n")

    validate_pdf_file(pdf_path)


def test_validate_pdf_file_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="not found"):
        validate_pdf_file(tmp_path / "missing.pdf")


def test_validate_pdf_file_lists_all_issues(tmp_path: Path) -> None:
    text_path = tmp_path / "pattern.txt"
    text_path.write_bytes(b"")

    with pytest.raises(ValueError, match="File must be a PDF document, File is empty"):
        validate_pdf_file(text_path)


def test_validate_pdf_file_rejects_oversized_file(tmp_path: Path) -> None:
    pdf_path = tmp_path / "huge.pdf"
    with pdf_path.open("wb") as handle:
        handle.truncate(MAX_PDF_SIZE_BYTES + 1)

    with pytest.raises(ValueError, match="File too large"):
        validate_pdf_file(pdf_path)
