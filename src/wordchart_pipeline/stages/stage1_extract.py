"""Stage 1: Extract page text from a Word Chart pattern PDF.

The module turns each PDF page into one text blob with lines in reading
order, removes page furniture that the chart generator adds to every page,
and joins the pages into the single text the table parser consumes.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

import pdfplumber

logger = logging.getLogger(__name__)

MAX_PDF_SIZE_BYTES = 50 * 1024 * 1024
PAGE_NUMBER_RE = re.compile(r"^Page \d+(?: of \d+)?$")
GENERATOR_FOOTER_RE = re.compile(r"^Created with\b")


def validate_pdf_file(pdf_path: Path) -> None:
    """Check that ``pdf_path`` looks like a PDF the extractor can process.

    Args:
        pdf_path: Candidate pattern PDF.

    Raises:
        ValueError: Listing every problem found with the file.
    """

    if not pdf_path.exists():
        raise ValueError(f"Invalid file: not found: {pdf_path}")

    issues: list[str] = []
    if pdf_path.suffix.lower() != ".pdf":
        issues.append("File must be a PDF document")
    size = pdf_path.stat().st_size
    if size == 0:
        issues.append("File is empty")
    elif size > MAX_PDF_SIZE_BYTES:
        issues.append(f"File too large (max 50MB, got {round(size / 1024 / 1024)}MB)")

    if issues:
        raise ValueError(f"Invalid file: {', '.join(issues)}")


def clean_page_text(text: str) -> str:
    """Remove page numbers and generator footers from one page of text.

    Args:
        text: Page text as returned by ``pdfplumber``.

    Returns:
        Page text with furniture lines removed and all other lines kept in
        their original order.
    """

    kept = [
        line
        for line in text.split("\n")
        if not PAGE_NUMBER_RE.match(line.strip()) and not GENERATOR_FOOTER_RE.match(line.strip())
    ]
    return "\n".join(kept)


def extract_page_texts(
    pdf_path: Path,
    page_start: int | None = None,
    page_end: int | None = None,
) -> list[str]:
    """Return the text of each selected page of a PDF.

    Page boundaries are inclusive and 1-based to match human page references
    used in CLI arguments. Pages without extractable text produce ``""`` so
    list positions still line up with pages.

    Args:
        pdf_path: Path to the source pattern PDF.
        page_start: 1-based start page, inclusive; ``None`` means first page.
        page_end: 1-based end page, inclusive; ``None`` means last page.

    Returns:
        One text blob per selected page, in page order.
    """

    texts: list[str] = []
    with pdfplumber.open(pdf_path) as pdf:
        total_pages = len(pdf.pages)
        start_idx = 0 if page_start is None else max(page_start - 1, 0)
        end_idx = total_pages - 1 if page_end is None else min(page_end - 1, total_pages - 1)

        for page_idx in range(start_idx, end_idx + 1):
            text = pdf.pages[page_idx].extract_text(x_tolerance=1, y_tolerance=1) or ""
            logger.debug("Extracted %d characters from page %d", len(text), page_idx + 1)
            texts.append(text)
    return texts


def join_pages(texts: Iterable[str]) -> str:
    """Clean each page and newline-join them in page order."""

    return "\n".join(clean_page_text(text) for text in texts)


def extract_document_text(
    pdf_path: Path,
    page_start: int | None = None,
    page_end: int | None = None,
) -> str:
    """Run Stage 1 end-to-end for a PDF page range.

    This convenience wrapper wires together validation, page extraction and
    page cleanup so the pipeline has a single callable interface.
    """

    validate_pdf_file(pdf_path)
    return join_pages(extract_page_texts(pdf_path, page_start=page_start, page_end=page_end))
