"""Data models used across Word Chart extraction stages.

This module defines explicit immutable contracts between stages: the tagged
line classifications produced by the classifier, the bead tokens produced by
the notation converter, and the pattern rows and diagnostics produced by the
table parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import re
from typing import Union

COLOR_RE = re.compile(r"^[A-Z]+$")
TOKEN_SEPARATOR = ", "


class Direction(str, Enum):
    """Traversal direction of a beading row, as written in the source."""

    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class BeadToken:
    """A run of ``count`` beads of one color.

    Zero counts are accepted because the source notation allows them; callers
    flag them as data-quality warnings instead of rejecting them.
    """

    count: int
    color: str

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"Bead count must be non-negative, got {self.count}")
        if not COLOR_RE.fullmatch(self.color):
            raise ValueError(f"Bead color must be uppercase letters, got '{self.color}'")

    def format(self) -> str:
        return f"({self.count}){self.color}"


@dataclass(frozen=True)
class TableHeaderMarker:
    """``Row Direction Word Chart`` column header line."""


@dataclass(frozen=True)
class SectionHeaderMarker:
    """Section title line such as ``Word Chart`` or the misspelled ``Word Cart``."""

    kind: str = "wordChart"


@dataclass(frozen=True)
class GridBoundary:
    """Line mentioning the bead grid, which ends a Word Chart section."""


@dataclass(frozen=True)
class SingleRowMatch:
    """Instruction line for one row, e.g. ``3 R 1(G) 3(Y)``."""

    row: int
    direction: Direction
    sequence_tail: str


@dataclass(frozen=True)
class RangeRowMatch:
    """Instruction line shared by two rows, e.g. ``1 & 2 L 3(G) 1(Y)``."""

    start_row: int
    end_row: int
    direction: Direction
    sequence_tail: str


@dataclass(frozen=True)
class ContinuationCandidate:
    """Bead-token fragment that may continue the preceding row."""

    text: str


@dataclass(frozen=True)
class Unrelated:
    """Any line with no role in the pattern table."""


LineClassification = Union[
    TableHeaderMarker,
    SectionHeaderMarker,
    GridBoundary,
    SingleRowMatch,
    RangeRowMatch,
    ContinuationCandidate,
    Unrelated,
]


@dataclass(frozen=True)
class PatternRow:
    """One recognised row or row range with its converted bead sequence.

    ``first_line`` is the index of the matched instruction line and
    ``last_line`` the index of the last continuation line consumed for it
    (equal to ``first_line`` when nothing was absorbed). Indexes refer to the
    non-empty lines of the sanitized input.
    """

    start_row: int
    end_row: int | None
    direction: Direction
    tokens: tuple[str, ...]
    first_line: int
    last_line: int

    @property
    def label(self) -> str:
        if self.end_row is None:
            return str(self.start_row)
        return f"{self.start_row}&{self.end_row}"

    @property
    def row_numbers(self) -> tuple[int, ...]:
        if self.end_row is None:
            return (self.start_row,)
        return (self.start_row, self.end_row)

    def format(self) -> str:
        return f"Row {self.label} ({self.direction.value}) {TOKEN_SEPARATOR.join(self.tokens)}"


@dataclass(frozen=True)
class DroppedToken:
    """Report item for a fragment the notation converter could not read."""

    row_label: str
    fragment: str


@dataclass(frozen=True)
class ZeroCountToken:
    """Report item for a token that parsed with a bead count of zero."""

    row_label: str
    fragment: str


@dataclass(frozen=True)
class ParseReport:
    """Diagnostics captured during one table parse.

    Items are kept in source order; report builders decide presentation.
    """

    line_count: int = 0
    sanitized: bool = False
    table_found: bool = False
    grid_terminated: bool = False
    dropped_tokens: tuple[DroppedToken, ...] = field(default_factory=tuple)
    zero_count_tokens: tuple[ZeroCountToken, ...] = field(default_factory=tuple)
