"""Conversion of Word Chart bead notation to canonical ``(count)COLOR`` tokens.

Source charts write bead runs as ``3(G)``; some charts already use the
canonical ``(3)G`` form, and a bare color such as ``G`` means a single bead.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re

from wordchart_pipeline.models import TOKEN_SEPARATOR, BeadToken

logger = logging.getLogger(__name__)

SOURCE_TOKEN_RE = re.compile(r"^([0-9]+)\(([A-Z]+)\)$")
CANONICAL_TOKEN_RE = re.compile(r"^\(([0-9]+)\)([A-Z]+)$")
BARE_COLOR_RE = re.compile(r"^[A-Z]+$")
WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class ConvertedSequence:
    """Result of converting one row's bead sequence.

    Attributes:
        tokens: Canonical token strings in source order.
        dropped: Source fragments that could not be converted.
        zero_count: Canonical tokens whose bead count is zero.
    """

    tokens: tuple[str, ...]
    dropped: tuple[str, ...]
    zero_count: tuple[str, ...]

    @property
    def text(self) -> str:
        return TOKEN_SEPARATOR.join(self.tokens)


def convert_token(fragment: str) -> str | None:
    """Convert one whitespace-free fragment to canonical notation.

    Args:
        fragment: Source fragment such as ``3(G)``, ``(3)G`` or ``G``.

    Returns:
        Canonical token, or ``None`` when the fragment is not bead notation.
    """

    match = SOURCE_TOKEN_RE.match(fragment)
    if match:
        return f"({match.group(1)}){match.group(2)}"
    if CANONICAL_TOKEN_RE.match(fragment):
        return fragment
    if BARE_COLOR_RE.match(fragment):
        return f"(1){fragment}"
    return None


def parse_canonical_token(token: str) -> BeadToken:
    """Parse a canonical ``(count)COLOR`` token into a :class:`BeadToken`.

    Raises:
        ValueError: If ``token`` is not in canonical notation.
    """

    match = CANONICAL_TOKEN_RE.match(token)
    if not match:
        raise ValueError(f"Not a canonical bead token: '{token}'")
    return BeadToken(count=int(match.group(1)), color=match.group(2))


def convert_fragments(raw: str) -> ConvertedSequence:
    """Convert a whitespace-separated bead sequence fragment by fragment.

    Unconvertible fragments are dropped and logged; the rest of the sequence
    is still converted. Zero-count tokens are kept and logged.

    Args:
        raw: Bead sequence as found after the row number and direction.

    Returns:
        ``ConvertedSequence`` with kept tokens and per-token diagnostics.
    """

    tokens: list[str] = []
    dropped: list[str] = []
    zero_count: list[str] = []

    for fragment in WHITESPACE_RE.split(raw or ""):
        if not fragment:
            continue
        converted = convert_token(fragment)
        if converted is None:
            logger.warning("Unable to convert bead notation: %s", fragment)
            dropped.append(fragment)
            continue
        if parse_canonical_token(converted).count == 0:
            logger.warning("Bead token with zero count: %s", fragment)
            zero_count.append(converted)
        tokens.append(converted)

    return ConvertedSequence(
        tokens=tuple(tokens),
        dropped=tuple(dropped),
        zero_count=tuple(zero_count),
    )


def convert_sequence(raw: str) -> str:
    """Convert a bead sequence and join canonical tokens with ``", "``."""

    return convert_fragments(raw).text
