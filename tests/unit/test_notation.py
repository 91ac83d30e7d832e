"""Unit tests for bead notation conversion."""

from __future__ import annotations

import logging

import pytest

from wordchart_pipeline.models import BeadToken
from wordchart_pipeline.wordchart.notation import (
    convert_fragments,
    convert_sequence,
    convert_token,
    parse_canonical_token,
)


def test_convert_token_handles_all_source_forms() -> None:
    """Source, canonical and bare-color fragments all convert."""

    assert convert_token("3(G)") == "(3)G"
    assert convert_token("12(YR)") == "(12)YR"
    assert convert_token("(3)A") == "(3)A"
    assert convert_token("B") == "(1)B"


@pytest.mark.parametrize("fragment", ["garbage!", "3(g)", "(3)", "3G", "g", "3(G)x", "", "٣(G)"])
def test_convert_token_rejects_unknown_fragments(fragment: str) -> None:
    """Fragments outside the three notations are not converted."""

    assert convert_token(fragment) is None


def test_convert_sequence_joins_with_comma_space() -> None:
    """Tokens split on any whitespace run and join with ``", "``."""

    assert convert_sequence("3(G)  1(Y)\t2(B)") == "(3)G, (1)Y, (2)B"
    assert convert_sequence("3(G) 1(Y)") == "(3)G, (1)Y"
    assert convert_sequence("A B C") == "(1)A, (1)B, (1)C"
    assert convert_sequence("") == ""


def test_convert_sequence_is_fixed_point_on_canonical_input() -> None:
    """Already-canonical tokens come back unchanged."""

    canonical = "(3)A (2)B (1)C (03)D"

    assert convert_sequence(canonical).split(", ") == canonical.split()


def test_convert_fragments_drops_bad_tokens_and_logs(caplog: pytest.LogCaptureFixture) -> None:
    """An unconvertible fragment is dropped with a warning; the rest survive."""

    with caplog.at_level(logging.WARNING, logger="wordchart_pipeline.wordchart.notation"):
        result = convert_fragments("3(G) ??? B")

    assert result.text == "(3)G, (1)B"
    assert result.dropped == ("???",)
    assert "Unable to convert bead notation: ???" in caplog.text


def test_convert_fragments_keeps_and_flags_zero_counts(caplog: pytest.LogCaptureFixture) -> None:
    """Zero-count tokens stay in the output and are flagged."""

    with caplog.at_level(logging.WARNING, logger="wordchart_pipeline.wordchart.notation"):
        result = convert_fragments("0(G) 1(Y)")

    assert result.tokens == ("(0)G", "(1)Y")
    assert result.zero_count == ("(0)G",)
    assert "zero count: 0(G)" in caplog.text


def test_parse_canonical_token() -> None:
    """Canonical tokens parse into bead tokens; source notation does not."""

    assert parse_canonical_token("(12)AB") == BeadToken(count=12, color="AB")

    with pytest.raises(ValueError, match="Not a canonical bead token"):
        parse_canonical_token("3(G)")


def test_bead_token_validates_fields() -> None:
    """Bead tokens reject negative counts and non-uppercase colors."""

    assert BeadToken(2, "G").format() == "(2)G"

    with pytest.raises(ValueError, match="non-negative"):
        BeadToken(-1, "G")
    with pytest.raises(ValueError, match="uppercase"):
        BeadToken(1, "g")
