"""Word Chart bead pattern extraction package."""

from .models import BeadToken, Direction, ParseReport, PatternRow
from .wordchart.table import parse_table, parse_table_detailed

__all__ = [
    "BeadToken",
    "Direction",
    "ParseReport",
    "PatternRow",
    "parse_table",
    "parse_table_detailed",
]
