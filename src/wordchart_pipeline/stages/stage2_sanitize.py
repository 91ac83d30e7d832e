"""Stage 2: Remove control characters from extracted pattern text.

Tab, line feed and carriage return are kept so the line structure of the
table survives; every other C0 control character and DEL is removed.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


def sanitize(text: object) -> str:
    """Strip control characters and surrounding whitespace from ``text``.

    Args:
        text: Joined page text. Non-string values are tolerated and treated as
            empty input.

    Returns:
        Sanitized text; ``""`` for empty or non-string input.
    """

    if not isinstance(text, str):
        logger.warning("Invalid text content received: %s", type(text).__name__)
        return ""
    if not text:
        return ""

    sanitized = CONTROL_CHARS_RE.sub("", text).replace("\u0000", "").strip()
    if sanitized != text:
        logger.debug(
            "Text content sanitized: original_length=%d clean_length=%d",
            len(text),
            len(sanitized),
        )
    return sanitized


def split_lines(text: str) -> list[str]:
    """Split sanitized text into trimmed, non-empty lines in reading order."""

    return [line.strip() for line in text.split("\n") if line.strip()]
