"""Text input handling for rune values.

Turns user-typed text into a value the composer accepts: digits only,
empty input falls back to the minimum, and out-of-range numbers are
clamped to [1, 9999].
"""

import re

from runeglyph.core import RUNE_MAX_VALUE, RUNE_MIN_VALUE
from runeglyph.exceptions import InvalidInputError

_DIGITS_RE = re.compile(r"[0-9]*")


def clamp_value(value: int) -> int:
    """Clamp a number into the drawable range.

    Args:
        value: Any integer

    Returns:
        value limited to [RUNE_MIN_VALUE, RUNE_MAX_VALUE]
    """
    if value < RUNE_MIN_VALUE:
        return RUNE_MIN_VALUE
    if value > RUNE_MAX_VALUE:
        return RUNE_MAX_VALUE
    return value


def parse_value(text: str | None) -> int:
    """Parse user text into a drawable rune value.

    Args:
        text: Raw input; None or blank means no value was entered

    Returns:
        Value in [RUNE_MIN_VALUE, RUNE_MAX_VALUE]

    Raises:
        InvalidInputError: If text contains anything other than digits
    """
    if text is None:
        return RUNE_MIN_VALUE

    stripped = text.strip()
    if not _DIGITS_RE.fullmatch(stripped):
        raise InvalidInputError(text, "only the digits 0-9 are allowed")
    if stripped == "":
        return RUNE_MIN_VALUE

    # Anything longer than four significant digits is above the range
    significant = stripped.lstrip("0")
    if len(significant) > len(str(RUNE_MAX_VALUE)):
        return RUNE_MAX_VALUE

    return clamp_value(int(significant or "0"))
