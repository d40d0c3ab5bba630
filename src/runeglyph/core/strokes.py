"""Canonical stroke alphabet.

Each nonzero digit has a fixed, hand-authored polyline in the canonical
(ones) quadrant, to the right of the stem and above its midpoint. The
table is a literal; nothing here is derived from the digit value.
"""

from types import MappingProxyType

from runeglyph.domain import Stroke

STROKE_TABLE: MappingProxyType[int, Stroke] = MappingProxyType(
    {
        1: Stroke.from_pairs((1, 0), (2, 0)),
        2: Stroke.from_pairs((1, 1), (2, 1)),
        3: Stroke.from_pairs((1, 0), (2, 1)),
        4: Stroke.from_pairs((1, 1), (2, 0)),
        5: Stroke.from_pairs((1, 1), (2, 0), (1, 0)),
        6: Stroke.from_pairs((2, 0), (2, 1)),
        7: Stroke.from_pairs((1, 0), (2, 0), (2, 1)),
        8: Stroke.from_pairs((1, 1), (2, 1), (2, 0)),
        9: Stroke.from_pairs((1, 1), (2, 1), (2, 0), (1, 0)),
    }
)


def stroke_for_digit(digit: int) -> Stroke | None:
    """Look up the canonical stroke for a digit.

    Args:
        digit: Digit value

    Returns:
        The stroke for digits 1-9, None for 0 or anything else
    """
    return STROKE_TABLE.get(digit)
