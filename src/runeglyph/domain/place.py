"""Decimal places and their reflection descriptors."""

from dataclasses import dataclass
from enum import Enum


class Place(Enum):
    """Decimal position within a zero-padded four digit value.

    Members are declared most significant first, which is also the order
    segments are emitted in.
    """

    THOUSANDS = "thousands"
    HUNDREDS = "hundreds"
    TENS = "tens"
    ONES = "ones"


@dataclass(frozen=True, slots=True)
class PlaceTransform:
    """Which reflections relocate a canonical stroke into a place's quadrant.

    Attributes:
        flip_horizontal: Mirror across the vertical centerline
        flip_vertical: Mirror across the horizontal centerline
    """

    flip_horizontal: bool
    flip_vertical: bool

    @property
    def is_identity(self) -> bool:
        """True when the stroke is drawn unreflected."""
        return not (self.flip_horizontal or self.flip_vertical)
