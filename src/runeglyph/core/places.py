"""Reflection table for decimal places."""

from types import MappingProxyType

from runeglyph.domain import Place, PlaceTransform

PLACE_TRANSFORMS: MappingProxyType[Place, PlaceTransform] = MappingProxyType(
    {
        Place.THOUSANDS: PlaceTransform(flip_horizontal=True, flip_vertical=True),
        Place.HUNDREDS: PlaceTransform(flip_horizontal=True, flip_vertical=False),
        Place.TENS: PlaceTransform(flip_horizontal=False, flip_vertical=True),
        Place.ONES: PlaceTransform(flip_horizontal=False, flip_vertical=False),
    }
)


def transform_for_place(place: Place) -> PlaceTransform:
    """Get the reflection descriptor for a place."""
    return PLACE_TRANSFORMS[place]
