"""Domain models for runeglyph.

This module contains the value types representing grid points, strokes,
places and composed glyphs. All models are:

- Immutable (frozen dataclasses)
- Hashable, so identical runes compare equal
- Independent of the SVG backend

Key classes:
- GridPoint: A vertex on the canonical stroke grid
- PixelPoint: A projected vertex in output space
- Stroke: The polyline drawn for one digit
- Place: A decimal position (thousands to ones)
- PlaceTransform: Reflection flags for a place
- LineSegment: A drawable line
- Glyph: The complete rune for a value
"""

from runeglyph.domain.place import Place, PlaceTransform
from runeglyph.domain.rune import Glyph, GridPoint, LineSegment, PixelPoint, Stroke

__all__: list[str] = [
    # Enums
    "Place",
    # Core types
    "GridPoint",
    "PixelPoint",
    "Stroke",
    "PlaceTransform",
    "LineSegment",
    "Glyph",
]
