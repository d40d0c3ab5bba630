"""Core rune algorithms for runeglyph.

This module contains the core algorithms for:

- The canonical stroke alphabet (digits 1-9)
- Grid reflections and pixel projection
- The per-place reflection table
- Glyph composition from a four digit decomposition

All functions are pure; the only state is the composer's
single-entry cache.

Key functions:
- stroke_for_digit: Look up a digit's canonical stroke
- reflect_horizontal: Mirror across the vertical centerline
- reflect_vertical: Mirror across the horizontal centerline
- project: Map a grid point to pixel space
- decompose: Split a value into four digits
- compose: Compose the digit segments for a value

Key classes:
- GlyphComposer: Composes full glyphs with a last-value cache
"""

from runeglyph.core.composer import (
    RUNE_MAX_VALUE,
    RUNE_MIN_VALUE,
    GlyphComposer,
    compose,
    decompose,
    is_valid_value,
    stem_segment,
)
from runeglyph.core.geometry import (
    GRID_HEIGHT,
    GRID_WIDTH,
    apply_transform,
    project,
    reflect_horizontal,
    reflect_vertical,
    transform_stroke,
)
from runeglyph.core.places import PLACE_TRANSFORMS, transform_for_place
from runeglyph.core.strokes import STROKE_TABLE, stroke_for_digit

__all__ = [
    # Constants
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "PLACE_TRANSFORMS",
    "RUNE_MAX_VALUE",
    "RUNE_MIN_VALUE",
    "STROKE_TABLE",
    # Composer
    "GlyphComposer",
    # Geometry functions
    "apply_transform",
    "compose",
    "decompose",
    "is_valid_value",
    "project",
    "reflect_horizontal",
    "reflect_vertical",
    "stem_segment",
    "stroke_for_digit",
    "transform_for_place",
    "transform_stroke",
]
