"""Glyph composition from a decimal value.

This module assembles a rune's line segments:
1. Decompose the value into four digits (thousands to ones)
2. Look up each nonzero digit's canonical stroke
3. Relocate it with the place's reflections
4. Project every edge into pixel space

Key components:
- decompose: Zero-padded four digit decomposition
- stem_segment: The fixed vertical backbone
- GlyphComposer: Composer with a single-entry result cache
- compose: Convenience function using the default canvas
"""

import structlog

from runeglyph.config import CanvasConfig
from runeglyph.core.geometry import project, transform_stroke
from runeglyph.core.places import transform_for_place
from runeglyph.core.strokes import stroke_for_digit
from runeglyph.domain import Glyph, GridPoint, LineSegment, Place

RUNE_MIN_VALUE = 1
RUNE_MAX_VALUE = 9999

STEM_START = GridPoint(1, 0)
STEM_END = GridPoint(1, 3)

logger = structlog.get_logger(__name__)


def is_valid_value(value: int) -> bool:
    """Check if a value can be drawn as a rune."""
    return RUNE_MIN_VALUE <= value <= RUNE_MAX_VALUE


def decompose(value: int) -> tuple[int, int, int, int]:
    """Split a value into its four decimal digits.

    Args:
        value: Value in [1, 9999]

    Returns:
        Digits ordered thousands, hundreds, tens, ones

    Examples:
        >>> decompose(42)
        (0, 0, 4, 2)
    """
    text = f"{value:04d}"
    return (int(text[0]), int(text[1]), int(text[2]), int(text[3]))


def stem_segment(canvas: CanvasConfig) -> LineSegment:
    """Get the stem segment projected onto a canvas."""
    return LineSegment(project(STEM_START, canvas), project(STEM_END, canvas))


class GlyphComposer:
    """Composes rune segments for a value.

    Remembers the most recent value and its segments, so recomposing
    an unchanged value is free. Composing a different value replaces
    the cached entry.

    Example:
        composer = GlyphComposer()
        glyph = composer.compose(1993)
        for segment in glyph.all_segments():
            print(segment.to_dict())
    """

    def __init__(self, canvas: CanvasConfig | None = None) -> None:
        """Initialize the composer.

        Args:
            canvas: Canvas used for projection (default canvas if None)
        """
        self.canvas = canvas or CanvasConfig()
        self._cached_value: int | None = None
        self._cached_segments: tuple[LineSegment, ...] = ()

    def compose_segments(self, value: int) -> list[LineSegment]:
        """Compose the digit segments for a value.

        Segments are ordered by place (thousands first) and, within a
        place, by stroke vertex order. The stem is not included.

        Args:
            value: Value to draw

        Returns:
            List of projected segments, empty for values outside [1, 9999]
        """
        if value == self._cached_value:
            logger.debug("Composer cache hit", value=value)
            return list(self._cached_segments)

        segments = self._build_segments(value)
        self._cached_value = value
        self._cached_segments = tuple(segments)
        return segments

    def compose(self, value: int) -> Glyph:
        """Compose the full rune for a value.

        Args:
            value: Value to draw

        Returns:
            Glyph holding the stem and the digit segments
        """
        return Glyph(
            value=value,
            stem=stem_segment(self.canvas),
            segments=tuple(self.compose_segments(value)),
        )

    def clear_cache(self) -> None:
        """Drop the remembered value and segments."""
        self._cached_value = None
        self._cached_segments = ()

    def _build_segments(self, value: int) -> list[LineSegment]:
        if not is_valid_value(value):
            logger.debug("Value out of range, no segments", value=value)
            return []

        segments: list[LineSegment] = []
        for place, digit in zip(Place, decompose(value)):
            stroke = stroke_for_digit(digit)
            if stroke is None:
                continue

            placed = transform_stroke(stroke, transform_for_place(place))
            for start, end in placed.edges():
                segments.append(
                    LineSegment(project(start, self.canvas), project(end, self.canvas))
                )

        logger.debug("Composed glyph", value=value, segments=len(segments))
        return segments


def compose(value: int, canvas: CanvasConfig | None = None) -> list[LineSegment]:
    """Compose the digit segments for a value without caching.

    Args:
        value: Value to draw
        canvas: Canvas used for projection (default canvas if None)

    Returns:
        List of projected segments, empty for values outside [1, 9999]
    """
    return GlyphComposer(canvas).compose_segments(value)
