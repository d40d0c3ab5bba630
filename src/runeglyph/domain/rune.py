"""Core types for rune representation.

This module defines the value types shared by the composer and the exporter:
- GridPoint: A vertex on the canonical 2x3 stroke grid
- PixelPoint: A projected vertex in output pixel space
- Stroke: An ordered polyline for one digit
- LineSegment: A single drawable line between two pixel points
- Glyph: The full set of segments for one value
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from runeglyph.exceptions import StrokeError


@dataclass(frozen=True, slots=True)
class GridPoint:
    """A vertex on the stroke grid.

    Attributes:
        x: Column index (0 to GRID_WIDTH)
        y: Row index (0 to GRID_HEIGHT), growing downward
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class PixelPoint:
    """A point in output pixel space."""

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Stroke:
    """An ordered polyline drawn for one nonzero digit.

    Each consecutive pair of points is one line segment, so a stroke
    always has at least two points.

    Attributes:
        points: Vertices in drawing order
    """

    points: tuple[GridPoint, ...]

    def __post_init__(self) -> None:
        if len(self.points) < 2:
            raise StrokeError(f"expected at least 2 points, got {len(self.points)}")

    @classmethod
    def from_pairs(cls, *pairs: tuple[int, int]) -> "Stroke":
        """Build a stroke from (x, y) tuples.

        Args:
            *pairs: Vertex coordinates in drawing order

        Returns:
            Stroke instance
        """
        return cls(points=tuple(GridPoint(x, y) for x, y in pairs))

    def edges(self) -> Iterator[tuple[GridPoint, GridPoint]]:
        """Iterate over consecutive vertex pairs."""
        return zip(self.points, self.points[1:])

    def to_tuples(self) -> list[tuple[int, int]]:
        """Convert to a list of (x, y) tuples."""
        return [p.to_tuple() for p in self.points]


@dataclass(frozen=True, slots=True)
class LineSegment:
    """A drawable line between two projected points.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: PixelPoint
    end: PixelPoint

    def to_dict(self) -> dict[str, Any]:
        """Serialize using SVG line attribute names.

        Returns:
            Dictionary with x1, y1, x2 and y2
        """
        return {
            "x1": self.start.x,
            "y1": self.start.y,
            "x2": self.end.x,
            "y2": self.end.y,
        }


@dataclass(frozen=True)
class Glyph:
    """The complete rune for one value.

    Attributes:
        value: The number this rune represents
        stem: The vertical backbone shared by every rune
        segments: Digit segments in place order (thousands first)
    """

    value: int
    stem: LineSegment
    segments: tuple[LineSegment, ...]

    def is_empty(self) -> bool:
        """Check if no digit contributed any segment.

        Returns:
            True for out-of-range values, False otherwise
        """
        return len(self.segments) == 0

    def all_segments(self) -> list[LineSegment]:
        """Get every segment in draw order, stem first.

        Returns:
            List of the stem followed by the digit segments
        """
        return [self.stem, *self.segments]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the glyph
        """
        return {
            "value": self.value,
            "stem": self.stem.to_dict(),
            "segments": [s.to_dict() for s in self.segments],
        }
