"""Grid reflections and canvas projection.

This module provides the coordinate transforms used to place a stroke:
- Point reflections across the grid centerlines
- Application of a place's reflection descriptor
- Linear projection from grid cells to output pixels

All functions are pure and stateless.
"""

from runeglyph.config import CanvasConfig
from runeglyph.domain import GridPoint, PixelPoint, PlaceTransform, Stroke

GRID_WIDTH = 2
GRID_HEIGHT = 3


def reflect_horizontal(point: GridPoint) -> GridPoint:
    """Mirror a point across the vertical centerline of the grid.

    Args:
        point: Point to reflect

    Returns:
        Reflected point

    Examples:
        >>> reflect_horizontal(GridPoint(2, 0))
        GridPoint(x=0, y=0)
        >>> reflect_horizontal(GridPoint(1, 1))
        GridPoint(x=1, y=1)
    """
    return GridPoint(GRID_WIDTH - point.x, point.y)


def reflect_vertical(point: GridPoint) -> GridPoint:
    """Mirror a point across the horizontal centerline of the grid.

    Args:
        point: Point to reflect

    Returns:
        Reflected point

    Examples:
        >>> reflect_vertical(GridPoint(2, 0))
        GridPoint(x=2, y=3)
    """
    return GridPoint(point.x, GRID_HEIGHT - point.y)


def apply_transform(point: GridPoint, transform: PlaceTransform) -> GridPoint:
    """Apply a place's reflections to a single point.

    Horizontal reflection is applied before vertical reflection. The two
    act on separate axes of the grid, but the order is kept fixed so
    results stay stable if the grid transforms ever become coupled.

    Args:
        point: Point in the canonical quadrant
        transform: Reflection flags for the place

    Returns:
        Point relocated into the place's quadrant
    """
    if transform.flip_horizontal:
        point = reflect_horizontal(point)
    if transform.flip_vertical:
        point = reflect_vertical(point)
    return point


def transform_stroke(stroke: Stroke, transform: PlaceTransform) -> Stroke:
    """Apply a place's reflections to every vertex of a stroke.

    Args:
        stroke: Canonical stroke
        transform: Reflection flags for the place

    Returns:
        New stroke with vertex order preserved
    """
    if transform.is_identity:
        return stroke
    return Stroke(points=tuple(apply_transform(p, transform) for p in stroke.points))


def project(point: GridPoint, canvas: CanvasConfig | None = None) -> PixelPoint:
    """Project a grid point into pixel space.

    Args:
        point: Grid point (canonical or reflected)
        canvas: Canvas providing padding and cell size (default canvas if None)

    Returns:
        Pixel point at padding + coordinate * cell_size on each axis

    Examples:
        >>> project(GridPoint(1, 3))
        PixelPoint(x=70, y=170)
    """
    canvas = canvas or CanvasConfig()
    return PixelPoint(
        canvas.padding + point.x * canvas.cell_size,
        canvas.padding + point.y * canvas.cell_size,
    )
