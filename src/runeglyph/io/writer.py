"""SVG writer for composed runes.

This module provides the SvgWriter class, which serializes a Glyph into
an SVG document with svgwrite and saves it under the rune naming
convention.
"""

from pathlib import Path

import structlog
import svgwrite

from runeglyph.config import RuneSettings
from runeglyph.domain import Glyph
from runeglyph.exceptions import ExportError

SVG_MIME_TYPE = "image/svg+xml"
DEFAULT_FILENAME_TEMPLATE = "rune-{value}.svg"

logger = structlog.get_logger(__name__)


def export_filename(value: int, template: str = DEFAULT_FILENAME_TEMPLATE) -> str:
    """Build the file name for an exported rune.

    Args:
        value: Rune value
        template: Name template containing a {value} field

    Returns:
        File name, e.g. "rune-1993.svg"
    """
    return template.format(value=value)


class SvgWriter:
    """Writes composed runes as SVG documents.

    Every segment becomes one <line> element, stem first, all sharing
    the stroke style from the settings.

    Example:
        writer = SvgWriter(settings)
        path = writer.save(composer.compose(1993))
    """

    def __init__(self, settings: RuneSettings | None = None) -> None:
        """Initialize the writer.

        Args:
            settings: Canvas, style and export settings (defaults if None)
        """
        self._settings = settings or RuneSettings()

    def build(self, glyph: Glyph) -> svgwrite.Drawing:
        """Build an SVG drawing for a glyph.

        Args:
            glyph: Composed rune

        Returns:
            Drawing sized to the configured canvas
        """
        canvas = self._settings.canvas
        style = self._settings.style

        drawing = svgwrite.Drawing(
            size=(canvas.width, canvas.height),
            viewBox=canvas.view_box,
        )
        for segment in glyph.all_segments():
            drawing.add(
                drawing.line(
                    start=segment.start.to_tuple(),
                    end=segment.end.to_tuple(),
                    stroke=style.stroke,
                    stroke_width=style.stroke_width,
                    stroke_linecap=style.linecap.value,
                )
            )
        return drawing

    def to_string(self, glyph: Glyph) -> str:
        """Serialize a glyph to SVG markup.

        Args:
            glyph: Composed rune

        Returns:
            SVG document as a string
        """
        return self.build(glyph).tostring()

    def get_output_path(self, value: int, output_dir: Path | None = None) -> Path:
        """Generate the default output path for a value.

        Args:
            value: Rune value
            output_dir: Target directory (configured directory if None)

        Returns:
            Path of the form <dir>/rune-<value>.svg
        """
        export = self._settings.export
        directory = output_dir if output_dir is not None else export.output_dir
        return directory / export_filename(value, export.filename_template)

    def save(
        self,
        glyph: Glyph,
        output_path: Path | None = None,
        output_dir: Path | None = None,
    ) -> Path:
        """Save a glyph as an SVG file.

        Args:
            glyph: Composed rune
            output_path: Explicit file path (overrides output_dir)
            output_dir: Directory for the default file name

        Returns:
            Path of the written file

        Raises:
            ExportError: If the glyph has no digit segments or the file
                cannot be written
        """
        path = output_path or self.get_output_path(glyph.value, output_dir)

        if glyph.is_empty():
            raise ExportError(str(path), f"value {glyph.value} is outside the rune range")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self.build(glyph).saveas(str(path), pretty=True)
        except OSError as e:
            raise ExportError(str(path), str(e)) from e

        logger.info("Rune exported", value=glyph.value, path=str(path), mime=SVG_MIME_TYPE)
        return path
