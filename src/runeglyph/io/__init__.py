"""Input and output layer for runeglyph.

This module handles the edges of the pipeline: turning user text into
a rune value and writing composed runes to SVG files with svgwrite.

Key responsibilities:
- Reject non-numeric input, default empty input, clamp to [1, 9999]
- Serialize glyph segments as SVG <line> elements
- Name exported files rune-<value>.svg

Key classes and functions:
- parse_value: Parse user text into a rune value
- SvgWriter: Build and save SVG documents
"""

from runeglyph.io.parser import clamp_value, parse_value
from runeglyph.io.writer import SVG_MIME_TYPE, SvgWriter, export_filename

__all__ = [
    "SVG_MIME_TYPE",
    "SvgWriter",
    "clamp_value",
    "export_filename",
    "parse_value",
]
