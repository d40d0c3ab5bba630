"""Runeglyph - Draw numbers as single-stem runes.

Runeglyph is a CLI tool that converts a number between 1 and 9999 into a rune:
a vertical stem with one mirrored stroke pattern per decimal place. Each place
(thousands, hundreds, tens, ones) owns a quadrant of the stem. The result is
exported as an SVG file.

Example:
    $ runeglyph 1993

This will create rune-1993.svg in the current directory.
"""

__version__ = "0.1.0"
__author__ = "Runeglyph Contributors"

__all__ = ["__author__", "__version__"]
