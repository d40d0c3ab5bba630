"""Command-line interface for runeglyph.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Input parsing with clamping to the rune range
- Segment listing for inspection
- Dry-run mode
- Detailed error reporting
"""

from runeglyph.cli.app import cli, main

__all__ = ["cli", "main"]
