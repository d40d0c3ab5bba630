"""Utility functions for runeglyph.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics for the CLI summary
"""

from runeglyph.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
