"""Configuration management for runeglyph.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CanvasConfig: Output surface size and grid projection
- StyleConfig: Line styling for exported runes
- ExportConfig: Output location and file naming
- LoggingConfig: Logging settings
- RuneSettings: Main application settings
"""

from runeglyph.config.settings import (
    CanvasConfig,
    ExportConfig,
    LineCap,
    LoggingConfig,
    RuneSettings,
    StyleConfig,
    get_default_settings,
)

__all__ = [
    "CanvasConfig",
    "ExportConfig",
    "LineCap",
    "LoggingConfig",
    "RuneSettings",
    "StyleConfig",
    "get_default_settings",
]
