"""Configuration settings for Runeglyph."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class LineCap(str, Enum):
    """SVG stroke-linecap value."""

    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class CanvasConfig(BaseModel):
    """Output surface and grid-to-pixel projection.

    The default canvas holds a 2x3 grid of 50px cells with 20px padding,
    leaving room for the stroke caps at the edges.
    """

    width: int = Field(
        default=140,
        ge=1,
        description="Canvas width in pixels",
    )
    height: int = Field(
        default=200,
        ge=1,
        description="Canvas height in pixels",
    )
    cell_size: int = Field(
        default=50,
        ge=1,
        le=1000,
        description="Size of one grid cell in pixels",
    )
    padding: int = Field(
        default=20,
        ge=0,
        le=1000,
        description="Offset of the grid origin from the canvas edge in pixels",
    )

    @property
    def view_box(self) -> str:
        """SVG viewBox attribute covering the whole canvas."""
        return f"0 0 {self.width} {self.height}"

    def scaled(self, factor: float) -> "CanvasConfig":
        """Get a copy with every dimension multiplied by factor.

        Args:
            factor: Scale factor, must be positive

        Returns:
            New CanvasConfig with rounded pixel dimensions
        """
        if factor <= 0:
            raise ValueError(f"Scale factor must be positive, got {factor}")
        return CanvasConfig(
            width=max(1, round(self.width * factor)),
            height=max(1, round(self.height * factor)),
            cell_size=max(1, round(self.cell_size * factor)),
            padding=round(self.padding * factor),
        )


class StyleConfig(BaseModel):
    """Line styling applied to every rune segment."""

    stroke: str = Field(
        default="black",
        min_length=1,
        description="Stroke colour",
    )
    stroke_width: float = Field(
        default=4,
        gt=0,
        le=100,
        description="Stroke width in pixels",
    )
    linecap: LineCap = Field(
        default=LineCap.ROUND,
        description="Stroke line cap",
    )


class ExportConfig(BaseModel):
    """Configuration for SVG export."""

    output_dir: Path = Field(
        default=Path("."),
        description="Directory for exported files",
    )
    filename_template: str = Field(
        default="rune-{value}.svg",
        description="Output file name, formatted with the rune value",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class RuneSettings(BaseModel):
    """Main application settings."""

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    style: StyleConfig = Field(default_factory=StyleConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RuneSettings:
    """Get default application settings."""
    return RuneSettings()
