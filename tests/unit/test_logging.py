"""Tests for render statistics and the render logger."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from runeglyph.utils.logging import RenderLogger, RenderStats


@pytest.fixture
def render_logger() -> RenderLogger:
    """Create a render logger over a mock structlog logger."""
    return RenderLogger(MagicMock())


class TestRenderStats:
    """Tests for RenderStats."""

    def test_defaults(self) -> None:
        """Test a fresh run has zero counts and no duration."""
        stats = RenderStats()
        assert (stats.composed_count, stats.exported_count, stats.segment_count) == (0, 0, 0)
        assert stats.duration_seconds == 0.0

    def test_duration(self) -> None:
        """Test duration from start and end times."""
        assert RenderStats(start_time=10.0, end_time=10.25).duration_seconds == 0.25

    def test_duration_needs_end(self) -> None:
        """Test an unfinished run reports no duration."""
        assert RenderStats(start_time=10.0).duration_seconds == 0.0


class TestRenderLogger:
    """Tests for RenderLogger counters."""

    def test_compose_counts(self, render_logger: RenderLogger) -> None:
        """Test composed glyphs and their segments are counted."""
        render_logger.log_glyph_composed(1993, (1, 9, 9, 3), 8)
        render_logger.log_glyph_composed(7, (0, 0, 0, 7), 2)
        assert render_logger.stats.composed_count == 2
        assert render_logger.stats.segment_count == 10

    def test_export_counts(self, render_logger: RenderLogger) -> None:
        """Test exports are counted and logged."""
        render_logger.log_glyph_exported(7, Path("rune-7.svg"))
        assert render_logger.stats.exported_count == 1
        render_logger._logger.info.assert_called_once_with(
            "Glyph exported", value=7, path="rune-7.svg"
        )

    def test_export_error_not_counted(self, render_logger: RenderLogger) -> None:
        """Test failed exports are logged without counting."""
        render_logger.log_export_error(7, OSError("disk full"))
        assert render_logger.stats.exported_count == 0
        render_logger._logger.error.assert_called_once()

    def test_start_finish_timing(self, render_logger: RenderLogger) -> None:
        """Test start and finish record a non-negative duration."""
        render_logger.start()
        render_logger.finish()
        stats = render_logger.stats
        assert stats.start_time is not None
        assert stats.end_time is not None
        assert stats.duration_seconds >= 0.0

    def test_adjusted_input_logged(self, render_logger: RenderLogger) -> None:
        """Test clamped input is logged at info level."""
        render_logger.log_value_parsed("12345", 9999)
        render_logger._logger.info.assert_called_once_with(
            "Input adjusted", text="12345", value=9999
        )
