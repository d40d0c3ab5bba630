"""Logging utilities for Runeglyph."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path

import structlog

# Marks handlers installed here so reconfiguring replaces them
_HANDLER_TAG = "_runeglyph_handler"


@dataclass
class RenderStats:
    """Statistics from a render run."""

    composed_count: int = 0
    exported_count: int = 0
    segment_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate render duration."""
        if self.start_time is not None and self.end_time is not None:
            return self.end_time - self.start_time
        return 0.0


def _tag(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG, True)
    return handler


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(_tag(file_handler))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(_tag(console_handler))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("runeglyph")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking composed and exported runes."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def start(self) -> None:
        """Mark the start of a render run."""
        self._stats.start_time = time.time()

    def finish(self) -> None:
        """Mark the end of a render run."""
        self._stats.end_time = time.time()

    def log_value_parsed(self, text: str, value: int) -> None:
        """Log the value derived from user input."""
        if str(value) != text.strip():
            self._logger.info("Input adjusted", text=text, value=value)
        else:
            self._logger.debug("Input parsed", value=value)

    def log_glyph_composed(
        self,
        value: int,
        digits: tuple[int, ...],
        segments: int,
    ) -> None:
        """Log a composed glyph."""
        self._logger.debug(
            "Glyph composed",
            value=value,
            digits="".join(str(d) for d in digits),
            segments=segments,
        )
        self._stats.composed_count += 1
        self._stats.segment_count += segments

    def log_glyph_exported(self, value: int, path: Path) -> None:
        """Log a written SVG file."""
        self._logger.info("Glyph exported", value=value, path=str(path))
        self._stats.exported_count += 1

    def log_export_error(self, value: int, error: Exception) -> None:
        """Log a failed export."""
        self._logger.error(
            "Glyph export failed",
            value=value,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
