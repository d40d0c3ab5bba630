"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from runeglyph.domain import Glyph, Place

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Runeglyph[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_value_info(text: str, value: int, digits: tuple[int, ...]) -> None:
    """Print the parsed value and its place decomposition.

    Args:
        text: Raw input text
        value: Parsed and clamped value
        digits: Digits ordered thousands to ones
    """
    line = Text("  ")
    line.append(str(value), style="bold")
    if text.strip() != str(value):
        line.append(f" (from input '{text}')", style="yellow")
    console.print(line)

    places = f" {SYM_DOT} ".join(
        f"{place.value} {digit}" for place, digit in zip(Place, digits)
    )
    console.print(f"  {places}")


def print_segments_table(glyph: Glyph) -> None:
    """Print every segment of a glyph in draw order.

    Args:
        glyph: Composed rune
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("x1", justify="right")
    table.add_column("y1", justify="right")
    table.add_column("x2", justify="right")
    table.add_column("y2", justify="right")

    for idx, segment in enumerate(glyph.all_segments()):
        label = "stem" if idx == 0 else str(idx)
        table.add_row(
            label,
            f"{segment.start.x:g}",
            f"{segment.start.y:g}",
            f"{segment.end.x:g}",
            f"{segment.end.y:g}",
        )

    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(output_path: str, file_size: str, total_time_s: float, lines: int) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total render time in seconds
        lines: Number of lines drawn, stem included
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)
    console.print(f"  {lines} lines")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
