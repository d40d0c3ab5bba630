"""CLI application entry point for runeglyph.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from runeglyph import __version__
from runeglyph.cli.output import (
    SYM_OK,
    console,
    print_error,
    print_header,
    print_segments_table,
    print_step,
    print_success,
    print_value_info,
)
from runeglyph.config import (
    CanvasConfig,
    ExportConfig,
    LineCap,
    LoggingConfig,
    RuneSettings,
    StyleConfig,
)
from runeglyph.core import GlyphComposer, decompose
from runeglyph.exceptions import ExportError, InvalidInputError, RuneError
from runeglyph.io import SvgWriter, parse_value
from runeglyph.utils import RenderLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="runeglyph",
    help="Draw a number between 1 and 9999 as a single-stem rune and export it as SVG.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Runeglyph[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    value_text: Annotated[
        str,
        typer.Argument(
            metavar="VALUE",
            help="Number to draw (1-9999, larger values are clamped)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: rune-{value}.svg)",
        ),
    ] = None,
    output_dir: Annotated[
        Path,
        typer.Option(
            "--output-dir",
            "-d",
            help="Directory for the default output file name",
        ),
    ] = Path("."),
    scale: Annotated[
        float,
        typer.Option(
            "--scale",
            "-s",
            help="Scale factor for canvas, cell size and padding",
            min=0.1,
            max=20.0,
        ),
    ] = 1.0,
    stroke_width: Annotated[
        float,
        typer.Option(
            "--stroke-width",
            "-w",
            help="Line width in pixels",
            min=0.1,
            max=100.0,
        ),
    ] = 4.0,
    stroke: Annotated[
        str,
        typer.Option(
            "--stroke",
            help="Line colour",
        ),
    ] = "black",
    linecap: Annotated[
        str,
        typer.Option(
            "--linecap",
            help="Line cap style (butt|round|square)",
        ),
    ] = "round",
    show_segments: Annotated[
        bool,
        typer.Option(
            "--show-segments",
            help="Print every line segment",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Compose the rune without writing a file",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Draw a number as a rune and export it as SVG.

    Each decimal place is drawn in its own quadrant of a shared vertical
    stem: ones top right, tens bottom right, hundreds top left, thousands
    bottom left.

    Example:
        runeglyph 1993

    This will create rune-1993.svg in the current directory.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate linecap argument
    try:
        cap = LineCap(linecap.lower())
    except ValueError:
        print_error(
            f"Invalid linecap: {linecap}",
            details="Valid values: butt, round, square",
        )
        raise typer.Exit(code=1)

    settings = RuneSettings(
        canvas=CanvasConfig().scaled(scale),
        style=StyleConfig(
            stroke=stroke,
            stroke_width=stroke_width,
            linecap=cap,
        ),
        export=ExportConfig(output_dir=output_dir),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    render_logger = RenderLogger(logger)
    render_logger.start()

    if not quiet:
        print_header(__version__)

    try:
        value = parse_value(value_text)
        render_logger.log_value_parsed(value_text, value)

        composer = GlyphComposer(settings.canvas)
        glyph = composer.compose(value)
        digits = decompose(value)
        render_logger.log_glyph_composed(value, digits, len(glyph.segments))

        if not quiet:
            print_step("Composing rune")
            print_value_info(value_text, value, digits)
            if show_segments or verbose:
                print_segments_table(glyph)

        if dry_run:
            if not quiet:
                console.print(
                    f"\n[bold green]{SYM_OK} Dry run complete[/bold green] – no file written"
                )
            raise typer.Exit(code=0)

        writer = SvgWriter(settings)
        try:
            path = writer.save(glyph, output_path=output)
        except ExportError as e:
            render_logger.log_export_error(value, e)
            raise
        render_logger.log_glyph_exported(value, path)
        render_logger.finish()
        stats = render_logger.stats

        if not quiet:
            print_success(
                output_path=str(path),
                file_size=_format_file_size(path),
                total_time_s=stats.duration_seconds,
                # one stem per composed glyph
                lines=stats.segment_count + stats.composed_count,
            )
        else:
            console.print(str(path), soft_wrap=True)

    except InvalidInputError as e:
        print_error(f"Could not read value: {e.text!r}", details=e.reason)
        raise typer.Exit(code=1)
    except ExportError as e:
        print_error(f"Could not export rune: {e.reason}")
        raise typer.Exit(code=1)
    except RuneError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "1 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    return f"{size_bytes / 1024:.0f} KB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
