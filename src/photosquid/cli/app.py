"""CLI application entry point for photosquid.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from photosquid import __version__
from photosquid.cli.output import (
    console,
    print_error,
    print_header,
    print_script_info,
    print_shapes,
    print_step,
    print_summary,
)
from photosquid.config import (
    InteractionOptions,
    LoggingConfig,
    PhotosquidSettings,
    rotation_snapping_from_degrees,
)
from photosquid.exceptions import PhotosquidError, ScriptFormatError, ScriptLoadError
from photosquid.io import ScriptRunner, load_script
from photosquid.utils.logging import EditorLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="photosquid",
    help="Replay recorded interaction scripts through the photosquid shape editor.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Photosquid[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Photosquid shape editor tools."""


@app.command()
def replay(
    script: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON interaction script",
            show_default=False,
        ),
    ],
    translation_snap: Annotated[
        float,
        typer.Option(
            "--translation-snap",
            help="Translation snapping in world units (0 disables)",
            min=0.0,
        ),
    ] = 1.0,
    rotation_snap_deg: Annotated[
        float,
        typer.Option(
            "--rotation-snap-deg",
            help="Rotation snapping in degrees (0 disables)",
            min=0.0,
        ),
    ] = 0.0,
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
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Replay an interaction script and print the resulting shapes.

    The script is a JSON list of input events (click, drag, release, key,
    scroll, tool, wait). Time only passes on "wait" events.

    Example:
        photosquid replay session.json
    """
    try:
        settings = PhotosquidSettings(
            interaction=InteractionOptions(
                translation_snapping=translation_snap,
                rotation_snapping=rotation_snapping_from_degrees(rotation_snap_deg),
            ),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level.upper(),
            ),
        )
    except ValidationError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )

        if not quiet:
            print_step("Loading script")

        events = load_script(script)

        if not quiet:
            print_script_info(str(script), len(events))
            print_step("Replaying")

        editor_logger = EditorLogger(logger)
        editor = ScriptRunner(settings, editor_logger).run(events)
        logger.info("Replay finished", events=len(events), shapes=len(editor.ocean))

        if not quiet:
            print_shapes(editor.ocean)
            print_summary(editor_logger.stats, len(editor.ocean))

    except ScriptLoadError as e:
        print_error(f"Could not load script: {e.reason}")
        raise typer.Exit(code=1)
    except ScriptFormatError as e:
        print_error("Invalid script", details=e.details)
        raise typer.Exit(code=1)
    except PhotosquidError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
