"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

import math

from rich.console import Console
from rich.table import Table
from rich.text import Text

from photosquid.core.ocean import Ocean
from photosquid.core.squid import Circle, Rect, Squid, Tri
from photosquid.utils.logging import SessionStats

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
    console.print(f"\n[bold]Photosquid[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_script_info(script_path: str, event_count: int) -> None:
    """Print interaction script information.

    Args:
        script_path: Path to the script file
        event_count: Number of events in the script
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(script_path)
    console.print(line)
    console.print(f"  {event_count:,} events")


def _format_size(squid: Squid) -> str:
    real = squid.get_real()
    if isinstance(squid, Circle):
        return f"r={real.radius:.1f}"
    if isinstance(squid, Rect):
        return f"{real.size.x:.1f} x {real.size.y:.1f}"
    if isinstance(squid, Tri):
        extent = max(point.magnitude() for point in real.revealed_points())
        return f"extent={extent:.1f}"
    return "-"


def _format_rotation(squid: Squid) -> str:
    real = squid.get_real()
    if isinstance(squid, Circle):
        rotation = real.virtual_rotation
    elif isinstance(squid, Tri):
        rotation = real.rotation + squid.virtual_rotation
    else:
        rotation = real.rotation
    return f"{math.degrees(rotation):.1f}°"


def print_shapes(ocean: Ocean) -> None:
    """Print the shapes of a document oldest-first as a table.

    Args:
        ocean: Document to describe
    """
    if len(ocean) == 0:
        console.print("  No shapes")
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Position", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Rotation", justify="right")
    table.add_column("Color")

    for i, (_, squid) in enumerate(ocean.get_squids_lowest(), start=1):
        center = squid.get_real().position.reveal()
        table.add_row(
            str(i),
            squid.get_name(),
            f"({center.x:.1f}, {center.y:.1f})",
            _format_size(squid),
            _format_rotation(squid),
            squid.get_color().to_hex(),
        )

    console.print(table)


def print_summary(stats: SessionStats, shape_count: int) -> None:
    """Print session summary.

    Args:
        stats: Statistics gathered while replaying
        shape_count: Shapes left in the document
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    console.print(
        f"  {stats.events_dispatched} events {SYM_DOT} {shape_count} shapes {SYM_DOT} "
        f"{stats.shapes_created} created {SYM_DOT} {stats.shapes_deleted} deleted"
    )
    console.print(
        f"  {stats.history_pushes} history markers {SYM_DOT} "
        f"{stats.undo_count} undo {SYM_DOT} {stats.redo_count} redo"
    )
    if stats.captures:
        captures = f" {SYM_DOT} ".join(
            f"{name} {count}" for name, count in stats.captures.most_common()
        )
        console.print(f"  {captures}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
