"""Command-line interface for photosquid.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Replay of recorded interaction scripts
- Table of the resulting shapes
- Session statistics
- Detailed error reporting
"""

from photosquid.cli.app import cli, main

__all__ = ["cli", "main"]
