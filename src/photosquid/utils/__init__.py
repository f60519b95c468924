"""Utility functions for photosquid.

This module provides:

- Logging setup and configuration
- Session statistics for the editor
"""

from photosquid.utils.logging import (
    EditorLogger,
    SessionStats,
    configure_logging,
)

__all__ = [
    "EditorLogger",
    "SessionStats",
    "configure_logging",
]
