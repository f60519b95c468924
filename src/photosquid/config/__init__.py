"""Configuration management for photosquid.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- InteractionOptions: Snapping and grouping of gestures
- AnimationConfig: Ease-out animation length
- HistoryConfig: Undo depth
- ToolConfig: Default shape sizes for drawing tools
- LoggingConfig: Logging settings
- PhotosquidSettings: Main application settings
"""

from photosquid.config.settings import (
    AnimationConfig,
    HistoryConfig,
    InteractionOptions,
    LoggingConfig,
    PhotosquidSettings,
    ToolConfig,
    get_default_settings,
    rotation_snapping_from_degrees,
)

__all__ = [
    "AnimationConfig",
    "HistoryConfig",
    "InteractionOptions",
    "LoggingConfig",
    "PhotosquidSettings",
    "ToolConfig",
    "get_default_settings",
    "rotation_snapping_from_degrees",
]
