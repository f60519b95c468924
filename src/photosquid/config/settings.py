"""Configuration settings for Photosquid."""

import math
from pathlib import Path

from pydantic import BaseModel, Field

from photosquid.domain.vec import Vec2


def rotation_snapping_from_degrees(degrees: float) -> float:
    """Convert a snapping step in degrees to radians, clamping negatives to 0."""
    return math.radians(max(0.0, degrees))


class InteractionOptions(BaseModel):
    """Options that shape how pointer gestures become edits."""

    translation_snapping: float = Field(
        default=1.0,
        ge=0.0,
        description="Translation snapping step in world units (0 = off)",
    )
    rotation_snapping: float = Field(
        default=0.0,
        ge=0.0,
        description="Rotation snapping step in radians (0 = off)",
    )
    duplication_offset: tuple[float, float] = Field(
        default=(0.0, 0.0),
        description="World-space offset applied to duplicated shapes",
    )
    treat_selection_as_group: bool = Field(
        default=False,
        description="Apply grab/rotate/scale to the selection as a group",
    )

    def get_duplication_offset(self) -> Vec2:
        """Get the duplication offset as a vector."""
        return Vec2(*self.duplication_offset)


class AnimationConfig(BaseModel):
    """Configuration for eased animation."""

    smooth_duration_ms: int = Field(
        default=500,
        gt=0,
        le=10_000,
        description="Length of the ease-out animation after each edit",
    )

    @property
    def smooth_duration(self) -> float:
        """Animation length in seconds."""
        return self.smooth_duration_ms / 1000.0


class HistoryConfig(BaseModel):
    """Configuration for undo history."""

    max_entries: int = Field(
        default=100,
        ge=2,
        le=10_000,
        description="Maximum number of undo snapshots kept",
    )


class ToolConfig(BaseModel):
    """Default sizes of newly drawn shapes."""

    circle_radius: float = Field(
        default=50.0,
        gt=0.0,
        description="Radius of new circles",
    )
    rect_width: float = Field(
        default=100.0,
        gt=0.0,
        description="Width of new rectangles",
    )
    rect_height: float = Field(
        default=100.0,
        gt=0.0,
        description="Height of new rectangles",
    )
    tri_half_extent: float = Field(
        default=50.0,
        gt=0.0,
        description="Half of the width and height of new triangles",
    )
    color: str = Field(
        default="#FFFFFF",
        description="Hex color of new shapes",
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


class PhotosquidSettings(BaseModel):
    """Main application settings."""

    interaction: InteractionOptions = Field(default_factory=InteractionOptions)
    animation: AnimationConfig = Field(default_factory=AnimationConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    tools: ToolConfig = Field(default_factory=ToolConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PhotosquidSettings:
    """Get default application settings."""
    return PhotosquidSettings()
