"""Drawing interface shapes render through.

Shapes never draw pixels themselves. They hand their animated snapshot to
a ``RenderContext``, which may be an OpenGL backend, an SVG builder or
the table renderer used by the command line.
"""

from typing import Protocol

from photosquid.domain.camera import Camera
from photosquid.domain.color import Color
from photosquid.domain.vec import Vec2


class RenderContext(Protocol):
    """Receiver of draw calls, in world space unless stated otherwise."""

    camera: Camera

    def draw_circle(
        self, name: str, center: Vec2, radius: float, rotation: float, color: Color
    ) -> None: ...

    def draw_rect(
        self,
        name: str,
        center: Vec2,
        size: Vec2,
        rotation: float,
        color: Color,
        is_viewport: bool,
    ) -> None: ...

    def draw_triangle(
        self, name: str, points: tuple[Vec2, Vec2, Vec2], rotation: float, color: Color
    ) -> None: ...

    def draw_handle(self, screen_position: Vec2) -> None:
        """Draw a selection handle at a screen-space position."""
        ...
