"""Rectangle shape."""

import math
from dataclasses import replace
from enum import Enum

from photosquid.core.behavior import get_delta_rotation
from photosquid.core.geometry import is_point_inside_rectangle
from photosquid.core.render import RenderContext
from photosquid.core.smooth import MultiLerp
from photosquid.core.squid.base import (
    HANDLE_RADIUS,
    ROTATE_HANDLE_MARGIN,
    Squid,
    get_rotate_handle,
)
from photosquid.core.squid.data import BorderRadii, RectData
from photosquid.domain.camera import Camera
from photosquid.domain.capture import Capture, RotateSelected
from photosquid.domain.color import Color
from photosquid.domain.interaction import Drag
from photosquid.domain.vec import Vec2


class Corner(Enum):
    """Rectangle corners in cyclic order."""

    XY = 0
    ZERO_Y = 1
    ZERO_ZERO = 2
    X_ZERO = 3

    @property
    def sign(self) -> Vec2:
        """Direction of the corner from the center, in the unrotated frame."""
        return _CORNER_SIGNS[self]

    def opposite(self) -> "Corner":
        return Corner((self.value + 2) % 4)


_CORNER_SIGNS = {
    Corner.XY: Vec2(1.0, 1.0),
    Corner.ZERO_Y: Vec2(-1.0, 1.0),
    Corner.ZERO_ZERO: Vec2(-1.0, -1.0),
    Corner.X_ZERO: Vec2(1.0, -1.0),
}


class Rect(Squid):
    """A rotatable rectangle.

    Dragging a corner resizes the rectangle while the opposite corner stays
    put. With Alt held the center stays put instead.
    """

    kind_name = "Rect"

    def __init__(self, data: RectData, **kwargs) -> None:
        super().__init__(data, **kwargs)
        self.moving_corner: Corner | None = None
        self.opposite_corner_position: Vec2 | None = None

    @classmethod
    def create(
        cls,
        position: Vec2,
        size: Vec2,
        rotation: float,
        color: Color,
        radii: float = 0.0,
        is_viewport: bool = False,
        **kwargs,
    ) -> "Rect":
        data = RectData(
            position=MultiLerp.from_value(position),
            size=size,
            color=color,
            rotation=rotation,
            radii=BorderRadii.uniform(radii),
            is_viewport=is_viewport,
        )
        return cls(data, **kwargs)

    def get_name(self) -> str:
        if self.name is None and self.data.get_animated().is_viewport:
            return "Unnamed Viewport"
        return super().get_name()

    def as_viewport(self) -> RectData | None:
        """Get the real snapshot if this rectangle is a viewport."""
        real = self.data.get_real()
        return real if real.is_viewport else None

    def get_relative_corners(self) -> list[Vec2]:
        """Corner offsets from the center, rotated, in cyclic order."""
        animated = self.data.get_animated()
        half_size = animated.size * 0.5
        return [corner.sign.component_mul(half_size).rotated(-animated.rotation) for corner in Corner]

    def get_world_corners(self) -> list[Vec2]:
        position = self.data.get_animated().position.reveal()
        return [position + corner for corner in self.get_relative_corners()]

    def get_limb_handles(self, camera: Camera) -> list[Vec2]:
        return [camera.apply(corner) for corner in self.get_world_corners()]

    def is_point_over(self, mouse_position: Vec2, camera: Camera) -> bool:
        underneath = camera.apply_reverse(mouse_position)
        a, b, c, d = self.get_world_corners()
        return is_point_inside_rectangle(a, b, c, d, underneath)

    def get_rotate_handle(self, camera: Camera) -> Vec2:
        animated = self.data.get_animated()
        width = animated.size.x
        distance = width * 0.5 + math.copysign(ROTATE_HANDLE_MARGIN, width)
        return get_rotate_handle(animated.position.reveal(), animated.rotation, distance, camera)

    def grab_limb(self, mouse_position: Vec2, camera: Camera) -> bool:
        for corner, screen_corner in zip(Corner, self.get_limb_handles(camera)):
            if mouse_position.distance(screen_corner) <= HANDLE_RADIUS * 2.0:
                self.moving_corner = corner
                self.opposite_corner_position = self.get_world_corners()[corner.opposite().value]
                return True
        return False

    def drag_limb(self, drag: Drag, camera: Camera) -> bool:
        if self.moving_corner is None:
            return False
        self.reposition_corner(drag.current, camera, from_center=drag.modifiers.alt)
        return True

    def release_limbs(self) -> None:
        self.moving_corner = None
        self.opposite_corner_position = None

    def reposition_corner(self, mouse: Vec2, camera: Camera, from_center: bool = False) -> None:
        """Move the held corner to follow the mouse.

        Args:
            mouse: Screen-space mouse position
            camera: Current camera
            from_center: Keep the center fixed instead of the opposite corner
        """
        if self.moving_corner is None:
            return

        real = self.data.get_real()
        mouse_in_world = camera.apply_reverse(mouse)
        flip = -self.moving_corner.sign

        if from_center or self.opposite_corner_position is None:
            frame_vector = (real.position.reveal() - mouse_in_world).rotated(real.rotation)
            self.data.set(replace(real, size=(frame_vector * 2.0).component_mul(flip)))
            return

        pivot = self.opposite_corner_position
        frame_vector = (pivot - mouse_in_world).rotated(real.rotation)
        self.data.set(
            replace(
                real,
                position=MultiLerp.linear((mouse_in_world + pivot) * 0.5),
                size=frame_vector.component_mul(flip),
            )
        )

    def rotate_drag(self, mouse_position: Vec2, camera: Camera) -> Capture:
        # A negative width puts the rotate handle on the far side
        compensation = math.pi if self.data.get_animated().size.x < 0 else 0.0
        real = self.data.get_real()
        return RotateSelected(
            get_delta_rotation(
                real.position.reveal(),
                real.rotation + compensation,
                mouse_position,
                self.rotation_accumulator,
                camera,
            )
        )

    def capture_size(self, data: RectData) -> Vec2:
        return data.size

    def scaled(self, data: RectData, total_scale_factor: float) -> RectData:
        return replace(data, size=self.prescale_size * total_scale_factor)

    def rotated_by(self, data: RectData, delta_theta: float) -> RectData:
        return replace(data, rotation=data.rotation + delta_theta)

    def render(self, ctx: RenderContext) -> None:
        animated = self.data.get_animated()
        ctx.draw_rect(
            self.get_name(),
            animated.position.reveal(),
            animated.size,
            animated.rotation,
            animated.color,
            animated.is_viewport,
        )

    def clone(self) -> "Rect":
        return Rect(
            self.data.get_real(),
            name=self.name,
            duration=self.data.duration,
            clock=self.data.clock,
            created=self.created,
        )
