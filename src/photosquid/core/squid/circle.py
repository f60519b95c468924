"""Circle shape."""

from dataclasses import replace

from photosquid.core.behavior import get_delta_rotation
from photosquid.core.render import RenderContext
from photosquid.core.smooth import MultiLerp
from photosquid.core.squid.base import Squid, get_rotate_handle
from photosquid.core.squid.data import CircleData
from photosquid.domain.camera import Camera
from photosquid.domain.capture import ALLOW_DRAG, Capture
from photosquid.domain.color import Color
from photosquid.domain.vec import Vec2


class Circle(Squid):
    """A circle.

    Its rotate handle sits on the rim. Dragging the handle resizes the circle
    and spins the handle (the "virtual rotation") instead of emitting a
    batch rotation, since a circle looks the same at every angle.
    """

    kind_name = "Circle"

    @classmethod
    def create(cls, position: Vec2, radius: float, color: Color, **kwargs) -> "Circle":
        data = CircleData(
            position=MultiLerp.from_value(position),
            radius=radius,
            color=color,
            virtual_rotation=0.0,
        )
        return cls(data, **kwargs)

    def is_point_over(self, mouse_position: Vec2, camera: Camera) -> bool:
        real = self.data.get_real()
        point = camera.apply_reverse(mouse_position)
        return real.position.reveal().distance(point) < abs(real.radius)

    def get_rotate_handle(self, camera: Camera) -> Vec2:
        animated = self.data.get_animated()
        return get_rotate_handle(
            animated.position.reveal(), animated.virtual_rotation, animated.radius, camera
        )

    def get_limb_handles(self, camera: Camera) -> list[Vec2]:
        return []

    def capture_size(self, data: CircleData) -> float:
        return data.radius

    def scaled(self, data: CircleData, total_scale_factor: float) -> CircleData:
        return replace(data, radius=self.prescale_size * total_scale_factor)

    def rotated_by(self, data: CircleData, delta_theta: float) -> CircleData:
        return replace(data, virtual_rotation=data.virtual_rotation + delta_theta)

    def rotate_drag(self, mouse_position: Vec2, camera: Camera) -> Capture:
        real = self.data.get_real()
        center = real.position.reveal()
        delta = get_delta_rotation(
            center, real.virtual_rotation, mouse_position, self.rotation_accumulator, camera
        )
        self.data.set(
            replace(
                real,
                virtual_rotation=real.virtual_rotation + delta,
                radius=center.distance(camera.apply_reverse(mouse_position)),
            )
        )
        return ALLOW_DRAG

    def render(self, ctx: RenderContext) -> None:
        animated = self.data.get_animated()
        ctx.draw_circle(
            self.get_name(),
            animated.position.reveal(),
            animated.radius,
            animated.virtual_rotation,
            animated.color,
        )

    def clone(self) -> "Circle":
        return Circle(
            self.data.get_real(),
            name=self.name,
            duration=self.data.duration,
            clock=self.data.clock,
            created=self.created,
        )
