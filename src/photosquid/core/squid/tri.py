"""Triangle shape."""

from dataclasses import replace

from photosquid.core.behavior import get_delta_rotation
from photosquid.core.geometry import (
    get_distance_between_point_and_triangle,
    get_triangle_center,
    is_point_inside_triangle,
)
from photosquid.core.render import RenderContext
from photosquid.core.smooth import MultiLerp
from photosquid.core.squid.base import (
    HANDLE_RADIUS,
    ROTATE_HANDLE_MARGIN,
    Squid,
    get_rotate_handle,
)
from photosquid.core.squid.data import TriData
from photosquid.domain.camera import Camera
from photosquid.domain.capture import Capture, RotateSelected
from photosquid.domain.color import Color
from photosquid.domain.interaction import Drag
from photosquid.domain.vec import Vec2


def world_points(data: TriData) -> tuple[Vec2, Vec2, Vec2]:
    """Vertices of a triangle snapshot in world space."""
    position = data.position.reveal()
    p1, p2, p3 = (point.rotated(-data.rotation) + position for point in data.revealed_points())
    return (p1, p2, p3)


class Tri(Squid):
    """A triangle stored as vertex offsets around its centroid.

    Dragging a vertex re-centers the triangle and folds its rotation into
    the vertex offsets. The rotation is kept on as ``virtual_rotation`` so
    the rotate handle stays where the user left it.
    """

    kind_name = "Tri"

    def __init__(self, data: TriData, *, virtual_rotation: float = 0.0, **kwargs) -> None:
        super().__init__(data, **kwargs)
        self.moving_point: int | None = None
        self.virtual_rotation = virtual_rotation

    @classmethod
    def create(
        cls,
        points: tuple[Vec2, Vec2, Vec2],
        rotation: float,
        color: Color,
        **kwargs,
    ) -> "Tri":
        center = get_triangle_center(*points)
        p1, p2, p3 = (MultiLerp.from_value(point - center) for point in points)
        data = TriData(
            points=(p1, p2, p3),
            position=MultiLerp.from_value(center),
            color=color,
            rotation=rotation,
        )
        return cls(data, **kwargs)

    def get_world_points(self) -> tuple[Vec2, Vec2, Vec2]:
        """Displayed vertices in world space."""
        return world_points(self.data.get_animated())

    def get_limb_handles(self, camera: Camera) -> list[Vec2]:
        return [camera.apply(point) for point in self.get_world_points()]

    def is_point_over(self, mouse_position: Vec2, camera: Camera) -> bool:
        underneath = camera.apply_reverse(mouse_position)
        return is_point_inside_triangle(underneath, *world_points(self.data.get_real()))

    def get_rotate_handle(self, camera: Camera) -> Vec2:
        animated = self.data.get_animated()
        rotation = animated.rotation + self.virtual_rotation
        position = animated.position.reveal()

        max_distance = max(point.magnitude() for point in animated.revealed_points())
        first_try = position + Vec2.from_angle(-rotation) * (max_distance + ROTATE_HANDLE_MARGIN)

        # How far the first guess landed outside the silhouette
        true_distance = get_distance_between_point_and_triangle(first_try, *world_points(animated))
        final_distance = (max_distance - true_distance) + 2.0 * ROTATE_HANDLE_MARGIN

        return get_rotate_handle(position, rotation, final_distance, camera)

    def grab_limb(self, mouse_position: Vec2, camera: Camera) -> bool:
        for i, point in enumerate(self.get_limb_handles(camera)):
            if mouse_position.distance(point) <= HANDLE_RADIUS * 2.0:
                self.moving_point = i
                return True
        return False

    def drag_limb(self, drag: Drag, camera: Camera) -> bool:
        if self.moving_point is None:
            return False
        self.reposition_point(drag.current, camera)
        return True

    def release_limbs(self) -> None:
        self.moving_point = None

    def reposition_point(self, mouse_position: Vec2, camera: Camera) -> None:
        """Move the held vertex to the mouse and re-center the triangle.

        The offsets are rewritten in the unrotated world frame, so the
        rotation becomes zero and is remembered in ``virtual_rotation``.
        Both animation endpoints are overwritten: the displayed shape is the
        same before and after the fold, only its representation changes.
        """
        if self.moving_point is None:
            return

        real = self.data.get_real()
        position = real.position.reveal()
        points = [point.rotated(-real.rotation) for point in real.revealed_points()]
        points[self.moving_point] = camera.apply_reverse(mouse_position) - position

        delta_center = get_triangle_center(*points)
        p1, p2, p3 = (MultiLerp.linear(point - delta_center) for point in points)

        self.virtual_rotation += real.rotation
        self.data.snap(
            replace(
                real,
                points=(p1, p2, p3),
                position=MultiLerp.linear(position + delta_center),
                rotation=0.0,
            )
        )

    def rotate_drag(self, mouse_position: Vec2, camera: Camera) -> Capture:
        real = self.data.get_real()
        return RotateSelected(
            get_delta_rotation(
                real.position.reveal(),
                real.rotation + self.virtual_rotation,
                mouse_position,
                self.rotation_accumulator,
                camera,
            )
        )

    def capture_size(self, data: TriData) -> tuple[Vec2, Vec2, Vec2]:
        return data.revealed_points()

    def scaled(self, data: TriData, total_scale_factor: float) -> TriData:
        p1, p2, p3 = (MultiLerp.linear(point * total_scale_factor) for point in self.prescale_size)
        return replace(data, points=(p1, p2, p3))

    def rotated_by(self, data: TriData, delta_theta: float) -> TriData:
        return replace(data, rotation=data.rotation + delta_theta)

    def render(self, ctx: RenderContext) -> None:
        animated = self.data.get_animated()
        ctx.draw_triangle(
            self.get_name(),
            world_points(animated),
            animated.rotation + self.virtual_rotation,
            animated.color,
        )

    def clone(self) -> "Tri":
        return Tri(
            self.data.get_real(),
            virtual_rotation=self.virtual_rotation,
            name=self.name,
            duration=self.data.duration,
            clock=self.data.clock,
            created=self.created,
        )
