"""Per-gesture transform behaviors.

Each behavior is configured once when a gesture starts and is then asked,
on every drag event, to turn the pointer position (or motion) into the
new geometry of a shape:

- TranslateBehavior: snapped translation
- get_delta_rotation: rotation of a handle about the shape center
- SpreadBehavior: radial translation about an external origin
- RevolveBehavior: orbit about an external origin plus matching spin
- DilateBehavior: radial translation combined with uniform scaling

Distances from a degenerate reference (zero length) resolve to zero.
"""

from dataclasses import dataclass, field

from photosquid.core.accumulator import Accumulator
from photosquid.core.geometry import angle_difference, screen_bearing
from photosquid.domain.camera import Camera
from photosquid.domain.vec import Vec2, div_or_zero


def _vector_accumulator() -> Accumulator[Vec2]:
    return Accumulator(Vec2())


def _angle_accumulator() -> Accumulator[float]:
    return Accumulator(0.0)


@dataclass
class TranslateBehavior:
    """Snapped translation of a shape body.

    Attributes:
        moving: Whether the body is currently being dragged
        accumulator: Buffer for sub-snap motion
    """

    moving: bool = False
    accumulator: Accumulator[Vec2] = field(default_factory=_vector_accumulator)

    def express(self, raw_delta: Vec2, translation_snapping: float) -> Vec2:
        """Get the world-space delta to apply for a raw pointer delta."""
        delta = self.accumulator.accumulate(raw_delta, translation_snapping)
        return Vec2() if delta is None else delta


def get_delta_rotation(
    center: Vec2,
    existing_rotation: float,
    mouse_position: Vec2,
    rotation_accumulator: Accumulator[float],
    camera: Camera,
) -> float:
    """Get the rotation needed for a handle to follow the mouse.

    Args:
        center: World-space pivot of the shape
        existing_rotation: Current rotation of the handle
        mouse_position: Screen-space mouse position
        rotation_accumulator: Accumulator whose residue is still pending
        camera: Camera used to bring the pivot into screen space

    Returns:
        Shortest rotation in (-pi, pi] from the handle to the mouse
    """
    screen_center = camera.apply(center)
    old_rotation = existing_rotation + rotation_accumulator.residue()
    new_rotation = screen_bearing(screen_center, mouse_position)
    return angle_difference(old_rotation, new_rotation)


def _radial_position(origin: Vec2, start: Vec2, factor: float) -> Vec2:
    angle = (start - origin).as_angle()
    return origin + Vec2.from_angle(angle) * (factor * start.distance(origin))


@dataclass(frozen=True, slots=True)
class SpreadBehavior:
    """Radial translation about an origin.

    Attributes:
        origin: Fixed center of the spread
        start: Shape center when the gesture began
        point: Reference pointer position when the gesture began
    """

    origin: Vec2 = Vec2()
    start: Vec2 = Vec2()
    point: Vec2 = Vec2()

    def express(self, current: Vec2) -> Vec2:
        """Get the new absolute shape center for the pointer at ``current``."""
        factor = div_or_zero(current.distance(self.origin), self.point.distance(self.origin))
        return _radial_position(self.origin, self.start, factor)


@dataclass(frozen=True, slots=True)
class DilateExpression:
    position: Vec2
    total_scale_factor: float


@dataclass(frozen=True, slots=True)
class DilateBehavior:
    """Radial translation plus uniform scaling about an origin."""

    origin: Vec2 = Vec2()
    start: Vec2 = Vec2()
    point: Vec2 = Vec2()

    def express(self, current: Vec2) -> DilateExpression:
        factor = div_or_zero(current.distance(self.origin), self.point.distance(self.origin))
        return DilateExpression(
            position=_radial_position(self.origin, self.start, factor),
            total_scale_factor=factor,
        )


@dataclass(frozen=True, slots=True)
class RevolveExpression:
    """Result of one revolve step.

    Attributes:
        origin_rotation: Total orbit rotation since the gesture began
        origin: Pivot of the orbit
        start: Shape center when the gesture began
        delta_object_rotation: Spin to add to the shape for this step
    """

    origin_rotation: float
    origin: Vec2
    start: Vec2
    delta_object_rotation: float

    def apply_origin_rotation_to_center(self) -> Vec2:
        """Get the shape center after orbiting ``start`` by ``origin_rotation``."""
        distance = self.origin.distance(self.start)
        object_angle = (self.start - self.origin).as_angle() - self.origin_rotation
        return self.origin + Vec2.from_angle(object_angle) * distance


@dataclass
class RevolveBehavior:
    """Orbit about an external pivot while spinning the shape to match."""

    revolving: bool = False
    origin: Vec2 = Vec2()
    start: Vec2 = Vec2()
    point: Vec2 = Vec2()
    accumulator: Accumulator[float] = field(default_factory=_angle_accumulator)
    rotation: float = 0.0

    def express(self, current: Vec2, rotation_snapping: float) -> RevolveExpression | None:
        """Advance the orbit to follow the pointer at ``current``.

        Args:
            current: World-space pointer position
            rotation_snapping: Snapping step in radians, 0 to disable

        Returns:
            The orbit step, or None when no revolve gesture is active
        """
        if not self.revolving:
            return None

        mu0 = (self.point - self.origin).as_angle()
        mu1 = (current - self.origin).as_angle()
        total_delta_mu = mu0 - mu1

        raw_delta_rotation = angle_difference(
            self.rotation + self.accumulator.residue(), total_delta_mu
        )
        delta_rotation = self.accumulator.accumulate(raw_delta_rotation, rotation_snapping)
        if delta_rotation is None:
            delta_rotation = 0.0

        self.rotation += delta_rotation

        return RevolveExpression(
            origin_rotation=self.rotation,
            origin=self.origin,
            start=self.start,
            delta_object_rotation=delta_rotation,
        )

    def set(self, origin: Vec2, start: Vec2, point: Vec2) -> None:
        """Begin a revolve gesture."""
        self.accumulator.clear()
        self.origin = origin
        self.start = start
        self.point = point
        self.revolving = True
        self.rotation = 0.0

    def unset(self) -> None:
        self.revolving = False
