"""Geometric data snapshots held by shapes.

Snapshots are immutable; a shape edits itself by building a modified copy
with ``dataclasses.replace`` and handing it to its ``Smooth``. Positions are
``MultiLerp`` values so that the edit chooses how the shape travels there.
Colors never blend.
"""

from dataclasses import dataclass, field

from photosquid.core.smooth import MultiLerp, lerp_angle, lerp_value
from photosquid.domain.color import Color
from photosquid.domain.vec import Vec2


def _origin() -> MultiLerp:
    return MultiLerp.from_value(Vec2())


@dataclass(frozen=True, slots=True)
class CircleData:
    """Circle snapshot.

    Attributes:
        position: Center in world space
        radius: Radius in world units
        color: Fill color
        virtual_rotation: Angle of the rotate handle (a circle has no visible rotation)
    """

    position: MultiLerp = field(default_factory=_origin)
    radius: float = 0.0
    color: Color = field(default_factory=Color.white)
    virtual_rotation: float = 0.0

    def lerp(self, other: "CircleData", t: float) -> "CircleData":
        return CircleData(
            position=self.position.lerp(other.position, t),
            radius=lerp_value(self.radius, other.radius, t),
            color=other.color,
            virtual_rotation=lerp_angle(self.virtual_rotation, other.virtual_rotation, t),
        )


@dataclass(frozen=True, slots=True)
class BorderRadii:
    """Corner radii of a rectangle."""

    top_left: float = 0.0
    top_right: float = 0.0
    bottom_left: float = 0.0
    bottom_right: float = 0.0

    @classmethod
    def uniform(cls, radius: float) -> "BorderRadii":
        r = abs(radius)
        return cls(r, r, r, r)

    def lerp(self, other: "BorderRadii", t: float) -> "BorderRadii":
        return BorderRadii(
            top_left=lerp_value(self.top_left, other.top_left, t),
            top_right=lerp_value(self.top_right, other.top_right, t),
            bottom_left=lerp_value(self.bottom_left, other.bottom_left, t),
            bottom_right=lerp_value(self.bottom_right, other.bottom_right, t),
        )

    def __str__(self) -> str:
        return (
            f"BorderRadii({self.top_left}, {self.top_right}, "
            f"{self.bottom_left}, {self.bottom_right})"
        )


@dataclass(frozen=True, slots=True)
class RectData:
    """Rectangle snapshot.

    Attributes:
        position: Center in world space
        size: Width and height; either may be negative after a corner flip
        color: Fill color
        rotation: Counter-clockwise rotation on screen, in radians
        radii: Corner radii
        is_viewport: Whether this rectangle marks an export viewport
    """

    position: MultiLerp = field(default_factory=_origin)
    size: Vec2 = Vec2()
    color: Color = field(default_factory=Color.white)
    rotation: float = 0.0
    radii: BorderRadii = BorderRadii()
    is_viewport: bool = False

    def lerp(self, other: "RectData", t: float) -> "RectData":
        return RectData(
            position=self.position.lerp(other.position, t),
            size=self.size.lerp(other.size, t),
            color=other.color,
            rotation=lerp_angle(self.rotation, other.rotation, t),
            radii=self.radii.lerp(other.radii, t),
            is_viewport=self.is_viewport,
        )


@dataclass(frozen=True, slots=True)
class TriData:
    """Triangle snapshot.

    Attributes:
        points: Vertex offsets from ``position`` before rotation
        position: Centroid in world space
        color: Fill color
        rotation: Counter-clockwise rotation on screen, in radians
    """

    points: tuple[MultiLerp, MultiLerp, MultiLerp] = field(
        default_factory=lambda: (_origin(), _origin(), _origin())
    )
    position: MultiLerp = field(default_factory=_origin)
    color: Color = field(default_factory=Color.white)
    rotation: float = 0.0

    def revealed_points(self) -> tuple[Vec2, Vec2, Vec2]:
        p1, p2, p3 = self.points
        return (p1.reveal(), p2.reveal(), p3.reveal())

    def lerp(self, other: "TriData", t: float) -> "TriData":
        p1, p2, p3 = (mine.lerp(theirs, t) for mine, theirs in zip(self.points, other.points))
        return TriData(
            points=(p1, p2, p3),
            position=self.position.lerp(other.position, t),
            color=other.color,
            rotation=lerp_angle(self.rotation, other.rotation, t),
        )
