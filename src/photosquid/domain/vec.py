"""Two-dimensional vector type used for positions, deltas and sizes.

Coordinates follow screen convention: +x points right and +y points down.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable 2D vector.

    Attributes:
        x: Horizontal component
        y: Vertical component (+y is down the screen)
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_angle(cls, angle: float) -> "Vec2":
        """Create a unit vector pointing at ``angle`` (``atan2`` convention)."""
        return cls(math.cos(angle), math.sin(angle))

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec2":
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def component_mul(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x * other.x, self.y * other.y)

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vec2") -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def distance(self, other: "Vec2") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_squared(self, other: "Vec2") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def as_angle(self) -> float:
        """Bearing of this vector in radians (``atan2(y, x)``)."""
        return math.atan2(self.y, self.x)

    def rotated(self, angle: float) -> "Vec2":
        """Rotate counter-clockwise by ``angle`` in the ``atan2`` frame.

        Args:
            angle: Rotation in radians

        Returns:
            The rotated vector
        """
        c = math.cos(angle)
        s = math.sin(angle)
        return Vec2(self.x * c - self.y * s, self.x * s + self.y * c)

    def lerp(self, other: "Vec2", t: float) -> "Vec2":
        return Vec2(
            self.x * (1.0 - t) + other.x * t,
            self.y * (1.0 - t) + other.y * t,
        )


def div_or_zero(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 instead of raising or producing inf/nan.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        ``numerator / denominator``, or 0.0 when ``denominator`` is zero
    """
    if denominator == 0.0:
        return 0.0
    return numerator / denominator
