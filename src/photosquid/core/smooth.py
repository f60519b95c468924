"""Time-sampled eased interpolation.

A ``Smooth`` holds the real (authoritative) value of something together with
the value it is animating away from. Nothing is scheduled: the displayed
value is recomputed from the clock every time it is asked for.

Interpolation depends on the value type:
- floats and objects with a ``lerp(other, t)`` method blend linearly
- ``MultiLerp`` blends according to the strategy of its target
  (jump, straight line, or circular arc about a pivot)
- ``Color`` values never blend; they switch immediately
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Generic, TypeVar

from photosquid.core.geometry import angle_difference
from photosquid.domain.color import Color
from photosquid.domain.vec import Vec2

T = TypeVar("T")

Clock = Callable[[], float]

DEFAULT_DURATION = 0.5


def exponential_out(t: float) -> float:
    """Exponential ease-out curve mapping [0, 1] onto [0, 1]."""
    if t >= 1.0:
        return 1.0
    return 1.0 - 2.0 ** (-10.0 * t)


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def lerp_value(a: Any, b: Any, t: float) -> Any:
    """Interpolate between two values of the same type.

    Args:
        a: Value at ``t = 0``
        b: Value at ``t = 1``
        t: Interpolation parameter

    Returns:
        The blended value
    """
    if isinstance(a, Color):
        return b
    if isinstance(a, (int, float)):
        return a * (1.0 - t) + b * t
    return a.lerp(b, t)


def lerp_angle(a: float, b: float, t: float) -> float:
    """Interpolate between two angles along the shorter arc."""
    return a + angle_difference(a, b) * t


def circle_lerp(start: Vec2, end: Vec2, origin: Vec2, t: float) -> Vec2:
    """Interpolate along a circular arc about ``origin``.

    The radius is taken from ``start``; ``end`` is assumed to lie at roughly
    the same distance from ``origin``.

    Args:
        start: Point at ``t = 0``
        end: Point at ``t = 1``
        origin: Pivot of the arc
        t: Interpolation parameter

    Returns:
        Point on the arc
    """
    distance = start.distance(origin)
    alpha = (start - origin).as_angle()
    beta = (end - origin).as_angle()
    angle = alpha + angle_difference(alpha, beta) * t
    return origin + Vec2.from_angle(angle) * distance


class LerpKind(Enum):
    """How a value should be approached when it becomes a target."""

    FROM = auto()
    LINEAR = auto()
    CIRCLE = auto()


@dataclass(frozen=True, slots=True)
class MultiLerp:
    """A point tagged with the strategy used to animate towards it.

    Attributes:
        kind: Interpolation strategy
        value: The carried point
        origin: Pivot, only meaningful for ``LerpKind.CIRCLE``
    """

    kind: LerpKind
    value: Vec2
    origin: Vec2 | None = None

    @classmethod
    def from_value(cls, value: Vec2) -> "MultiLerp":
        return cls(LerpKind.FROM, value)

    @classmethod
    def linear(cls, value: Vec2) -> "MultiLerp":
        return cls(LerpKind.LINEAR, value)

    @classmethod
    def circle(cls, value: Vec2, origin: Vec2) -> "MultiLerp":
        return cls(LerpKind.CIRCLE, value, origin)

    def reveal(self) -> Vec2:
        """Get the carried point regardless of strategy."""
        return self.value

    def lerp(self, other: "MultiLerp", t: float) -> "MultiLerp":
        if other.kind is LerpKind.LINEAR:
            value = self.value.lerp(other.value, t)
        elif other.kind is LerpKind.CIRCLE and other.origin is not None:
            value = circle_lerp(self.value, other.value, other.origin, t)
        else:
            value = other.value
        return MultiLerp.from_value(value)


class Smooth(Generic[T]):
    """An eased blend from a previous value to a real value.

    Args:
        initial: Starting value, already at rest
        duration: Animation length in seconds
        clock: Time source in seconds, ``time.monotonic`` by default
    """

    def __init__(
        self,
        initial: T,
        duration: float = DEFAULT_DURATION,
        clock: Clock | None = None,
    ) -> None:
        self._clock = clock or time.monotonic
        self._duration = duration
        self._data = initial
        self._previous = initial
        self._changed = self._clock()

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def clock(self) -> Clock:
        return self._clock

    def progress(self) -> float:
        """Eased animation progress in [0, 1]."""
        if self._duration <= 0:
            return 1.0
        elapsed = self._clock() - self._changed
        return exponential_out(clamp(elapsed / self._duration))

    def is_at_rest(self) -> bool:
        return self.progress() >= 1.0

    def get_real(self) -> T:
        """Get the authoritative value."""
        return self._data

    def get_previous(self) -> T:
        """Get the value being animated away from."""
        return self._previous

    def get_animated(self) -> T:
        """Get the value that should currently be displayed."""
        t = self.progress()
        if t >= 1.0:
            return self._data
        return lerp_value(self._previous, self._data, t)

    def set(self, new_value: T) -> None:
        """Retarget the animation, starting from what is displayed now."""
        self._previous = self.get_animated()
        self._data = new_value
        self._changed = self._clock()

    def manual_set_real(self, value: T) -> None:
        """Overwrite the real value without restarting the animation."""
        self._data = value

    def manual_set_previous(self, value: T) -> None:
        """Overwrite the value being animated away from."""
        self._previous = value

    def snap(self, value: T) -> None:
        """Jump to ``value`` with no animation."""
        self._data = value
        self._previous = value

    def __repr__(self) -> str:
        return f"Smooth(real={self._data!r}, previous={self._previous!r})"

