"""Keyboard-initiated gestures in progress.

An operation starts with G, R or S (optionally "collectively") and follows
the pointer until the next click ends it.
"""

from dataclasses import dataclass

from photosquid.domain.vec import Vec2


@dataclass(frozen=True, slots=True)
class GrabOperation:
    """Move the selection with the pointer."""


@dataclass(slots=True)
class RotateOperation:
    """Rotate each selected shape about its own center.

    Attributes:
        point: Screen-space pivot the pointer bearing is measured around
        rotation: Pointer bearing at the previous update
    """

    point: Vec2
    rotation: float


@dataclass(frozen=True, slots=True)
class ScaleOperation:
    """Scale by the ratio of pointer distances to ``origin`` (world space)."""

    origin: Vec2
    point: Vec2


@dataclass(frozen=True, slots=True)
class SpreadOperation:
    """Push the selection away from (or pull it toward) ``origin``."""

    point: Vec2
    origin: Vec2


@dataclass(frozen=True, slots=True)
class RevolveOperation:
    """Revolve the selection around ``origin``."""

    point: Vec2
    origin: Vec2


@dataclass(frozen=True, slots=True)
class DilateOperation:
    """Spread the selection about ``origin`` while scaling it."""

    point: Vec2
    origin: Vec2


Operation = (
    GrabOperation
    | RotateOperation
    | ScaleOperation
    | SpreadOperation
    | RevolveOperation
    | DilateOperation
)


def operation_name(operation: Operation) -> str:
    return type(operation).__name__.removesuffix("Operation").lower()
