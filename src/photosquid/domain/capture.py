"""Capture results and the short-circuit dispatch combinator.

Offering one interaction to one candidate handler produces a Capture.
``Capture.MISS`` means "not handled, ask the next candidate"; any other
value stops the chain. Batch-edit captures (``MoveSelected`` and friends)
are applied by the top-level dispatcher to every selected shape.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum, auto

from photosquid.domain.vec import Vec2


class CaptureKind(Enum):
    """Simple (payload-free) capture outcomes."""

    MISS = auto()
    ALLOW_DRAG = auto()
    NO_DRAG = auto()
    TAKE_FOCUS = auto()
    KEYBOARD = auto()


@dataclass(frozen=True, slots=True)
class SimpleCapture:
    """A capture without payload."""

    kind: CaptureKind


@dataclass(frozen=True, slots=True)
class MoveSelected:
    """Translate every selected shape by a world-space delta."""

    delta_in_world: Vec2


@dataclass(frozen=True, slots=True)
class RotateSelected:
    """Rotate every selected shape about its own center."""

    delta_theta: float


@dataclass(frozen=True, slots=True)
class ScaleSelected:
    """Scale every selected shape relative to its size at gesture start."""

    total_scale_factor: float


@dataclass(frozen=True, slots=True)
class SpreadSelected:
    """Radially translate every selected shape about the operation origin."""

    current: Vec2


@dataclass(frozen=True, slots=True)
class RevolveSelected:
    """Revolve every selected shape around the operation origin."""

    current: Vec2


@dataclass(frozen=True, slots=True)
class DilateSelected:
    """Radially translate and scale every selected shape."""

    current: Vec2


Capture = (
    SimpleCapture
    | MoveSelected
    | RotateSelected
    | ScaleSelected
    | SpreadSelected
    | RevolveSelected
    | DilateSelected
)

BATCH_CAPTURES = (
    MoveSelected,
    RotateSelected,
    ScaleSelected,
    SpreadSelected,
    RevolveSelected,
    DilateSelected,
)

MISS = SimpleCapture(CaptureKind.MISS)
ALLOW_DRAG = SimpleCapture(CaptureKind.ALLOW_DRAG)
NO_DRAG = SimpleCapture(CaptureKind.NO_DRAG)
TAKE_FOCUS = SimpleCapture(CaptureKind.TAKE_FOCUS)
KEYBOARD = SimpleCapture(CaptureKind.KEYBOARD)


def is_miss(capture: Capture) -> bool:
    """Check whether a capture lets dispatch continue."""
    return capture == MISS


def is_batch(capture: Capture) -> bool:
    """Check whether a capture must be applied to all selected shapes."""
    return isinstance(capture, BATCH_CAPTURES)


def capture_name(capture: Capture) -> str:
    """Short human-readable name of a capture, used for logging."""
    if isinstance(capture, SimpleCapture):
        return capture.kind.name.lower()
    return type(capture).__name__


def first_capture(handlers: Iterable[Callable[[], Capture]]) -> Capture:
    """Offer an interaction to handlers in priority order.

    Handlers are called lazily. The first result that is not ``MISS`` is
    returned immediately and the remaining handlers are never called.

    Args:
        handlers: Zero-argument callables, highest priority first

    Returns:
        The first non-miss capture, or ``MISS`` if every handler missed
    """
    for handler in handlers:
        capture = handler()
        if not is_miss(capture):
            return capture
    return MISS
