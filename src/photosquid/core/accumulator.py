"""Delta integrator with quantization to a snapping threshold."""

import math
from typing import Generic, TypeVar

from photosquid.domain.vec import Vec2

T = TypeVar("T", float, Vec2)


def _quantize(value: float, threshold: float) -> float:
    return math.floor((value + 0.5 * threshold) / threshold) * threshold


class Accumulator(Generic[T]):
    """Buffers small deltas and emits them in multiples of a threshold.

    Works over plain floats (angles) and ``Vec2`` (translations). For a
    vector the threshold is applied to each component independently.

    Example:
        >>> acc = Accumulator(0.0)
        >>> acc.accumulate(4.0, 10.0) is None
        True
        >>> acc.accumulate(2.0, 10.0)
        10.0
        >>> acc.residue()
        -4.0
    """

    def __init__(self, zero: T) -> None:
        self._zero = zero
        self._residue = zero

    def accumulate(self, delta: T, threshold: float) -> T | None:
        """Add ``delta`` and emit whatever whole multiple of ``threshold`` is due.

        Args:
            delta: Raw change to integrate
            threshold: Snapping step; ``<= 0`` disables snapping

        Returns:
            The emitted delta, or None if nothing crossed a snapping step
        """
        if threshold <= 0:
            return delta

        residue = self._residue + delta

        if isinstance(residue, Vec2):
            result = Vec2(_quantize(residue.x, threshold), _quantize(residue.y, threshold))
        else:
            result = _quantize(residue, threshold)

        self._residue = residue

        if result == self._zero:
            return None

        self._residue = residue - result
        return result

    def residue(self) -> T:
        """Get the delta buffered but not yet emitted."""
        return self._residue

    def clear(self) -> None:
        """Drop any buffered delta."""
        self._residue = self._zero
