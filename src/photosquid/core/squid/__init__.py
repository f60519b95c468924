"""Shapes.

Key classes:
- Squid: Shape contract and shared gesture handling
- Circle, Rect, Tri: Concrete shapes
- CircleData, RectData, TriData: Immutable geometric snapshots
- Initiation: Request to begin a keyboard-initiated gesture
"""

from photosquid.core.squid.base import (
    HANDLE_RADIUS,
    ROTATE_HANDLE_MARGIN,
    Initiation,
    InitiationKind,
    Squid,
    get_rotate_handle,
    next_creation_time,
)
from photosquid.core.squid.circle import Circle
from photosquid.core.squid.data import BorderRadii, CircleData, RectData, TriData
from photosquid.core.squid.rect import Corner, Rect
from photosquid.core.squid.tri import Tri

__all__ = [
    "HANDLE_RADIUS",
    "ROTATE_HANDLE_MARGIN",
    "BorderRadii",
    "Circle",
    "CircleData",
    "Corner",
    "Initiation",
    "InitiationKind",
    "Rect",
    "RectData",
    "Squid",
    "Tri",
    "TriData",
    "get_rotate_handle",
    "next_creation_time",
]
