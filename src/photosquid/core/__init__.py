"""Interaction, transform and animation engine for photosquid.

This module contains:

- Geometry primitives (point-in-quad, point-in-triangle, triangle distance)
- Delta accumulation with snapping thresholds
- Eased interpolation between real and displayed state
- Transform behaviors (translate, rotate, spread, revolve, dilate)
- Shapes and the Ocean that owns them
- Undo/redo history, tools and the Editor dispatcher

Nothing in this module raises on bad input: stale handles resolve to None,
unhandled interactions are a MISS capture, and divisions by zero distances
yield zero.

Key functions:
- is_point_inside_rectangle: Test if point is inside a convex quad
- is_point_inside_triangle: Test if point is inside a triangle
- get_distance_between_point_and_triangle: Signed distance to a triangle
- angle_difference: Shortest signed rotation between two angles

Key classes:
- Accumulator: Quantizes deltas to snapping thresholds
- Smooth: Eased blend from a previous value to a real value
- Squid: Shape contract (Circle, Rect, Tri)
- Ocean: Generation-checked arena of shapes
- History: Bounded undo/redo of Ocean snapshots
- Editor: Owns the document and dispatches input
"""

from photosquid.core.accumulator import Accumulator
from photosquid.core.editor import Editor
from photosquid.core.geometry import (
    angle_difference,
    get_distance_between_point_and_triangle,
    get_triangle_center,
    is_point_inside_rectangle,
    is_point_inside_triangle,
    screen_bearing,
    sort_counter_clockwise,
)
from photosquid.core.history import History
from photosquid.core.ocean import Ocean
from photosquid.core.smooth import MultiLerp, Smooth
from photosquid.core.squid import Circle, Rect, Squid, Tri
from photosquid.core.tools import Pan, Pointer, Tool

__all__ = [
    # Numeric utilities
    "Accumulator",
    "MultiLerp",
    "Smooth",
    # Shapes
    "Circle",
    "Rect",
    "Squid",
    "Tri",
    # Document
    "Editor",
    "History",
    "Ocean",
    "Pan",
    "Pointer",
    "Tool",
    # Geometry functions
    "angle_difference",
    "get_distance_between_point_and_triangle",
    "get_triangle_center",
    "is_point_inside_rectangle",
    "is_point_inside_triangle",
    "screen_bearing",
    "sort_counter_clockwise",
]
