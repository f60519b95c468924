"""Geometric primitives for hit-testing and handle placement.

This module provides pure, stateless helpers for:
- Point-in-convex-quadrilateral testing (area comparison)
- Point-in-triangle testing (edge sign tests)
- Triangle centroids and counter-clockwise vertex ordering
- Signed distance from a point to a triangle's silhouette
- Angle normalization

Angles use the ``atan2`` frame of the raw coordinates unless noted.
"""

import math
from functools import cmp_to_key

from photosquid.domain.vec import Vec2, div_or_zero

AREA_TOLERANCE = 1e-9


def triangle_area(a: Vec2, b: Vec2, c: Vec2) -> float:
    """Unsigned area of triangle ``abc``."""
    return 0.5 * abs((b - a).cross(c - a))


def is_point_inside_rectangle(a: Vec2, b: Vec2, c: Vec2, d: Vec2, p: Vec2) -> bool:
    """Determine whether ``p`` lies inside the convex quadrilateral ``abcd``.

    The corners must be given in cyclic order (either winding); the quad does
    not need to be axis-aligned. ``p`` is inside when the four triangles it
    forms with each edge add up to the area of the quad itself. Points on the
    boundary count as inside.

    Args:
        a: First corner
        b: Second corner
        c: Third corner
        d: Fourth corner
        p: Point to test

    Returns:
        True if ``p`` is inside or on the boundary

    Examples:
        >>> square = (Vec2(1, 1), Vec2(-1, 1), Vec2(-1, -1), Vec2(1, -1))
        >>> is_point_inside_rectangle(*square, Vec2(0, 0))
        True
        >>> is_point_inside_rectangle(*square, Vec2(2, 2))
        False
    """
    cumulative_area = (
        triangle_area(a, p, b)
        + triangle_area(b, p, c)
        + triangle_area(c, p, d)
        + triangle_area(d, p, a)
    )
    area = triangle_area(a, b, c) + triangle_area(c, d, a)

    # Floating point error makes exact equality unreliable on the boundary
    return cumulative_area <= area or math.isclose(
        cumulative_area, area, rel_tol=AREA_TOLERANCE, abs_tol=AREA_TOLERANCE
    )


def _edge_sign(p: Vec2, a: Vec2, b: Vec2) -> float:
    return (p.x - b.x) * (a.y - b.y) - (a.x - b.x) * (p.y - b.y)


def is_point_inside_triangle(p: Vec2, a: Vec2, b: Vec2, c: Vec2) -> bool:
    """Determine whether ``p`` lies inside triangle ``abc``.

    Uses one sign test per edge. The point is inside unless it lies strictly
    on the outer side of some edge while strictly on the inner side of
    another, so points on the boundary count as inside.

    Args:
        p: Point to test
        a: First vertex
        b: Second vertex
        c: Third vertex

    Returns:
        True if ``p`` is inside or on the boundary
    """
    d1 = _edge_sign(p, a, b)
    d2 = _edge_sign(p, b, c)
    d3 = _edge_sign(p, c, a)

    has_negative = d1 < 0 or d2 < 0 or d3 < 0
    has_positive = d1 > 0 or d2 > 0 or d3 > 0

    return not (has_negative and has_positive)


def get_triangle_center(a: Vec2, b: Vec2, c: Vec2) -> Vec2:
    """Centroid of triangle ``abc``."""
    return Vec2((a.x + b.x + c.x) / 3.0, (a.y + b.y + c.y) / 3.0)


def _compare_around(center: Vec2):
    def compare(a: Vec2, b: Vec2) -> int:
        ax = a.x - center.x
        bx = b.x - center.x

        # Points right of the center come before points left of it
        if ax >= 0 and bx < 0:
            return -1
        if ax < 0 and bx >= 0:
            return 1

        if ax == 0 and bx == 0:
            if a.y == b.y:
                return 0
            return -1 if a.y < b.y else 1

        det = (a - center).cross(b - center)
        if det > 0:
            return -1
        if det < 0:
            return 1

        # Colinear with the center: farther point first
        da = (a - center).magnitude_squared()
        db = (b - center).magnitude_squared()
        if da == db:
            return 0
        return -1 if da > db else 1

    return compare


def sort_counter_clockwise(a: Vec2, b: Vec2, c: Vec2) -> tuple[Vec2, Vec2, Vec2]:
    """Order three points counter-clockwise about their centroid.

    Counter-clockwise is meant in the ``atan2`` frame (increasing bearing),
    so the returned triangle always has a non-negative signed area.

    Args:
        a: First point
        b: Second point
        c: Third point

    Returns:
        The same three points in counter-clockwise order
    """
    center = get_triangle_center(a, b, c)
    ordered = sorted((a, b, c), key=cmp_to_key(_compare_around(center)))
    return (ordered[0], ordered[1], ordered[2])


def signed_distance_to_edge(p: Vec2, start: Vec2, end: Vec2) -> float:
    """Signed distance from ``p`` to the line through a counter-clockwise edge.

    Positive values are on the outer (right-hand) side of the edge.
    A zero-length edge yields 0.0.
    """
    edge = end - start
    return div_or_zero(-edge.cross(p - start), edge.magnitude())


def get_distance_between_point_and_triangle(p: Vec2, a: Vec2, b: Vec2, c: Vec2) -> float:
    """Signed distance from ``p`` to the farthest edge of triangle ``abc``.

    The triangle is first put into counter-clockwise order, then the signed
    distance to each edge is measured (positive = outside that edge) and the
    maximum is returned. The result is positive outside the triangle and
    negative inside.

    Args:
        p: Point to measure from
        a: First vertex
        b: Second vertex
        c: Third vertex

    Returns:
        Largest per-edge signed distance
    """
    a, b, c = sort_counter_clockwise(a, b, c)
    return max(
        signed_distance_to_edge(p, a, b),
        signed_distance_to_edge(p, b, c),
        signed_distance_to_edge(p, c, a),
    )


def angle_difference(old: float, new: float) -> float:
    """Shortest signed rotation taking ``old`` to ``new``.

    Args:
        old: Starting angle in radians
        new: Target angle in radians

    Returns:
        Angle in radians normalized into (-pi, pi]
    """
    return math.pi - (old - new + math.pi) % math.tau


def screen_bearing(center: Vec2, point: Vec2) -> float:
    """Bearing of ``point`` around ``center`` with +y pointing up.

    Screen coordinates grow downward, so the y component is negated to make
    counter-clockwise motion on screen a positive rotation.
    """
    return math.atan2(-(point.y - center.y), point.x - center.x)
