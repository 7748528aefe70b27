"""Geometry kernel: pure functions over 2-D points.

Every function accepts any object exposing ``x`` and ``y`` attributes
(``Point``, ``Corner`` models, ...) and returns fresh values. Nothing here
keeps state or raises on finite numeric input. Units are decimal feet.
"""

import math
from typing import Sequence, TypeVar

from blueprint_engine.geometry.types import Point

DEFAULT_TOLERANCE = 0.25
DEFAULT_GRID_SIZE = 0.5

P = TypeVar("P")


def distance(p1, p2) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(distance_squared(p1, p2))


def distance_squared(p1, p2) -> float:
    """Squared distance, for comparisons that do not need the root."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return dx * dx + dy * dy


def midpoint(p1, p2) -> Point:
    return Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)


def angle(p1, p2) -> float:
    """Bearing from ``p1`` to ``p2`` in radians, in ``(-pi, pi]``."""
    return math.atan2(p2.y - p1.y, p2.x - p1.x)


def angle_degrees(p1, p2) -> float:
    return math.degrees(angle(p1, p2))


def _projection_parameter(point, line_start, line_end, length_sq: float) -> float:
    t = (
        (point.x - line_start.x) * (line_end.x - line_start.x)
        + (point.y - line_start.y) * (line_end.y - line_start.y)
    ) / length_sq
    return max(0.0, min(1.0, t))


def closest_point_on_line(point, line_start, line_end) -> Point:
    """Closest point to ``point`` on the segment ``line_start``-``line_end``."""
    length_sq = distance_squared(line_start, line_end)
    if length_sq == 0:
        return Point(line_start.x, line_start.y)

    t = _projection_parameter(point, line_start, line_end, length_sq)
    return Point(
        line_start.x + t * (line_end.x - line_start.x),
        line_start.y + t * (line_end.y - line_start.y),
    )


def point_to_line_distance(point, line_start, line_end) -> float:
    """Distance from a point to a segment.

    The projection is clamped to the segment ends. A zero-length segment
    degrades to point-to-point distance.
    """
    return distance(point, closest_point_on_line(point, line_start, line_end))


def is_near(p1, p2, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    return distance_squared(p1, p2) < tolerance * tolerance


def is_near_line(point, line_start, line_end, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    return point_to_line_distance(point, line_start, line_end) < tolerance


def signed_polygon_area(vertices: Sequence) -> float:
    """Shoelace sum / 2. Positive for counter-clockwise order (y up)."""
    n = len(vertices)
    if n < 3:
        return 0.0

    total = 0.0
    for i in range(n):
        j = (i + 1) % n
        total += vertices[i].x * vertices[j].y
        total -= vertices[j].x * vertices[i].y
    return total / 2


def polygon_area(vertices: Sequence) -> float:
    """Unsigned polygon area via the shoelace formula; 0 below 3 vertices."""
    return abs(signed_polygon_area(vertices))


def polygon_centroid(vertices: Sequence) -> Point:
    """Vertex centroid: the arithmetic mean of the vertices.

    This is deliberately not the area-weighted centroid. For convex rooms
    the two agree closely enough for label placement; for strongly concave
    outlines the mean can fall outside the polygon.
    """
    n = len(vertices)
    if n == 0:
        return Point(0.0, 0.0)
    return Point(sum(v.x for v in vertices) / n, sum(v.y for v in vertices) / n)


def is_counter_clockwise(vertices: Sequence) -> bool:
    if len(vertices) < 3:
        return False
    return signed_polygon_area(vertices) > 0


def ensure_counter_clockwise(vertices: Sequence[P]) -> list[P]:
    """Return the vertices in counter-clockwise order.

    Degenerate input (fewer than 3 vertices or zero area) comes back
    reversed, matching the signed-area test.
    """
    if is_counter_clockwise(vertices):
        return list(vertices)
    return list(reversed(vertices))


def _orientation(p1, p2, p3) -> float:
    """Cross product sign of ``p3`` relative to the directed line p1->p2."""
    return (p3.x - p1.x) * (p2.y - p1.y) - (p2.x - p1.x) * (p3.y - p1.y)


def on_segment(p1, p2, p) -> bool:
    """Whether a point already known to be collinear lies within the segment box."""
    return (
        min(p1.x, p2.x) <= p.x <= max(p1.x, p2.x)
        and min(p1.y, p2.y) <= p.y <= max(p1.y, p2.y)
    )


def line_segments_intersect(a1, a2, b1, b2) -> bool:
    """Whether segments a1-a2 and b1-b2 share at least one point.

    Touching endpoints and collinear overlaps count as intersections.
    """
    d1 = _orientation(b1, b2, a1)
    d2 = _orientation(b1, b2, a2)
    d3 = _orientation(a1, a2, b1)
    d4 = _orientation(a1, a2, b2)

    if ((d1 > 0 > d2) or (d1 < 0 < d2)) and ((d3 > 0 > d4) or (d3 < 0 < d4)):
        return True

    if d1 == 0 and on_segment(b1, b2, a1):
        return True
    if d2 == 0 and on_segment(b1, b2, a2):
        return True
    if d3 == 0 and on_segment(a1, a2, b1):
        return True
    if d4 == 0 and on_segment(a1, a2, b2):
        return True

    return False


def snap_to_grid(value: float, grid_size: float = DEFAULT_GRID_SIZE) -> float:
    return round(value / grid_size) * grid_size


def snap_point_to_grid(point, grid_size: float = DEFAULT_GRID_SIZE) -> Point:
    return Point(snap_to_grid(point.x, grid_size), snap_to_grid(point.y, grid_size))


def is_point_in_polygon(point, polygon: Sequence) -> bool:
    """Ray-casting parity test with a horizontal ray towards +x.

    Boundary handling is half-open: an edge counts when one endpoint is
    strictly above the ray and the other is not, and the crossing must lie
    strictly to the right of the point. For an axis-aligned box this puts
    the minimum-x and minimum-y edges inside and the maximum-x and
    maximum-y edges outside. Callers that need a closed test should pair
    this with ``is_near_line``.
    """
    inside = False
    n = len(polygon)
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        if (yi > point.y) != (yj > point.y):
            crossing_x = (xj - xi) * (point.y - yi) / (yj - yi) + xi
            if point.x < crossing_x:
                inside = not inside
        j = i

    return inside
