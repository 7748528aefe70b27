"""Unit tests for the geometry kernel."""

import math

import pytest
from shapely.geometry import Polygon

from blueprint_engine.geometry.kernel import (
    angle,
    angle_degrees,
    closest_point_on_line,
    distance,
    distance_squared,
    ensure_counter_clockwise,
    is_counter_clockwise,
    is_near,
    is_near_line,
    is_point_in_polygon,
    line_segments_intersect,
    midpoint,
    point_to_line_distance,
    polygon_area,
    polygon_centroid,
    signed_polygon_area,
    snap_point_to_grid,
    snap_to_grid,
)
from blueprint_engine.geometry.types import Point


class TestDistances:
    def test_distance(self):
        assert distance(Point(0, 0), Point(3, 4)) == 5.0

    def test_distance_squared(self):
        assert distance_squared(Point(1, 1), Point(4, 5)) == 25.0

    def test_midpoint(self):
        assert midpoint(Point(0, 0), Point(10, 4)) == Point(5, 2)

    def test_angle(self):
        assert angle(Point(0, 0), Point(0, 5)) == pytest.approx(math.pi / 2)
        assert angle_degrees(Point(0, 0), Point(-1, 0)) == pytest.approx(180.0)


class TestPointToLine:
    def test_perpendicular_projection(self):
        assert point_to_line_distance(Point(5, 3), Point(0, 0), Point(10, 0)) == 3.0

    def test_clamped_to_segment_end(self):
        assert point_to_line_distance(Point(13, 4), Point(0, 0), Point(10, 0)) == 5.0

    def test_zero_length_segment(self):
        assert point_to_line_distance(Point(3, 4), Point(0, 0), Point(0, 0)) == 5.0

    def test_closest_point(self):
        assert closest_point_on_line(Point(4, 7), Point(0, 0), Point(10, 0)) == Point(4, 0)
        assert closest_point_on_line(Point(-2, 1), Point(0, 0), Point(10, 0)) == Point(0, 0)

    def test_closest_point_degenerate_segment_is_copy(self):
        start = Point(2, 2)
        assert closest_point_on_line(Point(9, 9), start, Point(2, 2)) == start


class TestProximity:
    def test_is_near_default_tolerance(self):
        assert is_near(Point(0, 0), Point(0.2, 0)) is True
        assert is_near(Point(0, 0), Point(0.25, 0)) is False

    def test_is_near_custom_tolerance(self):
        assert is_near(Point(0, 0), Point(0.9, 0), tolerance=1.0) is True

    def test_is_near_line(self):
        assert is_near_line(Point(5, 0.1), Point(0, 0), Point(10, 0)) is True
        assert is_near_line(Point(5, 1), Point(0, 0), Point(10, 0)) is False


class TestPolygonArea:
    def test_rectangle(self):
        rect = [Point(0, 0), Point(10, 0), Point(10, 8), Point(0, 8)]
        assert polygon_area(rect) == 80.0

    def test_winding_invariant(self, square_polygon):
        assert polygon_area(square_polygon) == polygon_area(square_polygon[::-1])

    def test_fewer_than_three_vertices(self):
        assert polygon_area([Point(0, 0), Point(5, 5)]) == 0.0

    def test_matches_shapely_for_concave_outline(self):
        outline = [
            Point(0, 0), Point(15, 0), Point(15, 5),
            Point(10, 5), Point(10, 10), Point(0, 10),
        ]
        expected = Polygon([(p.x, p.y) for p in outline]).area
        assert polygon_area(outline) == pytest.approx(expected)

    def test_signed_area_sign(self, square_polygon):
        assert signed_polygon_area(square_polygon) == 100.0
        assert signed_polygon_area(square_polygon[::-1]) == -100.0


class TestCentroid:
    def test_vertex_mean(self, square_polygon):
        assert polygon_centroid(square_polygon) == Point(5, 5)

    def test_vertex_mean_not_area_weighted(self):
        # Extra vertex on the bottom edge pulls the vertex mean down.
        vertices = [Point(0, 0), Point(5, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
        assert polygon_centroid(vertices) == Point(5, 4)

    def test_empty(self):
        assert polygon_centroid([]) == Point(0, 0)


class TestWinding:
    def test_counter_clockwise(self, square_polygon):
        assert is_counter_clockwise(square_polygon) is True
        assert is_counter_clockwise(square_polygon[::-1]) is False

    def test_too_few_vertices(self):
        assert is_counter_clockwise([Point(0, 0), Point(1, 0)]) is False

    @pytest.mark.parametrize("reverse", [False, True])
    def test_ensure_counter_clockwise(self, square_polygon, reverse):
        vertices = square_polygon[::-1] if reverse else square_polygon
        result = ensure_counter_clockwise(vertices)
        assert is_counter_clockwise(result) is True
        assert set(result) == set(square_polygon)

    def test_ensure_does_not_mutate_input(self, square_polygon):
        clockwise = square_polygon[::-1]
        snapshot = list(clockwise)
        ensure_counter_clockwise(clockwise)
        assert clockwise == snapshot


class TestSegmentIntersection:
    def test_crossing(self):
        assert line_segments_intersect(Point(0, 0), Point(10, 10), Point(0, 10), Point(10, 0))

    def test_parallel(self):
        assert not line_segments_intersect(Point(0, 0), Point(10, 0), Point(0, 1), Point(10, 1))

    def test_touching_endpoint(self):
        assert line_segments_intersect(Point(0, 0), Point(5, 0), Point(5, 0), Point(5, 5))

    def test_collinear_overlap(self):
        assert line_segments_intersect(Point(0, 0), Point(6, 0), Point(4, 0), Point(10, 0))

    def test_collinear_disjoint(self):
        assert not line_segments_intersect(Point(0, 0), Point(3, 0), Point(4, 0), Point(10, 0))

    def test_t_shape_short_of_wall(self):
        assert not line_segments_intersect(Point(0, 0), Point(10, 0), Point(5, 1), Point(5, 5))


class TestSnapping:
    def test_snap_to_half_foot(self):
        assert snap_to_grid(3.3) == 3.5
        assert snap_to_grid(3.2) == 3.0

    def test_custom_grid(self):
        assert snap_to_grid(7.4, grid_size=2) == 8

    def test_snap_point(self):
        assert snap_point_to_grid(Point(1.1, 2.8)) == Point(1.0, 3.0)


class TestPointInPolygon:
    def test_well_inside(self, square_polygon):
        assert is_point_in_polygon(Point(5, 5), square_polygon) is True

    def test_well_outside(self, square_polygon):
        assert is_point_in_polygon(Point(15, 5), square_polygon) is False
        assert is_point_in_polygon(Point(-3, -3), square_polygon) is False

    def test_concave_notch_is_outside(self):
        outline = [
            Point(0, 0), Point(15, 0), Point(15, 5),
            Point(10, 5), Point(10, 10), Point(0, 10),
        ]
        assert is_point_in_polygon(Point(12, 8), outline) is False
        assert is_point_in_polygon(Point(12, 2), outline) is True

    @pytest.mark.parametrize(
        "point,expected",
        [
            (Point(0, 5), True),    # min-x edge
            (Point(5, 0), True),    # min-y edge
            (Point(0, 0), True),    # min corner
            (Point(10, 5), False),  # max-x edge
            (Point(5, 10), False),  # max-y edge
            (Point(10, 10), False),  # max corner
        ],
    )
    def test_boundary_is_half_open(self, square_polygon, point, expected):
        assert is_point_in_polygon(point, square_polygon) is expected

    def test_boundary_independent_of_winding(self, square_polygon):
        clockwise = square_polygon[::-1]
        assert is_point_in_polygon(Point(0, 5), clockwise) is True
        assert is_point_in_polygon(Point(10, 5), clockwise) is False
