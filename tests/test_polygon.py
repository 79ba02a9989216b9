import math

import pytest

from geom2d.aabb import Aabb
from geom2d.angle import Angle
from geom2d.errors import (
    ValidationError,
    Violation
)
from geom2d.polygon import (
    Polygon,
    PolygonBuilder
)
from geom2d.vector import Vector


def square() -> Polygon:
    return (
        PolygonBuilder()
        .vertex(-10.0, -10.0)
        .vertex(10.0, -10.0)
        .vertex(10.0, 10.0)
        .vertex(-10.0, 10.0)
        .build()
    )


def triangle() -> Polygon:
    return Polygon([Vector(0, 0), Vector(4, 0), Vector(0, 3)])


def test_construction_keeps_winding_order():
    vertices = [Vector(0, 0), Vector(4, 0), Vector(0, 3)]
    polygon = Polygon(vertices)

    assert polygon.vertices == tuple(vertices)
    assert list(polygon) == vertices
    assert len(polygon) == 3


@pytest.mark.parametrize(
    "vertices",
    [[], [Vector(0, 0)], [Vector(0, 0), Vector(1, 1)]],
)
def test_too_few_vertices_are_rejected(vertices):
    with pytest.raises(ValidationError) as exc_info:
        Polygon(vertices)
    assert exc_info.value.violation is Violation.too_few_vertices


def test_repeated_vertex_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        Polygon([Vector(0, 0), Vector(0, 0), Vector(1, 1)])
    assert exc_info.value.violation is Violation.degenerate_edge


def test_closing_edge_must_not_be_degenerate():
    with pytest.raises(ValidationError) as exc_info:
        Polygon([Vector(0, 0), Vector(1, 0), Vector(1, 1), Vector(0, 0)])
    assert exc_info.value.violation is Violation.degenerate_edge


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_vertices_are_rejected(bad):
    with pytest.raises(ValidationError) as exc_info:
        Polygon([Vector(0, 0), Vector(bad, 0), Vector(1, 1)])
    assert exc_info.value.violation is Violation.non_finite


def test_builder_validates():
    with pytest.raises(ValidationError):
        PolygonBuilder().vertex(0, 0).vertex(1, 1).build()


def test_translate():
    assert square().translate(Vector(30, 40)) == Polygon(
        [Vector(20, 30), Vector(40, 30), Vector(40, 50), Vector(20, 50)]
    )


def test_translate_out_of_range_is_rejected():
    with pytest.raises(ValidationError):
        triangle().translate(Vector(math.inf, 0))


def test_rotate_around_origin_by_half_turn():
    rotated = square().rotate_around_point(Angle.HALF_TURN, Vector.ZERO)
    expected = [(10, 10), (-10, 10), (-10, -10), (10, -10)]

    for vertex, (x, y) in zip(rotated, expected):
        assert vertex.x == pytest.approx(x)
        assert vertex.y == pytest.approx(y)


def test_rotate_around_point_is_counter_clockwise():
    center = Vector(30, 40)
    rotated = triangle().translate(center).rotate_around_point(Angle.QUARTER_TURN, center)
    expected = [(30, 40), (30, 44), (27, 40)]

    for vertex, (x, y) in zip(rotated, expected):
        assert vertex.x == pytest.approx(x)
        assert vertex.y == pytest.approx(y)


def test_aabb():
    assert triangle().aabb() == Aabb(Vector(0, 0), Vector(4, 3))


def test_from_aabb():
    polygon = Polygon.from_aabb(Aabb(Vector(0, 0), Vector(2, 1)))
    assert polygon.vertices == (Vector(0, 0), Vector(2, 0), Vector(2, 1), Vector(0, 1))

    with pytest.raises(ValidationError):
        Polygon.from_aabb(Aabb(Vector(0, 0), Vector(0, 0)))


def test_is_convex():
    assert square().is_convex()
    assert triangle().is_convex()
    assert not Polygon([Vector(0, 0), Vector(20, 0), Vector(10, 5), Vector(10, 10)]).is_convex()


def test_star_is_not_convex():
    star = Polygon(
        Vector.from_angle(Angle.from_degrees(degrees)) * 10
        for degrees in (90, 234, 18, 162, 306)
    )
    assert not star.is_convex()


@pytest.mark.parametrize(
    "point",
    [Vector(0, 0), Vector(10, -10), Vector(10, 0), Vector(9.9, 9.9), Vector(-3, 7)],
)
def test_contains_point(point):
    assert square().contains_point(point)


@pytest.mark.parametrize(
    "point",
    [Vector(10.1, -10.1), Vector(-9000, -9000), Vector(0, 10.5)],
)
def test_does_not_contain_point(point):
    assert not square().contains_point(point)


def test_contains_point_after_translation():
    assert square().translate(Vector(10.43, 20.1)).contains_point(Vector(12.0, 18.0))
    assert not square().translate(Vector(11, 11)).contains_point(Vector.ZERO)


def test_contains_point_tolerance():
    assert not square().contains_point(Vector(10.001, 0))
    assert square().contains_point(Vector(10.001, 0), tolerance=0.1)


def test_convex_hull():
    points = [Vector(20, 5), Vector(10, 0), Vector(10, 10), Vector(15, 0), Vector(5, 5)]
    polygon = Polygon.convex_hull(points)

    assert polygon.vertices == (
        Vector(5, 5),
        Vector(10, 0),
        Vector(15, 0),
        Vector(20, 5),
        Vector(10, 10),
    )


def test_convex_hull_of_collinear_points_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        Polygon.convex_hull([Vector(0, 0), Vector(1, 1), Vector(2, 2)])
    assert exc_info.value.violation is Violation.too_few_vertices


def test_polygons_are_values():
    assert square() == square()
    assert hash(square()) == hash(square())
    assert square() != square().translate(Vector(1, 0))


def test_edge_too_long_to_represent_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        Polygon([Vector(-1e308, -1e308), Vector(1e308, -1e308), Vector(0.0, 1e308)])
    assert exc_info.value.violation is Violation.non_finite


def test_huge_polygon_is_valid():
    polygon = Polygon([Vector(-1e200, -1e200), Vector(1e200, -1e200), Vector(0.0, 1e200)])

    assert polygon.is_convex()
    assert polygon.contains_point(Vector.ZERO)


def test_contains_point_tolerance_is_a_distance():
    # the edges are 20 long, so an edge-length-scaled test would differ
    assert square().contains_point(Vector(10.05, 0), tolerance=0.1)
    assert not square().contains_point(Vector(10.2, 0), tolerance=0.1)
