"""Tests for tongue synthesis."""

import pytest

from puzzle_pattern import (
    DegenerateEdgeError,
    Edge,
    Point,
    RandomStream,
    build_grid,
    derive_edges,
    interior_edges,
    make_tongue,
    perpendicular,
    perturb_grid,
    round_half_away,
    synthesize_tongues,
)


@pytest.mark.parametrize(
    "value,expected",
    [(0.0, 0), (0.5, 1), (-0.5, -1), (1.4999, 1), (2.5, 3), (-2.5, -3), (-16.67, -17)],
)
def test_round_half_away(value: float, expected: int) -> None:
    """Test rounding of halves away from zero."""
    assert round_half_away(value) == expected


@pytest.mark.parametrize(
    "vector,expected",
    [
        (Point(0, 50), Point(1, 0)),
        (Point(0, -50), Point(1, 0)),
        (Point(50, 0), Point(0, 1)),
        (Point(3, 50), Point(1, 0)),
        (Point(50, 3), Point(1, -17)),
        (Point(-50, 4), Point(1, 13)),
    ],
)
def test_perpendicular(vector: Point, expected: Point) -> None:
    """Test the rounded perpendicular for axis aligned and skewed edges."""
    assert perpendicular(vector) == expected


def test_perpendicular_of_zero_vector_raises() -> None:
    """Test that a zero-length edge cannot get a tongue."""
    with pytest.raises(DegenerateEdgeError):
        perpendicular(Point(0, 0))
    with pytest.raises(ValueError):
        make_tongue(Edge(Point(5, 5), Point(5, 5), "vertical"), True, 50)


def test_vertical_tongue_geometry() -> None:
    """Test every control point of a vertical edge tongue."""
    edge = Edge(Point(50, 0), Point(50, 50), "vertical")

    kept = make_tongue(edge, True, 50)
    flipped = make_tongue(edge, False, 50)

    assert kept.start == Point(50, 0)
    assert kept.start_control == Point(50, 40)
    assert kept.middle == Point(59, 25)
    assert kept.middle_control == Point(59, 5)
    assert kept.end_control == Point(50, 10)
    assert kept.end == Point(50, 50)

    assert flipped.middle == Point(41, 25)
    assert flipped.middle_control == Point(41, 5)
    assert flipped.start_control == kept.start_control
    assert flipped.end_control == kept.end_control


def test_horizontal_tongue_geometry() -> None:
    """Test every control point of a horizontal edge tongue."""
    edge = Edge(Point(0, 50), Point(50, 50), "horizontal")

    tongue = make_tongue(edge, True, 50)

    assert tongue.start == Point(0, 50)
    assert tongue.start_control == Point(40, 50)
    assert tongue.middle == Point(25, 59)
    assert tongue.middle_control == Point(5, 59)
    assert tongue.end_control == Point(10, 50)
    assert tongue.end == Point(50, 50)
    assert make_tongue(edge, False, 50).middle == Point(25, 41)


def test_bulge_depth_scales_with_cell_size() -> None:
    """Test that the middle point moves by round(0.18 * cell size)."""
    edge = Edge(Point(0, 0), Point(0, 100), "vertical")

    tongue = make_tongue(edge, True, 100)

    assert tongue.middle == Point(18, 50)


def test_one_tongue_per_edge_with_matching_endpoints() -> None:
    """Test tongue count, order and endpoints on a perturbed grid."""
    nx, ny, cell = 5, 4, 60
    width, height = nx * cell, ny * cell
    stream = RandomStream(11)
    grid = perturb_grid(build_grid(nx, ny, cell), 8, width, height, stream)
    edges = interior_edges(derive_edges(grid), width, height)
    draws_before = stream.draws

    curves = synthesize_tongues(edges, stream, cell)

    assert len(curves) == len(edges)
    assert stream.draws - draws_before == len(edges)
    for edge, curve in zip(edges, curves):
        assert curve.start == edge.start
        assert curve.end == edge.end


def test_flip_coins_follow_the_stream() -> None:
    """Test that each tongue direction matches the coin drawn for its edge."""
    edges = [Edge(Point(50, 0), Point(50, 50), "vertical")] * 20
    coins = RandomStream(5)
    expected = [coins.coin() for _ in edges]

    curves = synthesize_tongues(edges, RandomStream(5), 50)

    assert [curve.middle.x > 50 for curve in curves] == expected
    assert len(set(expected)) == 2


def test_curve_path_data() -> None:
    """Test the SVG path serialization of a tongue."""
    tongue = make_tongue(Edge(Point(50, 0), Point(50, 50), "vertical"), True, 50)

    assert tongue.to_path_d() == "M 50,0 C 50,40 59,5 59,25 S 50,10 50,50"


def test_synthesize_tongues_rejects_collapsed_edge() -> None:
    """Test that a collapsed edge in the sequence stops synthesis."""
    edges = [
        Edge(Point(50, 0), Point(50, 50), "vertical"),
        Edge(Point(20, 20), Point(20, 20), "horizontal"),
    ]

    with pytest.raises(DegenerateEdgeError):
        synthesize_tongues(edges, RandomStream(0), 50)
