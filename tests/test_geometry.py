import pytest

from geogebra_tikz.geometry import (
    LABEL_POSITIONS,
    bounding_box,
    coords_equal,
    distance,
    label_position,
    ray_angle,
)


def _square_with_interior():
    return [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0), (3.0, 3.0), (1.0, 1.0)]


def test_coords_equal_uses_strict_thousandth_tolerance():
    assert coords_equal((1.0, 1.0), (1.0009, 0.9991))
    assert not coords_equal((1.0, 1.0), (1.0011, 1.0))


def test_bounding_box():
    assert bounding_box(_square_with_interior()) == (0.0, 0.0, 4.0, 4.0)
    with pytest.raises(ValueError):
        bounding_box([])


def test_left_edge_wins_over_quadrant_rule():
    points = [(0.0, 3.9), (4.0, 0.0), (2.0, 4.0)]
    # (0.05, 3.9) is top-left, but sits on the minimum-x edge.
    assert label_position((0.05, 3.9), points + [(0.05, 3.9)]) == "left"


def test_edges_are_checked_in_order():
    points = _square_with_interior()
    assert label_position((0.0, 0.0), points) == "left"
    assert label_position((4.0, 4.0), points) == "right"
    assert label_position((2.0, 0.0), points + [(2.0, 0.0)]) == "below"
    assert label_position((2.0, 4.0), points + [(2.0, 4.0)]) == "above"


def test_interior_points_use_quadrants():
    points = _square_with_interior()
    assert label_position((3.0, 3.0), points) == "above right"
    assert label_position((1.0, 1.0), points) == "below left"
    assert label_position((3.0, 1.0), points + [(3.0, 1.0)]) == "below right"
    assert label_position((1.0, 3.0), points + [(1.0, 3.0)]) == "above left"


def test_center_ties_fall_to_lower_left():
    points = _square_with_interior() + [(2.0, 2.0)]
    assert label_position((2.0, 2.0), points) == "below left"


def test_label_position_values_are_known_anchors():
    points = _square_with_interior()
    for point in points:
        assert label_position(point, points) in LABEL_POSITIONS


def test_distance_and_ray_angle():
    assert distance((0.0, 0.0), (3.0, 4.0)) == pytest.approx(5.0)
    assert ray_angle((1.0, 1.0), (1.0, 3.0)) == pytest.approx(90.0)
    assert ray_angle((0.0, 0.0), (-1.0, 0.0)) == pytest.approx(180.0)
    assert ray_angle((0.0, 0.0), (0.0, -2.0)) == pytest.approx(-90.0)
