import math

import pytest

from slvsgeom.utils import (
    angle_2d,
    angle_3d,
    angle_within_tolerance,
    arc_len,
    convert_2d_to_3d,
    distance,
    len_within_tolerance,
    make_quaternion,
    project_on_line,
    project_on_plane,
    quaternion_n,
    quaternion_u,
    quaternion_v,
    rounded_mod,
)

SQRT_2 = math.sqrt(2.0)


def test_distance():
    assert distance([3.0, 0.0], [0.0, 4.0]) == 5.0
    assert distance([2.0, 0.0, 1.0], [0.0, 2.0, 0.0]) == 3.0
    assert distance([1.0, 0.0, 1.0, 0.0], [0.0, 1.0, 0.0, 1.0]) == 2.0


def test_distance_dimension_mismatch():
    with pytest.raises(ValueError):
        distance([1.0, 2.0], [1.0, 2.0, 3.0])


def test_2d_to_3d():
    coords_3d = convert_2d_to_3d(
        [7.142857142857142, 33.57142857142857],
        [10.0, 20.0, 30.0],
        make_quaternion([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]),
    )
    assert len_within_tolerance(
        distance(coords_3d, [16.530612244897966, 46.734693877551024, 50.51020408163265]),
        0.0,
    )


def test_3d_to_2d():
    coords_2d = project_on_plane(
        [34.89795918367347, 37.55102040816326, 56.63265306122449],
        [10.0, 20.0, 30.0],
        make_quaternion([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]),
    )
    assert len_within_tolerance(
        distance(coords_2d, [7.142857142857142, 33.57142857142857]), 0.0
    )


@pytest.mark.parametrize(
    "end, expected",
    [
        ([1.0, 0.0], 0.0),
        ([1.0, 1.0], 45.0),
        ([0.0, 1.0], 90.0),
        ([-1.0, 1.0], 135.0),
        ([-1.0, 0.0], 180.0),
        ([-1.0, -1.0], 225.0),
        ([0.0, -1.0], 270.0),
        ([1.0, -1.0], 315.0),
    ],
)
def test_angles(end, expected):
    result = angle_2d([[0.0, 0.0], [1.0, 0.0]], [[0.0, 0.0], end])
    assert angle_within_tolerance(result, expected)
    assert abs(result - expected) < 1e-9


@pytest.mark.parametrize(
    "end, expected",
    [
        ([SQRT_2 / 2.0, SQRT_2 / 2.0], 0.25 * math.pi),
        ([0.0, 1.0], 0.5 * math.pi),
        ([-SQRT_2 / 2.0, SQRT_2 / 2.0], 0.75 * math.pi),
        ([-1.0, 0.0], math.pi),
        ([-SQRT_2 / 2.0, -SQRT_2 / 2.0], 1.25 * math.pi),
        ([0.0, -1.0], 1.5 * math.pi),
        ([SQRT_2 / 2.0, -SQRT_2 / 2.0], 1.75 * math.pi),
    ],
)
def test_arc_len(end, expected):
    assert len_within_tolerance(arc_len([0.0, 0.0], [1.0, 0.0], end), expected)


def test_arc_len_rejects_non_circular_points():
    with pytest.raises(ValueError):
        arc_len([0.0, 0.0], [1.0, 0.0], [0.0, 2.0])


def test_identity_quaternion():
    q = make_quaternion([1.0, 0.0, 0.0], [0.0, 1.0, 0.0])
    assert list(q) == pytest.approx([1.0, 0.0, 0.0, 0.0], abs=1e-9)
    assert list(quaternion_u(q)) == pytest.approx([1.0, 0.0, 0.0], abs=1e-9)
    assert list(quaternion_v(q)) == pytest.approx([0.0, 1.0, 0.0], abs=1e-9)
    assert list(quaternion_n(q)) == pytest.approx([0.0, 0.0, 1.0], abs=1e-9)


@pytest.mark.parametrize(
    "u, v",
    [
        ([0.0, 1.0, 0.0], [0.0, 0.0, 1.0]),
        ([-1.0, 0.0, 0.0], [0.0, -1.0, 0.0]),
        ([0.0, 0.0, 1.0], [1.0, 0.0, 0.0]),
        ([SQRT_2 / 2.0, SQRT_2 / 2.0, 0.0], [-SQRT_2 / 2.0, SQRT_2 / 2.0, 0.0]),
    ],
)
def test_quaternion_basis_round_trip(u, v):
    q = make_quaternion(u, v)
    assert abs(sum(c * c for c in q) - 1.0) < 1e-12
    assert list(quaternion_u(q)) == pytest.approx(u, abs=1e-9)
    assert list(quaternion_v(q)) == pytest.approx(v, abs=1e-9)


def test_plane_round_trip():
    q = make_quaternion([0.0, 0.0, 1.0], [1.0, 0.0, 0.0])
    origin = [3.0, -2.0, 5.0]
    point = [4.5, -7.25]
    result = project_on_plane(convert_2d_to_3d(point, origin, q), origin, q)
    assert list(result) == pytest.approx(point, abs=1e-9)


def test_project_on_line():
    result_2d = project_on_line([1.0, 1.0], [0.0, 0.0], [2.0, 0.0])
    assert list(result_2d) == pytest.approx([1.0, 0.0], abs=1e-9)
    result_3d = project_on_line([0.0, 2.0, 0.0], [0.0, 0.0, 0.0], [1.0, 1.0, 0.0])
    assert list(result_3d) == pytest.approx([1.0, 1.0, 0.0], abs=1e-9)


def test_project_on_degenerate_line():
    with pytest.raises(ValueError):
        project_on_line([1.0, 1.0], [2.0, 2.0], [2.0, 2.0])


def test_angle_3d():
    result = angle_3d([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], [[0.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
    assert abs(result - 90.0) < 1e-9
    opposite = angle_3d(
        [[0.0, 0.0, 0.0], [0.0, 0.0, 2.0]], [[1.0, 1.0, 1.0], [1.0, 1.0, -3.0]]
    )
    assert abs(opposite - 180.0) < 1e-9


@pytest.mark.parametrize(
    "a, n, expected",
    [(5.0, 3.0, -1.0), (7.0, 3.0, 1.0), (1.5, 1.0, -0.5), (-1.5, 1.0, 0.5), (370.0, 360.0, 10.0)],
)
def test_rounded_mod(a, n, expected):
    assert rounded_mod(a, n) == pytest.approx(expected)


def test_tolerance_checks():
    assert len_within_tolerance(1.0, 1.0 + 1e-9)
    assert not len_within_tolerance(1.0, 1.0 + 1e-6)
    assert angle_within_tolerance(0.0, 360.0)
    assert not angle_within_tolerance(0.0, 90.0)
    assert len_within_tolerance(1.0, 1.5, tolerance=100.0)