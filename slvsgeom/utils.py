"""Geometry helpers: quaternions, projections, angles, arc lengths and tolerances."""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = [
    "SOLVE_TOLERANCE",
    "make_quaternion",
    "quaternion_u",
    "quaternion_v",
    "quaternion_n",
    "distance",
    "convert_2d_to_3d",
    "project_on_line",
    "project_on_plane",
    "angle_2d",
    "angle_3d",
    "arc_len",
    "rounded_mod",
    "len_within_tolerance",
    "angle_within_tolerance",
]

SOLVE_TOLERANCE = 1e-6
"""Default tolerance used by the tolerance checks."""

Vec3 = tuple[float, float, float]
Quat = tuple[float, float, float, float]


def _unpack(values: Sequence[float], size: int, name: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != size:
        raise ValueError(f"{name} must have {size} components, got {len(result)}")
    return result


def _same_length(*vectors: Sequence[float]) -> list[tuple[float, ...]]:
    converted = [tuple(float(v) for v in vec) for vec in vectors]
    if len({len(vec) for vec in converted}) > 1:
        raise ValueError("coordinates must all have the same dimensionality")
    return converted


def _cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def _positive_radians(radians: float) -> float:
    """Wrap an angle into the range [0, 2*pi)."""
    two_pi = 2.0 * math.pi
    wrapped = math.fmod(radians, two_pi)
    if wrapped < 0.0:
        wrapped += two_pi
    return wrapped


def _rotate(quaternion: Quat, vector: Vec3) -> Vec3:
    """Rotate ``vector`` by the unit quaternion ``(w, x, y, z)``."""
    w, i, j, k = quaternion
    axis = (i, j, k)
    twice_cross = tuple(2.0 * c for c in _cross(axis, vector))
    axis_cross = _cross(axis, twice_cross)
    return tuple(v + w * t + a for v, t, a in zip(vector, twice_cross, axis_cross))


def make_quaternion(basis_vec_1: Sequence[float], basis_vec_2: Sequence[float]) -> Quat:
    """Compute a unit quaternion ``(w, x, y, z)`` from two basis vectors."""
    ux, uy, uz = _unpack(basis_vec_1, 3, "basis_vec_1")
    vx, vy, vz = _unpack(basis_vec_2, 3, "basis_vec_2")
    nx, ny, nz = _cross((ux, uy, uz), (vx, vy, vz))

    trace = 1.0 + ux + vy + nz
    if trace > 1e-4:
        s = 2.0 * math.sqrt(trace)
        q = (s / 4.0, (vz - ny) / s, (nx - uz) / s, (uy - vx) / s)
    elif ux > vy and ux > nz:
        s = 2.0 * math.sqrt(1.0 + ux - vy - nz)
        q = ((vz - ny) / s, s / 4.0, (uy + vx) / s, (nx + uz) / s)
    elif vy > nz:
        s = 2.0 * math.sqrt(1.0 - ux + vy - nz)
        q = ((nx - uz) / s, (uy + vx) / s, s / 4.0, (vz + ny) / s)
    else:
        s = 2.0 * math.sqrt(1.0 - ux - vy + nz)
        q = ((uy - vx) / s, (nx + uz) / s, (vz + ny) / s, s / 4.0)

    magnitude = math.sqrt(sum(c * c for c in q))
    if magnitude == 0.0:
        raise ValueError("basis vectors do not define an orientation")
    return tuple(c / magnitude for c in q)


def quaternion_u(quaternion: Sequence[float]) -> Vec3:
    """Return the basis vector U of a quaternion ``(w, x, y, z)``."""
    w, x, y, z = _unpack(quaternion, 4, "quaternion")
    return (
        w * w + x * x - y * y - z * z,
        2 * w * z + 2 * x * y,
        2 * x * z - 2 * w * y,
    )


def quaternion_v(quaternion: Sequence[float]) -> Vec3:
    """Return the basis vector V of a quaternion ``(w, x, y, z)``."""
    w, x, y, z = _unpack(quaternion, 4, "quaternion")
    return (
        2 * x * y - 2 * w * z,
        w * w - x * x + y * y - z * z,
        2 * w * x + 2 * y * z,
    )


def quaternion_n(quaternion: Sequence[float]) -> Vec3:
    """Return the normal vector N of a quaternion ``(w, x, y, z)``."""
    w, x, y, z = _unpack(quaternion, 4, "quaternion")
    return (
        2 * w * y + 2 * x * z,
        2 * y * z - 2 * w * x,
        w * w - x * x - y * y + z * z,
    )


def distance(coords_a: Sequence[float], coords_b: Sequence[float]) -> float:
    """Euclidean distance between two points of equal dimensionality."""
    a, b = _same_length(coords_a, coords_b)
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def convert_2d_to_3d(
    point: Sequence[float], origin: Sequence[float], quaternion: Sequence[float]
) -> Vec3:
    """Convert coordinates on a plane, given by origin and normal, into 3d."""
    x, y = _unpack(point, 2, "point")
    origin3 = _unpack(origin, 3, "origin")
    q = _unpack(quaternion, 4, "quaternion")
    rotated = _rotate(q, (x, y, 0.0))
    return tuple(r + o for r, o in zip(rotated, origin3))


def project_on_line(
    point: Sequence[float], line_start: Sequence[float], line_end: Sequence[float]
) -> tuple[float, ...]:
    """Project a point onto the line through ``line_start`` and ``line_end``."""
    p, start, end = _same_length(point, line_start, line_end)
    direction = tuple(e - s for e, s in zip(end, start))
    offset = tuple(q - s for q, s in zip(p, start))
    length_sq = _dot(direction, direction)
    if length_sq == 0.0:
        raise ValueError("line start and end coincide")
    t = _dot(direction, offset) / length_sq
    return tuple(s + d * t for s, d in zip(start, direction))


def project_on_plane(
    point: Sequence[float], origin: Sequence[float], quaternion: Sequence[float]
) -> tuple[float, float]:
    """Project a 3d point onto a plane given by origin and normal quaternion."""
    p = _unpack(point, 3, "point")
    origin3 = _unpack(origin, 3, "origin")
    w, i, j, k = _unpack(quaternion, 4, "quaternion")
    relative = tuple(a - b for a, b in zip(p, origin3))
    x, y, _ = _rotate((w, -i, -j, -k), relative)
    return (x, y)


def angle_2d(
    vec_a: Sequence[Sequence[float]], vec_b: Sequence[Sequence[float]]
) -> float:
    """Angle in degrees, in [0, 360), from ``vec_a`` to ``vec_b``.

    Each vector is given as a pair of start and end coordinates.
    """
    a_start, a_end = (_unpack(p, 2, "vec_a") for p in vec_a)
    b_start, b_end = (_unpack(p, 2, "vec_b") for p in vec_b)
    ax, ay = a_end[0] - a_start[0], a_end[1] - a_start[1]
    bx, by = b_end[0] - b_start[0], b_end[1] - b_start[1]
    angle = math.atan2(by, bx) - math.atan2(ay, ax)
    return math.degrees(_positive_radians(angle))


def angle_3d(
    vec_a: Sequence[Sequence[float]], vec_b: Sequence[Sequence[float]]
) -> float:
    """Shortest angle in degrees between two 3d vectors.

    Each vector is given as a pair of start and end coordinates.
    """
    a_start, a_end = (_unpack(p, 3, "vec_a") for p in vec_a)
    b_start, b_end = (_unpack(p, 3, "vec_b") for p in vec_b)
    a = tuple(e - s for e, s in zip(a_end, a_start))
    b = tuple(e - s for e, s in zip(b_end, b_start))
    lengths = math.sqrt(_dot(a, a)) * math.sqrt(_dot(b, b))
    if lengths == 0.0:
        raise ValueError("vectors must have non-zero length")
    cosine = max(-1.0, min(1.0, _dot(a, b) / lengths))
    return math.degrees(_positive_radians(math.acos(cosine)))


def arc_len(
    center: Sequence[float], arc_start: Sequence[float], arc_end: Sequence[float]
) -> float:
    """Length of the counter-clockwise arc from ``arc_start`` to ``arc_end``.

    Raises ValueError if the two end points are not equidistant from the center.
    """
    cx, cy = _unpack(center, 2, "center")
    sx, sy = _unpack(arc_start, 2, "arc_start")
    ex, ey = _unpack(arc_end, 2, "arc_end")
    start = (sx - cx, sy - cy)
    end = (ex - cx, ey - cy)
    radius = math.hypot(*start)
    end_radius = math.hypot(*end)
    if not len_within_tolerance(radius, end_radius):
        raise ValueError(
            f"points do not define a circular arc: radii {radius} and {end_radius}"
        )
    angle = math.atan2(end[1], end[0]) - math.atan2(start[1], start[0])
    return _positive_radians(angle) * radius


def rounded_mod(a: float, n: float) -> float:
    """Remainder of ``a / n`` lying between ``-n/2`` and ``n/2``.

    The quotient is rounded half away from zero.
    """
    quotient = a / n
    rounded = math.copysign(math.floor(abs(quotient) + 0.5), quotient)
    return a - n * rounded


def len_within_tolerance(
    left: float, right: float, tolerance: float = SOLVE_TOLERANCE
) -> bool:
    """Whether two lengths differ by no more than one hundredth of ``tolerance``."""
    return abs(left - right) <= tolerance * 1e-2


def angle_within_tolerance(
    left: float, right: float, tolerance: float = SOLVE_TOLERANCE
) -> bool:
    """Whether the cosines of two angles in degrees differ by at most ``tolerance``."""
    return abs(math.cos(math.radians(left)) - math.cos(math.radians(right))) <= tolerance