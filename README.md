# slvsgeom

Small, dependency-free geometry helpers for 2D and 3D sketches. It covers
unit quaternions built from basis vectors, conversion between plane and space
coordinates, projections, angles, arc lengths and tolerance checks.

## Installation

```
pip install slvsgeom
```

## Usage

All functions live in `slvsgeom.utils`. They take plain sequences of floats and
return tuples of floats, or a single float.

```python
from math import pi

from slvsgeom.utils import (
    angle_2d,
    arc_len,
    convert_2d_to_3d,
    distance,
    len_within_tolerance,
    make_quaternion,
    project_on_plane,
    quaternion_n,
)

# A plane through (10, 20, 30) whose orientation is given by two basis vectors.
q = make_quaternion([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
normal = quaternion_n(q)

# Map plane coordinates into space and back again.
p3 = convert_2d_to_3d([7.0, 33.5], [10.0, 20.0, 30.0], q)
p2 = project_on_plane(p3, [10.0, 20.0, 30.0], q)

distance([3.0, 0.0], [0.0, 4.0])                      # 5.0
angle_2d([[0, 0], [1, 0]], [[0, 0], [0, 1]])          # 90.0 degrees
len_within_tolerance(arc_len([0, 0], [1, 0], [-1, 0]), pi)   # True
```

### What is available

- `make_quaternion(basis_vec_1, basis_vec_2)`: a unit quaternion `(w, x, y, z)`
  from two basis vectors. Raises `ValueError` if the vectors give no
  orientation.
- `quaternion_u(q)`, `quaternion_v(q)`, `quaternion_n(q)`: the basis vectors
  U and V and the normal N of a quaternion.
- `distance(a, b)`: Euclidean distance in any dimension. Both points must have
  the same number of coordinates, or `ValueError` is raised.
- `convert_2d_to_3d(point, origin, quaternion)`: plane coordinates into space.
- `project_on_plane(point, origin, quaternion)`: a point in space onto a plane,
  returned as plane coordinates.
- `project_on_line(point, line_start, line_end)`: projection onto the line
  through two points, in any dimension. Raises `ValueError` if the two points
  coincide.
- `angle_2d(vec_a, vec_b)`: angle from one vector to another in the plane, in
  degrees within `[0, 360)`. Each vector is a pair of start and end points.
- `angle_3d(vec_a, vec_b)`: the shortest angle between two vectors in space,
  in degrees. Raises `ValueError` for a zero-length vector.
- `arc_len(center, arc_start, arc_end)`: length of the counter-clockwise arc
  from `arc_start` to `arc_end`. Raises `ValueError` if the two points are not
  the same distance from the center.
- `rounded_mod(a, n)`: remainder of `a / n` between `-n/2` and `n/2`, rounding
  the quotient half away from zero.
- `len_within_tolerance(left, right, tolerance=SOLVE_TOLERANCE)`: `True` if
  two lengths differ by no more than one hundredth of `tolerance`.
- `angle_within_tolerance(left, right, tolerance=SOLVE_TOLERANCE)`: `True` if
  the cosines of two angles in degrees differ by at most `tolerance`.
- `SOLVE_TOLERANCE`: the default tolerance, `1e-6`.

Every function checks how many components its inputs have and raises
`ValueError` when that is wrong.

## What it does not do

This package holds geometry helpers only. It has no constraint solver and no
model of sketches, groups, entities or constraints.

## Running the tests

```
pip install -e ".[test]"
pytest
```