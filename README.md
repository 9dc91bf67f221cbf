# raytracer

The geometric core of a small ray tracer: points and vectors, 4×4
transformation matrices, and primitive shapes (sphere, plane, cube, cylinder
and cone) that can be intersected with rays and asked for surface normals.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Points and vectors

`raytracer.tuples` holds the `Tuple` class, a frozen 4-component value with
`x`, `y`, `z` and `w`. Use `point(x, y, z)` (w = 1) and `vector(x, y, z)`
(w = 0) to create them.

```python
from raytracer.tuples import point, vector

p = point(3.0, 2.0, 1.0)
v = vector(1.0, 2.0, 3.0)

p - point(5.0, 6.0, 7.0)        # vector(-2, -4, -6)
v * 3.5, v / 2.0, -v

v.magnitude()                   # sqrt(14)
v.normalize()
v.dot(vector(2.0, 3.0, 4.0))    # 20.0
v.cross(vector(2.0, 3.0, 4.0))  # vector(-1, 2, -1)
vector(1.0, -1.0, 0.0).reflect(vector(0.0, 1.0, 0.0))  # vector(1, 1, 0)

p.is_point(), v.is_vector()     # True, True
```

`magnitude`, `normalize`, `dot` and `cross` accept only vectors and raise
`ValueError` when given a tuple whose `w` is not zero.

Tuples compare equal when every component differs by less than `0.00005`
(`raytracer.utils.EPSILON`); `raytracer.utils.is_float_equal` applies the same
comparison to plain floats. Tuples are not hashable.

## Transformations

`raytracer.transformations` builds 4×4 matrices as NumPy arrays:
`identity`, `translation`, `scaling`, `rotation_x`, `rotation_y`,
`rotation_z`, `shearing` and `view_transform`. Combine them with `@` and
apply them to a tuple with `apply`.

```python
from math import pi
from raytracer.transformations import (
    apply, matrices_equal, rotation_x, scaling, translation, view_transform,
)
from raytracer.tuples import point, vector

t = translation(10.0, 5.0, 7.0) @ scaling(5.0, 5.0, 5.0) @ rotation_x(pi / 2)
apply(t, point(1.0, 0.0, 1.0))   # point(15, 0, 7)

view = view_transform(point(0.0, 0.0, 8.0), point(0.0, 0.0, 0.0), vector(0.0, 1.0, 0.0))
matrices_equal(view, translation(0.0, 0.0, -8.0))   # True
```

Translation leaves vectors unchanged, since their `w` is zero.
`matrices_equal` compares matrices element by element with the same tolerance
as tuples.

## Shapes

Every shape derives from `raytracer.shapes.Shape` and carries a `position`
and a `transform` (the identity by default). Setting `transform` requires a
4×4 invertible matrix and raises `ValueError` otherwise; `inverse` returns the
world-to-object matrix.

- `normal_at(world_point)` returns the unit normal in world space.
- `world_to_local(world_point)` converts a point into object space.
- `local_intersect(origin, direction)` takes a ray in object space and
  returns the list of hit times.
- `local_normal_at(local_point)` returns the normal in object space.

```python
from raytracer.sphere import Sphere
from raytracer.cylinder import Cylinder
from raytracer.transformations import translation
from raytracer.tuples import point, vector

s = Sphere()
s.local_intersect(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))   # [4.0, 6.0]

s.transform = translation(0.0, 1.0, 0.0)
s.normal_at(point(0.0, 1.70711, -0.70711))   # vector(0, 0.70711, -0.70711)

c = Cylinder(minimum=1.0, maximum=2.0, closed=True)
c.local_intersect(point(0.0, 3.0, 0.0), vector(0.0, -1.0, 0.0))  # [2.0, 1.0]
```

The shapes:

- `raytracer.sphere.Sphere` — radius one around its position.
- `raytracer.plane.Plane` — the xz plane; rays parallel to it miss.
- `raytracer.cube.Cube` — spans -1 to 1 on each axis. `check_axis(origin,
  direction)` gives the entry and exit times for one axis slab.
  `local_normal_at` raises `ValueError` for a point that lies on no face axis.
- `raytracer.cylinder.Cylinder` and `raytracer.cone.Cone` — around the y axis,
  unbounded and open by default. Pass `minimum`, `maximum` and `closed` (and
  optionally `transform`) to truncate and cap them.

Shapes compare equal when they are of the same type with equal position,
transform and, for cylinders and cones, equal bounds and `closed` flag.

## What this package does not do

It has no scene, lights, materials, colours, camera or image output, and no
command to run. It computes hit times and surface normals for individual
shapes; turning those into a rendered picture is left to the caller.