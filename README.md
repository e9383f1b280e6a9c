# curvemath

Geometry for glyph outlines and vector paths: 2D vectors, axis-aligned
rectangles, cubic Bézier curves, piecewise paths, arc-length
parameterization, smooth curve fitting, join and cap construction, and
bending a pattern along a path. It is pure Python with no dependencies.

## Installation

```
pip install curvemath
```

For the test suite:

```
pip install "curvemath[test]"
pytest
```

## Overview

| Module | What it offers |
| --- | --- |
| `curvemath.coordinate` | `magnitude`, `distance` and `lerp` that work on plain numbers and on vectors; the constants `SMALL_DISTANCE`, `CLOSE_DISTANCE`, `SMALL_T_DISTANCE` |
| `curvemath.vector` | `Vector`, a mutable 2D dataclass with `+`, `-`, `*`, `/`, unary `-`, indexing by 0 and 1, `dot`, `normalize`, `rotate`, `lerp`, `angle`, `is_near`, and conversion to and from outline points and handles |
| `curvemath.rect` | `Rect`, an axis-aligned box (`left`, `bottom`, `right`, `top`) with `from_points`, `encapsulate`, `overlaps`, `overlap_rect`, `area`, `width`, `height`, `center` |
| `curvemath.glif` | `Point`, `PointType`, `WhichHandle` for outline points with an outgoing handle `a` and incoming handle `b` (`None` meaning colocated), and `assert_colocated` |
| `curvemath.evaluate` | `Evaluable`, the abstract base for anything evaluated over `t` in 0–1, giving `translate`, `scale` and `rotate` on top of `apply_transform` |
| `curvemath.bezier` | `Bezier`, a cubic curve: `at`, `tangent_at`, `bounds` (of the control polygon), `subdivide`, `reverse`, `from_glif_points` |
| `curvemath.arclen` | `ArcLengthParameterization`, mapping a fraction of arc length to a curve parameter |
| `curvemath.interpolator` | `Interpolator` (`none`, `linear`, `exponential`, `of_kind`) and `InterpolationType` for scalar interpolation |
| `curvemath.piecewise` | `Piecewise`, a sequence of segments treated as one function of `t`, with conversion from and to point contours and outlines, `cut_at_t`, `subdivide`, `fuse_nearby_ends`, `remove_short_segs`, `split_at_discontinuities` |
| `curvemath.polar` | `cartesian`, `polar` and `set_polar` for handles of a `Point` or a `Bezier`, relative to their point |
| `curvemath.glyphbuilder` | `GlyphBuilder` for chaining Béziers with `line_to`, `bevel_to`, `miter_to`, `arc_to`, `circle_arc_to` and `cap_to`; also `normalize_angle` and `line_intersects_line` |
| `curvemath.fit` | `fit` and `curve_control_points` for smooth cubic handles through runs of curve points |
| `curvemath.pattern` | `PatternSettings`, `PatternCopies`, `PatternStretch`, `prepare_pattern`, `pattern_along_path` and `pattern_along_outline` |

## Examples

Vectors behave like small mutable value types:

```python
from curvemath.vector import Vector

v = Vector.from_components(0.0, 100.0)
v[1] = 50.0
v *= 10.0
v[0] = v[0] - v[1]
assert (v.x, v.y) == (-500.0, 500.0)
```

Evaluating and splitting a cubic Bézier:

```python
from curvemath.bezier import Bezier
from curvemath.vector import Vector

curve = Bezier.from_points(
    Vector(0, 0), Vector(0, 100), Vector(100, 100), Vector(100, 0)
)
midpoint = curve.at(0.5)
first, second = curve.subdivide(0.5)   # None at t=0 or t=1
box = curve.bounds()
```

Walking a curve evenly by arc length:

```python
from curvemath.arclen import ArcLengthParameterization

arclen = ArcLengthParameterization.from_evaluable(curve, 100)
length = arclen.total_arclen()
t_halfway = arclen.parameterize(0.5)
point_halfway = curve.at(t_halfway)
```

Building a piecewise path from outline points and moving it. A contour
whose first point is not a `MOVE` point is treated as closed, so a segment
back to the first point is added:

```python
from curvemath.glif import Point, PointType
from curvemath.piecewise import Piecewise
from curvemath.vector import Vector

contour = [
    Point(0, 0, ptype=PointType.LINE),
    Point(100, 0, ptype=PointType.LINE),
    Point(100, 100, ptype=PointType.LINE),
]
path = Piecewise.from_contour(contour)
moved = path.translate(Vector(10, 10))
closed = moved.is_closed()
points = moved.to_contour()
```

Laying a pattern along every contour of an outline:

```python
from curvemath.glif import Point, PointType
from curvemath.pattern import PatternCopies, PatternSettings, pattern_along_outline

path = [[Point(0, 0, ptype=PointType.MOVE), Point(500, 0, ptype=PointType.LINE)]]
pattern = [[
    Point(0, 0, ptype=PointType.LINE),
    Point(20, 0, ptype=PointType.LINE),
    Point(20, 20, ptype=PointType.LINE),
    Point(0, 20, ptype=PointType.LINE),
]]
settings = PatternSettings(copies=PatternCopies.REPEATED, spacing=5.0)
outline = pattern_along_outline(path, pattern, settings)
```

`pattern_along_path` does the same for a single contour, taking a contour
`Piecewise` and a pattern built with `Piecewise.from_outline`, and returns a
`Piecewise` of contours.

## Conventions

- Parameters `t` and `u` run from 0 to 1 across a curve or a whole path.
- Angles passed to `Vector.rotate` and `Evaluable.rotate` are in radians;
  `set_polar` takes its angle in degrees, and `polar` returns radians.
- `cartesian` returns the point minus its handle.
- `Vector.normalize` of a zero vector gives NaN components.
- Operations that have no meaningful answer, such as the bounds or start
  point of an empty `Piecewise`, or `line_to` on an empty `GlyphBuilder`,
  raise `ValueError`.

## What it does not do

- It does not read or write glyph or font files; outlines are lists of
  in-memory `Point` lists.
- It has no variable-width stroking, dashing, or boolean simplification of
  overlapping contours; the pattern settings have no simplify option.
- `PatternCopies.FIXED` lays out no copies.
- There is no command-line tool.