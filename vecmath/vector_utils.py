#!/usr/bin/env python3
"""
Vector helper functions for N-dimensional lists of floats.

These are small, fast functions for vector math meant to be called from hot
loops in geometry, simulation and layout code. They work on plain sequences;
no vector type distinguishes 2D from 3D, so callers keep dimensions consistent.

Output buffers
- Mutate-left: with no target, the first operand is overwritten and returned.
- Explicit target: the result is written into the target. An empty target is
  first sized to the operand; a non-empty one must already have the right
  length (it is never partially resized).
- Fresh allocation: vec(), descr(), dir() and dist() copy an operand before
  doing in-place math on the copy, so their inputs are left untouched.
The discipline is chosen per function; each docstring states which applies.

Preconditions
- Operands of binary functions have equal length.
- cross(), triple() and angle() take 3-component vectors; cross2(), angle2()
  and orth2() take 2-component vectors.
- seq() and seq_i() need at least 2 steps.
None of these are checked at runtime. The only explicit "no result" is
angle() returning None for an axis outside [0, 2].

Threading
- No module state. Calls are safe from several threads as long as they do not
  share target or operand buffers.
"""
import logging
import math
from typing import List, MutableSequence, Optional, Sequence, Union

from .constants import (
    DEFAULT_CLAMP_MAX,
    DEFAULT_CLAMP_MIN,
    DEFAULT_DIGITS,
    DEG2RAD,
    RAD2DEG,
    TAU,
)
from .data_models import Descriptor
from .utils import (
    ScalarOrVector,
    Target,
    Vector,
    broadcast,
    fit_target,
    is_finite,
    is_scalar,
    resolve_target,
)

LOGGER = logging.getLogger(__name__)

__all__ = [
    "add", "add_scaled", "add_all", "sub", "sub_scaled", "sub_all",
    "vec", "scale", "sumsqr", "scalar", "norm", "descr", "orth2",
    "angle", "angle2", "dir", "dist", "dot", "cross", "triple", "cross2",
    "clamp_value", "clamp_array", "clamp", "step_value", "step_array", "step",
    "smoothstep", "lerp", "mix", "seq", "seq_i", "round",
    "rad", "deg", "nrad", "is_null_vec",
]


# ============================================================
# Component-wise arithmetic
# ============================================================

def add(a: Vector, b: Vector, target: Target = None) -> MutableSequence[float]:
    """
    Component-wise a + b.

    Without a target ``a`` is overwritten. A target is overwritten, its old
    values are not part of the sum.
    """
    target = resolve_target(target, a)
    for i in range(len(target)):
        target[i] = a[i] + b[i]
    return target


def add_scaled(a: Vector, b: Vector, factor: float, target: Target = None) -> MutableSequence[float]:
    """Component-wise a + b * factor. Same target rules as add()."""
    target = resolve_target(target, a)
    for i in range(len(target)):
        target[i] = a[i] + b[i] * factor
    return target


def add_all(vectors: Sequence[Vector], target: Target = None) -> MutableSequence[float]:
    """
    Component-wise sum of equally long vectors.

    Without a target the first vector is the accumulator and is returned.
    A given target is added into, except that slots holding a non-finite value
    (nan, inf or None) are overwritten on the first pass. Pre-filling a target
    with nan therefore gives a zero-initialized accumulator.

    Args:
        vectors: Vectors to add, all of the same length.
        target: Optional accumulator. An empty list is sized to the vectors.

    Returns:
        The accumulator.
    """
    start = 0
    if target is None:
        target = vectors[0]
        start = 1
    elif vectors:
        fit_target(target, len(vectors[0]))

    for i in range(start, len(vectors)):
        vector = vectors[i]
        for j in range(len(vector)):
            if i == 0 and not is_finite(target[j]):
                target[j] = vector[j]
            else:
                target[j] += vector[j]
    return target


def sub(a: Vector, b: Vector, target: Target = None) -> MutableSequence[float]:
    """Component-wise a - b. Same target rules as add()."""
    target = resolve_target(target, a)
    for i in range(len(target)):
        target[i] = a[i] - b[i]
    return target


def sub_scaled(a: Vector, b: Vector, factor: float, target: Target = None) -> MutableSequence[float]:
    """Component-wise a - b * factor. Same target rules as add()."""
    target = resolve_target(target, a)
    for i in range(len(target)):
        target[i] = a[i] - b[i] * factor
    return target


def sub_all(a: Vector, vectors: Sequence[Vector], target: Target = None) -> MutableSequence[float]:
    """
    Subtract every vector in ``vectors`` from ``a``.

    The first pass always assigns ``a - vectors[0]``; later passes subtract in
    place. Unlike add_all() the target's old values never take part.
    """
    target = resolve_target(target, a)
    for i, vector in enumerate(vectors):
        for j in range(len(vector)):
            if i == 0:
                target[j] = a[j] - vector[j]
            else:
                target[j] -= vector[j]
    return target


def _copy_into(source: Vector, target: Target) -> MutableSequence[float]:
    if target is None:
        return list(source)
    fit_target(target, len(source))
    for i in range(len(target)):
        target[i] = source[i]
    return target


def vec(from_: Vector, to: Vector, target: Target = None) -> MutableSequence[float]:
    """
    Vector pointing from point ``from_`` to point ``to``.

    Neither point is mutated unless ``target`` is ``from_`` itself.
    """
    return sub(_copy_into(to, target), from_)


# ============================================================
# Scaling and normalization
# ============================================================

def scale(arr: Vector, factor: float, target: Target = None) -> MutableSequence[float]:
    """Multiply every component by ``factor``; mutates ``arr`` unless a target is given."""
    target = arr if target is None else fit_target(target, len(arr))
    for i in range(len(arr)):
        target[i] = arr[i] * factor
    return target


def sumsqr(arr: Vector) -> float:
    """Sum of squares."""
    return sum(v ** 2 for v in arr)


def scalar(vector: Vector) -> float:
    """Euclidean length. Exactly 0 for the zero vector."""
    sq = sumsqr(vector)
    if sq == 0:
        return sq
    return math.sqrt(sq)


def norm(vector: Vector, target: Target = None) -> MutableSequence[float]:
    """
    Normalize to unit length; mutates ``vector`` unless a target is given.
    The zero vector normalizes to the zero vector.
    """
    sc = scalar(vector)
    f = 0 if sc == 0 else 1 / sc
    return scale(vector, f, target)


# ============================================================
# Points and directions
# ============================================================

def descr(from_: Vector, to: Vector, target: Target = None) -> Descriptor:
    """
    Describe the relationship between two points.

    The vector is built like vec(); the unit vector always goes into a fresh
    list so it never aliases the returned vector.
    """
    vector = sub(_copy_into(to, target), from_)
    sqr = sumsqr(vector)
    dst = math.sqrt(sqr)
    unit = scale(vector, 1 / dst if dst > 0 else 0, list(vector))
    return Descriptor(vector=vector, sqr=sqr, dist=dst, unit=unit)


def dir(from_: Vector, to: Vector, target: Target = None) -> MutableSequence[float]:
    """Unit vector from ``from_`` towards ``to``. Inputs are not mutated."""
    return norm(vec(from_, to, target))


def dist(p1: Vector, p2: Vector) -> float:
    """Distance between two points."""
    return scalar(vec(p1, p2))


def orth2(vector: Vector, target: Target = None) -> MutableSequence[float]:
    """
    Unit vector perpendicular to a 2D vector (rotated +90 degrees).
    Mutates ``vector`` unless a target is given.
    """
    target = vector if target is None else fit_target(target, 2)
    x = -vector[1]
    target[1] = vector[0]
    target[0] = x
    return norm(target)


# ============================================================
# Products
# ============================================================

def dot(v1: Vector, v2: Vector) -> float:
    return sum(c * v2[i] for i, c in enumerate(v1))


def cross(v1: Vector, v2: Vector, target: Target = None) -> MutableSequence[float]:
    """
    Cross product of two 3D vectors.

    Allocates a new list unless a target is given. The target may be v1 or v2:
    all components are read before any is written.
    """
    x1, y1, z1 = v1[0], v1[1], v1[2]
    x2, y2, z2 = v2[0], v2[1], v2[2]
    target = [0.0, 0.0, 0.0] if target is None else fit_target(target, 3)
    target[0] = (y1 * z2) - (z1 * y2)
    target[1] = (z1 * x2) - (x1 * z2)
    target[2] = (x1 * y2) - (y1 * x2)
    return target


def triple(v1: Vector, v2: Vector, v3: Vector) -> float:
    """Scalar triple product v1 . (v2 x v3), the signed volume of the parallelepiped."""
    return dot(v1, cross(v2, v3))


def cross2(v1: Vector, v2: Vector) -> float:
    """Signed area of the parallelogram spanned by two 2D vectors."""
    return (v1[0] * v2[1]) - (v1[1] * v2[0])


# ============================================================
# Angles
# ============================================================

def angle(vector: Vector, axis: int = 0) -> Optional[float]:
    """
    Angle between a 3D vector and a coordinate axis.

    Args:
        vector: 3D vector.
        axis: Axis to measure from, X=0, Y=1, Z=2.

    Returns:
        Angle in radians in [0, pi], or None when ``axis`` is outside [0, 2].
    """
    if axis > 2 or axis < 0:
        LOGGER.debug("angle: axis %r is outside [0, 2]", axis)
        return None

    x, y, z = vector[0], vector[1], vector[2]
    if axis == 0:
        a, b, c = y, z, x
    elif axis == 1:
        a, b, c = x, z, y
    else:
        a, b, c = x, y, z
    return math.atan2(math.sqrt(a ** 2 + b ** 2), c)


def angle2(vector: Vector) -> float:
    """Polar angle of a 2D vector in radians."""
    return math.atan2(vector[1], vector[0])


def rad(d: float) -> float:
    return d * DEG2RAD


def deg(r: float) -> float:
    return r * RAD2DEG


def nrad(r: float) -> float:
    """
    Normalize an angle into [0, TAU).

    Uses a truncated remainder, so exact negative multiples of TAU give -0.0.
    Infinite input gives nan.
    """
    if not math.isfinite(r):
        return math.nan
    v = math.fmod(r, TAU)
    return v + TAU if v < 0 else v


# ============================================================
# Clamping and thresholds (GLSL style)
# ============================================================

def clamp_value(value: float, lo: float = DEFAULT_CLAMP_MIN, hi: float = DEFAULT_CLAMP_MAX) -> float:
    """Clamp value to the inclusive range [lo, hi]."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def clamp_array(
    arr: Vector,
    lo: float = DEFAULT_CLAMP_MIN,
    hi: float = DEFAULT_CLAMP_MAX,
    target: Target = None,
) -> MutableSequence[float]:
    """Clamp every component of ``arr``; mutates ``arr`` unless a target is given."""
    target = arr if target is None else fit_target(target, len(arr))
    for i in range(len(arr)):
        target[i] = clamp_value(arr[i], lo, hi)
    return target


def clamp(
    arg: ScalarOrVector,
    lo: float = DEFAULT_CLAMP_MIN,
    hi: float = DEFAULT_CLAMP_MAX,
    target: Target = None,
) -> Union[float, MutableSequence[float]]:
    """Clamp a number, or every component of a sequence (see clamp_array)."""
    if is_scalar(arg):
        return clamp_value(arg, lo, hi)
    return clamp_array(arg, lo, hi, target)


def step_value(edge: float, x: float) -> float:
    """GLSL step(): 1.0 when x >= edge, else 0.0."""
    return 1.0 if x >= edge else 0.0


def step_array(edges: Vector, x: ScalarOrVector, target: Target = None) -> MutableSequence[float]:
    """
    step() for every edge. ``x`` is either one threshold for all edges or one
    threshold per edge. Mutates ``edges`` unless a target is given.
    """
    threshold = broadcast(x)
    target = edges if target is None else fit_target(target, len(edges))
    for i in range(len(edges)):
        target[i] = step_value(edges[i], threshold(i))
    return target


def step(edge: ScalarOrVector, x: ScalarOrVector, target: Target = None) -> Union[float, MutableSequence[float]]:
    if is_scalar(edge):
        return step_value(edge, x)
    return step_array(edge, x, target)


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    """GLSL smoothstep(): cubic Hermite between edge0 and edge1."""
    t = clamp_value((x - edge0) / (edge1 - edge0))
    return t * t * (3.0 - 2.0 * t)


# ============================================================
# Interpolation
# ============================================================

def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b by factor t (clamped to [0, 1])."""
    m = clamp_value(t, 0.0, 1.0)
    return a * (1 - m) + b * m


def mix(
    a: ScalarOrVector,
    b: ScalarOrVector,
    t: ScalarOrVector,
    target: Target = None,
) -> Union[float, MutableSequence[float]]:
    """
    GLSL mix() for numbers or sequences.

    Two numbers give lerp(a, b, t). Sequences are interpolated component-wise
    with ``t`` either shared or given per component; ``a`` is mutated unless a
    target is given.
    """
    if is_scalar(a):
        return lerp(a, b, t)
    weight = broadcast(t)
    target = a if target is None else fit_target(target, len(a))
    for i in range(len(a)):
        target[i] = lerp(a[i], b[i], weight(i))
    return target


def seq(
    from_: ScalarOrVector,
    to: ScalarOrVector,
    steps: int,
    start: float = 0.0,
    end: float = 1.0,
) -> List[ScalarOrVector]:
    """
    Sample ``steps`` evenly spaced interpolations between from_ and to.

    The interpolation factor runs from ``start`` to ``end``, both included.
    Sequence endpoints produce a new list per sample; neither input is mutated.

    Args:
        from_: Number or vector to interpolate from.
        to: Number or vector to interpolate to.
        steps: Number of samples, at least 2.
        start: Interpolation factor of the first sample.
        end: Interpolation factor of the last sample.

    Returns:
        List of ``steps`` numbers or vectors.
    """
    if is_scalar(from_):
        def sample(t):
            return lerp(from_, to, t)
    else:
        def sample(t):
            return mix(from_, to, t, list(from_))

    incr = (end - start) / (steps - 1)
    values = [sample(start + i * incr) for i in range(steps - 1)]
    values.append(sample(end))
    return values


def seq_i(steps: int) -> List[float]:
    """``steps`` evenly spaced numbers from 0 to 1, both included."""
    incr = 1 / (steps - 1)
    values = [lerp(0.0, 1.0, i * incr) for i in range(steps - 1)]
    values.append(1.0)
    return values


def _round_half_up(x: float) -> float:
    if not math.isfinite(x):
        return x
    r = math.floor(x)
    if x - r >= 0.5:
        r += 1
    # Negative input rounding to zero keeps its sign.
    return math.copysign(0.0, x) if r == 0 else r


def round(v: ScalarOrVector, digits: int = DEFAULT_DIGITS) -> ScalarOrVector:
    """
    Round to ``digits`` fractional digits, halves towards +infinity.

    A number is returned as a new value; a sequence is rounded in place and
    returned.
    """
    f = 10 ** digits
    if is_scalar(v):
        return _round_half_up(v * f) / f
    for i in range(len(v)):
        v[i] = _round_half_up(v[i] * f) / f
    return v


# ============================================================
# Predicates
# ============================================================

def is_null_vec(v: Vector, epsilon: float = 0.0) -> bool:
    """
    True when every component is zero, or within ``epsilon`` of zero.
    The tolerance applies per component, not to the vector length.
    """
    if epsilon:
        return all(abs(val) - epsilon <= 0 for val in v)
    return all(val == 0 for val in v)
