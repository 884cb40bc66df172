#!/usr/bin/env python3
"""
General utilities for vecmath.

Helpers here resolve the shape of a call once, at the call boundary, so the
loops in vector_utils stay free of type checks:
- which buffer receives the result (mutate the operand or write into a target)
- whether a parameter is a scalar to broadcast or a per-element sequence
"""
import math
import numbers
from typing import Callable, MutableSequence, Optional, Sequence, Union

Vector = Sequence[float]
Target = Optional[MutableSequence[float]]
ScalarOrVector = Union[float, Sequence[float]]


def is_scalar(value) -> bool:
    """True for plain numbers (int, float, numpy scalars); sequences are False."""
    return isinstance(value, numbers.Real)


def is_finite(value) -> bool:
    """True for finite numbers. None and other placeholders are not finite."""
    return is_scalar(value) and math.isfinite(value)


def fit_target(target: MutableSequence[float], length: int) -> MutableSequence[float]:
    """Size an empty target to ``length`` nan placeholders; non-empty targets are left alone."""
    if len(target) == 0:
        target.extend([math.nan] * length)
    return target


def resolve_target(target: Target, operand: Vector) -> MutableSequence[float]:
    """Return ``operand`` when no target is given, else the target sized to match it."""
    if target is None:
        return operand
    return fit_target(target, len(operand))


def broadcast(value: ScalarOrVector) -> Callable[[int], float]:
    """Turn a scalar-or-sequence parameter into an index accessor."""
    if is_scalar(value):
        return lambda i: value
    return value.__getitem__
