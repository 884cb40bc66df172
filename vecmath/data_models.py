#!/usr/bin/env python3
"""
Data models for vecmath.

This module defines the Descriptor dataclass returned by vector_utils.descr().

Usage
- vector is the (possibly caller-supplied) buffer holding ``to - from``.
- unit always lives in its own list; it never aliases vector.
- Instances are built once per call and are not modified afterwards.
"""
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Descriptor:
    """
    Relationship between two points.

    Fields:
    - vector: Vector pointing from the start point to the end point
    - sqr: Sum of squares of vector (squared distance)
    - dist: Euclidean distance between the points
    - unit: Unit vector along vector, or the zero vector when dist is 0
    """
    vector: List[float]
    sqr: float
    dist: float
    unit: List[float]
