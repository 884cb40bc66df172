"""Tests for point/vector geometry and products."""
from __future__ import annotations

import dataclasses

import pytest

from vecmath.data_models import Descriptor
from vecmath.vector_utils import (
    cross,
    cross2,
    descr,
    dir,
    dist,
    dot,
    orth2,
    triple,
    vec,
)

I = (1.0, 0.0, 0.0)
J = (0.0, 1.0, 0.0)
K = (0.0, 0.0, 1.0)


def test_vec_allocates_and_leaves_points_untouched():
    start = [1.0, 1.0, 1.0]
    end = [4.0, 5.0, 6.0]
    result = vec(start, end)
    assert result == [3.0, 4.0, 5.0]
    assert result is not end
    assert start == [1.0, 1.0, 1.0]
    assert end == [4.0, 5.0, 6.0]


def test_vec_accepts_tuples():
    assert vec((0.0, 0.0), (2.0, -1.0)) == [2.0, -1.0]


def test_vec_into_target():
    target = []
    result = vec([1.0, 2.0], [3.0, 5.0], target)
    assert result is target
    assert target == [2.0, 3.0]

    presized = [9.0, 9.0]
    assert vec([1.0, 2.0], [3.0, 5.0], presized) == [2.0, 3.0]


def test_vec_into_start_point_overwrites_it():
    start = [1.0, 2.0]
    # The end point is copied into start before subtracting start from it.
    assert vec(start, [3.0, 5.0], start) == [0.0, 0.0]


def test_descr():
    start = [0.0, 0.0]
    end = [3.0, 4.0]
    d = descr(start, end)
    assert isinstance(d, Descriptor)
    assert d.vector == [3.0, 4.0]
    assert d.sqr == 25.0
    assert d.dist == 5.0
    assert d.unit == pytest.approx([0.6, 0.8])
    assert d.unit is not d.vector
    assert start == [0.0, 0.0]
    assert end == [3.0, 4.0]


def test_descr_into_target_and_degenerate_points():
    target = []
    d = descr([1.0, 1.0], [1.0, 1.0], target)
    assert d.vector is target
    assert d.vector == [0.0, 0.0]
    assert d.sqr == 0.0
    assert d.dist == 0.0
    assert d.unit == [0.0, 0.0]


def test_descriptor_is_frozen():
    d = descr([0.0], [2.0])
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.dist = 1.0


def test_dir():
    start = [1.0, 1.0]
    end = [1.0, 6.0]
    assert dir(start, end) == pytest.approx([0.0, 1.0])
    assert start == [1.0, 1.0]
    assert end == [1.0, 6.0]
    assert dir([0.0, 0.0], [0.0, 0.0]) == [0.0, 0.0]


def test_dir_into_target():
    start = [1.0, 1.0]
    end = [4.0, 5.0]
    target = []
    result = dir(start, end, target)
    assert result is target
    assert target == pytest.approx([0.6, 0.8])
    assert start == [1.0, 1.0]
    assert end == [4.0, 5.0]


def test_dist():
    assert dist([1.0, 1.0], [4.0, 5.0]) == 5.0
    assert dist([2.0, 2.0, 2.0], [2.0, 2.0, 2.0]) == 0


def test_orth2():
    v = [0.0, 2.0]
    result = orth2(v)
    assert result is v
    assert v == [-1.0, 0.0]
    assert orth2([1.0, 0.0]) == [0.0, 1.0]


def test_orth2_into_target_keeps_source():
    v = [3.0, 4.0]
    target = []
    assert orth2(v, target) == pytest.approx([-0.8, 0.6])
    assert v == [3.0, 4.0]


def test_dot():
    assert dot([2.0, -2.0, 1.0], [-3.5, 1.5, -3.0]) == -13.0
    assert dot([1.0, 2.0], [3.0, 4.0]) == 11.0
    assert dot(I, J) == 0.0


def test_cross_of_basis_vectors():
    assert cross(I, J) == list(K)
    assert cross(K, I) == list(J)
    assert cross(J, K) == list(I)


def test_cross_is_orthogonal_to_operands():
    a = [1.0, 2.0, 3.0]
    b = [4.0, 5.0, 6.0]
    c = cross(a, b)
    assert c == [-3.0, 6.0, -3.0]
    assert dot(c, a) == 0.0
    assert dot(c, b) == 0.0


@pytest.mark.parametrize("alias", ["v1", "v2"])
def test_cross_into_operand(alias):
    a = [1.0, 2.0, 3.0]
    b = [4.0, 5.0, 6.0]
    target = a if alias == "v1" else b
    result = cross(a, b, target)
    assert result is target
    assert target == [-3.0, 6.0, -3.0]


def test_cross_sizes_empty_target():
    target = []
    assert cross(I, J, target) == [0.0, 0.0, 1.0]


def test_triple():
    assert triple(I, J, K) == 1.0
    assert triple(K, I, J) == 1.0
    assert triple(J, I, K) == -1.0
    assert triple([2.0, 0.0, 0.0], [0.0, 3.0, 0.0], [0.0, 0.0, 4.0]) == 24.0


def test_cross2():
    assert cross2([1.0, 0.0], [0.0, 1.0]) == 1.0
    assert cross2([0.0, 1.0], [1.0, 0.0]) == -1.0
    assert cross2([2.0, 0.0], [1.0, 3.0]) == 6.0
