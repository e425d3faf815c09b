import math

import numpy as np
import pytest

from diagram_paths.vectors import (
    DimensionMismatchError,
    Point,
    Vector,
    as_point,
    as_vector,
    expect_point,
    expect_vector,
    origin,
    p2,
    r2,
    sum_vectors,
    zero_vector,
)


def test_point_difference_is_vector():
    delta = p2(3, 4) - p2(1, 1)
    assert isinstance(delta, Vector)
    assert delta == r2(2, 3)


def test_point_plus_vector_is_point():
    moved = p2(1, 1) + r2(2, -1)
    assert isinstance(moved, Point)
    assert moved == p2(3, 0)
    assert p2(3, 0) - r2(2, -1) == p2(1, 1)


def test_point_and_vector_with_same_coords_are_not_equal():
    assert p2(1, 2) != r2(1, 2)


@pytest.mark.parametrize(
    "op",
    [
        lambda: p2(0, 0) + p2(1, 1),
        lambda: 2 * p2(1, 1),
        lambda: p2(1, 1) * 2,
        lambda: r2(1, 1) + p2(0, 0),
        lambda: r2(1, 1) - p2(0, 0),
    ],
)
def test_affine_misuse_raises_type_error(op):
    with pytest.raises(TypeError):
        op()


def test_vector_space_operations():
    v = r2(1, 2)
    w = r2(3, -1)
    assert v + w == r2(4, 1)
    assert v - w == r2(-2, 3)
    assert -v == r2(-1, -2)
    assert 2 * v == r2(2, 4)
    assert v * 0.5 == r2(0.5, 1)
    assert w / 2 == r2(1.5, -0.5)
    assert v.dot(w) == pytest.approx(1.0)
    assert r2(3, 4).norm() == pytest.approx(5.0)


def test_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        r2(1, 0) + Vector((1, 0, 0))
    with pytest.raises(DimensionMismatchError):
        p2(0, 0) - Point((0, 0, 0))
    with pytest.raises(ValueError):
        Vector(())


def test_coordinates_are_floats_and_hash_consistently():
    assert Vector((1, 2)).coords == (1.0, 2.0)
    assert hash(r2(0.0, 1)) == hash(r2(-0.0, 1.0))
    assert len({p2(1, 1), Point((1.0, 1.0))}) == 1


def test_ordering_is_lexicographic():
    assert sorted([p2(1, 0), p2(0, 5), p2(0, 1)]) == [p2(0, 1), p2(0, 5), p2(1, 0)]


def test_sum_vectors_empty_and_nonempty():
    assert sum_vectors([]) == zero_vector(2)
    assert sum_vectors([], dim=3) == zero_vector(3)
    assert sum_vectors([r2(1, 0), r2(0, 1), r2(2, 2)]) == r2(3, 3)


def test_point_vector_conversions():
    assert p2(2, 3).to_vector() == r2(2, 3)
    assert Point.from_vector(r2(2, 3)) == p2(2, 3)
    assert origin(3) == Point((0, 0, 0))
    assert Vector.from_array(np.array([1.0, 2.0])) == r2(1, 2)
    assert np.allclose(p2(1, 2).as_array(), [1.0, 2.0])


def test_as_vector_and_as_point():
    assert as_vector((1, 0)) == r2(1, 0)
    assert as_point([2, 2]) == p2(2, 2)
    with pytest.raises(TypeError):
        as_vector(p2(1, 0))
    with pytest.raises(TypeError):
        as_point(r2(1, 0))


def test_is_close_uses_tolerance():
    assert r2(1, 1).is_close(r2(1 + 1e-12, 1))
    assert not r2(1, 1).is_close(r2(1.1, 1))
    assert p2(1, 1).is_close(p2(1.05, 1), tol=0.1)
    assert not p2(1, 1).is_close(r2(1, 1))
    assert math.isclose(p2(3, 4).x + p2(3, 4).y, 7.0)


def test_expect_helpers_reject_the_other_type():
    vec = r2(1, 2)
    point = p2(1, 2)
    assert expect_vector(vec) is vec
    assert expect_point(point) is point
    with pytest.raises(TypeError, match="offset must be a Vector"):
        expect_vector(point, "offset")
    with pytest.raises(TypeError, match="must be a Point"):
        expect_point(vec)
    with pytest.raises(TypeError):
        expect_vector((1.0, 2.0))


@pytest.mark.parametrize("scalar", [np.float64(2.0), np.int64(2)])
def test_numpy_scalars_scale_vectors(scalar):
    scaled = scalar * r2(1, 2)
    assert isinstance(scaled, Vector)
    assert scaled == r2(2, 4)
    assert isinstance(r2(1, 2) * scalar, Vector)


def test_numpy_scalars_do_not_scale_points():
    with pytest.raises(TypeError):
        np.float64(2.0) * p2(1, 2)
