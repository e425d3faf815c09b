"""Affine transformations and the generic ``transform`` helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence, TypeVar

import numpy as np

from .config import default_tolerance
from .vectors import DimensionMismatchError, Point, Vector, zero_vector


T = TypeVar("T")


class SingularTransformError(ValueError):
    """Raised when a non-invertible transformation is inverted."""


@dataclass(frozen=True, eq=False)
class Transformation:
    """Affine map ``x -> matrix @ x + translation``.

    Vectors only see ``matrix``; points see the whole map.
    """

    matrix: np.ndarray
    translation: Vector

    def __post_init__(self) -> None:
        matrix = np.array(self.matrix, dtype=float)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError(f"linear part must be a square matrix, got shape {matrix.shape}")
        if matrix.shape[0] != self.translation.dim:
            raise DimensionMismatchError(
                f"dimension mismatch: matrix {matrix.shape[0]} vs translation {self.translation.dim}"
            )
        matrix.setflags(write=False)
        object.__setattr__(self, "matrix", matrix)

    @property
    def dim(self) -> int:
        return int(self.matrix.shape[0])

    def _check(self, dim: int) -> None:
        if dim != self.dim:
            raise DimensionMismatchError(f"dimension mismatch: transform {self.dim} vs value {dim}")

    def apply_vector(self, vec: Vector) -> Vector:
        self._check(vec.dim)
        return Vector.from_array(self.matrix @ vec.as_array())

    def apply_point(self, point: Point) -> Point:
        self._check(point.dim)
        return Point.from_array(self.matrix @ point.as_array() + self.translation.as_array())

    def apply_transpose(self, vec: Vector) -> Vector:
        """Apply the transposed linear part (used to pull back extent queries)."""

        self._check(vec.dim)
        return Vector.from_array(self.matrix.T @ vec.as_array())

    def compose(self, other: "Transformation") -> "Transformation":
        """Return ``self`` after ``other`` (``other`` is applied first)."""

        self._check(other.dim)
        matrix = self.matrix @ other.matrix
        shift = self.matrix @ other.translation.as_array() + self.translation.as_array()
        return Transformation(matrix, Vector.from_array(shift))

    def __matmul__(self, other: object) -> "Transformation":
        if not isinstance(other, Transformation):
            return NotImplemented
        return self.compose(other)

    def inverse(self) -> "Transformation":
        try:
            inv = np.linalg.inv(self.matrix)
        except np.linalg.LinAlgError as exc:
            raise SingularTransformError("transformation is not invertible") from exc
        return Transformation(inv, Vector.from_array(-(inv @ self.translation.as_array())))

    def linear_part(self) -> "Transformation":
        return Transformation(self.matrix, zero_vector(self.dim))

    def is_close(self, other: "Transformation", tol: Optional[float] = None) -> bool:
        if other.dim != self.dim:
            return False
        tol = default_tolerance() if tol is None else tol
        return bool(
            np.allclose(self.matrix, other.matrix, rtol=0.0, atol=tol)
            and self.translation.is_close(other.translation, tol)
        )

    def __repr__(self) -> str:
        return f"Transformation(matrix={self.matrix.tolist()!r}, translation={self.translation!r})"


def identity_transform(dim: int = 2) -> Transformation:
    return Transformation(np.eye(dim), zero_vector(dim))


def linear_map(matrix: Sequence[Sequence[float]]) -> Transformation:
    arr = np.array(matrix, dtype=float)
    return Transformation(arr, zero_vector(arr.shape[0]))


def translation(vec: Vector) -> Transformation:
    return Transformation(np.eye(vec.dim), vec)


def translate_by(*coords: float) -> Transformation:
    return translation(Vector(coords))


def scaling(factor: float, dim: int = 2) -> Transformation:
    return Transformation(np.eye(dim) * float(factor), zero_vector(dim))


def scaling_xy(sx: float, sy: float) -> Transformation:
    return linear_map([[sx, 0.0], [0.0, sy]])


def rotation(angle: float) -> Transformation:
    """Counter-clockwise rotation in the plane, ``angle`` in radians."""

    cos_t = math.cos(angle)
    sin_t = math.sin(angle)
    return linear_map([[cos_t, -sin_t], [sin_t, cos_t]])


def reflection_x() -> Transformation:
    """Reflect across the y axis (negates x)."""

    return linear_map([[-1.0, 0.0], [0.0, 1.0]])


def reflection_y() -> Transformation:
    """Reflect across the x axis (negates y)."""

    return linear_map([[1.0, 0.0], [0.0, -1.0]])


def transform(t: Transformation, obj: Any) -> Any:
    """Apply ``t`` to a vector, a point, or any object with a ``transform`` method."""

    if isinstance(obj, Vector):
        return t.apply_vector(obj)
    if isinstance(obj, Point):
        return t.apply_point(obj)
    method = getattr(obj, "transform", None)
    if method is None:
        raise TypeError(f"{type(obj).__name__} is not transformable")
    return method(t)


def translate(vec: Vector, obj: T) -> T:
    return transform(translation(vec), obj)


def scale(factor: float, obj: T) -> T:
    dim = getattr(obj, "dim", None)
    return transform(scaling(factor, dim if isinstance(dim, int) else 2), obj)


def rotate(angle: float, obj: T) -> T:
    return transform(rotation(angle), obj)


__all__ = [
    "SingularTransformError",
    "Transformation",
    "identity_transform",
    "linear_map",
    "translation",
    "translate_by",
    "scaling",
    "scaling_xy",
    "rotation",
    "reflection_x",
    "reflection_y",
    "transform",
    "translate",
    "scale",
    "rotate",
]
