"""Free vectors and absolute points.

``Vector`` and ``Point`` share a representation (a tuple of float
coordinates) but are deliberately separate types: vectors are
displacements and only see the linear part of an affine map, while points
are positions and see the full map including translation.  The arithmetic
below only admits the affine-space operations::

    Point - Point  -> Vector
    Point + Vector -> Point
    Point - Vector -> Point
    Vector +/- Vector, scalar * Vector, Vector / scalar

Anything else (``Point + Point``, ``2 * Point``) is a ``TypeError``.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from .config import default_tolerance

Coords = Tuple[float, ...]


class DimensionMismatchError(ValueError):
    """Raised when values of different dimensions are combined."""


def _coerce_coords(values: Iterable[float]) -> Coords:
    coords = tuple(float(value) for value in values)
    if not coords:
        raise ValueError("coordinates must have at least one component")
    return coords


def _format_coords(coords: Coords) -> str:
    return ", ".join(format(c, "g") for c in coords)


def _check_dims(a: Coords, b: Coords) -> None:
    if len(a) != len(b):
        raise DimensionMismatchError(f"dimension mismatch: {len(a)} vs {len(b)}")


@dataclass(frozen=True, order=True)
class Vector:
    """Free displacement with an arbitrary number of coordinates."""

    coords: Coords

    # keep numpy scalars from broadcasting over the coordinates
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", _coerce_coords(self.coords))

    @property
    def dim(self) -> int:
        return len(self.coords)

    @property
    def x(self) -> float:
        return self.coords[0]

    @property
    def y(self) -> float:
        return self.coords[1]

    def __iter__(self) -> Iterator[float]:
        return iter(self.coords)

    def __len__(self) -> int:
        return len(self.coords)

    def __getitem__(self, index: int) -> float:
        return self.coords[index]

    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        _check_dims(self.coords, other.coords)
        return Vector(tuple(a + b for a, b in zip(self.coords, other.coords)))

    def __sub__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        _check_dims(self.coords, other.coords)
        return Vector(tuple(a - b for a, b in zip(self.coords, other.coords)))

    def __neg__(self) -> "Vector":
        return Vector(tuple(-a for a in self.coords))

    def __mul__(self, factor: object) -> "Vector":
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        return Vector(tuple(a * float(factor) for a in self.coords))

    __rmul__ = __mul__

    def __truediv__(self, factor: object) -> "Vector":
        if not isinstance(factor, numbers.Real):
            return NotImplemented
        return Vector(tuple(a / float(factor) for a in self.coords))

    def dot(self, other: "Vector") -> float:
        """Inner product."""

        _check_dims(self.coords, other.coords)
        return math.fsum(a * b for a, b in zip(self.coords, other.coords))

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    def as_array(self) -> np.ndarray:
        return np.asarray(self.coords, dtype=float)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Vector":
        return cls(tuple(float(v) for v in np.asarray(values, dtype=float).ravel()))

    def is_close(self, other: "Vector", tol: Optional[float] = None) -> bool:
        if not isinstance(other, Vector):
            return False
        _check_dims(self.coords, other.coords)
        tol = default_tolerance() if tol is None else tol
        return all(abs(a - b) <= tol for a, b in zip(self.coords, other.coords))

    def log_summary(self) -> str:
        return f"{type(self).__name__}({_format_coords(self.coords)})"


@dataclass(frozen=True, order=True)
class Point:
    """Absolute position in an affine space."""

    coords: Coords

    # keep numpy scalars from broadcasting over the coordinates
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", _coerce_coords(self.coords))

    @property
    def dim(self) -> int:
        return len(self.coords)

    @property
    def x(self) -> float:
        return self.coords[0]

    @property
    def y(self) -> float:
        return self.coords[1]

    def __iter__(self) -> Iterator[float]:
        return iter(self.coords)

    def __len__(self) -> int:
        return len(self.coords)

    def __getitem__(self, index: int) -> float:
        return self.coords[index]

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Vector):
            return NotImplemented
        _check_dims(self.coords, other.coords)
        return Point(tuple(a + b for a, b in zip(self.coords, other.coords)))

    def __sub__(self, other: object) -> Union["Point", Vector]:
        if isinstance(other, Point):
            _check_dims(self.coords, other.coords)
            return Vector(tuple(a - b for a, b in zip(self.coords, other.coords)))
        if isinstance(other, Vector):
            _check_dims(self.coords, other.coords)
            return Point(tuple(a - b for a, b in zip(self.coords, other.coords)))
        return NotImplemented

    def to_vector(self) -> Vector:
        """Displacement of this point from the origin."""

        return Vector(self.coords)

    @classmethod
    def from_vector(cls, vec: Vector) -> "Point":
        return cls(vec.coords)

    def as_array(self) -> np.ndarray:
        return np.asarray(self.coords, dtype=float)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Point":
        return cls(tuple(float(v) for v in np.asarray(values, dtype=float).ravel()))

    def is_close(self, other: "Point", tol: Optional[float] = None) -> bool:
        if not isinstance(other, Point):
            return False
        _check_dims(self.coords, other.coords)
        tol = default_tolerance() if tol is None else tol
        return all(abs(a - b) <= tol for a, b in zip(self.coords, other.coords))

    def log_summary(self) -> str:
        return f"{type(self).__name__}({_format_coords(self.coords)})"


def r2(x: float, y: float) -> Vector:
    return Vector((x, y))


def p2(x: float, y: float) -> Point:
    return Point((x, y))


def zero_vector(dim: int = 2) -> Vector:
    return Vector((0.0,) * dim)


def origin(dim: int = 2) -> Point:
    return Point((0.0,) * dim)


def as_vector(value: Union[Vector, Sequence[float]]) -> Vector:
    """Coerce a numeric sequence to a ``Vector``; points are rejected."""

    if isinstance(value, Vector):
        return value
    if isinstance(value, Point):
        raise TypeError("expected a Vector, got a Point; use Point.to_vector()")
    return Vector(tuple(value))


def as_point(value: Union[Point, Sequence[float]]) -> Point:
    if isinstance(value, Point):
        return value
    if isinstance(value, Vector):
        raise TypeError("expected a Point, got a Vector; use Point.from_vector()")
    return Point(tuple(value))


def expect_vector(value: object, role: str = "value") -> Vector:
    """Return ``value`` unchanged if it is a ``Vector``, else raise ``TypeError``."""

    if not isinstance(value, Vector):
        raise TypeError(f"{role} must be a Vector, got {type(value).__name__}")
    return value


def expect_point(value: object, role: str = "value") -> Point:
    if not isinstance(value, Point):
        raise TypeError(f"{role} must be a Point, got {type(value).__name__}")
    return value


def sum_vectors(vectors: Iterable[Vector], dim: Optional[int] = None) -> Vector:
    """Sum ``vectors``; an empty input gives the zero vector of ``dim`` (default 2)."""

    total: Optional[Vector] = None
    for vec in vectors:
        total = vec if total is None else total + vec
    if total is None:
        return zero_vector(2 if dim is None else dim)
    if dim is not None and total.dim != dim:
        raise DimensionMismatchError(f"dimension mismatch: {total.dim} vs {dim}")
    return total


__all__ = [
    "Coords",
    "DimensionMismatchError",
    "Vector",
    "Point",
    "r2",
    "p2",
    "zero_vector",
    "origin",
    "as_vector",
    "as_point",
    "expect_vector",
    "expect_point",
    "sum_vectors",
]
