"""Composable extent (support) functions.

An extent function answers "how far does this shape reach in direction
``v``", i.e. ``h(v) = max over x in shape of <x, v>``.  Extents are kept as
a small tree of nodes that is only evaluated when queried, so composition
stays exact:

* ``EMPTY_EXTENT`` - no shape at all, ``-inf`` everywhere; identity of ``union``
* ``ZERO_EXTENT`` - a single point at the local origin
* ``SegmentExtent`` - one segment placed at the origin
* ``RebasedExtent`` - the inner shape moved by an offset
* ``UnionExtent`` - pointwise maximum of several extents
* ``TransformedExtent`` - the inner shape under an affine map
* ``FunctionExtent`` - any callable ``Vector -> float``

Two laws drive everything here::

    rebase(d, f)(v)   == f(v) + <v, d>
    union(f, g)(v)    == max(f(v), g(v))
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional, Sequence, Tuple, Union

from .config import default_tolerance
from .transform import Transformation
from .vectors import Point, Vector, as_vector

if TYPE_CHECKING:  # pragma: no cover
    from .segment import Segment

Direction = Union[Vector, Sequence[float]]


class Extent:
    """Base class of all extent nodes."""

    def __call__(self, direction: Direction) -> float:
        return self.evaluate(as_vector(direction))

    def evaluate(self, direction: Vector) -> float:
        raise NotImplementedError

    def rebase(self, offset: Vector) -> "Extent":
        return rebase(offset, self)

    def transform(self, t: Transformation) -> "Extent":
        return transform_extent(t, self)

    def __or__(self, other: object) -> "Extent":
        if not isinstance(other, Extent):
            return NotImplemented
        return union(self, other)

    @property
    def is_empty(self) -> bool:
        return False

    def log_summary(self) -> str:
        return type(self).__name__


class EmptyExtent(Extent):
    def evaluate(self, direction: Vector) -> float:
        return -math.inf

    @property
    def is_empty(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "EMPTY_EXTENT"


class ZeroExtent(Extent):
    def evaluate(self, direction: Vector) -> float:
        return 0.0

    def __repr__(self) -> str:
        return "ZERO_EXTENT"


EMPTY_EXTENT = EmptyExtent()
ZERO_EXTENT = ZeroExtent()


@dataclass(frozen=True, eq=False)
class SegmentExtent(Extent):
    segment: "Segment"

    def evaluate(self, direction: Vector) -> float:
        return self.segment.support(direction)


@dataclass(frozen=True, eq=False)
class RebasedExtent(Extent):
    inner: Extent
    offset: Vector

    def evaluate(self, direction: Vector) -> float:
        return self.inner.evaluate(direction) + direction.dot(self.offset)


@dataclass(frozen=True, eq=False)
class UnionExtent(Extent):
    parts: Tuple[Extent, ...]

    def evaluate(self, direction: Vector) -> float:
        return max(part.evaluate(direction) for part in self.parts)

    def log_summary(self) -> str:
        return f"UnionExtent(parts={len(self.parts)})"


@dataclass(frozen=True, eq=False)
class TransformedExtent(Extent):
    """Extent of ``inner`` after the affine map ``x -> A x + b``.

    ``h_{A S + b}(v) = h_S(A^T v) + <v, b>``.
    """

    inner: Extent
    transformation: Transformation

    def evaluate(self, direction: Vector) -> float:
        pulled = self.transformation.apply_transpose(direction)
        return self.inner.evaluate(pulled) + direction.dot(self.transformation.translation)


@dataclass(frozen=True, eq=False)
class FunctionExtent(Extent):
    fn: Callable[[Vector], float]

    def evaluate(self, direction: Vector) -> float:
        return float(self.fn(direction))


def rebase(offset: Vector, extent: Extent) -> Extent:
    """Move the shape described by ``extent`` by ``offset``."""

    if extent.is_empty:
        return extent
    if isinstance(extent, RebasedExtent):
        return RebasedExtent(extent.inner, extent.offset + offset)
    return RebasedExtent(extent, offset)


def union_all(extents: Iterable[Extent]) -> Extent:
    parts: List[Extent] = []
    for extent in extents:
        if extent.is_empty:
            continue
        if isinstance(extent, UnionExtent):
            parts.extend(extent.parts)
        else:
            parts.append(extent)
    if not parts:
        return EMPTY_EXTENT
    if len(parts) == 1:
        return parts[0]
    return UnionExtent(tuple(parts))


def union(first: Extent, second: Extent) -> Extent:
    return union_all((first, second))


def transform_extent(t: Transformation, extent: Extent) -> Extent:
    if extent.is_empty:
        return extent
    if isinstance(extent, TransformedExtent):
        return TransformedExtent(extent.inner, t @ extent.transformation)
    return TransformedExtent(extent, t)


def extent_diameter(extent: Extent, direction: Direction) -> float:
    """Length of the shape's shadow along ``direction``, in units of ``|direction|``."""

    vec = as_vector(direction)
    return extent(vec) + extent(-vec)


def bounding_box(extent: Extent, dim: int = 2) -> Optional[Tuple[Point, Point]]:
    """Axis-aligned box ``(lower, upper)`` of the shape, ``None`` when empty."""

    if extent.is_empty:
        return None
    lower: List[float] = []
    upper: List[float] = []
    for axis in range(dim):
        unit = Vector(tuple(1.0 if idx == axis else 0.0 for idx in range(dim)))
        upper.append(extent(unit))
        lower.append(0.0 - extent(-unit))
    return Point(tuple(lower)), Point(tuple(upper))


def extents_close(
    first: Extent,
    second: Extent,
    directions: Iterable[Direction],
    tol: Optional[float] = None,
) -> bool:
    """Compare two extents on a set of query directions."""

    tol = default_tolerance() if tol is None else tol
    for direction in directions:
        a = first(direction)
        b = second(direction)
        if math.isinf(a) or math.isinf(b):
            if a != b:
                return False
            continue
        if abs(a - b) > tol:
            return False
    return True


def unit_directions(count: int = 16) -> List[Vector]:
    """Evenly spaced unit vectors in the plane, handy for sampling extents."""

    if count <= 0:
        raise ValueError("count must be positive")
    step = 2.0 * math.pi / count
    return [Vector((math.cos(i * step), math.sin(i * step))) for i in range(count)]


__all__ = [
    "Direction",
    "Extent",
    "EmptyExtent",
    "ZeroExtent",
    "EMPTY_EXTENT",
    "ZERO_EXTENT",
    "SegmentExtent",
    "RebasedExtent",
    "UnionExtent",
    "TransformedExtent",
    "FunctionExtent",
    "rebase",
    "union",
    "union_all",
    "transform_extent",
    "extent_diameter",
    "bounding_box",
    "extents_close",
    "unit_directions",
]
