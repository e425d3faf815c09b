"""Linear and cubic Bezier segments placed at the local origin."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .config import root_tolerance
from .extent import Extent, SegmentExtent
from .transform import Transformation
from .vectors import Vector, expect_vector, zero_vector


class Segment:
    """A curve piece that starts at the origin.

    Subclasses provide the endpoint ``offset``, the ``support`` value in a
    direction, parametric evaluation, and a linear ``transform``.
    """

    def offset(self) -> Vector:
        raise NotImplementedError

    def support(self, direction: Vector) -> float:
        raise NotImplementedError

    def evaluate(self, t: float) -> Vector:
        raise NotImplementedError

    def transform(self, t: Transformation) -> "Segment":
        raise NotImplementedError

    def sort_key(self) -> Tuple[int, Tuple[float, ...]]:
        raise NotImplementedError

    def extent(self) -> Extent:
        return SegmentExtent(self)

    @property
    def dim(self) -> int:
        return self.offset().dim


@dataclass(frozen=True)
class Linear(Segment):
    end: Vector

    def __post_init__(self) -> None:
        expect_vector(self.end, "Linear end")

    def offset(self) -> Vector:
        return self.end

    def support(self, direction: Vector) -> float:
        return max(0.0, direction.dot(self.end))

    def evaluate(self, t: float) -> Vector:
        return self.end * t

    def transform(self, t: Transformation) -> "Linear":
        return Linear(t.apply_vector(self.end))

    def sort_key(self) -> Tuple[int, Tuple[float, ...]]:
        return (0, self.end.coords)


@dataclass(frozen=True)
class Cubic(Segment):
    """Cubic Bezier from the origin with control points ``control1``, ``control2``."""

    control1: Vector
    control2: Vector
    end: Vector

    def __post_init__(self) -> None:
        expect_vector(self.control1, "Cubic control1")
        expect_vector(self.control2, "Cubic control2")
        expect_vector(self.end, "Cubic end")

    def offset(self) -> Vector:
        return self.end

    def _critical_params(self, direction: Vector) -> List[float]:
        a = direction.dot(self.control1)
        b = direction.dot(self.control2)
        c = direction.dot(self.end)
        # d/dt of <B(t), v> = 3*k3*t^2 + 2*k2*t + k1
        k3 = 3.0 * a - 3.0 * b + c
        k2 = -6.0 * a + 3.0 * b
        k1 = 3.0 * a
        tol = root_tolerance()
        params: List[float] = []
        for root in np.roots([3.0 * k3, 2.0 * k2, k1]):
            if abs(root.imag) > tol:
                continue
            t = float(root.real)
            if -tol <= t <= 1.0 + tol:
                params.append(min(max(t, 0.0), 1.0))
        return params

    def support(self, direction: Vector) -> float:
        candidates = [0.0, 1.0] + self._critical_params(direction)
        return max(direction.dot(self.evaluate(t)) for t in candidates)

    def evaluate(self, t: float) -> Vector:
        s = 1.0 - t
        return (
            self.control1 * (3.0 * s * s * t)
            + self.control2 * (3.0 * s * t * t)
            + self.end * (t * t * t)
        )

    def transform(self, t: Transformation) -> "Cubic":
        return Cubic(
            t.apply_vector(self.control1),
            t.apply_vector(self.control2),
            t.apply_vector(self.end),
        )

    def sort_key(self) -> Tuple[int, Tuple[float, ...]]:
        return (1, self.control1.coords + self.control2.coords + self.end.coords)


def straight(offset: Vector) -> Linear:
    return Linear(offset)


def bezier3(control1: Vector, control2: Vector, end: Vector) -> Cubic:
    return Cubic(control1, control2, end)


def segment_offset(segment: Segment) -> Vector:
    return segment.offset()


def segment_bounds(segment: Segment) -> Extent:
    return segment.extent()


def sample_segment(segment: Segment, count: int = 32) -> List[Vector]:
    """Evenly spaced points along ``segment`` (including both ends)."""

    if count < 2:
        return [zero_vector(segment.dim), segment.offset()]
    return [segment.evaluate(i / (count - 1)) for i in range(count)]


__all__ = [
    "Segment",
    "Linear",
    "Cubic",
    "straight",
    "bezier3",
    "segment_offset",
    "segment_bounds",
    "sample_segment",
]
