"""Trails: position-free sequences of segments.

A trail stores only relative geometry, so translating it does nothing;
where a trail actually sits is decided by the point it is anchored at
inside a :class:`~diagram_paths.path.Path`.  Trails form a monoid under
``+`` (concatenation) with :func:`empty_trail` as the identity.  The result
of concatenation is closed if either operand is closed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Tuple

from .extent import ZERO_EXTENT, Extent, rebase, union_all
from .logging_utils import apply_debug_logging
from .segment import Linear, Segment
from .transform import Transformation
from .vectors import Point, Vector, sum_vectors, zero_vector

logger = logging.getLogger(__name__)

TrailKey = Tuple[Tuple[Tuple[int, Tuple[float, ...]], ...], bool]


@dataclass(frozen=True)
class Trail:
    segments: Tuple[Segment, ...] = ()
    closed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))
        for seg in self.segments:
            if not isinstance(seg, Segment):
                raise TypeError(f"trail segments must be Segments, got {type(seg).__name__}")
        object.__setattr__(self, "closed", bool(self.closed))

    def __add__(self, other: object) -> "Trail":
        if not isinstance(other, Trail):
            return NotImplemented
        return Trail(self.segments + other.segments, self.closed or other.closed)

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def dim(self) -> Optional[int]:
        if not self.segments:
            return None
        return self.segments[0].dim

    def close(self) -> "Trail":
        return replace(self, closed=True)

    def open(self) -> "Trail":
        return replace(self, closed=False)

    def offsets(self) -> List[Vector]:
        return trail_offsets(self)

    def offset(self) -> Vector:
        return trail_offset(self)

    def bounds(self, start: Point) -> Extent:
        return trail_bounds(self, start)

    def vertices(self, start: Point) -> List[Point]:
        return trail_vertices(self, start)

    def transform(self, t: Transformation) -> "Trail":
        # translation has no effect on a position-free trail
        return Trail(tuple(seg.transform(t) for seg in self.segments), self.closed)

    def sort_key(self) -> TrailKey:
        return (tuple(seg.sort_key() for seg in self.segments), self.closed)

    def log_summary(self) -> str:
        return f"Trail(segments={len(self.segments)}, closed={self.closed})"


def empty_trail() -> Trail:
    return Trail((), False)


def trail_from_segments(segments: Iterable[Segment], closed: bool = False) -> Trail:
    return Trail(tuple(segments), closed)


def trail_from_offsets(offsets: Iterable[Vector]) -> Trail:
    """Open trail of linear segments, one per offset."""

    return Trail(tuple(Linear(vec) for vec in offsets), False)


def trail_from_vertices(points: Sequence[Point]) -> Trail:
    """Open trail of linear segments through ``points``.

    Only the relative positions survive; the first point itself is dropped.
    Fewer than two points give the empty trail.
    """

    pts = list(points)
    if len(pts) < 2:
        return empty_trail()
    return trail_from_offsets(b - a for a, b in zip(pts, pts[1:]))


def close_trail(trail: Trail) -> Trail:
    return trail.close()


def open_trail(trail: Trail) -> Trail:
    return trail.open()


def concat_trails(trails: Iterable[Trail]) -> Trail:
    segments: List[Segment] = []
    closed = False
    for trail in trails:
        segments.extend(trail.segments)
        closed = closed or trail.closed
    return Trail(tuple(segments), closed)


def trail_offsets(trail: Trail) -> List[Vector]:
    return [seg.offset() for seg in trail.segments]


def trail_offset(trail: Trail, dim: Optional[int] = None) -> Vector:
    """Net displacement from the start of ``trail`` to its end.

    The closed flag is ignored: no implicit closing segment is added.
    """

    return sum_vectors(trail_offsets(trail), dim=dim if dim is not None else trail.dim)


def trail_vertices(trail: Trail, start: Point) -> List[Point]:
    vertices = [start]
    current = start
    for vec in trail_offsets(trail):
        current = current + vec
        vertices.append(current)
    return vertices


def trail_bounds(trail: Trail, start: Point) -> Extent:
    """Extent of ``trail`` when its first vertex sits at ``start``.

    Each segment's own extent is moved to where the segment begins along
    the trail, the pieces are unioned, and the result is moved to ``start``.
    The start vertex is always part of the shape, so an empty trail reports
    the single point ``start``.
    """

    parts: List[Extent] = [ZERO_EXTENT]
    acc = zero_vector(start.dim)
    for seg in trail.segments:
        parts.append(rebase(acc, seg.extent()))
        acc = acc + seg.offset()
    logger.debug("Computed trail extent over %d segment(s)", len(trail.segments))
    return rebase(start.to_vector(), union_all(parts))


def transform_trail(t: Transformation, trail: Trail) -> Trail:
    return trail.transform(t)


__all__ = [
    "Trail",
    "TrailKey",
    "empty_trail",
    "trail_from_segments",
    "trail_from_offsets",
    "trail_from_vertices",
    "close_trail",
    "open_trail",
    "concat_trails",
    "trail_offsets",
    "trail_offset",
    "trail_vertices",
    "trail_bounds",
    "transform_trail",
]


apply_debug_logging(globals(), logger=logger, skip={"Trail.sort_key", "Trail.log_summary"})
