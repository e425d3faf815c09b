"""Paths: sets of trails, each anchored at an absolute starting point.

Unlike trails, paths are *not* translation invariant.  Combining paths with
``+`` takes the union of their (trail, anchor) pairs, so paths form a
commutative, idempotent monoid with :func:`empty_path` as the identity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple

from .extent import EMPTY_EXTENT, Extent, union_all
from .logging_utils import apply_debug_logging
from .trail import Trail, TrailKey, trail_bounds, trail_from_offsets, trail_from_vertices, trail_vertices
from .transform import Transformation
from .vectors import Point, Vector, expect_point, origin

logger = logging.getLogger(__name__)

Anchored = Tuple[Trail, Point]


def _check_pair(pair: object) -> None:
    if not isinstance(pair, tuple) or len(pair) != 2:
        raise TypeError(f"path entries must be (Trail, Point) pairs, got {pair!r}")
    trail, anchor = pair
    if not isinstance(trail, Trail):
        raise TypeError(f"path trail must be a Trail, got {type(trail).__name__}")
    expect_point(anchor, "path anchor")


def _pair_key(pair: Anchored) -> Tuple[TrailKey, Tuple[float, ...]]:
    trail, anchor = pair
    return (trail.sort_key(), anchor.coords)


@dataclass(frozen=True)
class Path:
    trails: FrozenSet[Anchored] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "trails", frozenset(self.trails))
        for pair in self.trails:
            _check_pair(pair)

    def __add__(self, other: object) -> "Path":
        if not isinstance(other, Path):
            return NotImplemented
        return Path(self.trails | other.trails)

    def __len__(self) -> int:
        return len(self.trails)

    def __iter__(self) -> Iterator[Anchored]:
        return iter(self.pairs)

    @property
    def pairs(self) -> Tuple[Anchored, ...]:
        """The (trail, anchor) pairs in a deterministic order."""

        return tuple(sorted(self.trails, key=_pair_key))

    @property
    def dim(self) -> Optional[int]:
        for _, anchor in self.trails:
            return anchor.dim
        return None

    def close(self) -> "Path":
        return close_path(self)

    def open(self) -> "Path":
        return open_path(self)

    def vertices(self) -> List[Tuple[Point, ...]]:
        return path_vertices(self)

    def bounds(self) -> Extent:
        return path_bounds(self)

    def transform(self, t: Transformation) -> "Path":
        # Anchors are points and take the full affine map; the trails only
        # see its linear part.
        return Path((trail.transform(t), t.apply_point(anchor)) for trail, anchor in self.trails)

    def log_summary(self) -> str:
        return f"Path(trails={len(self.trails)})"


def empty_path() -> Path:
    return Path(frozenset())


def union_paths(*paths: Path) -> Path:
    pairs: set = set()
    for path in paths:
        pairs.update(path.trails)
    return Path(frozenset(pairs))


def path_from_trail_at(trail: Trail, start: Point) -> Path:
    return Path(frozenset({(trail, start)}))


def path_from_trail(trail: Trail) -> Path:
    """Anchor ``trail`` at the origin."""

    return path_from_trail_at(trail, origin(trail.dim or 2))


def path_from_vertices(points: Sequence[Point]) -> Path:
    """Single open trail through ``points``, anchored at the first one."""

    pts = list(points)
    if not pts:
        return empty_path()
    return path_from_trail_at(trail_from_vertices(pts), pts[0])


def path_from_offsets(start: Point, offsets: Iterable[Vector]) -> Path:
    return path_from_trail_at(trail_from_offsets(offsets), start)


def close_path(path: Path) -> Path:
    return Path((trail.close(), anchor) for trail, anchor in path.trails)


def open_path(path: Path) -> Path:
    return Path((trail.open(), anchor) for trail, anchor in path.trails)


def path_vertices(path: Path) -> List[Tuple[Point, ...]]:
    """Vertices visited by each trail, starting at its anchor.

    Trails that visit the same vertices (for example a closed and an open
    copy of one trail) contribute a single sequence.
    """

    seen = set()
    result: List[Tuple[Point, ...]] = []
    for trail, anchor in path.pairs:
        verts = tuple(trail_vertices(trail, anchor))
        if verts in seen:
            continue
        seen.add(verts)
        result.append(verts)
    return result


def path_bounds(path: Path) -> Extent:
    if not path.trails:
        logger.debug("Empty path has the empty extent")
        return EMPTY_EXTENT
    logger.debug("Computing path extent over %d trail(s)", len(path.trails))
    return union_all(trail_bounds(trail, anchor) for trail, anchor in path.pairs)


def transform_path(t: Transformation, path: Path) -> Path:
    return path.transform(t)


__all__ = [
    "Anchored",
    "Path",
    "empty_path",
    "union_paths",
    "path_from_trail_at",
    "path_from_trail",
    "path_from_vertices",
    "path_from_offsets",
    "close_path",
    "open_path",
    "path_vertices",
    "path_bounds",
    "transform_path",
]


apply_debug_logging(globals(), logger=logger, skip={"Path.pairs", "Path.log_summary", "_pair_key", "_check_pair"})
