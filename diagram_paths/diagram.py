"""Glue between paths and a rendering layer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Hashable, Iterable, List, Mapping, Tuple

from .extent import Extent, union
from .logging_utils import apply_debug_logging
from .path import Path, path_bounds, path_from_trail
from .trail import Trail
from .transform import Transformation
from .vectors import Point

logger = logging.getLogger(__name__)

Sample = Callable[[Point], bool]


def never_hit(point: Point) -> bool:
    """Hit test for infinitely thin curves."""

    return False


@dataclass(frozen=True, eq=False)
class AnyHit:
    """Hit test that succeeds when any of ``tests`` does."""

    tests: Tuple[Sample, ...]

    def __call__(self, point: Point) -> bool:
        return any(test(point) for test in self.tests)


@dataclass(frozen=True, eq=False)
class PulledBackHit:
    """Hit test of ``inner`` seen through a transformation.

    ``inverse`` maps query points back into the frame ``inner`` was built in.
    """

    inner: Sample
    inverse: Transformation

    def __call__(self, point: Point) -> bool:
        return self.inner(self.inverse.apply_point(point))


def any_hit(tests: Iterable[Sample]) -> Sample:
    flat: List[Sample] = []
    for test in tests:
        if test is never_hit:
            continue
        if isinstance(test, AnyHit):
            flat.extend(test.tests)
        else:
            flat.append(test)
    if not flat:
        return never_hit
    if len(flat) == 1:
        return flat[0]
    return AnyHit(tuple(flat))


def pull_back_hit(inverse: Transformation, test: Sample) -> Sample:
    if test is never_hit:
        return test
    if isinstance(test, PulledBackHit):
        return PulledBackHit(test.inner, test.inverse @ inverse)
    return PulledBackHit(test, inverse)


@dataclass(frozen=True, eq=False)
class Diagram:
    """A renderable bundle of primitives with its extent, names and hit test."""

    prims: Tuple[Path, ...]
    bounds: Extent
    names: Mapping[Hashable, Point] = field(default_factory=dict)
    sample: Sample = never_hit

    def atop(self, other: "Diagram") -> "Diagram":
        """Superimpose ``self`` on top of ``other``."""

        names: Dict[Hashable, Point] = dict(other.names)
        names.update(self.names)
        return Diagram(
            prims=other.prims + self.prims,
            bounds=union(self.bounds, other.bounds),
            names=names,
            sample=any_hit((self.sample, other.sample)),
        )

    def transform(self, t: Transformation) -> "Diagram":
        inverse = t.inverse()
        return Diagram(
            prims=tuple(prim.transform(t) for prim in self.prims),
            bounds=self.bounds.transform(t),
            names={key: t.apply_point(point) for key, point in self.names.items()},
            sample=pull_back_hit(inverse, self.sample),
        )

    def log_summary(self) -> str:
        return f"Diagram(prims={len(self.prims)}, names={len(self.names)})"


def stroke(path: Path) -> Diagram:
    """Turn ``path`` into a diagram.

    The name table stays empty and the hit test always fails, since
    paths are modelled as infinitely thin curves.
    """

    logger.debug("Stroking path with %d trail(s)", len(path))
    return Diagram(prims=(path,), bounds=path_bounds(path), names={}, sample=never_hit)


def stroke_trail(trail: Trail) -> Diagram:
    return stroke(path_from_trail(trail))


__all__ = [
    "Sample",
    "AnyHit",
    "PulledBackHit",
    "Diagram",
    "never_hit",
    "any_hit",
    "pull_back_hit",
    "stroke",
    "stroke_trail",
]


apply_debug_logging(globals(), logger=logger, skip={"never_hit", "Diagram.sample", "Diagram.log_summary"})
