import math

import pytest

from diagram_paths.diagram import AnyHit, Diagram, PulledBackHit, any_hit, never_hit, pull_back_hit, stroke, stroke_trail
from diagram_paths.extent import extents_close, unit_directions
from diagram_paths.path import empty_path, path_bounds, path_from_offsets, path_from_trail
from diagram_paths.trail import trail_from_offsets
from diagram_paths.transform import SingularTransformError, linear_map, rotation, translate_by
from diagram_paths.vectors import origin, p2, r2

DIRECTIONS = unit_directions(12)


def test_stroke_packages_path_with_bounds():
    path = path_from_offsets(p2(1, 1), [r2(2, 0), r2(0, 2)])
    diagram = stroke(path)
    assert diagram.prims == (path,)
    assert dict(diagram.names) == {}
    assert extents_close(diagram.bounds, path_bounds(path), DIRECTIONS)
    assert diagram.bounds(r2(1, 0)) == pytest.approx(3.0)


@pytest.mark.parametrize("point", [p2(0, 0), p2(1, 1), p2(2, 1), p2(100, -3)])
def test_stroke_hit_test_is_always_false(point):
    diagram = stroke(path_from_offsets(p2(0, 0), [r2(2, 0), r2(0, 2), r2(-2, 0)]).close())
    assert diagram.sample(point) is False
    assert never_hit(point) is False


def test_stroke_trail_anchors_at_origin():
    trail = trail_from_offsets([r2(1, 0), r2(0, 1)])
    diagram = stroke_trail(trail)
    assert diagram.prims == (path_from_trail(trail),)
    assert diagram.bounds(r2(-1, 0)) == pytest.approx(0.0)
    assert diagram.bounds(r2(1, 0)) == pytest.approx(1.0)


def test_stroke_empty_path():
    diagram = stroke(empty_path())
    assert diagram.bounds(r2(1, 0)) == -math.inf


def test_atop_superimposes_diagrams():
    low = stroke(path_from_offsets(p2(0, 0), [r2(1, 0)]))
    high = Diagram(
        prims=(path_from_offsets(p2(0, 5), [r2(1, 0)]),),
        bounds=path_bounds(path_from_offsets(p2(0, 5), [r2(1, 0)])),
        names={"top": p2(0, 5)},
        sample=lambda point: point == p2(0, 5),
    )
    combined = high.atop(low)
    assert combined.prims == low.prims + high.prims
    assert combined.bounds(r2(0, 1)) == pytest.approx(5.0)
    assert combined.bounds(r2(0, -1)) == pytest.approx(0.0)
    assert combined.names == {"top": p2(0, 5)}
    assert combined.sample(p2(0, 5))
    assert not combined.sample(p2(0, 0))


def test_transform_moves_everything():
    diagram = Diagram(
        prims=(path_from_offsets(origin(), [r2(1, 0)]),),
        bounds=path_bounds(path_from_offsets(origin(), [r2(1, 0)])),
        names={"start": origin()},
        sample=lambda point: point.is_close(origin()),
    )
    t = translate_by(3, 0) @ rotation(math.pi / 2)
    moved = diagram.transform(t)
    assert moved.names["start"].is_close(p2(3, 0))
    assert moved.bounds(r2(0, 1)) == pytest.approx(1.0)
    assert moved.bounds(r2(1, 0)) == pytest.approx(3.0)
    assert extents_close(moved.bounds, path_bounds(moved.prims[0]), DIRECTIONS)
    assert moved.sample(p2(3, 0))
    assert not moved.sample(origin())


def test_transform_requires_invertible_map():
    diagram = stroke(path_from_offsets(origin(), [r2(1, 0)]))
    with pytest.raises(SingularTransformError):
        diagram.transform(linear_map([[0.0, 0.0], [0.0, 1.0]]))


def test_atop_of_many_diagrams_keeps_a_flat_hit_test():
    acc = stroke(empty_path())
    for i in range(2000):
        marker = Diagram(
            prims=(),
            bounds=path_bounds(path_from_offsets(p2(i, 0), [r2(0, 1)])),
            sample=lambda point, i=i: point == p2(i, 0),
        )
        acc = marker.atop(acc)
    assert isinstance(acc.sample, AnyHit)
    assert len(acc.sample.tests) == 2000
    assert acc.sample(p2(1999, 0))
    assert acc.sample(p2(0, 0))
    assert not acc.sample(p2(-1, 0))
    assert acc.bounds(r2(1, 0)) == pytest.approx(1999.0)


def test_atop_of_strokes_never_hits():
    acc = stroke(empty_path())
    for i in range(2000):
        acc = stroke(path_from_offsets(p2(i, 0), [r2(1, 0)])).atop(acc)
    assert acc.sample is never_hit
    assert not acc.sample(p2(0, 0))


def test_repeated_transforms_compose_into_one_map():
    diagram = Diagram(
        prims=(path_from_offsets(origin(), [r2(1, 0)]),),
        bounds=path_bounds(path_from_offsets(origin(), [r2(1, 0)])),
        sample=lambda point: point.is_close(p2(1, 0), tol=1e-6),
    )
    for _ in range(1500):
        diagram = diagram.transform(rotation(0.01))
    assert isinstance(diagram.sample, PulledBackHit)
    assert not isinstance(diagram.sample.inner, PulledBackHit)
    end = p2(math.cos(15.0), math.sin(15.0))
    assert diagram.bounds(r2(math.cos(15.0), math.sin(15.0))) == pytest.approx(1.0)
    assert diagram.sample(end)
    assert not diagram.sample(p2(1, 0))


def test_hit_test_helpers_drop_never_hit():
    def hit(point):
        return True

    assert any_hit([never_hit, never_hit]) is never_hit
    assert any_hit([never_hit, hit]) is hit
    assert pull_back_hit(rotation(1.0), never_hit) is never_hit
