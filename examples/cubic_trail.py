"""Example: concatenate trails with cubic segments and stroke the result."""

from diagram_paths import (
    bezier3,
    bounding_box,
    r2,
    scaling,
    straight,
    stroke_trail,
    trail_from_segments,
    trail_offset,
)


def main() -> None:
    arch = trail_from_segments([bezier3(r2(0, 2), r2(2, 2), r2(2, 0))])
    base = trail_from_segments([straight(r2(1, 0))])
    trail = base + arch + base

    print(f"segments: {len(trail)}  closed: {trail.closed}")
    offset = trail_offset(trail)
    print(f"total offset: ({offset.x:g}, {offset.y:g})")

    diagram = stroke_trail(trail)
    lower, upper = bounding_box(diagram.bounds)
    print(f"box: ({lower.x:.4f}, {lower.y:.4f}) .. ({upper.x:.4f}, {upper.y:.4f})")

    doubled = diagram.transform(scaling(2.0))
    lower, upper = bounding_box(doubled.bounds)
    print(f"scaled box: ({lower.x:.4f}, {lower.y:.4f}) .. ({upper.x:.4f}, {upper.y:.4f})")


if __name__ == "__main__":
    main()
