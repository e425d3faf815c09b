"""Example: build a path from vertices and query its extent."""

from diagram_paths import (
    bounding_box,
    extent_diameter,
    p2,
    path_bounds,
    path_from_vertices,
    r2,
    translate,
)

VERTICES = [p2(0, 0), p2(4, 0), p2(4, 3), p2(1, 5)]


def main() -> None:
    path = path_from_vertices(VERTICES).close()
    bounds = path_bounds(path)

    for direction in (r2(1, 0), r2(0, 1), r2(-1, 0), r2(0, -1), r2(1, 1)):
        print(f"extent along ({direction.x:g}, {direction.y:g}): {bounds(direction):.4f}")

    print(f"width:  {extent_diameter(bounds, r2(1, 0)):.4f}")
    print(f"height: {extent_diameter(bounds, r2(0, 1)):.4f}")

    moved = translate(r2(10, -2), path)
    lower, upper = bounding_box(path_bounds(moved))
    print(f"moved box: ({lower.x:g}, {lower.y:g}) .. ({upper.x:g}, {upper.y:g})")


if __name__ == "__main__":
    main()
