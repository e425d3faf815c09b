from . import (
    bezier3,
    bounding_box,
    close_path,
    p2,
    path_from_offsets,
    path_from_trail_at,
    path_vertices,
    r2,
    rotation,
    stroke,
    trail_from_segments,
)
from .logging_utils import configure_logging


def run():
    square = close_path(path_from_offsets(p2(0, 0), [r2(2, 0), r2(0, 2), r2(-2, 0)]))
    wave = path_from_trail_at(
        trail_from_segments([bezier3(r2(1, 2), r2(2, -2), r2(3, 0))]),
        p2(3, 1),
    )
    path = square + wave
    print(f"Path: {path.log_summary()}\n")

    print("Vertices:")
    for verts in path_vertices(path):
        print("  " + " -> ".join(f"({pt.x:g}, {pt.y:g})" for pt in verts))

    diagram = stroke(path)
    lower, upper = bounding_box(diagram.bounds)
    print(f"Bounding box: ({lower.x:.4f}, {lower.y:.4f}) .. ({upper.x:.4f}, {upper.y:.4f})")

    turned = diagram.transform(rotation(0.5))
    lower, upper = bounding_box(turned.bounds)
    print(f"Rotated box:  ({lower.x:.4f}, {lower.y:.4f}) .. ({upper.x:.4f}, {upper.y:.4f})")


if __name__ == "__main__":
    configure_logging("DEBUG")
    run()
