from .vectors import (
    DimensionMismatchError,
    Point,
    Vector,
    expect_point,
    expect_vector,
    origin,
    p2,
    r2,
    sum_vectors,
    zero_vector,
)
from .config import GeometryConfig, get_geometry_config, set_geometry_config
from .transform import (
    SingularTransformError,
    Transformation,
    identity_transform,
    linear_map,
    reflection_x,
    reflection_y,
    rotate,
    rotation,
    scale,
    scaling,
    scaling_xy,
    transform,
    translate,
    translate_by,
    translation,
)
from .extent import (
    EMPTY_EXTENT,
    ZERO_EXTENT,
    Extent,
    FunctionExtent,
    bounding_box,
    extent_diameter,
    extents_close,
    rebase,
    transform_extent,
    union,
    union_all,
    unit_directions,
)
from .segment import Cubic, Linear, Segment, bezier3, straight
from .trail import (
    Trail,
    close_trail,
    concat_trails,
    empty_trail,
    open_trail,
    trail_bounds,
    trail_from_offsets,
    trail_from_segments,
    trail_from_vertices,
    trail_offset,
    trail_offsets,
    trail_vertices,
)
from .path import (
    Path,
    close_path,
    empty_path,
    open_path,
    path_bounds,
    path_from_offsets,
    path_from_trail,
    path_from_trail_at,
    path_from_vertices,
    path_vertices,
    union_paths,
)
from .diagram import Diagram, any_hit, never_hit, pull_back_hit, stroke, stroke_trail

__all__ = [
    'DimensionMismatchError',
    'Point',
    'Vector',
    'expect_point',
    'expect_vector',
    'origin',
    'p2',
    'r2',
    'sum_vectors',
    'zero_vector',
    'GeometryConfig',
    'get_geometry_config',
    'set_geometry_config',
    'SingularTransformError',
    'Transformation',
    'identity_transform',
    'linear_map',
    'reflection_x',
    'reflection_y',
    'rotate',
    'rotation',
    'scale',
    'scaling',
    'scaling_xy',
    'transform',
    'translate',
    'translate_by',
    'translation',
    'EMPTY_EXTENT',
    'ZERO_EXTENT',
    'Extent',
    'FunctionExtent',
    'bounding_box',
    'extent_diameter',
    'extents_close',
    'rebase',
    'transform_extent',
    'union',
    'union_all',
    'unit_directions',
    'Cubic',
    'Linear',
    'Segment',
    'bezier3',
    'straight',
    'Trail',
    'close_trail',
    'concat_trails',
    'empty_trail',
    'open_trail',
    'trail_bounds',
    'trail_from_offsets',
    'trail_from_segments',
    'trail_from_vertices',
    'trail_offset',
    'trail_offsets',
    'trail_vertices',
    'Path',
    'close_path',
    'empty_path',
    'open_path',
    'path_bounds',
    'path_from_offsets',
    'path_from_trail',
    'path_from_trail_at',
    'path_from_vertices',
    'path_vertices',
    'union_paths',
    'Diagram',
    'any_hit',
    'never_hit',
    'pull_back_hit',
    'stroke',
    'stroke_trail',
]
