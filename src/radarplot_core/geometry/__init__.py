"""
Geometry kernel for the radar plotting plane
"""

from .vector import (
    Vector2,
    ORIGIN,
    as_vector,
    vector_add,
    vector_subtract,
    vector_scale,
    vector_magnitude,
    vector_normalize,
    distance,
    dot_product,
    cross_product,
    polar_to_cartesian,
    cartesian_to_polar,
    bearing_between,
    unit_vector,
    rotate_vector,
    rotate_point_around,
    angle_between_vectors,
    interpolate_points,
)

from .intersections import (
    line_line_intersection,
    infinite_lines_intersect,
    segments_intersect,
    line_circle_intersection,
    point_on_segment,
    point_to_line_distance,
    point_to_segment_distance,
    closest_point_on_segment,
    are_collinear,
)

from .bearings import (
    calculate_true_bearing,
    calculate_relative_bearing,
    relative_to_true_bearing,
    true_to_relative_bearing,
    calculate_aspect_angle,
)

__all__ = [
    # vector
    'Vector2',
    'ORIGIN',
    'as_vector',
    'vector_add',
    'vector_subtract',
    'vector_scale',
    'vector_magnitude',
    'vector_normalize',
    'distance',
    'dot_product',
    'cross_product',
    'polar_to_cartesian',
    'cartesian_to_polar',
    'bearing_between',
    'unit_vector',
    'rotate_vector',
    'rotate_point_around',
    'angle_between_vectors',
    'interpolate_points',
    # intersections
    'line_line_intersection',
    'infinite_lines_intersect',
    'segments_intersect',
    'line_circle_intersection',
    'point_on_segment',
    'point_to_line_distance',
    'point_to_segment_distance',
    'closest_point_on_segment',
    'are_collinear',
    # bearings
    'calculate_true_bearing',
    'calculate_relative_bearing',
    'relative_to_true_bearing',
    'true_to_relative_bearing',
    'calculate_aspect_angle',
]
