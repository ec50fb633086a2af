"""
collision_shapes.py
-------------------
Pure geometry tests used by the collision manager.

All positions are centers; all functions take plain (x, y) pairs or
pygame.Vector2 and return bools, so they are easy to test in isolation.
"""

import math


def distance(a, b) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def rects_overlap(a_center, a_size, b_center, b_size) -> bool:
    """Axis-aligned box overlap for center-anchored boxes (touching edges do not count)."""
    return (
        abs(a_center[0] - b_center[0]) * 2 < a_size[0] + b_size[0] and
        abs(a_center[1] - b_center[1]) * 2 < a_size[1] + b_size[1]
    )


def circle_overlap(a, b, radius_sum) -> bool:
    """Center distance strictly below radius_sum."""
    return distance(a, b) < radius_sum


def in_annulus(point, center, inner, outer) -> bool:
    """Point strictly between the inner and outer radius around center."""
    d = distance(point, center)
    return inner < d < outer


def segment_point_distance_sq(start, end, point) -> float:
    """
    Squared distance from point to the closest point on segment start->end.

    The projection parameter is clamped to [0, 1]; a zero-length segment
    degenerates to the distance from start.
    """
    seg_x = end[0] - start[0]
    seg_y = end[1] - start[1]
    seg_len_sq = seg_x * seg_x + seg_y * seg_y

    t = 0.0
    if seg_len_sq > 0:
        t = ((point[0] - start[0]) * seg_x + (point[1] - start[1]) * seg_y) / seg_len_sq
        t = max(0.0, min(1.0, t))

    closest_x = start[0] + t * seg_x
    closest_y = start[1] + t * seg_y
    dx = point[0] - closest_x
    dy = point[1] - closest_y
    return dx * dx + dy * dy


def segment_circle_hit(start, end, center, radius) -> bool:
    """True if the segment passes strictly within radius of center."""
    return segment_point_distance_sq(start, end, center) < radius * radius
