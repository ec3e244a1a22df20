"""Utility functions for cursive practice.

This module provides geometry, path and rendering helpers used by the
letter table and the trackers, also exported for external code.

The module exports the following:

Geometry utilities:
    as_xy: Coerce points and samples to (x, y) tuples.
    point_distance: Euclidean distance between two points.
    point_to_segment_distance: Clamped-projection segment distance.
    Skeleton: Pooled scaled checkpoints and segments of a letter.
    build_skeleton: Build a Skeleton from strokes and a canvas size.
    distance_to_skeleton: Minimum distance from a point to a Skeleton.

Path utilities:
    PathCommand: Renderer-neutral move/line/quad instruction.
    smooth_path: Quadratic-smoothed path through stroke checkpoints.
    flatten_path: Convert commands to polylines.

Rendering utilities:
    render_template_mask: Thick template as a boolean mask.
    render_guide_image: Guide image with checkpoints and optional ink.
"""

from .geometry import (
    as_xy,
    Skeleton,
    build_skeleton,
    distance_to_skeleton,
    point_distance,
    point_to_segment_distance,
)
from .path import PathCommand, flatten_path, smooth_path
from .rendering import render_guide_image, render_template_mask

__all__ = [
    'as_xy', 'point_distance', 'point_to_segment_distance',
    'Skeleton', 'build_skeleton', 'distance_to_skeleton',
    'PathCommand', 'smooth_path', 'flatten_path',
    'render_template_mask', 'render_guide_image',
]
