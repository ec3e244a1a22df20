"""Geometric utility functions.

This module provides the distance calculations behind boundary checking
and checkpoint matching. They supplement the methods on the domain
objects (Point, CanvasSize, etc.) with additional operations.

The module provides the following:
    as_xy: Coerce points and samples to (x, y) tuples.
    point_distance_squared: Squared distance (faster for comparisons).
    point_distance: Euclidean distance between two points.
    point_to_segment_distance: Distance to a segment via clamped projection.
    Skeleton: Scaled checkpoints and segments of a whole letter.
    build_skeleton: Pool all strokes of a letter into a Skeleton.
    distance_to_skeleton: Minimum distance from a point to a Skeleton.

Example usage:
    Segment distance::

        from cursive_lib.utils.geometry import point_to_segment_distance

        point_to_segment_distance((5, 5), (0, 0), (10, 0))   # 5.0, perpendicular
        point_to_segment_distance((-5, 0), (0, 0), (10, 0))  # 5.0, clamped to (0, 0)

    Skeleton distance::

        from cursive_lib.domain import CanvasSize
        from cursive_lib.templates import strokes_for
        from cursive_lib.utils.geometry import build_skeleton, distance_to_skeleton

        skeleton = build_skeleton(strokes_for('a'), CanvasSize(300, 400))
        d = distance_to_skeleton((150, 200), skeleton)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..domain.geometry import CanvasSize, LetterStroke


def as_xy(point) -> tuple[float, float]:
    """Coerce a Point, DrawingSample or (x, y) pair to a plain tuple."""
    if hasattr(point, 'x'):
        return (float(point.x), float(point.y))
    return (float(point[0]), float(point[1]))


def point_distance_squared(p1: tuple[float, float], p2: tuple[float, float]) -> float:
    """Compute squared Euclidean distance between two points.

    Args:
        p1: First point as (x, y).
        p2: Second point as (x, y).

    Returns:
        Squared distance between the points.
    """
    dx = p1[0] - p2[0]
    dy = p1[1] - p2[1]
    return dx * dx + dy * dy


def point_distance(p1: tuple[float, float], p2: tuple[float, float]) -> float:
    """Compute Euclidean distance between two points."""
    return math.sqrt(point_distance_squared(p1, p2))


def point_to_segment_distance(point: tuple[float, float],
                              seg_start: tuple[float, float],
                              seg_end: tuple[float, float]) -> float:
    """Distance from a point to a line segment.

    Projects the point onto the segment's infinite line, clamps the
    projection parameter to [0, 1] and measures the distance to the
    clamped point. A zero-length segment reduces to point distance.

    Args:
        point: Query point as (x, y).
        seg_start: Segment start as (x, y).
        seg_end: Segment end as (x, y).

    Returns:
        Shortest distance from the point to any point of the segment.
    """
    dx = seg_end[0] - seg_start[0]
    dy = seg_end[1] - seg_start[1]

    if dx == 0 and dy == 0:
        return point_distance(point, seg_start)

    t = ((point[0] - seg_start[0]) * dx + (point[1] - seg_start[1]) * dy) / (dx * dx + dy * dy)
    t = max(0.0, min(1.0, t))

    closest = (seg_start[0] + t * dx, seg_start[1] + t * dy)
    return point_distance(point, closest)


@dataclass(frozen=True)
class Skeleton:
    """Scaled reference geometry of a letter, pooled across all strokes.

    Attributes:
        points: (N, 2) array of every checkpoint on the canvas.
        seg_starts: (M, 2) array of segment start points.
        seg_ends: (M, 2) array of segment end points. Segments join
            consecutive checkpoints within a stroke and never cross from
            one stroke into the next.
    """
    points: np.ndarray
    seg_starts: np.ndarray
    seg_ends: np.ndarray

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0

    @classmethod
    def empty(cls) -> Skeleton:
        blank = np.zeros((0, 2), dtype=np.float64)
        return cls(blank, blank, blank)


def build_skeleton(strokes: Sequence[LetterStroke], size: CanvasSize) -> Skeleton:
    """Scale every stroke of a letter onto the canvas and pool the result.

    Args:
        strokes: Strokes of the letter, as returned by the letter table.
        size: Canvas the drawing is made on.

    Returns:
        Skeleton with all checkpoints and intra-stroke segments. Empty if
        there are no strokes or the canvas has no area.
    """
    if size.is_empty or not strokes:
        return Skeleton.empty()

    points = []
    starts = []
    ends = []
    for stroke in strokes:
        scaled = [p.to_tuple() for p in stroke.scaled_points(size)]
        points.extend(scaled)
        starts.extend(scaled[:-1])
        ends.extend(scaled[1:])

    def as_array(values):
        return np.array(values, dtype=np.float64).reshape(-1, 2)

    return Skeleton(as_array(points), as_array(starts), as_array(ends))


def distance_to_skeleton(point: tuple[float, float], skeleton: Skeleton) -> float:
    """Minimum distance from a point to any checkpoint or segment.

    Vectorized form of ``point_distance`` and
    ``point_to_segment_distance`` over the whole skeleton.

    Returns:
        The global minimum distance, or ``inf`` for an empty skeleton.
    """
    if skeleton.is_empty:
        return math.inf

    p = np.asarray(point, dtype=np.float64)
    best = float(np.min(np.hypot(*(skeleton.points - p).T)))

    if len(skeleton.seg_starts):
        d = skeleton.seg_ends - skeleton.seg_starts
        denom = np.einsum('ij,ij->i', d, d)
        rel = p - skeleton.seg_starts
        # Zero-length segments keep t = 0, i.e. distance to the start point
        t = np.divide(np.einsum('ij,ij->i', rel, d), denom,
                      out=np.zeros_like(denom), where=denom > 0)
        t = np.clip(t, 0.0, 1.0)
        closest = skeleton.seg_starts + d * t[:, None]
        best = min(best, float(np.min(np.hypot(*(closest - p).T))))

    return best
