"""Unit tests for geometry utility functions.

Tests the pure geometry functions in cursive_lib.utils.geometry:
    - point_distance: Euclidean distance between two points
    - point_to_segment_distance: Clamped projection onto a segment
    - build_skeleton: Pooling strokes into checkpoints and segments
    - distance_to_skeleton: Vectorized minimum distance
"""

import math
import unittest

import numpy as np

from cursive_lib.domain import CanvasSize, LetterStroke, Point
from cursive_lib.utils.geometry import (
    Skeleton,
    as_xy,
    build_skeleton,
    distance_to_skeleton,
    point_distance,
    point_distance_squared,
    point_to_segment_distance,
)


class TestPointDistance(unittest.TestCase):
    """Tests for point_distance function."""

    def test_same_point_zero_distance(self):
        """Distance from a point to itself is zero."""
        p = (10.0, 20.0)
        self.assertEqual(point_distance(p, p), 0.0)

    def test_diagonal_distance(self):
        """Distance along diagonal (3-4-5 triangle)."""
        self.assertEqual(point_distance((0.0, 0.0), (3.0, 4.0)), 5.0)

    def test_squared_distance(self):
        self.assertEqual(point_distance_squared((0.0, 0.0), (3.0, 4.0)), 25.0)

    def test_symmetry(self):
        """Distance is symmetric: d(p1, p2) == d(p2, p1)."""
        p1 = (1.0, 2.0)
        p2 = (4.0, 6.0)
        self.assertEqual(point_distance(p1, p2), point_distance(p2, p1))


class TestPointToSegmentDistance(unittest.TestCase):
    """Tests for point_to_segment_distance function."""

    def test_perpendicular_projection(self):
        """(5, 5) projects onto the middle of (0,0)-(10,0)."""
        self.assertEqual(point_to_segment_distance((5, 5), (0, 0), (10, 0)), 5.0)

    def test_clamped_to_start(self):
        """(-5, 0) lies beyond the start, so distance is to (0, 0)."""
        self.assertEqual(point_to_segment_distance((-5, 0), (0, 0), (10, 0)), 5.0)

    def test_clamped_to_end(self):
        """Beyond the end the distance is measured to the end point."""
        self.assertEqual(point_to_segment_distance((13, 4), (0, 0), (10, 0)), 5.0)

    def test_point_on_segment(self):
        self.assertEqual(point_to_segment_distance((7, 0), (0, 0), (10, 0)), 0.0)

    def test_zero_length_segment(self):
        """A degenerate segment reduces to point distance."""
        self.assertEqual(point_to_segment_distance((3, 4), (0, 0), (0, 0)), 5.0)

    def test_direction_does_not_matter(self):
        a, b = (2, 1), (9, 7)
        p = (4, 8)
        self.assertAlmostEqual(
            point_to_segment_distance(p, a, b),
            point_to_segment_distance(p, b, a),
            places=10,
        )


class TestAsXy(unittest.TestCase):

    def test_accepts_point_and_tuple(self):
        self.assertEqual(as_xy(Point(1, 2)), (1.0, 2.0))
        self.assertEqual(as_xy((3, 4)), (3.0, 4.0))


class TestSkeleton(unittest.TestCase):
    """Tests for build_skeleton and distance_to_skeleton."""

    def setUp(self):
        self.size = CanvasSize(100, 100)
        self.strokes = (
            LetterStroke.from_tuples([(0.0, 0.0), (0.1, 0.0)], stroke_number=1),
            LetterStroke.from_tuples([(0.9, 0.0), (1.0, 0.0)], stroke_number=2),
        )

    def test_pools_all_strokes(self):
        skel = build_skeleton(self.strokes, self.size)
        self.assertEqual(skel.points.shape, (4, 2))
        self.assertEqual(skel.seg_starts.shape, (2, 2))

    def test_segments_do_not_span_strokes(self):
        """The gap between stroke 1's end and stroke 2's start is not ink."""
        skel = build_skeleton(self.strokes, self.size)
        self.assertAlmostEqual(distance_to_skeleton((50, 0), skel), 40.0)

    def test_distance_on_segment_is_zero(self):
        skel = build_skeleton(self.strokes, self.size)
        self.assertAlmostEqual(distance_to_skeleton((5, 0), skel), 0.0)

    def test_empty_canvas_gives_empty_skeleton(self):
        skel = build_skeleton(self.strokes, CanvasSize.zero())
        self.assertTrue(skel.is_empty)
        self.assertEqual(distance_to_skeleton((1, 1), skel), math.inf)

    def test_empty_skeleton_distance_is_infinite(self):
        self.assertEqual(distance_to_skeleton((0, 0), Skeleton.empty()), math.inf)

    def test_single_point_stroke(self):
        """A one-checkpoint stroke contributes a point but no segment."""
        strokes = (LetterStroke.from_tuples([(0.5, 0.5)]),)
        skel = build_skeleton(strokes, self.size)
        self.assertEqual(len(skel.seg_starts), 0)
        self.assertAlmostEqual(distance_to_skeleton((53, 54), skel), 5.0)

    def test_degenerate_segment(self):
        strokes = (LetterStroke.from_tuples([(0.5, 0.5), (0.5, 0.5)]),)
        skel = build_skeleton(strokes, self.size)
        self.assertAlmostEqual(distance_to_skeleton((50, 60), skel), 10.0)

    def test_vectorized_matches_scalar(self):
        """distance_to_skeleton equals the brute-force scalar minimum."""
        strokes = (
            LetterStroke.from_tuples([(0.1, 0.2), (0.4, 0.8), (0.6, 0.3), (0.6, 0.3)]),
            LetterStroke.from_tuples([(0.8, 0.1), (0.9, 0.9)], stroke_number=2),
        )
        size = CanvasSize(300, 400)
        skel = build_skeleton(strokes, size)

        rng = np.random.default_rng(7)
        for x, y in rng.uniform(-50, 450, size=(50, 2)):
            expected = math.inf
            for stroke in strokes:
                pts = [p.to_tuple() for p in stroke.scaled_points(size)]
                for p in pts:
                    expected = min(expected, point_distance((x, y), p))
                for a, b in zip(pts, pts[1:]):
                    expected = min(expected, point_to_segment_distance((x, y), a, b))
            self.assertAlmostEqual(distance_to_skeleton((x, y), skel), expected, places=6)


if __name__ == '__main__':
    unittest.main()
