"""Boundary checking for freehand ink.

The BoundaryDetector decides whether the user's ink has strayed too far
from the reference letter. The reference is the letter's skeleton: every
checkpoint of every stroke plus the segments joining consecutive
checkpoints within a stroke. A sample is in bounds when its distance to
the nearest checkpoint or segment is at most the tolerance.

Only the tail of the most recent pen stroke is checked on each batch, so
cost stays proportional to the skeleton size rather than to all the ink
on the canvas, and ink that was already accepted is never flagged again.

Example usage:
    ::

        from cursive_lib.domain import CanvasSize, Drawing
        from cursive_lib.tracking import BoundaryDetector

        detector = BoundaryDetector()
        detector.configure('a', CanvasSize(300, 400))
        if detector.evaluate_batch(drawing):
            print(f"Out of bounds at {detector.out_of_bounds_point}")
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import BOUNDARY_TAIL_SAMPLES, BOUNDARY_TOLERANCE, MIN_STROKES_BEFORE_CHECKING
from ..domain.drawing import Drawing
from ..domain.geometry import CanvasSize, Point
from ..templates.repository import LetterRepository
from ..utils.geometry import Skeleton, as_xy, distance_to_skeleton

_logger = logging.getLogger(__name__)


class BoundaryDetector:
    """Checks that drawn samples stay within a tolerance of the letter.

    Attributes:
        repository: Letter table the skeleton is taken from.
        tolerance: Maximum distance from the skeleton, in canvas units.
        tail_samples: Samples checked at the end of the latest pen stroke.
        min_strokes: Pen strokes required before any checking happens.
        is_out_of_bounds: True after a batch with a violating sample.
            Recomputed on every batch.
        out_of_bounds_point: The first violating sample of that batch.
    """

    def __init__(self, repository: Optional[LetterRepository] = None,
                 tolerance: float = BOUNDARY_TOLERANCE,
                 tail_samples: int = BOUNDARY_TAIL_SAMPLES,
                 min_strokes: int = MIN_STROKES_BEFORE_CHECKING):
        self.repository = repository or LetterRepository.default()
        self.tolerance = tolerance
        self.tail_samples = tail_samples
        self.min_strokes = min_strokes

        self.letter: Optional[str] = None
        self.canvas_size = CanvasSize.zero()
        self._skeleton = Skeleton.empty()

        self.is_out_of_bounds = False
        self.out_of_bounds_point: Optional[Point] = None

    def configure(self, letter: str, canvas_size: CanvasSize) -> None:
        """Bind the detector to a letter's full skeleton on a canvas.

        The skeleton pools all strokes of the letter, not just the one
        being traced. Calling this again with the same arguments yields
        the same state.
        """
        self.letter = letter
        self.canvas_size = canvas_size
        self._skeleton = self.repository.skeleton_for(letter, canvas_size)
        self.reset()
        _logger.debug("Boundary skeleton for %r on %sx%s: %d points, %d segments",
                      letter, canvas_size.width, canvas_size.height,
                      len(self._skeleton.points), len(self._skeleton.seg_starts))

    def reset(self) -> None:
        """Clear the violation flags; the skeleton is kept."""
        self.is_out_of_bounds = False
        self.out_of_bounds_point = None

    def distance_to_skeleton(self, point) -> float:
        """Minimum distance from a point to any checkpoint or segment.

        Returns ``inf`` when no letter is configured.
        """
        return distance_to_skeleton(as_xy(point), self._skeleton)

    def is_within_bounds(self, point) -> bool:
        """True if the point lies within the tolerance of the skeleton.

        Always True while the canvas has no usable size or the skeleton is
        empty, so setup races never block the user.
        """
        if self.canvas_size.is_empty or not self.canvas_size.is_finite or self._skeleton.is_empty:
            return True
        return self.distance_to_skeleton(point) <= self.tolerance

    def _ensure_configured(self, letter: Optional[str], canvas_size: Optional[CanvasSize]) -> None:
        letter = self.letter if letter is None else letter
        canvas_size = self.canvas_size if canvas_size is None else canvas_size
        if letter is None:
            return
        if letter != self.letter or canvas_size != self.canvas_size:
            self.configure(letter, canvas_size)

    def _flag(self, point: Point) -> bool:
        self.is_out_of_bounds = True
        self.out_of_bounds_point = point
        _logger.debug("Out of bounds at (%.1f, %.1f), %.1f from %r",
                      point.x, point.y, self.distance_to_skeleton(point), self.letter)
        return True

    def evaluate_batch(self, drawing: Drawing, letter: Optional[str] = None,
                       canvas_size: Optional[CanvasSize] = None) -> bool:
        """Check the tail of the latest pen stroke against the skeleton.

        Nothing is checked until the drawing has ``min_strokes`` pen
        strokes. The first violating sample sets the flags and ends the
        check. A clean batch clears the flags.

        Args:
            drawing: Full current drawing.
            letter: Letter being practiced; reconfigures if it changed.
            canvas_size: Canvas size; reconfigures if it changed.

        Returns:
            True if a violation was found in this batch.
        """
        self._ensure_configured(letter, canvas_size)

        if len(drawing) < self.min_strokes:
            return False

        last_stroke = drawing.last_stroke
        if last_stroke is None:
            return False

        for sample in last_stroke.tail(self.tail_samples):
            if not self.is_within_bounds(sample):
                return self._flag(sample.location)

        self.reset()
        return False

    def check_last_point(self, drawing: Drawing, letter: Optional[str] = None,
                         canvas_size: Optional[CanvasSize] = None) -> bool:
        """Check only the final sample of the latest pen stroke.

        Cheaper than ``evaluate_batch`` for per-move updates. Unlike it, a
        clean sample leaves earlier flags untouched.
        """
        last_stroke = drawing.last_stroke
        if last_stroke is None or len(last_stroke) == 0:
            return False

        self._ensure_configured(letter, canvas_size)

        sample = last_stroke.samples[-1]
        if not self.is_within_bounds(sample):
            return self._flag(sample.location)
        return False
