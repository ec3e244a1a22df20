"""Stroke progress tracking.

The StrokeProgressTracker follows the user through a letter one stroke at
a time. Each stroke is a list of checkpoints that must be touched in
order; when every checkpoint of the active stroke is touched, the next
stroke becomes active, and after the last one the letter is complete.

Matching runs over the full drawing on every call and is tolerant of
noisy, unevenly sampled input:
    - A sample within ``checkpoint_radius`` of the next required
      checkpoint touches it (the normal in-order path).
    - Samples may also touch untouched checkpoints in a small window
      around the next required one, ``[next - behind, next + ahead)``,
      but only when the checkpoint is the first one or its predecessor
      is already touched. Jittery sampling that skips or overshoots a
      checkpoint still registers, yet no checkpoint can be reached ahead
      of an unfinished prerequisite.

State machine:
    Stroke(0) -> Stroke(1) -> ... -> Stroke(N-1) -> Complete

Completion is sticky until ``setup`` or ``reset``; further input on the
same drawing does nothing.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Set, Tuple

from ..config import CHECKPOINT_RADIUS, LOOKAROUND_AHEAD, LOOKAROUND_BEHIND, MIN_DRAWING_POINTS
from ..domain.drawing import Drawing
from ..domain.geometry import CanvasSize, LetterStroke, Point
from ..templates.repository import LetterRepository
from ..utils.geometry import point_distance
from .events import EventKind, SessionEvent

_logger = logging.getLogger(__name__)

EventCallback = Callable[[SessionEvent], None]


class StrokeProgressTracker:
    """Tracks which checkpoints of which stroke the user has reached.

    Attributes:
        current_stroke_index: Index of the stroke being traced. Only
            increases until ``reset``.
        completed_strokes: Indices of finished strokes.
        current_segment_index: Last checkpoint reached by the in-order
            path.
        stroke_progress: Fraction (0-1) of the current stroke's
            checkpoints touched.
        is_letter_complete: True once the last stroke is finished.
    """

    def __init__(self, repository: Optional[LetterRepository] = None,
                 checkpoint_radius: float = CHECKPOINT_RADIUS,
                 min_drawing_points: int = MIN_DRAWING_POINTS,
                 lookaround_behind: int = LOOKAROUND_BEHIND,
                 lookaround_ahead: int = LOOKAROUND_AHEAD,
                 on_event: Optional[EventCallback] = None):
        self.repository = repository or LetterRepository.default()
        self.checkpoint_radius = checkpoint_radius
        self.min_drawing_points = min_drawing_points
        self.lookaround_behind = lookaround_behind
        self.lookaround_ahead = lookaround_ahead
        self.on_event = on_event

        self.letter = ''
        self.canvas_size = CanvasSize.zero()
        self._strokes: Tuple[LetterStroke, ...] = ()
        self.reset()

    def setup(self, letter: str, canvas_size: CanvasSize) -> None:
        """Start tracking a letter on a canvas of the given size."""
        self.letter = letter
        self.canvas_size = canvas_size
        self._strokes = self.repository.strokes_for(letter)
        self.reset()

    def reset(self) -> None:
        """Forget all progress on the current letter."""
        self.current_stroke_index = 0
        self.completed_strokes: Set[int] = set()
        self.is_letter_complete = False
        self.current_segment_index = 0
        self.stroke_progress = 0.0
        self._touched: Set[int] = set()
        self._has_completed_letter = False

    @property
    def touched_checkpoints(self) -> frozenset:
        """Indices of the current stroke's checkpoints touched so far."""
        return frozenset(self._touched)

    @property
    def total_strokes(self) -> int:
        return len(self._strokes)

    @property
    def strokes(self) -> Tuple[LetterStroke, ...]:
        return self._strokes

    def _notify(self, kind: EventKind, **fields) -> None:
        if self.on_event is not None:
            self.on_event(SessionEvent(kind, **fields))

    def check_progress(self, drawing: Drawing) -> bool:
        """Match the drawing against the current stroke's checkpoints.

        Args:
            drawing: Full current drawing.

        Returns:
            True if this call completed the letter. Calls after completion
            return False without touching state, so completion is only
            reported once.
        """
        if self._has_completed_letter:
            return False
        if not self._strokes or self.canvas_size.is_empty or not self.canvas_size.is_finite:
            return False

        # A single tap must not complete a letter
        if drawing.total_samples < self.min_drawing_points:
            return False

        checkpoints = [p.to_tuple() for p in self._strokes[self.current_stroke_index].scaled_points(self.canvas_size)]

        for sample in drawing.samples():
            self._match_sample((sample.x, sample.y), checkpoints)

        if checkpoints:
            progress = len(self._touched) / len(checkpoints)
            if progress != self.stroke_progress:
                self.stroke_progress = progress
                self._notify(EventKind.PROGRESS_CHANGED,
                             stroke_index=self.current_stroke_index, progress=progress)

        if len(self._touched) >= len(checkpoints):
            self._complete_current_stroke()

        return self.is_letter_complete

    def _touch(self, index: int) -> None:
        self._touched.add(index)
        self._notify(EventKind.CHECKPOINT_TOUCHED,
                     stroke_index=self.current_stroke_index, checkpoint_index=index)

    def _match_sample(self, point: Tuple[float, float], checkpoints: List[Tuple[float, float]]) -> None:
        next_index = len(self._touched)

        if next_index < len(checkpoints):
            if point_distance(point, checkpoints[next_index]) <= self.checkpoint_radius:
                self._touch(next_index)
                self.current_segment_index = next_index

        lo = max(0, next_index - self.lookaround_behind)
        hi = min(len(checkpoints), next_index + self.lookaround_ahead)
        for i in range(lo, hi):
            if i in self._touched:
                continue
            if point_distance(point, checkpoints[i]) <= self.checkpoint_radius:
                if i == 0 or (i - 1) in self._touched:
                    self._touch(i)

    def _complete_current_stroke(self) -> None:
        finished = self.current_stroke_index
        self.completed_strokes.add(finished)

        if finished < len(self._strokes) - 1:
            self.current_stroke_index += 1
            self.current_segment_index = 0
            self.stroke_progress = 0.0
            self._touched = set()
            _logger.debug("Stroke %d of %r done, advancing to stroke %d",
                          finished + 1, self.letter, self.current_stroke_index + 1)
            self._notify(EventKind.STROKE_ADVANCED, stroke_index=self.current_stroke_index)
            self._notify(EventKind.PROGRESS_CHANGED,
                         stroke_index=self.current_stroke_index, progress=0.0)
        else:
            self.is_letter_complete = True
            self._has_completed_letter = True
            _logger.debug("Letter %r complete", self.letter)
            self._notify(EventKind.LETTER_COMPLETED, stroke_index=finished)

    def current_stroke_start_point(self) -> Optional[Point]:
        """Where the pen should come down for the current stroke."""
        if self.current_stroke_index >= len(self._strokes):
            return None
        return self._strokes[self.current_stroke_index].start.scaled(self.canvas_size)

    def next_checkpoint(self) -> Optional[Point]:
        """The next checkpoint to reach, scaled to the canvas.

        None when nothing is loaded or every checkpoint of the current
        stroke is already touched.
        """
        if self.current_stroke_index >= len(self._strokes):
            return None
        stroke = self._strokes[self.current_stroke_index]
        next_index = len(self._touched)
        if next_index >= len(stroke):
            return None
        return stroke[next_index].scaled(self.canvas_size)
