"""Practice session controller.

A PracticeSession wires one letter-practice attempt together: for every
drawing update it asks the BoundaryDetector first and, only if the ink is
in bounds, feeds the same drawing to the StrokeProgressTracker. A
violating stroke therefore never also registers checkpoint progress.

Results are available both ways the UI might want them:
    - pull: properties such as ``current_stroke_index`` or
      ``is_out_of_bounds``, or a ``snapshot()`` of the whole state
    - push: callbacks registered with ``subscribe``; ``handle_drawing``
      also returns the events of that update

Timed reactions (clearing the canvas after a violation, moving on after
completion) belong to the caller; the session has no timers.

Example usage:
    ::

        from cursive_lib.domain import CanvasSize
        from cursive_lib.tracking import EventKind, PracticeSession

        session = PracticeSession()
        session.setup('t', CanvasSize(300, 400))

        for event in session.handle_drawing(drawing):
            if event.kind is EventKind.OUT_OF_BOUNDS:
                clear_canvas()
            elif event.kind is EventKind.LETTER_COMPLETED:
                celebrate()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from ..domain.drawing import Drawing
from ..domain.geometry import CanvasSize, Point
from ..templates.repository import LetterRepository
from .boundary import BoundaryDetector
from .events import EventKind, SessionEvent
from .progress import StrokeProgressTracker

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    """Read-only copy of a session's state at one moment."""
    letter: Optional[str]
    canvas_size: Tuple[float, float]
    current_stroke_index: int
    total_strokes: int
    touched_checkpoints: Tuple[int, ...]
    completed_strokes: Tuple[int, ...]
    stroke_progress: float
    is_letter_complete: bool
    is_out_of_bounds: bool
    out_of_bounds_point: Optional[Point] = None
    next_checkpoint: Optional[Point] = None

    def to_dict(self) -> dict:
        return {
            'letter': self.letter,
            'canvas_size': list(self.canvas_size),
            'current_stroke_index': self.current_stroke_index,
            'total_strokes': self.total_strokes,
            'touched_checkpoints': list(self.touched_checkpoints),
            'completed_strokes': list(self.completed_strokes),
            'stroke_progress': self.stroke_progress,
            'is_letter_complete': self.is_letter_complete,
            'is_out_of_bounds': self.is_out_of_bounds,
            'out_of_bounds_point': self.out_of_bounds_point.to_list() if self.out_of_bounds_point else None,
            'next_checkpoint': self.next_checkpoint.to_list() if self.next_checkpoint else None,
        }


@dataclass
class PracticeSession:
    """Controller for one letter-practice attempt.

    Attributes:
        repository: Letter table shared by both detectors.
        boundary: Boundary detector for out-of-bounds ink.
        tracker: Stroke progress tracker.
    """
    repository: LetterRepository = field(default_factory=LetterRepository.default)
    boundary: Optional[BoundaryDetector] = None
    tracker: Optional[StrokeProgressTracker] = None

    def __post_init__(self):
        if self.boundary is None:
            self.boundary = BoundaryDetector(self.repository)
        if self.tracker is None:
            self.tracker = StrokeProgressTracker(self.repository)
        self.tracker.on_event = self._emit

        self.letter: Optional[str] = None
        self.canvas_size = CanvasSize.zero()
        self._listeners: List[Callable[[SessionEvent], None]] = []
        self._pending: List[SessionEvent] = []

    # -- lifecycle ---------------------------------------------------------

    def setup(self, letter: str, canvas_size: CanvasSize) -> None:
        """Start practicing a letter; also call after a canvas resize."""
        self.letter = letter
        self.canvas_size = canvas_size
        self.boundary.configure(letter, canvas_size)
        self.tracker.setup(letter, canvas_size)
        _logger.debug("Session set up for %r on %sx%s (%d strokes)",
                      letter, canvas_size.width, canvas_size.height, self.total_strokes)

    def reset(self) -> None:
        """Restart the current letter, e.g. after the canvas was cleared."""
        self.boundary.reset()
        self.tracker.reset()

    # -- events ------------------------------------------------------------

    def subscribe(self, callback: Callable[[SessionEvent], None]) -> None:
        """Call ``callback`` with every event as it happens."""
        self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[[SessionEvent], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _emit(self, event: SessionEvent) -> None:
        self._pending.append(event)
        for listener in list(self._listeners):
            listener(event)

    # -- input -------------------------------------------------------------

    def handle_drawing(self, drawing: Drawing) -> List[SessionEvent]:
        """Process the current state of the canvas.

        Args:
            drawing: Everything drawn so far.

        Returns:
            Events produced by this update, in order.
        """
        self._pending = []

        if self.letter is None:
            return []

        if self.boundary.evaluate_batch(drawing, self.letter, self.canvas_size):
            self._emit(SessionEvent(EventKind.OUT_OF_BOUNDS, stroke_index=self.current_stroke_index,
                                    point=self.boundary.out_of_bounds_point))
            return self._drain()

        self.tracker.check_progress(drawing)
        return self._drain()

    def _drain(self) -> List[SessionEvent]:
        events, self._pending = self._pending, []
        return events

    # -- state -------------------------------------------------------------

    @property
    def current_stroke_index(self) -> int:
        return self.tracker.current_stroke_index

    @property
    def total_strokes(self) -> int:
        return self.tracker.total_strokes

    @property
    def stroke_progress(self) -> float:
        return self.tracker.stroke_progress

    @property
    def touched_checkpoints(self) -> frozenset:
        return self.tracker.touched_checkpoints

    @property
    def next_checkpoint(self) -> Optional[Point]:
        return self.tracker.next_checkpoint()

    @property
    def current_stroke_start_point(self) -> Optional[Point]:
        return self.tracker.current_stroke_start_point()

    @property
    def is_letter_complete(self) -> bool:
        return self.tracker.is_letter_complete

    @property
    def is_out_of_bounds(self) -> bool:
        return self.boundary.is_out_of_bounds

    @property
    def out_of_bounds_point(self) -> Optional[Point]:
        return self.boundary.out_of_bounds_point

    def snapshot(self) -> SessionState:
        """Copy of the current state, safe to hand to another layer."""
        return SessionState(
            letter=self.letter,
            canvas_size=self.canvas_size.to_tuple(),
            current_stroke_index=self.current_stroke_index,
            total_strokes=self.total_strokes,
            touched_checkpoints=tuple(sorted(self.touched_checkpoints)),
            completed_strokes=tuple(sorted(self.tracker.completed_strokes)),
            stroke_progress=self.stroke_progress,
            is_letter_complete=self.is_letter_complete,
            is_out_of_bounds=self.is_out_of_bounds,
            out_of_bounds_point=self.out_of_bounds_point,
            next_checkpoint=self.next_checkpoint,
        )
