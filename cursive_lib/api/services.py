"""Service layer for practice sessions.

This module provides a high-level service that wraps the letter table and
the session controller behind dictionary-based interfaces suitable for
JSON serialization, e.g. for a web front end or for replaying recorded
drawings offline.

Example usage:
    ::

        from cursive_lib.api.services import PracticeService

        service = PracticeService()
        letters = service.list_letters()
        info = service.letter_info('a', 300, 400)
        result = service.evaluate('a', 300, 400, [[[165, 160], [135, 152], ...]])
        print(result['state']['is_letter_complete'])
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Optional

from ..domain.drawing import Drawing
from ..domain.geometry import CanvasSize
from ..templates.repository import LetterRepository
from ..tracking.events import EventKind, SessionEvent
from ..tracking.session import PracticeSession

# Logger for service errors
_logger = logging.getLogger(__name__)


class PracticeService:
    """Service for letter lookups and drawing evaluation.

    All methods return serializable data structures (dictionaries,
    lists) and never raise for bad client input; malformed drawings are
    reported as ``{'error': ...}``.

    Attributes:
        repository: Letter table used for lookups and sessions.
    """

    def __init__(self, repository: Optional[LetterRepository] = None):
        self.repository = repository or LetterRepository.default()

    def list_letters(self) -> List[str]:
        """All characters with their own stroke definition."""
        return self.repository.list_characters()

    def letter_info(self, letter: str, width: float, height: float) -> Dict[str, Any]:
        """Describe a letter's strokes scaled to a canvas.

        Args:
            letter: Character to describe. Unsupported characters describe
                the fallback strokes and report ``supported: False``.
            width: Canvas width.
            height: Canvas height.

        Returns:
            Dictionary containing:
                - 'letter' (str)
                - 'supported' (bool)
                - 'strokes' (list): per stroke, 'stroke_number',
                  normalized 'checkpoints', scaled 'points', and
                  'arrows' as [[x1, y1], [x2, y2]] pairs
                - 'path' (list): smoothed path commands
        """
        size = CanvasSize(width, height)
        strokes = []
        for stroke in self.repository.strokes_for(letter):
            strokes.append({
                'stroke_number': stroke.stroke_number,
                'checkpoints': stroke.to_list(),
                'points': [p.to_list() for p in stroke.scaled_points(size)],
                'arrows': [
                    [size.scale(a.x, a.y).to_list(), size.scale(b.x, b.y).to_list()]
                    for a, b in stroke.arrow_segments
                ],
            })
        return {
            'letter': letter,
            'supported': self.repository.is_supported(letter),
            'strokes': strokes,
            'path': [cmd.to_dict() for cmd in self.repository.path_for(letter, size)],
        }

    def replay(self, letter: str, size: CanvasSize, drawing: Drawing,
               listener: Optional[Callable[[SessionEvent], None]] = None,
               stop_on_violation: bool = True) -> PracticeSession:
        """Run a recorded drawing through a fresh session.

        The drawing is fed one sample at a time, the way a live canvas
        reports it. A boundary violation ends the replay by default, since
        the UI would clear the canvas at that point.
        """
        session = PracticeSession(self.repository)
        if listener is not None:
            session.subscribe(listener)
        session.setup(letter, size)
        for snapshot in drawing.prefixes():
            events = session.handle_drawing(snapshot)
            if stop_on_violation and any(e.kind is EventKind.OUT_OF_BOUNDS for e in events):
                break
        return session

    def evaluate(self, letter: str, width: float, height: float, drawing_data: Any) -> Dict[str, Any]:
        """Evaluate a recorded drawing.

        Args:
            letter: Character being practiced.
            width: Canvas width the drawing was made on.
            height: Canvas height the drawing was made on.
            drawing_data: Nested lists of pen strokes of [x, y] or
                [x, y, t] samples.

        Returns:
            Dictionary with the final 'state' and the ordered 'events', or
            ``{'error': message}`` if the input is malformed.
        """
        try:
            size = CanvasSize(float(width), float(height))
        except (TypeError, ValueError):
            size = CanvasSize.zero()
        if size.is_empty or not size.is_finite:
            _logger.warning("Rejected canvas size %sx%s for %r", width, height, letter)
            return {'error': f'canvas size must be positive finite numbers, got {width}x{height}'}

        try:
            drawing = Drawing.from_list(drawing_data)
        except ValueError as e:
            _logger.warning("Invalid drawing data for %r: %s", letter, e)
            return {'error': str(e)}

        events = []
        session = self.replay(letter, size, drawing,
                              listener=lambda event: events.append(event.to_dict()))

        return {
            'state': session.snapshot().to_dict(),
            'events': events,
        }
