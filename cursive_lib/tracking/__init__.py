"""Stroke tracking for practice sessions.

This module holds the stateful parts of the engine: the boundary
detector, the stroke progress tracker, and the session controller that
runs them on each drawing update.

The module exports:
    BoundaryDetector: Flags ink too far from the letter skeleton.
    StrokeProgressTracker: Ordered checkpoint matching per stroke.
    PracticeSession: Runs both detectors on each drawing update.
    SessionState: Read-only snapshot of a session.
    SessionEvent, EventKind: Events reported to the UI layer.

Example usage:
    ::

        from cursive_lib.domain import CanvasSize, Drawing
        from cursive_lib.tracking import PracticeSession

        session = PracticeSession()
        session.setup('a', CanvasSize(300, 400))
        events = session.handle_drawing(Drawing.from_list(samples))
        print(session.snapshot().to_dict())
"""

from .boundary import BoundaryDetector
from .events import EventKind, SessionEvent
from .progress import StrokeProgressTracker
from .session import PracticeSession, SessionState

__all__ = [
    'BoundaryDetector', 'StrokeProgressTracker',
    'PracticeSession', 'SessionState',
    'SessionEvent', 'EventKind',
]
