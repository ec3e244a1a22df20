"""Cursive handwriting practice engine.

This package judges freehand drawing over a cursive letter template in
real time: whether the user follows each stroke's checkpoints in order,
and whether the ink stays within a tolerance zone around the letter.

The package is organized into the following modules:
    config: Tuning constants (checkpoint radius, boundary tolerance, ...).
    domain: Value objects for letter templates and drawing input.
    templates: The letter reference table and its repository.
    utils: Geometry, smoothed paths and guide rendering.
    tracking: Boundary detector, stroke progress tracker and the
        session controller that runs them.
    api: Dictionary-based service facade.
    cli: Command-line entry point.

Example usage:
    Tracking a practice attempt::

        from cursive_lib import CanvasSize, Drawing, PracticeSession

        session = PracticeSession()
        session.setup('a', CanvasSize(300, 400))

        # Called with the full canvas state on every pointer move
        events = session.handle_drawing(Drawing.from_list(strokes))
        if session.is_letter_complete:
            print("Well done!")

    Looking up letter data::

        from cursive_lib import strokes_for

        for stroke in strokes_for('t'):
            print(stroke.stroke_number, stroke.to_list())

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .api import PracticeService
from .domain import CanvasSize, Checkpoint, Drawing, DrawingSample, LetterStroke, PenStroke, Point
from .templates import LetterRepository, path_for, strokes_for
from .tracking import (
    BoundaryDetector,
    EventKind,
    PracticeSession,
    SessionEvent,
    SessionState,
    StrokeProgressTracker,
)

__all__ = [
    # Domain objects
    'Point', 'CanvasSize', 'Checkpoint', 'LetterStroke',
    'Drawing', 'DrawingSample', 'PenStroke',
    # Letter table
    'LetterRepository', 'strokes_for', 'path_for',
    # Tracking
    'BoundaryDetector', 'StrokeProgressTracker', 'PracticeSession',
    'SessionState', 'SessionEvent', 'EventKind',
    # Services
    'PracticeService',
]

__version__ = '1.0.0'
