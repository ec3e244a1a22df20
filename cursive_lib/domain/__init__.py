"""Domain objects for cursive practice.

This module provides the value objects shared by the letter table, the
trackers, and the service layer.

Geometry classes:
    Point: Immutable 2D point.
    CanvasSize: Drawing surface dimensions, scales normalized coordinates.
    Checkpoint: Normalized reference point along a letter stroke.
    LetterStroke: Ordered checkpoints for one pen-down-to-pen-up motion.

Drawing classes:
    DrawingSample: One timestamped pointer sample in canvas coordinates.
    PenStroke: Samples between a pen-down and a pen-up.
    Drawing: Full snapshot of the canvas ink.

Example usage:
    Scaling a checkpoint::

        from cursive_lib.domain import CanvasSize, Checkpoint

        size = CanvasSize(300, 400)
        cp = Checkpoint(0.55, 0.40, is_start=True)
        print(cp.scaled(size))  # Point(x=165.0, y=160.0)
"""

from .drawing import Drawing, DrawingSample, PenStroke
from .geometry import CanvasSize, Checkpoint, LetterStroke, Point

__all__ = [
    'Point', 'CanvasSize', 'Checkpoint', 'LetterStroke',
    'Drawing', 'DrawingSample', 'PenStroke',
]
