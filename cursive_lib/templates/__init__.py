"""Letter reference table.

This module provides the static checkpoint data for the cursive alphabet
and a repository for looking it up. Checkpoints use normalized
coordinates, scaled to the canvas at lookup time:

    (0.0, 0.0) = top-left corner
    (1.0, 1.0) = bottom-right corner

The module exports:
    LETTER_STROKES: Raw checkpoint lists for the 52 supported letters.
    FALLBACK_STROKES: Raw checkpoint list for unsupported characters.
    LetterRepository: Lookup of strokes, display paths and skeletons.
    strokes_for: Shortcut for ``LetterRepository.default().strokes_for``.
    path_for: Shortcut for ``LetterRepository.default().path_for``.

Example usage:
    ::

        from cursive_lib.templates import strokes_for

        for stroke in strokes_for('i'):
            print(stroke.stroke_number, len(stroke))
        # 1 5   (upstroke)
        # 2 2   (dot)
"""

from .letters import FALLBACK_STROKES, LETTER_STROKES
from .repository import LetterRepository, path_for, strokes_for

__all__ = [
    'LETTER_STROKES', 'FALLBACK_STROKES', 'LetterRepository',
    'strokes_for', 'path_for',
]
