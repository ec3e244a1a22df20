"""Letter repository: the reference table lookups.

This module provides the LetterRepository class for accessing letter
stroke definitions. Lookups are total: any character without its own
entry resolves to the fallback strokes instead of failing, so a stray
identifier from the UI can never crash interactive input handling.

The repository provides:
    - Stroke lookup by character (``strokes_for``)
    - Smoothed display paths scaled to a canvas (``path_for``)
    - Pooled skeletons for boundary checking (``skeleton_for``)
    - Registration of custom letters and bulk loading from dictionaries

Example usage:
    Basic lookups::

        from cursive_lib.domain import CanvasSize
        from cursive_lib.templates import LetterRepository

        repo = LetterRepository.default()
        strokes = repo.strokes_for('t')       # two strokes: stem, crossbar
        unknown = repo.strokes_for('?')       # fallback diagonal
        path = repo.path_for('a', CanvasSize(300, 400))

    Bulk loading from dictionaries::

        repo = LetterRepository.from_dict({
            'L': [[(0.3, 0.2), (0.3, 0.8), (0.7, 0.8)]],
        })
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from ..domain.geometry import CanvasSize, LetterStroke
from ..utils.geometry import Skeleton, build_skeleton
from ..utils.path import PathCommand, smooth_path
from .letters import FALLBACK_STROKES, LETTER_STROKES


def _build_strokes(raw: Sequence[Sequence[Tuple[float, float]]]) -> Tuple[LetterStroke, ...]:
    """Turn nested (x, y) lists into numbered LetterStrokes."""
    strokes = tuple(
        LetterStroke.from_tuples(points, stroke_number=i + 1)
        for i, points in enumerate(raw)
    )
    for stroke in strokes:
        if len(stroke) == 0:
            raise ValueError(f"stroke {stroke.stroke_number} has no checkpoints")
    if not strokes:
        raise ValueError("a letter needs at least one stroke")
    return strokes


class LetterRepository:
    """Repository of letter stroke definitions.

    Maintains one ordered stroke tuple per character plus a fallback used
    for everything else.

    Attributes:
        _letters: Internal dictionary mapping characters to strokes.
        _fallback: Strokes returned for unregistered characters.

    Example:
        >>> repo = LetterRepository.default()
        >>> len(repo.strokes_for('a'))
        1
        >>> len(repo.list_characters())
        52
    """

    _default: Optional[LetterRepository] = None

    def __init__(self, fallback: Optional[Sequence[LetterStroke]] = None):
        """Initialize an empty repository.

        Args:
            fallback: Strokes for unregistered characters. Defaults to the
                single diagonal from ``FALLBACK_STROKES``.
        """
        self._letters: Dict[str, Tuple[LetterStroke, ...]] = {}
        self._fallback: Tuple[LetterStroke, ...] = (
            tuple(fallback) if fallback else _build_strokes(FALLBACK_STROKES)
        )

    def register(self, letter: str, strokes: Sequence[LetterStroke]) -> None:
        """Register strokes for a character, replacing any previous entry.

        Raises:
            ValueError: If there are no strokes or a stroke is empty.
        """
        strokes = tuple(strokes)
        if not strokes or any(len(s) == 0 for s in strokes):
            raise ValueError(f"letter {letter!r} needs non-empty strokes")
        self._letters[letter] = strokes

    def get(self, letter: str) -> Optional[Tuple[LetterStroke, ...]]:
        """Strokes registered for a character, or None."""
        return self._letters.get(letter)

    def is_supported(self, letter: str) -> bool:
        return letter in self._letters

    def strokes_for(self, letter: str) -> Tuple[LetterStroke, ...]:
        """Ordered strokes for a character, never failing.

        Args:
            letter: Character identifier, e.g. 'a' or 'Q'.

        Returns:
            The registered strokes, or the fallback strokes for any
            character that has no entry.
        """
        return self._letters.get(letter, self._fallback)

    def path_for(self, letter: str, size: CanvasSize) -> List[PathCommand]:
        """Smoothed display path of a character scaled to a canvas."""
        return smooth_path(self.strokes_for(letter), size)

    def skeleton_for(self, letter: str, size: CanvasSize) -> Skeleton:
        """Checkpoints and segments of every stroke, scaled to a canvas."""
        return build_skeleton(self.strokes_for(letter), size)

    def list_characters(self) -> List[str]:
        """Characters with their own entry, lowercase first."""
        return sorted(self._letters, key=lambda c: (c.isupper(), c))

    @classmethod
    def from_dict(
        cls,
        letters: Dict[str, Sequence[Sequence[Tuple[float, float]]]],
        fallback: Optional[Sequence[Sequence[Tuple[float, float]]]] = None,
    ) -> LetterRepository:
        """Create a repository from compact dictionary definitions.

        Args:
            letters: Character -> list of strokes, each a list of (x, y)
                normalized checkpoints. The first checkpoint of each
                stroke is marked as the start.
            fallback: Optional strokes in the same format for unknown
                characters.

        Returns:
            Populated LetterRepository.

        Raises:
            ValueError: If a letter has no strokes or an empty stroke.
        """
        repo = cls(_build_strokes(fallback) if fallback else None)
        for letter, raw in letters.items():
            repo.register(letter, _build_strokes(raw))
        return repo

    @classmethod
    def default(cls) -> LetterRepository:
        """Shared repository holding the built-in cursive alphabet."""
        if cls._default is None:
            cls._default = cls.from_dict(LETTER_STROKES)
        return cls._default


def strokes_for(letter: str) -> Tuple[LetterStroke, ...]:
    """Strokes for a character from the built-in alphabet."""
    return LetterRepository.default().strokes_for(letter)


def path_for(letter: str, size: CanvasSize) -> List[PathCommand]:
    """Smoothed path for a character from the built-in alphabet."""
    return LetterRepository.default().path_for(letter, size)
