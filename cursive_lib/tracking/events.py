"""Events reported by a practice session to the UI layer."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..domain.geometry import Point


class EventKind(Enum):
    """Kinds of session events.

    CHECKPOINT_TOUCHED: A checkpoint of the current stroke was reached.
    PROGRESS_CHANGED: The current stroke's progress fraction changed.
    STROKE_ADVANCED: The current stroke was finished; a new one is active.
    LETTER_COMPLETED: The last stroke was finished.
    OUT_OF_BOUNDS: Ink strayed too far from the letter; the UI should
        clear the canvas.
    """
    CHECKPOINT_TOUCHED = 'checkpoint_touched'
    PROGRESS_CHANGED = 'progress_changed'
    STROKE_ADVANCED = 'stroke_advanced'
    LETTER_COMPLETED = 'letter_completed'
    OUT_OF_BOUNDS = 'out_of_bounds'


@dataclass(frozen=True)
class SessionEvent:
    """A single session event.

    Only the fields relevant to the kind are set: ``stroke_index`` for
    stroke events, ``checkpoint_index`` for touches, ``progress`` for
    progress changes and ``point`` for boundary violations.
    """
    kind: EventKind
    stroke_index: Optional[int] = None
    checkpoint_index: Optional[int] = None
    progress: Optional[float] = None
    point: Optional[Point] = None

    def to_dict(self) -> dict:
        """Convert to dictionary, dropping unset fields."""
        d = {'kind': self.kind.value}
        if self.stroke_index is not None:
            d['stroke_index'] = self.stroke_index
        if self.checkpoint_index is not None:
            d['checkpoint_index'] = self.checkpoint_index
        if self.progress is not None:
            d['progress'] = self.progress
        if self.point is not None:
            d['point'] = self.point.to_list()
        return d
