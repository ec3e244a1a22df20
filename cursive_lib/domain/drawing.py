"""Freehand drawing input.

A drawing is the full current state of the practice canvas: an ordered
sequence of pen strokes, each an ordered sequence of timestamped samples
in canvas coordinates. Trackers re-derive everything from the full
snapshot on each call, so no diffing contract is needed between batches.

Example usage:
    Building a drawing from JSON-style data::

        from cursive_lib.domain import Drawing

        drawing = Drawing.from_list([
            [[165, 160, 0.00], [140, 155, 0.02]],   # first pen stroke
            [[90, 170], [135, 160]],                 # timestamps optional
        ])
        print(drawing.total_samples)  # 4
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

from .geometry import Point


@dataclass(frozen=True)
class DrawingSample:
    """A single pointer sample in canvas coordinates."""
    x: float
    y: float
    t: float = 0.0

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)

    def to_list(self) -> List[float]:
        return [float(self.x), float(self.y), float(self.t)]


@dataclass(frozen=True)
class PenStroke:
    """Samples captured between one pen-down and the following pen-up."""
    samples: Tuple[DrawingSample, ...] = ()

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[DrawingSample]:
        return iter(self.samples)

    def tail(self, count: int) -> Tuple[DrawingSample, ...]:
        """The last ``count`` samples (all of them if the stroke is shorter)."""
        if count <= 0:
            return ()
        return self.samples[-count:]

    @classmethod
    def from_points(cls, points: Sequence[Tuple[float, float]]) -> PenStroke:
        """Create from (x, y) pairs, timestamping them by index."""
        return cls(tuple(DrawingSample(float(x), float(y), float(i)) for i, (x, y) in enumerate(points)))


@dataclass(frozen=True)
class Drawing:
    """Snapshot of everything drawn on the canvas so far."""
    strokes: Tuple[PenStroke, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.strokes)

    def __iter__(self) -> Iterator[PenStroke]:
        return iter(self.strokes)

    @property
    def total_samples(self) -> int:
        """Number of samples across all pen strokes."""
        return sum(len(stroke) for stroke in self.strokes)

    @property
    def last_stroke(self) -> PenStroke | None:
        return self.strokes[-1] if self.strokes else None

    def samples(self) -> Iterator[DrawingSample]:
        """Every sample in drawing order."""
        for stroke in self.strokes:
            yield from stroke.samples

    def prefixes(self) -> Iterator[Drawing]:
        """Successive snapshots as the drawing was built, one per sample.

        Replays a recorded drawing the way a live canvas would report it:
        each yielded drawing has one more sample than the previous one.
        """
        done: List[PenStroke] = []
        for stroke in self.strokes:
            for end in range(1, len(stroke.samples) + 1):
                yield Drawing(tuple(done) + (PenStroke(stroke.samples[:end]),))
            done.append(stroke)

    def to_list(self) -> List[List[List[float]]]:
        """Convert to nested list for JSON serialization."""
        return [[s.to_list() for s in stroke] for stroke in self.strokes]

    @classmethod
    def from_list(cls, data) -> Drawing:
        """Create from nested lists of [x, y] or [x, y, t] samples.

        Raises:
            ValueError: If the data is not a list of lists of 2- or
                3-number samples.
        """
        if not isinstance(data, (list, tuple)):
            raise ValueError("drawing must be a list of pen strokes")

        strokes = []
        for stroke_idx, raw_stroke in enumerate(data):
            if not isinstance(raw_stroke, (list, tuple)):
                raise ValueError(f"pen stroke {stroke_idx} must be a list of samples")
            samples = []
            for sample_idx, raw in enumerate(raw_stroke):
                if not isinstance(raw, (list, tuple)) or len(raw) not in (2, 3):
                    raise ValueError(
                        f"sample {sample_idx} of pen stroke {stroke_idx} must be [x, y] or [x, y, t]"
                    )
                try:
                    values = [float(v) for v in raw]
                except (TypeError, ValueError) as e:
                    raise ValueError(
                        f"sample {sample_idx} of pen stroke {stroke_idx} is not numeric: {raw!r}"
                    ) from e
                t = values[2] if len(values) == 3 else float(sample_idx)
                samples.append(DrawingSample(values[0], values[1], t))
            strokes.append(PenStroke(tuple(samples)))
        return cls(tuple(strokes))
