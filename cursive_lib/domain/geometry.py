"""Geometric value objects for letter templates."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple
import math


@dataclass(frozen=True)
class Point:
    """Immutable 2D point."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def midpoint(self, other: Point) -> Point:
        """Point halfway between this point and another."""
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        """Convert to list for JSON serialization."""
        return [float(self.x), float(self.y)]

    @classmethod
    def from_tuple(cls, t: Tuple[float, float]) -> Point:
        """Create from tuple."""
        return cls(t[0], t[1])


@dataclass(frozen=True)
class CanvasSize:
    """Dimensions of the drawing surface."""
    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        """True when either dimension is zero (canvas not laid out yet)."""
        return self.width <= 0 or self.height <= 0

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.width) and math.isfinite(self.height)

    def scale(self, x: float, y: float) -> Point:
        """Map a normalized (0-1) coordinate onto the canvas."""
        return Point(x * self.width, y * self.height)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.width, self.height)

    @classmethod
    def zero(cls) -> CanvasSize:
        return cls(0.0, 0.0)

    @classmethod
    def parse(cls, text: str) -> CanvasSize:
        """Parse a 'WIDTHxHEIGHT' string such as '300x400'.

        Raises:
            ValueError: If the text is not two positive numbers joined by 'x'.
        """
        parts = text.lower().split('x')
        if len(parts) != 2:
            raise ValueError(f"canvas size must look like WIDTHxHEIGHT, got {text!r}")
        width, height = float(parts[0]), float(parts[1])
        size = cls(width, height)
        if not size.is_finite:
            raise ValueError(f"canvas size must be finite, got {text!r}")
        if size.is_empty:
            raise ValueError(f"canvas size must be positive, got {text!r}")
        return size


@dataclass(frozen=True)
class Checkpoint:
    """A normalized reference point along a letter stroke.

    Attributes:
        x: Horizontal position in the unit square (0 = left, 1 = right).
        y: Vertical position in the unit square (0 = top, 1 = bottom).
        is_start: True for the point where the pen should come down.
    """
    x: float
    y: float
    is_start: bool = False

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    def scaled(self, size: CanvasSize) -> Point:
        """Position of this checkpoint on a canvas of the given size."""
        return size.scale(self.x, self.y)


@dataclass(frozen=True)
class LetterStroke:
    """One pen-down-to-pen-up motion of a letterform.

    Checkpoints must be visited in order for the stroke to count as
    traced. ``stroke_number`` is 1-based and only used for display.
    """
    checkpoints: Tuple[Checkpoint, ...]
    stroke_number: int = 1

    def __len__(self) -> int:
        return len(self.checkpoints)

    def __iter__(self) -> Iterator[Checkpoint]:
        return iter(self.checkpoints)

    def __getitem__(self, idx) -> Checkpoint:
        return self.checkpoints[idx]

    @property
    def start(self) -> Checkpoint:
        """First checkpoint of the stroke."""
        return self.checkpoints[0]

    @property
    def arrow_segments(self) -> List[Tuple[Point, Point]]:
        """Pairs of consecutive checkpoints, used to draw direction arrows."""
        return [
            (self.checkpoints[i].position, self.checkpoints[i + 1].position)
            for i in range(len(self.checkpoints) - 1)
        ]

    def scaled_points(self, size: CanvasSize) -> List[Point]:
        """All checkpoints mapped onto a canvas."""
        return [cp.scaled(size) for cp in self.checkpoints]

    def to_list(self) -> List[List[float]]:
        """Convert to nested list for JSON serialization."""
        return [[cp.x, cp.y] for cp in self.checkpoints]

    @classmethod
    def from_tuples(cls, tuples, stroke_number: int = 1) -> LetterStroke:
        """Create from a list of (x, y) tuples; the first one is the start."""
        checkpoints = tuple(
            Checkpoint(float(t[0]), float(t[1]), is_start=(i == 0))
            for i, t in enumerate(tuples)
        )
        return cls(checkpoints, stroke_number)
