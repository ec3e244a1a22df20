"""Smoothed display paths for letter templates.

The guide shown under the user's ink threads a quadratic curve through
each stroke's scaled checkpoints: the curve passes through the midpoints
between consecutive checkpoints and uses each checkpoint as the control
point, so corners are rounded off while the ends stay pinned.

Commands are renderer-neutral. ``flatten_path`` turns them into polylines
for rasterizers without curve support (Pillow's ImageDraw).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..domain.geometry import CanvasSize, LetterStroke, Point


@dataclass(frozen=True)
class PathCommand:
    """A single drawing instruction.

    Attributes:
        kind: 'move', 'line' or 'quad'.
        points: Target point for 'move' and 'line'; (control, target)
            for 'quad'.
    """
    kind: str
    points: Tuple[Point, ...]

    @property
    def target(self) -> Point:
        return self.points[-1]

    def to_dict(self) -> dict:
        return {'kind': self.kind, 'points': [p.to_list() for p in self.points]}


def smooth_path(strokes: Sequence[LetterStroke], size: CanvasSize) -> List[PathCommand]:
    """Build a smoothed path through every stroke with at least two checkpoints.

    Args:
        strokes: Strokes of the letter.
        size: Canvas to scale the normalized checkpoints onto.

    Returns:
        Flat list of commands; each stroke starts with a 'move'.
    """
    commands: List[PathCommand] = []

    for stroke in strokes:
        if len(stroke) < 2:
            continue

        pts = stroke.scaled_points(size)
        commands.append(PathCommand('move', (pts[0],)))

        if len(pts) == 2:
            commands.append(PathCommand('line', (pts[1],)))
            continue

        for i in range(1, len(pts)):
            previous, current = pts[i - 1], pts[i]
            mid = previous.midpoint(current)
            if i == 1:
                commands.append(PathCommand('line', (mid,)))
            else:
                commands.append(PathCommand('quad', (previous, mid)))
            if i == len(pts) - 1:
                commands.append(PathCommand('line', (current,)))

    return commands


def flatten_path(commands: Sequence[PathCommand], steps: int = 8) -> List[List[Tuple[float, float]]]:
    """Convert path commands into polylines, one per 'move'.

    Quadratic segments are sampled at ``steps`` evenly spaced parameter
    values.
    """
    polylines: List[List[Tuple[float, float]]] = []
    current: List[Tuple[float, float]] = []

    for cmd in commands:
        if cmd.kind == 'move':
            if len(current) > 1:
                polylines.append(current)
            current = [cmd.target.to_tuple()]
        elif cmd.kind == 'line':
            current.append(cmd.target.to_tuple())
        elif cmd.kind == 'quad':
            x0, y0 = current[-1]
            ctrl, end = cmd.points
            for s in range(1, steps + 1):
                t = s / steps
                u = 1 - t
                current.append((
                    u * u * x0 + 2 * u * t * ctrl.x + t * t * end.x,
                    u * u * y0 + 2 * u * t * ctrl.y + t * t * end.y,
                ))
        else:
            raise ValueError(f"unknown path command: {cmd.kind}")

    if len(current) > 1:
        polylines.append(current)
    return polylines
