"""Shared pytest fixtures for the cursive_lib test suite.

Fixtures:
    canvas: Standard 300x400 canvas used throughout the tests
    spaced_repository: Letter table with widely spaced checkpoints, so a
        sample never reaches two checkpoints at once
    session: PracticeSession set up for 'a' on the standard canvas

Helpers:
    polyline_samples: Densely sampled path through a list of points
    drawing_of: Drawing built from several sampled paths

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import math
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cursive_lib.domain import CanvasSize, Drawing, PenStroke
from cursive_lib.templates import LetterRepository
from cursive_lib.tracking import PracticeSession

CANVAS = CanvasSize(300, 400)

# On a 300x400 canvas every checkpoint below is at least 120 units from the
# next, well beyond the 50 unit checkpoint radius.
SPACED_LETTERS = {
    # one stroke: down the left side, then along the bottom
    'L': [[(0.1, 0.1), (0.1, 0.5), (0.1, 0.9), (0.5, 0.9), (0.9, 0.9)]],
    # two strokes: main diagonal, then the opposite diagonal
    'X': [[(0.1, 0.1), (0.5, 0.5), (0.9, 0.9)],
          [(0.9, 0.1), (0.7, 0.3), (0.3, 0.7)]],
}


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )


def polyline_samples(points, step=5.0):
    """Sample a path through ``points`` every ``step`` units.

    Every input point is included exactly, so a path through a letter's
    scaled checkpoints lands on each of them.

    Args:
        points: (x, y) tuples or Points.
        step: Maximum spacing between consecutive samples.

    Returns:
        List of (x, y) tuples.
    """
    pts = [(p.x, p.y) if hasattr(p, 'x') else (float(p[0]), float(p[1])) for p in points]
    if not pts:
        return []

    samples = [pts[0]]
    for (x0, y0), (x1, y1) in zip(pts, pts[1:]):
        n = max(1, int(math.ceil(math.hypot(x1 - x0, y1 - y0) / step)))
        for i in range(1, n + 1):
            t = i / n
            samples.append((x0 + t * (x1 - x0), y0 + t * (y1 - y0)))
    return samples


def drawing_of(*paths):
    """Build a Drawing with one pen stroke per path of (x, y) samples."""
    return Drawing(tuple(PenStroke.from_points(path) for path in paths))


@pytest.fixture
def canvas():
    """Return the standard canvas size used in tests.

    Returns:
        CanvasSize: 300 wide, 400 high.
    """
    return CANVAS


@pytest.fixture
def spaced_repository():
    """Return a LetterRepository holding SPACED_LETTERS."""
    return LetterRepository.from_dict(SPACED_LETTERS)


@pytest.fixture
def session(canvas):
    """Return a PracticeSession set up for 'a' on the standard canvas."""
    s = PracticeSession()
    s.setup('a', canvas)
    return s
