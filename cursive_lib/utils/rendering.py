"""Guide image rendering.

This module draws practice guides with Pillow: the thick letter template,
numbered checkpoints, start markers and, optionally, the user's ink. The
output is meant for previews and debugging recorded sessions, not for an
interactive UI.

The module provides the following functions:
    render_template_mask: Thick template as a binary mask.
    render_guide_image: Full colour guide image.

Example usage:
    ::

        from cursive_lib.domain import CanvasSize
        from cursive_lib.templates import strokes_for
        from cursive_lib.utils.rendering import render_guide_image

        img = render_guide_image(strokes_for('a'), CanvasSize(300, 400))
        img.save('a_guide.png')
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
from PIL import Image, ImageDraw

from ..config import TEMPLATE_STROKE_WIDTH
from ..domain.drawing import Drawing
from ..domain.geometry import CanvasSize, LetterStroke
from .path import flatten_path, smooth_path

COLORS = {
    'background': (255, 255, 255),
    'template': (215, 215, 215),
    'active_template': (170, 200, 240),
    'checkpoint': (90, 90, 90),
    'start': (40, 170, 80),
    'ink': (30, 60, 200),
    'guide_line': (235, 200, 200),
}

CHECKPOINT_DOT_RADIUS = 4
START_DOT_RADIUS = 8


def _draw_polylines(draw: ImageDraw.ImageDraw, polylines, fill, width: int) -> None:
    for line in polylines:
        draw.line(line, fill=fill, width=width, joint='curve')
        # Round caps, which ImageDraw.line does not draw itself
        r = width // 2
        for x, y in (line[0], line[-1]):
            draw.ellipse((x - r, y - r, x + r, y + r), fill=fill)


def render_template_mask(strokes: Sequence[LetterStroke], size: CanvasSize,
                         stroke_width: int = TEMPLATE_STROKE_WIDTH) -> np.ndarray:
    """Render the thick letter template as a binary mask.

    Args:
        strokes: Strokes of the letter.
        size: Canvas size; the mask has shape (height, width).
        stroke_width: Template thickness in pixels.

    Returns:
        Boolean array where True marks template pixels. All False for an
        empty canvas.
    """
    width, height = int(round(size.width)), int(round(size.height))
    if width <= 0 or height <= 0:
        return np.zeros((max(height, 0), max(width, 0)), dtype=bool)

    img = Image.new('L', (width, height), 0)
    draw = ImageDraw.Draw(img)
    _draw_polylines(draw, flatten_path(smooth_path(strokes, size)), fill=255, width=stroke_width)
    return np.array(img) > 127


def render_guide_image(strokes: Sequence[LetterStroke], size: CanvasSize,
                       drawing: Optional[Drawing] = None,
                       current_stroke_index: int = 0,
                       stroke_width: int = TEMPLATE_STROKE_WIDTH) -> Image.Image:
    """Render a practice guide as an RGB image.

    Draws baseline/midline guide lines, the thick template (the current
    stroke highlighted), every checkpoint, the start point of each
    stroke, and the user's ink on top.

    Args:
        strokes: Strokes of the letter.
        size: Canvas size in pixels.
        drawing: Optional user ink to overlay.
        current_stroke_index: Stroke to highlight.
        stroke_width: Template thickness in pixels.

    Raises:
        ValueError: If the canvas has no area.
    """
    if size.is_empty:
        raise ValueError("cannot render onto an empty canvas")

    width, height = int(round(size.width)), int(round(size.height))
    img = Image.new('RGB', (width, height), COLORS['background'])
    draw = ImageDraw.Draw(img)

    for frac in (0.20, 0.45, 0.70, 0.85):
        y = frac * height
        draw.line([(0, y), (width, y)], fill=COLORS['guide_line'], width=1)

    for i, stroke in enumerate(strokes):
        color = COLORS['active_template'] if i == current_stroke_index else COLORS['template']
        _draw_polylines(draw, flatten_path(smooth_path([stroke], size)), fill=color, width=stroke_width)

    for stroke in strokes:
        for cp in stroke:
            p = cp.scaled(size)
            r = START_DOT_RADIUS if cp.is_start else CHECKPOINT_DOT_RADIUS
            fill = COLORS['start'] if cp.is_start else COLORS['checkpoint']
            draw.ellipse((p.x - r, p.y - r, p.x + r, p.y + r), fill=fill)

    if drawing is not None:
        for pen_stroke in drawing:
            pts = [(s.x, s.y) for s in pen_stroke]
            if len(pts) > 1:
                draw.line(pts, fill=COLORS['ink'], width=4, joint='curve')
            elif pts:
                x, y = pts[0]
                draw.ellipse((x - 2, y - 2, x + 2, y + 2), fill=COLORS['ink'])

    return img
