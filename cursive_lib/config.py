"""Shared configuration for cursive practice tracking.

This module centralizes the tuning constants used by:
    - tracking.boundary (tolerance zone around the letter skeleton)
    - tracking.progress (checkpoint radius, minimum ink, look-around window)
    - utils.rendering (template stroke width)

Distances are in canvas units (points/pixels of the drawing surface).
Detectors accept keyword overrides, so these are defaults rather than
hard limits.
"""

# Distance within which a drawn sample counts as touching a checkpoint
CHECKPOINT_RADIUS = 50.0

# Maximum distance from the letter skeleton before ink is out of bounds
BOUNDARY_TOLERANCE = 80.0

# Total samples (across all pen strokes) required before progress is checked
MIN_DRAWING_POINTS = 10

# Only the tail of the most recent pen stroke is boundary-checked
BOUNDARY_TAIL_SAMPLES = 10

# Pen strokes required in the drawing before boundary checks start
MIN_STROKES_BEFORE_CHECKING = 1

# Out-of-order window around the next required checkpoint: [next-2, next+2)
LOOKAROUND_BEHIND = 2
LOOKAROUND_AHEAD = 2

# Thickness of the rendered letter template
TEMPLATE_STROKE_WIDTH = 40

# Canvas used when no size is given (width, height)
DEFAULT_CANVAS_SIZE = (300, 400)
