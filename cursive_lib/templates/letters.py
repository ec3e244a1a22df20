"""Checkpoint data for the 52 cursive letterforms.

Each letter maps to an ordered list of strokes. Each stroke is an ordered
list of (x, y) checkpoints in normalized canvas coordinates:

    (0.0, 0.0) = top-left corner
    (1.0, 1.0) = bottom-right corner

The first checkpoint of every stroke is where the pen comes down.
Lowercase letters sit on a baseline near y = 0.70 with ascenders reaching
y = 0.20 and descenders y = 0.85; uppercase letters span y = 0.20-0.78.
Letters that need a pen lift (dots, crossbars, second diagonals) are
split into several strokes that are traced in sequence.

Forms follow D'Nealian / Zaner-Bloser cursive.
"""

# Single diagonal used for any character without its own entry
FALLBACK_STROKES = [
    [(0.30, 0.70), (0.50, 0.50), (0.70, 0.70)],
]

LETTER_STROKES = {
    # -------------------------------------------------------------------------
    # Lowercase Letters (a-z)
    # -------------------------------------------------------------------------

    # oval from the top, back up, exit
    'a': [
        [(0.55, 0.40), (0.45, 0.38), (0.35, 0.42), (0.30, 0.52), (0.32, 0.62), (0.40, 0.70),
         (0.52, 0.70), (0.60, 0.62), (0.60, 0.50), (0.62, 0.62), (0.68, 0.72)]
    ],

    # tall loop, bump, exit
    'b': [
        [(0.30, 0.70), (0.32, 0.55), (0.35, 0.35), (0.38, 0.22), (0.35, 0.20), (0.30, 0.25),
         (0.32, 0.40), (0.35, 0.55), (0.38, 0.68), (0.48, 0.72), (0.58, 0.65), (0.58, 0.55),
         (0.52, 0.50), (0.42, 0.52), (0.55, 0.70), (0.65, 0.72)]
    ],

    # open curve
    'c': [
        [(0.60, 0.42), (0.50, 0.38), (0.38, 0.42), (0.32, 0.52), (0.32, 0.62), (0.40, 0.70),
         (0.52, 0.72), (0.65, 0.68)]
    ],

    # oval, tall ascender loop
    'd': [
        [(0.55, 0.45), (0.45, 0.40), (0.35, 0.45), (0.30, 0.55), (0.35, 0.65), (0.48, 0.70),
         (0.58, 0.62), (0.58, 0.45), (0.55, 0.28), (0.58, 0.22), (0.62, 0.25), (0.60, 0.40),
         (0.62, 0.60), (0.70, 0.72)]
    ],

    # midline loop
    'e': [
        [(0.32, 0.55), (0.42, 0.50), (0.55, 0.48), (0.58, 0.42), (0.52, 0.38), (0.40, 0.40),
         (0.32, 0.50), (0.32, 0.62), (0.42, 0.70), (0.55, 0.70), (0.68, 0.65)]
    ],

    # ascender loop into descender; crossbar
    'f': [
        [(0.55, 0.22), (0.48, 0.20), (0.40, 0.25), (0.38, 0.40), (0.40, 0.55), (0.42, 0.70),
         (0.40, 0.82), (0.35, 0.85), (0.30, 0.80)],
        [(0.30, 0.50), (0.42, 0.48), (0.55, 0.50)]
    ],

    # oval, descender loop
    'g': [
        [(0.58, 0.42), (0.48, 0.38), (0.38, 0.42), (0.32, 0.52), (0.35, 0.62), (0.48, 0.68),
         (0.58, 0.60), (0.58, 0.70), (0.55, 0.80), (0.45, 0.85), (0.35, 0.82), (0.32, 0.75)]
    ],

    # ascender loop, hump
    'h': [
        [(0.28, 0.70), (0.30, 0.50), (0.33, 0.32), (0.35, 0.22), (0.32, 0.20), (0.28, 0.25),
         (0.30, 0.45), (0.33, 0.60), (0.38, 0.70), (0.48, 0.55), (0.58, 0.48), (0.62, 0.55),
         (0.65, 0.68), (0.72, 0.72)]
    ],

    # upstroke; dot
    'i': [
        [(0.38, 0.45), (0.42, 0.55), (0.48, 0.65), (0.55, 0.72), (0.65, 0.72)],
        [(0.48, 0.32), (0.50, 0.34)]
    ],

    # descender curve; dot
    'j': [
        [(0.42, 0.45), (0.48, 0.58), (0.50, 0.70), (0.48, 0.80), (0.40, 0.85), (0.32, 0.82)],
        [(0.50, 0.32), (0.52, 0.34)]
    ],

    # ascender loop; arm and leg
    'k': [
        [(0.28, 0.70), (0.30, 0.50), (0.33, 0.32), (0.35, 0.22), (0.32, 0.20), (0.28, 0.25),
         (0.30, 0.45), (0.33, 0.60), (0.38, 0.70)],
        [(0.58, 0.42), (0.48, 0.52), (0.38, 0.58), (0.50, 0.65), (0.62, 0.72), (0.70, 0.72)]
    ],

    # ascender loop
    'l': [
        [(0.35, 0.70), (0.38, 0.50), (0.42, 0.32), (0.45, 0.22), (0.42, 0.20), (0.38, 0.25),
         (0.40, 0.45), (0.45, 0.62), (0.52, 0.72), (0.62, 0.72)]
    ],

    # entry, two humps
    'm': [
        [(0.18, 0.70), (0.22, 0.55), (0.28, 0.45), (0.35, 0.52), (0.38, 0.65), (0.42, 0.52),
         (0.50, 0.45), (0.55, 0.52), (0.58, 0.65), (0.62, 0.52), (0.68, 0.45), (0.72, 0.55),
         (0.75, 0.68), (0.80, 0.72)]
    ],

    # entry, one hump
    'n': [
        [(0.28, 0.70), (0.32, 0.55), (0.38, 0.45), (0.45, 0.50), (0.52, 0.45), (0.58, 0.52),
         (0.62, 0.65), (0.70, 0.72)]
    ],

    # oval, connector
    'o': [
        [(0.52, 0.42), (0.42, 0.40), (0.32, 0.48), (0.30, 0.58), (0.35, 0.68), (0.48, 0.72),
         (0.58, 0.65), (0.58, 0.52), (0.55, 0.45), (0.60, 0.58), (0.68, 0.72)]
    ],

    # descender stem; bowl
    'p': [
        [(0.32, 0.45), (0.35, 0.58), (0.38, 0.72), (0.38, 0.82), (0.35, 0.85), (0.30, 0.82)],
        [(0.35, 0.52), (0.45, 0.45), (0.55, 0.48), (0.60, 0.55), (0.55, 0.65), (0.45, 0.68),
         (0.38, 0.62)]
    ],

    # oval, descender tail
    'q': [
        [(0.55, 0.45), (0.45, 0.42), (0.35, 0.48), (0.32, 0.58), (0.38, 0.68), (0.50, 0.70),
         (0.58, 0.62), (0.58, 0.75), (0.55, 0.85), (0.60, 0.82), (0.68, 0.78)]
    ],

    # upstroke, shoulder
    'r': [
        [(0.32, 0.70), (0.38, 0.55), (0.42, 0.45), (0.50, 0.48), (0.58, 0.45), (0.62, 0.50)]
    ],

    # single flowing curve
    's': [
        [(0.32, 0.55), (0.40, 0.45), (0.52, 0.42), (0.58, 0.48), (0.52, 0.55), (0.42, 0.62),
         (0.48, 0.70), (0.58, 0.72), (0.68, 0.68)]
    ],

    # stem; crossbar
    't': [
        [(0.38, 0.25), (0.42, 0.42), (0.48, 0.58), (0.55, 0.70), (0.65, 0.72)],
        [(0.30, 0.42), (0.45, 0.40), (0.58, 0.42)]
    ],

    # dip, upstroke
    'u': [
        [(0.30, 0.45), (0.35, 0.58), (0.42, 0.68), (0.52, 0.70), (0.60, 0.62), (0.60, 0.50),
         (0.62, 0.62), (0.70, 0.72)]
    ],

    # pointed dip
    'v': [
        [(0.28, 0.45), (0.38, 0.58), (0.48, 0.70), (0.58, 0.58), (0.68, 0.45)]
    ],

    # double pointed dip
    'w': [
        [(0.18, 0.45), (0.28, 0.60), (0.35, 0.70), (0.42, 0.58), (0.50, 0.70), (0.58, 0.58),
         (0.65, 0.70), (0.72, 0.58), (0.80, 0.48)]
    ],

    # two crossing diagonals
    'x': [
        [(0.30, 0.45), (0.42, 0.55), (0.55, 0.68), (0.68, 0.72)],
        [(0.65, 0.45), (0.52, 0.55), (0.38, 0.68), (0.28, 0.72)]
    ],

    # dip, descender
    'y': [
        [(0.28, 0.45), (0.38, 0.58), (0.48, 0.68), (0.58, 0.55), (0.62, 0.45), (0.60, 0.62),
         (0.55, 0.78), (0.45, 0.85), (0.35, 0.82)]
    ],

    # zig-zag
    'z': [
        [(0.30, 0.45), (0.45, 0.45), (0.62, 0.45), (0.45, 0.58), (0.30, 0.72), (0.48, 0.72),
         (0.68, 0.72)]
    ],

    # -------------------------------------------------------------------------
    # Uppercase Letters (A-Z)
    # -------------------------------------------------------------------------

    # two slanted sides; crossbar
    'A': [
        [(0.18, 0.72), (0.25, 0.55), (0.38, 0.32), (0.50, 0.20), (0.62, 0.35), (0.72, 0.55),
         (0.80, 0.72)],
        [(0.30, 0.52), (0.50, 0.48), (0.70, 0.52)]
    ],

    # stem, two bumps
    'B': [
        [(0.22, 0.72), (0.28, 0.50), (0.32, 0.30), (0.35, 0.20), (0.52, 0.22), (0.62, 0.30),
         (0.58, 0.42), (0.42, 0.48), (0.35, 0.50), (0.55, 0.55), (0.68, 0.65), (0.62, 0.75),
         (0.45, 0.78), (0.32, 0.72)]
    ],

    # open curve
    'C': [
        [(0.68, 0.28), (0.55, 0.20), (0.40, 0.22), (0.28, 0.35), (0.25, 0.50), (0.28, 0.65),
         (0.42, 0.75), (0.58, 0.72), (0.72, 0.65)]
    ],

    # stem, round body
    'D': [
        [(0.22, 0.72), (0.28, 0.50), (0.32, 0.28), (0.38, 0.20), (0.55, 0.22), (0.68, 0.35),
         (0.72, 0.52), (0.68, 0.68), (0.52, 0.78), (0.35, 0.72)]
    ],

    # two stacked curves
    'E': [
        [(0.58, 0.25), (0.42, 0.20), (0.30, 0.28), (0.28, 0.42), (0.38, 0.48), (0.55, 0.50),
         (0.38, 0.52), (0.28, 0.62), (0.32, 0.75), (0.48, 0.78), (0.68, 0.72)]
    ],

    # curved stem; crossbar
    'F': [
        [(0.58, 0.25), (0.45, 0.20), (0.32, 0.28), (0.30, 0.42), (0.35, 0.58), (0.40, 0.72),
         (0.48, 0.78)],
        [(0.25, 0.50), (0.42, 0.48), (0.58, 0.50)]
    ],

    # open curve, inner bar
    'G': [
        [(0.70, 0.28), (0.55, 0.20), (0.38, 0.22), (0.25, 0.38), (0.25, 0.55), (0.32, 0.70),
         (0.50, 0.78), (0.65, 0.72), (0.68, 0.58), (0.62, 0.50), (0.48, 0.52)]
    ],

    # two stems, connector
    'H': [
        [(0.18, 0.72), (0.22, 0.50), (0.28, 0.28), (0.32, 0.20), (0.35, 0.35), (0.38, 0.50),
         (0.55, 0.48), (0.68, 0.50), (0.70, 0.32), (0.72, 0.20), (0.75, 0.40), (0.78, 0.60),
         (0.82, 0.72)]
    ],

    # top flourish, stem
    'I': [
        [(0.35, 0.22), (0.45, 0.20), (0.55, 0.22), (0.50, 0.38), (0.52, 0.55), (0.55, 0.72),
         (0.62, 0.78)]
    ],

    # top bar, curved tail
    'J': [
        [(0.35, 0.22), (0.48, 0.20), (0.62, 0.22), (0.58, 0.40), (0.55, 0.58), (0.50, 0.72),
         (0.40, 0.78), (0.30, 0.75), (0.28, 0.65)]
    ],

    # stem; arm and leg
    'K': [
        [(0.22, 0.72), (0.28, 0.50), (0.32, 0.28), (0.35, 0.20)],
        [(0.68, 0.22), (0.55, 0.38), (0.40, 0.50), (0.55, 0.62), (0.72, 0.75)]
    ],

    # stem, base flourish
    'L': [
        [(0.32, 0.22), (0.35, 0.40), (0.38, 0.58), (0.42, 0.72), (0.52, 0.78), (0.65, 0.75),
         (0.75, 0.72)]
    ],

    # entry, two peaks
    'M': [
        [(0.12, 0.72), (0.18, 0.50), (0.22, 0.28), (0.25, 0.20), (0.35, 0.45), (0.45, 0.65),
         (0.55, 0.45), (0.65, 0.25), (0.72, 0.45), (0.78, 0.65), (0.85, 0.75)]
    ],

    # entry, diagonal, exit
    'N': [
        [(0.18, 0.72), (0.22, 0.50), (0.28, 0.28), (0.32, 0.20), (0.50, 0.50), (0.65, 0.72),
         (0.70, 0.50), (0.72, 0.28), (0.75, 0.20), (0.78, 0.40), (0.82, 0.72)]
    ],

    # closed oval
    'O': [
        [(0.50, 0.22), (0.35, 0.28), (0.25, 0.42), (0.25, 0.58), (0.32, 0.72), (0.48, 0.78),
         (0.62, 0.72), (0.72, 0.55), (0.70, 0.38), (0.58, 0.25), (0.50, 0.22)]
    ],

    # stem, bowl
    'P': [
        [(0.22, 0.72), (0.28, 0.50), (0.32, 0.28), (0.38, 0.20), (0.55, 0.22), (0.65, 0.32),
         (0.62, 0.45), (0.48, 0.52), (0.35, 0.50)]
    ],

    # closed oval; tail
    'Q': [
        [(0.50, 0.22), (0.35, 0.28), (0.25, 0.42), (0.25, 0.58), (0.32, 0.72), (0.48, 0.78),
         (0.62, 0.72), (0.72, 0.55), (0.70, 0.38), (0.58, 0.25), (0.50, 0.22)],
        [(0.55, 0.62), (0.65, 0.72), (0.78, 0.82)]
    ],

    # stem, bowl, leg
    'R': [
        [(0.22, 0.72), (0.28, 0.50), (0.32, 0.28), (0.38, 0.20), (0.55, 0.22), (0.65, 0.32),
         (0.60, 0.45), (0.45, 0.52), (0.35, 0.50), (0.52, 0.62), (0.72, 0.78)]
    ],

    # double curve
    'S': [
        [(0.65, 0.28), (0.52, 0.20), (0.38, 0.25), (0.30, 0.38), (0.38, 0.50), (0.55, 0.55),
         (0.68, 0.65), (0.65, 0.78), (0.48, 0.82), (0.32, 0.75)]
    ],

    # top bar; stem
    'T': [
        [(0.25, 0.25), (0.42, 0.22), (0.58, 0.22), (0.75, 0.25)],
        [(0.50, 0.22), (0.52, 0.42), (0.55, 0.60), (0.60, 0.75)]
    ],

    # round bottom
    'U': [
        [(0.22, 0.22), (0.28, 0.42), (0.32, 0.58), (0.40, 0.72), (0.55, 0.78), (0.68, 0.70),
         (0.72, 0.52), (0.75, 0.32), (0.78, 0.22)]
    ],

    # pointed bottom
    'V': [
        [(0.22, 0.22), (0.35, 0.45), (0.48, 0.68), (0.52, 0.75), (0.62, 0.55), (0.72, 0.35),
         (0.80, 0.22)]
    ],

    # double pointed bottom
    'W': [
        [(0.10, 0.22), (0.20, 0.48), (0.28, 0.70), (0.38, 0.48), (0.48, 0.28), (0.55, 0.50),
         (0.62, 0.70), (0.72, 0.45), (0.82, 0.25), (0.88, 0.48), (0.92, 0.70)]
    ],

    # two crossing diagonals
    'X': [
        [(0.25, 0.22), (0.40, 0.42), (0.52, 0.55), (0.68, 0.72), (0.78, 0.78)],
        [(0.78, 0.22), (0.62, 0.42), (0.52, 0.55), (0.38, 0.70), (0.25, 0.78)]
    ],

    # two arms meeting at the stem
    'Y': [
        [(0.22, 0.22), (0.35, 0.38), (0.48, 0.52), (0.52, 0.65), (0.55, 0.78)],
        [(0.78, 0.22), (0.62, 0.38), (0.52, 0.52)]
    ],

    # zig-zag
    'Z': [
        [(0.28, 0.25), (0.48, 0.22), (0.72, 0.25), (0.55, 0.48), (0.35, 0.72), (0.52, 0.78),
         (0.72, 0.75), (0.80, 0.72)]
    ],
}
