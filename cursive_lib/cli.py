#!/usr/bin/env python3
"""Command-line interface for cursive practice.

Inspect the letter table, replay recorded drawings through a practice
session, and render guide images.

Drawings are JSON files holding a list of pen strokes, each a list of
[x, y] or [x, y, t] samples in canvas coordinates.

Usage:
    cursive-practice letters
    cursive-practice show a --size 300x400
    cursive-practice replay a drawing.json --size 300x400
    cursive-practice render t -o t.png --drawing drawing.json

Or run via the module:
    python -m cursive_lib.cli replay a drawing.json

Exit codes:
    0: success (for ``replay``: the letter was completed)
    1: ``replay`` finished without completing the letter
    2: invalid input (unreadable or malformed drawing, bad size)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .api.services import PracticeService
from .config import DEFAULT_CANVAS_SIZE
from .domain.drawing import Drawing
from .domain.geometry import CanvasSize
from .utils.rendering import render_guide_image

_logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INCOMPLETE = 1
EXIT_BAD_INPUT = 2


def _canvas_size(text: str) -> CanvasSize:
    try:
        return CanvasSize.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    default_size = '{}x{}'.format(*DEFAULT_CANVAS_SIZE)

    parser = argparse.ArgumentParser(
        prog='cursive-practice',
        description='Cursive handwriting practice: letter data, replay and guide rendering'
    )
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('letters', help='List supported letters')

    show = sub.add_parser('show', help='Print a letter\'s strokes and path as JSON')
    show.add_argument('letter', help='Letter to show')
    show.add_argument('--size', '-s', type=_canvas_size, default=default_size,
                      help=f'Canvas size WIDTHxHEIGHT (default: {default_size})')

    replay = sub.add_parser('replay', help='Replay a recorded drawing through a practice session')
    replay.add_argument('letter', help='Letter being practiced')
    replay.add_argument('drawing', type=Path, help='Drawing JSON file')
    replay.add_argument('--size', '-s', type=_canvas_size, default=default_size,
                        help=f'Canvas size WIDTHxHEIGHT (default: {default_size})')
    replay.add_argument('--events', action='store_true',
                        help='Include the event log in the output')

    render = sub.add_parser('render', help='Render a guide image')
    render.add_argument('letter', help='Letter to render')
    render.add_argument('--output', '-o', type=Path, required=True,
                        help='Output image path (PNG)')
    render.add_argument('--size', '-s', type=_canvas_size, default=default_size,
                        help=f'Canvas size WIDTHxHEIGHT (default: {default_size})')
    render.add_argument('--drawing', '-d', type=Path, default=None,
                        help='Optional drawing JSON to overlay')
    render.add_argument('--stroke', type=int, default=1,
                        help='Stroke number to highlight (default: 1)')
    return parser


def _load_drawing(path: Path) -> Drawing:
    """Read a drawing JSON file.

    Raises:
        ValueError: If the file cannot be read or is not a valid drawing.
    """
    try:
        data = json.loads(path.read_text())
    except OSError as e:
        raise ValueError(f"cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"{path} is not valid JSON: {e}") from e
    return Drawing.from_list(data)


def _run_letters(args, service: PracticeService) -> int:
    print(' '.join(service.list_letters()))
    return EXIT_OK


def _run_show(args, service: PracticeService) -> int:
    info = service.letter_info(args.letter, args.size.width, args.size.height)
    print(json.dumps(info, indent=2))
    return EXIT_OK


def _run_replay(args, service: PracticeService) -> int:
    drawing = _load_drawing(args.drawing)
    events = []
    session = service.replay(args.letter, args.size, drawing, listener=events.append)

    result = {'state': session.snapshot().to_dict()}
    if args.events:
        result['events'] = [e.to_dict() for e in events]
    print(json.dumps(result, indent=2))
    return EXIT_OK if session.is_letter_complete else EXIT_INCOMPLETE


def _run_render(args, service: PracticeService) -> int:
    drawing = _load_drawing(args.drawing) if args.drawing else None
    strokes = service.repository.strokes_for(args.letter)
    img = render_guide_image(strokes, args.size, drawing=drawing,
                             current_stroke_index=args.stroke - 1)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    img.save(args.output)
    print(f"Saved {args.output}")
    return EXIT_OK


COMMANDS = {
    'letters': _run_letters,
    'show': _run_show,
    'replay': _run_replay,
    'render': _run_render,
}


def main(argv=None) -> int:
    """Command-line interface for cursive practice.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``.

    Returns:
        Process exit code.
    """
    parser = _create_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    service = PracticeService()
    try:
        return COMMANDS[args.command](args, service)
    except ValueError as e:
        _logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT


if __name__ == '__main__':
    sys.exit(main())
