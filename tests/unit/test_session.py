"""Unit tests for PracticeSession.

Tests cursive_lib.tracking.session:
    - Boundary check runs before progress matching
    - Event delivery through return values and subscribers
    - Lifecycle (setup, reset) and state snapshots
"""

import json
import unittest

import pytest

from conftest import CANVAS, SPACED_LETTERS, drawing_of, polyline_samples
from cursive_lib.templates import LetterRepository, strokes_for
from cursive_lib.tracking import EventKind, PracticeSession, SessionState

FAR = (250, 100)


class SessionTestCase(unittest.TestCase):

    def setUp(self):
        self.session = PracticeSession(LetterRepository.from_dict(SPACED_LETTERS))
        self.session.setup('L', CANVAS)


class TestHandleDrawing(SessionTestCase):

    def test_progress_events_are_returned(self):
        """handle_drawing returns the events of the update."""
        events = self.session.handle_drawing(drawing_of(polyline_samples([(30, 40), (30, 200)])))
        self.assertEqual([e.kind for e in events], [
            EventKind.CHECKPOINT_TOUCHED,
            EventKind.CHECKPOINT_TOUCHED,
            EventKind.PROGRESS_CHANGED,
        ])
        self.assertEqual(self.session.touched_checkpoints, frozenset({0, 1}))

    def test_violation_skips_progress(self):
        """A violating batch reports only the violation."""
        path = polyline_samples([(30, 40), (30, 200)]) + [FAR]
        events = self.session.handle_drawing(drawing_of(path))

        self.assertEqual([e.kind for e in events], [EventKind.OUT_OF_BOUNDS])
        self.assertEqual(events[0].point.to_tuple(), FAR)
        self.assertTrue(self.session.is_out_of_bounds)
        self.assertEqual(self.session.touched_checkpoints, frozenset())
        self.assertEqual(self.session.stroke_progress, 0.0)

    def test_recovers_after_clean_batch(self):
        """Clean ink after a reset registers progress again."""
        self.session.handle_drawing(drawing_of([FAR]))
        self.assertTrue(self.session.is_out_of_bounds)

        self.session.reset()
        self.session.handle_drawing(drawing_of(polyline_samples([(30, 40), (30, 200)])))
        self.assertFalse(self.session.is_out_of_bounds)
        self.assertEqual(self.session.touched_checkpoints, frozenset({0, 1}))

    def test_events_are_per_call(self):
        """A repeated drawing produces no new events."""
        drawing = drawing_of(polyline_samples([(30, 40), (30, 200)]))
        self.assertTrue(self.session.handle_drawing(drawing))
        # Same drawing again changes nothing
        self.assertEqual(self.session.handle_drawing(drawing), [])

    def test_complete_letter(self):
        """Tracing the whole letter ends with a completion event."""
        path = polyline_samples([(30, 40), (30, 360), (270, 360)])
        events = self.session.handle_drawing(drawing_of(path))

        self.assertEqual(events[-1].kind, EventKind.LETTER_COMPLETED)
        self.assertTrue(self.session.is_letter_complete)
        self.assertIsNone(self.session.next_checkpoint)

    def test_without_setup(self):
        """A session with no letter ignores input."""
        session = PracticeSession()
        self.assertEqual(session.handle_drawing(drawing_of([(0, 0)] * 20)), [])
        self.assertEqual(session.total_strokes, 0)


class TestSubscribers(SessionTestCase):

    def test_subscriber_sees_the_same_events(self):
        """Subscribers get exactly the returned events."""
        received = []
        self.session.subscribe(received.append)
        returned = self.session.handle_drawing(drawing_of(polyline_samples([(30, 40), (30, 200)])))
        self.assertEqual(received, returned)

    def test_unsubscribe(self):
        """Unsubscribed callbacks get nothing."""
        received = []
        self.session.subscribe(received.append)
        self.session.unsubscribe(received.append)
        self.session.handle_drawing(drawing_of(polyline_samples([(30, 40), (30, 200)])))
        self.assertEqual(received, [])

    def test_unsubscribe_unknown_is_ignored(self):
        """Removing an unknown callback is not an error."""
        self.session.unsubscribe(print)


class TestLifecycle(SessionTestCase):

    def test_setup_switches_letter(self):
        """setup rebinds both detectors to the new letter."""
        self.session.handle_drawing(drawing_of(polyline_samples([(30, 40), (30, 200)])))
        self.session.setup('X', CANVAS)

        self.assertEqual(self.session.total_strokes, 2)
        self.assertEqual(self.session.current_stroke_index, 0)
        self.assertEqual(self.session.touched_checkpoints, frozenset())
        self.assertEqual(self.session.boundary.letter, 'X')

    def test_multi_stroke_letter_through_session(self):
        """A two-stroke letter advances, then completes."""
        self.session.setup('X', CANVAS)
        repo = self.session.repository
        first = polyline_samples(repo.strokes_for('X')[0].scaled_points(CANVAS))
        second = polyline_samples(repo.strokes_for('X')[1].scaled_points(CANVAS))

        events = self.session.handle_drawing(drawing_of(first))
        self.assertIn(EventKind.STROKE_ADVANCED, [e.kind for e in events])
        progress = [e.progress for e in events if e.kind is EventKind.PROGRESS_CHANGED]
        self.assertEqual(progress[-1], self.session.stroke_progress)
        start = self.session.current_stroke_start_point
        self.assertAlmostEqual(start.x, 270.0)

        events = self.session.handle_drawing(drawing_of(first, second))
        self.assertEqual(events[-1].kind, EventKind.LETTER_COMPLETED)


class TestSnapshot(SessionTestCase):

    def test_snapshot(self):
        """snapshot copies the current state."""
        self.session.handle_drawing(drawing_of(polyline_samples([(30, 40), (30, 200)])))
        state = self.session.snapshot()

        self.assertIsInstance(state, SessionState)
        self.assertEqual(state.letter, 'L')
        self.assertEqual(state.touched_checkpoints, (0, 1))
        self.assertEqual(state.total_strokes, 1)
        self.assertFalse(state.is_letter_complete)

    def test_to_dict_is_json_ready(self):
        """The snapshot dictionary serializes to JSON."""
        self.session.handle_drawing(drawing_of([FAR]))
        d = self.session.snapshot().to_dict()

        json.dumps(d)
        self.assertEqual(d['canvas_size'], [300, 400])
        self.assertTrue(d['is_out_of_bounds'])
        self.assertEqual(d['out_of_bounds_point'], [250.0, 100.0])
        self.assertEqual(d['next_checkpoint'], pytest.approx([30.0, 40.0]))


@pytest.mark.slow
def test_lowercase_a_end_to_end(session, canvas):
    """Tracing 'a' through every checkpoint completes it in one stroke."""
    points = strokes_for('a')[0].scaled_points(canvas)
    drawing = drawing_of(polyline_samples(points))

    events = session.handle_drawing(drawing)

    assert session.is_letter_complete
    assert session.current_stroke_index == 0
    assert not session.is_out_of_bounds
    assert [e.kind for e in events].count(EventKind.CHECKPOINT_TOUCHED) == 11
    assert events[-1].kind is EventKind.LETTER_COMPLETED


if __name__ == '__main__':
    unittest.main()
