"""
Test cases for the detection session lifecycle.
"""
import unittest
from dataclasses import FrozenInstanceError

from hand_gesture_detector.camera_module import CameraConnectionError, CameraNotFoundError
from hand_gesture_detector.session import (
    CAMERA_ACCESS_ERROR,
    CAMERA_LOST_ERROR,
    DetectionSession,
    DetectionSnapshot,
)

from helpers import FakeSource, make_frame, rgb_to_bgr


def bgr(skin, total=10000):
    return rgb_to_bgr(make_frame(skin, total))


class TestDetectionSession(unittest.TestCase):

    def make_session(self, frames=None, error=None):
        self.source = FakeSource(frames, error=error)
        return DetectionSession(camera_factory=lambda: self.source)

    def test_initial_snapshot_is_idle(self):
        session = self.make_session()
        self.assertEqual(session.snapshot, DetectionSnapshot(False, "None", 0, ""))

    def test_snapshot_is_immutable(self):
        with self.assertRaises(FrozenInstanceError):
            DetectionSnapshot().gesture = "Fist"

    def test_start_then_classify(self):
        session = self.make_session([bgr(10000), bgr(1200)])
        started = session.start()
        self.assertTrue(started.is_active)
        self.assertEqual(started.gesture, "None")

        first = session.tick()
        second = session.tick()
        self.assertEqual((first.gesture, first.confidence), ("Open Palm", 85))
        self.assertEqual((second.gesture, second.confidence), ("Peace Sign", 65))
        self.assertTrue(second.is_active)
        # Earlier snapshots are untouched
        self.assertEqual(first.gesture, "Open Palm")

    def test_skipped_tick_keeps_snapshot(self):
        session = self.make_session([bgr(10000)])
        session.start()
        published = session.tick()
        self.assertIs(session.tick(), published)

    def test_tick_while_inactive(self):
        session = self.make_session([bgr(10000)])
        self.assertEqual(session.tick(), DetectionSnapshot())
        self.assertEqual(len(self.source.frames), 1)

    def test_camera_unavailable(self):
        def factory():
            raise CameraNotFoundError("permission denied")

        session = DetectionSession(camera_factory=factory)
        snapshot = session.start()
        self.assertFalse(snapshot.is_active)
        self.assertEqual(snapshot.error, CAMERA_ACCESS_ERROR)
        self.assertEqual(session.tick(), snapshot)

    def test_start_clears_previous_error(self):
        attempts = []
        source = FakeSource([bgr(0)])

        def factory():
            attempts.append(1)
            if len(attempts) == 1:
                raise CameraNotFoundError("busy")
            return source

        session = DetectionSession(camera_factory=factory)
        self.assertTrue(session.start().error)
        self.assertEqual(session.start().error, "")

    def test_connection_lost_stops_session(self):
        session = self.make_session(error=CameraConnectionError("unplugged"))
        session.start()
        snapshot = session.tick()
        self.assertFalse(snapshot.is_active)
        self.assertEqual(snapshot.error, CAMERA_LOST_ERROR)
        self.assertTrue(self.source.stopped)

    def test_stop_resets_and_releases(self):
        session = self.make_session([bgr(10000)])
        session.start()
        session.tick()
        self.assertIsNotNone(session.preview)

        snapshot = session.stop()
        self.assertEqual(snapshot, DetectionSnapshot())
        self.assertIsNone(session.preview)
        self.assertEqual(self.source.stop_calls, 1)

        session.stop()
        self.assertEqual(self.source.stop_calls, 1)

    def test_toggle(self):
        session = self.make_session()
        self.assertTrue(session.toggle().is_active)
        self.assertFalse(session.toggle().is_active)
        self.assertTrue(self.source.stopped)

    def test_start_twice_keeps_source(self):
        calls = []

        def factory():
            calls.append(1)
            return FakeSource()

        session = DetectionSession(camera_factory=factory)
        session.start()
        session.start()
        self.assertEqual(len(calls), 1)


if __name__ == "__main__":
    unittest.main()
