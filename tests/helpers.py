"""
Synthetic frames and fake camera devices shared by the tests.
"""

import numpy as np


SKIN_RGB = (200, 120, 90)
BLUE_RGB = (0, 0, 255)


def make_frame(skin_pixels: int, total_pixels: int, width: int = 100,
               skin=SKIN_RGB, background=BLUE_RGB) -> np.ndarray:
    """RGB array with the first ``skin_pixels`` pixels (row-major) skin colored."""
    assert total_pixels % width == 0
    flat = np.empty((total_pixels, 3), dtype=np.uint8)
    flat[:] = background
    flat[:skin_pixels] = skin
    return flat.reshape(total_pixels // width, width, 3)


def rgb_to_bgr(pixels: np.ndarray) -> np.ndarray:
    return np.ascontiguousarray(pixels[..., ::-1])


class FakeCapture:
    """Stands in for cv2.VideoCapture; yields queued frames, None = failed read."""

    def __init__(self, frames=None, opened=True):
        self.frames = list(frames or [])
        self.opened = opened
        self.released = False
        self.props = {}

    def isOpened(self):
        return self.opened and not self.released

    def set(self, prop, value):
        self.props[prop] = value
        return True

    def get(self, prop):
        return self.props.get(prop, 0)

    def read(self):
        if not self.frames:
            return False, None
        frame = self.frames.pop(0)
        if frame is None:
            return False, None
        return True, frame

    def release(self):
        self.released = True


class FakeSource:
    """Minimal frame source for FrameSampler and DetectionSession."""

    def __init__(self, frames=None, error=None):
        self.frames = list(frames or [])
        self.error = error
        self.stopped = False
        self.stop_calls = 0

    def get_frame(self):
        if self.error is not None:
            raise self.error
        if not self.frames:
            return None
        return self.frames.pop(0)

    def stop(self):
        self.stopped = True
        self.stop_calls += 1
