"""
Value types passed between the sampler, the classifier and the display.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


OPEN_PALM = "Open Palm"
FIST = "Fist"
POINTING = "Pointing"
PEACE_SIGN = "Peace Sign"
THUMBS_UP = "Thumbs Up"
NO_HAND_DETECTED = "No Hand Detected"
HAND_DETECTED = "Hand Detected"

GESTURE_LABELS = (OPEN_PALM, FIST, POINTING, PEACE_SIGN, THUMBS_UP)
ALL_LABELS = GESTURE_LABELS + (NO_HAND_DETECTED, HAND_DETECTED)


@dataclass(frozen=True, eq=False)
class Frame:
    """
    One captured RGB(A) pixel grid.

    The array is copied and marked read-only, so a frame cannot change
    after capture. A fourth (alpha) channel is kept but never read.
    """

    pixels: np.ndarray

    def __post_init__(self):
        pixels = np.asarray(self.pixels, dtype=np.uint8)
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError(
                f"Frame pixels must have shape (H, W, 3) or (H, W, 4), got {pixels.shape}"
            )
        pixels = pixels.copy()
        pixels.setflags(write=False)
        object.__setattr__(self, "pixels", pixels)

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @classmethod
    def empty(cls) -> "Frame":
        """Zero-size frame, e.g. from a source that reports 0x0."""
        return cls(np.zeros((0, 0, 3), dtype=np.uint8))


@dataclass(frozen=True)
class FrameStatistics:
    total_pixels: int
    skin_pixels: int
    skin_ratio: float
    # Mean (x, y) of skin pixels; None when there are none
    center_of_mass: Optional[Tuple[float, float]]
    average_brightness: float


@dataclass(frozen=True)
class ClassificationResult:
    label: str
    confidence: int

    @property
    def is_gesture(self) -> bool:
        return self.label in GESTURE_LABELS

    def as_tuple(self) -> Tuple[str, int]:
        return self.label, self.confidence
