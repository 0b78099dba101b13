"""
Main GestureClassifier class.
Maps one frame's skin-pixel ratio to a gesture label and confidence.
"""

import math
from typing import Iterable, List, Optional, Union

import numpy as np

from .config import ClassifierConfig
from .skin import frame_statistics
from .types import (
    ClassificationResult,
    Frame,
    FrameStatistics,
    HAND_DETECTED,
    NO_HAND_DETECTED,
)


FrameLike = Union[Frame, np.ndarray]


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def select_gesture(
    skin_ratio: float,
    config: Optional[ClassifierConfig] = None,
) -> ClassificationResult:
    """
    Pick a gesture for a skin ratio.

    Every rule is scored in table order; the strictly highest score wins,
    so the first-listed rule keeps a tie. A winner that does not beat
    ``min_gesture_score`` falls back to "Hand Detected" with the ratio as
    a percentage.

    Args:
        skin_ratio: Fraction of skin pixels in the frame, in [0, 1]
        config: Decision parameters (defaults if None)

    Returns:
        ClassificationResult
    """
    config = config or ClassifierConfig()

    if skin_ratio < config.no_hand_ratio:
        return ClassificationResult(NO_HAND_DETECTED, 0)

    best_label = config.thresholds[0].label
    best_score = config.thresholds[0].score_for(skin_ratio)
    for rule in config.thresholds:
        score = rule.score_for(skin_ratio)
        if score > best_score:
            best_label, best_score = rule.label, score

    if best_score > config.min_gesture_score:
        return ClassificationResult(best_label, int(best_score))

    confidence = min(100, max(0, round_half_up(skin_ratio * 100)))
    return ClassificationResult(HAND_DETECTED, confidence)


class GestureClassifier:
    """
    Skin-ratio hand gesture classifier.

    Stateless: the same frame always gives the same result.

    Usage:
        classifier = GestureClassifier()
        result = classifier.classify(frame)
        print(result.label, result.confidence)
    """

    def __init__(self, config: Optional[ClassifierConfig] = None):
        self.config = config or ClassifierConfig()

    @staticmethod
    def _pixels(frame: FrameLike) -> np.ndarray:
        if isinstance(frame, Frame):
            return frame.pixels
        pixels = np.asarray(frame)
        # Empty buffers of any shape count as a 0x0 frame
        if pixels.size == 0:
            return Frame.empty().pixels
        return Frame(pixels).pixels

    def analyze(self, frame: FrameLike) -> FrameStatistics:
        """
        Compute pixel statistics for a frame.

        Args:
            frame: Frame or RGB(A) array of shape (H, W, 3|4)

        Returns:
            FrameStatistics (center of mass and brightness are informational only)
        """
        return frame_statistics(self._pixels(frame))

    def classify(self, frame: FrameLike) -> ClassificationResult:
        """
        Classify a hand gesture from one frame.

        Args:
            frame: Frame or RGB(A) array of shape (H, W, 3|4)

        Returns:
            ClassificationResult; ("No Hand Detected", 0) for empty frames
        """
        stats = self.analyze(frame)
        if stats.total_pixels == 0:
            return ClassificationResult(NO_HAND_DETECTED, 0)
        return select_gesture(stats.skin_ratio, self.config)

    def classify_batch(self, frames: Iterable[FrameLike]) -> List[ClassificationResult]:
        return [self.classify(frame) for frame in frames]

    def get_info(self) -> dict:
        """
        Describe the decision parameters.

        Returns:
            Dictionary with the threshold table and limits
        """
        return {
            "no_hand_ratio": self.config.no_hand_ratio,
            "min_gesture_score": self.config.min_gesture_score,
            "thresholds": [
                {
                    "label": rule.label,
                    "lower": rule.lower,
                    "upper": rule.upper,
                    "score": rule.score,
                }
                for rule in self.config.thresholds
            ],
            "labels": [rule.label for rule in self.config.thresholds],
        }
