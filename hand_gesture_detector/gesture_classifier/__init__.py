"""
Gesture Classifier Package
Skin-tone ratio heuristic that maps a frame to one of five hand gestures.
"""

from .classifier import GestureClassifier, select_gesture
from .config import ClassifierConfig, ThresholdRule, DEFAULT_THRESHOLDS
from .skin import skin_mask, is_skin, frame_statistics
from .types import (
    Frame,
    FrameStatistics,
    ClassificationResult,
    GESTURE_LABELS,
    ALL_LABELS,
    NO_HAND_DETECTED,
    HAND_DETECTED,
)

__version__ = "1.0.0"
__all__ = [
    "GestureClassifier",
    "select_gesture",
    "ClassifierConfig",
    "ThresholdRule",
    "DEFAULT_THRESHOLDS",
    "skin_mask",
    "is_skin",
    "frame_statistics",
    "Frame",
    "FrameStatistics",
    "ClassificationResult",
    "GESTURE_LABELS",
    "ALL_LABELS",
    "NO_HAND_DETECTED",
    "HAND_DETECTED",
]
