"""
Hand Gesture Detector
Webcam demo that labels hand poses from the share of skin-colored pixels.
"""

from .config import DetectorConfig
from .gesture_classifier import ClassificationResult, Frame, GestureClassifier
from .session import DetectionSession, DetectionSnapshot

__version__ = "1.0.0"
__all__ = [
    "DetectorConfig",
    "ClassificationResult",
    "Frame",
    "GestureClassifier",
    "DetectionSession",
    "DetectionSnapshot",
]
