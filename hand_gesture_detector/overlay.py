"""
OpenCV rendering of the current detection snapshot.
"""

from typing import Optional, Tuple

import cv2
import numpy as np

from .session import DetectionSnapshot


SUPPORTED_GESTURES = (
    ("Open Palm", "Show your open hand to the camera"),
    ("Fist", "Make a closed fist"),
    ("Pointing", "Point with your index finger"),
    ("Peace Sign", "Show two fingers in a V shape"),
    ("Thumbs Up", "Give a thumbs up gesture"),
)

FONT = cv2.FONT_HERSHEY_SIMPLEX

COLOR_TEXT = (255, 255, 255)
COLOR_MUTED = (200, 200, 200)
COLOR_HIGHLIGHT = (255, 80, 180)
COLOR_BAR_BG = (70, 70, 70)
COLOR_BAR_FG = (235, 120, 60)
COLOR_ERROR = (0, 0, 255)
COLOR_HINT = (0, 255, 255)


def _put_text(
    image: np.ndarray,
    text: str,
    origin: Tuple[int, int],
    color: Tuple[int, int, int],
    scale: float = 0.6,
    thickness: int = 2,
) -> None:
    cv2.putText(image, text, origin, FONT, scale, color, thickness, cv2.LINE_AA)


def draw_confidence_bar(
    image: np.ndarray,
    confidence: int,
    origin: Tuple[int, int],
    size: Tuple[int, int] = (200, 12),
) -> None:
    """Filled bar proportional to confidence (0-100), drawn in place."""
    x, y = origin
    w, h = size
    filled = int(round(w * max(0, min(100, confidence)) / 100.0))

    cv2.rectangle(image, (x, y), (x + w, y + h), COLOR_BAR_BG, -1)
    if filled > 0:
        cv2.rectangle(image, (x, y), (x + filled, y + h), COLOR_BAR_FG, -1)


def draw_overlay(
    frame: Optional[np.ndarray],
    snapshot: DetectionSnapshot,
    size: Tuple[int, int] = (640, 480),
    show_gesture_list: bool = True,
) -> np.ndarray:
    """
    Draw the detection state on a BGR frame.

    Args:
        frame: Camera frame, or None to draw on a blank canvas of ``size``
        snapshot: State to display
        size: (width, height) of the blank canvas
        show_gesture_list: Draw the supported gestures panel

    Returns:
        Annotated copy of the frame
    """
    if frame is None:
        annotated = np.zeros((size[1], size[0], 3), dtype=np.uint8)
    else:
        annotated = frame.copy()

    height = annotated.shape[0]
    y = 30
    dy = 25

    _put_text(annotated, f"Gesture: {snapshot.gesture}", (10, y), COLOR_TEXT, scale=0.8)
    y += dy

    # Confidence only shown when there is some
    if snapshot.confidence > 0:
        _put_text(annotated, f"Confidence {snapshot.confidence}%", (10, y + 5), COLOR_MUTED, scale=0.5, thickness=1)
        draw_confidence_bar(annotated, snapshot.confidence, (180, y - 6))
        y += dy

    if show_gesture_list:
        y += 10
        for name, description in SUPPORTED_GESTURES:
            color = COLOR_HIGHLIGHT if snapshot.gesture == name else COLOR_MUTED
            _put_text(annotated, f"{name}: {description}", (10, y), color, scale=0.45, thickness=1)
            y += 20

    if snapshot.error:
        _put_text(annotated, snapshot.error, (10, height - 45), COLOR_ERROR, scale=0.5)

    if not snapshot.is_active:
        hint = "Press 's' to start detection, 'q' to quit"
    else:
        hint = "Press 's' to stop detection, 'q' to quit"
    _put_text(annotated, hint, (10, height - 20), COLOR_HINT, scale=0.5)

    return annotated

