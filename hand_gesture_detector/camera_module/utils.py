"""
Frame helpers shared by the camera and the sampler.
"""

import cv2
import numpy as np
from typing import Optional


def flip_frame(frame: np.ndarray, horizontal: bool = True, vertical: bool = False) -> np.ndarray:
    """
    Flip frame horizontally and/or vertically.

    Args:
        frame: Input frame
        horizontal: Mirror left/right
        vertical: Flip upside down

    Returns:
        Flipped frame
    """
    if horizontal and vertical:
        return cv2.flip(frame, -1)
    elif horizontal:
        return cv2.flip(frame, 1)
    elif vertical:
        return cv2.flip(frame, 0)
    return frame


def resize_frame(
    frame: np.ndarray,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> np.ndarray:
    """
    Resize frame, deriving a missing dimension from the aspect ratio.
    """
    if width is None and height is None:
        return frame

    h, w = frame.shape[:2]
    if width is not None and height is None:
        height = int(width * h / w)
    elif height is not None and width is None:
        width = int(height * w / h)

    return cv2.resize(frame, (width, height), interpolation=cv2.INTER_LINEAR)


def validate_frame(frame: Optional[np.ndarray]) -> bool:
    """
    Check that a decoded frame is a non-empty color image.

    Args:
        frame: Frame to validate

    Returns:
        True if the frame can be sampled, False otherwise
    """
    if frame is None:
        return False
    if not isinstance(frame, np.ndarray):
        return False
    if frame.size == 0:
        return False
    if frame.ndim != 3 or frame.shape[2] not in (3, 4):
        return False
    return True


def bgr_to_rgb(frame: np.ndarray) -> np.ndarray:
    """Convert an OpenCV BGR or BGRA image to RGB."""
    if frame.shape[2] == 4:
        return cv2.cvtColor(frame, cv2.COLOR_BGRA2RGB)
    return cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
