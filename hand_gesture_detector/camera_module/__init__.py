"""
Camera Module
Webcam capture and per-tick frame sampling for the gesture detector.
"""

from .camera import Camera
from .config import CameraConfig
from .exceptions import (
    CameraError,
    CameraNotFoundError,
    CameraConnectionError,
)
from .sampler import FrameSampler

__version__ = "1.0.0"
__all__ = [
    "Camera",
    "CameraConfig",
    "CameraError",
    "CameraNotFoundError",
    "CameraConnectionError",
    "FrameSampler",
]
