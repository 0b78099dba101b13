"""
Camera configuration settings.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class CameraConfig:
    """Configuration for webcam capture."""

    camera_index: int = 0  # 0 = default/built-in (user-facing) camera

    # Requested resolution
    width: int = 640
    height: int = 480

    target_fps: int = 30

    # Image processing
    mirror: bool = True  # Selfie view
    auto_resize: bool = False
    resize_width: Optional[int] = None
    resize_height: Optional[int] = None

    # Error handling
    max_consecutive_failures: int = 10  # Failed reads before reconnect/raise
    retry_on_disconnect: bool = True
    retry_delay: float = 1.0  # Seconds

    # Debug
    show_fps: bool = False
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration."""
        if self.camera_index < 0:
            raise ValueError("camera_index must be >= 0")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        if self.target_fps <= 0:
            raise ValueError("target_fps must be positive")
        if self.max_consecutive_failures <= 0:
            raise ValueError("max_consecutive_failures must be positive")
        if self.retry_delay < 0:
            raise ValueError("retry_delay must be >= 0")
