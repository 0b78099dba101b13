"""
Runtime configuration for the live detector.
"""

from dataclasses import dataclass, field
from typing import Optional

from .camera_module import CameraConfig


@dataclass
class DetectorConfig:
    """Configuration for a live detection run."""

    camera: CameraConfig = field(default_factory=CameraConfig)

    # Loop settings
    target_fps: float = 30.0  # Display refresh rate the loop is paced to
    max_ticks: Optional[int] = None  # None = run until 'q'
    max_runtime: Optional[float] = None  # Seconds; None = run until 'q'

    # Output settings
    show_window: bool = True
    window_name: str = "Hand Gesture Detector"
    verbose: bool = True
    print_changes: bool = True  # Print each gesture change

    def __post_init__(self):
        if self.target_fps <= 0:
            raise ValueError("target_fps must be positive")
        if self.max_ticks is not None and self.max_ticks < 0:
            raise ValueError("max_ticks must be >= 0")
        if self.max_runtime is not None and self.max_runtime < 0:
            raise ValueError("max_runtime must be >= 0")
