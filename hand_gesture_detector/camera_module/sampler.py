"""
Per-tick frame sampling from a live video source.
"""

from typing import Optional

import numpy as np

from ..gesture_classifier.types import Frame
from .utils import bgr_to_rgb, validate_frame


class FrameSampler:
    """
    Turns the source's latest decoded image into an RGB Frame.

    ``source`` is anything with ``get_frame()`` returning a BGR(A) image or
    None, such as Camera. No frames are buffered between ticks.
    """

    def __init__(self, source):
        self.source = source

    def sample(self) -> Optional[Frame]:
        """
        Capture one frame.

        Returns:
            Frame in RGB order, or None when the source has nothing ready

        Raises:
            CameraConnectionError: Propagated from the source
        """
        image: Optional[np.ndarray] = self.source.get_frame()
        if not validate_frame(image):
            return None
        return Frame(bgr_to_rgb(image))
