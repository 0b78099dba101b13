"""
Webcam capture for the gesture detector.
"""

import cv2
import numpy as np
import time
from typing import Callable, Generator, Optional

from .config import CameraConfig
from .exceptions import CameraNotFoundError, CameraConnectionError
from .utils import flip_frame, resize_frame, validate_frame


class Camera:
    """
    OpenCV webcam wrapper with reconnect handling.

    Usage:
        with Camera() as camera:
            for frame in camera.stream():
                ...
    """

    def __init__(
        self,
        config: Optional[CameraConfig] = None,
        capture_factory: Callable[[int], "cv2.VideoCapture"] = cv2.VideoCapture,
    ):
        """
        Open the camera described by ``config``.

        Args:
            config: CameraConfig object (uses defaults if None)
            capture_factory: Callable returning a VideoCapture-like object for an index

        Raises:
            CameraNotFoundError: If the device cannot be opened
        """
        self.config = config or CameraConfig()
        self.capture_factory = capture_factory
        self.cap = None
        self.is_running = False
        self.consecutive_failures = 0

        self.frame_count = 0
        self.start_time = None
        self.fps = 0.0

        self._open_camera()

    def _open_camera(self) -> None:
        if self.config.verbose:
            print(f"[CAMERA] Opening camera {self.config.camera_index}...")

        self.cap = self.capture_factory(self.config.camera_index)

        if self.cap is None or not self.cap.isOpened():
            self._close_camera()
            raise CameraNotFoundError(
                f"Could not open camera {self.config.camera_index}. "
                f"Make sure it is connected, not in use, and that camera access is allowed."
            )

        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.target_fps)

        if self.config.verbose:
            actual_width = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH))
            actual_height = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
            print(
                f"[CAMERA] Opened: {actual_width}x{actual_height} "
                f"(requested {self.config.width}x{self.config.height})"
            )

        self.is_running = True
        self.frame_count = 0
        self.start_time = time.time()

    def _reconnect(self) -> bool:
        """
        Close and reopen the device.

        Returns:
            True if reconnection succeeded
        """
        if self.config.verbose:
            print("[CAMERA] Attempting to reconnect...")

        try:
            self._close_camera()
            time.sleep(self.config.retry_delay)
            self._open_camera()
        except CameraNotFoundError:
            if self.config.verbose:
                print("[CAMERA] Reconnection failed")
            return False

        self.consecutive_failures = 0
        if self.config.verbose:
            print("[CAMERA] Reconnection successful")
        return True

    def _close_camera(self) -> None:
        if self.cap is not None:
            self.cap.release()
            self.cap = None
        self.is_running = False

    def get_frame(self) -> Optional[np.ndarray]:
        """
        Read the most recently decoded frame.

        Returns:
            BGR frame, or None if no frame is ready this tick

        Raises:
            CameraConnectionError: If too many consecutive reads fail
        """
        if not self.is_running:
            return None

        ret, frame = self.cap.read()

        if not ret or not validate_frame(frame):
            self.consecutive_failures += 1

            if self.consecutive_failures >= self.config.max_consecutive_failures:
                if not self.config.retry_on_disconnect:
                    raise CameraConnectionError(
                        f"Too many consecutive frame read failures ({self.consecutive_failures})"
                    )
                if not self._reconnect():
                    raise CameraConnectionError(
                        f"Lost connection to camera after {self.consecutive_failures} failures"
                    )
            return None

        self.consecutive_failures = 0

        if self.config.mirror:
            frame = flip_frame(frame, horizontal=True)

        if self.config.auto_resize:
            frame = resize_frame(
                frame,
                width=self.config.resize_width,
                height=self.config.resize_height,
            )

        self._update_fps()
        return frame

    def stream(self) -> Generator[np.ndarray, None, None]:
        """
        Yield frames until the camera is stopped, skipping empty reads.
        """
        while self.is_running:
            frame = self.get_frame()
            if frame is not None:
                yield frame

    def _update_fps(self) -> None:
        self.frame_count += 1

        if self.config.show_fps and self.frame_count % 30 == 0:
            self.fps = self.get_fps()
            print(f"[CAMERA] FPS: {self.fps:.1f}")

    def get_fps(self) -> float:
        if self.start_time is None:
            return 0.0
        elapsed = time.time() - self.start_time
        return self.frame_count / elapsed if elapsed > 0 else 0.0

    def get_info(self) -> dict:
        """
        Get camera information.

        Returns:
            Dictionary with device settings and counters, empty when stopped
        """
        if not self.is_running or self.cap is None:
            return {}

        return {
            "camera_index": self.config.camera_index,
            "width": int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH)),
            "height": int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT)),
            "fps": int(self.cap.get(cv2.CAP_PROP_FPS)),
            "actual_fps": self.get_fps(),
            "is_running": self.is_running,
            "frame_count": self.frame_count,
        }

    def stop(self) -> None:
        """Stop camera and release the device. Safe to call twice."""
        if self.cap is None:
            return

        self._close_camera()

        if self.config.verbose:
            print(f"[CAMERA] Stopped. Total frames captured: {self.frame_count}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()

    def __del__(self):
        self.stop()
