"""
Start/stop lifecycle of a detection run.

Each tick publishes a new immutable DetectionSnapshot instead of mutating
shared display state.
"""

from dataclasses import dataclass, replace
from typing import Callable, Optional

from .camera_module import Camera, CameraConfig, CameraError, FrameSampler
from .gesture_classifier import Frame, GestureClassifier


CAMERA_ACCESS_ERROR = "Camera access denied. Please allow camera permissions."
CAMERA_LOST_ERROR = "Camera connection lost. Please restart detection."
IDLE_GESTURE = "None"


@dataclass(frozen=True)
class DetectionSnapshot:
    """What the display shows after one tick."""

    is_active: bool = False
    gesture: str = IDLE_GESTURE
    confidence: int = 0
    error: str = ""


class DetectionSession:
    """
    Owns the camera between start() and stop() and classifies one frame per tick.

    Usage:
        session = DetectionSession()
        session.start()
        snapshot = session.tick()
        session.stop()
    """

    def __init__(
        self,
        camera_config: Optional[CameraConfig] = None,
        classifier: Optional[GestureClassifier] = None,
        camera_factory: Optional[Callable[[], object]] = None,
        verbose: bool = False,
    ):
        """
        Args:
            camera_config: Settings for the default Camera factory
            classifier: GestureClassifier to use (default thresholds if None)
            camera_factory: Zero-argument callable returning a frame source with
                get_frame() and stop(); overrides camera_config
            verbose: Print lifecycle messages
        """
        self.camera_config = camera_config or CameraConfig()
        self.classifier = classifier or GestureClassifier()
        self.camera_factory = camera_factory or (lambda: Camera(self.camera_config))
        self.verbose = verbose

        self._source = None
        self._sampler: Optional[FrameSampler] = None
        self._snapshot = DetectionSnapshot()

        # Latest frame, kept only so the display can draw it; replaced every tick
        self.preview: Optional[Frame] = None

    @property
    def snapshot(self) -> DetectionSnapshot:
        return self._snapshot

    @property
    def is_active(self) -> bool:
        return self._snapshot.is_active

    def start(self) -> DetectionSnapshot:
        """
        Acquire the camera and begin detecting.

        Returns:
            Active snapshot, or an inactive one carrying an error message
        """
        if self.is_active:
            return self._snapshot

        try:
            source = self.camera_factory()
        except CameraError as e:
            print(f"[SESSION] Camera error: {e}")
            self._snapshot = DetectionSnapshot(error=CAMERA_ACCESS_ERROR)
            return self._snapshot

        self._source = source
        self._sampler = FrameSampler(source)
        self._snapshot = DetectionSnapshot(is_active=True)

        if self.verbose:
            print("[SESSION] Detection started.")
        return self._snapshot

    def tick(self) -> DetectionSnapshot:
        """
        Sample and classify one frame.

        Returns:
            The new snapshot; unchanged when inactive or when no frame is ready
        """
        if not self.is_active:
            return self._snapshot

        try:
            frame = self._sampler.sample()
        except CameraError as e:
            print(f"[SESSION] Camera error: {e}")
            self.stop()
            self._snapshot = replace(self._snapshot, error=CAMERA_LOST_ERROR)
            return self._snapshot

        if frame is None:
            return self._snapshot

        self.preview = frame
        result = self.classifier.classify(frame)
        self._snapshot = DetectionSnapshot(
            is_active=True,
            gesture=result.label,
            confidence=result.confidence,
        )
        return self._snapshot

    def stop(self) -> DetectionSnapshot:
        """Release the camera and reset to the idle snapshot. Safe to call twice."""
        if self._source is not None:
            self._source.stop()
            if self.verbose:
                print("[SESSION] Detection stopped.")
        self._source = None
        self._sampler = None
        self.preview = None
        self._snapshot = DetectionSnapshot()
        return self._snapshot

    def toggle(self) -> DetectionSnapshot:
        """Start when stopped, stop when running."""
        if self.is_active:
            return self.stop()
        return self.start()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
