"""
Exceptions raised while acquiring webcam frames.
"""


class CameraError(Exception):
    """Base exception for camera-related errors."""
    pass


class CameraNotFoundError(CameraError):
    """Raised when the camera cannot be opened (missing, busy or access denied)."""
    pass


class CameraConnectionError(CameraError):
    """Raised when the camera stops delivering frames during a session."""
    pass

