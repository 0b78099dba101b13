"""
RGB skin-tone predicate and per-frame pixel statistics.
"""

import numpy as np

from .types import FrameStatistics


def skin_mask(pixels: np.ndarray) -> np.ndarray:
    """
    Mark skin-colored pixels of an RGB(A) image.

    A pixel counts as skin when r > 95, g > 40, b > 20,
    max(r, g, b) - min(r, g, b) > 15, |r - g| > 15, r > g and r > b.

    Args:
        pixels: Array of shape (H, W, 3) or (H, W, 4), RGB channel order

    Returns:
        Boolean mask of shape (H, W)
    """
    # int16 so channel differences of uint8 input cannot wrap
    rgb = pixels[..., :3].astype(np.int16)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    spread = rgb.max(axis=-1) - rgb.min(axis=-1)

    return (
        (r > 95) & (g > 40) & (b > 20)
        & (spread > 15)
        & (np.abs(r - g) > 15)
        & (r > g) & (r > b)
    )


def is_skin(r: int, g: int, b: int) -> bool:
    """Skin predicate for a single pixel."""
    return bool(skin_mask(np.array([[[r, g, b]]], dtype=np.uint8))[0, 0])


def frame_statistics(pixels: np.ndarray) -> FrameStatistics:
    """
    Aggregate skin count, skin ratio, skin center of mass and mean brightness.

    Empty images give zero counts, a 0.0 ratio and no center of mass.
    """
    height, width = pixels.shape[:2]
    total = int(height * width)
    if total == 0:
        return FrameStatistics(
            total_pixels=0,
            skin_pixels=0,
            skin_ratio=0.0,
            center_of_mass=None,
            average_brightness=0.0,
        )

    mask = skin_mask(pixels)
    skin = int(np.count_nonzero(mask))

    center = None
    if skin > 0:
        ys, xs = np.nonzero(mask)
        center = (float(xs.mean()), float(ys.mean()))

    brightness = pixels[..., :3].astype(np.float64).sum(axis=-1) / 3.0

    return FrameStatistics(
        total_pixels=total,
        skin_pixels=skin,
        skin_ratio=skin / total,
        center_of_mass=center,
        average_brightness=float(brightness.mean()),
    )
