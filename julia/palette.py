"""The built-in intensity-to-color scheme."""

from __future__ import annotations

import numpy as np

GREEN_SCALE = 0.6
BLUE_SCALE = 0.8


def intensity_to_color(intensity: int) -> tuple[int, int, int]:
    """Map an intensity in [0, 255] to an RGB triple."""

    return (
        int(intensity),
        int(intensity * GREEN_SCALE),
        int(intensity * BLUE_SCALE),
    )


def colorize(intensities: np.ndarray) -> np.ndarray:
    """Apply :func:`intensity_to_color` to every element of ``intensities``.

    Returns a uint8 array with a trailing RGB axis.
    """

    values = np.asarray(intensities, dtype=np.float64)
    rgb = np.empty(values.shape + (3,), dtype=np.uint8)
    rgb[..., 0] = values.astype(np.uint8)
    rgb[..., 1] = (values * GREEN_SCALE).astype(np.uint8)
    rgb[..., 2] = (values * BLUE_SCALE).astype(np.uint8)
    return rgb
