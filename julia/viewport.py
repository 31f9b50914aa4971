"""Mapping from raster pixels to points of the complex plane."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Viewport:
    """Rectangular region of the complex plane mapped onto the raster."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def x_width(self) -> float:
        return self.x_max - self.x_min

    @property
    def y_width(self) -> float:
        return self.y_max - self.y_min

    def is_degenerate(self) -> bool:
        """True when either axis interval is empty or inverted."""

        return not (self.x_min < self.x_max and self.y_min < self.y_max)


def pixel_to_complex(viewport: Viewport, width: int, height: int, x: int, y: int) -> complex:
    """Map pixel ``(x, y)`` to its sample point.

    Pixels outside the raster are extrapolated along the same lines rather
    than rejected.
    """

    real = float(x) / float(width) * viewport.x_width + viewport.x_min
    imag = float(y) / float(height) * viewport.y_width + viewport.y_min
    return complex(real, imag)


def row_samples(viewport: Viewport, width: int, height: int, y: int) -> np.ndarray:
    """Return the sample points of row ``y`` as a complex128 array."""

    xs = np.arange(width, dtype=np.float64)
    real = xs / np.float64(width) * np.float64(viewport.x_width) + np.float64(viewport.x_min)
    imag = np.float64(y) / np.float64(height) * np.float64(viewport.y_width) + np.float64(viewport.y_min)
    samples = np.empty(width, dtype=np.complex128)
    samples.real = real
    samples.imag = imag
    return samples
