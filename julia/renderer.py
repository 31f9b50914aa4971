"""Rendering primitives for Julia set rasters."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from .palette import colorize
from .viewport import Viewport, row_samples

ESCAPE_RADIUS = 10.0
MAX_INTENSITY = 255

ProgressCallback = Callable[[int], None]


@dataclass(frozen=True)
class RenderParameters:
    """Parameters that describe a single render of a Julia set."""

    width: int
    height: int
    max_iterations: int
    c: complex
    viewport: Viewport

    def __post_init__(self) -> None:
        for name in ("width", "height", "max_iterations"):
            value = getattr(self, name)
            if int(value) != value or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class RenderResult:
    """A fully populated raster and the parameters that produced it."""

    pixels: np.ndarray
    params: RenderParameters

    @property
    def size(self) -> tuple[int, int]:
        return self.params.width, self.params.height


def escape_time(z0: complex, c: complex, max_iterations: int) -> int:
    """Count applications of ``z*z + c`` before ``|z|`` exceeds the escape radius.

    The count is capped at ``max_iterations``; points that reach the cap are
    treated as members of the set.
    """

    z = complex(z0)
    n = 0
    while n < max_iterations and abs(z) <= ESCAPE_RADIUS:
        z = z * z + c
        n += 1
    return n


def normalize_intensity(n: int, max_iterations: int) -> int:
    return int(n / max_iterations * float(MAX_INTENSITY))


def _julia_step(zs: np.ndarray, c: np.complex128, ns: np.ndarray, active: np.ndarray) -> np.ndarray:
    """Advance the points that have not escaped by one iteration."""

    z = zs[active]
    zs[active] = z * z + c
    ns[active] += 1
    still_bounded = np.abs(zs[active]) <= ESCAPE_RADIUS
    active[active] = still_bounded
    return active


def escape_time_row(samples: np.ndarray, c: complex, max_iterations: int) -> np.ndarray:
    """Vectorized :func:`escape_time` over an array of starting points.

    Escaped points are left untouched on later steps so their values stay
    finite.
    """

    zs = np.array(samples, dtype=np.complex128, copy=True)
    ns = np.zeros(zs.shape, dtype=np.int64)
    active = np.abs(zs) <= ESCAPE_RADIUS
    c = np.complex128(c)

    for _ in range(max_iterations):
        if not active.any():
            break
        active = _julia_step(zs, c, ns, active)
    return ns


def intensity_row(ns: np.ndarray, max_iterations: int) -> np.ndarray:
    scaled = ns.astype(np.float64) / np.float64(max_iterations) * np.float64(MAX_INTENSITY)
    return scaled.astype(np.uint8)


def render_row(params: RenderParameters, y: int) -> np.ndarray:
    """Compute the colors of row ``y`` as a ``(width, 3)`` uint8 array."""

    samples = row_samples(params.viewport, params.width, params.height, y)
    ns = escape_time_row(samples, params.c, params.max_iterations)
    return colorize(intensity_row(ns, params.max_iterations))


def render_frame(
    params: RenderParameters,
    *,
    workers: Optional[int] = None,
    progress: Optional[ProgressCallback] = None,
) -> RenderResult:
    """Render every row of the raster on a pool of worker threads.

    ``progress`` is called with the number of finished rows each time a row
    completes. The result is only returned once every row has been written.
    """

    pixels = np.zeros((params.height, params.width, 3), dtype=np.uint8)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {executor.submit(render_row, params, y): y for y in range(params.height)}
        for completed, future in enumerate(as_completed(futures), start=1):
            pixels[futures[future]] = future.result()
            if progress is not None:
                progress(completed)

    return RenderResult(pixels=pixels, params=params)
