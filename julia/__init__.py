"""Public API for Julia set rendering utilities."""

from .palette import colorize, intensity_to_color
from .renderer import (
    ESCAPE_RADIUS,
    RenderParameters,
    RenderResult,
    escape_time,
    escape_time_row,
    normalize_intensity,
    render_frame,
    render_row,
)
from .viewport import Viewport, pixel_to_complex, row_samples

__all__ = [
    "ESCAPE_RADIUS",
    "RenderParameters",
    "RenderResult",
    "Viewport",
    "colorize",
    "escape_time",
    "escape_time_row",
    "intensity_to_color",
    "normalize_intensity",
    "pixel_to_complex",
    "render_frame",
    "render_row",
    "row_samples",
]
