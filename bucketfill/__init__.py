"""Paint bucket flood fill for RGBA pixel buffers."""

from .color import Color, parse_color
from .draw import PixelCanvas
from .errors import FillError, InvalidColorSpec, InvalidSeed, InvalidTolerance
from .fill import Surface, fill_pixels, flood_fill, tolerance_window

__all__ = [
    "Color",
    "FillError",
    "InvalidColorSpec",
    "InvalidSeed",
    "InvalidTolerance",
    "PixelCanvas",
    "Surface",
    "fill_pixels",
    "flood_fill",
    "parse_color",
    "tolerance_window",
]
