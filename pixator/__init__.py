"""
Pixator - Procedural Stripe Images
==================================

Deterministically turns ``(width, height, seed)`` into an image of vertical
stripes joined by a continuous horizontal gradient.

Quick Start
-----------
>>> from pixator import render, StripeMode
>>>
>>> buffer = render(700, 100, seed=42)
>>> buffer.shape
(100, 700, 3)
>>>
>>> rainbow = render(700, 100, seed=42, mode=StripeMode.RAINBOW)
>>> rainbow.to_image().save("rainbow.png")

Pipeline
--------
- random_source: seedable bounded integer generator
- palettes: random or shifted/interpolated ROYGBIV colors
- gradients.partitions: exact, jittered split of the width into columns
- gradients.stops: colors placed at normalized column edges
- gradients.rasterizer: per-column linear interpolation, tiled over every row
"""

from .colors.rgb import ColorRGB, RGB
from .config import StripeConfig, StripeMode
from .errors import InvalidArgumentError, InvalidRangeError, PixatorError
from .gradients import ColorStop, map_to_stops, partition, rasterize
from .palettes import rainbow_palette, random_palette
from .pixel_buffer import PixelBuffer
from .random_source import RandomSource, SeededRandomSource
from .render import render

__version__ = "1.0.0"

__all__ = [
    # Entry point
    "render",

    # Configuration
    "StripeMode", "StripeConfig",

    # Building blocks
    "SeededRandomSource", "RandomSource",
    "partition",
    "random_palette", "rainbow_palette",
    "ColorStop", "map_to_stops",
    "rasterize",

    # Values
    "ColorRGB", "RGB", "PixelBuffer",

    # Errors
    "PixatorError", "InvalidArgumentError", "InvalidRangeError",
]
