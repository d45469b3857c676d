"""
Pixator Color Classes
=====================

Immutable 8-bit color values used by palettes, color stops and pixel buffers.

Usage
-----
>>> from pixator.colors import RGB
>>> color = RGB((255, 128, 0))
>>> color.value
(255, 128, 0)
>>> color.r
255

Values are clamped to ``[0, 255]`` on construction and instances are frozen
afterwards, so a color can be shared between stops and palettes safely.
"""

from .color_base import ColorBase
from .rgb import ColorRGB, RGB

__all__ = ["ColorBase", "ColorRGB", "RGB"]
