"""
Pixel Buffer
============

The output of a render: a ``height x width`` grid of opaque RGB colors backed
by a ``uint8`` numpy array of shape ``(height, width, 3)``.

Serializing the buffer (PNG, JPEG, raw bytes on a socket) is the caller's job.
``to_image`` hands over a Pillow image for that.
"""

from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

from .colors.rgb import ColorRGB
from .config import CHANNEL_MAX
from .errors import InvalidArgumentError


class PixelBuffer:
    """
    Width x height grid of ColorRGB values.

    Args:
        value: ``uint8`` array of shape ``(height, width, 3)``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: NDArray) -> None:
        if not isinstance(value, np.ndarray):
            raise TypeError("PixelBuffer requires a numpy array")
        if value.ndim != 3 or value.shape[-1] != 3:
            raise InvalidArgumentError(
                f"PixelBuffer requires an array of shape (height, width, 3), got {value.shape}"
            )
        if value.dtype != np.uint8:
            value = np.rint(np.clip(value, 0, CHANNEL_MAX)).astype(np.uint8)
        self._value = value

    @property
    def value(self) -> NDArray:
        return self._value

    @property
    def width(self) -> int:
        return self._value.shape[1]

    @property
    def height(self) -> int:
        return self._value.shape[0]

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self._value.shape

    def __array__(self, dtype=None, copy=None) -> NDArray:
        """Enable numpy array interface. Copies unless ``copy`` is None or False."""
        if dtype is None or np.dtype(dtype) == self._value.dtype:
            return self._value.copy() if copy else self._value
        if copy is False:
            raise ValueError(f"cannot convert a uint8 PixelBuffer to {np.dtype(dtype)} without copying")
        return self._value.astype(dtype)

    def pixel(self, x: int, y: int) -> ColorRGB:
        """Color at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside a {self.width}x{self.height} buffer")
        return ColorRGB(self._value[y, x])

    def tobytes(self) -> bytes:
        """Raw row-major RGB bytes."""
        return self._value.tobytes()

    def to_rgba(self) -> NDArray:
        """Array of shape ``(height, width, 4)`` with a fully opaque alpha channel."""
        alpha = np.full(self._value.shape[:2] + (1,), CHANNEL_MAX, dtype=np.uint8)
        return np.concatenate([self._value, alpha], axis=-1)

    def to_image(self) -> Image.Image:
        """Return the buffer as a Pillow image in ``RGB`` mode."""
        return Image.fromarray(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return np.array_equal(self._value, other._value)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"
