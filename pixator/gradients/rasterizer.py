from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray
from typing import Sequence

from ..errors import InvalidArgumentError
from ..pixel_buffer import PixelBuffer
from .stops import ColorStop, validate_stops


def stop_arrays(stops: Sequence[ColorStop]) -> tuple[NDArray, NDArray]:
    """Split stops into a positions array (N,) and a float colors array (N, 3)."""
    positions = np.array([s.position for s in stops], dtype=np.float64)
    colors = np.array([s.color.value for s in stops], dtype=np.float64)
    return positions, colors


def interpolate_row(width: int, stops: Sequence[ColorStop]) -> NDArray:
    """
    Sample the horizontal gradient once per pixel column.

    Column ``x`` sits at ``p = x / width``. It is blended between the stops
    ``s_i, s_i+1`` with ``s_i.position <= p <= s_i+1.position`` using
    ``t = (p - s_i.position) / (s_i+1.position - s_i.position)``, or ``t = 0``
    where two stops share a position. Channels are rounded half to even.

    Returns:
        ``uint8`` array of shape (width, 3).
    """
    positions, colors = stop_arrays(stops)
    p = np.arange(width, dtype=np.float64) / width

    # index of the left stop of each bracketing pair, clamped to the first/last pair
    left = np.searchsorted(positions, p, side="right") - 1
    left = np.clip(left, 0, len(positions) - 2)
    right = left + 1

    span = positions[right] - positions[left]
    offset = p - positions[left]
    t = np.divide(offset, span, out=np.zeros_like(p), where=span > 0)
    t = np.clip(t, 0.0, 1.0)

    start = colors[left]
    end = colors[right]
    row = start + t[:, None] * (end - start)
    return np.rint(row).astype(np.uint8)


def rasterize(width: int, height: int, stops: Sequence[ColorStop]) -> PixelBuffer:
    """
    Fill a ``width x height`` buffer with the horizontal gradient through ``stops``.

    Every row is identical: the image is vertical stripes with no vertical
    variation.
    """
    if width <= 0 or height <= 0:
        raise InvalidArgumentError(f"width and height must be positive integers, got {width}x{height}")
    validate_stops(stops)

    row = interpolate_row(width, stops)

    # Stack vertically
    return PixelBuffer(np.tile(row, (height, 1, 1)))
