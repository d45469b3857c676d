"""
Stripe rendering entry point.

``render`` is a pure function of its arguments: it builds its own random
source, palette, stops and buffer on every call and shares nothing between
calls, so concurrent renders need no locking.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

import numpy as np

from .colors.rgb import ColorRGB
from .config import StripeConfig, StripeMode, resolve_mode
from .errors import InvalidArgumentError
from .gradients.rasterizer import rasterize
from .gradients.stops import map_to_stops
from .palettes import rainbow_palette, random_stripe_palette
from .pixel_buffer import PixelBuffer
from .random_source import RandomSource, SeededRandomSource

logger = logging.getLogger(__name__)


def _check_dimension(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")


def build_palette(
    random: RandomSource,
    width: int,
    mode: StripeMode,
    config: Optional[StripeConfig] = None,
) -> List[ColorRGB]:
    if mode is StripeMode.RAINBOW:
        return rainbow_palette(random, width)
    return random_stripe_palette(random, width, config)


def render_with(
    random: RandomSource,
    width: int,
    height: int,
    mode: Union[StripeMode, str] = StripeMode.RANDOM,
    config: Optional[StripeConfig] = None,
) -> PixelBuffer:
    """Render using an already constructed random source."""
    _check_dimension("width", width)
    _check_dimension("height", height)
    width, height = int(width), int(height)
    mode = resolve_mode(mode)

    palette = build_palette(random, width, mode, config)
    stops = map_to_stops(palette, width, random)
    logger.debug("rendering %dx%d %s stripes with %d stops", width, height, mode.value, len(stops))
    return rasterize(width, height, stops)


def render(
    width: int,
    height: int,
    seed: Optional[int] = None,
    mode: Union[StripeMode, str] = StripeMode.RANDOM,
    config: Optional[StripeConfig] = None,
) -> PixelBuffer:
    """
    Render a striped horizontal gradient.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        seed: 32-bit seed. The same seed and arguments always give the same
              pixels. ``None`` picks a fresh seed from system entropy.
        mode: ``StripeMode.RANDOM`` for random colors, ``StripeMode.RAINBOW``
              for a shifted ROYGBIV sequence. String values are accepted.
        config: Column count tunables for random mode.

    Returns:
        A new PixelBuffer of ``width x height`` colors.

    Raises:
        InvalidArgumentError: Non-positive dimensions, an unknown mode, a bad
            seed, or a width below 21 pixels in rainbow mode.
    """
    return render_with(SeededRandomSource(seed), width, height, mode, config)
