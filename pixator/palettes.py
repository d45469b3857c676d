"""
Palette generation.

Two kinds of palette feed the stripe renderer:

- ``random_palette``: independent uniformly random colors.
- ``rainbow_palette``: the ROYGBIV sequence rotated by a random shift, with a
  random number of linearly interpolated colors between neighbouring hues.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .colors.rgb import ColorRGB
from .config import CHANNEL_MAX, DEFAULT_CONFIG, ROYGBIV_STEP_WIDTH, StripeConfig
from .errors import InvalidArgumentError
from .random_source import RandomSource
from .samples.colors import ROYGBIV

logger = logging.getLogger(__name__)


def random_color(random: RandomSource) -> ColorRGB:
    return ColorRGB(tuple(random.next_int(0, CHANNEL_MAX + 1) for _ in range(3)))


def random_palette(random: RandomSource, count: int) -> List[ColorRGB]:
    """Draw ``count`` colors with every channel uniform over ``[0, 255]``."""
    if count < 2:
        raise InvalidArgumentError(f"a palette needs at least 2 colors, got {count}")
    return [random_color(random) for _ in range(count)]


def random_stripe_palette(
    random: RandomSource,
    width: int,
    config: Optional[StripeConfig] = None,
) -> List[ColorRGB]:
    """
    Random palette sized for an image ``width`` pixels wide.

    The column count is drawn from ``config.column_bounds(width)`` and the
    palette holds one color more than there are columns, one per column edge.
    """
    config = config or DEFAULT_CONFIG
    low, high = config.column_bounds(width)
    columns = random.next_int(low, high)
    logger.debug("random palette: %d columns for width %d", columns, width)
    return random_palette(random, columns + 1)


def rotate(colors: Sequence[ColorRGB], shift: int) -> List[ColorRGB]:
    """Rotate ``colors`` left by ``shift`` places."""
    if not colors:
        return []
    shift %= len(colors)
    return list(colors[shift:]) + list(colors[:shift])


def interpolate_steps(start: ColorRGB, end: ColorRGB, steps: int) -> List[ColorRGB]:
    """
    Return the ``steps`` colors strictly between ``start`` and ``end``.

    Each channel of step ``i`` (1-based) is
    ``start - round((start - end) / (steps + 1) * i)``.
    """
    return [
        ColorRGB(tuple(
            s - round((s - e) / (steps + 1) * i)
            for s, e in zip(start.value, end.value)
        ))
        for i in range(1, steps + 1)
    ]


def interpolate_sequence(hues: Sequence[ColorRGB], steps: int) -> List[ColorRGB]:
    """
    Expand ``hues`` with ``steps`` interpolated colors between each neighbour pair.

    The sequence is open: the last hue is not joined back to the first, so the
    result holds ``(len(hues) - 1) * (steps + 1) + 1`` colors.
    """
    if steps < 0:
        raise InvalidArgumentError(f"steps must be non-negative, got {steps}")
    if not hues:
        return []

    palette: List[ColorRGB] = []
    for start, end in zip(hues[:-1], hues[1:]):
        palette.append(start)
        palette.extend(interpolate_steps(start, end, steps))
    palette.append(hues[-1])
    return palette


def rainbow_palette(random: RandomSource, width: int) -> List[ColorRGB]:
    """
    Shifted, interpolated ROYGBIV palette for an image ``width`` pixels wide.

    Draws ``shift`` from ``[0, 7)`` and ``steps`` from ``[0, width // 21)``;
    wider images get denser interpolation.

    Raises:
        InvalidArgumentError: If ``width`` is below 21 pixels.
    """
    if width < ROYGBIV_STEP_WIDTH:
        raise InvalidArgumentError(
            f"rainbow stripes need a width of at least {ROYGBIV_STEP_WIDTH} pixels, got {width}"
        )

    shift = random.next_int(0, len(ROYGBIV))
    steps = random.next_int(0, width // ROYGBIV_STEP_WIDTH)
    logger.debug("rainbow palette: shift=%d steps=%d", shift, steps)
    return interpolate_sequence(rotate(ROYGBIV, shift), steps)
