from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..colors.rgb import ColorRGB
from ..errors import InvalidArgumentError
from ..random_source import RandomSource
from .partitions import partition


@dataclass(frozen=True)
class ColorStop:
    """A color anchored at a normalized horizontal position in ``[0, 1]``."""
    color: ColorRGB
    position: float


def map_to_stops(
    colors: Sequence[ColorRGB],
    width: int,
    random: RandomSource,
) -> List[ColorStop]:
    """
    Place ``colors`` along ``[0, 1]`` using a jittered column partition.

    The first color sits at 0.0. The remaining ``len(colors) - 1`` colors sit
    at the right edge of each column of ``partition(random, len(colors) - 1,
    width)``, so the last one lands exactly on 1.0 and positions never
    decrease.

    Args:
        colors: Palette, left to right.
        width: Image width in pixels.
        random: Random source handed to the partitioner.

    Returns:
        One stop per color.
    """
    if len(colors) < 2:
        raise InvalidArgumentError(f"at least 2 colors are required for color stops, got {len(colors)}")

    segments = partition(random, len(colors) - 1, width)

    stops = [ColorStop(colors[0], 0.0)]
    cursor = 0
    for color, segment in zip(colors[1:], segments):
        cursor += segment
        stops.append(ColorStop(color, cursor / width))
    return stops


def validate_stops(stops: Sequence[ColorStop]) -> None:
    """Check the invariants the rasterizer relies on."""
    if len(stops) < 2:
        raise InvalidArgumentError(f"at least 2 color stops are required, got {len(stops)}")
    if stops[0].position != 0.0 or stops[-1].position != 1.0:
        raise InvalidArgumentError(
            f"color stops must span [0, 1], got [{stops[0].position}, {stops[-1].position}]"
        )
    for left, right in zip(stops[:-1], stops[1:]):
        if right.position < left.position:
            raise InvalidArgumentError("color stop positions must be non-decreasing")
