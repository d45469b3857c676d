"""
Column width partitioning.

Splits a total pixel width into ``count`` positive integer columns that sum to
the total exactly, with random jitter so the stripes are not all the same
width.
"""

from typing import List

from ..errors import InvalidArgumentError
from ..random_source import RandomSource


def uniform_widths(count: int, total_width: int) -> List[int]:
    """
    Split ``total_width`` into ``count`` near-equal widths.

    Every entry starts at ``round(total_width / count)``; the rounding drift is
    then spread as ``±1`` over the first ``|drift|`` entries.

    Example:
        >>> uniform_widths(3, 10)
        [4, 3, 3]
    """
    base = round(total_width / count)
    widths = [base] * count

    drift = base * count - total_width
    step = -1 if drift > 0 else 1
    for i in range(abs(drift)):
        widths[i] += step

    return widths


def pair_jitter(random: RandomSource, widths: List[int], base: int) -> List[int]:
    """
    Apply zero-sum jitter to ``widths`` in pairs.

    ``len(widths) // 2`` values are drawn from ``[base // 2, 2 * base) - base``.
    Entry ``i`` gets the draw and entry ``half + i`` gets its negation, so the
    total is unchanged. A draw is clamped so that neither entry of its pair
    drops below one pixel.
    """
    half = len(widths) // 2
    if half == 0:
        return list(widths)

    jittered = list(widths)
    for i in range(half):
        jitter = random.next_int(base // 2, 2 * base) - base
        # keep both columns of the pair at least one pixel wide
        jitter = min(max(jitter, 1 - jittered[i]), jittered[half + i] - 1)
        jittered[i] += jitter
        jittered[half + i] -= jitter

    return jittered


def shuffle(random: RandomSource, values: List[int]) -> List[int]:
    """Fisher-Yates shuffle driven by ``random``. Returns a new list."""
    shuffled = list(values)
    for i in range(len(shuffled) - 1, 0, -1):
        k = random.next_int(0, i + 1)
        shuffled[i], shuffled[k] = shuffled[k], shuffled[i]
    return shuffled


def partition(random: RandomSource, count: int, total_width: int) -> List[int]:
    """
    Partition ``total_width`` pixels into ``count`` jittered columns.

    Args:
        random: Source of the jitter draws and the shuffle.
        count: Number of columns.
        total_width: Width to split.

    Returns:
        List of ``count`` positive widths summing exactly to ``total_width``.

    Raises:
        InvalidArgumentError: If ``count`` or ``total_width`` is not positive,
            or if there are more columns than pixels.
    """
    if count <= 0:
        raise InvalidArgumentError(f"column count must be positive, got {count}")
    if total_width <= 0:
        raise InvalidArgumentError(f"total width must be positive, got {total_width}")
    if count > total_width:
        raise InvalidArgumentError(
            f"cannot split {total_width} pixels into {count} columns without zero-width columns"
        )

    base = round(total_width / count)
    widths = uniform_widths(count, total_width)
    widths = pair_jitter(random, widths, base)
    return shuffle(random, widths)
