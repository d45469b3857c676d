"""
Seedable random sources.

Everything random in a render goes through a :class:`RandomSource`, so the
same seed and the same sequence of calls always give the same image. Only that
determinism is guaranteed; the exact numbers depend on numpy's bit generator.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

import numpy as np

from .config import SEED_MASK
from .errors import InvalidArgumentError, InvalidRangeError

logger = logging.getLogger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        ...


def check_range(min_inclusive: int, max_exclusive: int) -> None:
    """Raise InvalidRangeError when ``[min_inclusive, max_exclusive)`` is empty."""
    if max_exclusive <= min_inclusive:
        raise InvalidRangeError(
            f"Empty random range: max_exclusive ({max_exclusive}) must be greater "
            f"than min_inclusive ({min_inclusive})"
        )


class SeededRandomSource:
    """
    Random source backed by ``numpy.random.default_rng``.

    Args:
        seed: 32-bit seed. Negative values are folded into the unsigned range,
              so a signed 32-bit seed and its unsigned twin give the same
              sequence. ``None`` seeds from operating-system entropy.
    """

    __slots__ = ("_seed", "_rng")

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
                raise InvalidArgumentError(f"seed must be an integer or None, got {type(seed).__name__}")
            seed = int(seed) & SEED_MASK
        self._seed = seed
        self._rng = np.random.default_rng(seed)
        logger.debug("random source seeded with %s", "entropy" if seed is None else seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        check_range(min_inclusive, max_exclusive)
        return int(self._rng.integers(min_inclusive, max_exclusive))
