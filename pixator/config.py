# No dependencies beyond errors
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidArgumentError


class StripeMode(str, Enum):
    RANDOM = "random"
    RAINBOW = "rainbow"


# Rainbow interpolation density: one extra step per 21 pixels of width
ROYGBIV_STEP_WIDTH = 21
CHANNEL_MAX = 255
SEED_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class StripeConfig:
    """
    Tunables for random-stripe mode.

    The number of columns is drawn between ``width // min_column_divisor`` and
    ``width // max_column_divisor``, so the defaults give stripes roughly two to
    five pixels wide before jitter.
    """
    min_column_divisor: int = 5
    max_column_divisor: int = 2

    def __post_init__(self) -> None:
        if self.min_column_divisor <= 0 or self.max_column_divisor <= 0:
            raise InvalidArgumentError("column divisors must be positive integers")
        if self.max_column_divisor > self.min_column_divisor:
            raise InvalidArgumentError(
                "max_column_divisor must not exceed min_column_divisor "
                f"(got {self.max_column_divisor} > {self.min_column_divisor})"
            )

    def column_bounds(self, width: int) -> tuple[int, int]:
        """Return the ``[low, high)`` bounds for the random column count."""
        low = max(1, width // self.min_column_divisor)
        high = max(low + 1, width // self.max_column_divisor + 1)
        return low, min(high, width + 1)


DEFAULT_CONFIG = StripeConfig()


def resolve_mode(mode: "StripeMode | str") -> StripeMode:
    """Accept a StripeMode member or its string value."""
    if isinstance(mode, StripeMode):
        return mode
    try:
        return StripeMode(str(mode).lower())
    except ValueError:
        valid = ", ".join(m.value for m in StripeMode)
        raise InvalidArgumentError(f"Unknown stripe mode: {mode!r} (expected one of: {valid})") from None
