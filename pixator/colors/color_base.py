from __future__ import annotations
from typing import Any, ClassVar, Iterator, Sequence, Tuple
from numpy import ndarray
import numpy as np

from ..errors import InvalidArgumentError


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes

    num_channels: ClassVar[int] = 1
    mode: ClassVar[str]
    maxima: ClassVar[Tuple[int, ...]]
    null_value: ClassVar[Tuple[int, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Sequence[Any] | ndarray | ColorBase) -> None:
        if isinstance(value, ColorBase):
            if value.mode != self.mode:
                raise InvalidArgumentError(f"{self.mode} cannot be built from a {value.mode} color")
            value = value.value

        if isinstance(value, ndarray):
            if value.shape != (self.num_channels,):
                raise InvalidArgumentError(
                    f"{self.mode} expects an array of shape ({self.num_channels},), got {value.shape}"
                )
            value = value.tolist()

        if len(value) != self.num_channels:
            raise InvalidArgumentError(f"{self.mode} expects {self.num_channels} channels, got {len(value)}")

        # type enforcement and clamping
        channels = tuple(
            max(0, min(int(round(v)), m)) for v, m in zip(value, self.maxima)
        )

        # safe assignment; __setattr__ still allows it during init
        self._value = channels

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[int, ...]:
        return self._value

    def as_array(self, dtype=np.uint8) -> ndarray:
        """Return the channels as a 1D numpy array."""
        return np.array(self._value, dtype=dtype)

    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index: int) -> int:
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorBase):
            return self.mode == other.mode and self._value == other._value
        if isinstance(other, tuple):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        # same hash as the plain channel tuple it compares equal to
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"
