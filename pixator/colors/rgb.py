from typing import ClassVar, Tuple
from .color_base import ColorBase
from ..config import CHANNEL_MAX


class ColorRGB(ColorBase):
    """Opaque 8-bit RGB color. Alpha is implied and always fully opaque."""
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "rgb"
    maxima: ClassVar[Tuple[int, int, int]] = (CHANNEL_MAX, CHANNEL_MAX, CHANNEL_MAX)
    null_value: ClassVar[Tuple[int, int, int]] = (0, 0, 0)

    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    @property
    def alpha(self) -> int:
        return CHANNEL_MAX


RGB = ColorRGB
