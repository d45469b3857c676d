from .partitions import partition
from .stops import ColorStop, map_to_stops
from .rasterizer import rasterize

__all__ = ["partition", "ColorStop", "map_to_stops", "rasterize"]
