from ..colors.rgb import ColorRGB
# Named-color values (CSS / X11 table)

RED = ColorRGB((255, 0, 0))
ORANGE = ColorRGB((255, 165, 0))
YELLOW = ColorRGB((255, 255, 0))
GREEN = ColorRGB((0, 128, 0))
BLUE = ColorRGB((0, 0, 255))
INDIGO = ColorRGB((75, 0, 130))
VIOLET = ColorRGB((238, 130, 238))

# ROYGBIV, in order. A tuple of frozen colors, so it cannot be mutated.
ROYGBIV = (RED, ORANGE, YELLOW, GREEN, BLUE, INDIGO, VIOLET)
