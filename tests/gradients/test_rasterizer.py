import numpy as np
import pytest

from pixator.colors import ColorRGB
from pixator.errors import InvalidArgumentError
from pixator.gradients.rasterizer import interpolate_row, rasterize
from pixator.gradients.stops import ColorStop, map_to_stops
from pixator.palettes import random_palette
from pixator.random_source import SeededRandomSource

BLACK = ColorRGB((0, 0, 0))
WHITE = ColorRGB((255, 255, 255))
RED = ColorRGB((255, 0, 0))
GREEN = ColorRGB((0, 255, 0))
BLUE = ColorRGB((0, 0, 255))


def test_two_stop_row():
    row = interpolate_row(4, [ColorStop(BLACK, 0.0), ColorStop(WHITE, 1.0)])
    assert row.dtype == np.uint8
    assert np.array_equal(row[:, 0], [0, 64, 128, 191])
    assert np.array_equal(row[:, 0], row[:, 1])
    assert np.array_equal(row[:, 0], row[:, 2])


def test_three_stop_row():
    stops = [ColorStop(RED, 0.0), ColorStop(GREEN, 0.5), ColorStop(BLUE, 1.0)]
    row = interpolate_row(4, stops)
    expected = np.array([
        (255, 0, 0),
        (128, 128, 0),
        (0, 255, 0),
        (0, 128, 128),
    ])
    assert np.array_equal(row, expected)


def test_shared_position_does_not_divide_by_zero():
    stops = [
        ColorStop(RED, 0.0),
        ColorStop(GREEN, 0.5),
        ColorStop(BLUE, 0.5),
        ColorStop(WHITE, 1.0),
    ]
    row = interpolate_row(2, stops)
    assert tuple(row[0]) == RED.value
    assert tuple(row[1]) == BLUE.value


def test_rasterize_tiles_rows():
    stops = [ColorStop(RED, 0.0), ColorStop(BLUE, 1.0)]
    buffer = rasterize(16, 5, stops)
    assert buffer.shape == (5, 16, 3)
    arr = np.asarray(buffer)
    for y in range(1, 5):
        assert np.array_equal(arr[y], arr[0])


def test_rasterize_hits_stop_colors_exactly():
    width = 300
    random = SeededRandomSource(7)
    palette = random_palette(random, 40)
    stops = map_to_stops(palette, width, random)
    buffer = rasterize(width, 3, stops)
    for stop in stops[:-1]:
        x = int(round(stop.position * width))
        assert buffer.pixel(x, 0) == stop.color
        assert buffer.pixel(x, 2) == stop.color


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-3, 4)])
def test_rasterize_rejects_bad_size(width, height):
    with pytest.raises(InvalidArgumentError):
        rasterize(width, height, [ColorStop(RED, 0.0), ColorStop(BLUE, 1.0)])


def test_rasterize_rejects_bad_stops():
    with pytest.raises(InvalidArgumentError):
        rasterize(4, 4, [ColorStop(RED, 0.0)])
    with pytest.raises(InvalidArgumentError):
        rasterize(4, 4, [ColorStop(RED, 0.0), ColorStop(BLUE, 0.9)])
