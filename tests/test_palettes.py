import pytest

from pixator.colors import ColorRGB
from pixator.config import StripeConfig
from pixator.errors import InvalidArgumentError
from pixator.palettes import (
    interpolate_sequence,
    interpolate_steps,
    rainbow_palette,
    random_palette,
    random_stripe_palette,
    rotate,
)
from pixator.random_source import SeededRandomSource
from pixator.samples.colors import GREEN, ORANGE, RED, ROYGBIV, YELLOW


def test_random_palette_scripted(fixed_random):
    random = fixed_random([1, 2, 3, 255, 0, 128])
    assert random_palette(random, 2) == [ColorRGB((1, 2, 3)), ColorRGB((255, 0, 128))]
    assert random.calls == [(0, 256)] * 6


def test_random_palette_needs_two_colors(fixed_random):
    with pytest.raises(InvalidArgumentError):
        random_palette(fixed_random([]), 1)


def test_random_stripe_palette_size(fixed_random):
    # width 10: columns drawn from [2, 6)
    random = fixed_random([3] + [0] * 12)
    palette = random_stripe_palette(random, 10)
    assert len(palette) == 4
    assert random.calls[0] == (2, 6)


def test_random_stripe_palette_custom_config(fixed_random):
    random = fixed_random([10] + [0] * 33)
    palette = random_stripe_palette(random, 100, StripeConfig(min_column_divisor=10, max_column_divisor=10))
    assert len(palette) == 11
    assert random.calls[0] == (10, 11)


def test_rotate():
    assert rotate([1, 2, 3, 4], 0) == [1, 2, 3, 4]
    assert rotate([1, 2, 3, 4], 1) == [2, 3, 4, 1]
    assert rotate([1, 2, 3, 4], 6) == [3, 4, 1, 2]
    assert rotate([], 3) == []


def test_interpolate_steps():
    assert interpolate_steps(RED, ORANGE, 2) == [ColorRGB((255, 55, 0)), ColorRGB((255, 110, 0))]
    assert interpolate_steps(RED, ORANGE, 0) == []


def test_interpolate_steps_rounds_half_to_even():
    assert interpolate_steps(YELLOW, GREEN, 1) == [ColorRGB((127, 191, 0))]


def test_interpolate_sequence_is_open():
    hues = [RED, ORANGE, YELLOW]
    palette = interpolate_sequence(hues, 2)
    assert len(palette) == 7
    assert palette[0] == RED
    assert palette[3] == ORANGE
    assert palette[-1] == YELLOW


def test_rainbow_palette_unshifted(fixed_random):
    random = fixed_random([0, 0])
    assert rainbow_palette(random, 21) == list(ROYGBIV)
    assert random.calls == [(0, 7), (0, 1)]


def test_rainbow_palette_shift_and_steps(fixed_random):
    random = fixed_random([2, 1])
    palette = rainbow_palette(random, 42)
    assert len(palette) == 13
    assert palette[0] == YELLOW
    assert palette[1] == ColorRGB((127, 191, 0))
    assert palette[2] == GREEN
    assert palette[-3] == RED
    assert palette[-1] == ORANGE


def test_rainbow_palette_length_follows_steps():
    for seed in range(20):
        palette = rainbow_palette(SeededRandomSource(seed), 210)
        assert (len(palette) - 1) % 6 == 0
        steps = (len(palette) - 1) // 6 - 1
        assert 0 <= steps < 10


@pytest.mark.parametrize("width", [1, 10, 20])
def test_rainbow_palette_too_narrow(width, fixed_random):
    with pytest.raises(InvalidArgumentError):
        rainbow_palette(fixed_random([]), width)
