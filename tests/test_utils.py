import math
import os

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from rising_drops.utils import (
    circles_overlap,
    clamp,
    faded_color,
    hsl_to_rgb,
    merged_radius,
    mix_hues,
    point_in_circle,
    split_radius,
    vertical_gradient,
)


def test_clamp_basic() -> None:
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_circles_overlap_is_strict() -> None:
    assert circles_overlap(0, 0, 10, 15, 0, 10) is True
    # touching exactly is not an overlap
    assert circles_overlap(0, 0, 10, 20, 0, 10) is False
    assert circles_overlap(0, 0, 10, 30, 0, 10) is False


def test_point_in_circle() -> None:
    assert point_in_circle(3, 4, 0, 0, 6) is True
    assert point_in_circle(3, 4, 0, 0, 5) is False


def test_merged_radius_formula_and_cap() -> None:
    expected = math.sqrt((math.pi * 400 + math.pi * 400) * 1.05 / math.pi)
    assert math.isclose(merged_radius(20, 20, 75), expected)
    assert math.isclose(expected, 28.98, abs_tol=0.01)
    assert merged_radius(60, 60, 75) == 75


def test_split_radius() -> None:
    assert math.isclose(split_radius(40, 1.0), 40 / math.sqrt(2))
    assert math.isclose(split_radius(40, 0.95), 40 / math.sqrt(2) * 0.95)


def test_mix_hues_wraps() -> None:
    assert mix_hues(100, 200) == 150
    assert mix_hues(0, 359) == 179.5
    assert 0 <= mix_hues(359.9, 359.9) < 360


def test_hsl_to_rgb_primaries() -> None:
    assert hsl_to_rgb((0, 100, 50)) == (255, 0, 0)
    assert hsl_to_rgb((120, 100, 50)) == (0, 255, 0)
    assert hsl_to_rgb((240, 100, 50)) == (0, 0, 255)
    assert hsl_to_rgb((0, 0, 100)) == (255, 255, 255)


def test_faded_color_is_lighter_and_translucent() -> None:
    base = (200, 75, 50)
    r, g, b, a = faded_color(base)
    assert (r, g, b) == hsl_to_rgb((200, 75, 80))
    assert sum((r, g, b)) > sum(hsl_to_rgb(base))
    assert a == 128


def test_vertical_gradient_shape_and_ends() -> None:
    arr = vertical_gradient(4, 10, (0, 0, 0), (200, 100, 50))
    assert arr.shape == (4, 10, 3)
    assert tuple(arr[0, 0]) == (0, 0, 0)
    assert tuple(arr[3, 9]) == (200, 100, 50)
    # rows brighten going down
    assert arr[0, 5, 0] > arr[0, 4, 0]
