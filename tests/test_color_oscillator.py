# test_color_oscillator.py

from color_oscillator import advance_color, format_hsla, hsla_tuple, step_channel
from point import Direction, Point, create_point
from settings import Settings
from tests.helpers import FixedRandom


def test_channel_turns_around_at_lower_bound():
    value, direction = step_channel(3.0, Direction.DECREASING, 0.0, 360.0, 10.0, FixedRandom(0.5))
    assert value == 0.0
    assert direction is Direction.INCREASING


def test_channel_turns_around_at_upper_bound():
    value, direction = step_channel(95.0, Direction.INCREASING, 55.0, 100.0, 10.0, FixedRandom(0.9))
    assert value == 100.0
    assert direction is Direction.DECREASING


def test_channel_keeps_direction_inside_bounds():
    value, direction = step_channel(60.0, Direction.INCREASING, 45.0, 80.0, 10.0, FixedRandom(0.5))
    assert value == 65.0
    assert direction is Direction.INCREASING


def test_channels_stay_in_bounds(rng):
    settings = Settings(color_speed=40.0)
    point = create_point(settings, 100, 100, rng)
    for _ in range(2000):
        advance_color(point, settings, rng)
        assert 0.0 <= point.h <= 360.0
        assert settings.s_min <= point.s <= settings.s_max
        assert settings.l_min <= point.l <= settings.l_max


def test_format_hsla_rounds_channels():
    point = Point(x=0, y=0, vx=1, vy=1, h=119.6, s=60.2, l=49.7)
    assert hsla_tuple(point) == (120, 60, 50, 100)
    assert format_hsla(point) == "hsla(120,60%,50%,1)"
