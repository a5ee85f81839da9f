# test_settings.py

import pytest

from settings import BOUNDS, BoundedField, Settings, SettingsError


def test_bounded_field_clamps_and_rounds():
    field = BoundedField('f', 0.0, 1.0, False)
    assert field.clamp(2.5) == 1.0
    assert field.clamp(-1) == 0.0
    assert field.clamp(0.05 + 0.01) == 0.06
    assert field.clamp(0.5, floor=0.7) == 0.7
    assert field.clamp(0.5, ceiling=0.2) == 0.2


def test_integer_field_returns_int():
    assert BOUNDS['skip_frames'].clamp(3.6) == 4
    assert isinstance(BOUNDS['num_points'].clamp(50), int)


@pytest.mark.parametrize("setter, name, value, expected", [
    ('set_skip_frames', 'skip_frames', 42, 10),
    ('set_skip_frames', 'skip_frames', -3, 0),
    ('set_fade_speed', 'fade_speed', 0.0, 0.01),
    ('set_fade_speed', 'fade_speed', 5, 1.0),
    ('set_num_points', 'num_points', 1, 2),
    ('set_num_points', 'num_points', 1000, 100),
    ('set_velocity_change', 'v_change', 3.0, 2.0),
    ('set_velocity_change', 'v_change', -1.0, 0.0),
    ('set_velocity_min', 'v_min', 50.0, 3.0),
    ('set_velocity_max', 'v_max', 100.0, 20.0),
])
def test_setters_clamp(setter, name, value, expected):
    settings = Settings()
    assert getattr(settings, setter)(value) is True
    assert getattr(settings, name) == expected


def test_setter_reports_unchanged_value():
    settings = Settings(skip_frames=10)
    assert settings.set_skip_frames(11) is False
    assert settings.set_skip_frames(10) is False
    assert settings.set_skip_frames(9) is True


def test_velocity_min_never_exceeds_max():
    settings = Settings(v_min=1.0, v_max=2.0)
    settings.set_velocity_min(5.0)
    assert settings.v_min == 2.0
    settings.set_velocity_max(0.5)
    assert settings.v_max == 2.0


def test_shift_speed_moves_both_bounds():
    settings = Settings(v_min=1.0, v_max=3.0)
    assert settings.shift_speed(0.2) is True
    assert (settings.v_min, settings.v_max) == (1.2, 3.2)


def test_shift_speed_stops_at_lower_bound():
    settings = Settings(v_min=0.2, v_max=3.0)
    settings.shift_speed(-0.5)
    assert (settings.v_min, settings.v_max) == (0.1, 2.9)
    assert settings.shift_speed(-0.2) is False


def test_shift_speed_stops_at_upper_bound():
    settings = Settings(v_min=9.9, v_max=12.0)
    settings.shift_speed(1.0)
    assert (settings.v_min, settings.v_max) == (10.0, 12.1)
    assert settings.shift_speed(0.2) is False


def test_from_record_merges_over_defaults():
    settings = Settings.from_record({'num_points': 20, 'message_pos': {'y': 80}})
    assert settings.num_points == 20
    assert settings.message_pos == {'x': 20, 'y': 80}
    assert settings.fade_speed == Settings().fade_speed


def test_from_record_clamps_and_ignores_unknown_fields():
    settings = Settings.from_record({'skip_frames': 99, 'v_min': 5.0, 'v_max': 1.0, 'colour': 'red'})
    assert settings.skip_frames == 10
    assert settings.v_min == 5.0
    assert settings.v_max == 5.0
    assert not hasattr(settings, 'colour')


@pytest.mark.parametrize("record", [
    [],
    "settings",
    {'num_points': "many"},
    {'fade_speed': True},
    {'message_font': 12},
    {'message_pos': [1, 2]},
])
def test_from_record_rejects_malformed_records(record):
    with pytest.raises(SettingsError):
        Settings.from_record(record)


def test_record_round_trip():
    settings = Settings(num_points=17, v_change=1.5, message_color="#FFFFFF")
    assert Settings.from_record(settings.to_record()) == settings


def test_assign_updates_in_place():
    settings = Settings()
    holder = settings
    settings.assign(Settings(num_points=30))
    assert holder.num_points == 30


@pytest.mark.parametrize("record", [
    {'num_points': float('nan')},
    {'v_change': float('nan')},
    {'skip_frames': float('inf')},
    {'fade_speed': float('-inf')},
    {'num_points': 1e400},
    {'step_size': 10 ** 400},
    {'num_points': 10 ** 400},
    {'message_pos': {'x': float('nan')}},
])
def test_from_record_rejects_non_finite_numbers(record):
    with pytest.raises(SettingsError):
        Settings.from_record(record)
