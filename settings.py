# settings.py

"""
Runtime-adjustable simulation settings.

Holds the compiled-in defaults, the bounded-field rules every setter goes
through, and conversion to and from the flat JSON record stored in a slot.

Data Contract:
- Every bounded field is clamped into its range on mutation; out-of-range
  input is never an error.
- Setters return True only when the stored value actually changed.
- A persisted record is merged over the defaults, so fields missing from an
  older save fall back to their default values.
"""

import copy
import math
import logging
from collections import namedtuple
from dataclasses import dataclass, field, asdict, fields

import constants

logger = logging.getLogger(constants.LOGGER_NAME)

# Floats are stored with this many decimals so repeated +0.01 steps compare cleanly
FLOAT_PRECISION = 6


class SettingsError(ValueError):
    """A persisted settings record could not be interpreted."""


class BoundedField(namedtuple('BoundedField', ['name', 'minimum', 'maximum', 'integer'])):
    """
    A named numeric range shared by every clamped setter.

    clamp() accepts optional floor/ceiling values that tighten (never widen)
    the static range, used to keep v_min <= v_max.
    """
    __slots__ = ()

    def clamp(self, value, floor=None, ceiling=None):
        lower = self.minimum if floor is None else max(self.minimum, floor)
        upper = self.maximum if ceiling is None else min(self.maximum, ceiling)
        value = min(max(value, lower), upper)
        if self.integer:
            return int(round(value))
        return round(float(value), FLOAT_PRECISION)


BOUNDS = {
    'skip_frames': BoundedField('skip_frames', 0, 10, True),
    'fade_speed': BoundedField('fade_speed', 0.01, 1.0, False),
    'num_points': BoundedField('num_points', constants.MIN_POINTS, constants.MAX_POINTS, True),
    'v_min': BoundedField('v_min', 0.1, 10.0, False),
    'v_max': BoundedField('v_max', 0.1, 20.0, False),
    'v_change': BoundedField('v_change', 0.0, 2.0, False),
}


@dataclass
class Settings:
    # animation speed
    skip_frames: int = 4       # advance colors only every (n+1)th tick
    step_size: float = 1.0     # scale factor for point speeds
    fade_speed: float = 0.05   # alpha of the per-tick fade fill (0..1)
    num_points: int = 8
    v_min: float = 0.1
    v_max: float = 3.0
    v_change: float = 0.2      # speed change magnitude on bounce

    # colors
    s_min: float = 55.0        # saturation %
    s_max: float = 100.0
    l_min: float = 45.0        # lightness %
    l_max: float = 80.0
    color_speed: float = 10.0

    # messages
    message_pos: dict = field(default_factory=lambda: {'x': 20, 'y': 40})
    message_height: int = 30
    message_column_width: int = 400
    message_font: str = "serif"
    message_font_size: int = 20
    message_color: str = "#AAAAAA"
    message_duration: int = 50  # ticks

    @classmethod
    def from_record(cls, record):
        """
        Builds settings from a persisted record merged over the defaults.

        Unknown keys are ignored. Bounded fields are clamped. A record that is
        not a mapping, or holds a value of the wrong type, raises SettingsError.
        """
        if not isinstance(record, dict):
            raise SettingsError(f"settings record must be an object, got {type(record).__name__}")

        settings = cls()
        known = {f.name for f in fields(cls)}
        for key, value in record.items():
            if key not in known:
                logger.warning(f"Ignoring unknown settings field '{key}'.")
                continue
            default = getattr(settings, key)
            setattr(settings, key, _coerce(key, value, default))

        settings._clamp_all()
        return settings

    def to_record(self):
        return asdict(self)

    def copy(self):
        return copy.deepcopy(self)

    def assign(self, other):
        """Overwrites every field in place, so holders of this object see the change."""
        for f in fields(self):
            setattr(self, f.name, copy.deepcopy(getattr(other, f.name)))

    def _clamp_all(self):
        for name in ('skip_frames', 'fade_speed', 'num_points', 'v_change'):
            setattr(self, name, BOUNDS[name].clamp(getattr(self, name)))
        self.v_min = BOUNDS['v_min'].clamp(self.v_min)
        self.v_max = BOUNDS['v_max'].clamp(self.v_max, floor=self.v_min)

    def _set_bounded(self, name, value, floor=None, ceiling=None):
        old = getattr(self, name)
        new = BOUNDS[name].clamp(value, floor=floor, ceiling=ceiling)
        setattr(self, name, new)
        return new != old

    def set_skip_frames(self, value):
        return self._set_bounded('skip_frames', value)

    def set_fade_speed(self, value):
        return self._set_bounded('fade_speed', value)

    def set_num_points(self, value):
        return self._set_bounded('num_points', value)

    def set_velocity_min(self, value):
        return self._set_bounded('v_min', value, ceiling=self.v_max)

    def set_velocity_max(self, value):
        return self._set_bounded('v_max', value, floor=self.v_min)

    def set_velocity_change(self, value):
        return self._set_bounded('v_change', value)

    def shift_speed(self, delta):
        """Moves v_min and v_max together by delta, limited so both stay in bounds."""
        v_min_bound, v_max_bound = BOUNDS['v_min'], BOUNDS['v_max']
        delta = min(max(delta, v_min_bound.minimum - self.v_min),
                    v_min_bound.maximum - self.v_min,
                    v_max_bound.maximum - self.v_max)
        old = (self.v_min, self.v_max)
        self.v_min = v_min_bound.clamp(self.v_min + delta)
        self.v_max = v_max_bound.clamp(self.v_max + delta, floor=self.v_min)
        return (self.v_min, self.v_max) != old


def _coerce(key, value, default):
    # bool is an int subclass; a stored true/false is never a valid number
    if isinstance(default, (int, float)) and not isinstance(default, bool):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise SettingsError(f"field '{key}' must be a number, got {value!r}")
        try:
            # math.isfinite overflows on ints beyond float range
            if not math.isfinite(value):
                raise SettingsError(f"field '{key}' must be finite, got {value!r}")
            return type(default)(value)
        except (ValueError, OverflowError) as e:
            raise SettingsError(f"field '{key}' is out of range: {e}") from e
    if isinstance(default, str):
        if not isinstance(value, str):
            raise SettingsError(f"field '{key}' must be a string, got {value!r}")
        return value
    if isinstance(default, dict):
        if not isinstance(value, dict):
            raise SettingsError(f"field '{key}' must be an object, got {value!r}")
        merged = dict(default)
        for sub_key, sub_value in value.items():
            if sub_key in default:
                merged[sub_key] = _coerce(f"{key}.{sub_key}", sub_value, default[sub_key])
        return merged
    return value
