# simulation.py

import json
import logging
from collections import namedtuple

import numpy as np

import constants
from messages import MessageQueue
from point_set import PointSet
from settings import Settings, SettingsError
from storage import slot_key

logger = logging.getLogger(constants.LOGGER_NAME)

# What one tick hands to the renderer. colors is None on motion-only ticks.
Frame = namedtuple('Frame', ['points', 'colors', 'messages', 'repaint'])

# Names accepted by Simulation.perform()
ACTIONS = frozenset({
    'resize',
    'adjust_point_count',
    'adjust_fade_speed',
    'adjust_skip_frames',
    'adjust_velocity_min',
    'adjust_velocity_max',
    'adjust_velocity_change',
    'adjust_speed',
    'save_settings',
    'load_settings',
    'load_defaults',
    'toggle_play_pause',
    'flash_message',
    'step',
})

# Ticks between periodic debug log lines
LOG_INTERVAL = 600


class Simulation:
    """
    Owns the whole simulation state and advances it one tick at a time.

    Data Contract:
    - Inputs:
        - bounds (tuple): The (width, height) of the viewport.
        - rng (np.random.Generator): The master random number generator.
        - store: Key/value store with get(key) and set(key, value).
        - settings (Settings, optional): Initial settings, defaults if omitted.
    - Outputs: step() returns a Frame for the renderer.
    - Side Effects: Actions mutate settings/points/messages and may write to store.
    - Invariants: Ticks and actions never interleave; every call runs to
      completion before the next one starts.
    """
    def __init__(self, bounds: tuple, rng: np.random.Generator, store, settings: Settings = None):
        self.width, self.height = bounds
        self.rng = rng
        self.store = store
        self.settings = settings if settings is not None else Settings()
        self.messages = MessageQueue(self.settings, bounds)
        self.point_set = PointSet(self.settings, rng, bounds)
        self.skip_counter = 0
        self.tick = 0
        self.playing = True
        self._bounces = 0
        logger.info(f"Simulation created: {self.width}x{self.height}, {self.settings.num_points} points.")

    # --- Tick ---

    def step(self) -> Frame:
        """Advances the simulation by one tick."""
        self._bounces += self.point_set.move()

        self.skip_counter += 1
        repaint = self.skip_counter > self.settings.skip_frames
        colors = None
        if repaint:
            self.skip_counter = 0
            colors = self.point_set.advance_colors()

        visible = self.messages.age_and_filter()
        self.tick += 1

        if self.tick % LOG_INTERVAL == 0:
            logger.debug(
                f"Tick={self.tick}, "
                f"Points={self.point_set.num_points}, "
                f"Bounces={self._bounces}, "
                f"QueuedMessages={len(self.messages)}"
            )
            self._bounces = 0

        return Frame(points=list(self.point_set), colors=colors, messages=visible, repaint=repaint)

    def perform(self, action: str, *args):
        """Runs a named action. Unknown names only flash a status message."""
        if action not in ACTIONS:
            logger.debug(f"Unknown action: {action!r}")
            self.flash_message(constants.UNKNOWN_ACTION_MESSAGE, self.settings.message_duration // 2)
            return False
        return getattr(self, action)(*args)

    # --- Viewport ---

    def resize(self, width: float, height: float):
        self.width, self.height = width, height
        self.point_set.set_bounds(width, height)
        self.messages.set_bounds(width, height)
        logger.info(f"Viewport resized to {width}x{height}.")
        return True

    # --- Adjustments ---

    def adjust_point_count(self, delta: int):
        if delta > 0:
            added = self.point_set.grow(delta)
            if added:
                self.flash_message(f"point added (now {self.settings.num_points})")
            return added > 0
        if delta < 0:
            removed = self.point_set.shrink(-delta)
            if removed:
                self.flash_message(f"point removed ({self.settings.num_points} remain)")
            return removed > 0
        return False

    def adjust_fade_speed(self, delta: float):
        changed = self.settings.set_fade_speed(self.settings.fade_speed + delta)
        if changed:
            verb = "increased" if delta > 0 else "decreased"
            self.flash_message(f"{verb} fade speed to {round(self.settings.fade_speed * 100, 1)}")
        return changed

    def adjust_skip_frames(self, delta: int):
        changed = self.settings.set_skip_frames(self.settings.skip_frames + delta)
        if changed:
            verb = "increased" if delta > 0 else "decreased"
            self.flash_message(f"{verb} skip frames to {self.settings.skip_frames}")
        return changed

    def adjust_velocity_min(self, delta: float):
        changed = self.settings.set_velocity_min(self.settings.v_min + delta)
        if changed:
            verb = "increased" if delta > 0 else "decreased"
            self.flash_message(f"{verb} min speed to {self.settings.v_min:g}")
        return changed

    def adjust_velocity_max(self, delta: float):
        changed = self.settings.set_velocity_max(self.settings.v_max + delta)
        if changed:
            verb = "increased" if delta > 0 else "decreased"
            self.flash_message(f"{verb} max speed to {self.settings.v_max:g}")
        return changed

    def adjust_velocity_change(self, delta: float):
        changed = self.settings.set_velocity_change(self.settings.v_change + delta)
        if changed:
            verb = "increased" if delta > 0 else "decreased"
            self.flash_message(f"{verb} speed change to {self.settings.v_change:g}")
        return changed

    def adjust_speed(self, delta: float):
        changed = self.settings.shift_speed(delta)
        if changed:
            verb = "increased" if delta > 0 else "decreased"
            self.flash_message(f"{verb} speed to [{self.settings.v_min:g}, {self.settings.v_max:g}]")
        return changed

    # --- Persistence ---

    def save_settings(self, slot: str = constants.DEFAULT_SLOT):
        self.store.set(slot_key(slot), json.dumps(self.settings.to_record()))
        logger.info(f"Saved settings to slot '{slot}'.")
        self.flash_message(f"saved settings ({slot})")
        return True

    def load_settings(self, slot: str = constants.DEFAULT_SLOT):
        """
        Restores the settings saved under `slot`.

        A missing or unreadable record leaves everything untouched and flashes
        a single status message.
        """
        raw = self.store.get(slot_key(slot))
        if raw is None:
            logger.info(f"No saved settings in slot '{slot}'.")
            self.flash_message("no saved settings")
            return False

        try:
            loaded = Settings.from_record(json.loads(raw))
        except (json.JSONDecodeError, SettingsError) as e:
            logger.warning(f"Discarding corrupt settings in slot '{slot}': {e}")
            self.flash_message("no saved settings")
            return False

        self.flash_message(f"restoring settings ({slot})")
        self._apply_settings(loaded)
        logger.info(f"Loaded settings from slot '{slot}'.")
        return True

    def load_defaults(self):
        self.flash_message("restoring default settings")
        self._apply_settings(Settings())
        logger.info("Restored default settings.")
        return True

    def _apply_settings(self, new_settings: Settings):
        # The point count is reached by resizing so existing points survive
        target = new_settings.num_points
        new_settings.num_points = self.point_set.num_points
        self.settings.assign(new_settings)
        self.point_set.resize(target)

    # --- Playback & messages ---

    def toggle_play_pause(self):
        self.playing = not self.playing
        if self.playing:
            self.flash_message("resumed")
        else:
            self.messages.clear()
            self.flash_message(constants.PAUSED_MESSAGE)
        logger.info(f"Playback {'resumed' if self.playing else 'paused'} at tick {self.tick}.")
        return self.playing

    def flash_message(self, text: str, duration: int = None):
        return self.messages.flash(text, duration)

    def visible_messages(self):
        """Messages currently drawn, without aging the queue."""
        return self.messages.visible()
