# messages.py

import logging
from dataclasses import dataclass

import constants

logger = logging.getLogger(constants.LOGGER_NAME)


@dataclass
class Message:
    text: str
    remaining: int
    x: float
    y: float


class MessageQueue:
    """
    Transient status messages stacked down the left edge of the viewport.

    A message is drawn while its remaining duration is positive. After that it
    stays queued, invisible, for MESSAGE_LINGER_TICKS more ticks so the next
    flashed message is still laid out below it.

    Data Contract:
    - Inputs: settings (Settings) for layout and default duration, viewport size.
    - Invariants: Messages are kept in creation order.
    """
    def __init__(self, settings, bounds: tuple):
        self.settings = settings
        self.width, self.height = bounds
        self.messages = []

    def __len__(self):
        return len(self.messages)

    def set_bounds(self, width: float, height: float):
        self.width, self.height = width, height

    def _next_position(self):
        origin = self.settings.message_pos
        if not self.messages:
            return origin['x'], origin['y']

        last = self.messages[-1]
        new_y = last.y + self.settings.message_height
        if new_y < self.height:
            return last.x, new_y

        # Wrap to the top of a new column
        new_x = last.x + self.settings.message_column_width
        if new_x >= self.width:
            new_x = origin['x']
        return new_x, origin['y']

    def flash(self, text: str, duration=None) -> Message:
        x, y = self._next_position()
        message = Message(text=text, remaining=int(duration or self.settings.message_duration), x=x, y=y)
        self.messages.append(message)
        logger.info(f"Message: {text}")
        return message

    def age_and_filter(self):
        """Returns the messages to draw this tick, then ages the queue by one tick."""
        visible = []
        kept = []
        for message in self.messages:
            if message.remaining > 0:
                visible.append(message)
            message.remaining -= 1
            if message.remaining > -constants.MESSAGE_LINGER_TICKS:
                kept.append(message)
        self.messages = kept
        return visible

    def visible(self):
        return [message for message in self.messages if message.remaining > 0]

    def clear(self):
        self.messages = []
