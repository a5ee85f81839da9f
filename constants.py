# constants.py

"""
Application Constants

This module defines static configuration values for the application's framework.
These are not expected to change between simulation runs. Tunable values that
the user adjusts at runtime live in settings.py instead.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Name of the application's dedicated logger
LOGGER_NAME = "gradient_lines"

# Default screen dimensions, used when config.json has no 'window' section
WIDTH = 1280  # Pixels
HEIGHT = 720  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
BLACK = (0, 0, 0)

# Window Title
TITLE = "Gradient Lines"

# Persistence
STORAGE_PREFIX = "lines"      # Slot keys are f"{STORAGE_PREFIX}_{slot}"
DEFAULT_SLOT = "default"

# Point count bounds
MIN_POINTS = 2
MAX_POINTS = 100

# Hue range (degrees)
HUE_MIN = 0.0
HUE_MAX = 360.0

# Messages stay queued (but are no longer drawn) until their remaining
# duration drops to -MESSAGE_LINGER_TICKS.
MESSAGE_LINGER_TICKS = 10
PAUSED_MESSAGE = "paused"
UNKNOWN_ACTION_MESSAGE = "unknown action"

# Rendering
LINE_WIDTH = 1                # Pixels
GRADIENT_SUBSEGMENT_LENGTH = 8  # Pixels per interpolated sub-segment of a gradient line
