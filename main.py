# main.py

import json
import logging

import numpy as np
import pygame

import constants
import logger_setup
from renderer import Renderer
from settings import Settings
from simulation import Simulation
from storage import JsonFileStore

# Get the application's dedicated logger
logger = logging.getLogger(constants.LOGGER_NAME)

# Non-character keys mapped to (action, args)
KEY_BINDINGS = {
    pygame.K_PAGEUP: ('adjust_skip_frames', (1,)),
    pygame.K_PAGEDOWN: ('adjust_skip_frames', (-1,)),
    pygame.K_UP: ('adjust_speed', (0.2,)),
    pygame.K_DOWN: ('adjust_speed', (-0.2,)),
    pygame.K_RIGHT: ('adjust_velocity_change', (0.1,)),
    pygame.K_LEFT: ('adjust_velocity_change', (-0.1,)),
    pygame.K_SPACE: ('toggle_play_pause', ()),
}

# Typed characters mapped to (action, args); looked up by event.unicode
CHAR_BINDINGS = {
    '+': ('adjust_point_count', (1,)),
    '-': ('adjust_point_count', (-1,)),
    '*': ('adjust_fade_speed', (0.01,)),
    '/': ('adjust_fade_speed', (-0.01,)),
    '.': ('adjust_velocity_min', (0.2,)),
    ',': ('adjust_velocity_min', (-0.2,)),
    "'": ('adjust_velocity_max', (0.2,)),
    ';': ('adjust_velocity_max', (-0.2,)),
    's': ('save_settings', ()),
    'S': ('save_settings', ()),
    'l': ('load_settings', ()),
    'L': ('load_settings', ()),
    'd': ('load_defaults', ()),
    'D': ('load_defaults', ()),
}

# Pressing these alone is never an action
MODIFIER_KEYS = {
    pygame.K_LSHIFT, pygame.K_RSHIFT, pygame.K_LCTRL, pygame.K_RCTRL,
    pygame.K_LALT, pygame.K_RALT, pygame.K_LMETA, pygame.K_RMETA,
    pygame.K_CAPSLOCK, pygame.K_NUMLOCK, pygame.K_MODE,
}


def resolve_key(event):
    """Maps a KEYDOWN event to (action, args), or to the key's name if unbound."""
    if event.key in KEY_BINDINGS:
        return KEY_BINDINGS[event.key]
    if event.unicode in CHAR_BINDINGS:
        return CHAR_BINDINGS[event.unicode]
    return pygame.key.name(event.key), ()


def run_loop(simulation, renderer, clock):
    """Runs one simulation tick per display frame until the window is closed."""
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                simulation.resize(event.w, event.h)
                renderer.resize(pygame.display.get_surface())
            elif event.type == pygame.KEYDOWN and event.key not in MODIFIER_KEYS:
                action, args = resolve_key(event)
                simulation.perform(action, *args)

        if simulation.playing:
            frame = simulation.step()
            renderer.draw(frame, simulation.settings)
        else:
            renderer.draw_messages(simulation.visible_messages(), simulation.settings)

        pygame.display.flip()
        clock.tick(constants.FPS)


def main():
    """
    Main function to initialize and run the gradient line animation.
    """
    # --- Setup ---
    logger_setup.setup_logging()

    with open('config.json', 'r') as f:
        config = json.load(f)
    window = config.get('window', {})
    width = window.get('width', constants.WIDTH)
    height = window.get('height', constants.HEIGHT)

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config.get('master_seed'))
    logger.info(f"Master RNG initialized with seed: {config.get('master_seed')}")

    settings = Settings.from_record(config.get('settings', {}))
    store = JsonFileStore(config['storage']['path'])

    # --- Initialization ---
    pygame.init()
    screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()

    simulation = Simulation(bounds=(width, height), rng=rng, store=store, settings=settings)
    renderer = Renderer(screen)

    run_loop(simulation, renderer, clock)

    logger.info("Application shutting down.")
    pygame.quit()

if __name__ == "__main__":
    main()
