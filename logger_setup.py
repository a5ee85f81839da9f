# logger_setup.py

import json
import logging
import os
from datetime import datetime

import constants

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_run_id(config):
    """Uses config['run_id'], or a timestamp when it is missing or null so runs never share a log."""
    run_id = config.get('run_id')
    if run_id:
        return str(run_id)
    return datetime.now().strftime("run_%Y%m%d_%H%M%S")


def setup_logging(config_path='config.json', log_root='runs'):
    """
    Configures the "gradient_lines" logger from the 'logging' section of config.json.

    Data Contract:
    - Inputs:
        - config_path (str): Path to the configuration file.
        - log_root (str): Directory under which per-run log directories are created.
    - Outputs: The configured logging.Logger.
    - Side Effects:
        - Creates <log_root>/<run_id>/simulation.log.
        - Replaces (and closes) any handlers left by an earlier call.
    - Config keys (all optional except 'run_id' may also be null):
        - logging.level: name of the level, default "INFO".
        - logging.format: handler format string.
        - logging.console: false to log to the file only.
    """
    with open(config_path, 'r') as f:
        config = json.load(f)

    run_id = resolve_run_id(config)
    log_config = config.get('logging', {})

    # Dedicated, non-propagating logger; pygame and numba keep their own loggers
    logger = logging.getLogger(constants.LOGGER_NAME)
    logger.setLevel(log_config.get('level', 'INFO'))
    logger.propagate = False

    log_dir = os.path.join(log_root, run_id)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'simulation.log')

    formatter = logging.Formatter(log_config.get('format', DEFAULT_FORMAT))
    handlers = [logging.FileHandler(log_file)]
    if log_config.get('console', True):
        handlers.append(logging.StreamHandler())

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file}")
    return logger
