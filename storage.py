# storage.py

"""
Key/value stores backing the named settings slots.

Both stores map a string key to a string value. get() returns None for a key
that was never set.
"""

import json
import logging
import os

import constants

logger = logging.getLogger(constants.LOGGER_NAME)


def slot_key(slot: str) -> str:
    return f"{constants.STORAGE_PREFIX}_{slot}"


class MemoryStore:
    """A store that lives only as long as the process."""
    def __init__(self, initial=None):
        self._data = dict(initial or {})

    def get(self, key: str):
        return self._data.get(key)

    def set(self, key: str, value: str):
        self._data[key] = value


class JsonFileStore:
    """
    A store persisted as a single JSON object on disk.

    Data Contract:
    - Inputs: path (str) - The file holding all keys.
    - Side Effects: set() rewrites the whole file.
    - Invariants: An unreadable or corrupt file reads as an empty store; the
      problem is logged, never raised.
    """
    def __init__(self, path: str):
        self.path = path

    def _read_all(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read settings store {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Settings store {self.path} does not hold a JSON object, ignoring it.")
            return {}
        return data

    def get(self, key: str):
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str):
        data = self._read_all()
        data[key] = value
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w') as f:
            json.dump(data, f, indent=4)
        logger.debug(f"Wrote key '{key}' to {self.path}")
