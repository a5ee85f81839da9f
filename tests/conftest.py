# conftest.py

import numpy as np
import pytest

from settings import Settings
from simulation import Simulation
from storage import MemoryStore
from tests.helpers import BOUNDS


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def simulation(rng, store):
    return Simulation(bounds=BOUNDS, rng=rng, store=store)
