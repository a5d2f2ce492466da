"""Pytest configuration and fixtures for intpdf tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class ScriptedGenerator:
    """Generator stand-in that replays fixed draws for each uniform() call."""

    def __init__(self, draws):
        self.draws = [np.asarray(d, dtype=float) for d in draws]
        self.calls = []

    def uniform(self, low, high, size):
        self.calls.append((low, high, size))
        return self.draws.pop(0)[:size]


@pytest.fixture
def scripted_rng():
    return ScriptedGenerator


@pytest.fixture
def rng():
    return np.random.default_rng(42)
