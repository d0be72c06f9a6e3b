"""Shared pytest fixtures for the cabinet test suite."""
import os
import random

# No window is ever opened by the tests; keep pygame headless
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from cabinet.simulation import ManualTickSource
from cabinet.storage import MemoryStore


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Point the best-score file at a temp dir for every test."""
    data_dir = tmp_path / 'cabinet-data'
    monkeypatch.setenv('CABINET_DATA_DIR', str(data_dir))
    return data_dir


@pytest.fixture
def memory_store():
    """Empty in-memory best-score store."""
    return MemoryStore()


@pytest.fixture
def tick_source():
    """Tick source fired by hand."""
    return ManualTickSource()


@pytest.fixture
def rng():
    """Seeded random generator for reproducible sessions."""
    return random.Random(1234)
