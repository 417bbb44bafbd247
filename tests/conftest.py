"""Pytest configuration and fixtures."""

import random
from datetime import datetime

import pytest


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def rng(seed: int) -> random.Random:
    """Random source seeded with the fixed seed."""
    return random.Random(seed)


@pytest.fixture
def window_start() -> datetime:
    return datetime(2024, 3, 4, 9, 30)


@pytest.fixture
def window_end() -> datetime:
    """One week after ``window_start``."""
    return datetime(2024, 3, 11, 9, 30)


@pytest.fixture
def no_sleep() -> list[float]:
    """Record of sleeps, to pass ``no_sleep.append`` as a collector sleeper."""
    return []
