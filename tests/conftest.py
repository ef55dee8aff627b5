"""
Pytest fixtures for Lane Defense tests.
"""
import random

import pytest

from lane_defense.config import Settings
from lane_defense.game import Game
from lane_defense.geometry import BoardGeometry
from lane_defense.state import SimulationState


@pytest.fixture
def settings() -> Settings:
    """Seeded settings on the default 1200x700 board."""
    return Settings(board_width=1200, board_height=700, seed=1234,
                    max_frame_dt=0.05, starting_balance=100)


@pytest.fixture
def game(settings) -> Game:
    return Game(settings=settings)


@pytest.fixture
def state() -> SimulationState:
    """Bare state for testing one phase at a time."""
    return SimulationState(geometry=BoardGeometry(1200, 700), rng=random.Random(0))
