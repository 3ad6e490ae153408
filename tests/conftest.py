"""Pytest configuration and shared fixtures."""

import os
import sys
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tilt_space.config import GameConfig
from tilt_space.core import Craft, Goal, Obstacle, Round, RoundFactory, Vector2
from tilt_space.host import BaseSensor, ManualFrameClock


class RecordingSink:
    """記錄終局通知次數"""

    def __init__(self):
        self.lost = 0
        self.won = 0

    def on_lost(self):
        self.lost += 1

    def on_won(self):
        self.won += 1


class ScriptedFactory:
    """依序回傳預先準備的回合，用完後重複最後一個"""

    def __init__(self, *rounds):
        self.rounds = list(rounds)
        self.calls = 0

    def new_round(self):
        snapshot = self.rounds[min(self.calls, len(self.rounds) - 1)]
        self.calls += 1
        return snapshot


def make_round(craft=(100, 100), obstacles=(), goal=(300, 700),
               craft_extent=50, obstacle_extent=50, goal_extent=70):
    """obstacles: ((x, y, dx, dy), ...)"""
    return Round(
        craft=Craft(Vector2(*craft), craft_extent),
        obstacles=tuple(Obstacle(Vector2(x, y), Vector2(dx, dy), obstacle_extent)
                        for x, y, dx, dy in obstacles),
        goal=Goal(Vector2(*goal), goal_extent),
    )


@pytest.fixture
def config():
    return GameConfig(width=400, height=800)


@pytest.fixture
def factory(config):
    return RoundFactory(config, seed=1234)


@pytest.fixture
def clock():
    return ManualFrameClock()


@pytest.fixture
def sensor():
    return BaseSensor()


@pytest.fixture
def sink():
    return RecordingSink()
