"""
回合實體與隨機生成
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..config import GameConfig
from .geometry import Vector2, clamp


class RoundState(Enum):
    """回合狀態"""
    PLAYING = "playing"
    LOST = "lost"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        return self is not RoundState.PLAYING


@dataclass(frozen=True)
class Craft:
    position: Vector2
    extent: float


@dataclass(frozen=True)
class Obstacle:
    position: Vector2
    velocity: Vector2
    extent: float

    @property
    def speed(self) -> float:
        return self.velocity.length()


@dataclass(frozen=True)
class Goal:
    position: Vector2
    extent: float


@dataclass(frozen=True)
class Round:
    """一局的完整狀態；每個 tick 以新值整體取代"""
    craft: Craft
    obstacles: Tuple[Obstacle, ...]
    goal: Goal
    state: RoundState = RoundState.PLAYING

    @property
    def is_playing(self) -> bool:
        return self.state is RoundState.PLAYING


class RoundFactory:
    """依配置隨機生成新回合"""

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None,
                 seed: Optional[int] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random(seed)

    def random_position(self) -> Vector2:
        # 障礙物與目標共用同一個範圍
        cfg = self.config
        return Vector2(self.rng.random() * (cfg.width - cfg.obstacle_extent),
                       self.rng.random() * (cfg.height - cfg.obstacle_extent))

    def random_direction(self) -> Vector2:
        return Vector2((self.rng.random() - 0.5) * 2,
                       (self.rng.random() - 0.5) * 2)

    def start_position(self) -> Vector2:
        cfg = self.config
        (min_x, max_x), (min_y, max_y) = cfg.craft_bounds
        return Vector2(clamp(cfg.width / 2, min_x, max_x),
                       clamp(cfg.height - cfg.start_offset, min_y, max_y))

    def new_craft(self) -> Craft:
        return Craft(position=self.start_position(), extent=self.config.craft_extent)

    def new_obstacle(self) -> Obstacle:
        return Obstacle(position=self.random_position(),
                        velocity=self.random_direction(),
                        extent=self.config.obstacle_extent)

    def new_goal(self) -> Goal:
        return Goal(position=self.random_position(), extent=self.config.goal_extent)

    def new_round(self) -> Round:
        """建立新的進行中回合"""
        obstacles = tuple(self.new_obstacle() for _ in range(self.config.obstacle_count))
        return Round(craft=self.new_craft(), obstacles=obstacles,
                     goal=self.new_goal(), state=RoundState.PLAYING)
