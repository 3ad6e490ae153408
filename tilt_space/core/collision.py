"""
碰撞檢測系統
"""

from enum import Enum
from typing import Iterable, Optional

from .entities import Craft, Goal, Obstacle
from .geometry import overlaps


class Outcome(Enum):
    """單個 tick 的判定結果"""
    CONTINUE = "continue"
    LOST = "lost"
    WON = "won"


class CollisionDetector:
    """碰撞檢測器"""

    @staticmethod
    def find_hit(craft: Craft, obstacles: Iterable[Obstacle]) -> Optional[Obstacle]:
        """回傳第一個撞到的障礙物，沒有則回傳 None"""
        for obstacle in obstacles:
            if overlaps(craft.position, obstacle.extent, obstacle.position, obstacle.extent):
                return obstacle
        return None

    @staticmethod
    def reached_goal(craft: Craft, goal: Goal) -> bool:
        return overlaps(craft.position, goal.extent, goal.position, goal.extent)

    def evaluate(self, craft: Craft, obstacles: Iterable[Obstacle], goal: Goal) -> Outcome:
        """
        判定本 tick 結果

        先檢查障礙物再檢查目標：同一個 tick 兩者都成立時判為 LOST。

        Args:
            craft: 飛船
            obstacles: 所有障礙物
            goal: 目標

        Returns:
            Outcome
        """
        if self.find_hit(craft, obstacles) is not None:
            return Outcome.LOST
        if self.reached_goal(craft, goal):
            return Outcome.WON
        return Outcome.CONTINUE
