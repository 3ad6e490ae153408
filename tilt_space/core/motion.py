"""
障礙物運動模擬
"""

from typing import Iterable, Tuple

from ..config import GameConfig
from .entities import Obstacle
from .geometry import Vector2


class MotionSimulator:
    """推進障礙物並在邊界反彈"""

    def __init__(self, config: GameConfig):
        self.config = config

    def advance(self, obstacle: Obstacle) -> Obstacle:
        """
        推進一個 tick

        碰到邊界時只翻轉速度方向，位置本身不修正；
        下一個 tick 會把障礙物帶回場內，所以可能短暫讀到 <=0 或超界的位置。
        速度大小在任何次數的反彈後都不變。
        """
        cfg = self.config
        dx, dy = obstacle.velocity.x, obstacle.velocity.y

        new_x = obstacle.position.x + dx * cfg.speed
        new_y = obstacle.position.y + dy * cfg.speed

        if new_x <= 0 or new_x >= cfg.width - obstacle.extent:
            dx = -dx
        if new_y <= 0 or new_y >= cfg.height - obstacle.extent:
            dy = -dy

        return Obstacle(position=Vector2(new_x, new_y),
                        velocity=Vector2(dx, dy),
                        extent=obstacle.extent)

    def advance_all(self, obstacles: Iterable[Obstacle]) -> Tuple[Obstacle, ...]:
        # 障礙物之間沒有交互，順序不影響結果
        return tuple(self.advance(o) for o in obstacles)
