"""
不可變的遊戲參數
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """核心元件共用的固定參數（建構時傳入，執行中不可修改）"""

    width: float = 400.0
    height: float = 800.0
    craft_extent: float = 50.0
    obstacle_extent: float = 50.0
    goal_extent: float = 70.0
    speed: float = 5.0
    obstacle_count: int = 2
    start_offset: float = 100.0

    def __post_init__(self):
        for name in ('width', 'height', 'craft_extent', 'obstacle_extent', 'goal_extent'):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} 必須為正數: {value}")
        if self.speed < 0:
            raise ValueError(f"speed 不可為負: {self.speed}")
        if self.obstacle_count < 0:
            raise ValueError(f"obstacle_count 不可為負: {self.obstacle_count}")
        if self.craft_extent > min(self.width, self.height):
            raise ValueError("craft_extent 超出場地大小")
        if self.obstacle_extent > min(self.width, self.height):
            raise ValueError("obstacle_extent 超出場地大小")

    @property
    def craft_bounds(self):
        """飛船中心可達範圍 ((min_x, max_x), (min_y, max_y))"""
        half = self.craft_extent / 2
        return ((half, self.width - half), (half, self.height - half))
