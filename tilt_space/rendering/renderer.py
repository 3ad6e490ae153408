"""
抽象渲染器接口
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..core import Craft, Goal, Obstacle, Round, RoundState


class Renderer(ABC):
    """渲染器抽象基類"""

    @abstractmethod
    def init(self, width: int, height: int, title: str = ""):
        """初始化渲染器"""
        pass

    @abstractmethod
    def draw_background(self):
        """繪製背景"""
        pass

    @abstractmethod
    def draw_craft(self, craft: Craft):
        """繪製飛船（以位置為中心）"""
        pass

    @abstractmethod
    def draw_obstacle(self, obstacle: Obstacle):
        """繪製障礙物（位置為左上角）"""
        pass

    @abstractmethod
    def draw_goal(self, goal: Goal):
        """繪製目標（位置為左上角）"""
        pass

    @abstractmethod
    def draw_modal(self, state: RoundState):
        """繪製終局視窗"""
        pass

    @abstractmethod
    def present(self):
        """呈現畫面"""
        pass

    @abstractmethod
    def cleanup(self):
        """清理資源"""
        pass

    @abstractmethod
    def handle_events(self) -> Dict:
        """處理事件"""
        pass

    def draw_round(self, snapshot: Round, effects: Optional[list] = None):
        """依快照繪製整個畫面，不修改回合"""
        self.draw_background()
        self.draw_goal(snapshot.goal)
        for obstacle in snapshot.obstacles:
            self.draw_obstacle(obstacle)
        self.draw_craft(snapshot.craft)
        for effect_data in effects or []:
            self.draw_effect(effect_data)
        if snapshot.state.is_terminal:
            self.draw_modal(snapshot.state)

    def draw_effect(self, effect_data: Dict):
        """繪製效果（預設不繪製）"""
        pass
