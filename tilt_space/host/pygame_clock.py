"""
以 pygame 控制幀率的畫面時鐘
"""

import pygame

from .clock import ManualFrameClock


class PygameFrameClock(ManualFrameClock):
    """以 pygame.time.Clock 控制幀率"""

    def __init__(self, fps: float = 60):
        super().__init__()
        self.fps = fps
        self.clock = pygame.time.Clock()

    def pump(self) -> float:
        """等待下一幀並執行待處理的請求，回傳經過秒數"""
        dt = self.clock.tick(self.fps) / 1000.0
        self.advance(1)
        return dt

    def get_fps(self) -> float:
        return self.clock.get_fps()
