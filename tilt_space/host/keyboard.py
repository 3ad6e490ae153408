"""
鍵盤模擬傾斜
"""

import pygame

from ..config import constants
from ..core import TiltSample
from .sensors import BaseSensor


class KeyboardTiltSensor(BaseSensor):
    """用方向鍵 / WASD 模擬傾斜"""

    def __init__(self, strength: float = constants.KEYBOARD_TILT_STRENGTH):
        super().__init__()
        self.strength = strength

    def read(self, pressed=None) -> TiltSample:
        """
        把按鍵狀態換成樣本

        Args:
            pressed: 可用按鍵常數索引的狀態表，預設讀 pygame.key.get_pressed()
        """
        if pressed is None:
            pressed = pygame.key.get_pressed()

        def held(keys) -> bool:
            return any(pressed[k] for k in keys)

        x = float(held(constants.TILT_RIGHT_KEYS)) - float(held(constants.TILT_LEFT_KEYS))
        # 往上傾斜為正，飛船往畫面上方移動
        y = float(held(constants.TILT_UP_KEYS)) - float(held(constants.TILT_DOWN_KEYS))
        return TiltSample(x * self.strength, y * self.strength)

    def poll(self, pressed=None) -> TiltSample:
        sample = self.read(pressed)
        self.emit(sample)
        return sample
