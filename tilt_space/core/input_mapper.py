"""
傾斜輸入映射
"""

from dataclasses import dataclass

import numpy as np

from ..config import GameConfig
from .entities import Craft
from .geometry import Vector2


@dataclass(frozen=True)
class TiltSample:
    """感測器原始樣本，通常在 [-1, 1]"""
    x: float
    y: float


class InputMapper:
    """把傾斜樣本換算成飛船新位置"""

    def __init__(self, config: GameConfig):
        self.config = config

    def apply(self, craft: Craft, sample: TiltSample) -> Craft:
        """
        套用一個樣本

        垂直軸與樣本方向相反（往上傾斜，飛船往畫面上方移動）。
        撞到邊界只會被夾住，不產生任何事件。

        Args:
            craft: 目前的飛船
            sample: 傾斜樣本

        Returns:
            移動後的飛船
        """
        cfg = self.config
        speed = cfg.speed
        # 夾住範圍依飛船自身尺寸計算
        half = craft.extent / 2
        new_x = craft.position.x + sample.x * speed
        new_y = craft.position.y - sample.y * speed

        new_x = float(np.clip(new_x, half, cfg.width - half))
        new_y = float(np.clip(new_y, half, cfg.height - half))

        return Craft(position=Vector2(new_x, new_y), extent=craft.extent)
