"""
幾何工具：座標與方框重疊判定
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """場地座標（原點左上）"""
    x: float
    y: float

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> "Vector2":
        return Vector2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.hypot(self.x, self.y)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def overlaps(a_pos: Vector2, a_extent: float, b_pos: Vector2, b_extent: float) -> bool:
    """
    判斷 a 是否落在 b 的判定框內

    兩軸都只用 b 的尺寸當門檻，不是兩者半寬相加的 AABB 測試；
    改成對稱規則會改變撞擊與抵達的判定範圍。

    Args:
        a_pos: 第一個物體位置
        a_extent: 第一個物體尺寸（不參與判定）
        b_pos: 第二個物體位置
        b_extent: 第二個物體尺寸，兩軸共用的門檻

    Returns:
        是否重疊
    """
    return abs(a_pos.x - b_pos.x) < b_extent and abs(a_pos.y - b_pos.y) < b_extent
