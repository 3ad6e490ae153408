"""
效果管理系統
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..config.constants import (
    EXPLOSION_ALPHA_DECAY, EXPLOSION_COLOR, EXPLOSION_RADIUS_GROW, EXPLOSION_RADIUS_INIT,
    VICTORY_COLOR, VICTORY_PARTICLE_LIFETIME, VICTORY_PARTICLE_SPEED, VICTORY_PARTICLES,
)


@dataclass
class Effect:
    """效果基類"""
    x: float
    y: float
    active: bool = True

    def update(self, dt: float = 1.0):
        """更新效果"""
        pass

    def is_alive(self) -> bool:
        """檢查效果是否還活著"""
        return self.active

    def render_data(self) -> Dict:
        return {'kind': 'none', 'x': self.x, 'y': self.y}


@dataclass
class ExplosionEffect(Effect):
    """撞擊爆炸環"""
    radius: float = EXPLOSION_RADIUS_INIT
    alpha: float = 255
    color: Tuple[int, int, int] = EXPLOSION_COLOR

    def update(self, dt: float = 1.0):
        self.radius += EXPLOSION_RADIUS_GROW * dt
        self.alpha -= EXPLOSION_ALPHA_DECAY * dt

        if self.alpha <= 0:
            self.alpha = 0
            self.active = False

    def render_data(self) -> Dict:
        return {
            'kind': 'ring',
            'x': self.x,
            'y': self.y,
            'radius': self.radius,
            'alpha': int(self.alpha),
            'color': self.color
        }


@dataclass
class ParticleEffect(Effect):
    """抵達目標的粒子"""
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    lifetime: float = VICTORY_PARTICLE_LIFETIME
    size: float = 3.0
    color: Tuple[int, int, int] = VICTORY_COLOR

    def update(self, dt: float = 1.0):
        self.x += self.velocity_x * dt
        self.y += self.velocity_y * dt
        self.lifetime -= dt

        if self.lifetime <= 0:
            self.active = False

    def render_data(self) -> Dict:
        alpha = int(255 * max(0.0, self.lifetime) / VICTORY_PARTICLE_LIFETIME)
        return {
            'kind': 'dot',
            'x': self.x,
            'y': self.y,
            'radius': self.size,
            'alpha': alpha,
            'color': self.color
        }


class EffectManager:
    """效果管理器"""

    def __init__(self):
        self.effects: List[Effect] = []

    def add_explosion(self, x: float, y: float):
        """添加爆炸效果"""
        self.effects.append(ExplosionEffect(x=x, y=y))

    def add_victory_burst(self, x: float, y: float, count: int = VICTORY_PARTICLES):
        """添加一圈向外飛散的粒子"""
        for i in range(count):
            angle = 2 * math.pi * i / count
            self.effects.append(ParticleEffect(
                x=x, y=y,
                velocity_x=math.cos(angle) * VICTORY_PARTICLE_SPEED,
                velocity_y=math.sin(angle) * VICTORY_PARTICLE_SPEED,
            ))

    def update(self, dt: float = 1.0):
        """更新所有效果並清理結束的效果"""
        for effect in self.effects:
            effect.update(dt)
        self.effects = [e for e in self.effects if e.is_alive()]

    def render_data(self) -> List[Dict]:
        return [effect.render_data() for effect in self.effects]

    def clear(self):
        """清空所有效果"""
        self.effects.clear()

    def active_count(self) -> int:
        return len(self.effects)
