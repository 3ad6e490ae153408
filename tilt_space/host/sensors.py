"""
傾斜感測器來源
"""

import logging
import random
from typing import Callable, List, Optional

import numpy as np

from ..core import Round, TiltSample

logger = logging.getLogger(__name__)

Listener = Callable[[TiltSample], None]


class _Subscription:
    def __init__(self, sensor: "BaseSensor", listener: Listener):
        self._sensor = sensor
        self._listener = listener

    def remove(self) -> None:
        if self._sensor is not None:
            self._sensor._remove(self._listener)
            self._sensor = None


class BaseSensor:
    """樣本串流：訂閱者收到每一個樣本"""

    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> _Subscription:
        self._listeners.append(listener)
        logger.debug("%s 新增訂閱者 (%d)", type(self).__name__, len(self._listeners))
        return _Subscription(self, listener)

    def _remove(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    def emit(self, sample: TiltSample):
        for listener in list(self._listeners):
            listener(sample)


class AutopilotSensor(BaseSensor):
    """朝目標飛行並閃避障礙物的自動駕駛（批次評估用）"""

    def __init__(self, rng: Optional[random.Random] = None, noise: float = 0.0,
                 approach_distance: float = 50.0, avoid_radius: float = 120.0,
                 avoid_gain: float = 1.5):
        super().__init__()
        self.rng = rng or random.Random()
        self.noise = noise
        self.approach_distance = approach_distance
        self.avoid_radius = avoid_radius
        self.avoid_gain = avoid_gain

    def steer(self, snapshot: Round) -> TiltSample:
        craft = np.array([snapshot.craft.position.x, snapshot.craft.position.y])
        goal = np.array([snapshot.goal.position.x, snapshot.goal.position.y])

        direction = np.clip((goal - craft) / self.approach_distance, -1.0, 1.0)

        for obstacle in snapshot.obstacles:
            away = craft - np.array([obstacle.position.x, obstacle.position.y])
            dist = float(np.linalg.norm(away))
            if 0 < dist < self.avoid_radius:
                weight = (self.avoid_radius - dist) / self.avoid_radius
                direction += away / dist * weight * self.avoid_gain

        if self.noise > 0:
            direction += np.array([self.rng.uniform(-self.noise, self.noise),
                                   self.rng.uniform(-self.noise, self.noise)])

        direction = np.clip(direction, -1.0, 1.0)
        # 畫面 y 軸與傾斜 y 方向相反
        return TiltSample(float(direction[0]), float(-direction[1]))

    def poll(self, snapshot: Round) -> TiltSample:
        sample = self.steer(snapshot)
        self.emit(sample)
        return sample
