"""
模擬主循環

每個 tick 依序：套用最新傾斜樣本 → 推進障礙物 → 碰撞判定 → 狀態機。
循環只在 PLAYING 時排程下一個 tick；進入終局立即取消待執行的 tick
並退訂感測器，直到 reset() 再恢復。
"""

import logging
from dataclasses import replace
from typing import Any, Callable, Optional, Protocol

from ..config import GameConfig
from .collision import CollisionDetector, Outcome
from .entities import Obstacle, Round, RoundFactory, RoundState
from .game_state import GameStateMachine, NotificationSink
from .input_mapper import InputMapper, TiltSample
from .motion import MotionSimulator

logger = logging.getLogger(__name__)


class FrameClock(Protocol):
    """宿主的畫面時鐘：單次請求下一幀，可取消"""

    def request(self, callback: Callable[[], None]) -> Any: ...

    def cancel(self, handle: Any) -> None: ...


class Subscription(Protocol):
    def remove(self) -> None: ...


class SensorStream(Protocol):
    def subscribe(self, listener: Callable[[TiltSample], None]) -> Subscription: ...


class SimulationLoop:
    """持有唯一一個 Round 並驅動 tick"""

    def __init__(self, config: GameConfig, clock: FrameClock,
                 sensor: Optional[SensorStream] = None,
                 sink: Optional[NotificationSink] = None,
                 factory: Optional[RoundFactory] = None):
        self.config = config
        self.clock = clock
        self.sensor = sensor
        self.factory = factory or RoundFactory(config)

        self.mapper = InputMapper(config)
        self.motion = MotionSimulator(config)
        self.detector = CollisionDetector()

        self.machine = GameStateMachine()
        # 先更新 Round 與停止循環，再通知外部
        for terminal in (RoundState.LOST, RoundState.WON):
            self.machine.on_enter(terminal, self._on_terminal)
        if sink is not None:
            self.machine.attach_sink(sink)

        self.round: Round = self.factory.new_round()
        self.running = False
        self.tick_count = 0
        self.last_hit: Optional[Obstacle] = None

        self._pending: Any = None
        self._subscription: Optional[Subscription] = None
        self._latest_sample: Optional[TiltSample] = None

    # ------------------------------------------------------------------
    @property
    def state(self) -> RoundState:
        return self.round.state

    @property
    def has_pending_tick(self) -> bool:
        return self._pending is not None

    def snapshot(self) -> Round:
        """供渲染讀取的回合快照（不可變）"""
        return self.round

    def on_sample(self, sample: TiltSample):
        """感測器回呼：只保留最新樣本"""
        self._latest_sample = sample

    # ------------------------------------------------------------------
    def start(self):
        """開始排程 tick"""
        if self.running:
            return
        self.running = True
        if self.round.is_playing:
            self._subscribe()
            self._schedule()

    def stop(self):
        """停止循環並取消所有待執行的 tick"""
        self.running = False
        self._cancel_pending()
        self._unsubscribe()

    def reset(self) -> Round:
        """
        以新回合整體取代目前回合

        先取消待執行的 tick，避免舊排程在新回合上執行。
        """
        self._cancel_pending()
        self._unsubscribe()

        self.round = self.factory.new_round()
        self.tick_count = 0
        self.last_hit = None
        self._latest_sample = None
        self.machine.reset()
        logger.info("新回合開始，障礙物數量 %d", len(self.round.obstacles))

        if self.running:
            self._subscribe()
            self._schedule()
        return self.round

    # ------------------------------------------------------------------
    def tick(self) -> Outcome:
        """處理一個 tick；終局時不做任何事"""
        if not self.round.is_playing:
            return Outcome.CONTINUE

        craft = self.round.craft
        sample, self._latest_sample = self._latest_sample, None
        if sample is not None:
            craft = self.mapper.apply(craft, sample)

        obstacles = self.motion.advance_all(self.round.obstacles)
        self.round = replace(self.round, craft=craft, obstacles=obstacles)
        self.tick_count += 1

        outcome = self.detector.evaluate(craft, obstacles, self.round.goal)
        if outcome is Outcome.LOST:
            self.last_hit = self.detector.find_hit(craft, obstacles)
        self.machine.apply(outcome)
        return outcome

    def _on_frame(self):
        self._pending = None
        self.tick()
        if self.running and self.round.is_playing:
            self._schedule()

    def _on_terminal(self, state: RoundState):
        self.round = replace(self.round, state=state)
        self._cancel_pending()
        self._unsubscribe()
        logger.info("回合結束: %s (tick %d)", state.value, self.tick_count)

    # ------------------------------------------------------------------
    def _schedule(self):
        if self._pending is None:
            self._pending = self.clock.request(self._on_frame)

    def _cancel_pending(self):
        if self._pending is not None:
            self.clock.cancel(self._pending)
            self._pending = None

    def _subscribe(self):
        if self.sensor is not None and self._subscription is None:
            self._subscription = self.sensor.subscribe(self.on_sample)

    def _unsubscribe(self):
        if self._subscription is not None:
            self._subscription.remove()
            self._subscription = None
        self._latest_sample = None
