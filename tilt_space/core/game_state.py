"""
遊戲狀態管理
"""

import logging
from typing import Callable, Dict, List, Protocol

from .collision import Outcome
from .entities import RoundState

logger = logging.getLogger(__name__)

TransitionHandler = Callable[[RoundState], None]

_OUTCOME_TARGETS = {
    Outcome.LOST: RoundState.LOST,
    Outcome.WON: RoundState.WON,
}


class NotificationSink(Protocol):
    """終局通知（音效、畫面等由實作者負責）"""

    def on_lost(self) -> None: ...

    def on_won(self) -> None: ...


class GameStateMachine:
    """
    回合狀態機

    PLAYING → LOST / WON 之後停在終局，只有 reset() 能回到 PLAYING。
    進入某狀態時同步呼叫該狀態註冊的處理器，每次轉移恰好一次。
    """

    def __init__(self):
        self.state = RoundState.PLAYING
        self._handlers: Dict[RoundState, List[TransitionHandler]] = {s: [] for s in RoundState}

    def on_enter(self, state: RoundState, handler: TransitionHandler):
        """註冊進入狀態時的處理器"""
        self._handlers[state].append(handler)

    def attach_sink(self, sink: NotificationSink):
        """把通知接到 LOST / WON 的進入事件"""
        self.on_enter(RoundState.LOST, lambda _state: sink.on_lost())
        self.on_enter(RoundState.WON, lambda _state: sink.on_won())

    @property
    def is_playing(self) -> bool:
        return self.state is RoundState.PLAYING

    def apply(self, outcome: Outcome) -> RoundState:
        """
        套用碰撞判定結果

        終局狀態下忽略任何結果，不會重複觸發通知。

        Returns:
            套用後的狀態
        """
        if not self.is_playing:
            return self.state
        target = _OUTCOME_TARGETS.get(outcome)
        if target is None:
            return self.state
        self._enter(target)
        return self.state

    def reset(self) -> RoundState:
        """回到 PLAYING；已在 PLAYING 時不做事"""
        if self.is_playing:
            return self.state
        self._enter(RoundState.PLAYING)
        return self.state

    def _enter(self, target: RoundState):
        previous = self.state
        # 先提交狀態，處理器拋錯時狀態仍然一致
        self.state = target
        logger.info("狀態轉移: %s -> %s", previous.value, target.value)
        for handler in list(self._handlers[target]):
            handler(target)
