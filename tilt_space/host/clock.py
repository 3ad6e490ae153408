"""
畫面時鐘

request() 只排一幀；回呼在執行中再次 request() 會排到下一幀。
"""

import itertools
from typing import Callable, Dict


class ManualFrameClock:
    """手動推進的時鐘（測試與無畫面模擬用）"""

    def __init__(self):
        self._ids = itertools.count(1)
        self._requests: Dict[int, Callable[[], None]] = {}
        self.frame = 0

    def request(self, callback: Callable[[], None]) -> int:
        handle = next(self._ids)
        self._requests[handle] = callback
        return handle

    def cancel(self, handle: int) -> None:
        self._requests.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._requests)

    def advance(self, frames: int = 1) -> int:
        """推進 frames 幀，回傳實際執行的回呼數"""
        fired = 0
        for _ in range(frames):
            self.frame += 1
            due, self._requests = self._requests, {}
            for callback in due.values():
                callback()
                fired += 1
        return fired
