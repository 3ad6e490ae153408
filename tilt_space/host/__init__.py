"""宿主端協作者：畫面時鐘、感測器、音效通知

此處只匯出不依賴 pygame 的部分；PygameFrameClock、KeyboardTiltSensor、
SoundNotifier 請從各自的模組匯入。
"""

from .clock import ManualFrameClock
from .sensors import BaseSensor, AutopilotSensor

__all__ = ['ManualFrameClock', 'BaseSensor', 'AutopilotSensor']
