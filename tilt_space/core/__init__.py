"""核心模擬系統"""

from .geometry import Vector2, overlaps, clamp
from .entities import Craft, Obstacle, Goal, Round, RoundState, RoundFactory
from .input_mapper import InputMapper, TiltSample
from .motion import MotionSimulator
from .collision import CollisionDetector, Outcome
from .game_state import GameStateMachine, NotificationSink
from .loop import SimulationLoop, FrameClock, SensorStream, Subscription

__all__ = [
    'Vector2', 'overlaps', 'clamp',
    'Craft', 'Obstacle', 'Goal', 'Round', 'RoundState', 'RoundFactory',
    'InputMapper', 'TiltSample',
    'MotionSimulator',
    'CollisionDetector', 'Outcome',
    'GameStateMachine', 'NotificationSink',
    'SimulationLoop', 'FrameClock', 'SensorStream', 'Subscription',
]
