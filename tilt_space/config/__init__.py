"""配置管理模組

顯示常數放在 tilt_space.config.constants，需要時直接匯入（會載入 pygame）。
"""

from .game_config import GameConfig
from .settings import Settings, load_settings

__all__ = ['GameConfig', 'Settings', 'load_settings']
