"""
配置管理系統
"""

import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .game_config import GameConfig

logger = logging.getLogger(__name__)

_GAME_KEYS = tuple(f.name for f in fields(GameConfig))


class Settings:
    """配置管理類"""

    def __init__(self):
        # 遊戲參數（轉為 GameConfig 後交給核心）
        defaults = GameConfig()
        self.game: Dict[str, Any] = {name: getattr(defaults, name) for name in _GAME_KEYS}

        # 素材
        self.assets = {
            "craft_image": "assets/spaceship.png",
            "obstacle_image": "assets/asteroid.png",
            "goal_image": "assets/planet.png",
            "background_image": "assets/space-bg.jpg",
            "lost_sound": "assets/explosion.mp3",
            "won_sound": "assets/victory.mp3",
        }

        # 執行設定
        self.render_fps = 60
        self.mute = False
        self.enable_effects = True
        self.keyboard_tilt_strength = 1.0
        self.seed: Optional[int] = None
        self.log_level = "INFO"

    def load_from_file(self, config_path: str):
        """從文件載入配置"""
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        elif path.suffix == '.json':
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

        # 更新配置；字典型欄位採合併，未知欄位忽略
        for key, value in config.items():
            if not hasattr(self, key):
                logger.warning("忽略未知的配置項: %s", key)
                continue
            current = getattr(self, key)
            if isinstance(current, dict) and isinstance(value, dict):
                current.update(value)
            else:
                setattr(self, key, value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'game': dict(self.game),
            'assets': dict(self.assets),
            'render_fps': self.render_fps,
            'mute': self.mute,
            'enable_effects': self.enable_effects,
            'keyboard_tilt_strength': self.keyboard_tilt_strength,
            'seed': self.seed,
            'log_level': self.log_level,
        }

    def save_to_file(self, config_path: str):
        """保存配置到文件"""
        config = self.to_dict()
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'w', encoding='utf-8') as f:
                yaml.dump(config, f, default_flow_style=False, allow_unicode=True)
        elif path.suffix == '.json':
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2, ensure_ascii=False)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

    def game_config(self) -> GameConfig:
        """建立核心元件使用的不可變配置"""
        unknown = set(self.game) - set(_GAME_KEYS)
        if unknown:
            raise ValueError(f"未知的遊戲參數: {sorted(unknown)}")
        return GameConfig(**self.game)

    def validate(self) -> bool:
        """驗證配置的有效性"""
        # 遊戲參數錯誤直接拋出
        self.game_config()

        if self.render_fps <= 0:
            raise ValueError(f"render_fps 必須為正數: {self.render_fps}")

        # 素材缺失只警告，渲染與音效會退回預設
        for key, asset_path in self.assets.items():
            if asset_path and not Path(asset_path).exists():
                logger.warning("素材不存在: %s (%s)", asset_path, key)

        return True


def load_settings(config_path: str = None) -> Settings:
    """載入配置的便捷函數"""
    settings = Settings()

    if config_path and Path(config_path).exists():
        settings.load_from_file(config_path)
    elif config_path:
        logger.warning("配置文件不存在，使用預設值: %s", config_path)

    settings.validate()
    return settings
