"""
終局音效通知

播放是非同步的：pygame.mixer 的 play() 立即返回，不會阻塞 tick。
任何音效錯誤都在這裡記錄後吞掉，不會傳回模擬循環。
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import pygame

logger = logging.getLogger(__name__)


class SoundNotifier:
    """用 pygame.mixer 播放爆炸 / 勝利音效"""

    def __init__(self, lost_path: Optional[str] = None, won_path: Optional[str] = None,
                 mute: bool = False, volume: Optional[float] = None):
        self.paths = {'lost': lost_path, 'won': won_path}
        self.mute = mute
        self.volume = volume
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._inited = False
        self._failed_init = False
        self._warned = set()
        # 播放次數統計
        self.played = {'lost': 0, 'won': 0}

    @classmethod
    def from_settings(cls, settings) -> "SoundNotifier":
        return cls(lost_path=settings.assets.get('lost_sound'),
                   won_path=settings.assets.get('won_sound'),
                   mute=settings.mute)

    def ensure_init(self) -> bool:
        """初始化 mixer，可重複呼叫"""
        if self._inited:
            return True
        if self._failed_init or self.mute:
            return False
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init()
            self._inited = pygame.mixer.get_init() is not None
        except pygame.error as e:
            logger.warning("音效初始化失敗: %s", e)
            self._failed_init = True
        return self._inited

    def load(self):
        """載入所有存在的音效檔"""
        if not self.ensure_init():
            return
        for key, path in self.paths.items():
            if not path or not Path(path).exists():
                logger.warning("略過不存在的音效 '%s': %s", key, path)
                continue
            try:
                sound = pygame.mixer.Sound(path)
                if self.volume is not None:
                    sound.set_volume(max(0.0, min(1.0, float(self.volume))))
                self._sounds[key] = sound
            except pygame.error as e:
                logger.warning("無法載入音效 '%s': %s", key, e)

    def _play(self, key: str):
        self.played[key] += 1
        if self.mute or not self._inited:
            return
        sound = self._sounds.get(key)
        if sound is None:
            if key not in self._warned:
                logger.warning("音效 '%s' 未載入", key)
                self._warned.add(key)
            return
        try:
            sound.play()
        except pygame.error as e:
            logger.warning("播放音效 '%s' 失敗: %s", key, e)

    def on_lost(self) -> None:
        self._play('lost')

    def on_won(self) -> None:
        self._play('won')
