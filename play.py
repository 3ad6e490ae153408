#!/usr/bin/env python3
"""
play.py ─ Tilt Space 互動遊戲
====================================================================
- 方向鍵 / WASD 模擬傾斜，把飛船開到星球，避開小行星。
- 撞上小行星 → Game Over；抵達星球 → 勝利。
- R / Enter 或點擊 "Try Again" 重新開始，Esc 離開。
"""

import argparse
import logging

from tilt_space.config import Settings, load_settings
from tilt_space.config import constants
from tilt_space.core import RoundFactory, RoundState, SimulationLoop
from tilt_space.host.keyboard import KeyboardTiltSensor
from tilt_space.host.pygame_clock import PygameFrameClock
from tilt_space.host.sounds import SoundNotifier
from tilt_space.logging_config import setup_logging
from tilt_space.rendering import EffectManager, PygameRenderer

logger = logging.getLogger("play")


class _EffectSink:
    """終局時加入視覺效果"""

    def __init__(self, game: "TiltSpaceGame"):
        self.game = game

    def on_lost(self) -> None:
        craft = self.game.loop.snapshot().craft
        self.game.effects.add_explosion(craft.position.x, craft.position.y)

    def on_won(self) -> None:
        goal = self.game.loop.snapshot().goal
        half = goal.extent / 2
        self.game.effects.add_victory_burst(goal.position.x + half, goal.position.y + half)


class TiltSpaceGame:
    """主遊戲應用"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.config = settings.game_config()

        self.clock = PygameFrameClock(settings.render_fps)
        self.sensor = KeyboardTiltSensor(settings.keyboard_tilt_strength)
        self.sounds = SoundNotifier.from_settings(settings)
        self.effects = EffectManager()
        self.renderer = PygameRenderer(settings.assets)

        factory = RoundFactory(self.config, seed=settings.seed)
        self.loop = SimulationLoop(self.config, self.clock, sensor=self.sensor,
                                   sink=self.sounds, factory=factory)
        if settings.enable_effects:
            self.loop.machine.attach_sink(_EffectSink(self))

    def initialize(self):
        """初始化視窗與素材"""
        self.renderer.init(self.config.width, self.config.height, constants.WINDOW_TITLE)
        self.renderer.load_sprites(self.config.craft_extent, self.config.obstacle_extent,
                                   self.config.goal_extent)
        self.sounds.load()
        logger.info("場地 %gx%g，障礙物 %d 個", self.config.width, self.config.height,
                    self.config.obstacle_count)

    def run(self):
        """主循環：每幀處理事件、讀取感測器、推進時鐘、繪製"""
        self.loop.start()
        running = True
        while running:
            events = self.renderer.handle_events()
            if events['quit']:
                running = False
                break
            if events['reset'] and self.loop.state is not RoundState.PLAYING:
                self.effects.clear()
                self.loop.reset()

            if self.loop.state is RoundState.PLAYING:
                self.sensor.poll()
            self.clock.pump()

            self.effects.update()
            self.renderer.draw_round(self.loop.snapshot(), self.effects.render_data())
            self.renderer.draw_hud(self.clock.get_fps())
            self.renderer.present()

        self.cleanup()

    def cleanup(self):
        """清理資源"""
        self.loop.stop()
        self.renderer.cleanup()
        logger.info("程序正常結束。")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tilt Space")
    parser.add_argument("--config", default="config.yaml", help="配置文件路徑 (.yaml / .json)")
    parser.add_argument("--seed", type=int, default=None, help="隨機種子")
    parser.add_argument("--mute", action="store_true", help="關閉音效")
    return parser.parse_args(argv)


def main(argv=None):
    """主函數"""
    args = parse_args(argv)
    settings = load_settings(args.config)
    if args.seed is not None:
        settings.seed = args.seed
    if args.mute:
        settings.mute = True
    setup_logging(settings.log_level)

    game = TiltSpaceGame(settings)
    game.initialize()
    game.run()


if __name__ == "__main__":
    main()
