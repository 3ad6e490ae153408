"""
Pygame渲染器實現
"""

import logging
import random
from pathlib import Path
from typing import Dict, Optional

import pygame

from ..config.constants import (
    BUTTON_HEIGHT, BUTTON_WIDTH, FONT_FAMILY_PRIMARY, FONT_SIZE_LARGE, FONT_SIZE_MEDIUM,
    FONT_SIZE_SMALL, LOST_MESSAGE, MODAL_HEIGHT, MODAL_OVERLAY_ALPHA, MODAL_WIDTH,
    RESET_KEYS, RETRY_LABEL, STAR_COUNT, STAR_SEED, THEME_COLORS, WON_MESSAGE,
)
from ..core import Craft, Goal, Obstacle, RoundState
from .renderer import Renderer

logger = logging.getLogger(__name__)


class PygameRenderer(Renderer):
    """Pygame渲染器"""

    def __init__(self, assets: Optional[Dict[str, str]] = None):
        self.assets = assets or {}
        self.screen = None
        self.fonts = {}
        self.width = 0
        self.height = 0
        self.background = None
        self.images: Dict[str, Optional[pygame.Surface]] = {}
        self.button_rect: Optional[pygame.Rect] = None

    def init(self, width: int, height: int, title: str = ""):
        """初始化Pygame"""
        pygame.init()
        self.width = int(width)
        self.height = int(height)
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(title)

        self._init_fonts()
        self.background = self._create_background()

    def _init_fonts(self):
        self.fonts['small'] = pygame.font.SysFont(FONT_FAMILY_PRIMARY, FONT_SIZE_SMALL)
        self.fonts['medium'] = pygame.font.SysFont(FONT_FAMILY_PRIMARY, FONT_SIZE_MEDIUM)
        self.fonts['large'] = pygame.font.SysFont(FONT_FAMILY_PRIMARY, FONT_SIZE_LARGE, bold=True)

    def _create_background(self) -> pygame.Surface:
        """背景圖片，缺失時畫星空"""
        image = self._load_image(self.assets.get('background_image'), (self.width, self.height))
        if image is not None:
            return image

        surface = pygame.Surface((self.width, self.height))
        surface.fill(THEME_COLORS['background'])
        rng = random.Random(STAR_SEED)
        for _ in range(STAR_COUNT):
            pos = (rng.randrange(self.width), rng.randrange(self.height))
            pygame.draw.circle(surface, THEME_COLORS['star'], pos, rng.choice((1, 1, 2)))
        return surface

    def _load_image(self, image_path: Optional[str], size) -> Optional[pygame.Surface]:
        if not image_path or not Path(image_path).exists():
            return None
        try:
            image = pygame.image.load(image_path).convert_alpha()
            return pygame.transform.smoothscale(image, (int(size[0]), int(size[1])))
        except pygame.error as e:
            logger.warning("無法載入圖片 %s: %s", image_path, e)
            return None

    def load_sprites(self, craft_extent: float, obstacle_extent: float, goal_extent: float):
        """依實體尺寸載入貼圖"""
        self.images['craft'] = self._load_image(self.assets.get('craft_image'),
                                                (craft_extent, craft_extent))
        self.images['obstacle'] = self._load_image(self.assets.get('obstacle_image'),
                                                   (obstacle_extent, obstacle_extent))
        self.images['goal'] = self._load_image(self.assets.get('goal_image'),
                                               (goal_extent, goal_extent))

    # ------------------------------------------------------------------
    def draw_background(self):
        self.button_rect = None
        if self.background:
            self.screen.blit(self.background, (0, 0))

    def draw_craft(self, craft: Craft):
        half = craft.extent / 2
        left, top = craft.position.x - half, craft.position.y - half
        image = self.images.get('craft')
        if image is not None:
            self.screen.blit(image, (left, top))
            return
        # 三角形飛船
        points = [
            (craft.position.x, top),
            (left, top + craft.extent),
            (left + craft.extent, top + craft.extent),
        ]
        pygame.draw.polygon(self.screen, THEME_COLORS['craft'], points)

    def draw_obstacle(self, obstacle: Obstacle):
        image = self.images.get('obstacle')
        if image is not None:
            self.screen.blit(image, (obstacle.position.x, obstacle.position.y))
            return
        half = obstacle.extent / 2
        center = (int(obstacle.position.x + half), int(obstacle.position.y + half))
        pygame.draw.circle(self.screen, THEME_COLORS['obstacle'], center, int(half))

    def draw_goal(self, goal: Goal):
        image = self.images.get('goal')
        if image is not None:
            self.screen.blit(image, (goal.position.x, goal.position.y))
            return
        half = goal.extent / 2
        center = (int(goal.position.x + half), int(goal.position.y + half))
        pygame.draw.circle(self.screen, THEME_COLORS['goal'], center, int(half))

    def draw_effect(self, effect_data: Dict):
        radius = int(effect_data['radius'])
        if effect_data['alpha'] <= 0 or radius <= 0:
            return
        surface = pygame.Surface((radius * 2 + 4, radius * 2 + 4), pygame.SRCALPHA)
        color = (*effect_data['color'], effect_data['alpha'])
        width = 3 if effect_data['kind'] == 'ring' else 0
        pygame.draw.circle(surface, color, (radius + 2, radius + 2), radius, width)
        self.screen.blit(surface, (int(effect_data['x']) - radius - 2,
                                   int(effect_data['y']) - radius - 2))

    def draw_text(self, text: str, x: int, y: int,
                  size: str = 'medium', color=None, center: bool = False):
        """繪製文字"""
        if color is None:
            color = THEME_COLORS['text_primary']

        font = self.fonts.get(size, self.fonts['medium'])
        surface = font.render(text, True, color)

        if center:
            rect = surface.get_rect(center=(x, y))
            self.screen.blit(surface, rect)
        else:
            self.screen.blit(surface, (x, y))

    def draw_modal(self, state: RoundState):
        """半透明遮罩 + 訊息 + 重試按鈕"""
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, MODAL_OVERLAY_ALPHA))
        self.screen.blit(overlay, (0, 0))

        panel = pygame.Rect(0, 0, MODAL_WIDTH, MODAL_HEIGHT)
        panel.center = (self.width // 2, self.height // 2)
        pygame.draw.rect(self.screen, THEME_COLORS['modal_panel'], panel, border_radius=10)

        message = WON_MESSAGE if state is RoundState.WON else LOST_MESSAGE
        self.draw_text(message, panel.centerx, panel.top + 45, size='large',
                       color=THEME_COLORS['modal_text'], center=True)

        self.button_rect = pygame.Rect(0, 0, BUTTON_WIDTH, BUTTON_HEIGHT)
        self.button_rect.center = (panel.centerx, panel.bottom - 45)
        pygame.draw.rect(self.screen, THEME_COLORS['button'], self.button_rect, border_radius=5)
        self.draw_text(RETRY_LABEL, self.button_rect.centerx, self.button_rect.centery,
                       size='medium', center=True)

    def draw_hud(self, fps: float):
        self.draw_text(f"FPS {fps:.0f}", 8, 8, size='small',
                       color=THEME_COLORS['text_secondary'])

    def present(self):
        pygame.display.flip()

    def cleanup(self):
        pygame.quit()

    def handle_events(self) -> Dict:
        """
        處理事件

        Returns:
            {'quit': 是否關閉, 'reset': 是否按下重試}
        """
        events = {'quit': False, 'reset': False}

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events['quit'] = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    events['quit'] = True
                elif event.key in RESET_KEYS:
                    events['reset'] = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.button_rect is not None and self.button_rect.collidepoint(event.pos):
                    events['reset'] = True

        return events
