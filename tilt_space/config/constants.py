"""
顯示與輸入相關常數
"""

import pygame

# 視窗
WINDOW_TITLE = "Tilt Space"
DEFAULT_FPS = 60

# 主題顏色
THEME_COLORS = {
    'background': (8, 10, 28),
    'star': (180, 180, 220),
    'craft': (120, 200, 255),
    'obstacle': (150, 120, 100),
    'goal': (90, 200, 120),
    'text_primary': (255, 255, 255),
    'text_secondary': (180, 180, 180),
    'text_warning': (255, 200, 0),
    'modal_panel': (255, 255, 255),
    'modal_text': (20, 20, 20),
    'button': (0, 123, 255),
}

# 星空背景
STAR_COUNT = 120
STAR_SEED = 7

# 模態視窗
MODAL_WIDTH = 320
MODAL_HEIGHT = 160
MODAL_OVERLAY_ALPHA = 178
BUTTON_WIDTH = 160
BUTTON_HEIGHT = 44

# 字體
FONT_FAMILY_PRIMARY = "arial"
FONT_SIZE_SMALL = 16
FONT_SIZE_MEDIUM = 22
FONT_SIZE_LARGE = 28

# 訊息
LOST_MESSAGE = "Game Over!"
WON_MESSAGE = "You Reached the Planet!"
RETRY_LABEL = "Try Again"

# 效果
EXPLOSION_RADIUS_INIT = 10
EXPLOSION_RADIUS_GROW = 4
EXPLOSION_ALPHA_DECAY = 8
EXPLOSION_COLOR = (255, 140, 40)
VICTORY_PARTICLES = 24
VICTORY_PARTICLE_SPEED = 3.0
VICTORY_PARTICLE_LIFETIME = 40.0
VICTORY_COLOR = (255, 230, 120)

# 鍵盤傾斜
KEYBOARD_TILT_STRENGTH = 1.0
TILT_LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
TILT_RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
TILT_UP_KEYS = (pygame.K_UP, pygame.K_w)
TILT_DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)
RESET_KEYS = (pygame.K_r, pygame.K_RETURN)
