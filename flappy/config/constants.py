"""
顯示常數：顏色、字形與文字排版
"""

# 顏色 (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
NAVY = (0, 0, 128)

# 字形
PLAYER_GLYPH = '@'
OBSTACLE_GLYPH = '#'
BLANK_GLYPH = ' '

# 選單排版（列）
MENU_TITLE_ROW = 8
MENU_PLAY_ROW = 12
MENU_QUIT_ROW = 16

DEAD_TITLE_ROW = 8
DEAD_SCORE_ROW = 12
DEAD_PLAY_ROW = 16
DEAD_QUIT_ROW = 20

# HUD
HUD_ROW = 1
HUD_HINT_COL = 1

# 視窗
DEFAULT_WINDOW_TITLE = "Flappy bird"
DEFAULT_RENDER_FPS = 60
DEFAULT_CELL_SIZE = 12
DEFAULT_FONT_FAMILY = "couriernew,dejavusansmono,monospace"
