"""
Pygame渲染器實現（以等寬字型繪製字元網格）
"""

import pygame
from typing import Dict, Tuple

from .grid_renderer import GridRenderer
from ..config.constants import DEFAULT_CELL_SIZE, DEFAULT_FONT_FAMILY
from ..core.frame import Key

KEY_MAP = {
    pygame.K_p: Key.PLAY,
    pygame.K_q: Key.QUIT,
    pygame.K_SPACE: Key.FLAP,
}


class PygameRenderer(GridRenderer):
    """Pygame渲染器；繪圖先寫入字元緩衝區，present 時才畫到視窗"""

    def __init__(self, cell_size: int = DEFAULT_CELL_SIZE,
                 font_family: str = DEFAULT_FONT_FAMILY):
        self.cell_size = cell_size
        self.font_family = font_family
        self.screen = None
        self.clock = None
        self.font = None
        self._glyph_cache: Dict[Tuple[str, Tuple[int, int, int]], pygame.Surface] = {}
        super().__init__()

    def init(self, width: int, height: int, title: str = ""):
        """初始化Pygame"""
        super().init(width, height, title)
        pygame.init()
        self.screen = pygame.display.set_mode(
            (width * self.cell_size, height * self.cell_size))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self._init_font()

    def _init_font(self):
        """初始化字體"""
        self.font = pygame.font.SysFont(self.font_family, self.cell_size)

    def _glyph_surface(self, glyph: str, color) -> pygame.Surface:
        key = (glyph, tuple(color))
        surface = self._glyph_cache.get(key)
        if surface is None:
            surface = self.font.render(glyph, True, color)
            self._glyph_cache[key] = surface
        return surface

    def present(self):
        """把字元緩衝區畫到視窗並呈現"""
        super().present()
        if self.screen is None:
            return

        size = self.cell_size
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                rect = pygame.Rect(x * size, y * size, size, size)
                self.screen.fill(cell.bg, rect)
                if cell.glyph.strip():
                    glyph = self._glyph_surface(cell.glyph, cell.fg)
                    self.screen.blit(glyph, glyph.get_rect(center=rect.center))

        pygame.display.flip()

    def cleanup(self):
        """清理資源"""
        super().cleanup()
        self._glyph_cache.clear()
        pygame.quit()

    def handle_events(self) -> dict:
        """處理事件；每幀只回報第一個相關按鍵"""
        events = {
            'quit': False,
            'key': None,
        }

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events['quit'] = True
            elif event.type == pygame.KEYDOWN and events['key'] is None:
                events['key'] = KEY_MAP.get(event.key)

        return events

    def tick(self, fps: float) -> float:
        """控制幀率"""
        if self.clock:
            return float(self.clock.tick(fps))
        return super().tick(fps)
