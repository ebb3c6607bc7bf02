"""
無視窗字元網格渲染器（測試與 gym 環境使用）
"""

from collections import deque
from dataclasses import dataclass
from typing import List, Optional

from .renderer import Renderer, Color
from ..config.constants import BLACK, WHITE, BLANK_GLYPH
from ..core.frame import Key


@dataclass
class Cell:
    """單一字元格"""
    glyph: str = BLANK_GLYPH
    fg: Color = WHITE
    bg: Color = BLACK


class GridRenderer(Renderer):
    """記憶體中的字元緩衝區"""

    def __init__(self, width: int = 80, height: int = 50):
        self.width = 0
        self.height = 0
        self.title = ""
        self.cells: List[List[Cell]] = []
        self.frames_presented = 0
        self._pending_keys = deque()
        self._alloc(width, height)

    def _alloc(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cls()

    def init(self, width: int, height: int, title: str = ""):
        self._alloc(width, height)
        self.title = title

    def cls(self):
        self.cls_bg(BLACK)

    def cls_bg(self, color: Color):
        self.cells = [[Cell(bg=color) for _ in range(self.width)]
                      for _ in range(self.height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        if not self.in_bounds(x, y):
            return
        self.cells[y][x] = Cell(glyph=glyph, fg=fg, bg=bg)

    def print_color(self, x: int, y: int, fg: Color, bg: Color, text: str):
        """逐字寫入一行文字"""
        for offset, ch in enumerate(text):
            self.set(x + offset, y, fg, bg, ch)

    def print(self, x: int, y: int, text: str):
        self.print_color(x, y, WHITE, BLACK, text)

    def print_color_centered(self, y: int, fg: Color, bg: Color, text: str):
        x = self.width // 2 - len(text) // 2
        self.print_color(x, y, fg, bg, text)

    def present(self):
        self.frames_presented += 1

    def cleanup(self):
        self._pending_keys.clear()

    def push_key(self, key: Optional[Key]):
        """排入一個按鍵，下次 handle_events 時取出；None 代表該幀無按鍵"""
        self._pending_keys.append(key)

    def handle_events(self) -> dict:
        key: Optional[Key] = self._pending_keys.popleft() if self._pending_keys else None
        return {'quit': False, 'key': key}

    def tick(self, fps: float) -> float:
        # 無視窗時以固定步長模擬時間
        return 1000.0 / fps

    # ---------- 查詢 ----------
    def glyph_at(self, x: int, y: int) -> str:
        return self.cells[y][x].glyph

    def row_text(self, y: int) -> str:
        return ''.join(cell.glyph for cell in self.cells[y])

    def find(self, glyph: str) -> List[tuple]:
        """所有出現該字形的 (x, y)"""
        return [(x, y)
                for y, row in enumerate(self.cells)
                for x, cell in enumerate(row)
                if cell.glyph == glyph]

    def to_text(self) -> str:
        return '\n'.join(self.row_text(y) for y in range(self.height))
