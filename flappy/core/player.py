"""
玩家（鳥）
"""

from ..config.settings import GameConfig
from ..config.constants import YELLOW, BLACK, PLAYER_GLYPH


class Player:
    """玩家：x 為世界座標（每個物理步長 +1），y 為垂直位置"""

    def __init__(self, x: int, y: float, config: GameConfig = None):
        self.config = config or GameConfig()
        self.x = x
        self.y = y
        self.velocity = 0.0

    def gravity_and_move(self):
        """
        執行一個物理步長

        前置條件：每次呼叫 x 恰好前進 1，碰撞檢測依賴此點
        """
        if self.velocity < self.config.max_velocity:
            self.velocity = min(self.velocity + self.config.gravity_step,
                                self.config.max_velocity)

        self.y += self.velocity

        if self.y < 0.0:
            self.y = 0.0

        self.x += 1

    def flap(self):
        """拍翅：直接覆寫速度"""
        self.velocity = self.config.flap_velocity

    def render(self, console):
        """在固定螢幕欄繪製玩家"""
        console.set(self.config.player_screen_x, int(self.y),
                    YELLOW, BLACK, PLAYER_GLYPH)
