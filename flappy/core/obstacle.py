"""
障礙物（上下兩段牆，中間留缺口）
"""

from typing import Tuple
from dataclasses import dataclass, field
import numpy as np

from ..config.settings import GameConfig
from ..config.constants import RED, BLACK, OBSTACLE_GLYPH
from .collision import CollisionDetector


@dataclass
class Obstacle:
    """障礙物；每次得分時整個替換，不原地修改"""

    x: int
    gap_y: int
    size: int
    config: GameConfig = field(default_factory=GameConfig, repr=False)

    @classmethod
    def create(cls, x: int, score: int, config: GameConfig,
               rng: np.random.Generator) -> "Obstacle":
        """
        建立新障礙物

        Args:
            x: 世界x座標
            score: 目前分數，分數越高缺口越小
            config: 遊戲配置
            rng: 隨機數產生器（系統唯一的隨機來源）
        """
        low, high = config.gap_y_range
        return cls(
            x=x,
            gap_y=int(rng.integers(low, high)),
            size=max(config.min_gap_size, config.max_gap_size - score),
            config=config,
        )

    def gap_bounds(self) -> Tuple[int, int]:
        """缺口上下緣；size 為奇數時缺口比 size 窄 1"""
        half_size = self.size // 2
        return (self.gap_y - half_size, self.gap_y + half_size)

    def render(self, player_x: int, console):
        """以玩家為錨點繪製捲動中的障礙物"""
        screen_x = self.x + self.config.player_screen_x - player_x

        above_gap, below_gap = self.gap_bounds()
        self._draw_wall(console, screen_x, range(0, above_gap))
        self._draw_wall(console, screen_x, range(below_gap, self.config.screen_height))

    def _draw_wall(self, console, screen_x: int, rows: range):
        for y in rows:
            console.set(screen_x, y, RED, BLACK, OBSTACLE_GLYPH)

    def hit_obstacle(self, player) -> bool:
        """玩家是否撞上本障礙物"""
        above_gap, below_gap = self.gap_bounds()
        return CollisionDetector.check_gap_collision(
            player.x, player.y, self.x, above_gap, below_gap)
