"""
遊戲狀態管理（模式機）
"""

from enum import Enum
from typing import Optional
import numpy as np

from ..config.settings import GameConfig
from ..config.constants import (
    YELLOW, BLACK, NAVY,
    MENU_TITLE_ROW, MENU_PLAY_ROW, MENU_QUIT_ROW,
    DEAD_TITLE_ROW, DEAD_SCORE_ROW, DEAD_PLAY_ROW, DEAD_QUIT_ROW,
    HUD_ROW, HUD_HINT_COL,
)
from .frame import FrameContext, Key
from .player import Player
from .obstacle import Obstacle
from .collision import CollisionDetector


class GameMode(Enum):
    """遊戲模式"""
    MENU = 'menu'
    PLAYING = 'playing'
    END = 'end'


class GameState:
    """遊戲狀態；唯一會修改 Player / Obstacle 的元件"""

    def __init__(self, config: Optional[GameConfig] = None,
                 rng: Optional[np.random.Generator] = None):
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng()

        self.mode = GameMode.MENU
        self.player = self._new_player()
        self.frame_time = 0.0
        self.obstacle = Obstacle.create(self.config.screen_width, 0, self.config, self.rng)
        self.score = 0

        self._handlers = {
            GameMode.MENU: self.main_menu,
            GameMode.PLAYING: self.playing,
            GameMode.END: self.dead,
        }

    def _new_player(self) -> Player:
        return Player(self.config.player_start_x, self.config.player_start_y, self.config)

    def tick(self, ctx: FrameContext):
        """每幀呼叫一次，依模式分派"""
        self._handlers[self.mode](ctx)

    def restart(self):
        """重置所有狀態並進入遊戲"""
        self.mode = GameMode.PLAYING
        self.player = self._new_player()
        self.obstacle = Obstacle.create(self.config.screen_width, 0, self.config, self.rng)
        self.frame_time = 0.0
        self.score = 0

    def main_menu(self, ctx: FrameContext):
        """主選單"""
        console = ctx.console
        console.cls()
        console.print_color_centered(MENU_TITLE_ROW, YELLOW, BLACK, "Welcome to flappy")
        console.print_color_centered(MENU_PLAY_ROW, YELLOW, BLACK, "(P) Play Game")
        console.print_color_centered(MENU_QUIT_ROW, YELLOW, BLACK, "(Q) Quit Game")

        self._handle_menu_key(ctx)

    def playing(self, ctx: FrameContext):
        """
        遊戲中的一幀

        順序：累積時間 → 物理步長 → 繪製玩家 → 繪製障礙物 → 拍翅
        → 計分 → 死亡判定。拍翅在繪製之後才套用，下一幀才看得到。
        """
        console = ctx.console
        console.cls_bg(NAVY)
        console.print(HUD_HINT_COL, HUD_ROW, "Press Space to Flap")
        console.print_color_centered(HUD_ROW, YELLOW, NAVY, f"Score {self.score}")

        self.frame_time += ctx.frame_time_ms
        if self.frame_time > self.config.frame_duration_ms:
            self.frame_time = 0.0
            self.player.gravity_and_move()

        self.player.render(console)
        self.obstacle.render(self.player.x, console)

        if ctx.key == Key.FLAP:
            self.player.flap()

        if self.player.x > self.obstacle.x:
            self.score += 1
            self.obstacle = Obstacle.create(
                self.player.x + self.config.screen_width, self.score, self.config, self.rng)

        if (CollisionDetector.check_out_of_bounds(self.player.y, self.config.screen_height)
                or self.obstacle.hit_obstacle(self.player)):
            self.mode = GameMode.END

    def dead(self, ctx: FrameContext):
        """死亡畫面"""
        console = ctx.console
        console.cls()
        console.print_color_centered(DEAD_TITLE_ROW, YELLOW, BLACK, "You are dead")
        console.print_color_centered(DEAD_SCORE_ROW, YELLOW, BLACK,
                                     f"You earned {self.score} points")
        console.print_color_centered(DEAD_PLAY_ROW, YELLOW, BLACK, "(P) Play Game")
        console.print_color_centered(DEAD_QUIT_ROW, YELLOW, BLACK, "(Q) Quit Game")

        self._handle_menu_key(ctx)

    def _handle_menu_key(self, ctx: FrameContext):
        if ctx.key == Key.PLAY:
            self.restart()
        elif ctx.key == Key.QUIT:
            ctx.quitting = True

    def is_playing(self) -> bool:
        """是否正在遊戲中"""
        return self.mode == GameMode.PLAYING

    def distance_to_obstacle(self) -> int:
        """玩家到目前障礙物的世界距離"""
        return self.obstacle.x - self.player.x
