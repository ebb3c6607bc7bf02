"""
Flappy Term 主程式：初始化後端並驅動每幀迴圈
"""

import argparse
from typing import Optional

import numpy as np
import pygame

from .config import Settings, load_settings
from .core import FrameContext, GameState, GameMode
from .rendering import Renderer
from .rendering.pygame_renderer import PygameRenderer


class FlappyApp:
    """主應用"""

    def __init__(self, settings: Settings):
        """初始化應用"""
        self.settings = settings
        self.config = settings.game_config()
        self.renderer: Optional[Renderer] = None
        self.state = GameState(self.config, np.random.default_rng(settings.seed))
        self.frames = 0

    def initialize(self):
        """初始化渲染器；失敗時直接結束，不重試"""
        self.renderer = PygameRenderer(self.settings.cell_size, self.settings.font_family)
        try:
            self.renderer.init(self.config.screen_width, self.config.screen_height,
                               self.settings.window_title)
        except pygame.error as e:
            print(f"[錯誤] 無法初始化顯示: {e}")
            raise
        print(f"[信息] 視窗 {self.config.screen_width}x{self.config.screen_height} "
              f"(字元格 {self.settings.cell_size}px)")

    def run(self):
        """運行主迴圈直到玩家離開"""
        ctx = FrameContext(console=self.renderer)
        last_mode = self.state.mode

        while not ctx.quitting:
            events = self.renderer.handle_events()
            if events['quit']:
                break

            ctx.key = events['key']
            self.state.tick(ctx)
            self.renderer.present()
            self.frames += 1

            if self.state.mode != last_mode:
                self._log_transition(last_mode, self.state.mode)
                last_mode = self.state.mode

            ctx.frame_time_ms = self.renderer.tick(self.settings.render_fps)

        self.cleanup()

    def _log_transition(self, old: GameMode, new: GameMode):
        if new == GameMode.END:
            print(f"[信息] 遊戲結束，得分 {self.state.score}")
        elif new == GameMode.PLAYING:
            print(f"[信息] 開始遊戲 (來自 {old.value})")

    def cleanup(self):
        """清理資源"""
        if self.renderer:
            self.renderer.cleanup()
        print(f"[信息] 程序正常結束。共 {self.frames} 幀。")


def main(argv=None):
    """主函數"""
    parser = argparse.ArgumentParser(description="Flappy bird on a character grid")
    parser.add_argument("--config", default="config.yaml", help="配置文件路徑 (.yaml/.json)")
    parser.add_argument("--seed", type=int, default=None, help="障礙物隨機種子")
    args = parser.parse_args(argv)

    # 載入配置
    settings = load_settings(args.config)
    if args.seed is not None:
        settings.seed = args.seed

    # 創建並運行
    app = FlappyApp(settings)
    app.initialize()
    app.run()


if __name__ == "__main__":
    main()
