import gym
from gym import spaces
import numpy as np

from ..config.settings import GameConfig
from ..core.frame import FrameContext, Key
from ..core.game_state import GameState
from ..rendering.grid_renderer import GridRenderer


class FlappyEnv(gym.Env):
    """
    單人 Flappy（無視窗）：
      - 動作: 0=不動, 1=拍翅
      - 觀測 5 維: (y, velocity, 到障礙物距離, 缺口上緣, 缺口下緣)，皆已正規化
      - 每個 step 恰好推進一個物理步長；拍翅在下一步才生效
      - 得分 +1，死亡 -1
    """

    def __init__(self, config: GameConfig = None):
        super().__init__()
        self.config = config or GameConfig()
        self.console = GridRenderer(self.config.screen_width, self.config.screen_height)

        # 必須嚴格超過物理步長才會推進
        self.step_ms = self.config.frame_duration_ms + 1.0

        self.action_space = spaces.Discrete(2)

        # (y, velocity, dx, gap_top, gap_bottom)
        low  = np.array([0.0, -1.0, 0.0, 0.0, 0.0], dtype=np.float32)
        high = np.array([1.1,  1.0, 1.0, 1.0, 1.0], dtype=np.float32)
        self.observation_space = spaces.Box(low, high, dtype=np.float32)

        self.game = GameState(self.config, self.np_random)

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        self.game.rng = self.np_random
        self.game.restart()
        return self._get_obs()

    def step(self, action):
        key = Key.FLAP if action == 1 else None
        ctx = FrameContext(console=self.console, frame_time_ms=self.step_ms, key=key)

        was_playing = self.game.is_playing()
        score_before = self.game.score
        self.game.tick(ctx)

        reward = float(self.game.score - score_before)
        done = not self.game.is_playing()
        if was_playing and done:
            reward -= 1.0

        return self._get_obs(), reward, done, {'score': self.game.score}

    def _get_obs(self):
        cfg = self.config
        player = self.game.player
        gap_top, gap_bottom = self.game.obstacle.gap_bounds()
        obs = np.array([
            player.y / cfg.screen_height,
            player.velocity / cfg.max_velocity,
            self.game.distance_to_obstacle() / cfg.screen_width,
            gap_top / cfg.screen_height,
            gap_bottom / cfg.screen_height,
        ], dtype=np.float32)
        return np.clip(obs, self.observation_space.low, self.observation_space.high)

    def render(self):
        """回傳目前畫面的文字版本"""
        return self.console.to_text()

    def close(self):
        self.console.cleanup()
