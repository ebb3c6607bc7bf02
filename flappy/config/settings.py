"""
配置管理系統
"""

from pathlib import Path
from dataclasses import dataclass, fields
from typing import Dict, Any, Optional, Tuple
import yaml
import json

from .constants import (
    DEFAULT_WINDOW_TITLE,
    DEFAULT_RENDER_FPS,
    DEFAULT_CELL_SIZE,
    DEFAULT_FONT_FAMILY,
)


@dataclass(frozen=True)
class GameConfig:
    """遊戲常數（不可變），建構模式機時傳入"""

    # 畫面（字元格）
    screen_width: int = 80
    screen_height: int = 50

    # 物理步長（毫秒）
    frame_duration_ms: float = 75.0

    # 玩家
    player_start_x: int = 5
    player_screen_x: int = 5
    player_start_y: float = 25.0
    gravity_step: float = 0.1
    max_velocity: float = 2.0
    flap_velocity: float = -1.0

    # 障礙物
    max_gap_size: int = 20
    min_gap_size: int = 2
    gap_y_range: Tuple[int, int] = (10, 40)

    def validate(self) -> "GameConfig":
        """驗證數值，不合法時拋出 ValueError"""
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError(
                f"畫面尺寸必須為正: {self.screen_width}x{self.screen_height}")
        if self.frame_duration_ms <= 0:
            raise ValueError(f"物理步長必須為正: {self.frame_duration_ms}")
        low, high = self.gap_y_range
        if high <= low:
            raise ValueError(f"缺口範圍為空: [{low}, {high})")
        if self.min_gap_size < 1:
            raise ValueError(f"最小缺口必須至少為 1: {self.min_gap_size}")
        return self

    @classmethod
    def from_dict(cls, overrides: Optional[Dict[str, Any]]) -> "GameConfig":
        """由覆寫字典建立配置，忽略未知鍵"""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in (overrides or {}).items():
            if key not in known:
                print(f"警告: 未知的遊戲配置項: {key}")
                continue
            if key == 'gap_y_range':
                value = tuple(value)
            values[key] = value
        return cls(**values).validate()


class Settings:
    """配置管理類"""

    def __init__(self):
        # 視窗配置
        self.window_title = DEFAULT_WINDOW_TITLE
        self.render_fps = DEFAULT_RENDER_FPS
        self.cell_size = DEFAULT_CELL_SIZE
        self.font_family = DEFAULT_FONT_FAMILY

        # 遊戲配置
        self.seed = None
        self.game: Dict[str, Any] = {}

    def load_from_file(self, config_path: str):
        """從文件載入配置"""
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        elif path.suffix == '.json':
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

        # 更新配置
        for key, value in config.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def save_to_file(self, config_path: str):
        """保存配置到文件"""
        config = {
            'window_title': self.window_title,
            'render_fps': self.render_fps,
            'cell_size': self.cell_size,
            'font_family': self.font_family,
            'seed': self.seed,
            'game': dict(self.game),
        }

        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'w', encoding='utf-8') as f:
                yaml.dump(config, f, default_flow_style=False, allow_unicode=True)
        elif path.suffix == '.json':
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2, ensure_ascii=False)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

    def validate(self) -> bool:
        """驗證配置的有效性"""
        if not isinstance(self.render_fps, (int, float)) or self.render_fps <= 0:
            print(f"警告: render_fps 無效 ({self.render_fps})，改用 {DEFAULT_RENDER_FPS}")
            self.render_fps = DEFAULT_RENDER_FPS

        if not isinstance(self.cell_size, int) or self.cell_size <= 0:
            print(f"警告: cell_size 無效 ({self.cell_size})，改用 {DEFAULT_CELL_SIZE}")
            self.cell_size = DEFAULT_CELL_SIZE

        # 遊戲常數不合法時直接失敗
        self.game_config()
        return True

    def game_config(self) -> GameConfig:
        """建立不可變的遊戲配置"""
        return GameConfig.from_dict(self.game)


def load_settings(config_path: str = None) -> Settings:
    """載入配置的便捷函數"""
    settings = Settings()

    if config_path and Path(config_path).exists():
        settings.load_from_file(config_path)
        print(f"[信息] 已載入配置: {config_path}")

    settings.validate()
    return settings
