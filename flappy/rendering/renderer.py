"""
抽象渲染器接口（字元網格主控台）
"""

from abc import ABC, abstractmethod
from typing import Tuple

Color = Tuple[int, int, int]


class Renderer(ABC):
    """渲染器抽象基類"""

    @abstractmethod
    def init(self, width: int, height: int, title: str = ""):
        """初始化渲染器（寬高以字元格為單位）"""
        pass

    @abstractmethod
    def cls(self):
        """清空畫面（黑底）"""
        pass

    @abstractmethod
    def cls_bg(self, color: Color):
        """以指定背景色清空畫面"""
        pass

    @abstractmethod
    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        """設定單一字元格；越界由後端自行忽略"""
        pass

    @abstractmethod
    def print(self, x: int, y: int, text: str):
        """在指定位置輸出文字（白字黑底）"""
        pass

    @abstractmethod
    def print_color_centered(self, y: int, fg: Color, bg: Color, text: str):
        """在指定列置中輸出彩色文字"""
        pass

    @abstractmethod
    def present(self):
        """呈現畫面"""
        pass

    @abstractmethod
    def cleanup(self):
        """清理資源"""
        pass

    @abstractmethod
    def handle_events(self) -> dict:
        """處理事件"""
        pass

    @abstractmethod
    def tick(self, fps: float) -> float:
        """控制幀率，回傳距上一幀經過的毫秒數"""
        pass
