"""
每幀輸入上下文
"""

from enum import Enum
from typing import Optional, TYPE_CHECKING
from dataclasses import dataclass

if TYPE_CHECKING:
    from ..rendering.renderer import Renderer


class Key(Enum):
    """本遊戲關心的按鍵事件"""
    PLAY = 'play'
    QUIT = 'quit'
    FLAP = 'flap'


@dataclass
class FrameContext:
    """後端每幀提供的資料；core 只會設定 quitting，不會清除"""

    console: "Renderer"
    frame_time_ms: float = 0.0
    key: Optional[Key] = None
    quitting: bool = False
