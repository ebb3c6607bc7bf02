"""核心遊戲系統"""

from .frame import FrameContext, Key
from .player import Player
from .obstacle import Obstacle
from .collision import CollisionDetector
from .game_state import GameState, GameMode

__all__ = ['FrameContext', 'Key', 'Player', 'Obstacle',
           'CollisionDetector', 'GameState', 'GameMode']
