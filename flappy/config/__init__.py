"""配置管理模組"""

from .settings import GameConfig, Settings, load_settings
from . import constants

__all__ = ['GameConfig', 'Settings', 'load_settings', 'constants']
