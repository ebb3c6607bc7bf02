"""渲染系統模組（PygameRenderer 需另行從 pygame_renderer 匯入）"""

from .renderer import Renderer
from .grid_renderer import GridRenderer, Cell

__all__ = ['Renderer', 'GridRenderer', 'Cell']
