"""Flappy Term - 字元網格版 Flappy Bird"""

__version__ = "0.1.0"
