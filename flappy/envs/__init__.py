from .flappy_env import FlappyEnv

__all__ = ['FlappyEnv']
