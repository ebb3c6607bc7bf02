from __future__ import annotations

import os

import numpy as np
import pytest

# pygame 測試在無顯示環境下執行
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from flappy.config import GameConfig
from flappy.core import FrameContext, GameState
from flappy.rendering import GridRenderer


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def console(config: GameConfig) -> GridRenderer:
    return GridRenderer(config.screen_width, config.screen_height)


@pytest.fixture
def state(config: GameConfig, rng: np.random.Generator) -> GameState:
    return GameState(config, rng)


@pytest.fixture
def ctx(console: GridRenderer) -> FrameContext:
    return FrameContext(console=console)
