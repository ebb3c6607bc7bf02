from __future__ import annotations

import numpy as np
import pytest

from flappy.config import GameConfig
from flappy.config.constants import NAVY, YELLOW
from flappy.core import FrameContext, GameMode, GameState, Key, Obstacle
from flappy.rendering import GridRenderer


def _tick(state: GameState, ctx: FrameContext, ms: float = 0.0, key: Key | None = None) -> None:
    ctx.frame_time_ms = ms
    ctx.key = key
    state.tick(ctx)


def _start(state: GameState, ctx: FrameContext) -> None:
    _tick(state, ctx, key=Key.PLAY)
    assert state.mode == GameMode.PLAYING


def test_initial_state_is_menu(state: GameState, config: GameConfig) -> None:
    assert state.mode == GameMode.MENU
    assert state.score == 0
    assert state.frame_time == 0.0
    assert state.obstacle.x == config.screen_width


def test_menu_renders_centered_text(state: GameState, ctx: FrameContext, console: GridRenderer) -> None:
    _tick(state, ctx)
    assert console.row_text(8).strip() == "Welcome to flappy"
    assert console.row_text(8)[32:49] == "Welcome to flappy"
    assert console.row_text(12).strip() == "(P) Play Game"
    assert console.row_text(16).strip() == "(Q) Quit Game"
    assert console.cells[8][32].fg == YELLOW


def test_menu_quit_sets_flag_and_keeps_mode(state: GameState, ctx: FrameContext) -> None:
    _tick(state, ctx, key=Key.QUIT)
    assert ctx.quitting is True
    assert state.mode == GameMode.MENU


def test_menu_ignores_flap(state: GameState, ctx: FrameContext) -> None:
    _tick(state, ctx, key=Key.FLAP)
    assert state.mode == GameMode.MENU
    assert ctx.quitting is False


def test_menu_play_resets_everything(state: GameState, ctx: FrameContext) -> None:
    state.score = 9
    state.frame_time = 42.0
    state.player.y = 3.0
    _tick(state, ctx, key=Key.PLAY)
    assert state.mode == GameMode.PLAYING
    assert state.score == 0
    assert state.frame_time == 0.0
    assert (state.player.x, state.player.y, state.player.velocity) == (5, 25.0, 0.0)


@pytest.mark.parametrize("mode", list(GameMode))
def test_restart_is_identical_from_every_mode(mode: GameMode, config: GameConfig) -> None:
    state = GameState(config, np.random.default_rng(7))
    state.mode = mode
    state.score = 12
    state.frame_time = 60.0
    state.player.x, state.player.y, state.player.velocity = 99, 3.5, 1.7
    state.restart()

    assert state.mode == GameMode.PLAYING
    assert (state.player.x, state.player.y, state.player.velocity) == (5, 25.0, 0.0)
    assert state.score == 0
    assert state.frame_time == 0.0
    assert state.obstacle.x == 80
    assert state.obstacle.size == 20
    assert 10 <= state.obstacle.gap_y < 40


def test_physics_steps_only_after_threshold(state: GameState, ctx: FrameContext) -> None:
    _start(state, ctx)

    _tick(state, ctx, ms=75.0)
    assert state.player.x == 5
    assert state.frame_time == 75.0

    _tick(state, ctx, ms=1.0)
    assert state.player.x == 6
    assert state.frame_time == 0.0
    assert state.player.velocity == pytest.approx(0.1)
    assert state.player.y == pytest.approx(25.1)


def test_one_physics_step_per_tick_even_for_long_frames(state: GameState, ctx: FrameContext) -> None:
    _start(state, ctx)
    _tick(state, ctx, ms=1000.0)
    assert state.player.x == 6
    assert state.frame_time == 0.0


def test_flap_is_applied_after_physics_and_render(state: GameState, ctx: FrameContext,
                                                  console: GridRenderer) -> None:
    _start(state, ctx)
    _tick(state, ctx, ms=76.0, key=Key.FLAP)

    # 本幀先以舊速度移動並繪製，拍翅下一步才生效
    assert state.player.y == pytest.approx(25.1)
    assert state.player.velocity == -1.0
    assert console.find('@') == [(5, 25)]

    _tick(state, ctx, ms=76.0)
    assert state.player.velocity == pytest.approx(-0.9)
    assert state.player.y == pytest.approx(24.2)


def test_flap_without_physics_step_still_applies(state: GameState, ctx: FrameContext) -> None:
    _start(state, ctx)
    _tick(state, ctx, ms=10.0, key=Key.FLAP)
    assert state.player.x == 5
    assert state.player.velocity == -1.0


def test_playing_screen_layout(state: GameState, ctx: FrameContext, console: GridRenderer) -> None:
    _start(state, ctx)
    state.obstacle = Obstacle(x=20, gap_y=25, size=10, config=state.config)
    _tick(state, ctx)

    assert console.cells[40][60].bg == NAVY
    assert console.row_text(1)[1:20] == "Press Space to Flap"
    assert "Score 0" in console.row_text(1)
    assert console.find('@') == [(5, 25)]
    assert console.glyph_at(20, 0) == '#'


def test_passing_obstacle_scores_and_replaces_it(state: GameState, ctx: FrameContext) -> None:
    _start(state, ctx)
    state.obstacle = Obstacle(x=5, gap_y=25, size=20, config=state.config)

    _tick(state, ctx, ms=76.0)

    assert state.score == 1
    assert state.obstacle.x == 6 + 80
    assert state.obstacle.size == 19
    assert state.mode == GameMode.PLAYING


def test_obstacle_hit_ends_game(state: GameState, ctx: FrameContext) -> None:
    _start(state, ctx)
    state.obstacle = Obstacle(x=6, gap_y=10, size=4, config=state.config)

    _tick(state, ctx, ms=76.0)
    assert state.mode == GameMode.END


def test_passing_through_gap_survives(state: GameState, ctx: FrameContext) -> None:
    _start(state, ctx)
    state.obstacle = Obstacle(x=6, gap_y=25, size=10, config=state.config)

    _tick(state, ctx, ms=76.0)
    assert state.mode == GameMode.PLAYING

    _tick(state, ctx, ms=76.0)
    assert state.score == 1


def test_falling_below_screen_ends_game(state: GameState, ctx: FrameContext) -> None:
    _start(state, ctx)
    state.player.y = 50.9
    _tick(state, ctx)
    assert state.mode == GameMode.PLAYING

    state.player.y = 51.0
    _tick(state, ctx)
    assert state.mode == GameMode.END


def test_free_fall_eventually_dies(state: GameState, ctx: FrameContext) -> None:
    _start(state, ctx)
    for _ in range(100):
        _tick(state, ctx, ms=76.0)
        if state.mode == GameMode.END:
            break
    assert state.mode == GameMode.END
    assert state.player.y > 50


def test_dead_screen_shows_score(state: GameState, ctx: FrameContext, console: GridRenderer) -> None:
    state.mode = GameMode.END
    state.score = 3
    _tick(state, ctx)
    assert console.row_text(8).strip() == "You are dead"
    assert console.row_text(12).strip() == "You earned 3 points"
    assert console.row_text(16).strip() == "(P) Play Game"
    assert console.row_text(20).strip() == "(Q) Quit Game"


def test_dead_screen_quit_and_play(state: GameState, ctx: FrameContext) -> None:
    state.mode = GameMode.END
    _tick(state, ctx, key=Key.QUIT)
    assert ctx.quitting is True
    assert state.mode == GameMode.END

    _tick(state, ctx, key=Key.PLAY)
    assert state.mode == GameMode.PLAYING
    assert state.score == 0


def test_distance_to_obstacle(state: GameState) -> None:
    state.restart()
    assert state.distance_to_obstacle() == 75
    assert state.is_playing()


def test_screen_column_does_not_move_world_start() -> None:
    config = GameConfig(player_screen_x=10)
    state = GameState(config, np.random.default_rng(0))
    console = GridRenderer(config.screen_width, config.screen_height)
    state.restart()

    assert state.player.x == 5
    assert state.distance_to_obstacle() == 75

    state.tick(FrameContext(console=console))
    assert console.find('@') == [(10, 25)]
