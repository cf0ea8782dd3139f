import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from tugofwar.draw import WINDOW_SIZE, Renderer, main
from tugofwar.scene import Scene
from tugofwar.state import REFEREE_COLOR, TEAM1_COLOR, TEAM2_COLOR

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


@pytest.fixture
def renderer():
    return Renderer(pygame.Surface(WINDOW_SIZE))


def _pixel(renderer, x, y):
    return tuple(renderer.surface.get_at(renderer._point(x, y)))[:3]


def _first_head(renderer, scene, team):
    positions = scene.player_positions()[team]
    return _pixel(renderer, positions[0], -0.1)


def test_undecided_frame_keeps_referee_green(renderer):
    scene = Scene()
    assert renderer.draw(scene) == 0
    assert scene.referee_color == REFEREE_COLOR
    referee = _pixel(renderer, 0.0, 0.3)
    assert referee != _first_head(renderer, scene, 0)
    assert referee != _first_head(renderer, scene, 1)
    assert referee[1] > referee[0] and referee[1] > referee[2]


def test_background_is_white(renderer):
    renderer.draw(Scene())
    assert tuple(renderer.surface.get_at((5, WINDOW_SIZE[1] - 5)))[:3] == WHITE


def test_middle_line_is_black(renderer):
    renderer.draw(Scene())
    assert _pixel(renderer, 0.0, -0.2) == BLACK


def test_blue_win_paints_referee_blue(renderer):
    scene = Scene(position_offset=0.5)
    assert renderer.draw(scene) == 2
    assert scene.referee_color == TEAM2_COLOR
    assert _pixel(renderer, 0.0, 0.3) == _first_head(renderer, scene, 1)


def test_red_win_paints_referee_red(renderer):
    scene = Scene(position_offset=-0.5)
    assert renderer.draw(scene) == 1
    assert scene.referee_color == TEAM1_COLOR
    assert _pixel(renderer, 0.0, 0.3) == _first_head(renderer, scene, 0)


def test_overtime_decides_by_rope_side(renderer):
    assert renderer.draw(Scene(elapsed_time=11, position_offset=0.01)) == 2
    assert renderer.draw(Scene(elapsed_time=11, position_offset=-0.01)) == 1


def test_team_heads_take_their_colours(renderer):
    scene = Scene()
    renderer.draw(scene)
    red = _first_head(renderer, scene, 0)
    blue = _first_head(renderer, scene, 1)
    assert red[0] > red[2]
    assert blue[2] > blue[0]


def test_main_reports_missing_fifo(tmp_path):
    assert main(["--fifo", str(tmp_path / "missing")]) == 3