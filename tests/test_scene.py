import pytest

from tugofwar.scene import Scene, judge, player_colors, sort_efforts
from tugofwar.state import (
    REFEREE_COLOR,
    TEAM1_COLOR,
    TEAM2_COLOR,
    TEAM_SIZE,
    GameState,
    parse_update,
)


def test_sort_efforts_orders_each_team_ascending():
    efforts = [[1.0, 0.8, 0.5, 0.1], [0.3, 0.9, 0.2, 0.4]]
    assert sort_efforts(efforts) == [[0.1, 0.5, 0.8, 1.0], [0.2, 0.3, 0.4, 0.9]]


def test_sort_efforts_leaves_input_alone():
    efforts = [[1.0, 0.8, 0.5, 0.1], [0.3, 0.9, 0.2, 0.4]]
    sort_efforts(efforts)
    assert efforts == [[1.0, 0.8, 0.5, 0.1], [0.3, 0.9, 0.2, 0.4]]


def test_full_effort_gives_team_colours():
    team1, team2 = player_colors([[1.0] * 4, [1.0] * 4])
    assert team1 == [TEAM1_COLOR] * TEAM_SIZE
    assert team2 == [TEAM2_COLOR] * TEAM_SIZE


def test_no_effort_fades_to_white():
    team1, team2 = player_colors([[0.0] * 4, [0.0] * 4])
    assert team1 == [(1.0, 1.0, 1.0)] * TEAM_SIZE
    assert team2 == team1


def test_colours_follow_sorted_efforts():
    team1, team2 = player_colors([[0.9, 0.1, 0.5, 0.3], [0.4, 0.2, 0.8, 0.6]])
    assert [1.0 - green for _, green, _ in team1] == pytest.approx([0.1, 0.3, 0.5, 0.9])
    assert [1.0 - red for red, _, _ in team2] == pytest.approx([0.2, 0.4, 0.6, 0.8])
    assert all(red == 1.0 for red, _, _ in team1)
    assert all(blue == 1.0 for _, _, blue in team2)


def test_judge_undecided_at_start():
    verdict = judge(0.0, 0)
    assert verdict.winner == 0
    assert verdict.referee_color == REFEREE_COLOR
    assert verdict.banner is None


def test_judge_blue_wins_when_rope_pulled_right():
    verdict = judge(0.5, 0)
    assert verdict.winner == 2
    assert verdict.referee_color == TEAM2_COLOR
    assert verdict.banner == "Blue Wins"


def test_judge_red_wins_when_rope_pulled_left():
    verdict = judge(-0.5, 0)
    assert verdict.winner == 1
    assert verdict.referee_color == TEAM1_COLOR
    assert verdict.banner == "red Wins"


@pytest.mark.parametrize(
    ("offset", "elapsed", "winner"),
    [(0.01, 11, 2), (-0.01, 11, 1), (0.01, 10, 0), (-0.01, 10, 0), (0.0, 11, 0)],
)
def test_judge_overtime(offset, elapsed, winner):
    assert judge(offset, elapsed).winner == winner


def test_nudge_moves_rope_both_ways():
    scene = Scene()
    scene.nudge(1)
    assert scene.position_offset == pytest.approx(0.05)
    scene.nudge(-1)
    scene.nudge(-1)
    assert scene.position_offset == pytest.approx(-0.05)


def test_nudge_rejects_other_directions():
    with pytest.raises(ValueError):
        Scene().nudge(2)


def test_player_positions_mirror_at_rest():
    team1, team2 = Scene().player_positions()
    assert len(team1) == len(team2) == TEAM_SIZE
    assert team1 == pytest.approx([-x for x in team2])
    assert team1 == sorted(team1, reverse=True)


def test_player_positions_follow_offset():
    scene = Scene()
    base1, base2 = scene.player_positions()
    scene.position_offset = 0.25
    moved1, moved2 = scene.player_positions()
    assert [b - a for a, b in zip(base1, moved1)] == pytest.approx([0.25] * TEAM_SIZE)
    assert [b - a for a, b in zip(base2, moved2)] == pytest.approx([0.25] * TEAM_SIZE)


def test_apply_takes_over_referee_state():
    game = GameState(
        target=0.5,
        team1_wins=1,
        team2_wins=2,
        elapsed_time=4,
        efforts=[[0.2, 0.1, 0.4, 0.3], [0.6, 0.8, 0.5, 0.7]],
    )
    scene = Scene()
    scene.apply(parse_update(game.encode(0, 0.06)))
    assert scene.team1_wins == 1
    assert scene.team2_wins == 2
    assert scene.elapsed_time == 4
    assert scene.target == pytest.approx(0.5)
    assert scene.position_offset == pytest.approx(0.06)
    assert scene.efforts == [
        pytest.approx([0.1, 0.2, 0.3, 0.4]),
        pytest.approx([0.5, 0.6, 0.7, 0.8]),
    ]
    assert (scene.team1_colors, scene.team2_colors) == player_colors(scene.efforts)


def test_reset_restores_round_but_keeps_score():
    fresh = Scene()
    scene = Scene(team1_wins=2, team2_wins=1, elapsed_time=7, position_offset=0.2)
    scene.efforts = [[0.0] * 4, [0.0] * 4]
    scene.team1_colors, scene.team2_colors = player_colors(scene.efforts)
    scene.referee_color = TEAM1_COLOR
    scene.reset()
    assert scene.position_offset == 0.0
    assert scene.elapsed_time == 0
    assert scene.efforts == fresh.efforts
    assert scene.team1_colors == fresh.team1_colors
    assert scene.team2_colors == fresh.team2_colors
    assert scene.referee_color == REFEREE_COLOR
    assert (scene.team1_wins, scene.team2_wins) == (2, 1)


def test_default_efforts_are_sorted():
    scene = Scene()
    assert all(team == sorted(team) for team in scene.efforts)