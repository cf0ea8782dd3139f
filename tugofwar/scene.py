"""What the display shows: positions, colours and the verdict of the pull."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from tugofwar.state import (
    DEFAULT_EFFORTS,
    FINISH_TIME,
    FIRST_PLAYER_POS,
    PLAYER_SPACING,
    REFEREE_COLOR,
    SPACE,
    TEAM1_COLOR,
    TEAM2_COLOR,
    TEAM_SIZE,
    DrawUpdate,
)

Color = tuple[float, float, float]

NUDGE_STEP = 0.05
HEAD_MARGIN = 0.05


def sort_efforts(efforts: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return each team's efforts in ascending order."""
    return [sorted(team) for team in efforts]


def player_colors(efforts: Sequence[Sequence[float]]) -> tuple[list[Color], list[Color]]:
    """Colour each player by effort: the harder a player pulls, the deeper the team colour."""
    team1, team2 = sort_efforts(efforts)
    team1_colors = [(1.0, 1.0 - effort, 1.0 - effort) for effort in team1]
    team2_colors = [(1.0 - effort, 1.0 - effort, 1.0) for effort in team2]
    return team1_colors, team2_colors


@dataclass(frozen=True)
class Verdict:
    """The referee's call on the current frame."""

    winner: int
    referee_color: Color
    banner: str | None


_BLUE_WINS = Verdict(2, TEAM2_COLOR, "Blue Wins")
_RED_WINS = Verdict(1, TEAM1_COLOR, "red Wins")
_UNDECIDED = Verdict(0, REFEREE_COLOR, None)


def judge(position_offset: float, elapsed_time: int) -> Verdict:
    """Decide the round from the rope position and the time spent on it."""
    left_player_x = FIRST_PLAYER_POS - SPACE + position_offset
    right_player_x = -FIRST_PLAYER_POS + SPACE + position_offset
    overtime = elapsed_time > FINISH_TIME

    if left_player_x + HEAD_MARGIN >= 0:
        return _BLUE_WINS
    if right_player_x - HEAD_MARGIN <= 0:
        return _RED_WINS
    if overtime and position_offset > 0:
        return _BLUE_WINS
    if overtime and position_offset < 0:
        return _RED_WINS
    return _UNDECIDED


def _default_efforts() -> list[list[float]]:
    return sort_efforts(DEFAULT_EFFORTS)


def _team_colors(color: Color) -> list[Color]:
    return [color] * TEAM_SIZE


@dataclass
class Scene:
    """The display's copy of the match."""

    team1_wins: int = 0
    team2_wins: int = 0
    target: float = 0.0
    elapsed_time: int = 0
    won: int = 0
    position_offset: float = 0.0
    efforts: list[list[float]] = field(default_factory=_default_efforts)
    team1_colors: list[Color] = field(default_factory=lambda: _team_colors(TEAM1_COLOR))
    team2_colors: list[Color] = field(default_factory=lambda: _team_colors(TEAM2_COLOR))
    referee_color: Color = REFEREE_COLOR

    def reset(self) -> None:
        """Put the rope, clock, efforts and colours back for a new round; scores stay."""
        self.position_offset = 0.0
        self.elapsed_time = 0
        self.efforts = _default_efforts()
        self.team1_colors = _team_colors(TEAM1_COLOR)
        self.team2_colors = _team_colors(TEAM2_COLOR)
        self.referee_color = REFEREE_COLOR

    def apply(self, update: DrawUpdate) -> None:
        """Take over the state sent by the referee and recolour the players."""
        self.team1_wins = update.team1_wins
        self.team2_wins = update.team2_wins
        self.target = update.target
        self.elapsed_time = update.elapsed_time
        self.won = update.won
        self.position_offset = update.position_offset
        self.efforts = sort_efforts(update.efforts)
        self.team1_colors, self.team2_colors = player_colors(self.efforts)

    def nudge(self, direction: int) -> None:
        """Shift the rope by hand: -1 to the left, 1 to the right."""
        if direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or 1, not {direction!r}")
        self.position_offset += direction * NUDGE_STEP

    def player_positions(self) -> tuple[list[float], list[float]]:
        """Horizontal positions of team 1 (left) and team 2 (right) players."""
        team1 = [
            FIRST_PLAYER_POS - rank * PLAYER_SPACING - SPACE + self.position_offset
            for rank in range(TEAM_SIZE)
        ]
        team2 = [
            -FIRST_PLAYER_POS + rank * PLAYER_SPACING + SPACE + self.position_offset
            for rank in range(TEAM_SIZE)
        ]
        return team1, team2