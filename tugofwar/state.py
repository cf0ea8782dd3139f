"""Shared game constants, the referee's game state and the wire messages."""

from __future__ import annotations

from dataclasses import dataclass, field

PLAYER_FIFO = "/tmp/cal_fifo"
DRAW_FIFO = "/tmp/cal_fifo2"

# Every message travels as a fixed-size record padded with NUL bytes.
MESSAGE_SIZE = 8192

TEAM_SIZE = 4
WINS_TO_FINISH = 3

REFEREE_COLOR = (0.0, 1.0, 0.0)
TEAM1_COLOR = (1.0, 0.0, 0.0)
TEAM2_COLOR = (0.0, 0.0, 1.0)
DEFAULT_EFFORTS = ((1.0, 0.8, 0.5, 0.1), (1.0, 0.8, 0.5, 0.1))

FINISH_TIME = 10
SPACE = 0.18
MOVE_SPEED = 0.03
PLAYER_SPACING = 0.13
FIRST_PLAYER_POS = -0.2
HEAD_SIZE = 0.07


def _zero_efforts() -> list[list[float]]:
    return [[0.0] * TEAM_SIZE for _ in range(2)]


@dataclass
class GameState:
    """What the referee knows about the running match."""

    target: float = 0.0
    team1_wins: int = 0
    team2_wins: int = 0
    elapsed_time: int = 0
    efforts: list[list[float]] = field(default_factory=_zero_efforts)

    def encode(self, won: int, position_offset: float) -> str:
        """Render the update line that the referee sends to the display."""
        head = (
            f"{self.team1_wins}:{self.team2_wins}:{self.target:f}:"
            f"{self.elapsed_time}:{won}:{position_offset:f}:"
        )
        return head + ",".join(f"{value:f}" for team in self.efforts for value in team)


@dataclass(frozen=True)
class DrawUpdate:
    """One update line as received by the display."""

    team1_wins: int
    team2_wins: int
    target: float
    elapsed_time: int
    won: int
    position_offset: float
    efforts: tuple[tuple[float, ...], tuple[float, ...]]


def _clean(text: str) -> str:
    return text.split("\0", 1)[0].strip()


def parse_update(text: str) -> DrawUpdate:
    """Parse an update line; raise ValueError when it is malformed."""
    parts = _clean(text).split(":")
    if len(parts) != 7:
        raise ValueError(f"malformed update: {text!r}")
    values = parts[6].split(",")
    if len(values) != 2 * TEAM_SIZE:
        raise ValueError(f"expected {2 * TEAM_SIZE} efforts in update: {text!r}")
    efforts = [float(value) for value in values]
    return DrawUpdate(
        team1_wins=int(parts[0]),
        team2_wins=int(parts[1]),
        target=float(parts[2]),
        elapsed_time=int(parts[3]),
        won=int(parts[4]),
        position_offset=float(parts[5]),
        efforts=(tuple(efforts[:TEAM_SIZE]), tuple(efforts[TEAM_SIZE:])),
    )


def encode_player_message(energy: int, pid: int) -> str:
    """Render a player's energy report."""
    return f"{energy}:{pid}"


def parse_player_message(text: str) -> tuple[int, int]:
    """Parse a player's report into (energy, pid); raise ValueError when malformed."""
    parts = _clean(text).split(":")
    if len(parts) != 2:
        raise ValueError(f"malformed player message: {text!r}")
    return int(parts[0]), int(parts[1])