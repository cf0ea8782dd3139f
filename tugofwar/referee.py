"""The referee: spawns players and the display, scores the pull and relays state."""

from __future__ import annotations

import argparse
import contextlib
import os
import subprocess
import sys
import time
from collections.abc import Callable, Sequence

from tugofwar.state import (
    DRAW_FIFO,
    FINISH_TIME,
    FIRST_PLAYER_POS,
    MESSAGE_SIZE,
    MOVE_SPEED,
    PLAYER_FIFO,
    SPACE,
    TEAM_SIZE,
    WINS_TO_FINISH,
    GameState,
    parse_player_message,
)

TEAM1_RANGE = ("20", "50")
TEAM2_RANGE = ("1", "20")


def _rank_order(values: Sequence[int]) -> list[int]:
    """Indexes ordered by descending value, using an exchange sort (ties keep swap order)."""
    order = list(range(len(values)))
    for i in range(len(order) - 1):
        for j in range(i + 1, len(order)):
            if values[order[i]] < values[order[j]]:
                order[i], order[j] = order[j], order[i]
    return order


def calculate_effort(energy: Sequence[Sequence[int]]) -> list[list[float]]:
    """Weight each player's energy by rank (strongest x4 ... weakest x1) and normalise per team."""
    efforts = []
    for team in energy:
        raw = [0] * len(team)
        for rank, player in enumerate(_rank_order(team)):
            raw[player] = team[player] * (len(team) - rank)
        top = max(raw)
        efforts.append([0.0] * len(team) if top == 0 else [value / top for value in raw])
    return efforts


def calculate_target(efforts: Sequence[Sequence[float]]) -> float:
    """Pull direction: positive when team 2 pulls harder."""
    return (sum(efforts[1]) - sum(efforts[0])) / 10


class Referee:
    """Runs the match: reads player energy, moves the rope and tells the display."""

    def __init__(
        self,
        player_fifo: str = PLAYER_FIFO,
        draw_fifo: str = DRAW_FIFO,
        player_command: Sequence[str] | None = None,
        draw_command: Sequence[str] | None = None,
        spawn: Callable[[list[str]], object] = subprocess.Popen,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self.player_fifo = player_fifo
        self.draw_fifo = draw_fifo
        self.player_command = list(player_command or [sys.executable, "-m", "tugofwar.players"])
        self.draw_command = list(draw_command or [sys.executable, "-m", "tugofwar.draw"])
        self._spawn = spawn
        self._clock = clock
        self._sleep = sleep
        self.game = GameState()
        self.position_offset = 0.0
        self.energy = [[0] * TEAM_SIZE for _ in range(2)]
        self.players: list[list[object]] = [[], []]
        self.start_time = clock()
        self.won = 0
        self._draw = None

    def check_middle_line_crossing(self) -> int:
        """Move the rope and decide the round: 2 for team 2, 1 for team 1, 0 while undecided."""
        if self.game.target < 0:
            self.position_offset -= MOVE_SPEED
        elif self.game.target > 0:
            self.position_offset += MOVE_SPEED

        left_player_x = FIRST_PLAYER_POS - SPACE + self.position_offset
        right_player_x = -FIRST_PLAYER_POS + SPACE + self.position_offset
        overtime = self.game.elapsed_time > FINISH_TIME

        if left_player_x + 0.05 >= 0 or (overtime and self.position_offset > 0):
            self.game.team2_wins += 1
            winner = 2
        elif right_player_x - 0.05 <= 0 or (overtime and self.position_offset < 0):
            self.game.team1_wins += 1
            winner = 1
        else:
            return 0

        self.start_time = self._clock()
        self.terminate_players()
        self.create_players()
        self.position_offset = 0.0
        self._sleep(1)
        return winner

    def read_from_players(self, fd: int) -> None:
        """Read one report per player; the first four go to team 1, the rest to team 2."""
        for slot in range(2 * TEAM_SIZE):
            try:
                record = os.read(fd, MESSAGE_SIZE)
            except BlockingIOError:
                record = b""
            text = record.split(b"\0", 1)[0].decode("ascii", errors="replace")
            if not text:
                print("the referee not recive any thing")
                continue
            energy, _pid = parse_player_message(text)
            self.energy[slot // TEAM_SIZE][slot % TEAM_SIZE] = energy

    def write_to_draw(self) -> None:
        """Update the elapsed time and send the game state to the display."""
        self.game.elapsed_time = int(self._clock() - self.start_time)
        print(f"[Parent] Sent time: {self.game.elapsed_time}")
        record = self.game.encode(self.won, self.position_offset).encode("ascii")
        fd = os.open(self.draw_fifo, os.O_RDWR | os.O_NONBLOCK)
        try:
            os.write(fd, record.ljust(MESSAGE_SIZE, b"\0"))
        finally:
            os.close(fd)

    def create_players(self) -> None:
        """Start four players per team, alternating team 1 and team 2."""
        self.players = [[], []]
        for _ in range(TEAM_SIZE):
            self.players[0].append(self._spawn([*self.player_command, *TEAM1_RANGE]))
            self.players[1].append(self._spawn([*self.player_command, *TEAM2_RANGE]))

    def terminate_players(self) -> None:
        """Stop every running player."""
        for team in self.players:
            for process in team:
                process.terminate()
                process.wait()
        self.players = [[], []]

    def _make_fifos(self) -> None:
        for path in (self.player_fifo, self.draw_fifo):
            with contextlib.suppress(FileNotFoundError):
                os.remove(path)
            os.mkfifo(path, 0o666)

    def run(self) -> None:
        """Play rounds until one team has won three of them."""
        self._make_fifos()
        self._draw = self._spawn(self.draw_command)
        self.start_time = self._clock()
        self.create_players()
        fd = os.open(self.player_fifo, os.O_RDONLY | os.O_NONBLOCK)
        try:
            self._sleep(1)
            while True:
                self.read_from_players(fd)
                self.game.efforts = calculate_effort(self.energy)
                self.game.target = calculate_target(self.game.efforts)
                print(f"\tthe target is: {self.game.target:f}")
                self.won = self.check_middle_line_crossing()
                print(f"the win is: {self.won}")
                self.write_to_draw()
                if WINS_TO_FINISH in (self.game.team1_wins, self.game.team2_wins):
                    self._sleep(5)
                    return
                self._sleep(1)
        finally:
            os.close(fd)
            self.terminate_players()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tugofwar", description="Run a tug-of-war match between two teams of processes."
    )
    parser.parse_args(argv)
    try:
        Referee().run()
    except OSError as exc:
        print(f"referee error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())