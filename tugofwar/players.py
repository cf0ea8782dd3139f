"""A player process: reports a decaying energy level to the referee once a second."""

from __future__ import annotations

import argparse
import os
import random
import sys
import time
from collections.abc import Iterator

from tugofwar.state import MESSAGE_SIZE, PLAYER_FIFO, encode_player_message

READINGS = 20


def random_value(low: int, high: int, rng: random.Random) -> int:
    """Return a value in [low, high), or -1 when the range is empty."""
    if low == high:
        print("Please provide a range that is not equal to 0!")
        return -1
    return low + rng.randrange(abs(high - low))


def energy_readings(
    low: int, high: int, rng: random.Random, count: int = READINGS
) -> Iterator[int]:
    """Yield the energy a player reports: dropping by one each step, sometimes collapsing to zero."""
    energy = random_value(low, high, rng)
    for _ in range(count):
        ratio = random_value(low, high, rng) / high
        if energy < 0 or ratio < 0.02:
            energy = 0
        yield energy
        energy -= 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tugofwar-player", description="Report a player's energy to the referee."
    )
    parser.add_argument("low", type=int, help="lowest energy")
    parser.add_argument("high", type=int, help="upper bound of the energy")
    parser.add_argument("--fifo", default=PLAYER_FIFO, help="pipe to the referee")
    parser.add_argument("--interval", type=float, default=1.0, help="seconds between reports")
    parser.add_argument("--count", type=int, default=READINGS, help="number of reports")
    args = parser.parse_args(argv)

    rng = random.Random(time.time_ns() ^ os.getpid())
    try:
        fd = os.open(args.fifo, os.O_RDWR)
    except OSError as exc:
        print(f"fifo open error: {exc}", file=sys.stderr)
        return 1

    pid = os.getpid()
    try:
        for energy in energy_readings(args.low, args.high, rng, args.count):
            record = encode_player_message(energy, pid).encode("ascii")
            os.write(fd, record.ljust(MESSAGE_SIZE, b"\0"))
            time.sleep(args.interval)
    except OSError as exc:
        print(f"write error: {exc}", file=sys.stderr)
        return 2
    finally:
        os.close(fd)
    return 0


if __name__ == "__main__":
    sys.exit(main())