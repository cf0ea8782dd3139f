# tugofwar

A tug-of-war game played by separate processes. Each player is its own
process that reports an energy level once a second. A referee collects
those readings, turns them into team efforts, moves the rope and decides
who wins each round. A display process, drawn with pygame, shows both
teams, the rope, the referee, the score and the round timer.

The processes talk through named pipes (`/tmp/cal_fifo` from the players
to the referee, `/tmp/cal_fifo2` from the referee to the display). Every
message is a fixed-size record of 8192 bytes padded with NUL bytes. The
game needs a POSIX system.

## Installing

```
pip install .
```

This installs pygame, which the display uses.

## Playing

Start the referee:

```
tugofwar-referee
```

The referee removes and re-creates both named pipes, starts the display
(`python -m tugofwar.draw`) and starts eight players
(`python -m tugofwar.players`): four for the red team (team 1) with
energy from 20 up to 50, and four for the blue team (team 2) with energy
from 1 up to 20.

Every second the referee:

1. reads one report per player from the player pipe; the first four
   reports count for team 1, the next four for team 2,
2. ranks the players of each team by energy, weights them 4, 3, 2 and 1,
   and scales the results so the strongest effort is 1.0
   (all zero when every weighted value is zero),
3. sets the target to team 2's total effort minus team 1's, divided by
   10, and moves the rope 0.03 toward team 2 when the target is positive
   or toward team 1 when it is negative,
4. sends the scores, target, elapsed time, round result, rope position
   and all eight efforts to the display.

A round ends when a team's front player is pulled over the middle line,
or, after more than 10 seconds, in favour of the side the rope has moved
toward. The players are then stopped and replaced with fresh ones, the
rope goes back to the middle and the round clock restarts. When a team
has won three rounds the referee waits five seconds, stops the players
and exits.

In the display window, the left and right arrow keys nudge the rope by
0.05. A player's head is drawn in a deeper shade of the team colour the
harder that player pulls, and the referee turns red or blue for the team
that wins the round. After a won round the display pauses two seconds and
resets the rope, clock, efforts and colours; once a team reaches three
wins it closes after five seconds. Closing the window also ends it.

## Running the parts alone

A player takes the low and the upper bound of its energy. Its energy
starts at a random value in that range, drops by one with every report,
and falls to zero if it goes negative or when a random draw comes out
very low:

```
tugofwar-player 20 50
```

Options: `--fifo PATH` (default `/tmp/cal_fifo`), `--interval SECONDS`
(default 1.0) and `--count N` (default 20 reports).

The display reads game updates from a pipe:

```
tugofwar-draw
```

Option: `--fifo PATH` (default `/tmp/cal_fifo2`).

`tugofwar-pipe-demo` forks, sends the program name from the parent to
the child over an anonymous pipe, and prints what the child received:

```
tugofwar-pipe-demo
```

## Using the pieces from Python

- `tugofwar.state` holds the game constants, `GameState` with
  `encode(won, position_offset)` for the referee's update line,
  `parse_update(text)` which returns a `DrawUpdate`, and
  `encode_player_message(energy, pid)` / `parse_player_message(text)`
  for player reports. The parsers raise `ValueError` on malformed input.
- `tugofwar.players` has `random_value(low, high, rng)` and the generator
  `energy_readings(low, high, rng, count)`.
- `tugofwar.referee` has `calculate_effort(energy)`,
  `calculate_target(efforts)` and the `Referee` class, whose constructor
  accepts the pipe paths, the player and display commands, and the
  functions used to spawn processes, read the clock and sleep.
- `tugofwar.scene` has `sort_efforts`, `player_colors`, `judge` (returning
  a `Verdict`) and the `Scene` class with `reset`, `apply`, `nudge` and
  `player_positions`.
- `tugofwar.draw` has `Renderer`, which draws a `Scene` onto any pygame
  surface and returns the round's winner.

## Running the tests

```
pip install ".[test]"
pytest
```