"""The display: draws the match as the referee reports it."""

from __future__ import annotations

import argparse
import os
import select
import sys
import time

import pygame

from tugofwar.scene import Color, Scene, judge
from tugofwar.state import (
    DRAW_FIFO,
    HEAD_SIZE,
    MESSAGE_SIZE,
    WINS_TO_FINISH,
    DrawUpdate,
    parse_update,
)

WINDOW_SIZE = (800, 500)
TITLE = "Tug of War - Players Lightening Over Time"
FRAME_RATE = 30

_WHITE: Color = (1.0, 1.0, 1.0)
_BLACK: Color = (0.0, 0.0, 0.0)
_LIGHT_GRAY: Color = (0.9, 0.9, 0.9)
_ROPE: Color = (0.6, 0.5, 0.2)


def _rgb(color: Color) -> tuple[int, int, int]:
    return tuple(max(0, min(255, round(channel * 255))) for channel in color)


class Renderer:
    """Draws a scene on a surface whose coordinates run from -1 to 1 on both axes."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font | None = None) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self.font = font or pygame.font.Font(None, 24)

    def _point(self, x: float, y: float) -> tuple[int, int]:
        width, height = self.surface.get_size()
        return round((x + 1) / 2 * width), round((1 - y) / 2 * height)

    def _line(self, color: Color, start: tuple[float, float], end: tuple[float, float], width: int = 1) -> None:
        pygame.draw.line(self.surface, _rgb(color), self._point(*start), self._point(*end), width)

    def _circle(self, x: float, y: float, radius: float, color: Color) -> None:
        width, height = self.surface.get_size()
        rect = pygame.Rect(0, 0, max(1, round(radius * width)), max(1, round(radius * height)))
        rect.center = self._point(x, y)
        pygame.draw.ellipse(self.surface, _rgb(color), rect)

    def _text(self, x: float, y: float, text: str, color: Color = _BLACK) -> None:
        image = self.font.render(text, True, _rgb(color))
        self.surface.blit(image, image.get_rect(bottomleft=self._point(x, y)))

    def _player(self, x: float, y: float, color: Color) -> None:
        self._circle(x, y, HEAD_SIZE, color)
        self._circle(x - HEAD_SIZE * 0.3, y + HEAD_SIZE * 0.3, HEAD_SIZE * 0.2, _BLACK)
        self._circle(x + HEAD_SIZE * 0.3, y + HEAD_SIZE * 0.3, HEAD_SIZE * 0.2, _BLACK)
        mouth_y = y - HEAD_SIZE * 0.2
        self._line(_BLACK, (x - HEAD_SIZE * 0.3, mouth_y), (x + HEAD_SIZE * 0.3, mouth_y))

    def _score(self, team1_wins: int, team2_wins: int) -> None:
        left, top = self._point(-0.3, 0.85)
        right, bottom = self._point(0.3, 0.75)
        box = pygame.Rect(left, top, right - left, bottom - top)
        pygame.draw.rect(self.surface, _rgb(_LIGHT_GRAY), box)
        pygame.draw.rect(self.surface, _rgb(_BLACK), box, 2)
        self._text(-0.25, 0.75, f"Team 1: {team1_wins}  |  Team 2: {team2_wins}")

    def draw(self, scene: Scene) -> int:
        """Draw one frame, update the referee's colour and return the round's winner (0 if none)."""
        self.surface.fill(_rgb(_WHITE))
        self._line(_BLACK, (0.0, -0.3), (0.0, 0.1))
        offset = scene.position_offset
        self._line(_ROPE, (-0.8 + offset, -0.1), (0.8 + offset, -0.1))

        verdict = judge(scene.position_offset, scene.elapsed_time)
        scene.referee_color = verdict.referee_color
        if verdict.banner:
            self._text(-0.1, 0.4, verdict.banner)

        self._score(scene.team1_wins, scene.team2_wins)
        self._text(0.6, 0.8, f"Time: {scene.elapsed_time} s")

        team1_xs, team2_xs = scene.player_positions()
        teams = (
            (team1_xs, scene.team1_colors, scene.efforts[0]),
            (team2_xs, scene.team2_colors, scene.efforts[1]),
        )
        for xs, colors, efforts in teams:
            for x, color, effort in zip(xs, colors, efforts):
                self._player(x, -0.1, color)
                self._text(x, -0.2, f"{effort:.1f}")

        self._player(0.0, 0.3, scene.referee_color)
        return verdict.winner


class _RecordReader:
    """Collects fixed-size records from a non-blocking pipe."""

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._pending = b""

    def poll(self, timeout: float = 0.0) -> list[DrawUpdate]:
        ready, _, _ = select.select([self.fd], [], [], timeout)
        if not ready:
            return []
        try:
            data = os.read(self.fd, MESSAGE_SIZE)
        except BlockingIOError:
            return []
        if not data:
            print("the draw not recive any thing")
            return []
        self._pending += data
        updates = []
        while len(self._pending) >= MESSAGE_SIZE:
            record, self._pending = self._pending[:MESSAGE_SIZE], self._pending[MESSAGE_SIZE:]
            text = record.split(b"\0", 1)[0].decode("ascii", errors="replace")
            if not text:
                print("the draw not recive any thing")
                continue
            try:
                updates.append(parse_update(text))
            except ValueError as exc:
                print(f"bad update: {exc}", file=sys.stderr)
        return updates


def _game_over(scene: Scene) -> bool:
    return WINS_TO_FINISH in (scene.team1_wins, scene.team2_wins)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tugofwar-draw", description="Show the tug-of-war match reported by the referee."
    )
    parser.add_argument("--fifo", default=DRAW_FIFO, help="pipe from the referee")
    args = parser.parse_args(argv)

    try:
        fd = os.open(args.fifo, os.O_RDONLY)
    except OSError as exc:
        print(f"fifo open error in draw: {exc}", file=sys.stderr)
        return 3
    os.set_blocking(fd, False)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        renderer = Renderer(screen)
        scene = Scene()
        reader = _RecordReader(fd)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_LEFT:
                        scene.nudge(-1)
                    elif event.key == pygame.K_RIGHT:
                        scene.nudge(1)
            for update in reader.poll():
                scene.apply(update)
            winner = renderer.draw(scene)
            pygame.display.flip()
            if winner:
                time.sleep(2)
                scene.reset()
            if _game_over(scene):
                time.sleep(5)
                return 0
            clock.tick(FRAME_RATE)
    finally:
        os.close(fd)
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())