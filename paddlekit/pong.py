"""A single-paddle Pong game."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field

import pygame

from paddlekit.mathutil import Vector2

WIDTH = 1024
HEIGHT = 768
THICKNESS = 15
PADDLE_H = 100.0
PADDLE_SPEED = 300.0
MAX_DELTA = 0.05
FRAME_MS = 16
TITLE = "Game Programming (Chapter 1)"

PADDLE_MIN_Y = PADDLE_H / 2.0 + THICKNESS
PADDLE_MAX_Y = HEIGHT - PADDLE_H / 2.0 - THICKNESS


@dataclass
class PongState:
    """Positions and velocities of the paddle and ball."""

    paddle_pos: Vector2 = field(default_factory=lambda: Vector2(10, HEIGHT // 2))
    ball_pos: Vector2 = field(default_factory=lambda: Vector2(WIDTH // 2, HEIGHT // 2))
    ball_vel: Vector2 = field(default_factory=lambda: Vector2(-200, 235))
    running: bool = True

    def update(self, delta_time: float, paddle_dir: int) -> None:
        """Advance the simulation by delta_time seconds (capped at MAX_DELTA)."""
        delta_time = min(delta_time, MAX_DELTA)

        if paddle_dir != 0:
            y = self.paddle_pos.y + paddle_dir * PADDLE_SPEED * delta_time
            if y < PADDLE_MIN_Y:
                y = PADDLE_MIN_Y
            elif y > PADDLE_MAX_Y:
                y = PADDLE_MAX_Y
            self.paddle_pos = Vector2(self.paddle_pos.x, y)

        vx, vy = self.ball_vel.x, self.ball_vel.y
        bx = self.ball_pos.x + vx * delta_time
        by = self.ball_pos.y + vy * delta_time
        self.ball_pos = Vector2(bx, by)

        if (by <= THICKNESS and vy < 0.0) or (by >= HEIGHT - THICKNESS and vy > 0.0):
            vy = -vy

        diff = abs(self.paddle_pos.y - by)
        hits_paddle = diff <= PADDLE_H / 2.0 and 20.0 <= bx <= 25.0 and vx < 0.0
        hits_right_wall = bx >= WIDTH - THICKNESS and vx > 0.0
        if hits_paddle or hits_right_wall:
            vx = -vx
        elif bx <= 0.0:
            self.running = False

        self.ball_vel = Vector2(vx, vy)


class PongGame:
    """Window, input and rendering around a PongState."""

    def __init__(self, state: PongState | None = None) -> None:
        self.state = state if state is not None else PongState()
        self.paddle_dir = 0
        self._screen: pygame.Surface | None = None
        self._ticks = 0

    @property
    def running(self) -> bool:
        return self.state.running

    def initialize(self) -> None:
        """Open the window; raises RuntimeError if the display cannot start."""
        try:
            pygame.init()
            pygame.display.set_caption(TITLE)
            self._screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error as exc:
            raise RuntimeError(f"Unable to initialize display: {exc}") from exc
        self._ticks = pygame.time.get_ticks()

    def run_loop(self) -> None:
        while self.state.running:
            self.process_input()
            self.update_game()
            self.generate_output()

    def process_input(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.state.running = False

        keys = pygame.key.get_pressed()
        if keys[pygame.K_ESCAPE]:
            self.state.running = False

        self.paddle_dir = 0
        if keys[pygame.K_w] or keys[pygame.K_UP]:
            self.paddle_dir -= 1
        if keys[pygame.K_s] or keys[pygame.K_DOWN]:
            self.paddle_dir += 1

    def update_game(self) -> None:
        pygame.time.wait(FRAME_MS)
        now = pygame.time.get_ticks()
        delta_time = (now - self._ticks) / 1000.0
        self.state.update(delta_time, self.paddle_dir)
        self._ticks = pygame.time.get_ticks()

    def generate_output(self) -> None:
        if self._screen is None:
            raise RuntimeError("game is not initialized")
        screen = self._screen
        white = (255, 255, 255)
        screen.fill((0, 0, 0))

        pygame.draw.rect(screen, white, pygame.Rect(0, 0, WIDTH, THICKNESS))
        pygame.draw.rect(screen, white, pygame.Rect(0, HEIGHT - THICKNESS, WIDTH, THICKNESS))
        pygame.draw.rect(screen, white, pygame.Rect(WIDTH - THICKNESS, 0, THICKNESS, WIDTH))

        paddle = self.state.paddle_pos
        pygame.draw.rect(
            screen,
            white,
            pygame.Rect(
                round(paddle.x), round(paddle.y - PADDLE_H / 2), THICKNESS, int(PADDLE_H)
            ),
        )

        ball = self.state.ball_pos
        half = THICKNESS // 2
        pygame.draw.rect(
            screen,
            white,
            pygame.Rect(round(ball.x - half), round(ball.y - half), THICKNESS, THICKNESS),
        )

        pygame.display.flip()

    def shutdown(self) -> None:
        self._screen = None
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Run the Pong game until the window closes or the ball is missed."""
    parser = argparse.ArgumentParser(prog="paddlekit-pong", description="Play Pong.")
    parser.parse_args(argv)

    game = PongGame()
    try:
        game.initialize()
        game.run_loop()
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
    finally:
        game.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())