"""Actor-based game loop."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from paddlekit.actor import Actor, ActorState

if TYPE_CHECKING:
    from paddlekit.sprite import SpriteComponent

WIDTH = 1024
HEIGHT = 768
FRAME_MS = 16
MAX_DELTA = 0.05
TITLE = "Game Programming (Chapter 2)"


class Game:
    """Owns the window and the actors, and drives the update loop."""

    def __init__(self) -> None:
        self._screen: pygame.Surface | None = None
        self._ticks = 0
        self.running = True
        self._updating_actors = False
        self._actors: list[Actor] = []
        self._pending_actors: list[Actor] = []
        self._sprites: list[SpriteComponent] = []

    @property
    def actors(self) -> tuple[Actor, ...]:
        return tuple(self._actors)

    @property
    def pending_actors(self) -> tuple[Actor, ...]:
        return tuple(self._pending_actors)

    @property
    def sprites(self) -> tuple[SpriteComponent, ...]:
        """Sprites in draw order."""
        return tuple(self._sprites)

    def initialize(self) -> None:
        """Open the window; raises RuntimeError if the display cannot start."""
        try:
            pygame.init()
            pygame.display.set_caption(TITLE)
            self._screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error as exc:
            raise RuntimeError(f"Unable to initialize display: {exc}") from exc

    def run_loop(self) -> None:
        while self.running:
            self.process_input()
            self.update_game()
            self.generate_output()

    def shutdown(self) -> None:
        """Destroy all actors and close the window."""
        while self._actors:
            self._actors[-1].destroy()
        self._screen = None
        pygame.quit()

    def process_input(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

        keys = pygame.key.get_pressed()
        if keys[pygame.K_ESCAPE]:
            self.running = False

    def update_game(self) -> None:
        pygame.time.wait(FRAME_MS)
        now = pygame.time.get_ticks()
        delta_time = min((now - self._ticks) / 1000.0, MAX_DELTA)
        self._ticks = pygame.time.get_ticks()
        self.update_actors(delta_time)

    def update_actors(self, delta_time: float) -> None:
        """Update every actor, admit pending ones and destroy dead ones."""
        self._updating_actors = True
        try:
            for actor in tuple(self._actors):
                actor.update(delta_time)
        finally:
            self._updating_actors = False

        self._actors.extend(self._pending_actors)
        self._pending_actors.clear()

        dead = [actor for actor in self._actors if actor.state is ActorState.DEAD]
        for actor in dead:
            actor.destroy()

    def generate_output(self) -> None:
        if self._screen is None:
            raise RuntimeError("game is not initialized")
        self._screen.fill((0, 0, 0))
        pygame.display.flip()

    def add_actor(self, actor: Actor) -> None:
        """Add an actor; during an update it waits until the update ends."""
        if self._updating_actors:
            self._pending_actors.append(actor)
        else:
            self._actors.append(actor)

    def remove_actor(self, actor: Actor) -> None:
        """Remove an actor by swapping it with the last one (order not kept)."""
        for actors in (self._pending_actors, self._actors):
            if actor in actors:
                index = actors.index(actor)
                actors[index], actors[-1] = actors[-1], actors[index]
                actors.pop()

    def add_sprite(self, sprite: SpriteComponent) -> None:
        """Insert a sprite, keeping sprites sorted by draw order."""
        order = sprite.draw_order
        index = next(
            (i for i, existing in enumerate(self._sprites) if order < existing.draw_order),
            len(self._sprites),
        )
        self._sprites.insert(index, sprite)

    def remove_sprite(self, sprite: SpriteComponent) -> None:
        """Remove a sprite, preserving order; raises ValueError if absent."""
        self._sprites.remove(sprite)