import pygame
import pytest

from paddlekit.actor import Actor, ActorState, Component
from paddlekit.engine import Game
from paddlekit.sprite import SpriteComponent


class Spawner(Component):
    def __init__(self, owner):
        super().__init__(owner)
        self.spawned = []

    def update(self, delta_time):
        if not self.spawned:
            self.spawned.append(Actor(self.owner.game))


class Counter(Component):
    def __init__(self, owner):
        super().__init__(owner)
        self.deltas = []

    def update(self, delta_time):
        self.deltas.append(delta_time)


def test_new_game_is_empty_and_running():
    game = Game()
    assert game.running is True
    assert game.actors == ()
    assert game.pending_actors == ()
    assert game.sprites == ()


def test_add_actor_outside_update_goes_to_actors():
    game = Game()
    a = Actor(game)
    b = Actor(game)
    assert game.actors == (a, b)


def test_remove_actor_swaps_with_last():
    game = Game()
    a, b, c = Actor(game), Actor(game), Actor(game)
    game.remove_actor(a)
    assert game.actors == (c, b)


def test_remove_unknown_actor_is_ignored():
    game = Game()
    a = Actor(game)
    other = Actor(Game())
    game.remove_actor(other)
    assert game.actors == (a,)


def test_update_actors_passes_delta():
    game = Game()
    actor = Actor(game)
    counter = Counter(actor)
    game.update_actors(0.02)
    assert counter.deltas == [0.02]


def test_actor_created_during_update_is_admitted_afterwards():
    game = Game()
    parent = Actor(game)
    spawner = Spawner(parent)
    game.update_actors(0.01)
    child = spawner.spawned[0]
    assert game.actors == (parent, child)
    assert game.pending_actors == ()


def test_dead_actors_are_destroyed():
    game = Game()
    alive = Actor(game)
    dead = Actor(game)
    Counter(dead)
    dead.state = ActorState.DEAD
    game.update_actors(0.01)
    assert game.actors == (alive,)
    assert dead.components == ()


def test_sprites_sorted_by_draw_order():
    game = Game()
    actor = Actor(game)
    back = SpriteComponent(actor, 200)
    front = SpriteComponent(actor, 10)
    middle = SpriteComponent(actor, 100)
    assert game.sprites == (front, middle, back)


def test_remove_sprite_keeps_order():
    game = Game()
    actor = Actor(game)
    s1 = SpriteComponent(actor, 1)
    s2 = SpriteComponent(actor, 2)
    s3 = SpriteComponent(actor, 3)
    game.remove_sprite(s1)
    assert game.sprites == (s2, s3)


def test_remove_unknown_sprite_raises():
    game = Game()
    other = SpriteComponent(Actor(Game()))
    with pytest.raises(ValueError):
        game.remove_sprite(other)


def test_generate_output_requires_initialize():
    with pytest.raises(RuntimeError):
        Game().generate_output()


def test_headless_session(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    game = Game()
    game.initialize()
    try:
        Actor(game)
        game.generate_output()
        assert pygame.display.get_surface().get_at((10, 10)) == (0, 0, 0, 255)
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        game.process_input()
        assert game.running is False
    finally:
        game.shutdown()
    assert game.actors == ()