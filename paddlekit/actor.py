"""Actors and the components that give them behaviour."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from paddlekit.mathutil import Vector2

if TYPE_CHECKING:
    from paddlekit.engine import Game


class ActorState(Enum):
    """Lifecycle state of an actor."""

    ACTIVE = "active"
    PAUSED = "paused"
    DEAD = "dead"


class Actor:
    """A game object that owns components and registers itself with a game."""

    def __init__(self, game: Game) -> None:
        self.state = ActorState.ACTIVE
        self.position = Vector2.ZERO
        self.scale = 1.0
        self.rotation = 0.0
        self.game = game
        self._components: list[Component] = []
        game.add_actor(self)

    @property
    def components(self) -> tuple[Component, ...]:
        """Components in update order."""
        return tuple(self._components)

    def update(self, delta_time: float) -> None:
        """Update components and then the actor itself, if active."""
        if self.state is ActorState.ACTIVE:
            self.update_components(delta_time)
            self.update_actor(delta_time)

    def update_components(self, delta_time: float) -> None:
        for component in tuple(self._components):
            component.update(delta_time)

    def update_actor(self, delta_time: float) -> None:
        """Actor-specific update; subclasses override this."""

    def add_component(self, component: Component) -> None:
        """Insert a component, keeping components sorted by update order."""
        order = component.update_order
        index = next(
            (i for i, existing in enumerate(self._components) if order < existing.update_order),
            len(self._components),
        )
        self._components.insert(index, component)

    def remove_component(self, component: Component) -> None:
        if component in self._components:
            self._components.remove(component)

    def destroy(self) -> None:
        """Unregister from the game and destroy every component."""
        self.game.remove_actor(self)
        while self._components:
            self._components[-1].destroy()


class Component:
    """A piece of behaviour attached to an actor."""

    def __init__(self, owner: Actor, update_order: int = 100) -> None:
        self.owner = owner
        self.update_order = update_order
        owner.add_component(self)

    def update(self, delta_time: float) -> None:
        """Per-frame update; subclasses override this."""

    def destroy(self) -> None:
        """Detach from the owning actor."""
        self.owner.remove_component(self)