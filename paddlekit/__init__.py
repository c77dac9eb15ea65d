"""A pong game and a minimal actor/component game-loop framework on pygame."""

__version__ = "0.1.0"
__all__ = ["mathutil", "pong", "actor", "sprite", "engine"]