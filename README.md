# paddlekit

A single-paddle pong game and a minimal actor/component game-loop framework,
drawn with pygame.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing pong

```
paddlekit-pong
```

A 1024×768 window opens with walls at the top, bottom and right, a paddle on
the left and a ball. Move the paddle with `W`/`Up` and `S`/`Down`. The game
ends when the ball gets past the paddle, when the window is closed or when
`Escape` is pressed. If the display cannot be opened, the error is printed to
standard error.

The physics can be driven without a window through `paddlekit.pong.PongState`:

```python
from paddlekit.pong import PongState

state = PongState()
state.update(0.016, paddle_dir=1)   # move the paddle down for one frame
print(state.ball_pos.x, state.ball_pos.y, state.running)
```

`PongState.update` caps the time step at 0.05 seconds, keeps the paddle
between the walls, bounces the ball off the top and bottom walls, the right
wall and the paddle, and sets `running` to `False` once the ball reaches the
left edge.

`paddlekit.pong.PongGame` wraps a `PongState` with the pygame window, keyboard
input and drawing: `initialize()` (raises `RuntimeError` if the display cannot
start), `run_loop()`, `process_input()`, `update_game()`, `generate_output()`
and `shutdown()`.

## The actor framework

`paddlekit.engine.Game` keeps a list of actors and updates them once a frame.

- `paddlekit.actor.Actor` registers itself with its game when created. It has
  a `state` (`ActorState.ACTIVE`, `PAUSED` or `DEAD`), a `position`
  (`Vector2`), a `scale` and a `rotation`. Only active actors are updated.
  `destroy()` removes it from the game and destroys its components.
- `paddlekit.actor.Component` attaches itself to its owner when created;
  components are kept sorted by `update_order` (default 100) and updated in
  that order. Subclasses override `update(delta_time)`; actor subclasses
  override `update_actor(delta_time)`.
- `paddlekit.sprite.SpriteComponent` is a component that registers with the
  game's sprite list, kept sorted by `draw_order`. `set_texture(surface)`
  gives it a pygame surface; `draw(surface)` blits that texture centred on the
  owner, scaled by the owner's `scale` and rotated by its `rotation`, and
  returns the covered `pygame.Rect` (or `None` with no texture).

```python
from paddlekit.engine import Game
from paddlekit.actor import Actor, ActorState

game = Game()
ship = Actor(game)
game.update_actors(0.016)
ship.state = ActorState.DEAD
game.update_actors(0.016)          # dead actors are destroyed after the update
print(game.actors)                 # ()
```

Actors created while `update_actors` is running wait in `pending_actors` and
join `actors` when the update ends. `remove_actor` swaps the actor with the
last one, so actor order is not kept; `remove_sprite` keeps sprite order and
raises `ValueError` for a sprite that is not registered.

`paddlekit.mathutil` holds the immutable `Vector2` (with `Vector2.ZERO`) and
the `to_radians` / `to_degrees` helpers.

## What it does not do

- There is no command for the actor framework; only `paddlekit-pong` is
  installed. `Game` can be driven from your own code with `initialize()`,
  `run_loop()` and `shutdown()`.
- `Game.generate_output()` only clears the window to black. It does not draw
  the registered sprites; call `SpriteComponent.draw` yourself to render them.
- Nothing loads images from disk: textures are pygame surfaces you supply.