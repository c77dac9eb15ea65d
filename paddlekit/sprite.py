"""Sprite components that draw a texture at their owner's transform."""

from __future__ import annotations

import pygame

from paddlekit.actor import Actor, Component
from paddlekit.mathutil import to_degrees


class SpriteComponent(Component):
    """Draws a texture centred on the owning actor, scaled and rotated."""

    def __init__(self, owner: Actor, draw_order: int = 100) -> None:
        super().__init__(owner)
        self.texture: pygame.Surface | None = None
        self.draw_order = draw_order
        self.tex_width = 0
        self.tex_height = 0
        owner.game.add_sprite(self)

    def draw(self, surface: pygame.Surface) -> pygame.Rect | None:
        """Blit the texture onto surface; returns the covered rectangle."""
        if self.texture is None:
            return None

        owner = self.owner
        width = max(0, round(self.tex_width * owner.scale))
        height = max(0, round(self.tex_height * owner.scale))
        image = pygame.transform.scale(self.texture, (width, height))
        image = pygame.transform.rotate(image, to_degrees(owner.rotation))
        dest = image.get_rect(center=(round(owner.position.x), round(owner.position.y)))
        surface.blit(image, dest)
        return dest

    def set_texture(self, texture: pygame.Surface) -> None:
        self.texture = texture
        self.tex_width, self.tex_height = texture.get_size()

    def destroy(self) -> None:
        self.owner.game.remove_sprite(self)
        super().destroy()