"""
HeartCatch - Rendering.

Draws a GameWorld snapshot onto a pygame surface. Reads state only.
"""
import math
from typing import Dict, Optional

import pygame

from games.HeartCatch import config
from games.HeartCatch.entities import Heart, Particle, Player
from games.HeartCatch.world import GameWorld
from lovecatch.games import GameState

REPLAY_PROMPT = "Press SPACE or tap to play again"


def draw_heart(surface: pygame.Surface, x: float, y: float, size: float, color) -> None:
    """Vector heart: two lobes and a triangle, filling the box at (x, y)."""
    lobe = max(1, int(size * 0.28))
    pygame.draw.circle(surface, color, (int(x + size * 0.28), int(y + size * 0.32)), lobe)
    pygame.draw.circle(surface, color, (int(x + size * 0.72), int(y + size * 0.32)), lobe)
    pygame.draw.polygon(surface, color, (
        (int(x), int(y + size * 0.35)),
        (int(x + size), int(y + size * 0.35)),
        (int(x + size / 2), int(y + size)),
    ))


class Renderer:
    """Draws the playfield, HUD and phase overlays."""

    def __init__(self):
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _get_font(self, size: int) -> pygame.font.Font:
        """Get or create a default font at the given size."""
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def render(
        self,
        screen: pygame.Surface,
        world: GameWorld,
        state: GameState,
        best_score: Optional[int] = None,
    ) -> None:
        """Draw one frame."""
        screen.fill(config.BACKGROUND_COLOR)

        if state == GameState.PLAYING:
            self._render_player(screen, world.player)
            for heart in world.hearts:
                self._render_heart(screen, heart)
            for particle in world.particles:
                self._render_particle(screen, particle)
            self._render_hud(screen, world)
        elif state == GameState.START:
            self._render_overlay(screen, "Catch the Love!", "Press SPACE or tap to start")
        elif state == GameState.GAME_OVER:
            self._render_overlay(screen, "Game Over", f"Score: {world.score}%", best_score, REPLAY_PROMPT)
        elif state == GameState.WON:
            self._render_overlay(screen, "You Win!", "The love meter is full", best_score, REPLAY_PROMPT)

    def _render_player(self, screen: pygame.Surface, player: Player) -> None:
        """Basket: a bowl with a handle arc."""
        body = pygame.Rect(
            int(player.x),
            int(player.y + player.height * 0.4),
            int(player.width),
            int(player.height * 0.5),
        )
        pygame.draw.ellipse(screen, config.BASKET_COLOR, body)
        handle = pygame.Rect(
            int(player.x + player.width * 0.15),
            int(player.y + player.height * 0.1),
            int(player.width * 0.7),
            int(player.height * 0.6),
        )
        pygame.draw.arc(screen, config.BASKET_COLOR, handle, 0, math.pi, 4)

    def _render_heart(self, screen: pygame.Surface, heart: Heart) -> None:
        draw_heart(screen, heart.x, heart.y, heart.size, config.HEART_COLOR.as_rgb_tuple)

    def _render_particle(self, screen: pygame.Surface, particle: Particle) -> None:
        """Particle faded by its remaining life."""
        radius = config.PARTICLE_RADIUS
        alpha = int(255 * particle.opacity)
        if alpha <= 0:
            return
        surf = pygame.Surface((radius * 2 + 2, radius * 2 + 2), pygame.SRCALPHA)
        color = (*particle.color.as_rgb_tuple, alpha)
        pygame.draw.circle(surf, color, (radius + 1, radius + 1), radius)
        screen.blit(surf, (int(particle.x) - radius - 1, int(particle.y) - radius - 1))

    def _render_hud(self, screen: pygame.Surface, world: GameWorld) -> None:
        """Meter percentage top-left, one heart per life top-right."""
        font = self._get_font(40)
        text = font.render(f"Love: {world.score}%", True, config.TEXT_COLOR)
        screen.blit(text, (20, 20))

        icon = 24
        x = screen.get_width() - 20 - world.lives * (icon + 8)
        for i in range(world.lives):
            draw_heart(screen, x + i * (icon + 8), 22, icon, config.HEART_COLOR.as_rgb_tuple)

    def _render_overlay(
        self,
        screen: pygame.Surface,
        title: str,
        subtitle: str,
        best_score: Optional[int] = None,
        prompt: Optional[str] = None,
    ) -> None:
        """Centered panel for the non-playing phases."""
        width, height = screen.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill(config.OVERLAY_COLOR)
        screen.blit(overlay, (0, 0))

        center_x = width // 2
        y = height // 2 - 80

        text = self._get_font(72).render(title, True, config.HEART_COLOR.as_rgb_tuple)
        screen.blit(text, (center_x - text.get_width() // 2, y))
        y += 80

        text = self._get_font(40).render(subtitle, True, config.TEXT_COLOR)
        screen.blit(text, (center_x - text.get_width() // 2, y))
        y += 50

        if best_score is not None:
            text = self._get_font(28).render(f"Best: {best_score}%", True, config.TEXT_COLOR)
            screen.blit(text, (center_x - text.get_width() // 2, y))
            y += 40

        if prompt:
            text = self._get_font(28).render(prompt, True, config.TEXT_COLOR)
            screen.blit(text, (center_x - text.get_width() // 2, y))
