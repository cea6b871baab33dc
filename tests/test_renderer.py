"""
Tests for the HeartCatch renderer.

Rendering is checked for not raising, for leaving the world untouched and
for a few sampled pixels.
"""
import copy

import pygame
import pytest

from models import Color
from games.HeartCatch import config
from games.HeartCatch.entities import Heart, Particle
from games.HeartCatch.renderer import Renderer, draw_heart
from lovecatch.games import GameState


HEART_RGB = (255, 71, 87)


def pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


class TestDrawHeart:
    """Test the vector heart shape."""

    def test_fills_body(self, pygame_display):
        surface = pygame.Surface((80, 80))
        surface.fill((0, 0, 0))
        draw_heart(surface, 10, 10, 40, HEART_RGB)
        assert pixel(surface, 30, 35) == HEART_RGB
        assert pixel(surface, 1, 1) == (0, 0, 0)

    def test_tiny_heart(self, pygame_display):
        surface = pygame.Surface((10, 10))
        draw_heart(surface, 0, 0, 1, HEART_RGB)


class TestRenderer:
    """Test full-frame rendering in every phase."""

    @pytest.fixture
    def busy_world(self, world):
        world.hearts.append(Heart(x=100.0, y=50.0, size=40.0, speed=3.0))
        world.particles.append(Particle(x=200.0, y=200.0, vx=1.0, vy=1.0, color=config.HEART_COLOR))
        world.particles.append(Particle(x=210.0, y=200.0, vx=1.0, vy=1.0,
                                        color=Color(r=0, g=0, b=0), age=25))
        world.love_meter = 35.0
        return world

    @pytest.mark.parametrize("state", list(GameState))
    def test_every_phase(self, pygame_display, busy_world, state):
        screen = pygame.Surface((800, 600))
        Renderer().render(screen, busy_world, state, best_score=40)

    def test_does_not_mutate_world(self, pygame_display, busy_world):
        before = (
            copy.deepcopy(busy_world.hearts),
            copy.deepcopy(busy_world.particles),
            busy_world.love_meter,
            busy_world.lives,
            busy_world.player.x,
        )
        screen = pygame.Surface((800, 600))
        Renderer().render(screen, busy_world, GameState.PLAYING)
        after = (
            busy_world.hearts,
            busy_world.particles,
            busy_world.love_meter,
            busy_world.lives,
            busy_world.player.x,
        )
        assert before == after

    def test_heart_drawn_while_playing(self, pygame_display, busy_world):
        screen = pygame.Surface((800, 600))
        Renderer().render(screen, busy_world, GameState.PLAYING)
        assert pixel(screen, 120, 75) == HEART_RGB

    def test_background(self, pygame_display, world):
        screen = pygame.Surface((800, 600))
        Renderer().render(screen, world, GameState.PLAYING)
        assert pixel(screen, 400, 300) == config.BACKGROUND_COLOR

    def test_font_cache(self, pygame_display):
        renderer = Renderer()
        assert renderer._get_font(28) is renderer._get_font(28)
