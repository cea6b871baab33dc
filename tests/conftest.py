"""Shared fixtures for Love Catch tests."""
import os
import random

# Headless pygame for every test module
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame
import pytest

from models import Resolution
from games.HeartCatch.config import HeartCatchSettings
from games.HeartCatch.entities import Heart
from games.HeartCatch.world import GameWorld


@pytest.fixture
def rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def settings():
    """Default rules, independent of any local .env overrides."""
    return HeartCatchSettings(
        win_threshold=100.0,
        starting_lives=3,
        meter_per_catch=5.0,
        spawn_interval_ms=1000.0,
        spawn_speedup_ms=5.0,
        spawn_interval_floor_ms=None,
        player_width=80.0,
        player_height=80.0,
        player_speed=10.0,
        particle_count=8,
        particle_decay=0.05,
    )


@pytest.fixture
def world(settings, rng):
    """800x600 world with automatic spawning parked.

    The basket starts at x=360, y=500; its catch zone spans
    x 360..440, y 520..580.
    """
    w = GameWorld(Resolution(width=800, height=600), settings=settings, rng=rng)
    w.spawner.next_spawn_ms = float('inf')
    return w


@pytest.fixture
def add_heart():
    """Factory placing a heart that falls straight down (no sway)."""
    def _add(world, x, y, size=40.0, speed=5.0):
        heart = Heart(x=x, y=y, size=size, speed=speed, phase=0.0, phase_rate=0.0)
        world.hearts.append(heart)
        return heart
    return _add


@pytest.fixture
def pygame_display():
    """Initialized pygame with a small dummy display."""
    pygame.init()
    screen = pygame.display.set_mode((320, 240))
    yield screen
    pygame.quit()
