"""
HeartCatch - Basket, falling hearts and particle bursts.

All motion is per frame: one call to ``update`` moves an entity by its
per-frame speed, independent of the frame's wall-clock duration.
"""
import math
import random
from dataclasses import dataclass
from typing import List

from models import Color, Point2D, Rectangle
from games.HeartCatch import config


@dataclass
class Player:
    """The basket at the bottom of the playfield.

    Only ``x`` changes during play; ``y`` is pinned a fixed margin above the
    bottom edge and re-pinned when the playfield is resized.
    """
    x: float = 0.0
    y: float = 0.0
    width: float = config.PLAYER_WIDTH
    height: float = config.PLAYER_HEIGHT
    speed: float = config.PLAYER_SPEED

    def max_x(self, playfield_width: float) -> float:
        """Largest x that keeps the basket fully on screen."""
        return playfield_width - self.width

    def clamp(self, playfield_width: float) -> None:
        """Keep the basket within [0, playfield_width - width]."""
        if self.x > self.max_x(playfield_width):
            self.x = self.max_x(playfield_width)
        if self.x < 0:
            self.x = 0.0

    def center_in(self, playfield_width: float) -> None:
        """Center the basket horizontally."""
        self.x = playfield_width / 2 - self.width / 2

    def pin_to_bottom(self, playfield_height: float) -> None:
        """Place the basket just above the bottom edge."""
        self.y = playfield_height - self.height - config.PLAYER_BOTTOM_MARGIN

    def catch_zone(self, offset: float = config.CATCH_OFFSET) -> Rectangle:
        """Box a heart must overlap to be caught.

        The top edge sits ``offset`` below the basket's rim, so hearts are
        collected in the opening rather than on the rim.
        """
        return Rectangle(
            x=self.x,
            y=self.y + offset,
            width=self.width,
            height=self.height - offset,
        )


@dataclass
class Heart:
    """A falling heart with a gentle side-to-side sway.

    Motion per frame:
        y += speed
        x += sin(phase) * SWAY_AMPLITUDE
        phase += phase_rate
    """
    x: float
    y: float
    size: float
    speed: float
    phase: float = 0.0
    phase_rate: float = 0.0

    def update(self) -> None:
        """Advance one frame."""
        self.y += self.speed
        self.x += math.sin(self.phase) * config.SWAY_AMPLITUDE
        self.phase += self.phase_rate

    @property
    def bounds(self) -> Rectangle:
        """Axis-aligned bounding box."""
        return Rectangle(x=self.x, y=self.y, width=self.size, height=self.size)

    @property
    def center(self) -> Point2D:
        return self.bounds.center

    def has_fallen_past(self, playfield_height: float) -> bool:
        """True once the top edge is below the bottom of the playfield."""
        return self.y > playfield_height


@dataclass
class Particle:
    """A short-lived spark from a caught heart.

    Life starts at 1.0 and drops by ``decay`` per frame. It is derived from
    the frame count so that 1.0 / decay frames land exactly on zero.
    """
    x: float
    y: float
    vx: float
    vy: float
    color: Color
    decay: float = config.PARTICLE_DECAY
    age: int = 0

    @property
    def life(self) -> float:
        return 1.0 - self.age * self.decay

    @property
    def is_alive(self) -> bool:
        return self.life > 0

    @property
    def opacity(self) -> float:
        """Life as a draw opacity in [0, 1]."""
        return min(1.0, max(0.0, self.life))

    def update(self) -> None:
        """Advance one frame."""
        self.x += self.vx
        self.y += self.vy
        self.age += 1


def create_heart(playfield_width: float, rng: random.Random) -> Heart:
    """Create a heart just above the top edge at a random column.

    Args:
        playfield_width: Width of the playfield in pixels
        rng: Random source

    Returns:
        Heart with randomized size, fall speed and sway
    """
    size = config.HEART_MIN_SIZE + rng.random() * (config.HEART_MAX_SIZE - config.HEART_MIN_SIZE)
    return Heart(
        x=rng.random() * max(0.0, playfield_width - size),
        y=-size,
        size=size,
        speed=config.HEART_MIN_SPEED + rng.random() * (config.HEART_MAX_SPEED - config.HEART_MIN_SPEED),
        phase=rng.random() * math.pi * 2,
        phase_rate=config.SWAY_MIN_RATE + rng.random() * (config.SWAY_MAX_RATE - config.SWAY_MIN_RATE),
    )


def create_burst(
    center: Point2D,
    rng: random.Random,
    count: int = config.PARTICLE_COUNT,
    color: Color = config.HEART_COLOR,
    decay: float = config.PARTICLE_DECAY,
) -> List[Particle]:
    """Create a burst of particles flying out from a point.

    Each velocity component is uniform in [-PARTICLE_MAX_SPEED, PARTICLE_MAX_SPEED).
    """
    spread = config.PARTICLE_MAX_SPEED * 2
    return [
        Particle(
            x=center.x,
            y=center.y,
            vx=(rng.random() - 0.5) * spread,
            vy=(rng.random() - 0.5) * spread,
            color=color,
            decay=decay,
        )
        for _ in range(count)
    ]
