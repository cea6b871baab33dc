"""
HeartCatch - Game world and simulation step.

GameWorld owns every piece of mutable game data: the basket, the live
hearts and particles, the meter, the lives and the simulation clock.
``step`` advances it by one frame and reports what happened; it never
decides the game phase itself, it only reports a win or loss outcome.
"""
import math
import random
from dataclasses import dataclass
from typing import List, Optional

from models import Resolution
from games.HeartCatch.config import CATCH_OFFSET, HeartCatchSettings
from games.HeartCatch.controls import InputState, apply_input
from games.HeartCatch.entities import Heart, Particle, Player, create_burst
from games.HeartCatch.spawner import HeartSpawner
from lovecatch.games import GameState
from lovecatch.logging import get_logger

log = get_logger('heart_catch')


@dataclass
class StepResult:
    """Summary of one simulation step."""
    spawned: int = 0
    caught: int = 0
    missed: int = 0
    outcome: Optional[GameState] = None  # WON or GAME_OVER when the step ended the game


class GameWorld:
    """All mutable state for one HeartCatch playfield."""

    def __init__(
        self,
        playfield: Resolution,
        settings: Optional[HeartCatchSettings] = None,
        rng: Optional[random.Random] = None,
    ):
        """Create a world with a centered basket and no hearts.

        Args:
            playfield: Size of the play area
            settings: Game rules (defaults from environment config)
            rng: Random source shared by spawning and particles
        """
        self.settings = settings or HeartCatchSettings()
        self.rng = rng or random.Random()
        self.playfield = playfield

        self.player = Player(
            width=self.settings.player_width,
            height=self.settings.player_height,
            speed=self.settings.player_speed,
        )
        self.input = InputState()
        self.spawner = HeartSpawner(self.settings, self.rng)

        self.hearts: List[Heart] = []
        self.particles: List[Particle] = []
        self.love_meter = 0.0
        self.lives = self.settings.starting_lives
        self.clock_ms = 0.0

        self.player.pin_to_bottom(playfield.height)
        self.player.center_in(playfield.width)

    @property
    def score(self) -> int:
        """Meter value as shown to the player."""
        return math.floor(self.love_meter)

    def reset(self) -> None:
        """Return to the state at the start of a game.

        Held keys and the pointer are left alone; they describe the
        player's hands, not the game.
        """
        self.hearts = []
        self.particles = []
        self.love_meter = 0.0
        self.lives = self.settings.starting_lives
        self.clock_ms = 0.0
        self.spawner.reset()
        self.player.pin_to_bottom(self.playfield.height)
        self.player.center_in(self.playfield.width)

    def resize(self, width: int, height: int) -> None:
        """Adopt a new playfield size and keep the basket inside it.

        Raises:
            pydantic.ValidationError: If either dimension is not positive
        """
        self.playfield = Resolution(width=width, height=height)
        self.player.pin_to_bottom(height)
        self.player.clamp(width)

    def step(self, dt: float) -> StepResult:
        """Advance the world by one frame.

        Args:
            dt: Seconds since the previous frame (drives the spawn clock only)

        Returns:
            What happened this frame. Once ``outcome`` is set the step stops
            processing hearts and particles.
        """
        result = StepResult()
        self.clock_ms += dt * 1000.0
        width = self.playfield.width
        height = self.playfield.height

        apply_input(self.player, self.input, width)

        if self.spawner.should_spawn(self.clock_ms):
            self.hearts.append(self.spawner.spawn(self.clock_ms, self.love_meter, width))
            result.spawned += 1

        catch_zone = self.player.catch_zone(CATCH_OFFSET)

        # Reverse order so removal does not shift unvisited hearts
        for i in range(len(self.hearts) - 1, -1, -1):
            heart = self.hearts[i]
            heart.update()

            if heart.bounds.overlaps(catch_zone):
                del self.hearts[i]
                self._catch(heart)
                result.caught += 1
                if self.love_meter >= self.settings.win_threshold:
                    result.outcome = GameState.WON
                    log.info("meter full at %s", self.score)
                    return result
                continue

            if heart.has_fallen_past(height):
                del self.hearts[i]
                self.lives -= 1
                result.missed += 1
                log.debug("missed heart, lives=%d", self.lives)
                if self.lives <= 0:
                    result.outcome = GameState.GAME_OVER
                    log.info("out of lives at %s", self.score)
                    return result

        self._update_particles()
        return result

    def _catch(self, heart: Heart) -> None:
        self.particles.extend(create_burst(
            heart.center,
            self.rng,
            count=self.settings.particle_count,
            decay=self.settings.particle_decay,
        ))
        self.love_meter += self.settings.meter_per_catch
        log.debug("caught heart, meter=%s", self.score)

    def _update_particles(self) -> None:
        for particle in self.particles:
            particle.update()
        self.particles = [p for p in self.particles if p.is_alive]
