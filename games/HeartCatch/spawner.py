"""
HeartCatch - Heart spawner with meter-driven pacing.

A single timer decides when the next heart appears. After every spawn the
next one is scheduled ``spawn_interval_ms - love_meter * spawn_speedup_ms``
later, so hearts come faster as the meter fills.
"""
import random
from typing import Optional

from games.HeartCatch.config import HeartCatchSettings
from games.HeartCatch.entities import Heart, create_heart
from lovecatch.logging import get_logger

log = get_logger('spawner')


class HeartSpawner:
    """Schedules hearts against the simulation clock (milliseconds)."""

    def __init__(
        self,
        settings: Optional[HeartCatchSettings] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the spawner.

        Args:
            settings: Spawn interval, speedup and optional floor
            rng: Random source for heart placement
        """
        self.settings = settings or HeartCatchSettings()
        self.rng = rng or random.Random()
        self.next_spawn_ms = 0.0

    def reset(self) -> None:
        """Make the first heart of a new game spawn on the first step."""
        self.next_spawn_ms = 0.0

    def interval_for(self, love_meter: float) -> float:
        """Delay until the next spawn at the given meter level.

        Not floored unless ``spawn_interval_floor_ms`` is set; a large
        enough meter makes the interval negative, which schedules the next
        heart in the past. The step checks the schedule once, so that still
        means at most one heart per step, never a backlog.
        """
        interval = self.settings.spawn_interval_ms - love_meter * self.settings.spawn_speedup_ms
        floor = self.settings.spawn_interval_floor_ms
        if floor is not None and interval < floor:
            return floor
        return interval

    def should_spawn(self, now_ms: float) -> bool:
        """True once the clock has passed the scheduled spawn time."""
        return now_ms > self.next_spawn_ms

    def spawn(self, now_ms: float, love_meter: float, playfield_width: float) -> Heart:
        """Create a heart and schedule the next one.

        Args:
            now_ms: Current simulation clock
            love_meter: Current meter level (drives the pacing)
            playfield_width: Width the heart must fit within

        Returns:
            New Heart above the top edge
        """
        heart = create_heart(playfield_width, self.rng)
        self.next_spawn_ms = now_ms + self.interval_for(love_meter)
        log.trace("spawned heart size=%.1f x=%.1f next=%.0fms", heart.size, heart.x, self.next_spawn_ms)
        return heart
