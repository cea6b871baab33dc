"""
Tests for HeartSpawner pacing.
"""
import pytest

from games.HeartCatch.spawner import HeartSpawner


class TestInterval:
    """Test meter-driven spawn interval."""

    @pytest.mark.parametrize("meter,expected", [(0, 1000.0), (5, 975.0), (50, 750.0), (95, 525.0), (100, 500.0)])
    def test_shrinks_five_ms_per_point(self, settings, meter, expected):
        spawner = HeartSpawner(settings)
        assert spawner.interval_for(meter) == expected

    def test_unfloored_by_default(self, settings):
        """Past 200 meter points the interval goes negative."""
        spawner = HeartSpawner(settings)
        assert spawner.interval_for(300) == -500.0

    def test_floor(self, settings):
        floored = settings.model_copy(update={'spawn_interval_floor_ms': 600.0})
        spawner = HeartSpawner(floored)
        assert spawner.interval_for(0) == 1000.0
        assert spawner.interval_for(100) == 600.0
        assert spawner.interval_for(1000) == 600.0


class TestSchedule:
    """Test spawn timing against the simulation clock."""

    def test_strictly_after_scheduled_time(self, settings, rng):
        spawner = HeartSpawner(settings, rng)
        assert not spawner.should_spawn(0.0)
        assert spawner.should_spawn(0.1)

    def test_spawn_reschedules(self, settings, rng):
        spawner = HeartSpawner(settings, rng)
        spawner.spawn(16.0, love_meter=20.0, playfield_width=800)
        assert spawner.next_spawn_ms == 16.0 + 900.0
        assert not spawner.should_spawn(916.0)
        assert spawner.should_spawn(916.5)

    def test_spawned_heart_fits_playfield(self, settings, rng):
        spawner = HeartSpawner(settings, rng)
        heart = spawner.spawn(1.0, love_meter=0.0, playfield_width=300)
        assert heart.y == -heart.size
        assert 0.0 <= heart.x <= 300 - heart.size

    def test_reset(self, settings, rng):
        spawner = HeartSpawner(settings, rng)
        spawner.spawn(100.0, love_meter=0.0, playfield_width=800)
        spawner.reset()
        assert spawner.next_spawn_ms == 0.0
