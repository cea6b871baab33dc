"""
Tests for HeartCatchMode: phases, restart, input routing and session stats.
"""
import pytest
from pydantic import ValidationError

from models import Point2D
from games.HeartCatch.entities import Heart
from games.HeartCatch.game_mode import HeartCatchMode
from lovecatch.games import BaseGame, GameState
from lovecatch.games.input import Direction, EventType, InputEvent


START = InputEvent(event_type=EventType.START, timestamp=0.0)


def pointer_down(x=100.0):
    return InputEvent(event_type=EventType.POINTER_DOWN, timestamp=0.0, position=Point2D(x=x, y=10.0))


def key_down(direction):
    return InputEvent(event_type=EventType.KEY_DOWN, timestamp=0.0, direction=direction)


@pytest.fixture
def mode(settings):
    """Game in START on an 800x600 playfield."""
    return HeartCatchMode(width=800, height=600, seed=3, settings=settings)


@pytest.fixture
def playing(mode):
    """Game in PLAYING with spawning parked."""
    mode.start_or_restart()
    mode.world.spawner.next_spawn_ms = float('inf')
    return mode


def drop_missing_heart(mode):
    """Queue a heart that falls past the bottom on the next tick."""
    mode.world.hearts.append(Heart(x=0.0, y=598.0, size=40.0, speed=5.0))


def drop_caught_heart(mode):
    """Queue a heart that lands in the basket on the next tick."""
    mode.world.hearts.append(Heart(x=380.0, y=490.0, size=40.0, speed=5.0))


def lose(mode):
    mode.world.lives = 1
    drop_missing_heart(mode)
    mode.tick(0.0)


class TestMetadata:
    """Test class-level game metadata."""

    def test_is_base_game(self):
        assert issubclass(HeartCatchMode, BaseGame)

    def test_arguments(self):
        names = [arg['name'] for arg in HeartCatchMode.get_arguments()]
        for expected in ('--win-threshold', '--lives', '--spawn-interval', '--spawn-floor', '--seed'):
            assert expected in names
        assert len(names) == len(set(names))


class TestConstruction:
    """Test construction and overrides."""

    def test_starts_in_start(self, mode):
        assert mode.state == GameState.START
        assert mode.lives == 3
        assert mode.get_score() == 0
        assert mode.final_score is None

    def test_overrides(self, settings):
        mode = HeartCatchMode(width=800, height=600, lives=5, win_threshold=50.0,
                              spawn_interval=800.0, spawn_floor=300.0, settings=settings)
        assert mode.lives == 5
        assert mode.settings.win_threshold == 50.0
        assert mode.settings.spawn_interval_ms == 800.0
        assert mode.settings.spawn_interval_floor_ms == 300.0

    def test_autostart(self, settings):
        mode = HeartCatchMode(width=800, height=600, autostart=True, settings=settings)
        assert mode.state == GameState.PLAYING

    def test_unknown_kwargs_ignored(self, settings):
        HeartCatchMode(width=800, height=600, settings=settings, palette='neon')

    def test_invalid_playfield(self, settings):
        with pytest.raises(ValidationError):
            HeartCatchMode(width=0, height=600, settings=settings)

    def test_invalid_floor(self, settings):
        with pytest.raises(ValidationError):
            HeartCatchMode(width=800, height=600, spawn_floor=5000.0, settings=settings)

    def test_invalid_lives(self, settings):
        with pytest.raises(ValidationError):
            HeartCatchMode(width=800, height=600, lives=0, settings=settings)


class TestPhases:
    """Test the phase state machine."""

    def test_update_is_noop_before_start(self, mode):
        mode.update(1.0)
        assert mode.world.clock_ms == 0.0
        assert mode.world.hearts == []

    def test_start_event(self, mode):
        mode.handle_input([START])
        assert mode.state == GameState.PLAYING

    def test_pointer_down_starts(self, mode):
        mode.handle_input([pointer_down(250.0)])
        assert mode.state == GameState.PLAYING
        assert mode.world.input.pointer_x == 250.0

    def test_start_event_while_playing_is_ignored(self, playing):
        playing.world.love_meter = 50.0
        playing.handle_input([START])
        assert playing.love_meter == 50.0

    def test_update_runs_while_playing(self, playing):
        playing.update(0.5)
        assert playing.world.clock_ms == 500.0

    def test_game_over(self, playing):
        lose(playing)
        assert playing.state == GameState.GAME_OVER
        assert playing.lives == 0
        assert playing.last_step.outcome == GameState.GAME_OVER

    def test_win(self, playing):
        playing.world.love_meter = 95.0
        drop_caught_heart(playing)
        playing.tick(0.0)
        assert playing.state == GameState.WON
        assert playing.final_score == 100

    def test_no_simulation_after_end(self, playing):
        lose(playing)
        clock = playing.world.clock_ms
        drop_missing_heart(playing)
        playing.update(1.0)
        assert playing.world.clock_ms == clock
        assert playing.lives == 0
        assert len(playing.world.hearts) == 1

    @pytest.mark.parametrize("trigger", [START, pointer_down()])
    def test_restart_after_game_over(self, playing, trigger):
        playing.world.love_meter = 30.0
        lose(playing)
        playing.handle_input([trigger])
        assert playing.state == GameState.PLAYING
        assert playing.lives == 3
        assert playing.love_meter == 0.0
        assert playing.world.hearts == []
        assert playing.world.particles == []
        assert playing.world.player.x == 360.0

    def test_restart_after_win(self, playing):
        playing.world.love_meter = 95.0
        drop_caught_heart(playing)
        playing.tick(0.0)
        playing.start_or_restart()
        assert playing.state == GameState.PLAYING
        assert playing.love_meter == 0.0
        assert playing.world.particles == []

    def test_reset_restarts(self, playing):
        lose(playing)
        playing.reset()
        assert playing.state == GameState.PLAYING


class TestInput:
    """Test input routing."""

    def test_keys_update_state_in_any_phase(self, mode):
        mode.handle_input([key_down(Direction.LEFT)])
        assert mode.state == GameState.START
        assert mode.world.input.left

    def test_held_key_survives_restart(self, playing):
        playing.handle_input([key_down(Direction.RIGHT)])
        lose(playing)
        playing.handle_input([START])
        assert playing.world.input.right
        playing.world.spawner.next_spawn_ms = float('inf')
        playing.tick(0.0)
        assert playing.world.player.x == 370.0

    def test_release_input(self, playing):
        playing.handle_input([key_down(Direction.LEFT), pointer_down()])
        playing.release_input()
        assert not playing.world.input.left
        assert playing.world.input.pointer_x is None


class TestSessionStats:
    """Test games played and best score across restarts."""

    def test_initial(self, mode):
        assert mode.games_played == 0
        assert mode.best_score == 0

    def test_tracks_best(self, playing):
        playing.world.love_meter = 35.0
        lose(playing)
        assert playing.games_played == 1
        assert playing.best_score == 35
        assert playing.final_score == 35

        playing.start_or_restart()
        playing.world.spawner.next_spawn_ms = float('inf')
        playing.world.love_meter = 10.0
        lose(playing)
        assert playing.games_played == 2
        assert playing.best_score == 35
        assert playing.final_score == 10


class TestResize:
    """Test viewport changes."""

    def test_resize(self, playing):
        playing.world.player.x = 700.0
        playing.resize(400, 300)
        assert playing.world.player.y == 200.0
        assert playing.world.player.x == 320.0

    def test_invalid_resize(self, playing):
        with pytest.raises(ValidationError):
            playing.resize(0, 300)


class TestRender:
    """Test that every phase renders."""

    def test_render_each_phase(self, pygame_display, playing):
        playing.render(pygame_display)
        lose(playing)
        playing.render(pygame_display)
