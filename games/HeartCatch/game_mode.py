"""
HeartCatch Game Mode

Catch falling hearts in a basket to fill the love meter. Every heart that
slips past costs a life. Fill the meter to win, lose every life and it is
game over.
"""
import random
from typing import List, Optional

import pygame

from models import Resolution
from games.HeartCatch import config
from games.HeartCatch.config import HeartCatchSettings
from games.HeartCatch.renderer import Renderer
from games.HeartCatch.world import GameWorld, StepResult
from lovecatch.games import BaseGame, GameState
from lovecatch.games.input import EventType, InputEvent
from lovecatch.logging import get_logger

log = get_logger('heart_catch')


class HeartCatchMode(BaseGame):
    """
    Heart Catch game mode.

    Owns the game phase and gates the simulation:

        START --start--> PLAYING --meter full--> WON
                            |                     |
                            +--no lives--> GAME_OVER
                                              |
        WON / GAME_OVER --restart--> PLAYING (fresh world state)

    Session stats (games played, best score) survive restarts.
    """

    NAME = "Heart Catch"
    DESCRIPTION = "Move the basket to catch falling hearts and fill the love meter."
    VERSION = "1.0.0"

    ARGUMENTS = [
        {
            'name': '--win-threshold',
            'type': float,
            'default': None,
            'help': 'Meter value that wins the game (default 100)'
        },
        {
            'name': '--lives',
            'type': int,
            'default': None,
            'help': 'Starting lives (default 3)'
        },
        {
            'name': '--spawn-interval',
            'type': float,
            'default': None,
            'help': 'Milliseconds between hearts at an empty meter (default 1000)'
        },
        {
            'name': '--spawn-floor',
            'type': float,
            'default': None,
            'help': 'Shortest allowed spawn interval in milliseconds (default: unfloored)'
        },
        {
            'name': '--autostart',
            'action': 'store_true',
            'default': False,
            'help': 'Skip the start screen'
        },
    ]

    def __init__(
        self,
        width: int = config.SCREEN_WIDTH,
        height: int = config.SCREEN_HEIGHT,
        win_threshold: Optional[float] = None,
        lives: Optional[int] = None,
        spawn_interval: Optional[float] = None,
        spawn_floor: Optional[float] = None,
        autostart: bool = False,
        seed: Optional[int] = None,
        settings: Optional[HeartCatchSettings] = None,
        **kwargs,
    ):
        """
        Initialize Heart Catch.

        Args:
            width: Playfield width in pixels
            height: Playfield height in pixels
            win_threshold: Override meter value needed to win
            lives: Override starting lives
            spawn_interval: Override base spawn interval (ms)
            spawn_floor: Floor for the spawn interval (ms)
            autostart: Begin in PLAYING instead of START
            seed: Random seed for reproducible games
            settings: Complete settings; CLI overrides apply on top

        Raises:
            pydantic.ValidationError: If the playfield or settings are invalid
        """
        super().__init__()

        overrides = {
            'win_threshold': win_threshold,
            'starting_lives': lives,
            'spawn_interval_ms': spawn_interval,
            'spawn_interval_floor_ms': spawn_floor,
        }
        base = settings or HeartCatchSettings()
        self._settings = HeartCatchSettings(**{
            **base.model_dump(),
            **{k: v for k, v in overrides.items() if v is not None},
        })

        self._world = GameWorld(
            playfield=Resolution(width=width, height=height),
            settings=self._settings,
            rng=random.Random(seed),
        )
        self._renderer = Renderer()

        self._internal_state = GameState.START
        self._last_step: Optional[StepResult] = None

        # Session tracking
        self._games_played = 0
        self._best_score = 0

        if autostart:
            self.start_or_restart()

    @property
    def world(self) -> GameWorld:
        return self._world

    @property
    def settings(self) -> HeartCatchSettings:
        return self._settings

    @property
    def lives(self) -> int:
        return self._world.lives

    @property
    def love_meter(self) -> float:
        return self._world.love_meter

    @property
    def final_score(self) -> Optional[int]:
        """Floored meter once the game has ended, else None."""
        if self._internal_state.is_terminal:
            return self._world.score
        return None

    @property
    def games_played(self) -> int:
        return self._games_played

    @property
    def best_score(self) -> int:
        return self._best_score

    @property
    def last_step(self) -> Optional[StepResult]:
        """Result of the most recent simulation step, if any."""
        return self._last_step

    def _get_internal_state(self) -> GameState:
        return self._internal_state

    def get_score(self) -> int:
        """Return the love meter as shown on screen."""
        return self._world.score

    def start_or_restart(self) -> None:
        """Begin a fresh game from any phase."""
        previous = self._internal_state
        self._world.reset()
        self._last_step = None
        self._internal_state = GameState.PLAYING
        log.info("game started (from %s)", previous.value)

    def reset(self) -> None:
        """Restart the game (R key)."""
        self.start_or_restart()

    def resize(self, width: int, height: int) -> None:
        """Adopt a new playfield size, keeping the basket in bounds."""
        self._world.resize(width, height)
        log.debug("playfield resized to %dx%d", width, height)

    def release_input(self) -> None:
        """Forget held keys and the pointer (e.g. on focus loss)."""
        self._world.input.release_all()

    def handle_input(self, events: List[InputEvent]) -> None:
        """Process input events.

        START events and pointer presses begin a game from the start or
        end screens. Key and pointer events always update the input state,
        so a key held across a restart keeps moving the basket.
        """
        for event in events:
            if self._internal_state != GameState.PLAYING and event.event_type in (
                EventType.START, EventType.POINTER_DOWN
            ):
                self.start_or_restart()
            self._world.input.apply_event(event)

    def update(self, dt: float) -> None:
        """Advance the simulation one frame while playing.

        Args:
            dt: Delta time in seconds
        """
        self.tick(dt)

    def tick(self, dt: float) -> None:
        """Run one simulation step if the game is in progress."""
        if self._internal_state != GameState.PLAYING:
            return

        result = self._world.step(dt)
        self._last_step = result

        if result.outcome is not None:
            self._end_game(result.outcome)

    def _end_game(self, outcome: GameState) -> None:
        self._internal_state = outcome
        self._games_played += 1
        if self._world.score > self._best_score:
            self._best_score = self._world.score
        log.info(
            "game %d ended: %s with score %d",
            self._games_played, outcome.value, self._world.score,
        )

    def render(self, screen: pygame.Surface) -> None:
        """Render the game."""
        best = self._best_score if self._games_played else None
        self._renderer.render(screen, self._world, self._internal_state, best)
