"""
HeartCatch - Configuration loader.

Defaults come from environment variables (optionally via a .env file next
to this module) and are bundled into a validated HeartCatchSettings model.
Time values are milliseconds; distances are pixels per frame.
"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

from models import Color

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_optional_float(key: str) -> Optional[float]:
    """Get float from environment, or None when unset or empty."""
    val = os.getenv(key, '')
    return float(val) if val.strip() else None


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 1280)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 720)
FPS = _get_int('FPS', 60)
RESIZABLE = _get_bool('RESIZABLE', True)

# Game rules
WIN_THRESHOLD = _get_float('WIN_THRESHOLD', 100.0)
STARTING_LIVES = _get_int('STARTING_LIVES', 3)
METER_PER_CATCH = _get_float('METER_PER_CATCH', 5.0)

# Spawning
SPAWN_INTERVAL_MS = _get_float('SPAWN_INTERVAL_MS', 1000.0)
SPAWN_SPEEDUP_MS = _get_float('SPAWN_SPEEDUP_MS', 5.0)  # per meter point
SPAWN_INTERVAL_FLOOR_MS = _get_optional_float('SPAWN_INTERVAL_FLOOR_MS')  # None = unfloored

# Hearts
HEART_MIN_SIZE = 30.0
HEART_MAX_SIZE = 50.0
HEART_MIN_SPEED = 2.0
HEART_MAX_SPEED = 5.0
SWAY_AMPLITUDE = 1.0
SWAY_MIN_RATE = 0.05
SWAY_MAX_RATE = 0.10

# Basket
PLAYER_WIDTH = _get_float('PLAYER_WIDTH', 80.0)
PLAYER_HEIGHT = _get_float('PLAYER_HEIGHT', 80.0)
PLAYER_SPEED = _get_float('PLAYER_SPEED', 10.0)
PLAYER_BOTTOM_MARGIN = 20.0
CATCH_OFFSET = 20.0  # catch zone starts this far below the basket rim
POINTER_SMOOTHING = 0.2

# Particles
PARTICLE_COUNT = 8
PARTICLE_MAX_SPEED = 2.5
PARTICLE_DECAY = 0.05
PARTICLE_RADIUS = 4

# Visual
BACKGROUND_COLOR = (255, 240, 245)
BASKET_COLOR = (139, 69, 19)
HEART_COLOR = Color.from_hex('#ff4757')
TEXT_COLOR = (90, 30, 50)
OVERLAY_COLOR = (255, 255, 255, 190)


class HeartCatchSettings(BaseModel):
    """Tunable rules for one HeartCatch session.

    Built from the module-level defaults above; CLI arguments override
    individual fields.
    """
    model_config = ConfigDict(frozen=True)

    win_threshold: float = Field(default=WIN_THRESHOLD, gt=0.0)
    starting_lives: int = Field(default=STARTING_LIVES, ge=1)
    meter_per_catch: float = Field(default=METER_PER_CATCH, gt=0.0)

    spawn_interval_ms: float = Field(default=SPAWN_INTERVAL_MS, gt=0.0)
    spawn_speedup_ms: float = Field(default=SPAWN_SPEEDUP_MS, ge=0.0)
    spawn_interval_floor_ms: Optional[float] = Field(default=SPAWN_INTERVAL_FLOOR_MS, ge=0.0)

    player_width: float = Field(default=PLAYER_WIDTH, gt=0.0)
    player_height: float = Field(default=PLAYER_HEIGHT, gt=CATCH_OFFSET)
    player_speed: float = Field(default=PLAYER_SPEED, ge=0.0)

    particle_count: int = Field(default=PARTICLE_COUNT, ge=0)
    particle_decay: float = Field(default=PARTICLE_DECAY, gt=0.0)

    @model_validator(mode='after')
    def validate_floor(self) -> 'HeartCatchSettings':
        """The floor cannot sit above the base spawn interval."""
        floor = self.spawn_interval_floor_ms
        if floor is not None and floor > self.spawn_interval_ms:
            raise ValueError(
                f"spawn_interval_floor_ms ({floor}) exceeds spawn_interval_ms ({self.spawn_interval_ms})"
            )
        return self
