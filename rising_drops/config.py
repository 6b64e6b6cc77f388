from __future__ import annotations

"""Game configuration constants and tunable settings for Rising Drops."""

from dataclasses import dataclass
from typing import Optional

# Window
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 750
MAX_CANVAS_WIDTH = 800
CANVAS_HEIGHT_RATIO = 0.8  # remaining strip hosts the HUD
FPS = 60

# Drops
MIN_START_RADIUS = 20.0
MAX_START_RADIUS = 40.0
MIN_SPEED = 1.0
MAX_SPEED = 2.5
DIRECTION_Y_JITTER = 0.5
MERGE_SPEEDUP = 0.001  # per merge/split, multiplied into rise speed
MIN_SPLIT_RADIUS = 10.0
SPLIT_DAMPING_MIN = 0.95
GROWTH_FACTOR = 1.05
MERGE_SCORE = 10
SPLIT_SCORE = 5

# Colors (HSL for drops, RGB for everything else)
DROP_SATURATION = 75
DROP_LIGHTNESS = 50
OUTLINE_LIGHTEN = 30
OUTLINE_ALPHA = 0.5
OUTLINE_WIDTH = 3

COL_BG_TOP = (250, 252, 255)
COL_BG_BOTTOM = (214, 228, 244)
COL_HUD = (236, 240, 246)
COL_TEXT = (0, 0, 0)
COL_GAME_OVER = (220, 20, 20)
COL_SLIDER_TRACK = (170, 178, 190)
COL_SLIDER_KNOB = (60, 110, 200)

# HUD
SCORE_FONT_SIZE = 22
HUD_FONT_SIZE = 28
GAME_OVER_FONT_SIZE = 56
SLIDER_WIDTH = 240
SLIDER_KNOB_RADIUS = 9
SPEED_STEP = 0.1


@dataclass
class GameSettings:
    """Runtime-tunable gameplay parameters.

    Defaults reproduce the classic two-minute game.
    """
    duration: int = 120         # seconds
    max_radius: float = 75.0
    spawn_chance: float = 0.05  # per frame
    max_drops: int = 10
    speed: float = 1.0          # initial global speed multiplier
    speed_min: float = 0.5
    speed_max: float = 3.0
    seed: Optional[int] = None

    def __post_init__(self):
        if self.duration <= 0:
            raise ValueError(f"duration must be positive, got {self.duration}")
        if self.max_radius < MAX_START_RADIUS:
            raise ValueError(f"max_radius must be at least {MAX_START_RADIUS:g}, got {self.max_radius:g}")
        if not 0.0 <= self.spawn_chance <= 1.0:
            raise ValueError(f"spawn_chance must be within [0, 1], got {self.spawn_chance:g}")
        if self.max_drops < 0:
            raise ValueError(f"max_drops must not be negative, got {self.max_drops}")
        if not 0.0 < self.speed_min <= self.speed_max:
            raise ValueError("speed range must satisfy 0 < speed_min <= speed_max")
        if not self.speed_min <= self.speed <= self.speed_max:
            raise ValueError(
                f"speed must be within [{self.speed_min:g}, {self.speed_max:g}], got {self.speed:g}"
            )
        # The speed slider only holds values on its step grid
        steps = round((self.speed - self.speed_min) / SPEED_STEP)
        if abs(self.speed_min + steps * SPEED_STEP - self.speed) > 1e-9:
            raise ValueError(f"speed must be a multiple of {SPEED_STEP:g}, got {self.speed:g}")
