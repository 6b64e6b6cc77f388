"""Game entities and rendering helpers.

Contains the rising, mergeable, splittable drop.
"""

from __future__ import annotations

import logging
import random

import pygame

from .config import (
    DIRECTION_Y_JITTER,
    MAX_SPEED,
    MAX_START_RADIUS,
    MERGE_SCORE,
    MERGE_SPEEDUP,
    MIN_SPEED,
    MIN_SPLIT_RADIUS,
    MIN_START_RADIUS,
    OUTLINE_WIDTH,
    SPLIT_DAMPING_MIN,
    SPLIT_SCORE,
)
from .state import SimulationState
from .utils import HSL, circles_overlap, drop_color, faded_color, hsl_to_rgb, merged_radius, mix_hues, point_in_circle, split_radius

logger = logging.getLogger(__name__)


class Drop:
    """A colored circle rising through the canvas.

    New drops are protected: they ignore contact with others until the
    player clicks them once. Unprotected drops merge with anything they
    touch and split in two when clicked again.
    """

    def __init__(
        self,
        state: SimulationState,
        x: float | None = None,
        y: float | None = None,
        radius: float | None = None,
        color: HSL | None = None,
        speed: float | None = None,
        *,
        direction_x: float | None = None,
        direction_y: float | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        rng = self._rng
        self.radius = float(radius if radius is not None else rng.uniform(MIN_START_RADIUS, MAX_START_RADIUS))
        self.color: HSL = color if color is not None else drop_color(rng.random() * 360)
        self.speed = float(speed if speed is not None else rng.uniform(MIN_SPEED, MAX_SPEED))
        if x is None:
            x = rng.random() * (state.width - self.radius * 2) + self.radius
        if y is None:
            y = state.height + self.radius
        self.x = float(x)
        self.y = float(y)
        self.direction_x = direction_x if direction_x is not None else rng.uniform(-1.0, 1.0)
        self.direction_y = direction_y if direction_y is not None else rng.uniform(-DIRECTION_Y_JITTER, DIRECTION_Y_JITTER)
        self.merge_count = 0
        self.protected = True

    def __repr__(self) -> str:
        return (
            f"Drop(x={self.x:.1f}, y={self.y:.1f}, r={self.radius:.1f}, "
            f"protected={self.protected}, merges={self.merge_count})"
        )

    def update(self, drops: list["Drop"], state: SimulationState) -> None:
        """Advance one frame: rise, drift, bounce off the side walls, then merge on contact."""
        speedup = 1 + self.merge_count * MERGE_SPEEDUP
        self.y -= self.speed * speedup * state.speed_multiplier + self.direction_y
        self.x += self.direction_x * state.speed_multiplier
        self.bounce(state.width)
        if not self.protected:
            self.check_interactions(drops, state)

    def bounce(self, width: float) -> None:
        # Reflect only; the drop may overshoot the wall for a frame.
        if self.x < self.radius or self.x > width - self.radius:
            self.direction_x = -self.direction_x

    def check_interactions(self, drops: list["Drop"], state: SimulationState) -> None:
        for other in drops:
            if other is not self and self.intersects(other) and state.claim_pair(self, other):
                self.merge(other, state)

    def intersects(self, other: "Drop") -> bool:
        return circles_overlap(self.x, self.y, self.radius, other.x, other.y, other.radius)

    def contains_point(self, px: float, py: float) -> bool:
        return point_in_circle(px, py, self.x, self.y, self.radius)

    def merge(self, other: "Drop", state: SimulationState) -> None:
        """Blend colors with ``other`` and grow both to the combined size.

        Both drops survive the merge and end up with the same color and
        radius. Only the initiating drop's speed counts toward the score.
        """
        self.color = drop_color(mix_hues(self.color[0], other.color[0]))
        other.color = self.color
        self.merge_count += 1
        other.merge_count += 1
        state.score += MERGE_SCORE * self.speed
        self.radius = merged_radius(self.radius, other.radius, state.max_radius)
        other.radius = self.radius
        logger.debug("Merged %r with %r (score %.1f)", self, other, state.score)

    def split(self, state: SimulationState) -> list["Drop"]:
        """Break into two smaller drops; returns [] when the halves would be too small."""
        new_radius = split_radius(self.radius, self._rng.uniform(SPLIT_DAMPING_MIN, 1.0))
        if new_radius < MIN_SPLIT_RADIUS:
            logger.debug("Drop %r too small to split, removed", self)
            return []
        self.merge_count += 1
        state.score += SPLIT_SCORE * self.speed
        children = [
            Drop(state, self.x - self.radius, self.y, new_radius, self.color, self.speed, rng=self._rng),
            Drop(state, self.x + self.radius, self.y, new_radius, self.color, self.speed, rng=self._rng),
        ]
        logger.debug("Split %r into two drops of radius %.1f", self, new_radius)
        return children

    def set_unprotected(self) -> None:
        self.protected = False

    def offscreen(self) -> bool:
        """True once the drop has risen completely above the canvas."""
        return self.y + self.radius <= 0

    def draw(self, surf: pygame.Surface) -> None:
        center = (int(self.x), int(self.y))
        r = max(1, int(self.radius))
        pygame.draw.circle(surf, hsl_to_rgb(self.color), center, r)
        if self.protected:
            # Translucent outline needs its own alpha surface
            d = 2 * r + 2 * OUTLINE_WIDTH
            s = pygame.Surface((d, d), pygame.SRCALPHA)
            pygame.draw.circle(s, faded_color(self.color), (d // 2, d // 2), r + OUTLINE_WIDTH // 2, OUTLINE_WIDTH)
            surf.blit(s, (center[0] - d // 2, center[1] - d // 2))
