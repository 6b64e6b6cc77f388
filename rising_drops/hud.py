"""HUD widgets drawn below the play area."""

from __future__ import annotations

from typing import Callable, Optional

import pygame

from .config import COL_SLIDER_KNOB, COL_SLIDER_TRACK, COL_TEXT, SLIDER_KNOB_RADIUS
from .utils import clamp


class SpeedSlider:
    """Horizontal slider with label and readout for the global speed multiplier."""

    def __init__(
        self,
        lo: float,
        hi: float,
        value: float,
        step: float,
        on_change: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.lo = lo
        self.hi = hi
        self.step = step
        self.on_change = on_change
        self.track = pygame.Rect(0, 0, 0, 0)
        self._dragging = False
        self._value = self._snap(value)

    @property
    def value(self) -> float:
        return self._value

    def set_value(self, v: float) -> None:
        v = self._snap(v)
        if v == self._value:
            return
        self._value = v
        if self.on_change is not None:
            self.on_change(v)

    def nudge(self, steps: int) -> None:
        self.set_value(self._value + steps * self.step)

    def _snap(self, v: float) -> float:
        v = clamp(v, self.lo, self.hi)
        return round(self.lo + round((v - self.lo) / self.step) * self.step, 6)

    def _value_at(self, px: float) -> float:
        if self.track.width <= 0:
            return self._value
        t = clamp((px - self.track.left) / self.track.width, 0.0, 1.0)
        return self.lo + t * (self.hi - self.lo)

    def knob_x(self) -> int:
        t = (self._value - self.lo) / (self.hi - self.lo) if self.hi > self.lo else 0.0
        return int(self.track.left + t * self.track.width)

    def hit_rect(self) -> pygame.Rect:
        return self.track.inflate(2 * SLIDER_KNOB_RADIUS, 2 * SLIDER_KNOB_RADIUS)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Feed a mouse event; True when the slider consumed it."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.hit_rect().collidepoint(event.pos):
                self._dragging = True
                self.set_value(self._value_at(event.pos[0]))
                return True
        elif event.type == pygame.MOUSEMOTION and self._dragging:
            self.set_value(self._value_at(event.pos[0]))
            return True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self._dragging:
            self._dragging = False
            return True
        return False

    def draw(self, surf: pygame.Surface, font: pygame.font.Font) -> None:
        label = font.render("Speed", True, COL_TEXT)
        surf.blit(label, label.get_rect(midright=(self.track.left - 16, self.track.centery)))
        pygame.draw.rect(surf, COL_SLIDER_TRACK, self.track, border_radius=self.track.height // 2)
        pygame.draw.circle(surf, COL_SLIDER_KNOB, (self.knob_x(), self.track.centery), SLIDER_KNOB_RADIUS)
        readout = font.render(f"{self._value:.1f}x", True, COL_TEXT)
        surf.blit(readout, readout.get_rect(midleft=(self.track.right + 16, self.track.centery)))
