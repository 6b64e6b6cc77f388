"""Simulation rules, game loop, and rendering composition for Rising Drops."""

from __future__ import annotations

import logging
import random
import sys

import pygame

from .config import (
    CANVAS_HEIGHT_RATIO,
    COL_BG_BOTTOM,
    COL_BG_TOP,
    COL_GAME_OVER,
    COL_HUD,
    COL_TEXT,
    FPS,
    GAME_OVER_FONT_SIZE,
    HUD_FONT_SIZE,
    MAX_CANVAS_WIDTH,
    SCORE_FONT_SIZE,
    SLIDER_WIDTH,
    SPEED_STEP,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameSettings,
)
from .entities import Drop
from .hud import SpeedSlider
from .state import SimulationState
from .utils import vertical_gradient

logger = logging.getLogger(__name__)

COUNTDOWN_EVENT = pygame.USEREVENT + 1


class Simulation:
    """Owns the live drops, the score and the countdown of one game session.

    Knows nothing about windows or input devices; the :class:`Game` shell
    feeds it frames, seconds and clicks in canvas coordinates.
    """

    def __init__(self, settings: GameSettings, width: float, height: float) -> None:
        self.settings = settings
        self.state = SimulationState(
            width=width,
            height=height,
            max_radius=settings.max_radius,
            speed_multiplier=settings.speed,
        )
        self.rng = random.Random(settings.seed)
        self.drops: list[Drop] = []
        self.time_left = settings.duration
        self.game_over = False
        self.frames = 0

    @property
    def score(self) -> float:
        return self.state.score

    def add_drop(self, drop: Drop) -> Drop:
        self.drops.append(drop)
        return drop

    def spawn_drop(self) -> Drop:
        """Add a random drop just below the bottom edge of the canvas."""
        drop = self.add_drop(Drop(self.state, rng=self.rng))
        logger.debug("Spawned %r", drop)
        return drop

    def tick(self) -> None:
        """Advance one animation frame. No-op once the game is over."""
        if self.game_over:
            return
        self.frames += 1
        self.state.begin_frame()
        # Drops see neighbours already moved this frame.
        for drop in self.drops:
            drop.update(self.drops, self.state)
        before = len(self.drops)
        self.drops = [d for d in self.drops if not d.offscreen()]
        if len(self.drops) != before:
            logger.debug("Culled %d drop(s) above the canvas", before - len(self.drops))
        if len(self.drops) < self.settings.max_drops and self.rng.random() < self.settings.spawn_chance:
            self.spawn_drop()

    def countdown(self) -> None:
        """Called once per real second."""
        if self.game_over:
            return
        self.time_left = max(0, self.time_left - 1)
        if self.time_left == 0:
            self.end()

    def end(self) -> None:
        if not self.game_over:
            self.game_over = True
            logger.info("Time up: final score %d after %d frames", int(self.score), self.frames)

    def click(self, px: float, py: float) -> None:
        """Poke every drop under (px, py): unprotect it, or split it if already unprotected."""
        if self.game_over:
            return
        for drop in list(self.drops):
            if not drop.contains_point(px, py):
                continue
            if drop.protected:
                drop.set_unprotected()
            else:
                index = self.drops.index(drop)
                self.drops[index:index + 1] = drop.split(self.state)

    def set_speed(self, multiplier: float) -> None:
        self.state.speed_multiplier = multiplier
        logger.debug("Speed multiplier set to %.1f", multiplier)

    def resize(self, width: float, height: float) -> None:
        self.state.width = width
        self.state.height = height


class Game:
    """Top-level game controller: manages window, input, update, and draw."""

    def __init__(self, settings: GameSettings | None = None, size: tuple[int, int] = (WINDOW_WIDTH, WINDOW_HEIGHT)) -> None:
        pygame.init()
        self.settings = settings or GameSettings()
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption("Rising Drops")
        self.clock = pygame.time.Clock()
        self.font_big = pygame.font.SysFont(None, GAME_OVER_FONT_SIZE)
        self.font_hud = pygame.font.SysFont(None, HUD_FONT_SIZE)
        self.font_score = pygame.font.SysFont(None, SCORE_FONT_SIZE)
        self.slider = SpeedSlider(
            self.settings.speed_min,
            self.settings.speed_max,
            self.settings.speed,
            SPEED_STEP,
            on_change=self._on_speed_changed,
        )
        self._layout(*size)
        self.reset()
        pygame.time.set_timer(COUNTDOWN_EVENT, 1000)

    def _layout(self, w: int, h: int) -> None:
        """Place the canvas and HUD for a window of size (w, h)."""
        self.window_size = (w, h)
        cw = min(MAX_CANVAS_WIDTH, w)
        ch = max(1, int(h * CANVAS_HEIGHT_RATIO))
        self.canvas_rect = pygame.Rect((w - cw) // 2, 0, cw, ch)
        self.hud_rect = pygame.Rect(0, ch, w, h - ch)
        self.canvas = pygame.Surface(self.canvas_rect.size)
        self.bg_gradient = pygame.surfarray.make_surface(vertical_gradient(cw, ch, COL_BG_TOP, COL_BG_BOTTOM))
        slider_w = min(SLIDER_WIDTH, max(40, w // 3))
        self.slider.track = pygame.Rect(0, 0, slider_w, 6)
        self.slider.track.center = (int(w * 0.62), self.hud_rect.centery)

    def reset(self) -> None:
        self.sim = Simulation(self.settings, self.canvas_rect.width, self.canvas_rect.height)
        self._banner_drawn = False
        self.sim.set_speed(self.slider.value)
        logger.info(
            "New game: %ds on a %dx%d canvas", self.settings.duration, self.canvas_rect.width, self.canvas_rect.height
        )

    def _on_speed_changed(self, value: float) -> None:
        self.sim.set_speed(value)

    def resize(self, w: int, h: int) -> None:
        self._layout(w, h)
        self._banner_drawn = False
        self.sim.resize(self.canvas_rect.width, self.canvas_rect.height)

    def to_canvas(self, pos: tuple[float, float]) -> tuple[float, float]:
        return pos[0] - self.canvas_rect.left, pos[1] - self.canvas_rect.top

    def poke(self, pos: tuple[float, float]) -> None:
        """Click or tap at window position ``pos``."""
        if self.canvas_rect.collidepoint(pos):
            self.sim.click(*self.to_canvas(pos))

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == COUNTDOWN_EVENT:
            self.sim.countdown()
        elif event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
        elif self.slider.handle_event(event):
            return
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # SDL mirrors taps as mouse clicks; FINGERDOWN already handled them
            if event.button == 1 and not getattr(event, "touch", False):
                self.poke(event.pos)
        elif event.type == pygame.FINGERDOWN:
            w, h = self.window_size
            self.poke((event.x * w, event.y * h))
        elif event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS, pygame.K_RIGHT):
                self.slider.nudge(1)
            elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS, pygame.K_LEFT):
                self.slider.nudge(-1)
            elif event.key in (pygame.K_r,):
                self.reset()
            elif event.key in (pygame.K_ESCAPE,):
                pygame.event.post(pygame.event.Event(pygame.QUIT))

    def update(self) -> None:
        self.sim.tick()

    def draw(self) -> None:
        # The last frame stays frozen under the game-over banner.
        if not self._banner_drawn:
            self._draw_scene(self.canvas)
            if self.sim.game_over:
                self._draw_game_over(self.canvas)
                self._banner_drawn = True
        self.screen.fill(COL_HUD)
        self.screen.blit(self.canvas, self.canvas_rect.topleft)
        self._draw_ui(self.screen)
        pygame.display.flip()

    def _draw_scene(self, surf: pygame.Surface) -> None:
        surf.blit(self.bg_gradient, (0, 0))
        for d in self.sim.drops:
            d.draw(surf)
        score_text = self.font_score.render(f"Score: {int(self.sim.score)}", True, COL_TEXT)
        surf.blit(score_text, (10, 10))

    def _draw_ui(self, surf: pygame.Surface) -> None:
        time_text = self.font_hud.render(f"Time left: {self.sim.time_left}", True, COL_TEXT)
        surf.blit(time_text, time_text.get_rect(midleft=(20, self.hud_rect.centery)))
        self.slider.draw(surf, self.font_hud)

    def _draw_game_over(self, surf: pygame.Surface) -> None:
        cx, cy = surf.get_width() // 2, surf.get_height() // 2
        title = self.font_big.render("Time Up! Game Over!", True, COL_GAME_OVER)
        final = self.font_big.render(f"Final Score: {int(self.sim.score)}", True, COL_GAME_OVER)
        surf.blit(title, title.get_rect(center=(cx, cy)))
        surf.blit(final, final.get_rect(center=(cx, cy + 50)))

    def run(self) -> None:
        while True:
            self.clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.quit()
                    sys.exit(0)
                self.handle_input(event)

            self.update()
            self.draw()
