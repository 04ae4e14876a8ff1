import logging
import numpy as np
from typing import List, Tuple, Optional
from dataclasses import dataclass
import os

import physics as P
from physics.engine import Ball, Simulation

os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
import pygame

logger = logging.getLogger(__name__)


@dataclass
class AppearanceConfig:
    """Colors and stroke widths; never read by the physics."""
    bg_color: Tuple[int, int, int] = P.BG_COLOR
    highlight_color: Tuple[int, int, int] = P.HIGHLIGHT_COLOR
    collision_color: Tuple[int, int, int] = P.COLLISION_COLOR
    overlay_color: Tuple[int, int, int] = P.OVERLAY_COLOR
    selection_width: int = P.SELECTION_WIDTH
    drag_line_width: int = P.DRAG_LINE_WIDTH
    velocity_scale: float = P.OVERLAY_VELOCITY_SCALE
    overlay_text: bool = True


class Renderer:
    """Draws the ball collection onto a pygame surface."""

    def __init__(self, config: Optional[AppearanceConfig] = None):
        self.config = config or AppearanceConfig()
        self._font = None

    def draw(self, surface, balls: List[Ball], active_ball: Optional[int] = None,
             pointer: Tuple[float, float] = (0.0, 0.0), overlay: bool = False,
             tick: int = 0):
        surface.fill(self.config.bg_color)

        for ball in balls:
            pygame.draw.circle(surface, ball.color, _pixel(ball.center),
                               _pixel_radius(ball.radius))

        if overlay:
            self._draw_overlay(surface, balls, tick)

        if active_ball is not None:
            ball = balls[active_ball]
            pygame.draw.circle(surface, self.config.highlight_color,
                               _pixel(ball.center), _pixel_radius(ball.radius),
                               self.config.selection_width)
            pygame.draw.line(surface, self.config.highlight_color,
                             _pixel(ball.center), _pixel(pointer),
                             self.config.drag_line_width)

    def _draw_overlay(self, surface, balls: List[Ball], tick: int):
        for ball in balls:
            r = _pixel_radius(ball.radius)
            cx, cy = _pixel(ball.center)
            pygame.draw.rect(surface, self.config.overlay_color,
                             pygame.Rect(cx - r, cy - r, 2 * r, 2 * r), 1)
            if ball.velocity.magnitude != 0:
                dx, dy = ball.velocity.scaled(self.config.velocity_scale).to_xy()
                pygame.draw.line(surface, self.config.overlay_color,
                                 (cx, cy), _pixel((ball.x + dx, ball.y + dy)), 2)
            if ball.is_colliding:
                pygame.draw.circle(surface, self.config.collision_color,
                                   (cx, cy), r, 3)

        if self.config.overlay_text:
            if self._font is None:
                pygame.font.init()
                self._font = pygame.font.Font(None, 24)
            n_colliding = sum(b.is_colliding for b in balls)
            text = f"tick {tick}  balls {len(balls)}  colliding {n_colliding}"
            surface.blit(self._font.render(text, True, self.config.overlay_color),
                         (10, 10))

    def play(self, sim: Simulation, poller, fps: int = P.FPS,
             size: Tuple[int, int] = (P.WINDOW_WIDTH, P.WINDOW_HEIGHT)):
        """Run the interactive loop. Press Q/Escape or close window to exit."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(size, pygame.RESIZABLE)
            pygame.display.set_caption(P.WINDOW_TITLE)
            clock = pygame.time.Clock()
            logger.info("window open: %dx%d", *size)

            if not sim.balls:
                sim.reset(screen.get_size())

            while True:
                frame = poller.poll_pygame(screen)
                if frame.quit:
                    break
                sim.step(frame)
                self.draw(screen, sim.balls, sim.active_ball, frame.pointer,
                          overlay=frame.overlay, tick=sim.tick)
                pygame.display.flip()
                clock.tick(fps)
        finally:
            pygame.quit()
            self._font = None
            logger.info("window closed")


def _pixel(point: Tuple[float, float]) -> Tuple[int, int]:
    return int(np.round(point[0])), int(np.round(point[1]))


def _pixel_radius(r: float) -> int:
    return max(1, int(np.round(r)))

