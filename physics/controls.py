"""Turns one frame of pygame events and key state into a FrameInput."""

import os
from typing import Iterable, Sequence, Tuple

import physics as P
from physics.engine import FrameInput

os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
import pygame

LEFT_BUTTON = 1


def key_code(name: str) -> int:
    return getattr(pygame, f'K_{name}')


class InputPoller:
    """Edge-detects pointer and key events, one poll per tick."""

    def __init__(self):
        self.slow_key = key_code(P.SLOW_KEY)
        self.snap_key = key_code(P.SNAP_KEY)
        self.overlay_key = key_code(P.OVERLAY_KEY)
        self.reset_key = key_code(P.RESET_KEY)
        self.quit_keys = {key_code(k) for k in P.QUIT_KEYS}

    def poll(self, events: Iterable, mouse_pos: Tuple[float, float],
             mouse_buttons: Sequence[bool], keys,
             canvas_size: Tuple[float, float]) -> FrameInput:
        frame = FrameInput(
            pointer=(float(mouse_pos[0]), float(mouse_pos[1])),
            held=bool(mouse_buttons[0]),
            slow_mode=bool(keys[self.slow_key]),
            snap=bool(keys[self.snap_key]),
            overlay=bool(keys[self.overlay_key]),
            canvas_size=(float(canvas_size[0]), float(canvas_size[1])),
        )
        for event in events:
            if event.type == pygame.QUIT:
                frame.quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key == self.reset_key:
                    frame.reset = True
                elif event.key in self.quit_keys:
                    frame.quit = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
                frame.just_pressed = True
            elif event.type == pygame.MOUSEBUTTONUP and event.button == LEFT_BUTTON:
                frame.just_released = True
        return frame

    def poll_pygame(self, surface) -> FrameInput:
        """Poll the live pygame queue (display must be open)."""
        return self.poll(pygame.event.get(), pygame.mouse.get_pos(),
                         pygame.mouse.get_pressed(), pygame.key.get_pressed(),
                         surface.get_size())
