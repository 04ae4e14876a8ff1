from collections import defaultdict

import pygame

from physics.controls import InputPoller, key_code

SIZE = (1600, 900)


def poll(events=(), pos=(10, 20), buttons=(False, False, False), keys=None):
    return InputPoller().poll(list(events), pos, buttons, keys or defaultdict(bool), SIZE)


def test_idle_frame():
    frame = poll()
    assert frame.pointer == (10.0, 20.0)
    assert frame.canvas_size == (1600.0, 900.0)
    assert not (frame.just_pressed or frame.just_released or frame.held)
    assert not (frame.reset or frame.quit)


def test_left_button_edges():
    down = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 20))
    up = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(10, 20))
    assert poll([down], buttons=(True, False, False)).just_pressed
    assert poll([down], buttons=(True, False, False)).held
    assert poll([up]).just_released


def test_other_buttons_ignored():
    down = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 20))
    assert not poll([down]).just_pressed


def test_modifier_keys_read_from_key_state():
    keys = defaultdict(bool)
    keys[pygame.K_LSHIFT] = True
    keys[pygame.K_d] = True
    frame = poll(keys=keys)
    assert frame.slow_mode
    assert frame.overlay
    assert not frame.snap


def test_reset_and_quit_keys():
    reset = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r)
    escape = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    assert poll([reset]).reset
    assert poll([escape]).quit
    assert poll([pygame.event.Event(pygame.QUIT)]).quit


def test_key_code_lookup():
    assert key_code('LCTRL') == pygame.K_LCTRL
    assert key_code('q') == pygame.K_q
