import pygame

from physics.controls import InputPoller
from physics.engine import Simulation, WorldConfig
from physics.renderer import Renderer, AppearanceConfig


class QuitAfter(InputPoller):
    """Posts a window-close event on the n-th poll."""

    def __init__(self, n):
        super().__init__()
        self.n = n
        self.calls = 0

    def poll_pygame(self, surface):
        self.calls += 1
        if self.calls == self.n:
            pygame.event.post(pygame.event.Event(pygame.QUIT))
        return super().poll_pygame(surface)


def test_poll_live_queue():
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((320, 240))
        pygame.event.clear()
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        frame = InputPoller().poll_pygame(screen)
        assert frame.quit
        assert frame.canvas_size == (320.0, 240.0)
    finally:
        pygame.quit()


def test_play_runs_until_quit_and_closes_window():
    sim = Simulation(WorldConfig(seed=4))
    poller = QuitAfter(3)
    Renderer(AppearanceConfig(overlay_text=False)).play(sim, poller, fps=1000,
                                                        size=(400, 300))
    assert poller.calls == 3
    assert sim.tick == 2
    assert sim.balls
    assert not pygame.display.get_init()
