"""
Drag a ball and let go to fling it.
Run: python demo.py

  Left drag    slingshot a ball
  Left Shift   slow motion
  Left Ctrl    (while dragging) pin the ball to the pointer
  D            diagnostic overlay
  R            new set of balls
  Q / Esc      quit
"""
import logging

from physics.engine import Simulation, WorldConfig
from physics.controls import InputPoller
from physics.renderer import Renderer, AppearanceConfig
import physics as P

logging.basicConfig(level=logging.INFO, format='%(name)s: %(message)s')

sim = Simulation(WorldConfig(seed=P.SEED))
Renderer(AppearanceConfig()).play(sim, InputPoller(), fps=P.FPS)
