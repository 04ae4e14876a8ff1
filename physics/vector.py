"""
Polar vectors and scalar helpers shared by the simulation.

Velocities are stored as (direction, magnitude) so friction can act on the
magnitude alone.
"""

import numpy as np
from dataclasses import dataclass
from typing import Tuple


@dataclass
class PolarVector:
    """2D vector as angle from the +x axis (radians) and length."""
    direction: float = 0.0
    magnitude: float = 0.0

    @classmethod
    def from_xy(cls, x: float, y: float) -> 'PolarVector':
        magnitude = float(np.sqrt(x * x + y * y))
        direction = float(np.arctan2(y, x))
        return cls(direction=direction, magnitude=magnitude)

    def to_xy(self) -> Tuple[float, float]:
        x = self.magnitude * np.cos(self.direction)
        y = self.magnitude * np.sin(self.direction)
        return float(x), float(y)

    def scaled(self, factor: float) -> 'PolarVector':
        return PolarVector(self.direction, self.magnitude * factor)


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Keep value between min_value and max_value (inclusive)."""
    if value > max_value:
        return max_value
    if value < min_value:
        return min_value
    return value


def slow(value: float, deceleration: float) -> float:
    """Move value toward zero by deceleration, stopping at exactly zero."""
    if abs(value) < deceleration:
        return 0.0
    return value - deceleration * float(np.sign(value))
