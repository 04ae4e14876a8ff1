import numpy as np


def total_speed(states):
    """Sum of velocity magnitudes per tick, states (T, n, 4)."""
    return np.abs(states[:, :, 3]).sum(axis=1)


def collision_fraction(colliding):
    """Fraction of balls overlapping something, per tick."""
    colliding = np.asarray(colliding, dtype=bool)
    if colliding.shape[1] == 0:
        return np.zeros(colliding.shape[0])
    return colliding.mean(axis=1)
