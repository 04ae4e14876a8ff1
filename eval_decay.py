"""
Headless friction check — how fast do kicked balls come to rest?

Metrics per tick (averaged over seeds):
  1. Total speed (sum of velocity magnitudes)
  2. Fraction of balls overlapping another ball
"""

import logging
import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import os
import physics as P
from physics.engine import generate_trajectory, WorldConfig
from physics.metrics import total_speed, collision_fraction


def evaluate(n_steps=600, n_seeds=5, out_dir='results/plots'):
    os.makedirs(out_dir, exist_ok=True)

    speeds = []
    fractions = []
    rest_ticks = []
    for seed in range(P.SEED, P.SEED + n_seeds):
        traj = generate_trajectory(WorldConfig(seed=seed), n_steps=n_steps)
        speed = total_speed(traj['states'])
        speeds.append(speed)
        fractions.append(collision_fraction(traj['colliding']))
        at_rest = np.nonzero(speed == 0)[0]
        rest_ticks.append(int(at_rest[0]) if len(at_rest) else None)

    avg_speed = np.mean(speeds, axis=0)
    avg_fraction = np.mean(fractions, axis=0)

    print("=" * 48)
    print(f"Speed decay over {n_seeds} seeds × {n_steps} ticks")
    print("=" * 48)
    for step in [s for s in (0, 10, 50, 100, n_steps) if s <= n_steps]:
        print(f"{step:>6}  speed {avg_speed[step]:>10.3f}  colliding {avg_fraction[step]:>6.2%}")
    for seed, tick in zip(range(P.SEED, P.SEED + n_seeds), rest_ticks):
        print(f"  seed {seed}: " + (f"at rest after {tick} ticks" if tick is not None else "still moving"))

    fig, axes = plt.subplots(1, 2, figsize=(12, 4.5))
    steps = np.arange(n_steps + 1)

    ax = axes[0]
    for s in speeds:
        ax.plot(steps, s, color='#3498db', alpha=0.25)
    ax.plot(steps, avg_speed, color='#2c3e50', label='mean')
    ax.set_xlabel('Tick')
    ax.set_ylabel('Σ |v|')
    ax.set_title('Total speed')
    ax.legend()

    ax = axes[1]
    ax.plot(steps, avg_fraction, color='#e74c3c')
    ax.set_xlabel('Tick')
    ax.set_ylabel('Fraction')
    ax.set_title('Balls in contact')

    plt.tight_layout()
    path = os.path.join(out_dir, 'decay.png')
    plt.savefig(path, dpi=120)
    plt.close(fig)
    print(f"\nSaved {path}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    evaluate()
