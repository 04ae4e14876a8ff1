"""
2D ball toy engine — friction, wall bounces and heuristic collision kicks.

- N balls on a resizable canvas, pixel coordinates (y grows downward)
- Velocity kept in polar form; friction eats magnitude each tick
- A pointer drag launches a ball (slingshot)
- State per ball: (x, y, direction, magnitude, radius, color)

Tick: input → integrate → friction → walls → collisions
"""

import copy
import logging
import numpy as np
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict

import physics as P
from physics.metrics import total_speed
from physics.vector import PolarVector, clamp, slow

logger = logging.getLogger(__name__)


@dataclass
class Ball:
    x: float
    y: float
    radius: float
    color: Tuple[int, int, int] = (255, 255, 255)
    velocity: PolarVector = field(default_factory=PolarVector)
    is_colliding: bool = False

    @property
    def center(self) -> Tuple[float, float]:
        return self.x, self.y

    @property
    def state(self) -> np.ndarray:
        return np.array([self.x, self.y,
                         self.velocity.direction, self.velocity.magnitude])

    def contains_point(self, px: float, py: float) -> bool:
        """Bounding-square hit test, not an exact circle test."""
        return abs(self.x - px) < self.radius and abs(self.y - py) < self.radius

    def collides(self, other: 'Ball') -> bool:
        dx = self.x - other.x
        dy = self.y - other.y
        reach = self.radius + other.radius
        return dx * dx + dy * dy <= reach * reach


@dataclass
class FrameInput:
    """One tick's worth of read-only input."""
    pointer: Tuple[float, float] = (0.0, 0.0)
    just_pressed: bool = False
    just_released: bool = False
    held: bool = False
    slow_mode: bool = False
    snap: bool = False
    overlay: bool = False
    reset: bool = False
    quit: bool = False
    canvas_size: Tuple[float, float] = (P.WINDOW_WIDTH, P.WINDOW_HEIGHT)


@dataclass
class WorldConfig:
    acceleration: float = P.ACCELERATION
    max_velocity: float = P.MAX_VELOCITY
    friction: float = P.FRICTION_DECELERATION
    bounce_deceleration: float = P.BOUNCE_DECELERATION
    slow_mode_multiplier: float = P.SLOW_MODE_MULTIPLIER
    collision_repulsion: float = P.COLLISION_REPULSION
    ball_count_range: Tuple[int, int] = P.BALL_COUNT_RANGE
    radius_range: Tuple[float, float] = P.RADIUS_RANGE
    color_range: Tuple[int, int] = P.COLOR_RANGE
    seed: Optional[int] = None

    def __post_init__(self):
        for name in ('ball_count_range', 'radius_range', 'color_range'):
            lo, hi = getattr(self, name)
            if lo > hi:
                raise ValueError(f"{name} must be (min, max), got {(lo, hi)}")


class Simulation:
    """
    Owns the ball collection and the pointer selection.

    Balls are addressed by index. Every reset bumps `generation`, so an
    index remembered from an earlier generation can be rejected.
    """

    def __init__(self, config: Optional[WorldConfig] = None):
        self.config = config or WorldConfig()
        self.rng = np.random.RandomState(self.config.seed)
        self.balls: List[Ball] = []
        self.active_ball: Optional[int] = None
        self.generation: int = 0
        self.tick: int = 0
        self._snapped: Optional[int] = None

    # Lifecycle

    def reset(self, canvas_size: Tuple[float, float] = (P.WINDOW_WIDTH, P.WINDOW_HEIGHT)
              ) -> List[Ball]:
        lo, hi = self.config.ball_count_range
        n_balls = self.rng.randint(lo, hi + 1)
        balls = [self._create_random_ball(canvas_size) for _ in range(n_balls)]
        # Largest first so small balls are drawn on top
        balls.sort(key=lambda b: b.radius, reverse=True)
        self._install(balls)
        logger.debug("reset: %d balls, generation %d", n_balls, self.generation)
        return self.balls

    def initialize(self, balls: List[Ball]) -> List[Ball]:
        self._install([copy.deepcopy(b) for b in balls])
        return self.balls

    def _install(self, balls: List[Ball]):
        self.balls = balls
        self.active_ball = None
        self._snapped = None
        self.generation += 1
        self.tick = 0

    def _create_random_ball(self, canvas_size: Tuple[float, float]) -> Ball:
        width, height = canvas_size
        r = self.rng.uniform(*self.config.radius_range)
        x = self.rng.uniform(r, width - r)
        y = self.rng.uniform(r, height - r)
        lo, hi = self.config.color_range
        color = tuple(int(c) for c in self.rng.randint(lo, hi + 1, size=3))
        velocity = PolarVector(direction=self.rng.uniform(0, 2 * np.pi), magnitude=0.0)
        return Ball(x=float(x), y=float(y), radius=float(r), color=color,
                    velocity=velocity)

    def ball_at(self, index: Optional[int], generation: int) -> Optional[Ball]:
        """Ball for an index taken during `generation`, or None if stale."""
        if index is None or generation != self.generation:
            return None
        if not 0 <= index < len(self.balls):
            return None
        return self.balls[index]

    def kick(self, speed_range: Tuple[float, float] = P.KICK_RANGE):
        """Give every ball a random velocity (headless runs)."""
        for ball in self.balls:
            ball.velocity = PolarVector(direction=self.rng.uniform(0, 2 * np.pi),
                                        magnitude=self.rng.uniform(*speed_range))

    # Tick

    def step(self, frame: FrameInput) -> List[Ball]:
        if frame.reset:
            return self.reset(frame.canvas_size)
        self.handle_input(frame)
        self.integrate(frame)
        self.resolve_collisions()
        self.tick += 1
        return self.balls

    def handle_input(self, frame: FrameInput):
        """Pointer slingshot: press grabs, release launches."""
        px, py = frame.pointer
        self._snapped = None

        if frame.just_pressed:
            self.active_ball = None
            for i, ball in enumerate(self.balls):
                if ball.contains_point(px, py):
                    self.active_ball = i
                    logger.debug("grabbed ball %d", i)
                    break
        elif frame.just_released:
            if self.active_ball is not None:
                ball = self.balls[self.active_ball]
                launch = PolarVector.from_xy(ball.x - px, ball.y - py)
                ball.velocity = launch.scaled(self.config.acceleration)
                logger.debug("launched ball %d: %s", self.active_ball, ball.velocity)
            self.active_ball = None
        elif not frame.held:
            self.active_ball = None

        if self.active_ball is not None and frame.snap:
            ball = self.balls[self.active_ball]
            ball.x, ball.y = float(px), float(py)
            self._snapped = self.active_ball

    def integrate(self, frame: FrameInput):
        """Move, apply friction and bounce off the canvas edges."""
        width, height = frame.canvas_size
        speed = self.config.slow_mode_multiplier if frame.slow_mode else 1.0
        limit = self.config.max_velocity

        for i, ball in enumerate(self.balls):
            if i == self._snapped:
                continue
            v = ball.velocity
            v.magnitude = clamp(v.magnitude, -limit, limit)

            dx, dy = v.scaled(speed).to_xy()
            ball.x += dx
            ball.y += dy

            v.magnitude = slow(v.magnitude, self.config.friction * speed)

            r = ball.radius
            if not (r <= ball.x <= width - r) or not (r <= ball.y <= height - r):
                v.direction = -v.direction
                v.magnitude = slow(v.magnitude, self.config.bounce_deceleration * speed)

            # Horizontal walls also turn the ball around; vertical ones only pin it
            if ball.x < r:
                v.direction += np.pi
                ball.x = r
            if ball.x > width - r:
                v.direction += np.pi
                ball.x = width - r

            if ball.y < r:
                ball.y = r
            if ball.y > height - r:
                ball.y = height - r

    def resolve_collisions(self):
        """
        Average each overlapping ball's velocity with a repulsion kick.

        Reads the current collection as a snapshot and publishes a fresh one.
        Direction and magnitude are averaged separately; with several partners
        each one blends against the already-blended velocity, in storage order.
        """
        snapshot = self.balls
        resolved = [copy.deepcopy(b) for b in snapshot]

        for i, a in enumerate(snapshot):
            out = resolved[i]
            out.is_colliding = False
            for j, b in enumerate(snapshot):
                if i == j or not a.collides(b):
                    continue
                out.is_colliding = True
                push = PolarVector(
                    direction=float(np.arctan2(a.y - b.y, a.x - b.x)),
                    magnitude=self.config.collision_repulsion / (a.radius / b.radius),
                )
                out.velocity = PolarVector(
                    direction=(out.velocity.direction + push.direction) / 2,
                    magnitude=(out.velocity.magnitude + push.magnitude) / 2,
                )

        self.balls = resolved

    # State access

    def get_state(self) -> np.ndarray:
        """(n_balls, 4) → [x, y, direction, magnitude]"""
        return np.array([b.state for b in self.balls]).reshape(-1, 4)

    def get_radii(self) -> np.ndarray:
        return np.array([b.radius for b in self.balls])

    def get_colliding(self) -> np.ndarray:
        return np.array([b.is_colliding for b in self.balls], dtype=bool)

    def set_state(self, state: np.ndarray):
        assert state.shape == (len(self.balls), 4)
        for i, ball in enumerate(self.balls):
            ball.x, ball.y = float(state[i, 0]), float(state[i, 1])
            ball.velocity = PolarVector(float(state[i, 2]), float(state[i, 3]))


def generate_trajectory(config: WorldConfig, n_steps: int = 200,
                        canvas_size: Tuple[float, float] = (P.WINDOW_WIDTH, P.WINDOW_HEIGHT),
                        kick: Optional[Tuple[float, float]] = P.KICK_RANGE) -> Dict:
    """Run without input. Returns dict with states, radii, colliding, speed."""
    engine = Simulation(config)
    engine.reset(canvas_size)
    if kick is not None:
        engine.kick(kick)

    idle = FrameInput(canvas_size=canvas_size)
    states = [engine.get_state()]
    colliding = [engine.get_colliding()]

    for _ in range(n_steps):
        engine.step(idle)
        states.append(engine.get_state())
        colliding.append(engine.get_colliding())

    states = np.array(states)
    logger.info("trajectory: %d balls, %d steps, %d colliding ticks",
                len(engine.balls), n_steps, int(np.any(colliding, axis=1).sum()))
    return {
        'states': states,
        'radii': engine.get_radii(),
        'colliding': np.array(colliding),
        'speed': total_speed(states),
        'config': config,
    }
