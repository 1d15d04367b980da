"""Moving game objects: the shape base, balls and the harpoon bullet."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from .common import (
    BALL_SPEED,
    GRAV,
    SIZEX,
    SIZEX2,
    SIZEY,
    SIZEY2,
    BallSize,
    distance,
    rand_dom,
)

Color = tuple[float, float, float]


@dataclass
class Vector3:
    """A mutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class Shape(ABC):
    """Base of every object living in the world."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.number = rand_dom(self.rng, 0, 1000000)
        self.pos = Vector3()
        self.rot = Vector3()
        self.tspeed = Vector3()
        self.rspeed = Vector3()
        self.color: Color = (0.0, 0.0, 0.0)
        self.acc_ratio = 0.0

    @property
    @abstractmethod
    def radius(self) -> float:
        """Collision radius of the shape."""

    def distance_to(self, other: Shape) -> float:
        """Planar distance between this shape and another."""
        return distance(self.pos.x, self.pos.y, other.pos.x, other.pos.y)

    def move(self) -> None:
        """Advance one frame under gravity, bouncing off the world edges."""
        pos, speed = self.pos, self.tspeed
        pos.x += 0.3 * speed.x
        pos.y += speed.y
        pos.z += speed.z

        speed.y += 0.00035 * GRAV * self.acc_ratio

        if pos.x <= -SIZEX2:
            pos.x = -SIZEX2
            speed.x = -0.5 * speed.x

        if pos.y <= -SIZEY2:
            pos.y = -SIZEY2
            bounce = 0.25 * BALL_SPEED * (self.rng.random() + 0.2)
            speed.y = min(max(bounce, 0.007), 0.025)
            if -0.015 < speed.x < 0.015:
                push = self.rng.random() * BALL_SPEED * 0.15
                speed.x = push if speed.x > 0 else -push

        if pos.x >= SIZEX2:
            pos.x = SIZEX2
            speed.x = -0.5 * speed.x
        if pos.y >= SIZEY2:
            pos.y = SIZEY2
            speed.y = -0.0125 * BALL_SPEED


_BALL_COLORS: dict[BallSize, Color] = {
    BallSize.BIG: (0.9, 0.0, 0.0),
    BallSize.MEDIUM: (0.9, 0.5, 0.0),
    BallSize.SMALL: (0.9, 0.9, 0.0),
}


def ball_color(size: BallSize | int) -> Color:
    """Colour of a ball of the given size."""
    return _BALL_COLORS[BallSize(size)]


class Ball(Shape):
    """A bouncing ball that splits when hit."""

    def __init__(
        self,
        size: BallSize | int = BallSize.BIG,
        x: float | None = None,
        y: float | None = None,
        *,
        kind: int = 1,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rng)
        self.size = BallSize(size)
        self.kind = kind
        if x is None or y is None:
            self.pos = Vector3(rand_dom(self.rng, 0, SIZEX), rand_dom(self.rng, 0, SIZEY), 0.0)
        else:
            self.pos = Vector3(x, y, 0.0)
        self.tspeed = Vector3(2 * (self.rng.random() - 0.5) * BALL_SPEED, 0.0, 0.0)
        self.color = ball_color(self.size)
        self.acc_ratio = 0.0005

    @property
    def radius(self) -> float:
        return 0.3 * self.size

    def split(self) -> Ball:
        """Shrink this ball by one size and return a new ball of that size.

        Raises ValueError when the ball is already the smallest size.
        """
        smaller = BallSize(self.size - 1)
        child = Ball(smaller, self.pos.x, self.pos.y, kind=1, rng=self.rng)
        self.size = smaller
        self.color = ball_color(smaller)
        return child

    def reposition(self) -> None:
        """Move the ball to a random point of the world."""
        self.pos.x = (self.rng.randrange(SIZEX * 10) - SIZEX * 5) / 10.0
        self.pos.y = (self.rng.randrange(SIZEY * 10) - SIZEY * 5) / 10.0
        self.pos.z = 0.0


class BulletState(Enum):
    """Flight phase of the harpoon."""

    INACTIVE = 0
    UP = 1
    DOWN = 2


class Bullet(Shape):
    """A harpoon that rises to the ceiling on a cable and then retracts."""

    cable_radius = 0.05

    def __init__(
        self,
        x: float,
        y: float,
        vx: float,
        vy: float,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rng)
        self.state = BulletState.UP
        self.active = True
        self.anchor_x = x
        self.anchor_y = y
        self.pos = Vector3(x, y, 0.0)
        self.rot = Vector3(-90.0, 0.0, 0.0)
        self.tspeed = Vector3(vx, vy, 0.0)
        self.color = (0.9, 0.9, 0.0)
        self.acc_ratio = 0.0

    @property
    def radius(self) -> float:
        return 0.2

    def move(self) -> None:
        """Advance one frame: rise, turn at the ceiling, retract to the anchor."""
        if self.state is BulletState.UP:
            self.pos.x += self.tspeed.x
            self.pos.y += self.tspeed.y
            if self.pos.y >= SIZEY2:
                self.state = BulletState.DOWN
        elif self.state is BulletState.DOWN:
            self.pos.x += self.tspeed.x
            self.pos.y -= self.tspeed.y
            if self.pos.y <= self.anchor_y:
                self.state = BulletState.INACTIVE
                self.active = False