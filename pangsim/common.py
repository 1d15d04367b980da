"""World constants, ball sizes and the small geometry and random helpers."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Protocol

SIZEX = 20
SIZEY = 20
SIZEZ = 0
SIZEX2 = 10
SIZEY2 = 10
SIZEZ2 = 0

WINX = 800
WINY = 600

BALL_SPEED = 0.025
BULLETSPEED = 0.9
NUMBALLS = 5
MAXSHOTTIME = 100
GRAV = -9.8
BOUNCE_SPEED = 0.25

NUM_ANIMALITOS = 7

ESC = 27
D2R = 1.7453292519943296e-2
R2D = 57.29577951308232


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1)."""

    def random(self) -> float: ...


class BallSize(IntEnum):
    """Size codes of a ball; a ball splits into the next smaller size."""

    SMALL = 1
    MEDIUM = 2
    BIG = 3


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points in the plane."""
    return math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2)


def segment_distance_sq(
    px: float, py: float, ax: float, ay: float, bx: float, by: float
) -> float:
    """Squared distance from point P to the segment AB."""
    vx, vy = bx - ax, by - ay
    wx, wy = px - ax, py - ay
    c1 = vx * wx + vy * wy
    if c1 <= 0.0:
        return wx * wx + wy * wy
    c2 = vx * vx + vy * vy
    if c2 <= c1:
        dx, dy = px - bx, py - by
        return dx * dx + dy * dy
    t = c1 / c2
    dx = px - (ax + t * vx)
    dy = py - (ay + t * vy)
    return dx * dx + dy * dy


def rand_dom(rng: RandomSource, lo: int, hi: int) -> int:
    """Random integer in the closed range [lo, hi]."""
    return int(math.floor(rng.random() * ((hi - lo) + 0.999999))) + lo


def rand_domf(rng: RandomSource, lo: float, hi: float) -> float:
    """Random float in the range [lo, hi)."""
    return rng.random() * (hi - lo) + lo


def rand_bit(rng: RandomSource) -> int:
    """Random 0 or 1: 1 when the drawn fraction is at least one half."""
    fraction = rng.random()
    return int(fraction >= 0.5)