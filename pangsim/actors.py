"""The player, the flying critters and the floating score labels."""

from __future__ import annotations

import random

from .common import BULLETSPEED, SIZEX2
from .shapes import Bullet, Shape, Vector3

_MAN_START = (0.0, -9.0, 0.0)
_MAN_ROTATION = (90.0, 0.0, 0.0)
_MAN_COLOR = (0.2, 0.4, 0.3)

POPUP_LIFE = 600
POPUP_RISE = 0.001


class Man(Shape):
    """The player standing at the bottom of the world."""

    def __init__(self, *, rng: random.Random | None = None) -> None:
        super().__init__(rng)
        self.reset_position()
        self.acc_ratio = 0.0

    @property
    def radius(self) -> float:
        return 0.25

    def strafe(self, dx: float, dy: float, dz: float) -> None:
        """Shift the player by the given offsets."""
        self.pos.x += dx
        self.pos.y += dy
        self.pos.z += dz

    def fire(self) -> Bullet:
        """Shoot a harpoon straight up from where the player stands."""
        return Bullet(self.pos.x, self.pos.y, 0.0, 0.015 * BULLETSPEED, rng=self.rng)

    def reset_position(self) -> None:
        """Put the player back at the start with no motion."""
        self.pos = Vector3(*_MAN_START)
        self.rot = Vector3(*_MAN_ROTATION)
        self.rspeed = Vector3()
        self.tspeed = Vector3()
        self.color = _MAN_COLOR


class Animalito(Shape):
    """A bird that flies sideways across the sky, wrapping at the edges."""

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rng)
        self.pos = Vector3(x, y, 0.0)
        self.speed = speed
        self.color = (self.rng.random(), self.rng.random(), self.rng.random())

    @property
    def radius(self) -> float:
        return 0.4

    def move(self) -> None:
        """Fly one frame horizontally, wrapping around the world edges."""
        self.pos.x += self.speed
        if self.pos.x > SIZEX2:
            self.pos.x = -SIZEX2
        if self.pos.x < -SIZEX2:
            self.pos.x = SIZEX2


class ScorePopUp(Shape):
    """A score label that drifts upward for a while and then expires."""

    def __init__(
        self,
        x: float,
        y: float,
        value: int,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(rng)
        self.life = POPUP_LIFE
        self.value = value
        self.alive = True
        self.pos = Vector3(x, y, 0.0)

    @property
    def radius(self) -> float:
        return 0.0

    def move(self) -> None:
        """Age one frame and drift upward."""
        self.life -= 1
        if self.life <= 0:
            self.alive = False
        self.pos.y += POPUP_RISE

    def text(self) -> str:
        """The label shown for this popup."""
        return str(self.value)