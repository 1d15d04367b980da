"""The world: every live object, spawning, and collision handling."""

from __future__ import annotations

import random
from collections.abc import Iterator
from enum import IntEnum

from .actors import Animalito, Man, ScorePopUp
from .common import NUM_ANIMALITOS, NUMBALLS, SIZEX2, SIZEY2, BallSize, segment_distance_sq
from .shapes import Ball, Bullet, BulletState, Shape

SPAWN_ODDS = 12000
ANIMALITO_SPEED = 0.001

BALL_POINTS: dict[BallSize, int] = {
    BallSize.BIG: 100,
    BallSize.MEDIUM: 200,
    BallSize.SMALL: 300,
}
ANIMALITO_POINTS = 600


class CollisionResult(IntEnum):
    """Outcome of one collision check."""

    NONE = 0
    MAN_HIT = 1
    BIG_BALL = 2
    MEDIUM_BALL = 3
    SMALL_BALL = 4
    ANIMALITO = 5


_BALL_RESULTS: dict[BallSize, CollisionResult] = {
    BallSize.BIG: CollisionResult.BIG_BALL,
    BallSize.MEDIUM: CollisionResult.MEDIUM_BALL,
    BallSize.SMALL: CollisionResult.SMALL_BALL,
}


def _bullet_touches(shape: Shape, bullet: Bullet) -> bool:
    """Whether the bullet tip or its cable touches the shape."""
    if shape.distance_to(bullet) < shape.radius + bullet.radius:
        return True
    reach = shape.radius + bullet.cable_radius
    cable = segment_distance_sq(
        shape.pos.x, shape.pos.y,
        bullet.anchor_x, bullet.anchor_y,
        bullet.pos.x, bullet.pos.y,
    )
    return cable < reach * reach


class World:
    """All objects of a game, newest first, with the player among them.

    ``max_animalitos`` caps how many birds are ever spawned; ``None`` means
    no cap.
    """

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        num_balls: int = NUMBALLS,
        max_animalitos: int | None = NUM_ANIMALITOS,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.max_animalitos = max_animalitos
        self.animalitos_spawned = 0
        self._shapes: list[Shape] = []
        self.man = Man(rng=self.rng)
        self.add(self.man)
        for _ in range(num_balls):
            self.add(Ball(BallSize.BIG, rng=self.rng))
        self.reposition(self.man)

    def __iter__(self) -> Iterator[Shape]:
        return iter(list(self._shapes))

    def __len__(self) -> int:
        return len(self._shapes)

    def __contains__(self, shape: object) -> bool:
        return any(existing is shape for existing in self._shapes)

    def add(self, shape: Shape) -> None:
        """Put a shape at the front of the world."""
        self._shapes.insert(0, shape)

    def remove(self, shape: Shape) -> None:
        """Take a shape out of the world; unknown shapes are ignored."""
        for index, existing in enumerate(self._shapes):
            if existing is shape:
                del self._shapes[index]
                return

    def move(self) -> None:
        """Move every object one frame and now and then spawn a bird."""
        for shape in list(self._shapes):
            shape.move()

        may_spawn = (
            self.max_animalitos is None
            or self.animalitos_spawned < self.max_animalitos
        )
        if self.rng.randrange(SPAWN_ODDS) == 0 and may_spawn:
            x = self.rng.random() * 2 * SIZEX2 - SIZEX2
            y = self.rng.random() * (SIZEY2 - 5.0) + 2.0
            self.add(Animalito(x, y, ANIMALITO_SPEED, rng=self.rng))
            self.animalitos_spawned += 1

    def reposition(self, man: Man) -> None:
        """Move every ball that overlaps the player somewhere else."""
        for ball in self._balls():
            while ball.distance_to(man) < ball.radius + man.radius:
                ball.reposition()

    def collisions(self, bullet: Bullet | None, man: Man) -> CollisionResult:
        """Resolve the first collision found, front of the world first."""
        for shape in list(self._shapes):
            if isinstance(shape, Ball):
                if shape.distance_to(man) < shape.radius + man.radius:
                    return CollisionResult.MAN_HIT
                if bullet is not None and _bullet_touches(shape, bullet):
                    return self._hit_ball(shape, bullet)
            if isinstance(shape, Animalito) and bullet is not None:
                if _bullet_touches(shape, bullet):
                    x, y = shape.pos.x, shape.pos.y
                    self.add(ScorePopUp(x, y, ANIMALITO_POINTS, rng=self.rng))
                    self.remove(shape)
                    bullet.state = BulletState.DOWN
                    return CollisionResult.ANIMALITO
        return CollisionResult.NONE

    def ball_count(self) -> int:
        """Number of balls still in the world."""
        return sum(1 for _ in self._balls())

    def _balls(self) -> Iterator[Ball]:
        return (shape for shape in list(self._shapes) if isinstance(shape, Ball))

    def _hit_ball(self, ball: Ball, bullet: Bullet) -> CollisionResult:
        x, y = ball.pos.x, ball.pos.y
        size = ball.size
        if size is BallSize.SMALL:
            self.remove(ball)
        else:
            self.add(ball.split())
        bullet.state = BulletState.DOWN
        self.add(ScorePopUp(x, y, BALL_POINTS[size], rng=self.rng))
        return _BALL_RESULTS[size]