import random

import pytest

from pangsim.actors import POPUP_LIFE, Animalito, Man, ScorePopUp
from pangsim.common import BULLETSPEED, SIZEX2
from pangsim.shapes import BulletState


def _rng():
    return random.Random(1234)


def test_man_starts_at_bottom_centre():
    man = Man(rng=_rng())
    assert (man.pos.x, man.pos.y, man.pos.z) == (0.0, -9.0, 0.0)
    assert man.radius == 0.25


def test_strafe_moves_by_offsets():
    man = Man(rng=_rng())
    man.strafe(1.5, 0.0, 0.0)
    man.strafe(0.5, 0.0, 0.0)
    assert man.pos.x == pytest.approx(2.0)
    assert man.pos.y == -9.0


def test_reset_position_restores_start():
    man = Man(rng=_rng())
    man.strafe(3.0, 2.0, 1.0)
    man.tspeed.x = 0.4
    man.reset_position()
    assert (man.pos.x, man.pos.y, man.pos.z) == (0.0, -9.0, 0.0)
    assert man.tspeed.x == 0.0
    assert man.color == (0.2, 0.4, 0.3)


def test_fire_creates_bullet_at_man():
    man = Man(rng=_rng())
    man.strafe(2.0, 0.0, 0.0)
    bullet = man.fire()
    assert bullet.anchor_x == man.pos.x
    assert bullet.anchor_y == man.pos.y
    assert bullet.tspeed.y == pytest.approx(0.015 * BULLETSPEED)
    assert bullet.tspeed.x == 0.0
    assert bullet.state is BulletState.UP


def test_animalito_moves_horizontally():
    bird = Animalito(0.0, 3.0, 0.25, rng=_rng())
    bird.move()
    bird.move()
    assert bird.pos.x == pytest.approx(0.5)
    assert bird.pos.y == 3.0


def test_animalito_wraps_right_edge():
    bird = Animalito(SIZEX2, 3.0, 0.5, rng=_rng())
    bird.move()
    assert bird.pos.x == -SIZEX2


def test_animalito_wraps_left_edge():
    bird = Animalito(-SIZEX2, 3.0, -0.5, rng=_rng())
    bird.move()
    assert bird.pos.x == SIZEX2


def test_animalito_color_in_unit_range():
    bird = Animalito(0.0, 0.0, 0.001, rng=_rng())
    assert all(0.0 <= c < 1.0 for c in bird.color)
    assert bird.radius == 0.4


def test_popup_rises_and_expires():
    popup = ScorePopUp(1.0, 2.0, 300, rng=_rng())
    for _ in range(POPUP_LIFE - 1):
        popup.move()
    assert popup.alive
    assert popup.pos.y > 2.0
    popup.move()
    assert not popup.alive
    assert popup.life == 0


def test_popup_text_is_value():
    popup = ScorePopUp(0.0, 0.0, 600, rng=_rng())
    assert popup.text() == "600"
    assert popup.radius == 0.0