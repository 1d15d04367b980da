"""Turn game objects into backend-neutral lists of drawing commands."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
from functools import singledispatch

from .actors import Animalito, Man, ScorePopUp
from .shapes import Ball, Bullet, Shape

POPUP_FONT = "helvetica-18"
POPUP_COLOR = (0.0, 0.0, 0.0)

BULLET_COLOR = (0.2, 0.2, 0.2)
INVULNERABLE_COLOR = (1.0, 1.0, 0.0)
MAN_COLOR = (1.0, 1.0, 1.0)


class Primitive(Enum):
    """Kinds of drawing operation."""

    PUSH = auto()
    POP = auto()
    TRANSLATE = auto()
    ROTATE = auto()
    SCALE = auto()
    COLOR = auto()
    SPHERE = auto()
    CONE = auto()
    CUBE = auto()
    CYLINDER = auto()
    LIGHTING_OFF = auto()
    LIGHTING_ON = auto()
    RASTER_POS = auto()
    CHARACTER = auto()


@dataclass(frozen=True)
class DrawCommand:
    """One drawing operation with its arguments."""

    primitive: Primitive
    args: tuple = ()


def _cmd(primitive: Primitive, *args: object) -> DrawCommand:
    return DrawCommand(primitive, tuple(args))


def _begin(shape: Shape) -> list[DrawCommand]:
    """Place and colour a shape: save the transform, move, rotate, colour."""
    return [
        _cmd(Primitive.PUSH),
        _cmd(Primitive.TRANSLATE, shape.pos.x, shape.pos.y, shape.pos.z),
        _cmd(Primitive.ROTATE, shape.rot.x, 1.0, 0.0, 0.0),
        _cmd(Primitive.ROTATE, shape.rot.y, 0.0, 1.0, 0.0),
        _cmd(Primitive.ROTATE, shape.rot.z, 0.0, 0.0, 1.0),
        _cmd(Primitive.COLOR, *shape.color),
    ]


def _end() -> list[DrawCommand]:
    return [_cmd(Primitive.POP)]


@singledispatch
def draw_commands(shape: Shape, invulnerable: bool = False) -> list[DrawCommand]:
    """Drawing commands for one shape.

    ``invulnerable`` only changes how the player is drawn.
    Raises TypeError for shapes that have no drawing.
    """
    raise TypeError(f"no drawing for {type(shape).__name__}")


@draw_commands.register
def _(shape: Ball, invulnerable: bool = False) -> list[DrawCommand]:
    return [
        *_begin(shape),
        _cmd(Primitive.SPHERE, shape.size * 0.3, 9, 8),
        *_end(),
    ]


@draw_commands.register
def _(shape: Bullet, invulnerable: bool = False) -> list[DrawCommand]:
    commands = [
        *_begin(shape),
        _cmd(Primitive.COLOR, *BULLET_COLOR),
        _cmd(Primitive.CONE, 0.3, 1.0, 10, 10),
        *_end(),
    ]
    length = shape.pos.y - shape.anchor_y
    if length <= 0:
        return commands
    commands += [
        _cmd(Primitive.PUSH),
        _cmd(Primitive.LIGHTING_OFF),
        _cmd(Primitive.COLOR, *BULLET_COLOR),
        _cmd(Primitive.TRANSLATE, shape.anchor_x, shape.anchor_y, 0.0),
        _cmd(Primitive.ROTATE, -90.0, 1.0, 0.0, 0.0),
        _cmd(Primitive.CYLINDER, shape.cable_radius, shape.cable_radius, length, 12, 1),
        _cmd(Primitive.LIGHTING_ON),
        _cmd(Primitive.POP),
    ]
    return commands


@draw_commands.register
def _(shape: Man, invulnerable: bool = False) -> list[DrawCommand]:
    body = INVULNERABLE_COLOR if invulnerable else MAN_COLOR
    return [
        *_begin(shape),
        _cmd(Primitive.COLOR, *body),
        _cmd(Primitive.TRANSLATE, 0.0, 0.0, 0.0),
        _cmd(Primitive.SPHERE, 0.5, 20, 20),
        _cmd(Primitive.TRANSLATE, 0.0, 0.0, -0.85),
        _cmd(Primitive.SPHERE, 0.35, 20, 20),
        _cmd(Primitive.PUSH),
        _cmd(Primitive.COLOR, 0.0, 1.0, 0.5),
        _cmd(Primitive.TRANSLATE, 0.1, 0.46, -0.15),
        _cmd(Primitive.SPHERE, 0.05, 10, 10),
        _cmd(Primitive.TRANSLATE, -0.2, 0.0, 0.0),
        _cmd(Primitive.SPHERE, 0.05, 10, 10),
        _cmd(Primitive.POP),
        _cmd(Primitive.COLOR, 1.0, 0.5, 0.5),
        _cmd(Primitive.ROTATE, -90.0, 1.0, 0.0, 0.0),
        _cmd(Primitive.CONE, 0.15, 0.5, 10, 2),
        *_end(),
    ]


def _wing(x: float) -> list[DrawCommand]:
    return [
        _cmd(Primitive.PUSH),
        _cmd(Primitive.TRANSLATE, x, 0.0, 0.0),
        _cmd(Primitive.SCALE, 0.1, 0.02, 0.4),
        _cmd(Primitive.CUBE, 1.0),
        _cmd(Primitive.POP),
    ]


@draw_commands.register
def _(shape: Animalito, invulnerable: bool = False) -> list[DrawCommand]:
    sky_blue = (0.4, 0.7, 1.0)
    steel_blue = (0.2, 0.4, 0.8)
    return [
        *_begin(shape),
        _cmd(Primitive.COLOR, *sky_blue),
        _cmd(Primitive.SPHERE, 0.2, 16, 16),
        _cmd(Primitive.PUSH),
        _cmd(Primitive.TRANSLATE, 0.0, 0.15, 0.15),
        _cmd(Primitive.COLOR, *sky_blue),
        _cmd(Primitive.SPHERE, 0.12, 12, 12),
        _cmd(Primitive.POP),
        _cmd(Primitive.PUSH),
        _cmd(Primitive.TRANSLATE, 0.0, 0.15, 0.27),
        _cmd(Primitive.ROTATE, 90.0, 1.0, 0.0, 0.0),
        _cmd(Primitive.COLOR, 1.0, 0.5, 0.0),
        _cmd(Primitive.CONE, 0.05, 0.15, 12, 4),
        _cmd(Primitive.POP),
        _cmd(Primitive.COLOR, *steel_blue),
        *_wing(-0.22),
        *_wing(0.22),
        _cmd(Primitive.PUSH),
        _cmd(Primitive.TRANSLATE, 0.0, -0.05, -0.2),
        _cmd(Primitive.ROTATE, 30.0, 1.0, 0.0, 0.0),
        _cmd(Primitive.SCALE, 0.1, 0.02, 0.3),
        _cmd(Primitive.CUBE, 1.0),
        _cmd(Primitive.POP),
        *_end(),
    ]


@draw_commands.register
def _(shape: ScorePopUp, invulnerable: bool = False) -> list[DrawCommand]:
    if not shape.alive:
        return []
    return [
        _cmd(Primitive.PUSH),
        _cmd(Primitive.LIGHTING_OFF),
        _cmd(Primitive.COLOR, *POPUP_COLOR),
        _cmd(Primitive.RASTER_POS, shape.pos.x, shape.pos.y, shape.pos.z),
        *(_cmd(Primitive.CHARACTER, POPUP_FONT, char) for char in shape.text()),
        _cmd(Primitive.LIGHTING_ON),
        _cmd(Primitive.POP),
    ]


def scene_commands(world: Iterable[Shape], invulnerable: bool = False) -> list[DrawCommand]:
    """Drawing commands for every object of the world, in world order."""
    return [
        command
        for shape in world
        for command in draw_commands(shape, invulnerable)
    ]