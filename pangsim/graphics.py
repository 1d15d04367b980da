"""Texture loading and the fixed screen geometry used for drawing."""

from __future__ import annotations

import os
from dataclasses import dataclass

TexturedVertex = tuple[tuple[float, float], tuple[float, ...]]

FIELD_OF_VIEW = 40.0
NEAR_PLANE = 0.1
FAR_PLANE = 50.0


@dataclass(frozen=True)
class Texture:
    """An RGB image held as raw bytes, row by row."""

    width: int
    height: int
    data: bytes


@dataclass(frozen=True)
class Projection:
    """A perspective projection."""

    fovy: float
    aspect: float
    near: float
    far: float


def swap_red_blue(data: bytes, width: int, height: int) -> bytes:
    """Swap the first and third byte of every 3-byte pixel (BGR <-> RGB).

    Raises ValueError when the data holds fewer than width*height pixels.
    """
    size = width * height * 3
    if width < 0 or height < 0:
        raise ValueError("image dimensions must not be negative")
    if len(data) < size:
        raise ValueError(f"expected {size} bytes of pixel data, got {len(data)}")
    pixels = bytearray(data[:size])
    pixels[0::3], pixels[2::3] = pixels[2::3], pixels[0::3]
    return bytes(pixels) + bytes(data[size:])


def load_texture(path: str | os.PathLike[str], width: int, height: int) -> Texture:
    """Read a raw BGR image file and return it as an RGB texture."""
    size = width * height * 3
    with open(path, "rb") as handle:
        raw = handle.read(size)
    return Texture(width, height, swap_red_blue(raw, width, height))


def projection_for(width: int, height: int) -> Projection:
    """Projection of a window; the aspect is the whole-number width/height ratio."""
    return Projection(FIELD_OF_VIEW, float(width // height), NEAR_PLANE, FAR_PLANE)


def background_quad(width: int, height: int) -> list[TexturedVertex]:
    """Corners of a full-window textured quad in window coordinates."""
    return [
        ((0.0, 0.0), (0.0, 0.0)),
        ((1.0, 0.0), (float(width), 0.0)),
        ((1.0, 1.0), (float(width), float(height))),
        ((0.0, 1.0), (0.0, float(height))),
    ]


def text_quad() -> list[TexturedVertex]:
    """Corners of the square on which a full-screen text image is shown."""
    return [
        ((0.0, 0.0), (-8.0, -8.0, 0.0)),
        ((0.0, 1.0), (-8.0, 8.0, 0.0)),
        ((1.0, 1.0), (8.0, 8.0, 0.0)),
        ((1.0, 0.0), (8.0, -8.0, 0.0)),
    ]