"""Game model of a ball-splitting arcade shooter: shapes, world, collisions and draw commands."""

__version__ = "0.1.0"
__all__ = ["common", "shapes", "actors", "graphics", "world", "render"]