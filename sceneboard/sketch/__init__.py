"""Sketch filter: hand-drawn renditions and hachure fills."""

from sceneboard.sketch.hachure import ellipse_hachures, path_hachures, shape_hachures
from sceneboard.sketch.rough import RoughMapper, hachures, make_rough

__all__ = [
    "ellipse_hachures",
    "path_hachures",
    "shape_hachures",
    "RoughMapper",
    "hachures",
    "make_rough",
]
