"""Geometric value types: points, affine transforms, boxes, paths."""

from sceneboard.core.point import INFINITY, Point, mix
from sceneboard.core.transform import RotationType, TransformMatrix
from sceneboard.core.rect import Rect
from sceneboard.core.path import Path

__all__ = [
    "INFINITY",
    "Point",
    "mix",
    "RotationType",
    "TransformMatrix",
    "Rect",
    "Path",
]
