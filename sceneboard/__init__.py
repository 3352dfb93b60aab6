"""sceneboard: 2D vector scene construction."""

import logging

from sceneboard.config import settings
from sceneboard.context import BoardContext, get_context, set_context
from sceneboard.core import INFINITY, Path, Point, Rect, RotationType, TransformMatrix
from sceneboard.errors import SceneError
from sceneboard.shapes import (
    Alignment,
    Arrow,
    Bezier,
    Direction,
    Dot,
    Ellipse,
    Group,
    InstructionVisitor,
    Line,
    Polyline,
    Shape,
    ShapeKind,
    ShapeList,
    ShapeMapper,
    ShapeVisitor,
    Text,
    circle,
    rectangle,
    triangle,
)
from sceneboard.sketch import hachures, make_rough
from sceneboard.stroke import StrokeOutline, stroke_outline
from sceneboard.style import Color, LineCap, LineJoin, LineStyle, LineWidthFlag, SketchFilling, Style

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.WARNING))

__all__ = [
    "BoardContext",
    "get_context",
    "set_context",
    "INFINITY",
    "Path",
    "Point",
    "Rect",
    "RotationType",
    "TransformMatrix",
    "SceneError",
    "Alignment",
    "Arrow",
    "Bezier",
    "Direction",
    "Dot",
    "Ellipse",
    "Group",
    "InstructionVisitor",
    "Line",
    "Polyline",
    "Shape",
    "ShapeKind",
    "ShapeList",
    "ShapeMapper",
    "ShapeVisitor",
    "Text",
    "circle",
    "rectangle",
    "triangle",
    "hachures",
    "make_rough",
    "StrokeOutline",
    "stroke_outline",
    "Color",
    "LineCap",
    "LineJoin",
    "LineStyle",
    "LineWidthFlag",
    "SketchFilling",
    "Style",
]
