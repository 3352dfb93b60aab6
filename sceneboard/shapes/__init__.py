"""Shape model: leaf shapes, composites and visitors."""

from sceneboard.shapes.base import Shape, ShapeKind
from sceneboard.shapes.dot import Dot
from sceneboard.shapes.line import Arrow, Line
from sceneboard.shapes.polyline import Polyline, rectangle, triangle
from sceneboard.shapes.ellipse import Ellipse, circle
from sceneboard.shapes.bezier import Bezier
from sceneboard.shapes.text import Text
from sceneboard.shapes.composite import Alignment, Direction, Group, ShapeList
from sceneboard.shapes.visitor import InstructionVisitor, ShapeMapper, ShapeVisitor

__all__ = [
    "Shape",
    "ShapeKind",
    "Dot",
    "Arrow",
    "Line",
    "Polyline",
    "rectangle",
    "triangle",
    "Ellipse",
    "circle",
    "Bezier",
    "Text",
    "Alignment",
    "Direction",
    "Group",
    "ShapeList",
    "InstructionVisitor",
    "ShapeMapper",
    "ShapeVisitor",
]
