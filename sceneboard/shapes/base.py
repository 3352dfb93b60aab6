"""Shape: abstract base of every scene entity.

Concrete kinds implement ``bounding_box`` and ``transform``; every other
geometric operation (translate, rotate, scale, resize, move_center) is derived
here by building a TransformMatrix and applying it in place.
"""

from __future__ import annotations

import abc
import copy
import enum
import math
from typing import TYPE_CHECKING, Any, ClassVar

from sceneboard.context import BoardContext, resolve
from sceneboard.core.point import Point
from sceneboard.core.rect import Rect
from sceneboard.core.transform import TransformMatrix
from sceneboard.style import LineWidthFlag, Style

if TYPE_CHECKING:
    from sceneboard.shapes.visitor import ShapeVisitor


class ShapeKind(enum.Enum):
    DOT = "dot"
    LINE = "line"
    ARROW = "arrow"
    POLYLINE = "polyline"
    ELLIPSE = "ellipse"
    BEZIER = "bezier"
    TEXT = "text"
    SHAPE_LIST = "shape_list"
    GROUP = "group"


class Shape(abc.ABC):
    kind: ClassVar[ShapeKind]

    def __init__(
        self,
        style: Style | None = None,
        *,
        context: BoardContext | None = None,
        depth: int = -1,
        **style_overrides: Any,
    ) -> None:
        ctx = resolve(context)
        base = style.copy() if style is not None else ctx.default_style()
        self.style: Style = base.copy(**{k: v for k, v in style_overrides.items() if v is not None})
        self.depth = depth
        self.line_width_scaling = ctx.line_width_scaling
        self.geometry = ctx.geometry

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def line_width(self) -> float:
        return self.style.line_width

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bbox={self.bounding_box()})"

    # -- capability set -------------------------------------------------------

    @abc.abstractmethod
    def bounding_box(self, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Rect:
        ...

    @abc.abstractmethod
    def transform(self, matrix: TransformMatrix) -> Shape:
        """Apply an affine map in place and return self."""

    def clone(self) -> Shape:
        return copy.deepcopy(self)

    def accept(self, visitor: ShapeVisitor) -> Any:
        return visitor.visit(self)

    # -- derived transforms ---------------------------------------------------

    def center(self, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Point:
        return self.bounding_box(flag).center

    def translate(self, dx: float, dy: float) -> Shape:
        return self.transform(TransformMatrix.translation(dx, dy))

    def rotate(self, angle: float, center: Point | None = None) -> Shape:
        """Counterclockwise rotation in radians, about the shape's center by default."""
        if center is None:
            center = self.center()
        return self.transform(TransformMatrix.rotation(angle, center))

    def rotate_deg(self, angle: float, center: Point | None = None) -> Shape:
        return self.rotate(math.radians(angle), center)

    def scale(self, sx: float, sy: float | None = None) -> Shape:
        """Scale about the shape's center, which stays in place."""
        if sy is None:
            sy = sx
        self.transform(TransformMatrix.scaling(sx, sy, self.center()))
        self._scale_line_width(max(abs(sx), abs(sy)))
        return self

    def _scale_line_width(self, factor: float) -> None:
        if self.line_width_scaling:
            self.style.line_width *= factor

    def move_center(self, x: float, y: float, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Shape:
        c = self.center(flag)
        return self.translate(x - c.x, y - c.y)

    def resize(self, width: float, height: float, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Shape:
        box = self.bounding_box(flag)
        sx = width / box.width if box.width > 0 else 1.0
        sy = height / box.height if box.height > 0 else 1.0
        return self.scale(sx, sy)

    def scale_to_width(self, width: float, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Shape:
        box = self.bounding_box(flag)
        if box.width > 0:
            self.scale(width / box.width)
        return self

    def scale_to_height(self, height: float, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Shape:
        box = self.bounding_box(flag)
        if box.height > 0:
            self.scale(height / box.height)
        return self

    def translated(self, dx: float, dy: float) -> Shape:
        return self.clone().translate(dx, dy)

    def rotated(self, angle: float, center: Point | None = None) -> Shape:
        return self.clone().rotate(angle, center)

    def scaled(self, sx: float, sy: float | None = None) -> Shape:
        return self.clone().scale(sx, sy)

    def transformed(self, matrix: TransformMatrix) -> Shape:
        return self.clone().transform(matrix)
