"""Traversal contract for serializers and shape filters.

``ShapeVisitor.visit`` dispatches on ``shape.kind`` to a ``visit_<kind>``
method. Composites are walked in paint order; a Group hands its clipping path
to ``visit_clip`` before its children. ``ShapeMapper`` rebuilds a tree from
per-shape results.
"""

from __future__ import annotations

import logging
from typing import Any

from sceneboard.core.path import Path
from sceneboard.core.transform import TransformMatrix
from sceneboard.shapes.base import Shape, ShapeKind
from sceneboard.shapes.bezier import Bezier
from sceneboard.shapes.composite import Group, ShapeList
from sceneboard.shapes.dot import Dot
from sceneboard.shapes.ellipse import Ellipse
from sceneboard.shapes.line import Arrow, Line
from sceneboard.shapes.polyline import Polyline
from sceneboard.shapes.text import Text

logger = logging.getLogger(__name__)

_DISPATCH: dict[ShapeKind, str] = {
    ShapeKind.DOT: "visit_dot",
    ShapeKind.LINE: "visit_line",
    ShapeKind.ARROW: "visit_arrow",
    ShapeKind.POLYLINE: "visit_polyline",
    ShapeKind.ELLIPSE: "visit_ellipse",
    ShapeKind.BEZIER: "visit_bezier",
    ShapeKind.TEXT: "visit_text",
    ShapeKind.SHAPE_LIST: "visit_shape_list",
    ShapeKind.GROUP: "visit_group",
}


class ShapeVisitor:
    """Base visitor; leaf methods fall back to ``visit_shape``."""

    def __init__(self, device: TransformMatrix | None = None) -> None:
        # Scene-to-device mapping for serializers
        self.device = device if device is not None else TransformMatrix.identity()

    def visit(self, shape: Shape) -> Any:
        return getattr(self, _DISPATCH[shape.kind])(shape)

    def visit_shape(self, shape: Shape) -> Any:
        return None

    def visit_dot(self, dot: Dot) -> Any:
        return self.visit_shape(dot)

    def visit_line(self, line: Line) -> Any:
        return self.visit_shape(line)

    def visit_arrow(self, arrow: Arrow) -> Any:
        return self.visit_line(arrow)

    def visit_polyline(self, polyline: Polyline) -> Any:
        return self.visit_shape(polyline)

    def visit_ellipse(self, ellipse: Ellipse) -> Any:
        return self.visit_shape(ellipse)

    def visit_bezier(self, bezier: Bezier) -> Any:
        return self.visit_shape(bezier)

    def visit_text(self, text: Text) -> Any:
        return self.visit_shape(text)

    def visit_clip(self, path: Path) -> Any:
        return None

    def visit_shape_list(self, shapes: ShapeList) -> Any:
        return [child.accept(self) for child in shapes]

    def visit_group(self, group: Group) -> Any:
        if group.has_clipping():
            self.visit_clip(group.clip_path)
        return [child.accept(self) for child in group]


class ShapeMapper(ShapeVisitor):
    """Maps each leaf to a new shape (or None to drop it) and rebuilds composites."""

    def visit_shape(self, shape: Shape) -> Shape | None:
        return shape.clone()

    def visit_shape_list(self, shapes: ShapeList) -> ShapeList:
        result = ShapeList()
        for child in shapes:
            mapped = child.accept(self)
            if mapped is not None:
                result.add(mapped)
        return result

    def visit_group(self, group: Group) -> Group:
        result = Group()
        for child in group:
            mapped = child.accept(self)
            if mapped is not None:
                result.add(mapped)
        if group.clip_path is not None:
            result.set_clipping_path(group.clip_path)
        return result


class InstructionVisitor(ShapeVisitor):
    """Flattens a tree into device-space drawing instructions (one dict per primitive)."""

    def __init__(self, device: TransformMatrix | None = None) -> None:
        super().__init__(device)
        self.instructions: list[dict[str, Any]] = []

    def _emit(self, op: str, shape: Shape | None, **data: Any) -> None:
        entry: dict[str, Any] = {"op": op}
        if shape is not None:
            entry["style"] = shape.style
            entry["line_width"] = self.device.apply_length(shape.style.line_width)
        entry.update(data)
        self.instructions.append(entry)

    def _points(self, path: Path) -> list[tuple[float, float]]:
        return [tuple(row) for row in self.device.apply_array(path.points).tolist()]

    def visit_dot(self, dot: Dot) -> None:
        p = self.device.apply(dot.position)
        self._emit("dot", dot, point=(p.x, p.y))

    def visit_line(self, line: Line) -> None:
        a, b = self.device.apply(line.a), self.device.apply(line.b)
        self._emit("line", line, points=[(a.x, a.y), (b.x, b.y)])

    def visit_arrow(self, arrow: Arrow) -> None:
        self._emit("line", arrow, points=self._points(arrow.shaft()))
        self._emit("polygon", arrow, points=self._points(arrow.extremity()), closed=True)

    def visit_polyline(self, polyline: Polyline) -> None:
        self._emit(
            "polygon" if polyline.closed else "polyline",
            polyline,
            points=self._points(polyline.path),
            closed=polyline.closed,
            holes=[self._points(h) for h in polyline.holes],
        )

    def visit_ellipse(self, ellipse: Ellipse) -> None:
        mapped = ellipse.transformed(self.device)
        c = mapped.center_point
        self._emit(
            "ellipse",
            ellipse,
            center=(c.x, c.y),
            radii=(mapped.x_radius, mapped.y_radius),
            angle=mapped.angle,
        )

    def visit_bezier(self, bezier: Bezier) -> None:
        mapped = bezier.transformed(self.device)
        self._emit(
            "bezier",
            bezier,
            points=[(p.x, p.y) for p in mapped.points],
            controls=[(p.x, p.y) for p in mapped.controls],
        )

    def visit_text(self, text: Text) -> None:
        p = self.device.apply(text.position)
        self._emit("text", text, point=(p.x, p.y), text=text.text, font=text.font, size=text.size)

    def visit_clip(self, path: Path) -> None:
        self._emit("clip", None, points=self._points(path))

    def visit_group(self, group: Group) -> None:
        self._emit("begin_group", None, clipped=group.has_clipping())
        super().visit_group(group)
        self._emit("end_group", None)
