"""Text anchors.

No font metrics here: the footprint is an estimated box of
``len(text) * size * text_width_ratio`` by ``size``, anchored at its
lower-left corner. Transforms move the box, so rotation and skew of the
anchor frame are preserved for serializers.
"""

from __future__ import annotations

from sceneboard.config import settings
from sceneboard.core.path import Path
from sceneboard.core.point import Point
from sceneboard.core.rect import Rect
from sceneboard.core.transform import TransformMatrix
from sceneboard.shapes.base import Shape, ShapeKind
from sceneboard.style import Color, LineWidthFlag


class Text(Shape):
    kind = ShapeKind.TEXT

    def __init__(
        self,
        x: float,
        y: float,
        text: str,
        size: float = 10.0,
        font: str = "Times-Roman",
        style=None,
        **kwargs,
    ) -> None:
        kwargs.setdefault("fill_color", Color.NULL)
        super().__init__(style, **kwargs)
        self.text = text
        self.font = font
        self.size = float(size)
        width = len(text) * self.size * settings.text_width_ratio
        anchor = Point(x, y)
        self.box = Path(
            [anchor, anchor.translated(width, 0), anchor.translated(width, self.size), anchor.translated(0, self.size)],
            closed=True,
        )

    @property
    def position(self) -> Point:
        return self.box[0]

    @property
    def angle(self) -> float:
        """Direction of the baseline."""
        return (self.box[1] - self.box[0]).argument()

    def bounding_box(self, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Rect:
        return self.box.bounding_box()

    def transform(self, matrix: TransformMatrix) -> Text:
        self.box.transform(matrix)
        return self
