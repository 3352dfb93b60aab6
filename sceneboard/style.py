"""Stroke and fill style attributes carried by every shape."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import ClassVar


class LineCap(enum.Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class LineJoin(enum.Enum):
    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


class LineStyle(enum.Enum):
    SOLID = "solid"
    DASH = "dash"
    DOT = "dot"
    DASH_DOT = "dash_dot"
    DASH_DOT_DOT = "dash_dot_dot"
    DASH_DOT_DOT_DOT = "dash_dot_dot_dot"


class LineWidthFlag(enum.Enum):
    """How bounding boxes treat stroke width."""

    IGNORE = "ignore"
    USE = "use"


class SketchFilling(enum.Enum):
    NO_FILLING = "none"
    PLAIN = "plain"
    STRAIGHT_HACHURE = "straight_hachure"
    CROSSING_HACHURE = "crossing_hachure"
    SKETCHY_HACHURE = "sketchy_hachure"
    SKETCHY_CROSSING_HACHURE = "sketchy_crossing_hachure"

    @property
    def is_hachure(self) -> bool:
        return self not in (SketchFilling.NO_FILLING, SketchFilling.PLAIN)

    @property
    def is_crossing(self) -> bool:
        return self in (SketchFilling.CROSSING_HACHURE, SketchFilling.SKETCHY_CROSSING_HACHURE)

    @property
    def is_sketchy(self) -> bool:
        return self in (SketchFilling.SKETCHY_HACHURE, SketchFilling.SKETCHY_CROSSING_HACHURE)


@dataclass(frozen=True)
class Color:
    """RGBA color, 0-255 per channel. Color.NULL means "do not paint"."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 255
    null: bool = False

    NULL: ClassVar[Color]
    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    GRAY: ClassVar[Color]

    @classmethod
    def from_rgba(cls, rgba: tuple[int, ...] | None) -> Color:
        if rgba is None:
            return NULL_COLOR
        if len(rgba) == 3:
            return cls(*rgba)
        return cls(*rgba[:4])

    def is_null(self) -> bool:
        return self.null

    def with_alpha(self, alpha: int) -> Color:
        return replace(self, alpha=alpha)


NULL_COLOR = Color(null=True)
Color.NULL = NULL_COLOR
Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.GRAY = Color(128, 128, 128)


@dataclass
class Style:
    pen_color: Color = field(default_factory=lambda: Color.BLACK)
    fill_color: Color = NULL_COLOR
    line_width: float = 1.0
    line_style: LineStyle = LineStyle.SOLID
    line_cap: LineCap = LineCap.BUTT
    line_join: LineJoin = LineJoin.MITER
    miter_limit: float = 4.0

    def copy(self, **changes) -> Style:
        return replace(self, **changes)
