"""Composite shapes: ordered ShapeLists and clipped Groups.

Paint order is insertion order (later shapes paint on top). Containers store
deep clones, so the caller's shape can be mutated freely after insertion.
"""

from __future__ import annotations

import enum
import logging
from collections import deque
from typing import Iterator

from sceneboard.core.path import Path
from sceneboard.core.point import Point
from sceneboard.core.rect import Rect
from sceneboard.core.transform import TransformMatrix
from sceneboard.errors import SceneError
from sceneboard.shapes.base import Shape, ShapeKind
from sceneboard.style import LineWidthFlag

logger = logging.getLogger(__name__)

# Depths are handed out decreasing: later insertions sit in front
_FIRST_DEPTH = 2**31 - 2


class Direction(enum.Enum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class Alignment(enum.Enum):
    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"


_HORIZONTAL_ALIGNMENTS = {Alignment.TOP, Alignment.BOTTOM, Alignment.CENTER}
_VERTICAL_ALIGNMENTS = {Alignment.LEFT, Alignment.RIGHT, Alignment.CENTER}


class ShapeList(Shape):
    kind = ShapeKind.SHAPE_LIST

    def __init__(self, shapes=(), **kwargs) -> None:
        super().__init__(None, **kwargs)
        self.shapes: list[Shape] = []
        self._next_depth = _FIRST_DEPTH
        for shape in shapes:
            self.add(shape)

    # -- container protocol ---------------------------------------------------

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)

    def __getitem__(self, index: int) -> Shape:
        return self.shapes[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self.shapes)} shapes)"

    def is_empty(self) -> bool:
        return not self.shapes

    def clear(self) -> ShapeList:
        self.shapes = []
        self._next_depth = _FIRST_DEPTH
        return self

    def _insert(self, shape: Shape) -> ShapeList:
        if shape.depth == -1:
            shape.depth = self._next_depth
            self._next_depth -= 1
        self.shapes.append(shape)
        if isinstance(shape, Group) and shape.shapes:
            # Later insertions must sit in front of the group's children too
            self._next_depth = min(self._next_depth, shape.min_depth() - 1)
        return self

    def add(self, shape: Shape) -> ShapeList:
        """Insert a clone on top.

        A plain ShapeList is flattened into this one: its children are
        re-inserted back to front, each with a fresh depth.
        """
        if type(shape) is ShapeList:
            for child in sorted(shape.shapes, key=lambda s: s.depth, reverse=True):
                if type(child) is ShapeList:
                    self.add(child)
                else:
                    self._insert(_with_fresh_depth(child))
            return self
        return self._insert(shape.clone())

    def extend(self, shapes) -> ShapeList:
        for shape in shapes:
            self.add(shape)
        return self

    # -- queries --------------------------------------------------------------

    def last(self, kind: ShapeKind | type[Shape] | None = None, position: int = 0) -> Shape:
        """Most recent shape of the given kind, skipping ``position`` newer matches."""
        if isinstance(kind, type):
            kind = kind.kind
        seen = 0
        for shape in reversed(self.shapes):
            if kind is None or shape.kind is kind:
                if seen == position:
                    return shape
                seen += 1
        label = kind.value if kind is not None else "shape"
        raise SceneError(f"No {label} at position {position} in a list of {len(self.shapes)} shapes")

    def top(self) -> Shape:
        return self.last()

    def min_depth(self) -> int:
        depths = [s.min_depth() if isinstance(s, ShapeList) else s.depth for s in self.shapes]
        return min(depths) if depths else self._next_depth

    def max_depth(self) -> int:
        depths = [s.max_depth() if isinstance(s, ShapeList) else s.depth for s in self.shapes]
        return max(depths) if depths else self._next_depth

    def depth_first(self) -> Iterator[Shape]:
        """Leaf shapes in paint order, descending into nested composites."""
        for shape in self.shapes:
            if isinstance(shape, ShapeList):
                yield from shape.depth_first()
            else:
                yield shape

    def breadth_first(self) -> Iterator[Shape]:
        """Leaf shapes level by level: direct children before nested ones."""
        queue: deque[ShapeList] = deque([self])
        while queue:
            current = queue.popleft()
            for shape in current.shapes:
                if isinstance(shape, ShapeList):
                    queue.append(shape)
                else:
                    yield shape

    def deep_size(self) -> int:
        return sum(1 for _ in self.depth_first())

    # -- geometry -------------------------------------------------------------

    def bounding_box(self, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Rect:
        box = Rect()
        for shape in self.shapes:
            box = box | shape.bounding_box(flag)
        return box

    def transform(self, matrix: TransformMatrix) -> ShapeList:
        for shape in self.shapes:
            shape.transform(matrix)
        return self

    def _scale_line_width(self, factor: float) -> None:
        for shape in self.shapes:
            shape._scale_line_width(factor)

    # -- layout combinators ---------------------------------------------------

    def append(
        self,
        shape: Shape,
        direction: Direction = Direction.RIGHT,
        alignment: Alignment = Alignment.CENTER,
        margin: float = 0.0,
        flag: LineWidthFlag = LineWidthFlag.USE,
    ) -> ShapeList:
        """Add a clone of ``shape`` placed against the current content's bounding box.

        Boxes include the stroke width unless ``flag`` says otherwise.
        """
        moved = shape.clone()
        if not self.shapes:
            return self.add(moved)
        box = self.bounding_box(flag)
        sbox = moved.bounding_box(flag)

        if direction in (Direction.RIGHT, Direction.LEFT):
            if alignment not in _HORIZONTAL_ALIGNMENTS:
                raise SceneError(f"Alignment {alignment.value} is invalid when appending to the {direction.value}")
            if direction is Direction.RIGHT:
                dx = box.right + margin - sbox.left
            else:
                dx = box.left - margin - sbox.right
            if alignment is Alignment.TOP:
                dy = box.top - sbox.top
            elif alignment is Alignment.BOTTOM:
                dy = box.bottom - sbox.bottom
            else:
                dy = box.center.y - sbox.center.y
        else:
            if alignment not in _VERTICAL_ALIGNMENTS:
                raise SceneError(f"Alignment {alignment.value} is invalid when appending to the {direction.value}")
            if direction is Direction.TOP:
                dy = box.top + margin - sbox.bottom
            else:
                dy = box.bottom - margin - sbox.top
            if alignment is Alignment.LEFT:
                dx = box.left - sbox.left
            elif alignment is Alignment.RIGHT:
                dx = box.right - sbox.right
            else:
                dx = box.center.x - sbox.center.x

        moved.translate(dx, dy)
        return self.add(moved)

    def add_duplicates(
        self,
        shape: Shape,
        count: int,
        dx: float,
        dy: float,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        angle: float = 0.0,
    ) -> ShapeList:
        """Add ``count`` copies, each derived from the previous one.

        Every step scales the running copy about its center, translates it by
        (dx, dy) and rotates it by ``angle`` about its center, so the k-th copy
        carries scale ``scale^k`` and rotation ``k * angle``.
        """
        current = shape.clone()
        for _ in range(count):
            current.scale(scale_x, scale_y)
            current.translate(dx, dy)
            if angle:
                current.rotate(angle)
            self.add(current)
        logger.debug("Added %d duplicates of %s", count, shape.name)
        return self

    def dup(self, copies: int = 1) -> ShapeList:
        """Repeat the top shape ``copies`` times."""
        if not self.shapes:
            raise SceneError("Cannot duplicate the top shape of an empty list")
        top = self.shapes[-1]
        for _ in range(copies):
            self._insert(_with_fresh_depth(top))
        return self

    def add_tiling(
        self,
        shape: Shape,
        top_left: Point,
        columns: int,
        rows: int,
        spacing: float = 0.0,
        flag: LineWidthFlag = LineWidthFlag.USE,
    ) -> Group:
        """Add a rows × columns grid of copies whose box starts at ``top_left``."""
        row = ShapeList()
        for _ in range(columns):
            row.append(shape, Direction.RIGHT, Alignment.TOP, spacing, flag)
        grid = Group()
        for _ in range(rows):
            grid.append(row, Direction.BOTTOM, Alignment.LEFT, spacing, flag)
        box = grid.bounding_box(flag)
        grid.translate(top_left.x - box.left, top_left.y - box.top)
        self._insert(grid)
        return grid


def _with_fresh_depth(shape: Shape) -> Shape:
    copy = shape.clone()
    copy.depth = -1
    return copy


class Group(ShapeList):
    """ShapeList with an optional clipping path that follows every transform.

    The clip only matters to renderers: it never narrows the bounding box.
    """

    kind = ShapeKind.GROUP

    def __init__(self, shapes=(), **kwargs) -> None:
        super().__init__(shapes, **kwargs)
        self.clip_path: Path | None = None

    def set_clipping_rectangle(self, x: float, y: float, width: float, height: float) -> Group:
        self.clip_path = Path(
            [Point(x, y), Point(x + width, y), Point(x + width, y - height), Point(x, y - height)],
            closed=True,
        )
        return self

    def set_clipping_path(self, path: Path) -> Group:
        self.clip_path = path.copy().close()
        return self

    def clear_clipping(self) -> Group:
        self.clip_path = None
        return self

    def has_clipping(self) -> bool:
        return self.clip_path is not None and len(self.clip_path) > 2

    def transform(self, matrix: TransformMatrix) -> Group:
        super().transform(matrix)
        if self.clip_path is not None:
            self.clip_path.transform(matrix)
        return self
