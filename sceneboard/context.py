"""BoardContext: construction-time defaults threaded through shape builders.

Holds the default style, the random generator used by the sketch filter and
the line-width scaling switch. Every constructor accepts an explicit
``context=``; when omitted, the process-wide default from ``get_context()`` is
used. The default is not guarded by any lock: construct scenes from a single
thread or pass explicit contexts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from sceneboard.config import DEFAULT_GEOMETRY, GeometryConfig, settings
from sceneboard.style import Color, Style

logger = logging.getLogger(__name__)


def _style_from_settings() -> Style:
    return Style(
        pen_color=Color.from_rgba(settings.default_pen_color),
        fill_color=Color.from_rgba(settings.default_fill_color),
        line_width=settings.default_line_width,
        line_cap=settings.default_line_cap,
        line_join=settings.default_line_join,
        miter_limit=settings.default_miter_limit,
    )


@dataclass
class BoardContext:
    """Shared construction state."""

    # Copied into shapes built without an explicit style
    style: Style = field(default_factory=_style_from_settings)
    # Scaling a shape multiplies its line width by max(|sx|, |sy|)
    line_width_scaling: bool = settings.line_width_scaling
    # Source of sketch-filter perturbations
    rng: np.random.Generator = field(default_factory=lambda: np.random.default_rng(settings.random_seed))
    geometry: GeometryConfig = field(default_factory=lambda: DEFAULT_GEOMETRY)

    def default_style(self, **overrides) -> Style:
        """Copy of the default style with explicit values applied."""
        explicit = {k: v for k, v in overrides.items() if v is not None}
        return self.style.copy(**explicit)

    def seed(self, seed: int | None) -> None:
        """Re-seed the perturbation generator (None = OS entropy)."""
        self.rng = np.random.default_rng(seed)
        logger.debug("Context generator reseeded with %s", seed)


# Module-level singleton
_context = BoardContext()


def get_context() -> BoardContext:
    return _context


def set_context(context: BoardContext) -> BoardContext:
    """Replace the process-wide default context, returning the previous one."""
    global _context
    previous = _context
    _context = context
    return previous


def resolve(context: BoardContext | None) -> BoardContext:
    return context if context is not None else _context
