"""Library configuration from environment variables."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field
from pydantic_settings import BaseSettings

from sceneboard.style import LineCap, LineJoin


class Settings(BaseSettings):
    log_level: str = "warning"

    # Default style, consulted when a shape is built without explicit values
    default_pen_color: tuple[int, int, int, int] = (0, 0, 0, 255)
    default_fill_color: tuple[int, int, int, int] | None = None
    default_line_width: float = Field(default=1.0, ge=0.0)
    default_line_cap: LineCap = LineCap.BUTT
    default_line_join: LineJoin = LineJoin.MITER
    default_miter_limit: float = Field(default=4.0, ge=1.0)

    # Scaling a shape multiplies its line width by max(|sx|, |sy|)
    line_width_scaling: bool = False

    # None = seed from OS entropy
    random_seed: int | None = None

    text_width_ratio: float = Field(default=0.71, gt=0.0)

    model_config = {"env_prefix": "SCENEBOARD_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


@dataclass
class GeometryConfig:
    """Tunables for the stroke-outline and sketch algorithms."""

    # Round joins/caps
    arc_segments: int = 32  # per full turn

    # Degenerate-input tolerances
    collinear_eps: float = 1e-12
    duplicate_eps: float = 1e-12
    parallel_eps: float = 1e-9

    # Bezier sampling
    samples_per_segment: int = 16

    # Rough perturbation, as fractions of edge length
    rough_endpoint_radius: float = 0.015
    rough_midpoint_offset: float = 1.0 / 200.0
    rough_box_along: float = 0.1
    ellipse_rough_samples: int = 20
    ellipse_rough_radius: float = 1.0 / 160.0  # of perimeter
    smoothing_tension: float = 0.75

    # Automatic hachure spacing = max(min_hachure_spacing, 3 * line width)
    min_hachure_spacing: float = 0.1

    # Arrow head
    arrow_head_length: float = 10.0  # in line widths
    arrow_head_angle: float = 0.3  # radians


DEFAULT_GEOMETRY = GeometryConfig()
