"""Stroke-outline computation for paths."""

from sceneboard.stroke.outline import StrokeOutline, path_bounding_box, stroke_outline

__all__ = ["StrokeOutline", "path_bounding_box", "stroke_outline"]
