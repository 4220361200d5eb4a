"""Public API for svgscene."""
from .path import Absolute, CommandType, Path, Relative
from .shape import (
    SVG,
    Circle,
    Complex,
    Ellipse,
    Line,
    PathShape,
    Polygon,
    Polyline,
    Rect,
    Ref,
    RoundRect,
    Shape,
    StyledTransformed,
    Text,
    TextAnchor,
)
from .writer import render

__all__ = [
    "Absolute",
    "Circle",
    "CommandType",
    "Complex",
    "Ellipse",
    "Line",
    "Path",
    "PathShape",
    "Polygon",
    "Polyline",
    "Rect",
    "Ref",
    "Relative",
    "RoundRect",
    "SVG",
    "Shape",
    "StyledTransformed",
    "Text",
    "TextAnchor",
    "render",
]
