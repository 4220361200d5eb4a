"""Text serialization of shape trees, paths and documents to SVG markup.

All formatting rules live here; the shape and path types carry no rendering
logic of their own. Numbers go through ``str()`` unchanged, so ``10`` stays
``10`` and ``10.0`` stays ``10.0``.
"""
from __future__ import annotations

from typing import List, Sequence, Union

from .path import (
    ClosePath,
    CombinedCommand,
    CommandType,
    CubicCurveTo,
    LineTo,
    MoveTo,
    Path,
    QuadCurveTo,
    SmoothCubicCurveTo,
    SmoothQuadCurveTo,
)
from .shape import (
    SVG,
    Circle,
    Color,
    Complex,
    Ellipse,
    Line,
    NoColor,
    PathShape,
    Polygon,
    Polyline,
    Rect,
    Ref,
    Rotation,
    RotationAroundPoint,
    RoundRect,
    Scale,
    Shape,
    ShapeStyle,
    ShapeTransform,
    Solid,
    StyledTransformed,
    Text,
    Translation,
    Vector,
)

SVG_NS = "http://www.w3.org/2000/svg"

_XML_ESCAPES = {
    '"': "&quot;",
    "'": "&apos;",
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
}


def render(value: Union[SVG, Shape, Path]) -> str:
    """Serialize a document, a shape or a bare path to SVG text."""
    if isinstance(value, SVG):
        return render_document(value)
    if isinstance(value, Path):
        return render_path(value)
    return render_shape(value)


def render_document(svg: SVG) -> str:
    width, height = svg.size
    parts = [f'<svg width="{width}" height="{height}" xmlns="{SVG_NS}">\n']
    parts.extend(render_shape(shape) for shape in svg.shapes)
    parts.append("</svg>\n")
    return "".join(parts)


def render_shape(shape: Shape) -> str:
    if isinstance(shape, Rect):
        (x, y), (w, h) = shape.origin, shape.size
        return f'<rect x="{x}" y="{y}" width="{w}" height="{h}" />\n'
    if isinstance(shape, RoundRect):
        (x, y), (w, h), (rx, ry) = shape.origin, shape.size, shape.radii
        return f'<rect x="{x}" y="{y}" width="{w}" height="{h}" rx="{rx}" ry="{ry}" />\n'
    if isinstance(shape, Circle):
        cx, cy = shape.center
        return f'<circle cx="{cx}" cy="{cy}" r="{shape.radius}" />\n'
    if isinstance(shape, Ellipse):
        (cx, cy), (rx, ry) = shape.center, shape.radii
        return f'<ellipse cx="{cx}" cy="{cy}" rx="{rx}" ry="{ry}" />\n'
    if isinstance(shape, Line):
        (x1, y1), (x2, y2) = shape.start, shape.end
        return f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" />\n'
    if isinstance(shape, Polyline):
        return _render_poly("polyline", shape.points)
    if isinstance(shape, Polygon):
        return _render_poly("polygon", shape.points)
    if isinstance(shape, Text):
        x, y = shape.position
        return f'<text x="{x}" y="{y}">{escape_text(shape.text)}</text>\n'
    if isinstance(shape, Complex):
        return "".join(render_shape(child) for child in shape.shapes)
    if isinstance(shape, Ref):
        return render_shape(shape.target)
    if isinstance(shape, PathShape):
        return render_path(shape.path)
    if isinstance(shape, StyledTransformed):
        return _render_styled_transformed(shape)
    raise TypeError(f"cannot render {type(shape).__name__!r} as a shape")


def _render_poly(tag: str, points: Sequence[Vector]) -> str:
    if not points:
        return ""
    coords = " ".join(f"{x},{y}" for x, y in points)
    return f'<{tag} points="{coords}" />\n'


def escape_text(text: str) -> str:
    """Escape XML special characters one character at a time."""
    return "".join(_XML_ESCAPES.get(ch, ch) for ch in text)


def _render_styled_transformed(shape: StyledTransformed) -> str:
    inner = render_shape(shape.shape)
    attrs: List[str] = []
    style = render_style(shape.style)
    if style:
        attrs.append(f'style="{style}"')
    transform = render_transform(shape.transform)
    if transform:
        attrs.append(f'transform="{transform}"')
    if not attrs:
        return inner
    return f"<g {' '.join(attrs)}>\n{inner}</g>\n"


def _format_color(color: Color) -> str:
    if isinstance(color, Solid):
        return f"#{color.r:02x}{color.g:02x}{color.b:02x}"
    if isinstance(color, NoColor):
        return "none"
    raise TypeError(f"unknown color {color!r}")


def render_style(style: ShapeStyle) -> str:
    """Return the ``style`` attribute value, or ``""`` when nothing is set."""
    decls: List[str] = []
    if style.stroke is not None:
        decls.append(f"stroke:{_format_color(style.stroke)};")
    if style.fill is not None:
        decls.append(f"fill:{_format_color(style.fill)};")
    if style.stroke_width is not None:
        decls.append(f"stroke-width:{style.stroke_width};")
    if style.fill_opacity is not None:
        decls.append(f"fill-opacity:{style.fill_opacity};")
    if style.stroke_opacity is not None:
        decls.append(f"stroke-opacity:{style.stroke_opacity};")
    if style.font_family is not None:
        decls.append(f"font-family:{escape_text(style.font_family)};")
    if style.font_size is not None:
        decls.append(f"font-size:{style.font_size};")
    if style.text_anchor is not None:
        decls.append(f"text-anchor:{style.text_anchor.value};")
    return "".join(decls)


def render_transform(transform: ShapeTransform) -> str:
    """Return the ``transform`` attribute value, latest call leftmost."""
    ops: List[str] = []
    for op in reversed(transform.transforms):
        if isinstance(op, Translation):
            x, y = op.offset
            ops.append(f"translate({x}, {y})")
        elif isinstance(op, Rotation):
            ops.append(f"rotate({op.angle})")
        elif isinstance(op, RotationAroundPoint):
            x, y = op.point
            ops.append(f"rotate({op.angle}, {x}, {y})")
        elif isinstance(op, Scale):
            x, y = op.factors
            ops.append(f"scale({x}, {y})")
        else:
            raise TypeError(f"unknown transform {op!r}")
    return " ".join(ops)


def render_path(path: Path) -> str:
    if not path.commands:
        return ""
    d = " ".join(render_command(command) for command in path.commands)
    return f'<path d="{d}" />\n'


def render_command(combined: CombinedCommand) -> str:
    absolute = combined.command_type is CommandType.ABSOLUTE

    def letter(ch: str) -> str:
        return ch.upper() if absolute else ch.lower()

    command = combined.command
    if isinstance(command, MoveTo):
        x, y = command.point
        return f"{letter('m')}{x} {y}"
    if isinstance(command, LineTo):
        x, y = command.point
        # Axis-aligned segments use the V/H shorthand; (0, 0) becomes V0.
        if x == 0:
            return f"{letter('v')}{y}"
        if y == 0:
            return f"{letter('h')}{x}"
        return f"{letter('l')}{x} {y}"
    if isinstance(command, QuadCurveTo):
        (x, y), (x1, y1) = command.end, command.control
        return f"{letter('q')}{x1} {y1}, {x} {y}"
    if isinstance(command, CubicCurveTo):
        (x, y), (x1, y1), (x2, y2) = command.end, command.control1, command.control2
        return f"{letter('c')}{x1} {y1}, {x2} {y2}, {x} {y}"
    if isinstance(command, SmoothQuadCurveTo):
        x, y = command.end
        return f"{letter('t')}{x} {y}"
    if isinstance(command, SmoothCubicCurveTo):
        (x, y), (x1, y1) = command.end, command.control
        return f"{letter('s')}{x1} {y1}, {x} {y}"
    if isinstance(command, ClosePath):
        return "Z"
    raise TypeError(f"unknown path command {command!r}")


__all__ = [
    "SVG_NS",
    "escape_text",
    "render",
    "render_command",
    "render_document",
    "render_path",
    "render_shape",
    "render_style",
    "render_transform",
]
