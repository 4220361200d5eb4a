"""Shape tree, style/transform accumulation and the SVG document container."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple, Union

from .path import Path, Vector

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class Solid:
    """An RGB color; each channel is an integer in ``0..255``.

    Integral floats such as ``255.0`` are accepted and stored as ``int``.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, _channel(name, getattr(self, name)))


def _channel(name: str, value) -> int:
    if isinstance(value, bool):
        raise ValueError(f"color channel {name} must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"color channel {name} must be a whole number, got {value!r}")
        value = int(value)
    if not isinstance(value, int):
        raise ValueError(f"color channel {name} must be an integer, got {value!r}")
    if not 0 <= value <= 255:
        raise ValueError(f"color channel {name} must be in 0..255, got {value}")
    return value


@dataclass(frozen=True)
class NoColor:
    pass


Color = Union[Solid, NoColor]


class TextAnchor(Enum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


@dataclass(frozen=True)
class Translation:
    offset: Vector


@dataclass(frozen=True)
class Rotation:
    angle: float


@dataclass(frozen=True)
class RotationAroundPoint:
    point: Vector
    angle: float


@dataclass(frozen=True)
class Scale:
    factors: Vector


Transform = Union[Translation, Rotation, RotationAroundPoint, Scale]


@dataclass(frozen=True)
class ShapeStyle:
    """Presentation fields of a wrapper; ``None`` means the field is unset."""

    stroke: Optional[Color] = None
    fill: Optional[Color] = None
    fill_opacity: Optional[float] = None
    stroke_opacity: Optional[float] = None
    stroke_width: Optional[float] = None
    font_size: Optional[float] = None
    font_family: Optional[str] = None
    text_anchor: Optional[TextAnchor] = None

    def has_style(self) -> bool:
        return any(
            value is not None
            for value in (
                self.stroke,
                self.fill,
                self.fill_opacity,
                self.stroke_opacity,
                self.stroke_width,
                self.font_size,
                self.font_family,
                self.text_anchor,
            )
        )


@dataclass(frozen=True)
class ShapeTransform:
    """Transforms in call order; the writer emits them last-call first."""

    transforms: Tuple[Transform, ...] = ()

    def appended(self, transform: Transform) -> "ShapeTransform":
        return ShapeTransform(self.transforms + (transform,))


class Shape:
    """Base of the closed shape family.

    Builder methods never mutate the receiver. The first style or transform
    call wraps the shape in a :class:`StyledTransformed`; later calls extend
    that same wrapper (copied) instead of nesting another one.
    """

    __slots__ = ()

    def _style_transform(
        self, func: Callable[[ShapeStyle, ShapeTransform], Tuple[ShapeStyle, ShapeTransform]]
    ) -> "StyledTransformed":
        if isinstance(self, StyledTransformed):
            style, transform = func(self.style, self.transform)
            return StyledTransformed(self.shape, style, transform)
        return StyledTransformed(self, ShapeStyle(), ShapeTransform())._style_transform(func)

    def _add_transform(self, added: Transform) -> "StyledTransformed":
        return self._style_transform(lambda style, transform: (style, transform.appended(added)))

    def _set_style(self, **fields) -> "StyledTransformed":
        return self._style_transform(lambda style, transform: (replace(style, **fields), transform))

    def translate(self, offset: Vector) -> "StyledTransformed":
        return self._add_transform(Translation(tuple(offset)))

    def rotate(self, angle: float) -> "StyledTransformed":
        return self._add_transform(Rotation(angle))

    def rotate_around_point(self, point: Vector, angle: float) -> "StyledTransformed":
        return self._add_transform(RotationAroundPoint(tuple(point), angle))

    def scale(self, factors: Vector) -> "StyledTransformed":
        return self._add_transform(Scale(tuple(factors)))

    def stroke(self, rgb: RGB) -> "StyledTransformed":
        r, g, b = rgb
        return self._set_style(stroke=Solid(r, g, b))

    def no_stroke(self) -> "StyledTransformed":
        return self._set_style(stroke=NoColor())

    def fill(self, rgb: RGB) -> "StyledTransformed":
        r, g, b = rgb
        return self._set_style(fill=Solid(r, g, b))

    def no_fill(self) -> "StyledTransformed":
        return self._set_style(fill=NoColor())

    def stroke_width(self, stroke_width: float) -> "StyledTransformed":
        return self._set_style(stroke_width=stroke_width)

    def stroke_opacity(self, stroke_opacity: float) -> "StyledTransformed":
        return self._set_style(stroke_opacity=stroke_opacity)

    def fill_opacity(self, fill_opacity: float) -> "StyledTransformed":
        return self._set_style(fill_opacity=fill_opacity)

    def font_family(self, font_family: str) -> "StyledTransformed":
        return self._set_style(font_family=font_family)

    def font_size(self, font_size: float) -> "StyledTransformed":
        return self._set_style(font_size=font_size)

    def text_anchor(self, text_anchor: Union[TextAnchor, str]) -> "StyledTransformed":
        return self._set_style(text_anchor=TextAnchor(text_anchor))

    def make_ref(self) -> "Ref":
        """Share this shape; copies of the result alias the same sub-tree."""
        return Ref(self)

    make_shared = make_ref

    def __str__(self) -> str:
        from .writer import render

        return render(self)


@dataclass(frozen=True)
class Rect(Shape):
    origin: Vector
    size: Vector


@dataclass(frozen=True)
class RoundRect(Shape):
    origin: Vector
    size: Vector
    radii: Vector


@dataclass(frozen=True)
class Circle(Shape):
    center: Vector
    radius: float


@dataclass(frozen=True)
class Ellipse(Shape):
    center: Vector
    radii: Vector


@dataclass(frozen=True)
class Line(Shape):
    start: Vector
    end: Vector


@dataclass(frozen=True)
class Polyline(Shape):
    points: Tuple[Vector, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))


@dataclass(frozen=True)
class Polygon(Shape):
    points: Tuple[Vector, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))


@dataclass(frozen=True)
class Text(Shape):
    position: Vector
    text: str


@dataclass(frozen=True)
class Complex(Shape):
    """Children rendered one after another, without a grouping element."""

    shapes: Tuple[Shape, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "shapes", tuple(self.shapes))


@dataclass(frozen=True, eq=False)
class Ref(Shape):
    target: Shape

    def __copy__(self) -> "Ref":
        return self

    def __deepcopy__(self, memo) -> "Ref":
        return self


@dataclass(frozen=True, eq=False)
class PathShape(Shape):
    path: Path

    def __copy__(self) -> "PathShape":
        return self

    def __deepcopy__(self, memo) -> "PathShape":
        return self


@dataclass(frozen=True)
class StyledTransformed(Shape):
    shape: Shape
    style: ShapeStyle = field(default_factory=ShapeStyle)
    transform: ShapeTransform = field(default_factory=ShapeTransform)


class SVG:
    """Document root: pixel size plus top-level shapes in insertion order."""

    def __init__(self, size: Tuple[int, int]) -> None:
        self.size = tuple(size)
        self.shapes: List[Shape] = []

    def add(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def add_many(self, shapes: Iterable[Shape]) -> None:
        self.shapes.extend(shapes)

    def __str__(self) -> str:
        from .writer import render

        return render(self)


__all__ = [
    "Circle",
    "Color",
    "Complex",
    "Ellipse",
    "Line",
    "NoColor",
    "PathShape",
    "Polygon",
    "Polyline",
    "RGB",
    "Rect",
    "Ref",
    "Rotation",
    "RotationAroundPoint",
    "RoundRect",
    "SVG",
    "Scale",
    "Shape",
    "ShapeStyle",
    "ShapeTransform",
    "Solid",
    "StyledTransformed",
    "Text",
    "TextAnchor",
    "Transform",
    "Translation",
    "Vector",
]
