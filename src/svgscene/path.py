"""Path command sequences and the append-only path builder."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Tuple, Union

if TYPE_CHECKING:  # pragma: no cover
    from .shape import PathShape

Vector = Tuple[float, float]


class CommandType(Enum):
    """Addressing mode of a single path command."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"


Absolute = CommandType.ABSOLUTE
Relative = CommandType.RELATIVE


@dataclass(frozen=True)
class MoveTo:
    point: Vector


@dataclass(frozen=True)
class LineTo:
    point: Vector


@dataclass(frozen=True)
class QuadCurveTo:
    end: Vector
    control: Vector


@dataclass(frozen=True)
class CubicCurveTo:
    end: Vector
    control1: Vector
    control2: Vector


@dataclass(frozen=True)
class SmoothQuadCurveTo:
    end: Vector


@dataclass(frozen=True)
class SmoothCubicCurveTo:
    end: Vector
    control: Vector


@dataclass(frozen=True)
class ClosePath:
    pass


Command = Union[
    MoveTo,
    LineTo,
    QuadCurveTo,
    CubicCurveTo,
    SmoothQuadCurveTo,
    SmoothCubicCurveTo,
    ClosePath,
]


@dataclass(frozen=True)
class CombinedCommand:
    command_type: CommandType
    command: Command


@dataclass(frozen=True)
class Path:
    """Ordered drawing commands for a single ``<path>`` element.

    Every builder call returns a new ``Path`` with one more command; the
    receiver is left untouched. Smooth continuations are recorded as given,
    whether or not a compatible curve precedes them.
    """

    commands: Tuple[CombinedCommand, ...] = ()

    def _add(self, typ: CommandType, command: Command) -> "Path":
        return Path(self.commands + (CombinedCommand(typ, command),))

    def move_to(self, typ: CommandType, point: Vector) -> "Path":
        return self._add(typ, MoveTo(tuple(point)))

    def line_to(self, typ: CommandType, point: Vector) -> "Path":
        return self._add(typ, LineTo(tuple(point)))

    def quad_curve_to(self, typ: CommandType, end: Vector, control: Vector) -> "Path":
        return self._add(typ, QuadCurveTo(tuple(end), tuple(control)))

    def cubic_curve_to(
        self, typ: CommandType, end: Vector, control1: Vector, control2: Vector
    ) -> "Path":
        return self._add(typ, CubicCurveTo(tuple(end), tuple(control1), tuple(control2)))

    def cont_quad_curve_to(self, typ: CommandType, end: Vector) -> "Path":
        return self._add(typ, SmoothQuadCurveTo(tuple(end)))

    def cont_cubic_curve_to(self, typ: CommandType, end: Vector, control: Vector) -> "Path":
        return self._add(typ, SmoothCubicCurveTo(tuple(end), tuple(control)))

    def close(self) -> "Path":
        return self._add(CommandType.ABSOLUTE, ClosePath())

    def shape(self) -> "PathShape":
        """Freeze this path into a shape node that shares it."""
        from .shape import PathShape

        return PathShape(self)

    to_shape = shape

    def __str__(self) -> str:
        from .writer import render

        return render(self)


__all__ = [
    "Absolute",
    "ClosePath",
    "CombinedCommand",
    "Command",
    "CommandType",
    "CubicCurveTo",
    "LineTo",
    "MoveTo",
    "Path",
    "QuadCurveTo",
    "Relative",
    "SmoothCubicCurveTo",
    "SmoothQuadCurveTo",
]
