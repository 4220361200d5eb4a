from __future__ import annotations

import sys
import unittest
from pathlib import Path as FsPath

TESTS_DIR = FsPath(__file__).resolve().parent
PROJECT_ROOT = TESTS_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from svgscene import Absolute, Path, PathShape, Relative, render
from svgscene.path import ClosePath, CombinedCommand, LineTo
from svgscene.writer import render_command


def _d(path: Path) -> str:
    out = render(path)
    prefix = '<path d="'
    suffix = '" />\n'
    assert out.startswith(prefix) and out.endswith(suffix), out
    return out[len(prefix):-len(suffix)]


class PathRenderingTests(unittest.TestCase):
    def test_empty_path_renders_nothing(self) -> None:
        self.assertEqual(render(Path()), "")
        self.assertEqual(render(Path().shape()), "")

    def test_move_to_case_follows_addressing(self) -> None:
        self.assertEqual(_d(Path().move_to(Absolute, (1, 2))), "M1 2")
        self.assertEqual(_d(Path().move_to(Relative, (1, 2))), "m1 2")

    def test_line_shorthands(self) -> None:
        self.assertEqual(_d(Path().line_to(Relative, (0, 7))), "v7")
        self.assertEqual(_d(Path().line_to(Relative, (7, 0))), "h7")
        self.assertEqual(_d(Path().line_to(Absolute, (0, 7))), "V7")
        self.assertEqual(_d(Path().line_to(Absolute, (7, 0))), "H7")
        self.assertEqual(_d(Path().line_to(Relative, (3, 4))), "l3 4")
        self.assertEqual(_d(Path().line_to(Absolute, (3.5, 4))), "L3.5 4")

    def test_zero_length_line_is_vertical(self) -> None:
        self.assertEqual(_d(Path().line_to(Relative, (0, 0))), "v0")
        self.assertEqual(_d(Path().line_to(Absolute, (0.0, 0.0))), "V0.0")

    def test_curves(self) -> None:
        self.assertEqual(_d(Path().quad_curve_to(Absolute, (3, 4), (1, 2))), "Q1 2, 3 4")
        self.assertEqual(_d(Path().cubic_curve_to(Relative, (5, 6), (1, 2), (3, 4))), "c1 2, 3 4, 5 6")
        self.assertEqual(_d(Path().cont_quad_curve_to(Absolute, (3, 4))), "T3 4")
        self.assertEqual(_d(Path().cont_cubic_curve_to(Relative, (5, 6), (1, 2))), "s1 2, 5 6")

    def test_close_is_always_uppercase(self) -> None:
        self.assertEqual(_d(Path().move_to(Relative, (1, 2)).close()), "m1 2 Z")
        self.assertEqual(render_command(CombinedCommand(Relative, ClosePath())), "Z")

    def test_smooth_continuation_passes_through_unchecked(self) -> None:
        path = Path().move_to(Absolute, (0, 0)).cont_cubic_curve_to(Absolute, (4, 4), (2, 2))
        self.assertEqual(_d(path), "M0 0 S2 2, 4 4")

    def test_commands_joined_in_order(self) -> None:
        path = (
            Path()
            .move_to(Absolute, (500.0, 500.0))
            .quad_curve_to(Relative, (1000.0, 0.0), (500.0, 400.0))
            .cont_quad_curve_to(Relative, (1000.0, 0.0))
            .line_to(Absolute, (10, 20))
            .close()
        )
        self.assertEqual(_d(path), "M500.0 500.0 q500.0 400.0, 1000.0 0.0 t1000.0 0.0 L10 20 Z")


class PathBuilderTests(unittest.TestCase):
    def test_builder_returns_new_path(self) -> None:
        start = Path().move_to(Absolute, (0, 0))
        longer = start.line_to(Relative, (1, 1))
        self.assertEqual(len(start.commands), 1)
        self.assertEqual(len(longer.commands), 2)
        self.assertEqual(longer.commands[1], CombinedCommand(Relative, LineTo((1, 1))))

    def test_close_records_absolute(self) -> None:
        self.assertIs(Path().close().commands[0].command_type, Absolute)

    def test_shape_shares_path(self) -> None:
        path = Path().move_to(Absolute, (1, 1)).line_to(Absolute, (2, 3))
        shape = path.to_shape()
        self.assertIsInstance(shape, PathShape)
        self.assertIs(shape.path, path)
        self.assertEqual(render(shape), render(path))
        self.assertEqual(str(path), render(path))

    def test_styled_path(self) -> None:
        shape = Path().move_to(Absolute, (0, 0)).line_to(Relative, (0, 5)).shape().no_fill().stroke((255, 0, 0))
        self.assertEqual(
            render(shape),
            '<g style="stroke:#ff0000;fill:none;">\n<path d="M0 0 v5" />\n</g>\n',
        )


if __name__ == "__main__":
    unittest.main()
