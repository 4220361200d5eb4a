"""Sample pictures assembled from the public builder API."""
from __future__ import annotations

from .path import Absolute, Path, Relative
from .shape import SVG, Complex, Polygon, Shape

TRIANGLE = ((0.5, 0.0), (0.0, 1.0), (1.0, 1.0))


def sierpinski(depth: int = 7) -> Shape:
    """Unit-sized Sierpinski triangle built by aliasing, not copying.

    Each level holds three references to the previous level, so the tree
    stays linear in ``depth`` while the rendered output grows as ``3**depth``.
    """
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")

    triangle = Polygon(TRIANGLE).make_ref()
    for _ in range(depth):
        triangle = (
            Complex(
                [
                    triangle,
                    triangle.translate((-0.5, 1.0)),
                    triangle.translate((0.5, 1.0)),
                ]
            )
            .scale((0.5, 0.5))
            .make_ref()
        )
    return triangle


def wave() -> Shape:
    path = (
        Path()
        .move_to(Absolute, (500.0, 500.0))
        .quad_curve_to(Relative, (1000.0, 0.0), (500.0, 400.0))
        .cont_quad_curve_to(Relative, (1000.0, 0.0))
        .cont_quad_curve_to(Relative, (200.0, 300.0))
    )
    return path.shape().no_fill().stroke((255, 0, 0)).stroke_width(5.0)


def demo_document(depth: int = 7, size: int = 3000) -> SVG:
    svg = SVG((size, size))
    svg.add(
        sierpinski(depth)
        .scale((400.0, 400.0))
        .translate((800.0, 800.0))
        .fill((0, 155, 255))
    )
    svg.add(wave())
    return svg


__all__ = ["TRIANGLE", "demo_document", "sierpinski", "wave"]
