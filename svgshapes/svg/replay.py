"""Replay shapes onto a drawing surface.

The surface is anything implementing Painter. Each shape's own transform is
applied first, then one uniform fit-to-viewport scale and offset shared by
the whole list.
"""

from __future__ import annotations

import logging
from typing import Protocol

from svgshapes.models.shape import Affine, Bounds, Color, Shape, StrokeCap, StrokeJoin, union_bounds
from svgshapes.utils.geometry import ClosePath, CubicTo, LineTo, MoveTo, iter_segments

logger = logging.getLogger(__name__)


class Painter(Protocol):
    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def cubic_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> None: ...

    def close_path(self) -> None: ...

    def fill(self, color: Color) -> None: ...

    def stroke(self, color: Color, width: float, cap: StrokeCap, join: StrokeJoin) -> None: ...


def fit_to_viewport(bounds: Bounds, width: float, height: float) -> tuple[float, float, float] | None:
    """Uniform scale and centering offset mapping ``bounds`` into the viewport.

    A zero-extent axis does not constrain the scale; None if both axes are
    degenerate or the viewport is empty.
    """
    if width <= 0.0 or height <= 0.0:
        return None
    scales = []
    if bounds.width > 0.0:
        scales.append(width / bounds.width)
    if bounds.height > 0.0:
        scales.append(height / bounds.height)
    if not scales:
        return None

    s = min(scales)
    offset_x = (width - bounds.width * s) / 2.0 - bounds.xmin * s
    offset_y = (height - bounds.height * s) / 2.0 - bounds.ymin * s
    return s, offset_x, offset_y


def replay_shape(shape: Shape, painter: Painter, fit: Affine, scale: float = 1.0) -> None:
    """Issue one shape's path, then its fill and stroke."""
    m = fit.compose(shape.transform)

    painter.begin_path()
    for seg in iter_segments(shape.commands):
        if isinstance(seg, MoveTo):
            painter.move_to(*m.apply_point(*seg.end))
        elif isinstance(seg, LineTo):
            painter.line_to(*m.apply_point(*seg.end))
        elif isinstance(seg, CubicTo):
            painter.cubic_to(*m.apply_point(*seg.c1), *m.apply_point(*seg.c2), *m.apply_point(*seg.end))
        elif isinstance(seg, ClosePath):
            painter.close_path()

    if shape.paints_fill:
        painter.fill(shape.fill)
    if shape.paints_stroke:
        painter.stroke(shape.stroke, shape.stroke_width * scale, shape.stroke_cap, shape.stroke_join)


def draw_shapes(
    shapes: list[Shape],
    painter: Painter,
    width: float,
    height: float,
    bounds: Bounds | None = None,
) -> int:
    """Fit the shape list into a ``width`` × ``height`` viewport and draw it.

    Returns the number of shapes drawn.
    """
    bounds = bounds or union_bounds(shapes)
    if bounds is None:
        return 0
    fit = fit_to_viewport(bounds, width, height)
    if fit is None:
        logger.debug("Nothing to draw: degenerate bounds %s or viewport %sx%s", bounds, width, height)
        return 0

    s, ox, oy = fit
    fit_affine = Affine(s, 0.0, 0.0, s, ox, oy)
    for shape in shapes:
        replay_shape(shape, painter, fit_affine, s)
    return len(shapes)
