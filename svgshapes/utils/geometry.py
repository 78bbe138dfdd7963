"""Curve geometry — analytic Bézier bounds and arc-to-cubic conversion.

Every command family is reduced to absolute move / line / cubic / close
segments by ``iter_segments``; bounds and replay both consume that stream.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from typing import NamedTuple, Union

import numpy as np
from numpy.typing import NDArray

from svgshapes.models.path import CommandKind, PathCommand
from svgshapes.models.shape import EMPTY_BOUNDS, Affine, Bounds
from svgshapes.utils.math_helpers import lerp, solve_quadratic

Point = tuple[float, float]


class MoveTo(NamedTuple):
    end: Point


class LineTo(NamedTuple):
    end: Point


class CubicTo(NamedTuple):
    start: Point
    c1: Point
    c2: Point
    end: Point


class ClosePath(NamedTuple):
    # Start of the closed subpath; the current point returns here.
    end: Point


Segment = Union[MoveTo, LineTo, CubicTo, ClosePath]


class CubicSegment(NamedTuple):
    c1: Point
    c2: Point
    end: Point


def bbox(points: NDArray[np.float64]) -> Bounds:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return EMPTY_BOUNDS
    return Bounds(
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def cubic_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Bernstein-basis evaluation at t in [0, 1]."""
    u = 1.0 - t
    b0 = u * u * u
    b1 = 3.0 * u * u * t
    b2 = 3.0 * u * t * t
    b3 = t * t * t
    return (
        b0 * p0[0] + b1 * p1[0] + b2 * p2[0] + b3 * p3[0],
        b0 * p0[1] + b1 * p1[1] + b2 * p2[1] + b3 * p3[1],
    )


def _derivative_roots(v0: float, v1: float, v2: float, v3: float) -> list[float]:
    # B'(t) = a·t² + b·t + c for one axis
    a = 3.0 * (v3 - 3.0 * v2 + 3.0 * v1 - v0)
    b = 6.0 * (v2 - 2.0 * v1 + v0)
    c = 3.0 * (v1 - v0)
    return [t for t in solve_quadratic(a, b, c) if 0.0 <= t <= 1.0]


def cubic_bounds(p0: Point, p1: Point, p2: Point, p3: Point) -> Bounds:
    """Tight bounds: endpoints plus the curve at each derivative root per axis."""
    xmin, xmax = min(p0[0], p3[0]), max(p0[0], p3[0])
    ymin, ymax = min(p0[1], p3[1]), max(p0[1], p3[1])

    for t in _derivative_roots(p0[0], p1[0], p2[0], p3[0]):
        x = cubic_point(p0, p1, p2, p3, t)[0]
        xmin, xmax = min(xmin, x), max(xmax, x)
    for t in _derivative_roots(p0[1], p1[1], p2[1], p3[1]):
        y = cubic_point(p0, p1, p2, p3, t)[1]
        ymin, ymax = min(ymin, y), max(ymax, y)

    return Bounds(xmin, ymin, xmax, ymax)


def quad_to_cubic(p0: Point, q1: Point, p3: Point) -> tuple[Point, Point]:
    """Degree elevation: the two cubic control points of a quadratic."""
    c1 = (p0[0] + 2.0 / 3.0 * (q1[0] - p0[0]), p0[1] + 2.0 / 3.0 * (q1[1] - p0[1]))
    c2 = (p3[0] + 2.0 / 3.0 * (q1[0] - p3[0]), p3[1] + 2.0 / 3.0 * (q1[1] - p3[1]))
    return c1, c2


def _vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    dot = max(-1.0, min(1.0, ux * vx + uy * vy))
    angle = math.acos(dot)
    if ux * vy - uy * vx < 0.0:
        angle = -angle
    return angle


def arc_to_cubics(
    p0: Point,
    p1: Point,
    rx: float,
    ry: float,
    rotation_deg: float,
    large_arc: bool,
    sweep: bool,
) -> list[CubicSegment]:
    """Elliptical arc (endpoint form) → cubic segments of at most 90° each.

    Follows the W3C endpoint-to-center conversion. Infeasible radii are scaled
    up uniformly; zero radii give a straight cubic; start == end gives nothing.
    """
    if p0 == p1:
        return []
    rx, ry = abs(rx), abs(ry)
    if rx == 0.0 or ry == 0.0:
        return [CubicSegment(lerp(p0, p1, 1.0 / 3.0), lerp(p0, p1, 2.0 / 3.0), p1)]

    phi = math.radians(rotation_deg)
    cos_phi, sin_phi = math.cos(phi), math.sin(phi)

    # Step 1: midpoint in the rotated frame
    dx2 = (p0[0] - p1[0]) / 2.0
    dy2 = (p0[1] - p1[1]) / 2.0
    x1p = cos_phi * dx2 + sin_phi * dy2
    y1p = -sin_phi * dx2 + cos_phi * dy2

    # Radii correction
    x1p2, y1p2 = x1p * x1p, y1p * y1p
    lam = x1p2 / (rx * rx) + y1p2 / (ry * ry)
    if lam > 1.0:
        scale = math.sqrt(lam)
        rx, ry = rx * scale, ry * scale
    rx2, ry2 = rx * rx, ry * ry

    # Step 2: center in the rotated frame
    sign = -1.0 if large_arc == sweep else 1.0
    num = rx2 * ry2 - rx2 * y1p2 - ry2 * x1p2
    den = rx2 * y1p2 + ry2 * x1p2
    coef = 0.0 if den == 0.0 else sign * math.sqrt(max(0.0, num / den))
    cxp = coef * (rx * y1p) / ry
    cyp = coef * -(ry * x1p) / rx

    # Step 3: center in user space
    cx = cos_phi * cxp - sin_phi * cyp + (p0[0] + p1[0]) / 2.0
    cy = sin_phi * cxp + cos_phi * cyp + (p0[1] + p1[1]) / 2.0

    # Step 4: start angle and sweep
    v1x, v1y = (x1p - cxp) / rx, (y1p - cyp) / ry
    v2x, v2y = (-x1p - cxp) / rx, (-y1p - cyp) / ry
    theta1 = _vector_angle(1.0, 0.0, v1x, v1y)
    delta = _vector_angle(v1x, v1y, v2x, v2y)
    if not sweep and delta > 0.0:
        delta -= 2.0 * math.pi
    elif sweep and delta < 0.0:
        delta += 2.0 * math.pi

    # Step 5: split into <= 90° pieces
    count = max(1, math.ceil(abs(delta) / (math.pi / 2.0) - 1e-9))
    step = delta / count

    def to_user(x: float, y: float) -> Point:
        return (cx + cos_phi * x - sin_phi * y, cy + sin_phi * x + cos_phi * y)

    segments: list[CubicSegment] = []
    theta = theta1
    for i in range(count):
        t1, t2 = theta, theta + step
        alpha = 4.0 / 3.0 * math.tan((t2 - t1) / 4.0)
        e1x, e1y = math.cos(t1), math.sin(t1)
        e2x, e2y = math.cos(t2), math.sin(t2)
        c1 = to_user(rx * (e1x - alpha * e1y), ry * (e1y + alpha * e1x))
        c2 = to_user(rx * (e2x + alpha * e2y), ry * (e2y - alpha * e2x))
        end = p1 if i == count - 1 else to_user(rx * e2x, ry * e2y)
        segments.append(CubicSegment(c1, c2, end))
        theta = t2
    return segments


def iter_segments(commands: Iterable[PathCommand]) -> Iterator[Segment]:
    """Resolve commands into absolute move / line / cubic / close segments.

    Tracks the current point, the subpath start and, for S/s and T/t, the last
    control point of the immediately preceding same-family curve.
    """
    cur: Point = (0.0, 0.0)
    start: Point = (0.0, 0.0)
    last_cubic: Point | None = None
    last_quad: Point | None = None

    for cmd in commands:
        kind = cmd.kind
        rel = kind.is_relative
        letter = kind.letter.upper()

        if kind is CommandKind.CLOSE:
            cur = start
            last_cubic = last_quad = None
            yield ClosePath(start)
            continue

        for index, v in enumerate(cmd.groups):
            ox, oy = cur if rel else (0.0, 0.0)

            if letter == "M":
                cur = (ox + v[0], oy + v[1])
                if index == 0:
                    start = cur
                    yield MoveTo(cur)
                else:
                    yield LineTo(cur)
                last_cubic = last_quad = None

            elif letter == "L":
                cur = (ox + v[0], oy + v[1])
                last_cubic = last_quad = None
                yield LineTo(cur)

            elif letter == "H":
                cur = (ox + v[0], cur[1])
                last_cubic = last_quad = None
                yield LineTo(cur)

            elif letter == "V":
                cur = (cur[0], oy + v[0])
                last_cubic = last_quad = None
                yield LineTo(cur)

            elif letter == "C":
                p0 = cur
                c1 = (ox + v[0], oy + v[1])
                c2 = (ox + v[2], oy + v[3])
                cur = (ox + v[4], oy + v[5])
                last_cubic, last_quad = c2, None
                yield CubicTo(p0, c1, c2, cur)

            elif letter == "S":
                p0 = cur
                c1 = _reflect(last_cubic, cur)
                c2 = (ox + v[0], oy + v[1])
                cur = (ox + v[2], oy + v[3])
                last_cubic, last_quad = c2, None
                yield CubicTo(p0, c1, c2, cur)

            elif letter == "Q":
                p0 = cur
                q1 = (ox + v[0], oy + v[1])
                cur = (ox + v[2], oy + v[3])
                c1, c2 = quad_to_cubic(p0, q1, cur)
                last_cubic, last_quad = None, q1
                yield CubicTo(p0, c1, c2, cur)

            elif letter == "T":
                p0 = cur
                q1 = _reflect(last_quad, cur)
                cur = (ox + v[0], oy + v[1])
                c1, c2 = quad_to_cubic(p0, q1, cur)
                last_cubic, last_quad = None, q1
                yield CubicTo(p0, c1, c2, cur)

            elif letter == "A":
                end = (ox + v[5], oy + v[6])
                for seg in arc_to_cubics(cur, end, v[0], v[1], v[2], v[3] != 0.0, v[4] != 0.0):
                    yield CubicTo(cur, seg.c1, seg.c2, seg.end)
                    cur = seg.end
                last_cubic = last_quad = None


def _reflect(control: Point | None, cur: Point) -> Point:
    if control is None:
        return cur
    return (2.0 * cur[0] - control[0], 2.0 * cur[1] - control[1])


def path_bounds(commands: Iterable[PathCommand]) -> Bounds:
    """Bounds of a whole command sequence; (0, 0, 0, 0) when it draws nothing."""
    points: list[Point] = []
    for seg in iter_segments(commands):
        if isinstance(seg, CubicTo):
            box = cubic_bounds(seg.start, seg.c1, seg.c2, seg.end)
            points.append((box.xmin, box.ymin))
            points.append((box.xmax, box.ymax))
        elif not isinstance(seg, ClosePath):
            points.append(seg.end)
    return bbox(np.array(points, dtype=np.float64).reshape(-1, 2))


def transform_bounds(bounds: Bounds, transform: Affine) -> Bounds:
    """Axis-aligned envelope of the four transformed corners."""
    if transform.is_identity:
        return bounds
    return bbox(transform.apply(bounds.corners()))
