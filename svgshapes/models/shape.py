"""Normalized shape model — the render-agnostic output of one document walk."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from svgshapes.models.path import PathCommand


class Color(NamedTuple):
    """8-bit RGBA color."""

    r: int
    g: int
    b: int
    a: int = 255

    @property
    def visible(self) -> bool:
        return self.a > 0

    def to_hex(self) -> str:
        return "#{:02X}{:02X}{:02X}{:02X}".format(*self)


CLEAR = Color(0, 0, 0, 0)


class Bounds(NamedTuple):
    """Axis-aligned box: (xmin, ymin, xmax, ymax)."""

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def union(self, other: Bounds) -> Bounds:
        return Bounds(
            min(self.xmin, other.xmin),
            min(self.ymin, other.ymin),
            max(self.xmax, other.xmax),
            max(self.ymax, other.ymax),
        )

    def corners(self) -> NDArray[np.float64]:
        return np.array(
            [
                [self.xmin, self.ymin],
                [self.xmin, self.ymax],
                [self.xmax, self.ymin],
                [self.xmax, self.ymax],
            ]
        )


EMPTY_BOUNDS = Bounds(0.0, 0.0, 0.0, 0.0)


class Affine(NamedTuple):
    """2-D affine transform; the 3x3 matrix [[a c e], [b d f], [0 0 1]]."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> Affine:
        return cls()

    @classmethod
    def from_matrix(cls, m: NDArray[np.float64]) -> Affine:
        return cls(
            float(m[0, 0]), float(m[1, 0]), float(m[0, 1]),
            float(m[1, 1]), float(m[0, 2]), float(m[1, 2]),
        )

    def to_matrix(self) -> NDArray[np.float64]:
        return np.array(
            [
                [self.a, self.c, self.e],
                [self.b, self.d, self.f],
                [0.0, 0.0, 1.0],
            ]
        )

    def compose(self, other: Affine) -> Affine:
        """self ∘ other: ``other`` is applied first."""
        return Affine.from_matrix(self.to_matrix() @ other.to_matrix())

    def apply(self, points: NDArray[np.float64]) -> NDArray[np.float64]:
        """Transform an Nx2 array of points."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        homogeneous = np.hstack([pts, np.ones((len(pts), 1))])
        return (homogeneous @ self.to_matrix().T)[:, :2]

    def apply_point(self, x: float, y: float) -> tuple[float, float]:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    @property
    def is_identity(self) -> bool:
        return self == Affine()


class StrokeCap(str, enum.Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"

    @classmethod
    def normalize(cls, value: str | None) -> StrokeCap:
        v = (value or "").strip().lower()
        try:
            return cls(v)
        except ValueError:
            return cls.BUTT


class StrokeJoin(str, enum.Enum):
    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"

    @classmethod
    def normalize(cls, value: str | None) -> StrokeJoin:
        v = (value or "").strip().lower()
        try:
            return cls(v)
        except ValueError:
            return cls.MITER


@dataclass(frozen=True)
class Shape:
    """One drawable element after style and transform resolution.

    ``bounds`` is already in post-transform coordinates; ``commands`` are not:
    ``transform`` is applied at draw time. ``fill``/``stroke`` of None means
    nothing is painted.
    """

    commands: tuple[PathCommand, ...]
    fill: Color | None = None
    stroke: Color | None = None
    stroke_width: float = 0.0
    stroke_cap: StrokeCap = StrokeCap.BUTT
    stroke_join: StrokeJoin = StrokeJoin.MITER
    transform: Affine = field(default_factory=Affine.identity)
    bounds: Bounds = EMPTY_BOUNDS

    @property
    def paints_fill(self) -> bool:
        return self.fill is not None and self.fill.visible

    @property
    def paints_stroke(self) -> bool:
        return self.stroke is not None and self.stroke.visible and self.stroke_width > 0


def visible_or_none(color: Color | None) -> Color | None:
    """Collapse fully transparent colors to None."""
    if color is None or not color.visible:
        return None
    return color


def union_bounds(shapes: list[Shape]) -> Bounds | None:
    if not shapes:
        return None
    total = shapes[0].bounds
    for shape in shapes[1:]:
        total = total.union(shape.bounds)
    return total
