"""Compact text form of a shape list, safe to embed in one markup attribute.

Records are joined by ``|``; each record is
``fill;stroke;strokeWidth;cap;join;pathData`` with colors as ``#RRGGBBAA``.
"""

from __future__ import annotations

import html
import logging

from svgshapes.engine.style import parse_color
from svgshapes.models.shape import CLEAR, Color, Shape, StrokeCap, StrokeJoin, visible_or_none
from svgshapes.svg.numbers import parse_length
from svgshapes.svg.path_parser import format_number, format_path_data, parse_path_data
from svgshapes.utils.geometry import path_bounds

logger = logging.getLogger(__name__)

RECORD_SEPARATOR = "|"
FIELD_SEPARATOR = ";"


def _color_field(color: Color | None) -> str:
    return (color or CLEAR).to_hex()


def encode_shape(shape: Shape) -> str:
    return FIELD_SEPARATOR.join([
        _color_field(shape.fill),
        _color_field(shape.stroke),
        format_number(shape.stroke_width),
        shape.stroke_cap.value,
        shape.stroke_join.value,
        format_path_data(list(shape.commands)),
    ])


def encode_shapes(shapes: list[Shape]) -> str:
    """Shape list → escaped record string."""
    joined = RECORD_SEPARATOR.join(encode_shape(s) for s in shapes)
    return html.escape(joined, quote=True)


def decode_shape(record: str) -> Shape | None:
    """One record → Shape; None when it has fewer than 4 fields."""
    parts = record.split(FIELD_SEPARATOR)
    if len(parts) < 4:
        return None

    cap, join = StrokeCap.BUTT, StrokeJoin.MITER
    if len(parts) >= 6:
        cap, join = StrokeCap.normalize(parts[3]), StrokeJoin.normalize(parts[4])
        path_data = parts[5]
    elif len(parts) == 5:
        cap = StrokeCap.normalize(parts[3])
        path_data = parts[4]
    else:
        path_data = parts[3]

    width = parse_length(parts[2])
    commands = parse_path_data(path_data)
    return Shape(
        commands=tuple(commands),
        fill=visible_or_none(parse_color(parts[0])),
        stroke=visible_or_none(parse_color(parts[1])),
        stroke_width=width if width is not None and width > 0 else 0.0,
        stroke_cap=cap,
        stroke_join=join,
        bounds=path_bounds(commands),
    )


def decode_shapes(data: str | None) -> list[Shape]:
    """Escaped record string → shape list, skipping short records."""
    if not data:
        return []

    shapes: list[Shape] = []
    for record in html.unescape(data).split(RECORD_SEPARATOR):
        shape = decode_shape(record)
        if shape is None:
            logger.debug("Skipping short shape record %r", record)
            continue
        shapes.append(shape)
    return shapes
