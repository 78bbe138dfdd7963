"""Element → path commands, one converter per element kind."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from svgshapes.engine.context import XLINK_HREF, ParseContext, local_name
from svgshapes.engine.registry import ElementKind, converter, get_registry
from svgshapes.models.path import CommandKind, PathCommand
from svgshapes.svg.numbers import parse_token
from svgshapes.svg.path_parser import parse_path_data

# Quarter-circle cubic approximation constant: 4/3·(√2 − 1)
KAPPA = 0.552284749831

_POINTS_SPLIT_RE = re.compile(r"[\s,]+")


# ── Pure builders ──────────────────────────────────────────────────────────


def rect_commands(x: float, y: float, w: float, h: float, rx: float = 0.0, ry: float = 0.0) -> list[PathCommand]:
    """Closed rectangle, with cubic corners when rx/ry are positive."""
    if w <= 0.0 or h <= 0.0:
        return []

    rx, ry = max(rx, 0.0), max(ry, 0.0)
    if rx <= 0.0 and ry <= 0.0:
        return [
            PathCommand(CommandKind.MOVE_ABS, [x, y, x + w, y, x + w, y + h, x, y + h]),
            PathCommand(CommandKind.CLOSE),
        ]

    # A missing radius takes the other's value, then both are clamped
    if rx <= 0.0:
        rx = ry
    if ry <= 0.0:
        ry = rx
    rx = min(rx, w / 2.0)
    ry = min(ry, h / 2.0)
    kx, ky = KAPPA * rx, KAPPA * ry

    x0, x1, x2, x3 = x, x + rx, x + w - rx, x + w
    y0, y1, y2, y3 = y, y + ry, y + h - ry, y + h

    # Clockwise from the start of the top edge
    return [
        PathCommand(CommandKind.MOVE_ABS, [x1, y0]),
        PathCommand(CommandKind.LINE_ABS, [x2, y0]),
        PathCommand(CommandKind.CUBIC_ABS, [x2 + kx, y0, x3, y1 - ky, x3, y1]),
        PathCommand(CommandKind.LINE_ABS, [x3, y2]),
        PathCommand(CommandKind.CUBIC_ABS, [x3, y2 + ky, x2 + kx, y3, x2, y3]),
        PathCommand(CommandKind.LINE_ABS, [x1, y3]),
        PathCommand(CommandKind.CUBIC_ABS, [x1 - kx, y3, x0, y2 + ky, x0, y2]),
        PathCommand(CommandKind.LINE_ABS, [x0, y1]),
        PathCommand(CommandKind.CUBIC_ABS, [x0, y1 - ky, x1 - kx, y0, x1, y0]),
        PathCommand(CommandKind.CLOSE),
    ]


def ellipse_commands(cx: float, cy: float, rx: float, ry: float) -> list[PathCommand]:
    """Four quarter cubics, clockwise from 12 o'clock."""
    if rx <= 0.0 or ry <= 0.0:
        return []
    kx, ky = KAPPA * rx, KAPPA * ry
    return [
        PathCommand(CommandKind.MOVE_ABS, [cx, cy - ry]),
        PathCommand(CommandKind.CUBIC_ABS, [cx + kx, cy - ry, cx + rx, cy - ky, cx + rx, cy]),
        PathCommand(CommandKind.CUBIC_ABS, [cx + rx, cy + ky, cx + kx, cy + ry, cx, cy + ry]),
        PathCommand(CommandKind.CUBIC_ABS, [cx - kx, cy + ry, cx - rx, cy + ky, cx - rx, cy]),
        PathCommand(CommandKind.CUBIC_ABS, [cx - rx, cy - ky, cx - kx, cy - ry, cx, cy - ry]),
        PathCommand(CommandKind.CLOSE),
    ]


def polyline_commands(values: list[float], closed: bool = False) -> list[PathCommand]:
    """Move to the first pair, line to each later pair; needs two pairs."""
    pairs = len(values) // 2
    if pairs < 2:
        return []
    commands = [PathCommand(CommandKind.MOVE_ABS, values[0:2])]
    for i in range(1, pairs):
        commands.append(PathCommand(CommandKind.LINE_ABS, values[2 * i:2 * i + 2]))
    if closed:
        commands.append(PathCommand(CommandKind.CLOSE))
    return commands


def translate_commands(commands: list[PathCommand], dx: float, dy: float) -> list[PathCommand]:
    """Shift absolute coordinates by (dx, dy); relative commands are copied as-is."""
    out: list[PathCommand] = []
    for cmd in commands:
        moved = cmd.copy()
        v = moved.values
        letter = cmd.kind.letter
        if letter in "MLTCSQ":
            for i in range(0, len(v), 2):
                v[i] += dx
                v[i + 1] += dy
        elif letter == "H":
            for i in range(len(v)):
                v[i] += dx
        elif letter == "V":
            for i in range(len(v)):
                v[i] += dy
        elif letter == "A":
            for i in range(0, len(v), 7):
                v[i + 5] += dx
                v[i + 6] += dy
        out.append(moved)
    return out


# ── Element converters ─────────────────────────────────────────────────────


@converter(ElementKind.PATH, description="d attribute")
def path_element(el: ET.Element, ctx: ParseContext) -> list[PathCommand]:
    return parse_path_data(el.get("d"))


@converter(ElementKind.RECT, description="x/y/width/height with optional rx/ry")
def rect_element(el: ET.Element, ctx: ParseContext) -> list[PathCommand]:
    return rect_commands(
        ctx.number_attr(el, "x"),
        ctx.number_attr(el, "y"),
        ctx.number_attr(el, "width"),
        ctx.number_attr(el, "height"),
        ctx.number_attr(el, "rx"),
        ctx.number_attr(el, "ry"),
    )


@converter(ElementKind.CIRCLE, description="ellipse with rx = ry = r")
def circle_element(el: ET.Element, ctx: ParseContext) -> list[PathCommand]:
    r = ctx.number_attr(el, "r")
    return ellipse_commands(ctx.number_attr(el, "cx"), ctx.number_attr(el, "cy"), r, r)


@converter(ElementKind.ELLIPSE, description="four cubic quadrants")
def ellipse_element(el: ET.Element, ctx: ParseContext) -> list[PathCommand]:
    return ellipse_commands(
        ctx.number_attr(el, "cx"),
        ctx.number_attr(el, "cy"),
        ctx.number_attr(el, "rx"),
        ctx.number_attr(el, "ry"),
    )


@converter(ElementKind.LINE, description="open move + line")
def line_element(el: ET.Element, ctx: ParseContext) -> list[PathCommand]:
    return [
        PathCommand(CommandKind.MOVE_ABS, [ctx.number_attr(el, "x1"), ctx.number_attr(el, "y1")]),
        PathCommand(CommandKind.LINE_ABS, [ctx.number_attr(el, "x2"), ctx.number_attr(el, "y2")]),
    ]


def _read_points(el: ET.Element, ctx: ParseContext) -> list[float]:
    raw = el.get("points") or ""
    values: list[float] = []
    for token in _POINTS_SPLIT_RE.split(raw.strip()):
        if not token:
            continue
        value = parse_token(token)
        if value is None:
            ctx.warn(el, f"Failed to parse point token '{token}' in points='{raw}'")
            continue
        values.append(value)
    return values


@converter(ElementKind.POLYLINE, description="points list, open")
def polyline_element(el: ET.Element, ctx: ParseContext) -> list[PathCommand]:
    return polyline_commands(_read_points(el, ctx))


@converter(ElementKind.POLYGON, description="points list, closed")
def polygon_element(el: ET.Element, ctx: ParseContext) -> list[PathCommand]:
    return polyline_commands(_read_points(el, ctx), closed=True)


@converter(ElementKind.USE, description="#id reference shifted by x/y")
def use_element(el: ET.Element, ctx: ParseContext) -> list[PathCommand]:
    href = el.get("href") or el.get(XLINK_HREF) or ""
    if not href.startswith("#"):
        ctx.verbose_warn(el, f"<use> missing href or unsupported href='{href}'")
        return []

    target_id = href[1:]
    if target_id in ctx.resolving:
        ctx.verbose_warn(el, f"<use> reference cycle through #{target_id}")
        return []
    if len(ctx.resolving) >= ctx.options.max_depth:
        ctx.verbose_warn(el, f"<use> chain deeper than {ctx.options.max_depth} references at #{target_id}")
        return []
    target = ctx.find_by_id(target_id)
    if target is None:
        ctx.verbose_warn(el, f"<use> target not found: #{target_id}")
        return []
    kind = ElementKind.from_name(local_name(target))
    if kind is None:
        return []

    ctx.resolving.append(target_id)
    try:
        commands = get_registry().convert(target, kind, ctx) or []
    finally:
        ctx.resolving.pop()
    if not commands:
        return []
    return translate_commands(commands, ctx.number_attr(el, "x"), ctx.number_attr(el, "y"))
