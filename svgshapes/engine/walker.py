"""Document walker — pre-order traversal producing the flat shape list.

Style and transform are passed down the recursion as immutable values.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import replace

from svgshapes.engine.context import ParseContext, local_name
from svgshapes.engine.diagnostics import StrictModeError
from svgshapes.engine.registry import ElementKind, get_registry
from svgshapes.engine.style import StyleValues, has_explicit, resolve_style
from svgshapes.engine.transform import parse_transform
from svgshapes.models.path import PathCommand
from svgshapes.models.shape import CLEAR, Affine, Shape, visible_or_none
from svgshapes.svg.numbers import parse_length
from svgshapes.utils.geometry import path_bounds, transform_bounds
from svgshapes.utils.math_helpers import approximately

logger = logging.getLogger(__name__)


def walk_document(ctx: ParseContext) -> list[Shape]:
    shapes: list[Shape] = []
    _walk(ctx.root, StyleValues(), Affine.identity(), 0, ctx, shapes)
    return shapes


def _walk(
    el: ET.Element,
    inherited: StyleValues,
    parent_transform: Affine,
    depth: int,
    ctx: ParseContext,
    out: list[Shape],
) -> None:
    try:
        local = parse_transform(el.get("transform"), lambda message: ctx.fail(el, message))
        transform = parent_transform.compose(local)
        style = resolve_style(el, inherited, ctx)

        kind = ElementKind.from_name(local_name(el))
        if kind is not None:
            commands = get_registry().convert(el, kind, ctx) or []
            if commands:
                if kind is ElementKind.RECT and is_background_rect(el, ctx):
                    style = _suppress_background(el, style)
                out.append(_build_shape(commands, style, transform))
            elif kind is not ElementKind.USE:
                ctx.verbose_warn(el, f"<{kind.value}> produced no geometry")
    except StrictModeError:
        raise
    except (ValueError, ArithmeticError) as e:
        # Subtree dropped; its placement is unknown
        ctx.fail(el, f"Skipped <{local_name(el)}> and its children: {e}")
        return

    if len(el) == 0:
        return
    if depth >= ctx.options.max_depth:
        ctx.warn(el, f"Nesting deeper than {ctx.options.max_depth} levels; children skipped")
        return
    for child in el:
        _walk(child, style, transform, depth + 1, ctx, out)


def _build_shape(commands: list[PathCommand], style: StyleValues, transform: Affine) -> Shape:
    return Shape(
        commands=tuple(commands),
        fill=visible_or_none(style.resolved_fill),
        stroke=visible_or_none(style.resolved_stroke),
        stroke_width=style.resolved_stroke_width,
        stroke_cap=style.resolved_cap,
        stroke_join=style.resolved_join,
        transform=transform,
        bounds=transform_bounds(path_bounds(commands), transform),
    )


# ── Background-rectangle heuristic ─────────────────────────────────────────


def _length(el: ET.Element, name: str) -> float:
    # Already reported by the rect converter if malformed
    value = parse_length(el.get(name))
    return 0.0 if value is None else value


def is_background_rect(el: ET.Element, ctx: ParseContext) -> bool:
    """True if the rect covers exactly the canvas ``0,0,rootWidth,rootHeight``."""
    if ctx.root_width <= 0.0 or ctx.root_height <= 0.0:
        return False
    return (
        approximately(_length(el, "x"), 0.0)
        and approximately(_length(el, "y"), 0.0)
        and approximately(_length(el, "width"), ctx.root_width)
        and approximately(_length(el, "height"), ctx.root_height)
    )


def _suppress_background(el: ET.Element, style: StyleValues) -> StyleValues:
    if not has_explicit(el, "fill"):
        style = replace(style, fill=CLEAR)
    if not has_explicit(el, "stroke"):
        style = replace(style, stroke=CLEAR, stroke_width=0.0)
    logger.debug("Suppressed default paint on full-canvas <rect>")
    return style
