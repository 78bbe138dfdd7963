"""SVG parser — facade over xml.etree + the conversion engine.

Converts raw SVG text → ParseResult (flat shape list + diagnostics).
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from svgshapes.engine import ParseContext, ParseOptions, walk_document
from svgshapes.engine.diagnostics import Diagnostic, DiagnosticSink, Severity
from svgshapes.engine.style import collect_class_rules
from svgshapes.models.shape import Bounds, Shape, union_bounds
from svgshapes.svg.numbers import parse_numbers

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    shapes: list[Shape] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    root_width: float = 0.0
    root_height: float = 0.0

    @property
    def bounds(self) -> Bounds | None:
        """Union of all shape bounds, None when there are no shapes."""
        return union_bounds(self.shapes)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.ERROR]


def parse_document(
    svg_text: str,
    options: ParseOptions | None = None,
    sink: DiagnosticSink | None = None,
) -> ParseResult:
    """Parse raw SVG text into shapes.

    Element-level problems become diagnostics; unreadable XML yields an empty
    result with a single error. In strict mode a malformed numeric attribute
    raises StrictModeError.
    """
    options = options or ParseOptions()

    if options.max_input_chars is not None and len(svg_text or "") > options.max_input_chars:
        return _failed(
            f"Input of {len(svg_text)} characters exceeds limit of {options.max_input_chars}",
            sink,
        )

    try:
        root = ET.fromstring(svg_text or "")
    except ET.ParseError as e:
        return _failed(f"Failed to parse SVG document: {e}", sink)

    ctx = ParseContext(root=root, options=options, sink=sink)
    ctx.root_width, ctx.root_height = _root_dimensions(root, ctx)
    ctx.class_rules = collect_class_rules(root)

    shapes = walk_document(ctx)
    logger.info(
        "Parsed SVG: %d shapes, canvas %.0fx%.0f, %d diagnostics",
        len(shapes),
        ctx.root_width,
        ctx.root_height,
        len(ctx.diagnostics),
    )
    return ParseResult(
        shapes=shapes,
        diagnostics=ctx.diagnostics,
        root_width=ctx.root_width,
        root_height=ctx.root_height,
    )


def parse_svg(
    svg_text: str,
    options: ParseOptions | None = None,
    sink: DiagnosticSink | None = None,
) -> list[Shape]:
    """Parse raw SVG text into an ordered shape list."""
    return parse_document(svg_text, options, sink).shapes


def _root_dimensions(root: ET.Element, ctx: ParseContext) -> tuple[float, float]:
    width = ctx.number_attr(root, "width")
    height = ctx.number_attr(root, "height")
    if width > 0.0 and height > 0.0:
        return width, height

    view_box = parse_numbers(root.get("viewBox"))
    if len(view_box) >= 4:
        return view_box[2], view_box[3]
    return width, height


def _failed(message: str, sink: DiagnosticSink | None) -> ParseResult:
    diagnostic = Diagnostic(Severity.ERROR, message)
    if sink is not None:
        sink(diagnostic)
    logger.debug("%s", diagnostic)
    return ParseResult(diagnostics=[diagnostic])
