"""SVG documents → flat lists of styled, transformed path shapes."""

__version__ = "0.1.0"

from svgshapes.engine import (  # noqa: E402
    Diagnostic,
    DiagnosticCollector,
    ParseOptions,
    Severity,
    StrictModeError,
    SvgParseError,
    log_diagnostic,
)
from svgshapes.models.path import CommandKind, PathCommand  # noqa: E402
from svgshapes.models.shape import Affine, Bounds, Color, Shape, StrokeCap, StrokeJoin  # noqa: E402
from svgshapes.svg.parser import ParseResult, parse_document, parse_svg  # noqa: E402
from svgshapes.svg.replay import Painter, draw_shapes, fit_to_viewport  # noqa: E402
from svgshapes.svg.serializer import decode_shapes, encode_shapes  # noqa: E402

__all__ = [
    "__version__",
    "parse_svg",
    "parse_document",
    "ParseResult",
    "ParseOptions",
    "encode_shapes",
    "decode_shapes",
    "draw_shapes",
    "fit_to_viewport",
    "Painter",
    "Shape",
    "Color",
    "Bounds",
    "Affine",
    "StrokeCap",
    "StrokeJoin",
    "CommandKind",
    "PathCommand",
    "Diagnostic",
    "DiagnosticCollector",
    "Severity",
    "StrictModeError",
    "SvgParseError",
    "log_diagnostic",
]
