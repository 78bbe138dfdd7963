"""svgshapes conversion engine."""

from svgshapes.engine import converters  # noqa: F401  (registers element converters)
from svgshapes.engine.config import ParseOptions
from svgshapes.engine.context import ParseContext
from svgshapes.engine.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    Severity,
    StrictModeError,
    SvgParseError,
    log_diagnostic,
)
from svgshapes.engine.registry import ElementKind, converter, get_registry
from svgshapes.engine.walker import walk_document

__all__ = [
    "converter",
    "ElementKind",
    "get_registry",
    "ParseContext",
    "ParseOptions",
    "Diagnostic",
    "DiagnosticCollector",
    "Severity",
    "StrictModeError",
    "SvgParseError",
    "log_diagnostic",
    "walk_document",
]
