"""Diagnostics reported through an injected sink instead of a global logger."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger("svgshapes")


class Severity(str, enum.Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    message: str
    element_path: str = ""

    def __str__(self) -> str:
        if self.element_path:
            return f"[SVG] {self.message} at {self.element_path}"
        return f"[SVG] {self.message}"


DiagnosticSink = Callable[[Diagnostic], None]


class SvgParseError(ValueError):
    """Raised when a document cannot be converted."""


class StrictModeError(SvgParseError):
    """Malformed value encountered while parsing in strict mode."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic


@dataclass
class DiagnosticCollector:
    """List-backed sink."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.ERROR]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Sink that forwards to the ``svgshapes`` logger."""
    if diagnostic.severity is Severity.ERROR:
        logger.error("%s", diagnostic)
    else:
        logger.warning("%s", diagnostic)
