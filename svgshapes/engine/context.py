"""ParseContext — the per-call state shared by the walker and the converters.

Everything here lives for exactly one parse: id index, class rules, root
dimensions and the diagnostics sink. Nothing is module-global.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from svgshapes.engine.config import ParseOptions
from svgshapes.engine.diagnostics import (
    Diagnostic,
    DiagnosticSink,
    Severity,
    StrictModeError,
)
from svgshapes.svg.numbers import parse_length

if TYPE_CHECKING:
    from svgshapes.engine.style import StyleValues

XLINK_HREF = "{http://www.w3.org/1999/xlink}href"


def local_name(el: ET.Element) -> str:
    """Tag without its namespace (``{ns}rect`` → ``rect``)."""
    tag = el.tag
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


@dataclass
class ParseContext:
    root: ET.Element
    options: ParseOptions = field(default_factory=ParseOptions)
    sink: DiagnosticSink | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)
    # `.class { ... }` rules gathered from every <style> in the document
    class_rules: dict[str, StyleValues] = field(default_factory=dict)
    root_width: float = 0.0
    root_height: float = 0.0
    # ids of <use> targets currently being resolved; bounds cycles and chain length
    resolving: list[str] = field(default_factory=list)
    _parents: dict[ET.Element, ET.Element] = field(default_factory=dict, repr=False)
    _ids: dict[str, ET.Element] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        for parent in self.root.iter():
            for child in parent:
                self._parents[child] = parent
        for el in self.root.iter():
            el_id = el.get("id")
            if el_id is not None and el_id not in self._ids:
                self._ids[el_id] = el

    # ── lookups ───────────────────────────────────────────────────────────

    def find_by_id(self, el_id: str) -> ET.Element | None:
        return self._ids.get(el_id)

    def element_path(self, el: ET.Element) -> str:
        """XPath-like location, e.g. ``/svg[1]/g[2]/rect[3]``."""
        parts: list[str] = []
        cur: ET.Element | None = el
        while cur is not None:
            parent = self._parents.get(cur)
            index = 1
            if parent is not None:
                for sibling in parent:
                    if sibling is cur:
                        break
                    if sibling.tag == cur.tag:
                        index += 1
            parts.append(f"{local_name(cur)}[{index}]")
            cur = parent
        return "/" + "/".join(reversed(parts))

    # ── reporting ─────────────────────────────────────────────────────────

    def report(self, severity: Severity, message: str, el: ET.Element | None = None) -> Diagnostic:
        diagnostic = Diagnostic(severity, message, self.element_path(el) if el is not None else "")
        self.diagnostics.append(diagnostic)
        if self.sink is not None:
            self.sink(diagnostic)
        return diagnostic

    def warn(self, el: ET.Element | None, message: str) -> None:
        self.report(Severity.WARNING, message, el)

    def verbose_warn(self, el: ET.Element | None, message: str) -> None:
        if self.options.verbose_logging:
            self.report(Severity.WARNING, message, el)

    def fail(self, el: ET.Element | None, message: str) -> None:
        """Error in strict mode (raises), warning otherwise."""
        if self.options.strict_mode:
            diagnostic = self.report(Severity.ERROR, message, el)
            raise StrictModeError(diagnostic)
        self.report(Severity.WARNING, message, el)

    # ── attributes ────────────────────────────────────────────────────────

    def number_attr(self, el: ET.Element, name: str, default: float = 0.0) -> float:
        """Leading number of an attribute; ``default`` when absent or malformed."""
        raw = el.get(name)
        if raw is None or not raw.strip():
            return default
        value = parse_length(raw)
        if value is None:
            message = f"Attribute '{name}' has invalid numeric value '{raw}'"
            if not self.options.strict_mode:
                message += f" (using default {default:g})"
            self.fail(el, message)
            return default
        return value
