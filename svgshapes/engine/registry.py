"""Converter registry — one geometry converter per element kind, registered via decorator.

Usage:
    @converter(ElementKind.LINE)
    def line_commands(el: ET.Element, ctx: ParseContext) -> list[PathCommand]:
        ...

Supporting a new element = a new ElementKind member plus one decorated function.
"""

from __future__ import annotations

import enum
import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from svgshapes.models.path import PathCommand

if TYPE_CHECKING:
    from svgshapes.engine.context import ParseContext

logger = logging.getLogger(__name__)

ConverterFn = Callable[[ET.Element, "ParseContext"], list[PathCommand]]


class ElementKind(str, enum.Enum):
    PATH = "path"
    RECT = "rect"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    LINE = "line"
    POLYLINE = "polyline"
    POLYGON = "polygon"
    USE = "use"

    @classmethod
    def from_name(cls, name: str) -> ElementKind | None:
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class ConverterSpec:
    kind: ElementKind
    fn: ConverterFn
    description: str = ""


class ConverterRegistry:
    """Dispatch table from element kind to converter."""

    def __init__(self) -> None:
        self._converters: dict[ElementKind, ConverterSpec] = {}

    def register(self, spec: ConverterSpec) -> None:
        if spec.kind in self._converters:
            raise ValueError(f"Duplicate converter for <{spec.kind.value}>")
        self._converters[spec.kind] = spec
        logger.debug("Registered converter for <%s>", spec.kind.value)

    def get(self, kind: ElementKind) -> ConverterSpec | None:
        return self._converters.get(kind)

    def kinds(self) -> list[ElementKind]:
        return sorted(self._converters, key=lambda k: k.value)

    def convert(self, el: ET.Element, kind: ElementKind, ctx: ParseContext) -> list[PathCommand] | None:
        """Commands for ``el``, or None if no converter handles ``kind``."""
        spec = self._converters.get(kind)
        if spec is None:
            return None
        return spec.fn(el, ctx)

    @property
    def count(self) -> int:
        return len(self._converters)


# Module-level singleton
_registry = ConverterRegistry()


def get_registry() -> ConverterRegistry:
    return _registry


def converter(kind: ElementKind, *, description: str = ""):
    """Decorator to register an element converter."""

    def decorator(fn: ConverterFn) -> ConverterFn:
        _registry.register(ConverterSpec(kind=kind, fn=fn, description=description))
        return fn

    return decorator
