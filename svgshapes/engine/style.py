"""Style cascade — inherited → class rules → presentation attributes → inline style.

Each stage yields a partial StyleValues; a later stage overrides an earlier
one only for the fields it explicitly sets.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from dataclasses import dataclass, fields, replace

from svgshapes.engine.context import ParseContext, local_name
from svgshapes.models.shape import CLEAR, Color, StrokeCap, StrokeJoin
from svgshapes.svg.numbers import leading_number

STYLE_PROPERTIES = ("fill", "stroke", "stroke-width", "stroke-linecap", "stroke-linejoin")

_CLASS_RULE_RE = re.compile(r"\.([a-zA-Z0-9_-]+)\s*\{([^}]*)\}")
_DECLARATION_RE = re.compile(r"\s*([a-zA-Z-]+)\s*:\s*([^;]+)\s*;?")
_HEX_RE = re.compile(r"#([0-9a-fA-F]{3,8})")

NAMED_COLORS: dict[str, Color] = {
    "black": Color(0, 0, 0),
    "white": Color(255, 255, 255),
    "red": Color(255, 0, 0),
    "green": Color(0, 128, 0),
    "blue": Color(0, 0, 255),
    "yellow": Color(255, 255, 0),
    "cyan": Color(0, 255, 255),
    "aqua": Color(0, 255, 255),
    "magenta": Color(255, 0, 255),
    "fuchsia": Color(255, 0, 255),
    "gray": Color(128, 128, 128),
    "grey": Color(128, 128, 128),
    "lime": Color(0, 255, 0),
    "silver": Color(192, 192, 192),
    "maroon": Color(128, 0, 0),
    "olive": Color(128, 128, 0),
    "navy": Color(0, 0, 128),
    "purple": Color(128, 0, 128),
    "teal": Color(0, 128, 128),
    "orange": Color(255, 165, 0),
    "brown": Color(165, 42, 42),
    "lightblue": Color(173, 216, 230),
    "darkblue": Color(0, 0, 139),
}


@dataclass(frozen=True)
class StyleValues:
    """Inheritable paint snapshot; None means "not set at this level"."""

    fill: Color | None = None
    stroke: Color | None = None
    stroke_width: float | None = None
    stroke_cap: StrokeCap | None = None
    stroke_join: StrokeJoin | None = None

    def merged(self, override: StyleValues) -> StyleValues:
        """Copy of self with every field ``override`` sets replaced."""
        changes = {
            f.name: getattr(override, f.name)
            for f in fields(override)
            if getattr(override, f.name) is not None
        }
        return replace(self, **changes) if changes else self

    # Resolved values fall back to the format defaults
    @property
    def resolved_fill(self) -> Color:
        return self.fill if self.fill is not None else CLEAR

    @property
    def resolved_stroke(self) -> Color:
        return self.stroke if self.stroke is not None else CLEAR

    @property
    def resolved_stroke_width(self) -> float:
        return self.stroke_width if self.stroke_width is not None else 0.0

    @property
    def resolved_cap(self) -> StrokeCap:
        return self.stroke_cap or StrokeCap.BUTT

    @property
    def resolved_join(self) -> StrokeJoin:
        return self.stroke_join or StrokeJoin.MITER


def parse_color(text: str | None) -> Color | None:
    """``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA`` or a known name; None if unparseable."""
    if not text:
        return None
    value = text.strip()
    m = _HEX_RE.fullmatch(value)
    if m:
        digits = m.group(1)
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) == 6:
            digits += "FF"
        if len(digits) != 8:
            return None
        return Color(*(int(digits[i:i + 2], 16) for i in range(0, 8, 2)))
    return NAMED_COLORS.get(value.lower())


def parse_paint(text: str | None) -> Color | None:
    """Paint value: ``none`` → transparent, else a color (None if unparseable)."""
    if text is None:
        return None
    if text.strip() == "none":
        return CLEAR
    return parse_color(text)


def parse_stroke_width(text: str | None) -> float | None:
    value = leading_number(text)
    if value is None or value < 0:
        return None
    return value


def parse_declarations(style: str | None) -> list[tuple[str, str]]:
    """Split ``prop:value; prop:value`` into (lowercased key, value) pairs."""
    if not style:
        return []
    pairs: list[tuple[str, str]] = []
    for decl in style.split(";"):
        key, sep, value = decl.partition(":")
        key, value = key.strip().lower(), value.strip()
        if not sep or not key or ":" in value:
            continue
        pairs.append((key, value))
    return pairs


def style_from_declarations(pairs: Iterable[tuple[str, str]]) -> StyleValues:
    """Partial style holding only the properties that parsed successfully."""
    style = StyleValues()
    for key, value in pairs:
        if key == "fill":
            style = style.merged(StyleValues(fill=parse_paint(value)))
        elif key == "stroke":
            style = style.merged(StyleValues(stroke=parse_paint(value)))
        elif key == "stroke-width":
            style = style.merged(StyleValues(stroke_width=parse_stroke_width(value)))
        elif key == "stroke-linecap":
            style = replace(style, stroke_cap=StrokeCap.normalize(value))
        elif key == "stroke-linejoin":
            style = replace(style, stroke_join=StrokeJoin.normalize(value))
    return style


def parse_class_rules(css: str, rules: dict[str, StyleValues] | None = None) -> dict[str, StyleValues]:
    """Collect ``.name { prop: value; ... }`` blocks; repeated names merge."""
    rules = {} if rules is None else rules
    for m in _CLASS_RULE_RE.finditer(css or ""):
        name = m.group(1).strip()
        pairs = [
            (d.group(1).strip().lower(), d.group(2).strip())
            for d in _DECLARATION_RE.finditer(m.group(2))
        ]
        rules[name] = rules.get(name, StyleValues()).merged(style_from_declarations(pairs))
    return rules


def collect_class_rules(root: ET.Element) -> dict[str, StyleValues]:
    """Class rules from every ``<style>`` element in the document."""
    rules: dict[str, StyleValues] = {}
    for el in root.iter():
        if local_name(el) == "style":
            parse_class_rules("".join(el.itertext()), rules)
    return rules


def has_explicit(el: ET.Element, prop: str) -> bool:
    """True if ``prop`` is set as an attribute or inside ``style=``."""
    if el.get(prop) is not None:
        return True
    return any(key == prop for key, _ in parse_declarations(el.get("style")))


def resolve_style(el: ET.Element, parent: StyleValues, ctx: ParseContext) -> StyleValues:
    """Run the cascade for one element."""
    style = parent

    for cls in (el.get("class") or "").split():
        rule = ctx.class_rules.get(cls)
        if rule is not None:
            style = style.merged(rule)

    attrs = [(prop, el.get(prop)) for prop in STYLE_PROPERTIES if el.get(prop) is not None]
    _check_stroke_width(el, attrs, ctx)
    style = style.merged(style_from_declarations(attrs))

    inline = parse_declarations(el.get("style"))
    _check_stroke_width(el, inline, ctx)
    return style.merged(style_from_declarations(inline))


def _check_stroke_width(el: ET.Element, pairs: list[tuple[str, str]], ctx: ParseContext) -> None:
    for key, value in pairs:
        if key == "stroke-width" and value.strip() and parse_stroke_width(value) is None:
            ctx.fail(el, f"Invalid stroke-width '{value}' (keeping inherited value)")
