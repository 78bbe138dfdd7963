"""Tests for the converter registry."""

import xml.etree.ElementTree as ET

import pytest

from svgshapes.engine import get_registry
from svgshapes.engine.context import ParseContext
from svgshapes.engine.registry import ConverterRegistry, ConverterSpec, ElementKind
from svgshapes.models.path import CommandKind, PathCommand


def _dot(el: ET.Element, ctx: ParseContext) -> list[PathCommand]:
    return [PathCommand(CommandKind.MOVE_ABS, [0, 0])]


def test_register_and_get():
    reg = ConverterRegistry()
    spec = ConverterSpec(kind=ElementKind.LINE, fn=_dot)
    reg.register(spec)
    assert reg.get(ElementKind.LINE) is spec
    assert reg.count == 1


def test_duplicate_registration_rejected():
    reg = ConverterRegistry()
    reg.register(ConverterSpec(kind=ElementKind.PATH, fn=_dot))
    with pytest.raises(ValueError):
        reg.register(ConverterSpec(kind=ElementKind.PATH, fn=_dot))


def test_convert_unregistered_kind():
    reg = ConverterRegistry()
    el = ET.Element("rect")
    assert reg.convert(el, ElementKind.RECT, ParseContext(root=el)) is None


def test_convert_dispatches():
    reg = ConverterRegistry()
    reg.register(ConverterSpec(kind=ElementKind.USE, fn=_dot))
    el = ET.Element("use")
    cmds = reg.convert(el, ElementKind.USE, ParseContext(root=el))
    assert cmds[0].kind is CommandKind.MOVE_ABS


def test_element_kind_from_name():
    assert ElementKind.from_name("polygon") is ElementKind.POLYGON
    assert ElementKind.from_name("g") is None
    assert ElementKind.from_name("text") is None


def test_builtin_converters_registered():
    assert set(get_registry().kinds()) == set(ElementKind)
