"""Tests for path-data parsing and re-encoding."""

from svgshapes.models.path import CommandKind, PathCommand
from svgshapes.svg.path_parser import format_number, format_path_data, parse_path_data


def test_parse_simple_path():
    cmds = parse_path_data("M10 20L30 40")
    assert [c.kind for c in cmds] == [CommandKind.MOVE_ABS, CommandKind.LINE_ABS]
    assert cmds[0].values == [10.0, 20.0]
    assert cmds[1].values == [30.0, 40.0]


def test_relative_and_close():
    cmds = parse_path_data("m1,2 3,4 z")
    assert cmds[0].kind is CommandKind.MOVE_REL
    assert cmds[0].values == [1.0, 2.0, 3.0, 4.0]
    assert cmds[1].kind is CommandKind.CLOSE
    assert cmds[1].values == []


def test_uppercase_and_lowercase_close_are_one_kind():
    assert parse_path_data("Z")[0].kind is parse_path_data("z")[0].kind


def test_partial_group_dropped():
    cmds = parse_path_data("L10 20 30")
    assert cmds[0].values == [10.0, 20.0]


def test_compact_numbers():
    cmds = parse_path_data("M8 14s1.5 2 4 2 4-2 4-2")
    assert cmds[1].kind is CommandKind.SMOOTH_CUBIC_REL
    assert cmds[1].values == [1.5, 2.0, 4.0, 2.0, 4.0, -2.0, 4.0, -2.0]


def test_arc_flags():
    cmds = parse_path_data("a2 2 0 0 1 .709-1.528")
    assert cmds[0].kind is CommandKind.ARC_REL
    assert cmds[0].values == [2.0, 2.0, 0.0, 0.0, 1.0, 0.709, -1.528]


def test_empty_path():
    assert parse_path_data("") == []
    assert parse_path_data(None) == []


def test_format_number():
    assert format_number(3.0) == "3"
    assert format_number(-0.0) == "0"
    assert format_number(0.1) == "0.1"
    assert format_number(-2.5) == "-2.5"


def test_format_path_data():
    cmds = [
        PathCommand(CommandKind.MOVE_ABS, [10, 20]),
        PathCommand(CommandKind.LINE_ABS, [30.5, 40]),
        PathCommand(CommandKind.CLOSE),
    ]
    assert format_path_data(cmds) == "M10,20 L30.5,40 Z"


def test_reparse_formatted_path():
    source = "M0,0 C30,0 70,0 100,0 q5,5 10,0 Z"
    cmds = parse_path_data(source)
    assert parse_path_data(format_path_data(cmds)) == cmds
