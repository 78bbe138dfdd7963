"""Path data (``d`` attribute) → list of PathCommand.

"M10 20L30 40" splits into ("M", "10 20") and ("L", "30 40"); operands come
from the numeric tokenizer. Letters outside the SVG command set never start a
command, and a partial trailing operand group is dropped.
"""

from __future__ import annotations

import re

from svgshapes.models.path import COMMAND_LETTERS, CommandKind, PathCommand
from svgshapes.svg.numbers import parse_numbers

_COMMAND_RE = re.compile(f"([{COMMAND_LETTERS}])([^{COMMAND_LETTERS}]*)")


def parse_path_data(path_data: str | None) -> list[PathCommand]:
    """Parse path data into commands, preserving source order."""
    if not path_data:
        return []

    commands: list[PathCommand] = []
    for m in _COMMAND_RE.finditer(path_data):
        kind = CommandKind.from_letter(m.group(1))
        if kind is None:
            continue
        commands.append(PathCommand(kind, parse_numbers(m.group(2))))
    return commands


def format_number(value: float) -> str:
    """Culture-invariant shortest round-trip text for ``value``."""
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(float(value))


def format_path_data(commands: list[PathCommand]) -> str:
    """Re-encode commands as ``M10,20 L30,40 Z``."""
    return " ".join(
        cmd.kind.letter + ",".join(format_number(v) for v in cmd.values) for cmd in commands
    )
