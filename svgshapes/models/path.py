"""One SVG path instruction plus its numeric operands."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class CommandKind(str, enum.Enum):
    MOVE_ABS = "M"
    MOVE_REL = "m"
    LINE_ABS = "L"
    LINE_REL = "l"
    HLINE_ABS = "H"
    HLINE_REL = "h"
    VLINE_ABS = "V"
    VLINE_REL = "v"
    CUBIC_ABS = "C"
    CUBIC_REL = "c"
    SMOOTH_CUBIC_ABS = "S"
    SMOOTH_CUBIC_REL = "s"
    QUAD_ABS = "Q"
    QUAD_REL = "q"
    SMOOTH_QUAD_ABS = "T"
    SMOOTH_QUAD_REL = "t"
    ARC_ABS = "A"
    ARC_REL = "a"
    CLOSE = "Z"

    @property
    def letter(self) -> str:
        return self.value

    @property
    def arity(self) -> int:
        """Numbers consumed by one repetition of this command."""
        return _ARITY[self.value.upper()]

    @property
    def is_relative(self) -> bool:
        return self is not CommandKind.CLOSE and self.value.islower()

    @classmethod
    def from_letter(cls, letter: str) -> CommandKind | None:
        if letter == "z":
            return cls.CLOSE
        try:
            return cls(letter)
        except ValueError:
            return None


_ARITY = {
    "M": 2, "L": 2, "T": 2,
    "H": 1, "V": 1,
    "C": 6,
    "S": 4, "Q": 4,
    "A": 7,
    "Z": 0,
}

COMMAND_LETTERS = "MmLlHhVvCcSsQqTtAaZz"


@dataclass
class PathCommand:
    """A command token and its operands.

    ``values`` may hold several operand groups (implicit repetition); its length
    is always a multiple of ``kind.arity``.
    """

    kind: CommandKind
    values: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        arity = self.kind.arity
        values = [float(v) for v in self.values]
        if arity == 0:
            values = []
        else:
            del values[len(values) - len(values) % arity:]
        self.values = values

    @property
    def groups(self) -> list[list[float]]:
        arity = self.kind.arity
        if arity == 0:
            return []
        return [self.values[i:i + arity] for i in range(0, len(self.values), arity)]

    def copy(self) -> PathCommand:
        return PathCommand(self.kind, list(self.values))
