"""Parse options passed into a single parse call."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseOptions:
    """Per-call options; never stored beyond one parse."""

    # Raise on malformed numeric attributes instead of defaulting
    strict_mode: bool = False
    # Report <use> resolution failures and empty drawable elements
    verbose_logging: bool = True

    # Elements nested deeper than this are not visited
    max_depth: int = 256
    # Longer inputs are rejected up front (None = unbounded)
    max_input_chars: int | None = None
