"""``transform`` attribute → Affine.

Supports translate(tx [ty]), scale(sx [sy]) and rotate(a [cx cy]).
skewX/skewY/matrix and unknown functions are ignored, as is any function
with a non-finite argument.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Callable

from svgshapes.models.shape import Affine
from svgshapes.svg.numbers import parse_numbers

logger = logging.getLogger(__name__)

_FUNCTION_RE = re.compile(r"([A-Za-z]+)\s*\(([^)]*)\)")


def translate(tx: float, ty: float = 0.0) -> Affine:
    return Affine(1.0, 0.0, 0.0, 1.0, tx, ty)


def scale(sx: float, sy: float | None = None) -> Affine:
    return Affine(sx, 0.0, 0.0, sx if sy is None else sy, 0.0, 0.0)


def rotate(degrees: float, cx: float = 0.0, cy: float = 0.0) -> Affine:
    rad = math.radians(degrees)
    cos_a, sin_a = math.cos(rad), math.sin(rad)
    rotation = Affine(cos_a, sin_a, -sin_a, cos_a, 0.0, 0.0)
    if cx == 0.0 and cy == 0.0:
        return rotation
    return translate(cx, cy).compose(rotation).compose(translate(-cx, -cy))


def parse_transform(text: str | None, on_invalid: Callable[[str], None] | None = None) -> Affine:
    """Compose the functions of a transform list left to right.

    ``on_invalid`` receives a message for each function skipped because an
    argument overflowed to infinity or NaN.
    """
    result = Affine.identity()
    if not text or not text.strip():
        return result

    for m in _FUNCTION_RE.finditer(text):
        name = m.group(1)
        args = parse_numbers(m.group(2))
        if not all(math.isfinite(a) for a in args):
            message = f"Ignoring transform function {name}() with non-finite argument"
            if on_invalid is not None:
                on_invalid(message)
            else:
                logger.debug(message)
            continue
        if name == "translate":
            local = translate(args[0] if args else 0.0, args[1] if len(args) > 1 else 0.0)
        elif name == "scale":
            local = scale(args[0] if args else 1.0, args[1] if len(args) > 1 else None)
        elif name == "rotate":
            if not args:
                continue
            if len(args) >= 3:
                local = rotate(args[0], args[1], args[2])
            else:
                local = rotate(args[0])
        else:
            logger.debug("Ignoring unsupported transform function %s()", name)
            continue
        result = result.compose(local)
    return result
