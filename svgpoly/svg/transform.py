"""SVG ``transform`` attribute → 3×3 homogeneous matrix.

Supported forms (http://www.w3.org/TR/SVG/coords.html#TransformAttribute):
matrix(a,b,c,d,e,f), skewX(deg), skewY(deg), scale(sx[,sy]), translate(tx[,ty]),
rotate(deg[,cx,cy]). A list of forms is composed left to right.

Malformed input never raises: it is logged and the identity matrix is used.
"""

from __future__ import annotations

import logging
import math
import re

import numpy as np
from numpy.typing import NDArray

from svgpoly.models.path import Polyline, identity_matrix

logger = logging.getLogger(__name__)

_FORM_RE = re.compile(r"\s*([A-Za-z]+)\s*\(([^)]*)\)?\s*,?")
_SEPARATOR_RE = re.compile(r"[\s,]+")


class TransformSyntaxError(ValueError):
    """Raised internally for a malformed transform form; never leaves this module."""


def _matrix(a: float, b: float, c: float, d: float, e: float, f: float) -> NDArray[np.float64]:
    return np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]], dtype=np.float64)


def _translate(tx: float, ty: float) -> NDArray[np.float64]:
    return _matrix(1.0, 0.0, 0.0, 1.0, tx, ty)


def _rotate(deg: float) -> NDArray[np.float64]:
    a = math.radians(deg)
    cosa, sina = math.cos(a), math.sin(a)
    return _matrix(cosa, sina, -sina, cosa, 0.0, 0.0)


def _form_matrix(name: str, numbers: list[float]) -> NDArray[np.float64]:
    n = len(numbers)

    if name == "matrix":
        if n != 6:
            raise TransformSyntaxError(f"matrix transform needs 6 parameters, got {n}")
        return _matrix(*numbers)

    if name in ("skewX", "skewY"):
        if n != 1:
            raise TransformSyntaxError(f"{name} transform needs 1 parameter, got {n}")
        t = math.tan(math.radians(numbers[0]))
        if name == "skewX":
            return _matrix(1.0, 0.0, t, 1.0, 0.0, 0.0)
        return _matrix(1.0, t, 0.0, 1.0, 0.0, 0.0)

    if name == "scale":
        if n not in (1, 2):
            raise TransformSyntaxError(f"scale transform needs 1 or 2 parameters, got {n}")
        sx = numbers[0]
        sy = numbers[1] if n == 2 else sx
        return _matrix(sx, 0.0, 0.0, sy, 0.0, 0.0)

    if name == "translate":
        if n not in (1, 2):
            raise TransformSyntaxError(f"translate transform needs 1 or 2 parameters, got {n}")
        return _translate(numbers[0], numbers[1] if n == 2 else 0.0)

    if name == "rotate":
        if n not in (1, 3):
            raise TransformSyntaxError(f"rotate transform needs 1 or 3 parameters, got {n}")
        if n == 1:
            return _rotate(numbers[0])
        cx, cy = numbers[1], numbers[2]
        return _translate(cx, cy) @ _rotate(numbers[0]) @ _translate(-cx, -cy)

    raise TransformSyntaxError(f"Unknown transformation: {name}")


def _parse_numbers(text: str) -> list[float]:
    parts = [p for p in _SEPARATOR_RE.split(text.strip()) if p]
    try:
        numbers = [float(p) for p in parts]
    except ValueError:
        raise TransformSyntaxError(f"Invalid transform parameters: {text!r}") from None
    if not all(math.isfinite(n) for n in numbers):
        raise TransformSyntaxError(f"Transform parameters out of range: {text!r}")
    return numbers


def parse_transform(value: str) -> NDArray[np.float64]:
    """Parse a transform attribute value into a 3×3 matrix (identity on error)."""
    if not value or not value.strip():
        logger.warning("Empty transform attribute, using identity")
        return identity_matrix()

    result = identity_matrix()
    pos = 0
    text = value.strip()
    try:
        while pos < len(text):
            match = _FORM_RE.match(text, pos)
            if match is None:
                raise TransformSyntaxError(f"Invalid path transform: {text[pos:]!r}")
            name, params = match.group(1), match.group(2)
            result = result @ _form_matrix(name, _parse_numbers(params))
            pos = match.end()
    except TransformSyntaxError as e:
        logger.warning("%s (in %r), using identity", e, value)
        return identity_matrix()

    return result


def apply_transform(matrix: NDArray[np.float64], polyline: Polyline) -> Polyline:
    """Map every (x, y) point through the affine matrix."""
    if len(polyline) == 0:
        return polyline
    homogeneous = np.column_stack([polyline, np.ones(len(polyline))])
    transformed = homogeneous @ matrix.T
    return transformed[:, :2]
