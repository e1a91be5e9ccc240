"""Curve tessellation — expanded commands → polylines.

A running current point is threaded through every subpath of a path: a
relative move starts from where the previous subpath ended. Cubic curves are
sampled at a fixed parametric step; elliptical arcs are converted to center
parameterization, split into ≤90° pieces and each piece is approximated by a
cubic Bézier before sampling.

Arc conversion follows http://www.w3.org/TR/SVG11/implnote.html#ArcImplementationNotes
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from svgpoly.engine.config import PipelineConfig
from svgpoly.models.path import CommandKind, Polyline, Subpath

logger = logging.getLogger(__name__)

# Below this, an arc's chord or radius is treated as zero
ARC_EPSILON = 1e-6
# A close command only appends the start point when it is farther than this
CLOSE_EPSILON = 1e-5
# |π - |Δθ|| below this is treated as an exact half circle
HALF_CIRCLE_EPSILON = 0.001

_ORIGIN = np.zeros(2)


def bezier_points(
    t: NDArray[np.float64],
    p0: NDArray[np.float64],
    p1: NDArray[np.float64],
    p2: NDArray[np.float64],
    p3: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Evaluate a cubic Bézier at every parameter in ``t``. Returns len(t)×2."""
    t = np.asarray(t, dtype=np.float64)[:, np.newaxis]
    mt = 1.0 - t
    return mt**3 * p0 + 3.0 * t * mt**2 * p1 + 3.0 * t**2 * mt * p2 + t**3 * p3


def cubic_bezier(
    p0: NDArray[np.float64],
    p1: NDArray[np.float64],
    p2: NDArray[np.float64],
    p3: NDArray[np.float64],
    samples: int,
) -> NDArray[np.float64]:
    """Sample a cubic Bézier at t = step, 2·step, … (< 1), then the exact endpoint.

    p0 is not emitted: it is the previous point of the polyline.
    """
    samples = max(1, samples)
    t = np.arange(1, samples, dtype=np.float64) / samples
    inner = bezier_points(t, p0, p1, p2, p3)
    return np.vstack([inner, np.asarray(p3, dtype=np.float64)[np.newaxis, :]])


def _vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    """Signed angle from u to v, in (-π, π]."""
    return math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)


def arc_path(
    p0: NDArray[np.float64],
    rx: float,
    ry: float,
    x_rotation: float,
    large_arc: bool,
    sweep: bool,
    p_end: NDArray[np.float64],
    samples: int,
) -> NDArray[np.float64]:
    """Tessellate an SVG elliptical arc from ``p0`` to ``p_end``.

    ``x_rotation`` is in degrees. Degenerate arcs (coincident endpoints or a
    near-zero radius) become a single straight segment to ``p_end``.
    """
    x1, y1 = float(p0[0]), float(p0[1])
    x2, y2 = float(p_end[0]), float(p_end[1])
    end = np.array([x2, y2], dtype=np.float64)

    dx = x1 - x2
    dy = y1 - y2
    if math.hypot(dx, dy) < ARC_EPSILON or rx < ARC_EPSILON or ry < ARC_EPSILON:
        logger.debug("Degenerate arc to (%g, %g), using a straight segment", x2, y2)
        return end[np.newaxis, :]

    rot = math.radians(x_rotation)
    sinrx = math.sin(rot)
    cosrx = math.cos(rot)

    # 1) Endpoint midpoint in the ellipse's local frame
    x1p = cosrx * dx / 2.0 + sinrx * dy / 2.0
    y1p = -sinrx * dx / 2.0 + cosrx * dy / 2.0

    # Radius-relative coordinates of the midpoint
    xr = x1p / rx
    yr = y1p / ry

    # Radii too small to span the chord are scaled up
    lam = math.hypot(xr, yr)
    if lam > 1.0:
        rx *= lam
        ry *= lam
        xr /= lam
        yr /= lam

    # 2) Center in the local frame
    sb = xr * xr + yr * yr
    s = math.sqrt(max(1.0 - sb, 0.0) / sb) if sb > 0.0 else 0.0
    if large_arc == sweep:
        s = -s
    cxp = s * rx * yr
    cyp = s * -ry * xr

    # 3) Center in user space
    cx = (x1 + x2) / 2.0 + cosrx * cxp - sinrx * cyp
    cy = (y1 + y2) / 2.0 + sinrx * cxp + cosrx * cyp

    # 4) Start angle and sweep angle
    ux = (x1p - cxp) / rx
    uy = (y1p - cyp) / ry
    vx = (-x1p - cxp) / rx
    vy = (-y1p - cyp) / ry
    a1 = _vector_angle(1.0, 0.0, ux, uy)
    da = _vector_angle(ux, uy, vx, vy)

    if large_arc and abs(da) < math.pi:
        da = da - 2.0 * math.pi if da > 0.0 else da + 2.0 * math.pi
    if not sweep and da > 0.0:
        da -= 2.0 * math.pi
    elif sweep and da < 0.0:
        da += 2.0 * math.pi

    if abs(math.pi - abs(da)) < HALF_CIRCLE_EPSILON:
        da = math.pi if sweep else -math.pi

    if not all(math.isfinite(v) for v in (cx, cy, rx, ry, a1, da)):
        logger.warning("Arc to (%g, %g) is out of numeric range, using a straight segment", x2, y2)
        return end[np.newaxis, :]

    # Split into ≤90° pieces, each approximated by one cubic Bézier
    ndivs = max(1, math.ceil(abs(da) / (math.pi / 2.0)))
    hda = da / ndivs / 2.0
    if hda == 0.0:
        return end[np.newaxis, :]
    kappa = abs(4.0 / 3.0 * (1.0 - math.cos(hda)) / math.sin(hda))
    if da < 0.0:
        kappa = -kappa

    pieces: list[NDArray[np.float64]] = []
    prev = prev_tan = None
    for i in range(ndivs + 1):
        a = a1 + da * i / ndivs
        ca = math.cos(a)
        sa_ = math.sin(a)
        pox = ca * rx
        poy = sa_ * ry
        point = np.array([pox * cosrx - poy * sinrx + cx, pox * sinrx + poy * cosrx + cy])
        tx = -sa_ * rx * kappa
        ty = ca * ry * kappa
        tangent = np.array([tx * cosrx - ty * sinrx, tx * sinrx + ty * cosrx])
        if prev is not None:
            pieces.append(cubic_bezier(prev, prev + prev_tan, point - tangent, point, samples))
        prev, prev_tan = point, tangent

    points = np.vstack(pieces)
    points[-1] = end
    return points


def subpath_to_polyline(
    subpath: Subpath,
    last: NDArray[np.float64],
    samples: int,
) -> tuple[Polyline, NDArray[np.float64]]:
    """Walk one subpath's commands starting at ``last``.

    Returns the polyline and the new current point.
    """
    points: list[NDArray[np.float64]] = []

    for cmd in subpath:
        origin = last if cmd.relative else _ORIGIN
        args = np.asarray(cmd.arguments, dtype=np.float64)

        if cmd.kind in (CommandKind.MOVE, CommandKind.LINE):
            p = origin + args
            points.append(p)
            last = p

        elif cmd.kind is CommandKind.CUBIC_CURVE:
            p1, p2, p3 = origin + args.reshape(3, 2)
            points.extend(cubic_bezier(last, p1, p2, p3, samples))
            last = p3

        elif cmd.kind is CommandKind.ARC:
            rx, ry, x_rotation, large_arc, sweep = cmd.arguments[:5]
            p_end = origin + args[5:7]
            points.extend(
                arc_path(last, rx, ry, x_rotation, int(large_arc) != 0, int(sweep) != 0, p_end, samples)
            )
            last = p_end

        elif cmd.kind is CommandKind.CLOSE:
            if points and float(np.linalg.norm(points[-1] - points[0])) > CLOSE_EPSILON:
                points.append(points[0].copy())

        else:
            logger.warning("Unsupported path command '%s', skipped", cmd)

    polyline = np.array(points, dtype=np.float64).reshape(-1, 2)
    return polyline, last


def tessellate(subpaths: list[Subpath], config: PipelineConfig) -> list[Polyline]:
    """One polyline per subpath; the current point carries across subpaths."""
    polylines: list[Polyline] = []
    last = _ORIGIN
    for subpath in subpaths:
        polyline, last = subpath_to_polyline(subpath, last, config.sample_count)
        polylines.append(polyline)
    return polylines
