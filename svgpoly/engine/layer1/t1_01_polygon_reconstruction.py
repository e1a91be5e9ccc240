"""T1.01 — Polygon Reconstruction.

Stitch the line segments of every tessellated polyline in the drawing into
maximal chains. A chain whose last point comes back to its first point (within
the tolerance) is a closed polygon; everything else is reported as an open chain.

Segments shorter than the tolerance are dropped. The search for the next
segment is a plain linear scan over the remaining segments.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from svgpoly.engine.context import DrawingContext
from svgpoly.engine.registry import Layer, transform
from svgpoly.models.path import Polyline, SVGPath
from svgpoly.utils.geometry import distance, points_close

logger = logging.getLogger(__name__)

Segment = tuple[NDArray[np.float64], NDArray[np.float64]]


def build_segments(polylines: Iterable[Polyline], tol: float) -> list[Segment]:
    """Consecutive point pairs of every polyline, minus those shorter than ``tol``.

    A dropped pair keeps its start point, so the next kept segment begins where
    the previous kept segment ended.
    """
    segments: list[Segment] = []
    for poly in polylines:
        if len(poly) == 0:
            continue
        start = poly[0]
        for end in poly[1:]:
            length = distance(start, end)
            if length < tol:
                logger.debug("Ignoring short segment (length: %g)", length)
                continue
            segments.append((start, end))
            start = end
    return segments


def _pop_next_point(
    segments: list[Segment], point: NDArray[np.float64], tol: float
) -> NDArray[np.float64] | None:
    """Remove the first segment touching ``point`` and return its far endpoint."""
    for i, (first, second) in enumerate(segments):
        if points_close(point, first, tol):
            del segments[i]
            return second
        if points_close(point, second, tol):
            del segments[i]
            return first
    return None


def _grow(chain: list[NDArray[np.float64]], segments: list[Segment], tol: float) -> bool:
    """Extend the chain from its last point. Returns True once it closes."""
    while True:
        nxt = _pop_next_point(segments, chain[-1], tol)
        if nxt is None:
            return False
        chain.append(nxt)
        if points_close(nxt, chain[0], tol):
            return True


def reconstruct_polygons(
    polylines: Iterable[Polyline], tol: float
) -> tuple[list[Polyline], list[Polyline]]:
    """Stitch polylines into (closed polygons, open chains).

    Closed polygons repeat their first point at the end.
    """
    segments = build_segments(polylines, tol)
    closed: list[Polyline] = []
    open_chains: list[Polyline] = []

    while segments:
        first, second = segments.pop(0)
        chain = [first, second]

        is_closed = _grow(chain, segments, tol)
        if not is_closed:
            # Nothing more at the end: try growing from the seed's start
            chain.reverse()
            is_closed = _grow(chain, segments, tol)
            chain.reverse()

        points = np.array(chain, dtype=np.float64)
        if is_closed:
            closed.append(points)
        else:
            open_chains.append(points)

    if open_chains:
        logger.info(
            "%d line chains are not part of a closed path with a minimum distance of %g between 2 points",
            len(open_chains),
            tol,
        )
    return closed, open_chains


def paths_to_closed_polylines(
    paths: Iterable[SVGPath], tol: float
) -> tuple[list[Polyline], list[Polyline]]:
    """Run the reconstruction over the polylines of every path."""
    return reconstruct_polygons((poly for path in paths for poly in path.polylines), tol)


@transform(
    id="T1.01",
    layer=Layer.RECONSTRUCTION,
    dependencies=["T0.01"],
    description="Stitch path segments into closed polygons and open chains",
)
def polygon_reconstruction(ctx: DrawingContext) -> None:
    closed, open_chains = paths_to_closed_polylines(ctx.paths, ctx.config.tolerance)
    ctx.closed_polylines = closed
    ctx.open_polylines = open_chains
    logger.info("Reconstructed %d closed polygons, %d open chains", len(closed), len(open_chains))
