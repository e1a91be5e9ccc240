"""Command-line entry point: load an SVG drawing and report its paths and polygons."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv
from shapely.ops import unary_union

from svgpoly.config import settings
from svgpoly.engine.config import PipelineConfig
from svgpoly.engine.context import DrawingContext
from svgpoly.models.path import Polyline
from svgpoly.models.responses import ChainSummary, DrawingSummary, PathSummary
from svgpoly.svg.walker import load_svg_file
from svgpoly.utils.geometry import bbox, signed_area

load_dotenv()


def _configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.svgpoly_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def build_summary(ctx: DrawingContext, source: str = "") -> DrawingSummary:
    summary = DrawingSummary(
        source=source,
        samples=ctx.config.sample_count,
        tolerance=ctx.config.tolerance,
        failures=list(ctx.failures),
        errors=dict(ctx.errors),
    )

    for path in ctx.paths:
        points = [p for p in path.polylines if len(p)]
        box = _merged_bbox(points)
        summary.paths.append(
            PathSummary(
                id=path.id,
                subpaths=len(path.subpaths),
                points=path.point_count,
                bbox=box,
                transformed=path.has_transform,
            )
        )

    for chain in ctx.closed_polylines:
        summary.chains.append(ChainSummary(points=len(chain), closed=True, signed_area=signed_area(chain)))
    for chain in ctx.open_polylines:
        summary.chains.append(ChainSummary(points=len(chain), closed=False))

    polygons = [p if p.is_valid else p.buffer(0) for p in ctx.polygons]
    if polygons:
        summary.closed_area = float(unary_union(polygons).area)
    return summary


def _merged_bbox(polylines: list[Polyline]) -> tuple[float, float, float, float]:
    if not polylines:
        return (0.0, 0.0, 0.0, 0.0)
    boxes = [bbox(p) for p in polylines]
    return (
        min(b[0] for b in boxes),
        min(b[1] for b in boxes),
        max(b[2] for b in boxes),
        max(b[3] for b in boxes),
    )


def _print_summary(summary: DrawingSummary) -> None:
    print(f"[{os.path.basename(summary.source)}]")
    print(f"  Paths: {len(summary.paths)} loaded, {len(summary.failures)} failed")
    for path in summary.paths:
        xmin, ymin, xmax, ymax = path.bbox
        print(
            f"    {path.id or '-'}: {path.subpaths} subpaths, {path.points} points, "
            f"x=[{xmin:.2f}, {xmax:.2f}] y=[{ymin:.2f}, {ymax:.2f}]"
        )
    for label in summary.failures:
        print(f"    {label}: FAILED")
    print(f"  Closed polygons: {summary.closed_count}  (area {summary.closed_area:.2f})")
    print(f"  Open chains: {summary.open_count}")
    for tid, error in summary.errors.items():
        print(f"  {tid} error: {error}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="svgpoly — SVG paths to polylines and closed polygons")
    parser.add_argument("input", help="SVG file")
    parser.add_argument(
        "-s", "--samples", type=int, default=settings.svgpoly_samples, help="Points per Bézier segment"
    )
    parser.add_argument(
        "-t", "--tolerance", type=float, default=settings.svgpoly_tolerance, help="Stitching tolerance"
    )
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    args = parser.parse_args(argv)

    _configure_logging()

    if not os.path.exists(args.input):
        print(f"File not found: {args.input}")
        return 1

    config = PipelineConfig(samples=args.samples, tolerance=args.tolerance)
    ctx = load_svg_file(args.input, config)
    summary = build_summary(ctx, args.input)

    if args.json:
        print(summary.model_dump_json(indent=2))
    else:
        _print_summary(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
