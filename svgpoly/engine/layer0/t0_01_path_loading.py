"""T0.01 — Path Loading.

Turn every path element handed over by the walker into an SVGPath: parse the
path data, split it into subpaths, expand repeated commands, tessellate, and
apply the element's transform. Elements that fail are recorded by label and
skipped; the rest of the drawing still loads.
"""

from __future__ import annotations

import logging

from svgpoly.engine.context import DrawingContext
from svgpoly.engine.registry import Layer, transform
from svgpoly.svg.loader import load_path

logger = logging.getLogger(__name__)


@transform(
    id="T0.01",
    layer=Layer.PARSING,
    description="Parse and tessellate path elements",
)
def path_loading(ctx: DrawingContext) -> None:
    ctx.paths = []
    ctx.failures = []
    for element in ctx.elements:
        path = load_path(element.attributes, ctx.config)
        if path is None:
            ctx.failures.append(element.label)
            continue
        ctx.paths.append(path)

    logger.info("Loaded %d paths (%d failed)", len(ctx.paths), len(ctx.failures))
