"""Path element attributes → SVGPath.

``load_path`` is the one entry point the document walker uses. Structural
problems with the path data, and arithmetic failures while tessellating it,
abort this path only: they are logged and ``None`` is returned so the walk
can carry on with the next element.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from svgpoly.engine.config import PipelineConfig
from svgpoly.models.path import SVGPath, identity_matrix
from svgpoly.svg.commands import parse_path_data
from svgpoly.svg.errors import PathDataError
from svgpoly.svg.tessellate import tessellate
from svgpoly.svg.transform import apply_transform, parse_transform

logger = logging.getLogger(__name__)


def build_path(
    path_data: str,
    config: PipelineConfig,
    *,
    id: str = "",
    style: str = "",
    transform: str | None = None,
) -> SVGPath:
    """Parse and tessellate one path. Raises PathDataError on structural failure."""
    matrix = parse_transform(transform) if transform is not None else identity_matrix()
    path = SVGPath(id=id, style=style, transform=matrix)
    path.subpaths = parse_path_data(path_data)
    path.polylines = tessellate(path.subpaths, config)

    if path.has_transform:
        path.polylines = [apply_transform(path.transform, poly) for poly in path.polylines]
    return path


def load_path(attributes: Mapping[str, str], config: PipelineConfig | None = None) -> SVGPath | None:
    """Build an SVGPath from one path element's attributes, or None on failure."""
    config = config or PipelineConfig()
    fields: dict[str, str] = {}
    for name, value in attributes.items():
        key = name.lower()
        if key in ("id", "style", "transform", "d"):
            fields[key] = value
        else:
            logger.debug("Ignoring attribute \"%s\" in path", key)

    path_id = fields.get("id", "")
    try:
        return build_path(
            fields.get("d", ""),
            config,
            id=path_id,
            style=fields.get("style", ""),
            transform=fields.get("transform"),
        )
    except (PathDataError, ArithmeticError) as e:
        logger.warning("Skipping path '%s': %s", path_id, e)
        return None
