"""DrawingContext — the single mutable state object flowing through all transforms.

Per-path results → DrawingContext.paths (one SVGPath per loaded element)
Cross-path results → DrawingContext.closed_polylines / open_polylines
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shapely.geometry import Polygon

from svgpoly.engine.config import PipelineConfig
from svgpoly.models.document import PathElement
from svgpoly.models.path import Polyline, SVGPath


@dataclass
class DrawingContext:
    """Shared state for one drawing."""

    config: PipelineConfig = field(default_factory=PipelineConfig)
    # Path elements in document order, as handed over by the walker
    elements: list[PathElement] = field(default_factory=list)
    # Successfully loaded paths, in document order
    paths: list[SVGPath] = field(default_factory=list)
    # Labels of elements whose path data could not be loaded
    failures: list[str] = field(default_factory=list)

    # --- Populated by the reconstruction layer ---
    closed_polylines: list[Polyline] = field(default_factory=list)
    open_polylines: list[Polyline] = field(default_factory=list)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_paths(self) -> int:
        return len(self.paths)

    @property
    def polygons(self) -> list[Polygon]:
        """Closed polylines as shapely polygons (fewer than 4 points are skipped)."""
        return [Polygon(p) for p in self.closed_polylines if len(p) >= 4]

    def get_path(self, path_id: str) -> SVGPath | None:
        for path in self.paths:
            if path.id == path_id:
                return path
        return None
