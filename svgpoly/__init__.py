"""svgpoly — SVG path data to polylines and closed polygons."""

from svgpoly.engine.config import PipelineConfig
from svgpoly.engine.layer1.t1_01_polygon_reconstruction import paths_to_closed_polylines, reconstruct_polygons
from svgpoly.models.path import SVGPath
from svgpoly.svg.loader import load_path
from svgpoly.svg.walker import load_svg, load_svg_file

__version__ = "0.1.0"

__all__ = [
    "PipelineConfig",
    "SVGPath",
    "load_path",
    "load_svg",
    "load_svg_file",
    "paths_to_closed_polylines",
    "reconstruct_polygons",
]
