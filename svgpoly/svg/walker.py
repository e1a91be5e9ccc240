"""Document walk — find path elements in an SVG tree, in document order.

The walk is a plain visitor: a node adapter says what a node is called and what
its children are, and the visit function returns ``Visit.SKIP_CHILDREN`` to
keep the walk out of a subtree. ``defs`` subtrees are skipped, since the paths
they hold are templates rather than drawn geometry.
"""

from __future__ import annotations

import enum
import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, Protocol

from svgpoly.engine.config import PipelineConfig
from svgpoly.engine.context import DrawingContext
from svgpoly.engine.pipeline import Pipeline, create_pipeline
from svgpoly.models.document import PathElement

logger = logging.getLogger(__name__)


class Visit(enum.Enum):
    CONTINUE = "continue"
    SKIP_CHILDREN = "skip_children"


class NodeAdapter(Protocol):
    def name(self, node: Any) -> str: ...

    def children(self, node: Any) -> Iterable[Any]: ...

    def attributes(self, node: Any) -> dict[str, str]: ...


class ElementTreeAdapter:
    """NodeAdapter over xml.etree elements. Names are lower-cased, namespace stripped."""

    def name(self, node: ET.Element) -> str:
        tag = node.tag
        # Comments and processing instructions have a callable tag
        if not isinstance(tag, str):
            return ""
        return tag.rsplit("}", 1)[-1].lower()

    def children(self, node: ET.Element) -> Iterable[ET.Element]:
        return list(node)

    def attributes(self, node: ET.Element) -> dict[str, str]:
        return dict(node.attrib)


def walk(root: Any, visit: Callable[[Any], Visit], adapter: NodeAdapter) -> None:
    """Depth-first, document-order walk from ``root``."""
    if visit(root) is Visit.SKIP_CHILDREN:
        return
    for child in adapter.children(root):
        walk(child, visit, adapter)


def collect_path_elements(root: Any, adapter: NodeAdapter | None = None) -> list[PathElement]:
    adapter = adapter or ElementTreeAdapter()
    elements: list[PathElement] = []

    def visit(node: Any) -> Visit:
        name = adapter.name(node)
        if name == "path":
            elements.append(PathElement(tag=name, attributes=adapter.attributes(node), index=len(elements)))
        if name == "defs":
            return Visit.SKIP_CHILDREN
        return Visit.CONTINUE

    walk(root, visit, adapter)
    return elements


def load_svg(
    svg_text: str,
    config: PipelineConfig | None = None,
    pipeline: Pipeline | None = None,
) -> DrawingContext:
    """Load every path of an SVG document and stitch the drawing's polygons."""
    root = ET.fromstring(svg_text)
    ctx = DrawingContext(config=config or PipelineConfig(), elements=collect_path_elements(root))
    logger.info("Found %d path elements", len(ctx.elements))
    return (pipeline or create_pipeline()).run(ctx)


def load_svg_file(
    filename: str | Path,
    config: PipelineConfig | None = None,
    pipeline: Pipeline | None = None,
) -> DrawingContext:
    return load_svg(Path(filename).read_text(encoding="utf-8"), config, pipeline)
