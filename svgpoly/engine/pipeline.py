"""Pipeline orchestrator — runs transforms in dependency order over a DrawingContext."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from svgpoly.engine.context import DrawingContext
from svgpoly.engine.registry import Layer, TransformRegistry, TransformSpec, get_registry

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1"]


def register_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    for layer_name in _LAYER_PACKAGES:
        package = importlib.import_module(f"svgpoly.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(self, registry: TransformRegistry | None = None) -> None:
        if registry is None:
            register_transforms()
            registry = get_registry()
        self.registry = registry

    def run(self, ctx: DrawingContext) -> DrawingContext:
        """Run every registered transform on the given context."""
        start = time.perf_counter()
        ordered = self.registry.resolve_order()
        logger.info("Pipeline: %d transforms queued", len(ordered))

        for spec in ordered:
            self._run_one(spec, ctx)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.0fms",
            len(ctx.completed_transforms),
            len(ordered),
            total,
        )
        return ctx

    def run_layer(self, ctx: DrawingContext, layer: Layer) -> DrawingContext:
        """Run only transforms in a specific layer."""
        for spec in self.registry.get_layer(layer):
            self._run_one(spec, ctx)
        return ctx

    def _run_one(self, spec: TransformSpec, ctx: DrawingContext) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
            ctx.completed_transforms.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", spec.id, elapsed)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)


def create_pipeline(registry: TransformRegistry | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(registry=registry)
