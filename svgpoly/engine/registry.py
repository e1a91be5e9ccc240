"""Transform registry — drawing stages registered with a decorator.

A stage is a plain function over the DrawingContext:

    @transform(id="T1.01", layer=Layer.RECONSTRUCTION, dependencies=["T0.01"])
    def polygon_reconstruction(ctx: DrawingContext) -> None:
        ...

Stages run in (layer, id) order, with every dependency run before its dependents.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from svgpoly.engine.context import DrawingContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    PARSING = 0
    RECONSTRUCTION = 1


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["DrawingContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""

    @property
    def sort_key(self) -> tuple[int, str]:
        return (int(self.layer), self.id)


class TransformRegistry:
    """Stages by id."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def get(self, transform_id: str) -> TransformSpec:
        return self._transforms[transform_id]

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        return sorted(
            (s for s in self._transforms.values() if s.layer == layer),
            key=lambda s: s.id,
        )

    def all(self) -> list[TransformSpec]:
        return sorted(self._transforms.values(), key=lambda s: s.sort_key)

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[TransformSpec]:
        """Dependency-first order of the requested stages (all stages when None).

        Requested stages pull in their dependencies. Unknown dependency ids are
        ignored. A dependency cycle raises ValueError.
        """
        if requested_ids is None:
            roots = self.all()
        else:
            roots = sorted(
                (self._transforms[tid] for tid in requested_ids if tid in self._transforms),
                key=lambda s: s.sort_key,
            )

        ordered: list[TransformSpec] = []
        done: set[str] = set()
        active: list[str] = []

        def visit(spec: TransformSpec) -> None:
            if spec.id in done:
                return
            if spec.id in active:
                cycle = active[active.index(spec.id):]
                raise ValueError(f"Circular dependency detected among: {set(cycle)}")
            active.append(spec.id)
            deps = [self._transforms[d] for d in spec.dependencies if d in self._transforms]
            for dep in sorted(deps, key=lambda s: s.sort_key):
                visit(dep)
            active.pop()
            done.add(spec.id)
            ordered.append(spec)

        for spec in roots:
            visit(spec)
        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Register the decorated function as a pipeline stage."""

    def decorator(fn: Callable[["DrawingContext"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=list(dependencies or []),
                description=description,
            )
        )
        return fn

    return decorator
