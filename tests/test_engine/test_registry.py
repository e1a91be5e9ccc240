"""Tests for the transform registry."""

import pytest

from svgpoly.engine.context import DrawingContext
from svgpoly.engine.pipeline import register_transforms
from svgpoly.engine.registry import Layer, TransformRegistry, TransformSpec, get_registry


def _noop(ctx: DrawingContext) -> None:
    pass


def test_register_and_get():
    reg = TransformRegistry()
    spec = TransformSpec(id="T0.01", layer=Layer.PARSING, fn=_noop)
    reg.register(spec)
    assert reg.get("T0.01") is spec
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", layer=Layer.PARSING, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(TransformSpec(id="T0.01", layer=Layer.PARSING, fn=_noop))


def test_get_layer():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", layer=Layer.PARSING, fn=_noop))
    reg.register(TransformSpec(id="T1.01", layer=Layer.RECONSTRUCTION, fn=_noop))
    layer0 = reg.get_layer(Layer.PARSING)
    assert [s.id for s in layer0] == ["T0.01"]


def test_resolve_order_with_deps():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T1.01", layer=Layer.RECONSTRUCTION, fn=_noop, dependencies=["T0.02"]))
    reg.register(TransformSpec(id="T0.02", layer=Layer.PARSING, fn=_noop))
    reg.register(TransformSpec(id="T0.01", layer=Layer.PARSING, fn=_noop))
    ids = [s.id for s in reg.resolve_order({"T1.01"})]
    assert ids == ["T0.02", "T1.01"]


def test_resolve_order_detects_cycles():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", layer=Layer.PARSING, fn=_noop, dependencies=["T0.02"]))
    reg.register(TransformSpec(id="T0.02", layer=Layer.PARSING, fn=_noop, dependencies=["T0.01"]))
    with pytest.raises(ValueError, match="Circular"):
        reg.resolve_order()


def test_builtin_transforms_registered():
    register_transforms()
    reg = get_registry()
    assert reg.get("T0.01").layer is Layer.PARSING
    assert reg.get("T1.01").dependencies == ["T0.01"]
    assert [s.id for s in reg.resolve_order()] == ["T0.01", "T1.01"]
