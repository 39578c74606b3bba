"""Tests for the stage registry."""

import pytest

from clipmorph.engine.context import MorphContext
from clipmorph.engine.pipeline import load_stages
from clipmorph.engine.registry import Layer, StageRegistry, StageSpec, get_registry


def _noop(ctx: MorphContext) -> None:
    pass


def test_register_and_get():
    reg = StageRegistry()
    spec = StageSpec(id="T0.01", layer=Layer.PARSING, fn=_noop)
    reg.register(spec)
    assert reg.get("T0.01") is spec
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = StageRegistry()
    reg.register(StageSpec(id="T0.01", layer=Layer.PARSING, fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(StageSpec(id="T0.01", layer=Layer.PARSING, fn=_noop))


def test_get_layer():
    reg = StageRegistry()
    reg.register(StageSpec(id="T0.01", layer=Layer.PARSING, fn=_noop))
    reg.register(StageSpec(id="T1.01", layer=Layer.SAMPLING, fn=_noop))
    layer0 = reg.get_layer(Layer.PARSING)
    assert [s.id for s in layer0] == ["T0.01"]


def test_resolve_order_with_deps():
    reg = StageRegistry()
    reg.register(StageSpec(id="T3.02", layer=Layer.ALIGNMENT, fn=_noop, dependencies=["T3.01"]))
    reg.register(StageSpec(id="T3.01", layer=Layer.ALIGNMENT, fn=_noop, dependencies=["T0.01"]))
    reg.register(StageSpec(id="T0.01", layer=Layer.PARSING, fn=_noop))
    ids = [s.id for s in reg.resolve_order({"T3.02"})]
    assert ids == ["T0.01", "T3.01", "T3.02"]


def test_resolve_order_subset_excludes_unrelated():
    reg = StageRegistry()
    reg.register(StageSpec(id="T0.01", layer=Layer.PARSING, fn=_noop))
    reg.register(StageSpec(id="T4.01", layer=Layer.FORMATTING, fn=_noop))
    assert [s.id for s in reg.resolve_order({"T0.01"})] == ["T0.01"]


def test_resolve_order_detects_cycles():
    reg = StageRegistry()
    reg.register(StageSpec(id="A", layer=Layer.PARSING, fn=_noop, dependencies=["B"]))
    reg.register(StageSpec(id="B", layer=Layer.PARSING, fn=_noop, dependencies=["A"]))
    with pytest.raises(ValueError, match="Circular"):
        reg.resolve_order()


def test_default_registry_holds_all_stages():
    load_stages()
    load_stages()  # repeat imports must not re-register
    ids = [s.id for s in get_registry().resolve_order()]
    assert ids == ["T0.01", "T1.01", "T2.01", "T3.01", "T3.02", "T4.01"]
