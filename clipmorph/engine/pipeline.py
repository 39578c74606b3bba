"""Pipeline orchestrator — runs stages in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from clipmorph.engine.context import MorphContext
from clipmorph.engine.registry import Layer, StageRegistry, StageSpec, get_registry

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1", "layer2", "layer3", "layer4"]


def load_stages() -> None:
    """Import all stage modules so @stage decorators fire. Safe to repeat."""
    for layer_name in _LAYER_PACKAGES:
        package = importlib.import_module(f"clipmorph.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"clipmorph.engine.{layer_name}.{module_name}")


class Pipeline:
    """Runs the parse → sample → normalize → align → format stages."""

    def __init__(self, registry: StageRegistry | None = None) -> None:
        if registry is None:
            load_stages()
            registry = get_registry()
        self.registry = registry

    def run(self, ctx: MorphContext) -> MorphContext:
        """Run every registered stage on the context."""
        start = time.perf_counter()
        ordered = self.registry.resolve_order()

        for spec in ordered:
            self._run_stage(spec, ctx)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d stages, %d shapes x %d points in %.1fms",
            len(ctx.completed_stages),
            len(ordered),
            ctx.num_shapes,
            ctx.max_points,
            total,
        )
        return ctx

    def run_layer(self, ctx: MorphContext, layer: Layer) -> MorphContext:
        """Run only the stages in a specific layer."""
        for spec in self.registry.get_layer(layer):
            self._run_stage(spec, ctx)
        return ctx

    def _run_stage(self, spec: StageSpec, ctx: MorphContext) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)
            if ctx.config.strict:
                raise
            return
        ctx.completed_stages.add(spec.id)
        logger.debug("  %s completed in %.2fms", spec.id, (time.perf_counter() - t0) * 1000)


def create_pipeline() -> Pipeline:
    """Factory function for a pipeline over the default stage registry."""
    return Pipeline()
