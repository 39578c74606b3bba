"""Stage registry — each pipeline stage is a plain function registered via decorator.

Usage:
    @stage(id="S1.01", layer=Layer.SAMPLING, dependencies=["S0.01"])
    def arc_length_sampling(ctx: MorphContext) -> None:
        for sp in ctx.shapes:
            sp.samples = sample_by_arc_length(...)

The registry is filled at import time and only read afterwards.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from clipmorph.engine.context import MorphContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    PARSING = 0
    SAMPLING = 1
    NORMALIZATION = 2
    ALIGNMENT = 3
    FORMATTING = 4


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: Callable[["MorphContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class StageRegistry:
    """Registry of pipeline stages keyed by id."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    def get(self, stage_id: str) -> StageSpec:
        return self._stages[stage_id]

    def get_layer(self, layer: Layer) -> list[StageSpec]:
        return sorted((s for s in self._stages.values() if s.layer == layer), key=lambda s: s.id)

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[StageSpec]:
        """Topological order over the requested stages plus their dependencies."""
        pool = self._stages
        if requested_ids is not None:
            wanted: set[str] = set()
            stack = list(requested_ids)
            while stack:
                sid = stack.pop()
                if sid in wanted:
                    continue
                wanted.add(sid)
                spec = pool.get(sid)
                if spec:
                    stack.extend(spec.dependencies)
            pool = {k: v for k, v in pool.items() if k in wanted}

        # Kahn's algorithm, ties broken by (layer, id)
        remaining = {sid: sum(1 for dep in spec.dependencies if dep in pool) for sid, spec in pool.items()}
        ready = sorted((pool[sid] for sid, deg in remaining.items() if deg == 0), key=lambda s: (s.layer, s.id))
        ordered: list[StageSpec] = []

        while ready:
            spec = ready.pop(0)
            ordered.append(spec)
            for other in pool.values():
                if spec.id in other.dependencies:
                    remaining[other.id] -= 1
                    if remaining[other.id] == 0:
                        ready.append(other)
                        ready.sort(key=lambda s: (s.layer, s.id))

        if len(ordered) != len(pool):
            missing = set(pool) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: Callable[["MorphContext"], None]):
        _registry.register(
            StageSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
