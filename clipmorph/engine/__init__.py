"""clipmorph shape-morph engine."""

from clipmorph.engine.config import MorphConfig
from clipmorph.engine.context import MorphContext, ShapeData
from clipmorph.engine.pipeline import Pipeline, load_stages
from clipmorph.engine.registry import Layer, get_registry, stage

__all__ = [
    "stage",
    "Layer",
    "get_registry",
    "load_stages",
    "MorphConfig",
    "MorphContext",
    "ShapeData",
    "Pipeline",
]
