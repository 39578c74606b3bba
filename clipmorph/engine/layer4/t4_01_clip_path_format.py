"""T4.01 — Clip-Path Formatting."""

from __future__ import annotations

from clipmorph.engine.context import MorphContext
from clipmorph.engine.registry import Layer, stage
from clipmorph.svg.serializer import format_clip_path


@stage(
    id="T4.01",
    layer=Layer.FORMATTING,
    dependencies=["T3.02"],
    description="Render aligned points as polygon() coordinate lists",
)
def clip_path_format(ctx: MorphContext) -> None:
    for sp in ctx.shapes:
        sp.clip_path = format_clip_path(sp.points)
