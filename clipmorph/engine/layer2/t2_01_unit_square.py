"""T2.01 — Bounding-Box Normalization.

Scale each sample set so its longer side spans [0, 1] and center the
shorter side, then record its winding sign.
"""

from __future__ import annotations

from clipmorph.engine.context import MorphContext
from clipmorph.engine.registry import Layer, stage
from clipmorph.utils.geometry import normalize_to_unit_square, winding_direction


@stage(
    id="T2.01",
    layer=Layer.NORMALIZATION,
    dependencies=["T1.01"],
    description="Fit samples into the unit square, preserving aspect ratio",
)
def unit_square_normalization(ctx: MorphContext) -> None:
    for sp in ctx.shapes:
        sp.points = normalize_to_unit_square(sp.samples)
        sp.winding = winding_direction(sp.points)
