"""T3.02 — Circular-Shift Alignment.

Rotate each shape's point order so index i sits as close as possible to
reference[i], minimizing total squared displacement during a morph.
"""

from __future__ import annotations

from clipmorph.engine.context import MorphContext
from clipmorph.engine.registry import Layer, stage
from clipmorph.utils.alignment import best_circular_shift, rotate_points


@stage(
    id="T3.02",
    layer=Layer.ALIGNMENT,
    dependencies=["T3.01"],
    description="Pick the point rotation closest to the reference",
)
def shift_alignment(ctx: MorphContext) -> None:
    reference = ctx.reference
    if reference is None:
        return

    for sp in ctx.shapes[1:]:
        if sp.point_count == 0 or sp.point_count != reference.point_count:
            continue
        sp.shift = best_circular_shift(reference.points, sp.points, prune=ctx.config.prune_alignment)
        sp.points = rotate_points(sp.points, sp.shift)
