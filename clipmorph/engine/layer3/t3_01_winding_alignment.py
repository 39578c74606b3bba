"""T3.01 — Winding Alignment.

Reverse any shape whose shoelace sign opposes the reference (shape 0).
The reference itself is never flipped and degenerate candidates are left
as they are. A degenerate reference reverses every candidate with a sign.
"""

from __future__ import annotations

import logging

from clipmorph.engine.context import MorphContext
from clipmorph.engine.registry import Layer, stage
from clipmorph.utils.alignment import match_winding
from clipmorph.utils.geometry import winding_direction

logger = logging.getLogger(__name__)


@stage(
    id="T3.01",
    layer=Layer.ALIGNMENT,
    dependencies=["T2.01"],
    description="Match every shape's winding to the reference",
)
def winding_alignment(ctx: MorphContext) -> None:
    reference = ctx.reference
    if reference is None:
        return
    ctx.reference_winding = reference.winding

    for sp in ctx.shapes[1:]:
        sp.points, sp.reversed = match_winding(ctx.reference_winding, sp.points)
        if sp.reversed:
            sp.winding = winding_direction(sp.points)
            logger.debug("Shape %d reversed to match reference winding", sp.index)
