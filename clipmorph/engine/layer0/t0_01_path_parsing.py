"""T0.01 — Path Parsing.

Parse each path's `d` data into typed Line/Quadratic/Cubic segments with
per-segment length estimates. Unsupported commands are recorded on the
parsed shape; strict mode rejects them.
"""

from __future__ import annotations

import logging

from clipmorph.engine.context import MorphContext
from clipmorph.engine.registry import Layer, stage
from clipmorph.svg.parser import parse_path_data

logger = logging.getLogger(__name__)


@stage(
    id="T0.01",
    layer=Layer.PARSING,
    description="Parse path data into typed segments",
)
def path_parsing(ctx: MorphContext) -> None:
    for sp in ctx.shapes:
        sp.shape = parse_path_data(
            sp.d,
            bezier_steps=ctx.config.bezier_steps,
            strict=ctx.config.strict,
        )
        if sp.shape.is_degenerate:
            logger.debug("Shape %d has zero length (%d segments)", sp.index, len(sp.shape.segments))
