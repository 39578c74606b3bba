"""Entry points — turn path data into aligned clip-path polygons."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from clipmorph.config import settings
from clipmorph.engine.config import MorphConfig
from clipmorph.engine.context import MorphContext
from clipmorph.engine.pipeline import create_pipeline

logger = logging.getLogger(__name__)


def run_morph(
    paths: Sequence[str],
    max_points: int | None = None,
    config: MorphConfig | None = None,
) -> MorphContext:
    """Run the full pipeline and return the context with every intermediate.

    All paths that will morph into one another must go through the same call
    with the same `max_points`; shape 0 is the alignment reference. When
    `max_points` is omitted the configured default is used.
    """
    if max_points is None:
        max_points = settings.default_max_points
    if max_points < 2:
        raise ValueError(f"max_points must be >= 2, got {max_points}")

    ctx = MorphContext.from_paths(list(paths), max_points, config or MorphConfig.from_settings())
    create_pipeline().run(ctx)
    if ctx.errors:
        logger.warning("Morph finished with stage errors: %s", ", ".join(sorted(ctx.errors)))
    return ctx


def generate_clip_paths(
    paths: Sequence[str],
    max_points: int | None = None,
    config: MorphConfig | None = None,
) -> list[str]:
    """Normalized, aligned `polygon()` argument lists, one per path, in order."""
    return run_morph(paths, max_points, config).clip_paths()
