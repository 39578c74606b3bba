"""T1.01 — Arc-Length Sampling.

Resample every parsed path to exactly `max_points` points spaced evenly by
arc length. A walk that stops one point short through float overrun is
padded with the path end point so all shapes share one cardinality.
"""

from __future__ import annotations

from clipmorph.engine.context import MorphContext
from clipmorph.engine.registry import Layer, stage
from clipmorph.svg.sampler import pad_samples, sample_by_arc_length


@stage(
    id="T1.01",
    layer=Layer.SAMPLING,
    dependencies=["T0.01"],
    description="Sample max_points evenly spaced by arc length",
)
def arc_length_sampling(ctx: MorphContext) -> None:
    for sp in ctx.shapes:
        if sp.shape is None:
            continue
        segments = sp.shape.segments
        samples = sample_by_arc_length(segments, sp.shape.total_length, ctx.max_points)
        end = segments[-1].end_point if segments else None
        sp.samples = pad_samples(samples, ctx.max_points, fill=end)
