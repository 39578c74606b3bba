"""Arc-length sampling — evenly spaced points along a parsed path."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from clipmorph.svg.segments import Segment


def sample_by_arc_length(
    segments: Sequence[Segment],
    total_length: float,
    n: int,
) -> NDArray[np.float64]:
    """Return up to n points spaced evenly by cumulative arc length.

    The first point is the path start and the last is the path end. Float
    overrun at the end can stop the walk one point short; see pad_samples.
    A zero-length path collapses to n copies of its start point, and an
    empty segment list yields an empty (0, 2) array.
    """
    if n < 2:
        raise ValueError(f"n must be >= 2, got {n}")
    if not segments:
        return np.empty((0, 2))
    if total_length <= 0:
        return np.tile(np.asarray(segments[0].point(0.0), dtype=np.float64), (n, 1))

    step = total_length / (n - 1)
    out = np.empty((n, 2))
    count = 0
    distance_so_far = 0.0
    seg_index = 0

    for i in range(n):
        target = i * step
        while seg_index < len(segments) and distance_so_far + segments[seg_index].length < target:
            distance_so_far += segments[seg_index].length
            seg_index += 1
        if seg_index >= len(segments):
            break

        seg = segments[seg_index]
        local_t = (target - distance_so_far) / seg.length if seg.length > 0 else 0.0
        out[count] = seg.point(local_t)
        count += 1

    return out[:count]


def pad_samples(
    points: NDArray[np.float64],
    n: int,
    fill: tuple[float, float] | None = None,
) -> NDArray[np.float64]:
    """Extend points to n rows with `fill` (default: the final point).

    Empty input stays empty.
    """
    if len(points) == 0 or len(points) >= n:
        return points
    last = points[-1] if fill is None else np.asarray(fill, dtype=np.float64)
    tail = np.tile(last, (n - len(points), 1))
    return np.vstack([points, tail])
