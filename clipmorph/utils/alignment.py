"""Shape alignment — winding correction and circular-shift correspondence.

Leaf helpers for the T3.01 and T3.02 stages. The reference shape (index 0)
is never modified. Every other shape is reversed if its winding disagrees
with the reference, then rotated so that index i lands as close as possible
to reference[i]. This is a local heuristic: one reflection test per shape,
then the best rotation.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from clipmorph.utils.geometry import winding_direction


def rotate_points(points: NDArray[np.float64], k: int) -> NDArray[np.float64]:
    """New index i holds old index (i + k) mod n."""
    if len(points) == 0:
        return points
    return np.roll(points, -k, axis=0)


def match_winding(reference_sign: int, points: NDArray[np.float64]) -> tuple[NDArray[np.float64], bool]:
    """Reverse points if their nonzero winding differs from reference_sign.

    A degenerate candidate (sign 0) is never reversed; a degenerate reference
    reverses every candidate with a nonzero sign. Returns (points, reversed).
    """
    sign = winding_direction(points)
    if sign != 0 and sign != reference_sign:
        return points[::-1].copy(), True
    return points, False


def best_circular_shift(
    reference: NDArray[np.float64],
    candidate: NDArray[np.float64],
    prune: bool = True,
) -> int:
    """Shift k minimizing Σ ||reference[i] - candidate[(i+k) mod n]||².

    Shifts are tried in increasing order and the first minimum wins. With
    `prune`, a shift is abandoned once its partial sum reaches the best total.
    """
    n = len(reference)
    if n == 0 or len(candidate) != n:
        return 0

    if not prune:
        scores = [float(np.sum((reference - np.roll(candidate, -k, axis=0)) ** 2)) for k in range(n)]
        return int(np.argmin(scores))

    ref = reference.tolist()
    cand = candidate.tolist()
    best_k = 0
    best_score = float("inf")
    for k in range(n):
        score = 0.0
        for i in range(n):
            sx, sy = cand[(i + k) % n]
            tx, ty = ref[i]
            dx = sx - tx
            dy = sy - ty
            score += dx * dx + dy * dy
            if score >= best_score:
                break
        if score < best_score:
            best_score = score
            best_k = k
    return best_k
