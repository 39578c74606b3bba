"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula over the closed polygon (last vertex joins the first).

    Positive = CCW in a y-up frame, which is CW on screen where y grows down.
    """
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return float(0.5 * np.sum(x * y_next - x_next * y))


def winding_direction(points: NDArray[np.float64]) -> int:
    """Return 1 for positive area, -1 for negative, 0 if degenerate."""
    sa = signed_area(points)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def normalize_to_unit_square(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Fit points into [0, 1]², preserving aspect ratio.

    The longer bbox side becomes 1 and the shorter side is centered. A
    single-point set has scale 0, so scale falls back to 1 and every point
    lands on (0.5, 0.5).
    """
    if len(points) == 0:
        return np.empty((0, 2))

    xmin, ymin, xmax, ymax = bbox(points)
    width = xmax - xmin
    height = ymax - ymin
    scale = max(width, height) or 1.0

    scaled = (points - np.array([xmin, ymin])) / scale
    offset = np.array([(1 - width / scale) / 2, (1 - height / scale) / 2])
    return scaled + offset


def total_squared_distance(a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
    """Sum of squared point-to-point distances between equal-length sets."""
    return float(np.sum((a - b) ** 2))
