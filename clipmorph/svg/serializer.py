"""Write CSS clip-path values from normalized point sets."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal

import numpy as np
from numpy.typing import NDArray

from clipmorph.utils.math_helpers import clamp

DEFAULT_SELECTOR = ':host([name="{name}"]) .wrapper'

_HUNDREDTHS = Decimal("0.01")


def _percent(value: float) -> str:
    # Exact ties round up, matching Number.prototype.toFixed
    pct = clamp(value * 100, 0.0, 100.0)
    return f"{Decimal(pct).quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP)}%"


def format_clip_path(points: NDArray[np.float64]) -> str:
    """Render unit-square points as a `polygon()` argument list.

    Coordinates are percentages with two decimals, clamped to [0, 100].
    """
    coords = []
    for x, y in np.asarray(points, dtype=np.float64).reshape(-1, 2).tolist():
        coords.append(f"{_percent(x)} {_percent(y)}")
    return ", ".join(coords)


def polygon(value: str | NDArray[np.float64]) -> str:
    """Wrap a coordinate list (or unit-square points) as a CSS polygon()."""
    if not isinstance(value, str):
        value = format_clip_path(value)
    return f"polygon({value})"


def render_shape_styles(
    table: Mapping[str, str],
    selector_template: str = DEFAULT_SELECTOR,
) -> str:
    """Generate one clip-path rule per named shape.

    `table` maps shape names to coordinate lists; `selector_template` is
    formatted with `name`.
    """
    lines = []
    for name, coords in table.items():
        lines.append(f"{selector_template.format(name=name)} {{")
        lines.append(f"  clip-path: {polygon(coords)};")
        lines.append("}")
    return "\n".join(lines)
