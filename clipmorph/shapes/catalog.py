"""Built-in shape outlines and polygon-table generation.

Outlines use the absolute M/L/H/V/Q/C/Z subset on a 100×100 canvas. Curves
approximate circular arcs with the usual 0.5523 control-point ratio.
"""

from __future__ import annotations

from collections.abc import Mapping

from clipmorph.engine.config import MorphConfig
from clipmorph.morph import generate_clip_paths

BUILTIN_SHAPES: dict[str, str] = {
    "square": "M0 0 L100 0 L100 100 L0 100 Z",
    "diamond": "M50 0 L100 50 L50 100 L0 50 Z",
    "triangle": "M50 0 L100 100 L0 100 Z",
    "pentagon": "M50 0 L97.55 34.55 L79.39 90.45 L20.61 90.45 L2.45 34.55 Z",
    "hexagon": "M100 50 L75 93.3 L25 93.3 L0 50 L25 6.7 L75 6.7 Z",
    "circle": (
        "M50 0 C77.61 0 100 22.39 100 50 C100 77.61 77.61 100 50 100 "
        "C22.39 100 0 77.61 0 50 C0 22.39 22.39 0 50 0 Z"
    ),
    "oval": (
        "M50 15 C77.61 15 100 30.67 100 50 C100 69.33 77.61 85 50 85 "
        "C22.39 85 0 69.33 0 50 C0 30.67 22.39 15 50 15 Z"
    ),
    "pill": (
        "M25 25 H75 C88.81 25 100 36.19 100 50 C100 63.81 88.81 75 75 75 "
        "H25 C11.19 75 0 63.81 0 50 C0 36.19 11.19 25 25 25 Z"
    ),
    "semicircle": "M0 75 C0 47.39 22.39 25 50 25 C77.61 25 100 47.39 100 75 Z",
    "arch": "M0 100 V50 C0 22.39 22.39 0 50 0 C77.61 0 100 22.39 100 50 V100 Z",
    "heart": "M50 95 L10 55 Q-10 30 15 12 Q35 2 50 25 Q65 2 85 12 Q110 30 90 55 Z",
}


def build_polygon_table(
    named_paths: Mapping[str, str] | None = None,
    max_points: int | None = None,
    config: MorphConfig | None = None,
) -> dict[str, str]:
    """Normalize a whole table of named outlines in one call.

    Every entry shares the same point count and is aligned to the first
    entry, so any two values can be used as endpoints of one clip-path
    transition. Defaults to BUILTIN_SHAPES.
    """
    table = dict(BUILTIN_SHAPES if named_paths is None else named_paths)
    if not table:
        return {}
    coords = generate_clip_paths(list(table.values()), max_points, config)
    return dict(zip(table.keys(), coords))
