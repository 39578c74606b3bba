"""MorphContext — the single mutable state object flowing through all stages.

Per-shape results → ShapeData
Cross-shape results → MorphContext.* (reference winding)
A context lives for one generate_clip_paths call and is never shared.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from clipmorph.engine.config import MorphConfig
from clipmorph.svg.segments import PathShape


@dataclass
class ShapeData:
    """Data for one input path as it moves through the pipeline."""

    index: int
    # Source path data
    d: str = ""
    # Parsed segments (PathParser)
    shape: PathShape | None = None
    # Arc-length samples in path coordinates: Nx2
    samples: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    # Unit-square points, aligned once Layer 3 has run: Nx2
    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    # Winding sign after alignment: 1, -1 or 0 (degenerate)
    winding: int = 0
    # Whether the point order was reversed to match the reference winding
    reversed: bool = False
    # Circular shift applied against the reference
    shift: int = 0
    # CSS polygon() argument list
    clip_path: str = ""

    @property
    def point_count(self) -> int:
        return len(self.points)


@dataclass
class MorphContext:
    """Shared state flowing through the entire pipeline."""

    paths: list[str] = field(default_factory=list)
    max_points: int = 64
    config: MorphConfig = field(default_factory=MorphConfig)
    shapes: list[ShapeData] = field(default_factory=list)
    # Winding sign of shapes[0] after normalization
    reference_winding: int = 0

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_paths(
        cls,
        paths: list[str],
        max_points: int,
        config: MorphConfig | None = None,
    ) -> "MorphContext":
        ctx = cls(paths=list(paths), max_points=max_points, config=config or MorphConfig())
        ctx.shapes = [ShapeData(index=i, d=d) for i, d in enumerate(ctx.paths)]
        return ctx

    @property
    def num_shapes(self) -> int:
        return len(self.shapes)

    @property
    def reference(self) -> ShapeData | None:
        return self.shapes[0] if self.shapes else None

    def clip_paths(self) -> list[str]:
        return [sp.clip_path for sp in self.shapes]
