"""Morph configuration — controls parsing strictness and alignment search."""

from __future__ import annotations

from dataclasses import dataclass

from clipmorph.config import Settings, settings


@dataclass
class MorphConfig:
    """Per-call knobs for the morph pipeline."""

    # Chord subdivisions for quadratic/cubic length estimates
    bezier_steps: int = 20
    # Abandon a shift candidate once its partial sum exceeds the best total
    prune_alignment: bool = True
    # Reject unsupported/malformed path data and re-raise stage errors
    strict: bool = False

    @classmethod
    def from_settings(cls, source: Settings | None = None) -> "MorphConfig":
        source = source or settings
        return cls(
            bezier_steps=source.bezier_steps,
            prune_alignment=source.prune_alignment,
            strict=source.strict_paths,
        )
