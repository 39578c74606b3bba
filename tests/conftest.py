"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest


# Sample path data in the supported M/L/H/V/Q/C/Z subset

SQUARE_PATH = "M0,0 L10,0 L10,10 L0,10 Z"

# Same square, traced from the opposite corner in the same direction
SQUARE_FROM_OPPOSITE_CORNER = "M10,10 L0,10 L0,0 L10,0 Z"

# Same square, traced the other way round
SQUARE_REVERSED = "M0 0 L0 10 L10 10 L10 0 Z"

QUAD_PATH = "M2 1 L14 3 L12 11 L1 9 Z"

WIDE_RECT_PATH = "M0 0 H40 V10 H0 Z"

CUBIC_PATH = "M0 0 C10 20 30 20 40 0"

QUADRATIC_PATH = "M0 0 Q20 30 40 0"

# Rounded tab shape mixing all supported segment kinds
MIXED_PATH = "M4 0 H20 Q24 0 24 4 V16 C24 22 18 24 12 24 C6 24 0 22 0 16 V4 Q0 0 4 0 Z"

# Arc and relative commands are outside the supported subset
UNSUPPORTED_PATH = "M0 0 L10 0 a5 5 0 0 1 0 10 l-10 0 Z"

DEGENERATE_PATH = "M5 5 Z"


def brute_force_scores(reference: np.ndarray, candidate: np.ndarray) -> list[float]:
    """Total squared distance for every circular shift, fully summed."""
    n = len(reference)
    return [float(np.sum((reference - np.roll(candidate, -k, axis=0)) ** 2)) for k in range(n)]


@pytest.fixture
def square_path() -> str:
    return SQUARE_PATH


@pytest.fixture
def mixed_path() -> str:
    return MIXED_PATH


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)
