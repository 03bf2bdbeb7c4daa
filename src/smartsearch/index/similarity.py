"""Cosine similarity between embedding vectors.

Scores are rounded to SCORE_DECIMALS places, half away from zero, using the
shortest decimal representation of the float so the boundary case is exact:
``0.1235 -> 0.124`` and ``-0.0005 -> -0.001``.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import numpy as np

from smartsearch.config.constants import SCORE_DECIMALS

VectorLike = Sequence[float] | np.ndarray[Any, Any]

_QUANTUM = Decimal(1).scaleb(-SCORE_DECIMALS)


def round_score(value: float) -> float:
    """Round to SCORE_DECIMALS places, ties away from zero."""
    rounded = float(Decimal(repr(float(value))).quantize(_QUANTUM, rounding=ROUND_HALF_UP))
    # Normalize -0.0 so equal scores compare and render identically
    return rounded + 0.0


def scaled_vector(vec: VectorLike | None) -> np.ndarray[Any, Any] | None:
    """Float64 copy of vec divided by its largest absolute component.

    Cosine is scale-invariant, so scaling keeps the score unchanged while
    keeping squared components inside float64 range for any finite input.
    Returns None for a missing, empty, all-zero or non-finite vector.
    """
    if vec is None:
        return None
    arr = np.asarray(vec, dtype=np.float64)
    if arr.ndim != 1 or arr.size == 0 or not np.isfinite(arr).all():
        return None
    peak = float(np.max(np.abs(arr)))
    if peak == 0.0:
        return None
    return arr / peak


def cosine_scaled(a: np.ndarray[Any, Any] | None, b: np.ndarray[Any, Any] | None) -> float:
    """Rounded cosine of two vectors already passed through scaled_vector."""
    if a is None or b is None or a.shape != b.shape:
        return 0.0
    raw = float(np.dot(a, b)) / (float(np.linalg.norm(a)) * float(np.linalg.norm(b)))
    return round_score(min(max(raw, -1.0), 1.0))


def cosine_similarity(vec_a: VectorLike | None, vec_b: VectorLike | None) -> float:
    """Cosine similarity of two vectors, rounded to 3 decimal places.

    Returns 0.0 when either vector is None, the lengths differ, or either
    vector is all zeros or holds a non-finite value. Inputs are never modified.
    """
    return cosine_scaled(scaled_vector(vec_a), scaled_vector(vec_b))
