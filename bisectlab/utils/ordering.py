"""Deterministic sort-and-cut helper shared by the bisectors."""

from __future__ import annotations

import numpy as np

from bisectlab.types import BinarySplit


def sorted_order(values: np.ndarray, subset: np.ndarray, *, perturb: bool = False) -> np.ndarray:
    """Positions of ``subset`` sorted by ``values``; equal values fall back to vertex index.

    With ``perturb=True`` equal values are ordered by descending vertex index
    instead, which is the alternative tie-break used when a split is retried.
    """
    tie_key = -subset if perturb else subset
    # lexsort treats the last key as primary
    return np.lexsort((tie_key, values))


def split_by_order(
    values: np.ndarray,
    subset: np.ndarray,
    n1: int,
    *,
    perturb: bool = False,
    path: str = "sorted",
) -> BinarySplit:
    """Sort ``subset`` by the scalar ``values`` and cut after the first ``n1`` vertices."""
    values = np.asarray(values, dtype=float)
    order = sorted_order(values, subset, perturb=perturb)
    ordered = subset[order]
    return BinarySplit(left=np.sort(ordered[:n1]), right=np.sort(ordered[n1:]), path=path)
