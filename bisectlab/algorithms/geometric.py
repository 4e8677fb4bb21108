"""Coordinate and inertial bisection of vertex subsets."""
from __future__ import annotations

import numpy as np

from bisectlab.errors import InvalidArgument
from bisectlab.types import BinarySplit
from bisectlab.utils.ordering import split_by_order


def _require_coords(coords, strategy):
    if coords is None:
        raise InvalidArgument(f"The '{strategy}' strategy requires vertex coordinates.")
    return coords


def dominant_axis(points: np.ndarray) -> int:
    """Index of the axis with the largest spread (``max - min``); the first one wins ties."""
    if points.shape[1] == 1:
        return 0
    spread = points.max(axis=0) - points.min(axis=0)
    return int(np.argmax(spread))


def inertial_axis(points: np.ndarray) -> np.ndarray:
    """
    Unit direction of maximum variance of a point cloud.

    The covariance matrix is only ``d x d`` so a dense symmetric
    eigendecomposition is used. The sign is fixed so that the component of
    largest magnitude is positive; an axis-aligned cloud therefore yields the
    corresponding unit basis vector.
    """
    centered = points - points.mean(axis=0)
    cov = centered.T @ centered / max(len(points), 1)
    evals, evecs = np.linalg.eigh(cov)
    axis = evecs[:, np.argmax(evals)]
    if axis[np.argmax(np.abs(axis))] < 0:
        axis = -axis
    return axis


def coordinate_bisect(A, coords, subset, n1, *, labels_needed=(1, 1), perturb=False, **kwargs) -> BinarySplit:
    """Median cut of ``subset`` along its widest coordinate axis.

    Edge weights are ignored; ``A`` is accepted only to share the bisector
    signature.
    """
    points = _require_coords(coords, "coordinate")[subset]
    axis = dominant_axis(points)
    return split_by_order(points[:, axis], subset, n1, perturb=perturb, path=f"axis-{axis}")


def inertial_bisect(A, coords, subset, n1, *, labels_needed=(1, 1), perturb=False, **kwargs) -> BinarySplit:
    """Cut ``subset`` perpendicular to the principal inertial axis of its coordinates."""
    points = _require_coords(coords, "inertial")[subset]
    axis = inertial_axis(points)
    projection = (points - points.mean(axis=0)) @ axis
    return split_by_order(projection, subset, n1, perturb=perturb, path="inertial")
