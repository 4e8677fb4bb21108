"""Recursive bisection driver."""
from __future__ import annotations

import math

import numpy as np
from tqdm.auto import tqdm

from bisectlab.errors import DegenerateSplit, InsufficientVertices, PartitioningFailed
from bisectlab.types import BinarySplit, BisectionRecord


def label_split(lo, hi):
    """Split the label range ``[lo, hi]`` into ``[lo, mid - 1]`` and ``[mid, hi]``; the left gets the ceiling."""
    return lo + math.ceil((hi - lo + 1) / 2)


def target_sizes(size, lo, mid, hi):
    """Vertex counts ``(n1, n2)`` proportional to the label counts on each side.

    ``n1 = round(size * k1 / k)`` using Python's round-half-to-even. Whenever
    ``size >= k`` this keeps ``n1 >= k1`` and ``size - n1 >= k2``.
    """
    n_labels = hi - lo + 1
    n1 = int(round(size * (mid - lo) / n_labels))
    return n1, size - n1


def _check_split(split: BinarySplit, subset):
    """Raise :class:`DegenerateSplit` unless ``split`` is a cover of ``subset`` with two nonempty halves."""
    n_left, n_right = split.sizes
    if n_left == 0 or n_right == 0:
        raise DegenerateSplit(f"Empty half in split of {len(subset)} vertices ({n_left}, {n_right}).")
    if n_left + n_right != len(subset):
        raise DegenerateSplit(f"Split covers {n_left + n_right} of {len(subset)} vertices.")
    covered = np.union1d(split.left, split.right)
    if not np.array_equal(covered, np.sort(subset)):
        raise DegenerateSplit(f"Split of {len(subset)} vertices does not cover the subset exactly.")


def recursive_bisection(
    A,
    coords,
    k,
    bisector,
    strategy="custom",
    retry_degenerate=True,
    verbose=False,
    **bisector_kwargs,
):
    """
    Recursively bisect all vertices of ``A`` into ``k`` labelled parts.

    Works through an explicit worklist of ``(subset, lo, hi)`` items, each
    meaning "give the vertices in ``subset`` the labels ``lo..hi``". Items
    with a single label are written straight into the output; every other
    item is bisected with sizes proportional to its label counts and both
    halves are pushed back.

    A degenerate split (empty half or lost vertices) is retried once with the
    perturbed tie-break when ``retry_degenerate`` is set, and then reported as
    :class:`PartitioningFailed`.

    Returns:
        ``(labels, records)`` where ``records`` holds one
        :class:`BisectionRecord` per internal node of the partition tree.
    """
    n = A.shape[0]
    labels = np.full(n, -1, dtype=np.int64)
    records = []
    worklist = [(np.arange(n, dtype=np.int64), 0, k - 1)]

    with tqdm(total=k, disable=(verbose == -1 or not verbose), desc=f"{strategy} bisection") as pbar:
        while worklist:
            subset, lo, hi = worklist.pop()
            n_labels = hi - lo + 1
            if len(subset) < n_labels:
                raise InsufficientVertices(len(subset), n_labels)
            if n_labels == 1:
                labels[subset] = lo
                pbar.update(1)
                continue

            mid = label_split(lo, hi)
            n1, n2 = target_sizes(len(subset), lo, mid, hi)
            labels_needed = (mid - lo, hi - mid + 1)

            perturbed = False
            try:
                split = bisector(A, coords, subset, n1, labels_needed=labels_needed, **bisector_kwargs)
                _check_split(split, subset)
            except DegenerateSplit:
                if not retry_degenerate:
                    raise PartitioningFailed(len(subset), strategy)
                perturbed = True
                try:
                    split = bisector(
                        A, coords, subset, n1, labels_needed=labels_needed, perturb=True, **bisector_kwargs
                    )
                    _check_split(split, subset)
                except DegenerateSplit as exc:
                    raise PartitioningFailed(len(subset), strategy) from exc

            records.append(
                BisectionRecord(
                    size=len(subset),
                    labels=(lo, hi),
                    target=(n1, n2),
                    achieved=split.sizes,
                    path=split.path,
                    perturbed=perturbed,
                )
            )
            if verbose and verbose != -1:
                print(
                    f"labels {lo}..{hi}: {len(subset)} -> {split.sizes} "
                    f"(target {(n1, n2)}, path={split.path})"
                )

            # right pushed first so the left subtree is finished first
            worklist.append((split.right, mid, hi))
            worklist.append((split.left, lo, mid - 1))

    return labels, records
