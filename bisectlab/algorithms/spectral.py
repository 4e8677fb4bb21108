"""Spectral bisection through the Fiedler vector of the graph Laplacian."""
from __future__ import annotations

import warnings

import numpy as np

from bisectlab.errors import DisconnectedSubgraph
from bisectlab.solvers import smallest_eigenpairs
from bisectlab.types import BinarySplit
from bisectlab.utils.graph import component_labels, induced_subgraph, laplacian
from bisectlab.utils.ordering import split_by_order


def canonical_sign(vector, rel_tol=1e-12):
    """Flip ``vector`` so that its first clearly nonzero entry is negative."""
    scale = np.max(np.abs(vector)) if vector.size else 0.0
    nonzero = np.flatnonzero(np.abs(vector) > rel_tol * scale)
    if nonzero.size and vector[nonzero[0]] > 0:
        return -vector
    return vector


def fiedler_vector(A_sub, eig_tol=1e-10, eig_maxiter=None, eig_ncv=None, seed=0):
    """
    Second-smallest Laplacian eigenpair of a connected graph.

    The smallest pair (eigenvalue 0, constant eigenvector) is computed
    alongside it and discarded.

    Returns:
        ``(algebraic_connectivity, fiedler)`` with the sign fixed by
        :func:`canonical_sign`.
    """
    L = laplacian(A_sub)
    evals, evecs = smallest_eigenpairs(L, k=2, tol=eig_tol, maxiter=eig_maxiter, ncv=eig_ncv, seed=seed)
    return float(evals[1]), canonical_sign(evecs[:, 1])


def _fiedler_split(A, subset, n1, perturb=False, null_tol=1e-8, **eig_kwargs):
    if len(subset) <= 2:
        return split_by_order(np.zeros(len(subset)), subset, n1, perturb=perturb, path="trivial")
    A_sub = induced_subgraph(A, subset)
    seed = eig_kwargs.pop("seed", 0) + (1 if perturb else 0)
    connectivity, fiedler = fiedler_vector(A_sub, seed=seed, **eig_kwargs)
    max_degree = float(A_sub.sum(axis=1).max())
    if connectivity < null_tol * max(1.0, max_degree):
        warnings.warn(
            f"Subgraph of {len(subset)} vertices is numerically disconnected "
            f"(lambda_2={connectivity:.3e}); Fiedler ordering may be unreliable.",
            DisconnectedSubgraph,
            stacklevel=3,
        )
    return split_by_order(fiedler, subset, n1, perturb=perturb, path="fiedler")


def _component_split(A, subset, n1, comp, n_components, labels_needed, perturb=False, **kwargs):
    """Split along connected-component boundaries, topping up with a Fiedler cut if needed."""
    n = len(subset)
    sizes = np.bincount(comp, minlength=n_components)
    first = np.full(n_components, n)
    np.minimum.at(first, comp, np.arange(n))
    # largest components first, ties by their smallest vertex
    tie = -first if perturb else first
    order = np.lexsort((tie, -sizes))

    taken = []
    total = 0
    for c in order:
        if total + sizes[c] <= n1:
            taken.append(c)
            total += int(sizes[c])

    need_left, need_right = labels_needed
    if total >= max(1, need_left) and n - total >= max(1, need_right):
        mask = np.isin(comp, taken)
        return BinarySplit(left=subset[mask], right=subset[~mask], path="components")

    # every component left over is larger than the remaining room, so cut the biggest one
    remainder = n1 - total
    straddled = next(c for c in order if c not in taken)
    inner = _fiedler_split(A, subset[comp == straddled], remainder, perturb=perturb, **kwargs)
    left = np.sort(np.concatenate([subset[np.isin(comp, taken)], inner.left]))
    right = np.setdiff1d(subset, left, assume_unique=True)
    return BinarySplit(left=left, right=right, path="components+fiedler")


def spectral_bisect(
    A,
    coords,
    subset,
    n1,
    *,
    labels_needed=(1, 1),
    perturb=False,
    eig_tol=1e-10,
    eig_maxiter=None,
    eig_ncv=None,
    null_tol=1e-8,
    seed=0,
    **kwargs,
) -> BinarySplit:
    """Bisect ``subset`` by sorting its vertices along the Fiedler vector.

    Coordinates are ignored. A disconnected subgraph has a zero eigenvalue of
    multiplicity equal to its number of components, so the Fiedler ordering
    carries no information; it is detected from the component count and split
    along component boundaries instead, issuing :class:`DisconnectedSubgraph`.
    """
    eig_kwargs = dict(eig_tol=eig_tol, eig_maxiter=eig_maxiter, eig_ncv=eig_ncv, seed=seed)
    if len(subset) <= 2:
        return _fiedler_split(A, subset, n1, perturb=perturb)

    n_components, comp = component_labels(induced_subgraph(A, subset))
    if n_components > 1:
        warnings.warn(
            f"Subgraph of {len(subset)} vertices has {n_components} connected components; "
            "splitting along component boundaries.",
            DisconnectedSubgraph,
            stacklevel=2,
        )
        return _component_split(
            A, subset, n1, comp, n_components, labels_needed, perturb=perturb, null_tol=null_tol, **eig_kwargs
        )
    return _fiedler_split(A, subset, n1, perturb=perturb, null_tol=null_tol, **eig_kwargs)
