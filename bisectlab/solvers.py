"""Sparse eigensolver helpers."""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import scipy.sparse as sp
from scipy.sparse.linalg import ArpackError, ArpackNoConvergence, eigsh

from bisectlab.errors import EigenConvergenceFailure

# relative to the largest diagonal entry
SHIFT = 1e-3


def start_vector(n: int, seed: int) -> np.ndarray:
    """Deterministic ARPACK start vector for an ``n``-dimensional problem."""
    rng = np.random.default_rng(seed)
    return rng.uniform(0.5, 1.5, size=n)


def smallest_eigenpairs(
    L: sp.spmatrix,
    k: int = 2,
    tol: float = 1e-10,
    maxiter: Optional[int] = None,
    ncv: Optional[int] = None,
    seed: int = 0,
) -> Tuple[np.ndarray, np.ndarray]:
    """Return the ``k`` algebraically smallest eigenpairs of a sparse symmetric matrix.

    Eigenvalues come back in ascending order with matching eigenvector
    columns. Only the requested pairs are computed (implicitly restarted
    Lanczos through ARPACK); a dense decomposition is never formed.

    ``L`` must be positive semidefinite. ARPACK runs in shift-invert mode
    around a small negative shift, so ``L - sigma * I`` is nonsingular and the
    pairs nearest the bottom of the spectrum converge first.

    Raises:
        EigenConvergenceFailure: ARPACK stopped before ``k`` pairs converged.
    """
    n = L.shape[0]
    if k >= n:
        raise ValueError(f"Need k < n for the sparse eigensolver, got k={k}, n={n}.")
    if ncv is not None:
        ncv = min(max(ncv, k + 1), n)
    scale = float(np.abs(L.diagonal()).max()) if n else 0.0
    sigma = -SHIFT * (scale if scale > 0 else 1.0)
    try:
        evals, evecs = eigsh(
            sp.csc_matrix(L),
            k=k,
            sigma=sigma,
            which="LM",
            tol=tol,
            maxiter=maxiter,
            ncv=ncv,
            v0=start_vector(n, seed),
        )
    except ArpackNoConvergence as exc:
        raise EigenConvergenceFailure(
            f"ARPACK converged {len(exc.eigenvalues)} of {k} eigenpairs for a {n}x{n} Laplacian."
        ) from exc
    except ArpackError as exc:
        raise EigenConvergenceFailure(f"ARPACK failed on a {n}x{n} Laplacian: {exc}") from exc
    order = np.argsort(evals)
    return evals[order], evecs[:, order]
