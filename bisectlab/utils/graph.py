"""Graph and partition utilities."""

from __future__ import annotations

from typing import List, Tuple

import networkx as nx
import numpy as np
import scipy.sparse as sp
from scipy.sparse.csgraph import connected_components

from bisectlab.errors import InvalidArgument

AdjLike = np.ndarray | sp.spmatrix | sp.sparray | nx.Graph


def as_adjacency(graph: AdjLike, *, symmetry_tol: float = 1e-10) -> sp.csr_matrix:
    """Normalise ``graph`` to a symmetric, nonnegative CSR matrix without self-loops.

    Accepts a dense square array, any ``scipy.sparse`` matrix or array, or an
    undirected ``networkx`` graph (node order as returned by ``G.nodes()``,
    edge weights from the ``weight`` attribute, default 1).
    """
    if isinstance(graph, nx.DiGraph):
        raise InvalidArgument("Directed graphs are not supported.")
    if isinstance(graph, nx.Graph):
        A = nx.to_scipy_sparse_array(graph, weight="weight", dtype=float, format="csr")
    elif sp.issparse(graph):
        A = graph
    elif isinstance(graph, np.ndarray):
        A = graph
    else:
        raise InvalidArgument(f"Unsupported adjacency type: {type(graph).__name__}.")

    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise InvalidArgument(f"Adjacency must be square, got shape {A.shape}.")

    A = sp.csr_matrix(A, dtype=float)
    # self-loops carry no cut information
    A = (A - sp.diags(A.diagonal())).tocsr()
    A.eliminate_zeros()

    if A.nnz and A.data.min() < 0:
        raise InvalidArgument("Edge weights must be nonnegative.")
    if not np.all(np.isfinite(A.data)):
        raise InvalidArgument("Edge weights must be finite.")
    asym = abs(A - A.T)
    if asym.nnz and asym.max() > symmetry_tol * max(1.0, abs(A).max()):
        raise InvalidArgument("Adjacency matrix must be symmetric.")

    A.sort_indices()
    return A


def as_coordinates(coords, n: int) -> np.ndarray:
    """Return ``coords`` as a float ``(n, d)`` array, validating its shape."""
    X = np.asarray(coords, dtype=float)
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    if X.ndim != 2:
        raise InvalidArgument(f"Coordinates must be a 1D or 2D array, got {X.ndim}D.")
    if X.shape[0] != n:
        raise InvalidArgument(f"Coordinates have {X.shape[0]} rows but the graph has {n} vertices.")
    if X.shape[1] == 0:
        raise InvalidArgument("Coordinates must have at least one dimension.")
    if not np.all(np.isfinite(X)):
        raise InvalidArgument("Coordinates must be finite.")
    return X


def induced_subgraph(A: sp.csr_matrix, subset: np.ndarray) -> sp.csr_matrix:
    """Adjacency of the subgraph induced by ``subset`` (local index order = subset order)."""
    return A[subset][:, subset].tocsr()


def laplacian(A: sp.csr_matrix) -> sp.csr_matrix:
    """Combinatorial Laplacian ``L = D - A`` with ``D`` the weighted degrees."""
    degrees = np.asarray(A.sum(axis=1)).ravel()
    return (sp.diags(degrees) - A).tocsr()


def component_labels(A: sp.csr_matrix) -> Tuple[int, np.ndarray]:
    """Number of connected components and a component id per vertex."""
    n_components, labels = connected_components(A, directed=False)
    return int(n_components), labels


def membership_matrix(labels: np.ndarray, k: int) -> sp.csr_matrix:
    """Sparse ``(n, k)`` indicator matrix with ``M[i, labels[i]] = 1``."""
    labels = np.asarray(labels, dtype=np.int64)
    n = labels.shape[0]
    return sp.csr_matrix((np.ones(n), (np.arange(n), labels)), shape=(n, k))


def labels_to_parts(labels: np.ndarray, k: int | None = None) -> List[np.ndarray]:
    """Convert a label vector into a list of vertex index arrays, one per part."""
    labels = np.asarray(labels)
    if k is None:
        k = int(labels.max()) + 1 if labels.size else 0
    return [np.flatnonzero(labels == part) for part in range(k)]


def check_labeling(labels: np.ndarray, n: int, k: int) -> np.ndarray:
    """Validate that ``labels`` assigns every one of ``n`` vertices a label in ``[0, k)``."""
    labels = np.asarray(labels)
    if labels.shape != (n,):
        raise InvalidArgument(f"Labeling must have shape ({n},), got {labels.shape}.")
    if n and (labels.min() < 0 or labels.max() >= k):
        raise InvalidArgument(f"Labels must lie in [0, {k}).")
    return labels.astype(np.int64, copy=False)
