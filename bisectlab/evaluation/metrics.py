"""Partition quality metrics."""
from __future__ import annotations

from typing import Dict

import numpy as np

from bisectlab.utils.graph import as_adjacency, check_labeling, membership_matrix


def _infer_k(labels: np.ndarray, k: int | None) -> int:
    if k is not None:
        return int(k)
    return int(labels.max()) + 1 if labels.size else 1


def _part_cut_matrix(A, labels: np.ndarray, k: int) -> np.ndarray:
    """Dense ``(k, k)`` matrix of summed edge weights between (and within) parts.

    Off-diagonal entry ``C[i, j]`` is the cut weight between parts ``i`` and
    ``j``; diagonal entries count intra-part edges twice.
    """
    M = membership_matrix(labels, k)
    return np.asarray((M.T @ A @ M).todense())


def _safe_divide(num: np.ndarray, den: np.ndarray) -> np.ndarray:
    out = np.zeros_like(num, dtype=float)
    np.divide(num, den, out=out, where=den > 0)
    return out


def _prepare(graph, labels, k):
    A = as_adjacency(graph)
    labels = np.asarray(labels)
    k = _infer_k(labels, k)
    labels = check_labeling(labels, A.shape[0], k)
    return A, labels, k


def edge_cut(graph, labels, k=None) -> float:
    """Total weight of edges whose endpoints carry different labels."""
    A, labels, k = _prepare(graph, labels, k)
    C = _part_cut_matrix(A, labels, k)
    return float((C.sum() - np.trace(C)) / 2.0)


def ratio_cut(graph, labels, k=None) -> float:
    """Sum over unordered part pairs of ``cut(i, j) / (|i| * |j|)``; empty parts contribute 0."""
    A, labels, k = _prepare(graph, labels, k)
    C = _part_cut_matrix(A, labels, k)
    sizes = np.bincount(labels, minlength=k).astype(float)
    iu, ju = np.triu_indices(k, k=1)
    return float(np.sum(_safe_divide(C[iu, ju], sizes[iu] * sizes[ju])))


def normalized_cut(graph, labels, k=None) -> float:
    """Sum over parts of ``cut(i, rest) / vol(i)``; parts with zero volume contribute 0."""
    A, labels, k = _prepare(graph, labels, k)
    C = _part_cut_matrix(A, labels, k)
    volume = C.sum(axis=1)
    outgoing = volume - np.diag(C)
    return float(np.sum(_safe_divide(outgoing, volume)))


def partition_balance(labels, k=None) -> float:
    """Largest part size over the ideal size ``n / k``; 1.0 is perfectly balanced."""
    labels = np.asarray(labels, dtype=np.int64)
    k = _infer_k(labels, k)
    n = labels.shape[0]
    if n == 0:
        return 1.0
    sizes = np.bincount(labels, minlength=k)
    return float(sizes.max() / (n / k))


def quality(graph, labels, k=None) -> Dict[str, float]:
    """
    All partition quality measures for one labeling.

    Returns:
        Dictionary with ``edge_cut``, ``normalized_cut``, ``ratio_cut`` and
        ``balance``. With a single part every cut is 0 and balance is 1.
    """
    A, labels, k = _prepare(graph, labels, k)
    C = _part_cut_matrix(A, labels, k)
    sizes = np.bincount(labels, minlength=k).astype(float)
    volume = C.sum(axis=1)
    iu, ju = np.triu_indices(k, k=1)
    return {
        "edge_cut": float((C.sum() - np.trace(C)) / 2.0),
        "normalized_cut": float(np.sum(_safe_divide(volume - np.diag(C), volume))),
        "ratio_cut": float(np.sum(_safe_divide(C[iu, ju], sizes[iu] * sizes[ju]))),
        "balance": partition_balance(labels, k),
    }


def nmi_sklearn(labels_a, labels_b) -> float:
    """Normalized mutual information between two labelings via scikit-learn."""
    from sklearn.metrics import normalized_mutual_info_score

    return float(normalized_mutual_info_score(labels_a, labels_b, average_method="arithmetic"))


def ari_sklearn(labels_a, labels_b) -> float:
    """Adjusted Rand index between two labelings via scikit-learn."""
    from sklearn.metrics import adjusted_rand_score

    return float(adjusted_rand_score(labels_a, labels_b))
