"""One-shot k-way partitioning through METIS (optional ``pymetis`` backend)."""

from __future__ import annotations

import numpy as np

from bisectlab.errors import InvalidArgument
from bisectlab.utils.graph import as_adjacency

METIS_MODES = ("recursive", "kway")


def _import_pymetis():
    try:
        import pymetis
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise ImportError("pymetis is required for the 'metis' strategy. Install bisectlab[metis].") from exc

    return pymetis


def part_metis(graph, k, mode="recursive", seed=None):
    """Partition ``graph`` into ``k`` parts with METIS, bypassing recursive bisection.

    Args:
        graph: Adjacency in any form accepted by :func:`bisectlab.utils.graph.as_adjacency`.
        k: Number of parts.
        mode: ``"recursive"`` for METIS recursive bisection, ``"kway"`` for
            multilevel k-way partitioning.
        seed: Optional METIS random seed.

    Returns:
        Integer label vector of length ``n`` with values in ``[0, k)``.
    """
    if mode not in METIS_MODES:
        raise InvalidArgument(f"Unknown METIS mode '{mode}'; expected one of {METIS_MODES}.")
    A = as_adjacency(graph)
    n = A.shape[0]
    if k < 1 or k > n:
        raise InvalidArgument(f"k must satisfy 1 <= k <= n ({n}), got {k}.")
    if k == 1:
        return np.zeros(n, dtype=np.int64)

    pymetis = _import_pymetis()
    # METIS only takes integer edge weights
    weights = np.maximum(1, np.rint(A.data)).astype(np.int64)
    _, membership = pymetis.part_graph(
        k,
        xadj=A.indptr.astype(np.int64),
        adjncy=A.indices.astype(np.int64),
        eweights=weights,
        recursive=(mode == "recursive"),
        options=None if seed is None else pymetis.Options(seed=int(seed)),
    )
    return np.asarray(membership, dtype=np.int64)
