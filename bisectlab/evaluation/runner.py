"""Benchmark runner comparing partitioning strategies on one graph."""

from __future__ import annotations

import time

import numpy as np

from bisectlab.algorithms import GEOMETRIC_STRATEGIES
from bisectlab.evaluation.metrics import ari_sklearn, nmi_sklearn, quality
from bisectlab.orchestrator import partition
from bisectlab.utils.graph import as_adjacency, labels_to_parts

DEFAULT_METHODS = ["coordinate", "inertial", "spectral"]


def _metis_available():
    try:
        import pymetis  # noqa: F401
    except ImportError:
        return False
    return True


def run_benchmark(graph, coords=None, k=2, methods=None, reference="spectral", repeat=1, config=None):
    """Run each partitioning method on ``graph`` and collect quality measures.

    Args:
        graph: Adjacency of the graph to partition.
        coords: Vertex coordinates; geometric methods are skipped without them.
        k: Number of parts.
        methods: Strategies to run. Defaults to coordinate, inertial and
            spectral, plus metis when ``pymetis`` is importable.
        reference: Method whose labeling the others are compared against
            (NMI/ARI). Ignored if it is not among ``methods``.
        repeat: Number of timed runs per method; the mean wall time is reported.
        config: Optional :class:`bisectlab.config.PartitionConfig`.

    Returns:
        Dictionary mapping method names to ``{"edge_cut", "normalized_cut",
        "ratio_cut", "balance", "time", "part_sizes"}`` and, when a reference is available,
        ``"NMI"`` and ``"ARI"``.
    """
    A = as_adjacency(graph)
    if methods is None:
        methods = list(DEFAULT_METHODS)
        if _metis_available():
            methods.append("metis")

    labelings = {}
    results = {}
    for method in methods:
        if method in GEOMETRIC_STRATEGIES and coords is None:
            continue
        runs = []
        for _ in range(repeat):
            start = time.time()
            labels = partition(A, coords, k, strategy=method, config=config)
            end = time.time()
            runs.append(end - start)
        labelings[method] = labels
        results[method] = quality(A, labels, k)
        results[method]["time"] = float(np.mean(runs))
        results[method]["part_sizes"] = [len(part) for part in labels_to_parts(labels, k)]

    if reference in labelings:
        for method, labels in labelings.items():
            results[method]["NMI"] = nmi_sklearn(labelings[reference], labels)
            results[method]["ARI"] = ari_sklearn(labelings[reference], labels)
    return results
