"""Partition quality and agreement metrics.

The benchmark runner lives in :mod:`bisectlab.evaluation.runner`; it depends
on the orchestrator and is therefore not imported here.
"""

from bisectlab.evaluation.metrics import (
    ari_sklearn,
    edge_cut,
    nmi_sklearn,
    normalized_cut,
    partition_balance,
    quality,
    ratio_cut,
)

__all__ = [
    "ari_sklearn",
    "edge_cut",
    "nmi_sklearn",
    "normalized_cut",
    "partition_balance",
    "quality",
    "ratio_cut",
]
