"""bisectlab: Balanced recursive bisection of weighted undirected graphs."""

from bisectlab.algorithms import coordinate_bisect, inertial_bisect, part_metis, spectral_bisect
from bisectlab.config import PartitionConfig
from bisectlab.errors import (
    DisconnectedSubgraph,
    EigenConvergenceFailure,
    InsufficientVertices,
    InvalidArgument,
    PartitioningFailed,
)
from bisectlab.evaluation.metrics import quality
from bisectlab.orchestrator import RecursiveBisection, partition, run_partition
from bisectlab.types import BinarySplit, BisectionRecord, PartitionResult


def run_benchmark(*args, **kwargs):
    """Compare partitioning strategies using :mod:`bisectlab.evaluation.runner`.

    This lazy import keeps the runner and its optional backends out of
    import-time paths for users who only need ``partition``.
    """
    from bisectlab.evaluation.runner import run_benchmark as _run_benchmark

    return _run_benchmark(*args, **kwargs)


__all__ = [
    "BinarySplit",
    "BisectionRecord",
    "DisconnectedSubgraph",
    "EigenConvergenceFailure",
    "InsufficientVertices",
    "InvalidArgument",
    "PartitionConfig",
    "PartitionResult",
    "PartitioningFailed",
    "RecursiveBisection",
    "coordinate_bisect",
    "inertial_bisect",
    "part_metis",
    "partition",
    "quality",
    "run_benchmark",
    "run_partition",
    "spectral_bisect",
]
