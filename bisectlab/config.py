"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class PartitionConfig:
    """Configuration container for :class:`bisectlab.orchestrator.RecursiveBisection`.

    The fields mirror keyword arguments accepted by
    :func:`bisectlab.recursion.driver.recursive_bisection`.
    """

    strategy: str = "spectral"
    seed: int = 0
    eig_tol: float = 1e-10
    eig_maxiter: Optional[int] = None
    eig_ncv: Optional[int] = None
    null_tol: float = 1e-8
    retry_degenerate: bool = True
    max_imbalance: Optional[float] = None
    metis_mode: str = "recursive"
    verbosity: int = 0
