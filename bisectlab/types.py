"""Core types and protocols for bisectlab."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Tuple

import numpy as np
import scipy.sparse as sp


class BisectorFn(Protocol):
    """Protocol shared by every bisection strategy.

    ``subset`` holds global vertex indices, ``n1`` the requested size of the
    left half. ``A`` is the full adjacency matrix; bisectors extract the
    induced subgraph themselves when they need edges.
    """

    def __call__(
        self,
        A: sp.csr_matrix,
        coords: Optional[np.ndarray],
        subset: np.ndarray,
        n1: int,
        *,
        labels_needed: Tuple[int, int] = (1, 1),
        perturb: bool = False,
        **kwargs: Any,
    ) -> "BinarySplit": ...


@dataclass
class BinarySplit:
    """Two disjoint halves of a vertex subset, in global indices."""

    left: np.ndarray
    right: np.ndarray
    path: str = "sorted"

    @property
    def sizes(self) -> Tuple[int, int]:
        return len(self.left), len(self.right)


@dataclass
class BisectionRecord:
    """Structured record for one internal node of the partition tree."""

    size: int
    labels: Tuple[int, int]
    target: Tuple[int, int]
    achieved: Tuple[int, int]
    path: str
    perturbed: bool = False


@dataclass
class PartitionResult:
    """Container for a full partition run and summary metadata."""

    labels: np.ndarray
    records: List[BisectionRecord] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
